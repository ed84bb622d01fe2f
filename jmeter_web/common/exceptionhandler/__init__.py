from jmeter_web.common.exceptionhandler.exception_handler import register_exception_handler

__all__ = ["register_exception_handler"]
