from jmeter_web.common.response.code.base_code import BaseCode
from jmeter_web.common.response.code.failure_code import FailureCode
from jmeter_web.common.response.code.success_code import SuccessCode

__all__ = [
    'FailureCode',
    'SuccessCode',
    'BaseCode',
]
