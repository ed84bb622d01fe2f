from fastapi import FastAPI, Request
import logging
import traceback

from jmeter_web.common.exception.api_exception import ApiException, InvalidTestConfigException
from jmeter_web.common.response.code import FailureCode
from jmeter_web.common.response.response_template import ResponseTemplate
from jmeter_web.schemas.load_test.load_test_response import TestResponse, TestStatus

logger = logging.getLogger(__name__)


def register_exception_handler(app: FastAPI):
    # 실행 요청 본문 오류는 TestResponse 형태로 응답 (subprocess 는 실행되지 않음)
    @app.exception_handler(InvalidTestConfigException)
    async def invalid_test_config_handler(request: Request, exc: InvalidTestConfigException):
        logger.warning(f"Rejected test config on {request.url.path}: {exc.detail}")
        return ResponseTemplate.of(
            exc.code,
            TestResponse(success=False, message=exc.message, status=TestStatus.ERROR),
        )

    # 사용자 정의 예외(ApiException) 처리
    @app.exception_handler(ApiException)
    async def api_exception_handler(request: Request, exc: ApiException):
        if exc.code.is_client_error():
            logger.warning(f"ApiException on {request.url.path}: {exc.code.name} - {exc.message}")
        else:
            # 서버측 오류는 stack trace 포함
            logger.error(f"ApiException on {request.url.path}: {exc.code.name} - {exc.message}", exc_info=True)
        return ResponseTemplate.fail(
            code=exc.code,
            custom_message=exc.message,
        )

    # 예상치 못한 모든 예외 처리
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        tb_str = ''.join(traceback.format_exception(type(exc), exc, exc.__traceback__))
        logger.error(f"Unhandled exception occurred: {exc}\nStack trace:\n{tb_str}")
        return ResponseTemplate.fail(
            FailureCode.INTERNAL_SERVER_ERROR,
        )
