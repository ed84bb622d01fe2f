from typing import Optional

from jmeter_web.common.response.code.base_code import BaseCode
from jmeter_web.common.response.code.failure_code import FailureCode


class ApiException(Exception):
    """FailureCode 를 담아 exception handler 에서 평문 응답으로 변환되는 예외"""

    def __init__(self, code: BaseCode, message: Optional[str] = None):
        self.code = code
        self.message = message or code.message()
        super().__init__(self.message)


class InvalidTestConfigException(ApiException):
    """실행 요청 본문 디코딩/검증 실패 - 평문이 아닌 TestResponse(JSON) 로 응답"""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(
            FailureCode.INVALID_REQUEST_BODY,
            f"{FailureCode.INVALID_REQUEST_BODY.message()}: {detail}",
        )
