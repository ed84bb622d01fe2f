from typing import Optional

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, PlainTextResponse

from jmeter_web.common.response.code import BaseCode
from jmeter_web.schemas.load_test.load_test_response import TestResponse


class ResponseTemplate:
    """TestResponse(JSON) 와 평문 오류 응답을 일관된 형태로 생성"""

    @classmethod
    def of(cls, code: BaseCode, test_response: TestResponse):
        # success 여부와 관계없이 TestResponse 본문 + 코드의 상태코드
        return JSONResponse(
            content=jsonable_encoder(test_response.to_wire()),
            status_code=code.status_code(),
        )

    @classmethod
    def fail(cls, code: BaseCode, custom_message: Optional[str] = None):
        # 요청/리소스 오류는 JSON 이 아닌 평문 본문으로 응답
        message = custom_message or code.message()
        return PlainTextResponse(content=message, status_code=code.status_code())
