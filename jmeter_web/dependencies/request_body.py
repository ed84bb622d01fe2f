from fastapi import Request
from pydantic import ValidationError

from jmeter_web.common.exception.api_exception import InvalidTestConfigException
from jmeter_web.schemas.load_test.load_test_request import TestConfig


def _format_validation_error(error: ValidationError) -> str:
    messages = []
    for item in error.errors():
        location = ".".join(str(part) for part in item.get("loc", ()))
        messages.append(f"{location}: {item['msg']}" if location else item["msg"])
    return "; ".join(messages)


async def read_test_config(request: Request) -> TestConfig:
    """
    요청 본문을 TestConfig 로 디코딩

    FastAPI 기본 422 응답 대신 TestResponse(status=error) 로 응답하기 위해 직접 검증합니다.
    """
    body = await request.body()
    try:
        return TestConfig.model_validate_json(body)
    except ValidationError as e:
        raise InvalidTestConfigException(_format_validation_error(e))
