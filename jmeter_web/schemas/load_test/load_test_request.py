import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

# scheme(선택) + 호스트명/IPv4 + 포트(선택) + 경로(선택), 공백 불가
# 대괄호 IPv6 리터럴과 밑줄 포함 호스트명은 받지 않음
TARGET_HOST_PATTERN = re.compile(
    r"^(https?://)?"
    r"[A-Za-z0-9](?:[A-Za-z0-9.-]*[A-Za-z0-9])?"
    r"(?::\d{1,5})?"
    r"(?:/\S*)?$"
)


class TestConfig(BaseModel):
    """부하테스트 실행 요청

    숫자 필드는 JSON 숫자와 숫자 문자열("10") 모두 허용합니다.
    """
    __test__ = False

    model_config = ConfigDict(populate_by_name=True)

    test_plan: str = Field(..., alias="testPlan")             # jmeter 디렉터리 내 .jmx 파일명
    threads: int = Field(..., ge=1)                           # 가상 사용자 수
    ramp_up: int = Field(..., alias="rampUp", ge=0)           # 초
    duration: int = Field(..., ge=0)                          # 초
    target_host: str = Field(..., alias="targetHost")

    @field_validator("test_plan")
    @classmethod
    def validate_test_plan(cls, value: str) -> str:
        if not value:
            raise ValueError("testPlan must not be empty")
        if "/" in value or "\\" in value or value in (".", ".."):
            raise ValueError("testPlan must be a plain file name without path separators")
        return value

    @field_validator("target_host")
    @classmethod
    def validate_target_host(cls, value: str) -> str:
        if not TARGET_HOST_PATTERN.match(value):
            raise ValueError(f"targetHost is not a valid host: {value!r}")
        return value

    def describe(self) -> str:
        """응답 메시지에 포함할 설정 요약"""
        fields = self.model_dump(by_alias=True)
        return "{" + " ".join(f"{key}:{value}" for key, value in fields.items()) + "}"
