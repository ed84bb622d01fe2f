from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class TestStatus(str, Enum):
    """실행 1건의 상태 (received -> pending -> completed | error)"""
    __test__ = False

    PENDING = "pending"
    COMPLETED = "completed"
    ERROR = "error"

    @property
    def is_terminal(self) -> bool:
        return self is not TestStatus.PENDING


class TestResponse(BaseModel):
    __test__ = False

    model_config = ConfigDict(populate_by_name=True)

    message: str = ""
    success: bool = False
    test_id: str = Field("", alias="testId")                   # 할당 전에는 빈 문자열
    report_url: Optional[str] = Field(None, alias="reportUrl")  # /reports/<testId>/index.html
    status: TestStatus = TestStatus.ERROR

    def to_wire(self) -> Dict[str, Any]:
        """camelCase 키, reportUrl 은 값이 있을 때만 포함"""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json_line(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True) + "\n"
