from pydantic import BaseModel, ConfigDict, Field


class ReportRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    test_id: str = Field("", alias="testId")
