from fastapi import Request

from jmeter_web.core.config import Settings
from jmeter_web.services.testing.job_registry import JobRegistry
from jmeter_web.services.testing.load_test_service import LoadTestService


# create_app() 에서 app.state 에 등록한 인스턴스를 요청 단위로 주입
def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_job_registry(request: Request) -> JobRegistry:
    return request.app.state.job_registry


def get_load_test_service(request: Request) -> LoadTestService:
    return request.app.state.load_test_service
