import logging

from fastapi import APIRouter, Depends, Path

from jmeter_web.common.response.code import SuccessCode
from jmeter_web.common.response.response_template import ResponseTemplate
from jmeter_web.dependencies import get_job_registry, get_load_test_service, read_test_config
from jmeter_web.schemas.load_test.load_test_request import TestConfig
from jmeter_web.services.testing.job_registry import JobRegistry
from jmeter_web.services.testing.load_test_service import LoadTestService

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post(
    path="",
    summary="부하테스트 제출 API",
    description="""
    `/run-test` 와 같은 요청 본문으로 테스트를 제출하고, 실행 완료를 기다리지 않고 즉시 202 를 반환합니다.

    반환된 **testId** 로 `/jobs/{testId}` 를 폴링하거나 `/sse/jobs/{testId}` 로 상태를 구독합니다.
    """,
    status_code=202,
)
async def submit_job(
        config: TestConfig = Depends(read_test_config),
        load_test_service: LoadTestService = Depends(get_load_test_service),
):
    job = load_test_service.start(config)
    logger.info(f"Job submitted: {job.test_id}")
    return ResponseTemplate.of(SuccessCode.TEST_SUBMITTED, job.submitted.model_copy(
        update={"message": SuccessCode.TEST_SUBMITTED.message()}
    ))


@router.get(
    path="",
    summary="실행 목록 조회 API",
    description="이 프로세스가 시작된 이후 실행된 테스트의 현재 상태를 최근 순으로 반환합니다. (재시작 시 초기화)",
)
async def list_jobs(registry: JobRegistry = Depends(get_job_registry)):
    return [response.to_wire() for response in registry.list_responses()]


@router.get(
    path="/{test_id}",
    summary="실행 상태 조회 API",
    description="실행 ID 의 현재 상태(pending | completed | error)를 반환합니다. 알 수 없는 ID 는 404 를 반환합니다.",
)
async def get_job(
        test_id: str = Path(..., description="run-test / jobs 응답의 testId"),
        registry: JobRegistry = Depends(get_job_registry),
):
    return registry.get(test_id).to_wire()
