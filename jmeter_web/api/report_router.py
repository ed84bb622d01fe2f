import logging
from typing import List

from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError
from starlette.requests import ClientDisconnect

from jmeter_web.common.exception.api_exception import ApiException
from jmeter_web.common.response.code import FailureCode, SuccessCode
from jmeter_web.common.response.response_template import ResponseTemplate
from jmeter_web.core.config import Settings
from jmeter_web.dependencies import get_settings
from jmeter_web.schemas.report.report_request import ReportRequest
from jmeter_web.services.report_service import list_reports, notify_report

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post(
    path="/generate-report",
    summary="리포트 URL 조회 API",
    description="""
    실행 ID(testId)로 리포트 URL 을 반환합니다.

    리포트는 `/run-test` 실행 시 jmeter 가 이미 생성하므로 별도의 생성 작업은 하지 않으며,
    리포트 존재 여부도 확인하지 않습니다.

    - 본문이 JSON 이 아니면 400 `Invalid JSON`
    - testId 가 비어 있으면 400 `TestId is required`
    """,
)
async def generate_report(request: Request, settings: Settings = Depends(get_settings)):
    logger.info("Received generate report request")

    try:
        body = await request.body()
    except ClientDisconnect as e:
        logger.error(f"Error reading request body: {e}")
        raise ApiException(FailureCode.BODY_READ_FAILED)
    logger.info(f"Received request body: {body.decode('utf-8', errors='replace')}")

    try:
        report_request = ReportRequest.model_validate_json(body)
    except ValidationError as e:
        logger.error(f"Error decoding JSON: {e}")
        raise ApiException(FailureCode.INVALID_JSON)

    response = notify_report(settings, report_request.test_id)
    return ResponseTemplate.of(SuccessCode.REPORT_GENERATED, response)


@router.get(
    path="/list-reports",
    summary="리포트 목록 조회 API",
    description="리포트 디렉터리에서 REPORT_NAME_PREFIX 로 시작하는 리포트 디렉터리 이름 목록을 반환합니다.",
    response_model=List[str],
)
async def get_reports(settings: Settings = Depends(get_settings)):
    return list_reports(settings)
