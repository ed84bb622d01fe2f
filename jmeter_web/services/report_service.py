import glob
import logging
import os
from typing import List

from jmeter_web.common.exception.api_exception import ApiException
from jmeter_web.common.response.code import FailureCode, SuccessCode
from jmeter_web.core.config import Settings
from jmeter_web.schemas.load_test.load_test_response import TestResponse, TestStatus
from jmeter_web.services.testing.load_test_service import build_report_url

logger = logging.getLogger(__name__)


def list_reports(settings: Settings) -> List[str]:
    """
    리포트 디렉터리 바로 아래 항목 중 REPORT_NAME_PREFIX 로 시작하는 이름 목록 반환

    Raises:
        ApiException: glob 실패 시 (REPORT_LIST_FAILED)
    """
    pattern = os.path.join(glob.escape(settings.REPORTS_DIR), "*")
    try:
        reports = sorted(glob.glob(pattern))
    except (OSError, ValueError) as e:
        logger.error(f"Failed to glob reports with pattern {pattern}: {e}")
        raise ApiException(FailureCode.REPORT_LIST_FAILED)

    prefix = settings.REPORT_NAME_PREFIX
    return [
        os.path.basename(report) for report in reports
        if os.path.basename(report).startswith(prefix)
    ]


def notify_report(settings: Settings, test_id: str) -> TestResponse:
    """
    이미 생성된 리포트의 URL 을 반환 (존재 여부는 확인하지 않음)

    리포트는 jmeter 실행 시 -e -o 옵션으로 생성되므로 여기서는 경로만 계산합니다.
    """
    if not test_id:
        raise ApiException(FailureCode.TEST_ID_REQUIRED)

    report_path = os.path.join(settings.REPORTS_DIR, test_id)
    logger.info(f"Generating report at: {report_path}")

    return TestResponse(
        success=True,
        message=SuccessCode.REPORT_GENERATED.message(),
        test_id=test_id,
        report_url=build_report_url(test_id),
        status=TestStatus.COMPLETED,
    )
