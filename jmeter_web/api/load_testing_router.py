import logging

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse

from jmeter_web.dependencies import get_load_test_service, read_test_config
from jmeter_web.schemas.load_test.load_test_request import TestConfig
from jmeter_web.services.testing.load_test_service import LoadTestService

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post(
    path="/run-test",
    summary="JMeter 부하테스트 실행 API",
    description="""
    테스트 플랜과 부하 조건을 입력받아 jmeter 를 non-GUI 모드로 실행하고, 종료 후 HTML 리포트 URL 을 반환합니다.

    ## 📝 요청 파라미터
    - **testPlan**: 테스트 플랜 파일명 (string) - 예: "load.jmx", 경로 구분자 불가
    - **threads**: 가상 사용자 수 (int ≥ 1, 숫자 문자열 허용)
    - **rampUp**: ramp-up 시간 (int ≥ 0, 초)
    - **duration**: 테스트 지속시간 (int ≥ 0, 초)
    - **targetHost**: 부하 대상 호스트 (string) - 예: "example.com", "http://example.com:8080"
      (호스트명 또는 IPv4 주소만 허용, 대괄호 IPv6 리터럴 "[::1]" 과 밑줄이 포함된 호스트명은 400)

    ## 📤 응답값 (application/x-ndjson, 2줄)
    1. `{"status": "pending", "success": true, "testId": "..."}` - 실행 시작 즉시 전송
    2. `{"status": "completed", "reportUrl": "/reports/<testId>/index.html", ...}` 또는 `{"status": "error", ...}`

    ## 🔍 주의사항
    - 요청 본문이 잘못된 경우 400 과 함께 `status=error` 응답 한 줄만 반환하며 jmeter 는 실행되지 않습니다
    - 연결이 끊겨도 실행은 계속되며 `/jobs/{testId}` 로 결과를 조회할 수 있습니다
    """,
)
async def run_jmeter_test(
        config: TestConfig = Depends(read_test_config),
        load_test_service: LoadTestService = Depends(get_load_test_service),
):
    job = load_test_service.start(config)
    logger.info(f"Test {job.test_id} accepted, streaming result")

    return StreamingResponse(
        load_test_service.stream(job),
        media_type="application/x-ndjson",
    )
