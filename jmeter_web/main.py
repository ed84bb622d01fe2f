import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from jmeter_cli import JMeterExecutor
from jmeter_web.api import api_router
from jmeter_web.common.exceptionhandler import register_exception_handler
from jmeter_web.core.config import Settings, settings as default_settings
from jmeter_web.services.testing.job_registry import JobRegistry
from jmeter_web.services.testing.load_test_service import LoadTestService
from jmeter_web.sse import sse_router
from jmeter_web.utils.file_system import FileSystem

# 로깅 설정
logging.basicConfig(
    level=getattr(logging, default_settings.LOG_LEVEL.upper()),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 라이프사이클 관리"""
    # 시작 시 실행
    app_settings: Settings = app.state.settings
    logger.info("Starting JMeter Web Runner...")
    logger.info(f"Path config: {app_settings.get_path_config()}")
    logger.info(f"Runner config: {app_settings.get_runner_config()}")

    if not FileSystem.directory_exists(app_settings.TEST_PLAN_DIR):
        logger.warning(f"Test plan directory does not exist: {app_settings.TEST_PLAN_DIR}")

    # jmeter 가 결과/리포트를 쓸 디렉터리 준비
    for directory in (app_settings.RESULTS_DIR, app_settings.REPORTS_DIR):
        if FileSystem.ensure_directory_exists(directory):
            logger.info(f"Directory ready: {directory}")

    if app_settings.REPORT_NAME_PREFIX:
        # 실행 ID 는 <플랜 이름>_<타임스탬프> 이므로 다른 플랜의 리포트는 목록에서 제외됨
        logger.warning(
            f"/list-reports only lists reports starting with '{app_settings.REPORT_NAME_PREFIX}'. "
            f"Set REPORT_NAME_PREFIX to an empty string to list every report."
        )

    yield

    # 종료 시 실행
    pending = app.state.job_registry.pending_count()
    if pending:
        logger.warning(f"Shutting down with {pending} test run(s) still pending")
    logger.info("Shutting down JMeter Web Runner...")


def create_app(app_settings: Optional[Settings] = None, executor: Optional[JMeterExecutor] = None) -> FastAPI:
    app_settings = app_settings or default_settings

    app = FastAPI(
        title="JMeter Web Runner",
        description="JMeter 테스트 플랜을 실행하고 HTML 리포트를 제공하는 API 입니다.",
        version="1.0.0",
        docs_url="/api/swagger",
        lifespan=lifespan
    )

    job_registry = JobRegistry(max_history=app_settings.MAX_JOB_HISTORY)
    app.state.settings = app_settings
    app.state.job_registry = job_registry
    app.state.load_test_service = LoadTestService(
        settings=app_settings,
        executor=executor or JMeterExecutor(),
        registry=job_registry,
    )

    app.include_router(api_router)
    app.include_router(sse_router)

    # 리포트 정적 파일 (디렉터리 요청 시 index.html)
    app.mount(
        "/reports",
        StaticFiles(directory=app_settings.REPORTS_DIR, html=True, check_dir=False),
        name="reports",
    )

    register_exception_handler(app)
    return app


app = create_app()
