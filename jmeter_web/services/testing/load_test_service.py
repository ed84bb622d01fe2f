import asyncio
import logging
from datetime import datetime
from typing import AsyncIterator, Callable, Optional

import pytz

from jmeter_cli import JMeterExecutor, build_jmeter_command, resolve_run_paths
from jmeter_web.common.response.code import SuccessCode
from jmeter_web.core.config import Settings
from jmeter_web.schemas.load_test.load_test_request import TestConfig
from jmeter_web.schemas.load_test.load_test_response import TestResponse, TestStatus
from jmeter_web.services.testing.job_registry import Job, JobRegistry

logger = logging.getLogger(__name__)

TEST_ID_TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"


def generate_test_id(test_plan: str, extension: str, now: datetime) -> str:
    """<플랜 이름(확장자 제외)>_<YYYYmmdd_HHMMSS> 형태의 실행 ID 생성 (초 단위)"""
    base_name = test_plan[:-len(extension)] if extension and test_plan.endswith(extension) else test_plan
    return f"{base_name}_{now.strftime(TEST_ID_TIMESTAMP_FORMAT)}"


def build_report_url(test_id: str) -> str:
    return f"/reports/{test_id}/index.html"


class LoadTestService:
    """
    JMeter 부하테스트 실행 서비스

    1. 실행 ID 생성 및 JobRegistry 등록 (pending)
    2. 별도 task 에서 jmeter 실행 (동시 실행 수는 semaphore 로 제한)
    3. 실행 결과(completed | error)를 JobRegistry 에 반영
    """

    def __init__(
            self,
            settings: Settings,
            executor: JMeterExecutor,
            registry: JobRegistry,
            clock: Optional[Callable[[], datetime]] = None,
    ):
        self.settings = settings
        self.executor = executor
        self.registry = registry
        self.timezone = pytz.timezone(settings.TIMEZONE)
        self._clock = clock or (lambda: datetime.now(self.timezone))
        self._semaphore = asyncio.Semaphore(settings.MAX_CONCURRENT_RUNS)

    def build_command(self, config: TestConfig, test_id: str) -> list:
        paths = resolve_run_paths(
            test_plan_dir=self.settings.TEST_PLAN_DIR,
            results_dir=self.settings.RESULTS_DIR,
            reports_dir=self.settings.REPORTS_DIR,
            test_plan=config.test_plan,
            test_id=test_id,
            result_extension=self.settings.RESULT_EXTENSION,
        )
        return build_jmeter_command(
            jmeter_binary=self.settings.JMETER_BINARY,
            test_plan_path=paths["test_plan_path"],
            result_path=paths["result_path"],
            report_path=paths["report_path"],
            properties={
                "threads": config.threads,
                "rampup": config.ramp_up,
                "duration": config.duration,
                "target": config.target_host,
            },
        )

    def start(self, config: TestConfig) -> Job:
        """
        실행을 등록하고 백그라운드 task 로 시작

        Returns:
            Job: 이 실행의 Job 객체 (submitted 는 testId 가 포함된 pending 응답, task 는 실행 task)

        Raises:
            ApiException: 같은 실행 ID 가 아직 pending 인 경우 (TEST_RUN_CONFLICT)
        """
        now = self._clock()
        test_id = generate_test_id(config.test_plan, self.settings.TEST_PLAN_EXTENSION, now)

        pending = TestResponse(
            success=True,
            message=SuccessCode.TEST_STARTED.message(),
            test_id=test_id,
            status=TestStatus.PENDING,
        )
        job = self.registry.register(test_id, config, pending, created_at=now)

        # 클라이언트 연결이 끊겨도 실행은 계속되도록 요청과 분리된 task 에서 실행
        job.task = asyncio.create_task(self._run(job), name=f"jmeter-{test_id}")
        return job

    async def stream(self, job: Job) -> AsyncIterator[str]:
        """접수 시점의 pending 응답을 먼저 보내고, 이 Job 의 task 가 끝나면 최종 응답을 보내는 NDJSON 스트림"""
        yield job.submitted.to_json_line()

        final = await asyncio.shield(job.task)
        yield final.to_json_line()

    async def _run(self, job: Job) -> TestResponse:
        test_id, config = job.test_id, job.config
        command = self.build_command(config, test_id)

        async with self._semaphore:
            logger.info(f"Starting JMeter test {test_id} (threads={config.threads}, "
                        f"rampup={config.ramp_up}, duration={config.duration}, target={config.target_host})")
            try:
                result = await self.executor.execute(command)
            except Exception as e:
                logger.error(f"Unexpected error while running JMeter test {test_id}: {e}", exc_info=True)
                response = TestResponse(
                    success=False,
                    message=f"Error running JMeter test: {e}\n",
                    test_id=test_id,
                    status=TestStatus.ERROR,
                )
                self.registry.complete(job, response)
                return response

        if result.succeeded:
            response = TestResponse(
                success=True,
                message=f"{SuccessCode.TEST_COMPLETED.message()}. Config: {config.describe()}",
                test_id=test_id,
                report_url=build_report_url(test_id),
                status=TestStatus.COMPLETED,
            )
        else:
            response = TestResponse(
                success=False,
                message=f"Error running JMeter test: {result.failure_reason()}\n{result.output}",
                test_id=test_id,
                status=TestStatus.ERROR,
            )

        self.registry.complete(job, response)
        return response
