import time
from typing import List, Optional

import pytest
from fastapi.testclient import TestClient

from jmeter_cli import CommandResult
from jmeter_web.core.config import Settings
from jmeter_web.main import create_app


class FakeExecutor:
    """jmeter 대신 실행 명령만 기록하고 지정된 결과를 반환"""

    def __init__(self, returncode: Optional[int] = 0, output: str = "", error: Optional[str] = None):
        self.returncode = returncode
        self.output = output
        self.error = error
        self.commands: List[List[str]] = []

    async def execute(self, command: List[str]) -> CommandResult:
        self.commands.append(list(command))
        return CommandResult(returncode=self.returncode, output=self.output, error=self.error)


@pytest.fixture
def workspace(tmp_path):
    plan_dir = tmp_path / "jmeter"
    plan_dir.mkdir()
    (plan_dir / "load.jmx").write_text("<jmeterTestPlan/>")

    template_dir = tmp_path / "templates"
    template_dir.mkdir()
    (template_dir / "index.html").write_text("<html><title>JMeter Web Runner</title></html>")
    return tmp_path


@pytest.fixture
def settings(workspace):
    return Settings(
        JMETER_BINARY="jmeter",
        TEST_PLAN_DIR=str(workspace / "jmeter"),
        RESULTS_DIR=str(workspace / "jmeter" / "results"),
        REPORTS_DIR=str(workspace / "jmeter" / "reports"),
        TEMPLATE_PATH=str(workspace / "templates" / "index.html"),
        REPORT_NAME_PREFIX="",
        TIMEZONE="UTC",
        SSE_POLL_INTERVAL=0.01,
    )


@pytest.fixture
def executor():
    return FakeExecutor()


@pytest.fixture
def client(settings, executor):
    with TestClient(create_app(settings, executor=executor)) as test_client:
        yield test_client


@pytest.fixture
def wait_for_job(client):
    """job 이 pending 을 벗어날 때까지 폴링"""
    def _wait(test_id: str, attempts: int = 100) -> dict:
        body = {}
        for _ in range(attempts):
            body = client.get(f"/jobs/{test_id}").json()
            if body["status"] != "pending":
                return body
            time.sleep(0.02)
        return body
    return _wait
