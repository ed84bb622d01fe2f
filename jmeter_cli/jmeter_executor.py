"""
JMeter 명령어 실행을 위한 유틸리티 클래스
non-GUI 모드로 jmeter 를 실행하고 종료코드와 출력(stdout+stderr)을 수집
"""
import asyncio
import logging
from dataclasses import dataclass
from typing import List, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandResult:
    """
    명령어 실행 결과

    Attributes:
        returncode: 프로세스 종료코드 (실행 자체가 실패하면 None)
        output: stdout 과 stderr 를 합친 출력
        error: 실행 실패 사유 (프로세스를 띄우지 못한 경우)
    """
    returncode: Optional[int]
    output: str = ""
    error: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.error is None and self.returncode == 0

    def failure_reason(self) -> str:
        if self.error is not None:
            return self.error
        return f"exit status {self.returncode}"


class JMeterExecutor:
    """JMeter 프로세스 실행기"""

    async def execute(self, command: List[str]) -> CommandResult:
        """
        명령어를 비동기로 실행하고 종료될 때까지 대기

        timeout 이나 취소 없이 프로세스가 끝날 때까지 기다립니다.

        Args:
            command: 실행할 명령어 리스트 (shell 을 거치지 않음)

        Returns:
            CommandResult: 실행 결과 (returncode, output, error)
        """
        logger.info(f"실행할 JMeter 명령어: {' '.join(command)}")

        try:
            process = await asyncio.create_subprocess_exec(
                *command,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.STDOUT,  # combined output
            )
        except OSError as e:
            # 바이너리를 찾을 수 없거나 실행 권한이 없는 경우
            logger.error(f"JMeter 프로세스 실행 실패: {e}")
            return CommandResult(returncode=None, error=str(e))

        stdout, _ = await process.communicate()
        output = stdout.decode("utf-8", errors="replace") if stdout else ""

        if process.returncode == 0:
            logger.info("JMeter 실행 완료: returncode=0")
        else:
            logger.error(f"JMeter 실행 실패: returncode={process.returncode}")

        return CommandResult(returncode=process.returncode, output=output)
