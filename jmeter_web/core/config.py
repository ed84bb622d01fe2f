import os
from typing import Any, Dict

from dotenv import load_dotenv

load_dotenv()


class Settings:
    """애플리케이션 설정

    환경변수(.env 포함)에서 값을 읽고, 생성자 키워드 인자로 개별 항목을 덮어쓸 수 있습니다.
    """

    def __init__(self, **overrides: Any):
        # JMeter 실행 설정
        self.JMETER_BINARY: str = os.getenv("JMETER_BINARY", "jmeter")  # PATH 에서 탐색
        self.TEST_PLAN_EXTENSION: str = os.getenv("TEST_PLAN_EXTENSION", ".jmx")
        self.RESULT_EXTENSION: str = os.getenv("RESULT_EXTENSION", ".jtl")

        # 파일 시스템 경로
        self.TEST_PLAN_DIR: str = os.getenv("TEST_PLAN_DIR", "jmeter")
        self.RESULTS_DIR: str = os.getenv("RESULTS_DIR", os.path.join("jmeter", "results"))
        self.REPORTS_DIR: str = os.getenv("REPORTS_DIR", os.path.join("jmeter", "reports"))
        self.TEMPLATE_PATH: str = os.getenv("TEMPLATE_PATH", os.path.join("templates", "index.html"))

        # 리포트 목록 필터 (빈 문자열이면 전체 목록)
        self.REPORT_NAME_PREFIX: str = os.getenv("REPORT_NAME_PREFIX", "jmeter_test_plan_")

        # 실행 ID 타임스탬프 기준 시간대
        self.TIMEZONE: str = os.getenv("TIMEZONE", "Asia/Seoul")

        # 동시 실행 / 작업 기록 설정
        self.MAX_CONCURRENT_RUNS: int = int(os.getenv("MAX_CONCURRENT_RUNS", "4"))
        self.MAX_JOB_HISTORY: int = int(os.getenv("MAX_JOB_HISTORY", "100"))
        self.SSE_POLL_INTERVAL: float = float(os.getenv("SSE_POLL_INTERVAL", "1.0"))

        # 서버 설정
        self.HOST: str = os.getenv("HOST", "0.0.0.0")
        self.PORT: int = int(os.getenv("PORT", "8080"))

        # 로깅 설정
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

        for key, value in overrides.items():
            if not hasattr(self, key):
                raise TypeError(f"Unknown setting: {key}")
            setattr(self, key, value)

        if self.MAX_CONCURRENT_RUNS < 1:
            raise ValueError("MAX_CONCURRENT_RUNS must be at least 1")
        if self.MAX_JOB_HISTORY < 0:
            raise ValueError("MAX_JOB_HISTORY must not be negative")

    def get_path_config(self) -> Dict[str, str]:
        """경로 설정을 딕셔너리로 반환"""
        return {
            "test_plan_dir": self.TEST_PLAN_DIR,
            "results_dir": self.RESULTS_DIR,
            "reports_dir": self.REPORTS_DIR,
            "template_path": self.TEMPLATE_PATH,
        }

    def get_runner_config(self) -> Dict[str, Any]:
        """실행기 설정을 딕셔너리로 반환"""
        return {
            "jmeter_binary": self.JMETER_BINARY,
            "max_concurrent_runs": self.MAX_CONCURRENT_RUNS,
            "max_job_history": self.MAX_JOB_HISTORY,
            "timezone": self.TIMEZONE,
        }


settings = Settings()
