from .request_body import read_test_config
from .services import get_job_registry, get_load_test_service, get_settings

# app.state 기반 인스턴스 주입 패키지
__all__ = [
    "read_test_config",
    "get_settings",
    "get_job_registry",
    "get_load_test_service",
]
