from enum import Enum


class BaseCode(Enum):
    """(메시지, HTTP 상태코드) 튜플을 값으로 갖는 응답 코드"""

    def message(self) -> str:
        return self.value[0]

    def status_code(self) -> int:
        return self.value[1]

    def is_client_error(self) -> bool:
        return 400 <= self.status_code() < 500
