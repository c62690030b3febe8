"""로그 레코드 모델 - 우선순위 열거형과 불변 로그 레코드"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class Priority(Enum):
    """로그 우선순위 (값은 logcat 한 글자 코드)"""
    VERBOSE = "V"
    DEBUG = "D"
    INFO = "I"
    WARNING = "W"
    ERROR = "E"
    FATAL = "F"

    @property
    def code(self) -> str:
        return self.value

    @classmethod
    def from_code(cls, code: str) -> Optional["Priority"]:
        """
        한 글자 코드로 우선순위 조회

        Args:
            code: 'V', 'D', 'I', 'W', 'E', 'F' 중 하나

        Returns:
            Priority 또는 None (알 수 없는 코드)
        """
        try:
            return cls(code)
        except ValueError:
            return None


# 화면 표시 순서 (Verbose -> Fatal)
ALL_PRIORITY_CODES: Tuple[str, ...] = tuple(p.code for p in Priority)


@dataclass(frozen=True)
class LogRecord:
    """
    로그 레코드 (불변)

    레코드 소스(파일/디바이스 리더)가 생성한 뒤에는 읽기 전용.
    priority가 ALL_PRIORITY_CODES에 없으면 어떤 우선순위 선택에도 매칭되지 않음.
    """
    timestamp: str
    priority: str
    tag: str
    pid: int
    message: str

    @property
    def priority_level(self) -> Optional[Priority]:
        return Priority.from_code(self.priority)
