"""데모용 샘플 로그 레코드"""
from typing import List

from .record import LogRecord

SAMPLE_RECORDS: List[LogRecord] = [
    LogRecord("2026-01-21 12:00:01.123", "I", "System", 1234, "Application started"),
    LogRecord("2026-01-21 12:00:01.456", "D", "ActivityManager", 1234, "Activity resumed"),
    LogRecord("2026-01-21 12:00:02.789", "W", "NetworkManager", 2345, "Connection timeout"),
    LogRecord("2026-01-21 12:00:03.012", "E", "DatabaseHelper", 1234, "Failed to open database"),
    LogRecord("2026-01-21 12:00:03.345", "V", "LocationService", 3456, "Location update received"),
    LogRecord("2026-01-21 12:00:04.567", "I", "NetworkManager", 2345, "Connection established"),
    LogRecord("2026-01-21 12:00:05.890", "D", "DatabaseHelper", 1234, "Database query executed"),
    LogRecord("2026-01-21 12:00:06.123", "W", "System", 1234, "Low memory warning"),
]


def sample_records() -> List[LogRecord]:
    """샘플 레코드 복사본 (호출자가 수정해도 원본 유지)"""
    return list(SAMPLE_RECORDS)
