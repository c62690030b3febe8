"""
Core 모듈
UI와 무관한 로그 레코드 모델 및 필터 엔진
"""
from .record import Priority, LogRecord, ALL_PRIORITY_CODES
from .filter_spec import FilterSpec
from .filter_engine import filter_records, matches, compute_filtered_indices

__all__ = [
    'Priority', 'LogRecord', 'ALL_PRIORITY_CODES',
    'FilterSpec',
    'filter_records', 'matches', 'compute_filtered_indices',
]
