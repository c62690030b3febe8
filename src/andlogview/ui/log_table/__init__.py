"""
LogTable 모듈
로그 테이블 UI 및 관련 컴포넌트

QTableView + QAbstractTableModel 기반 테이블
- 필터 스펙이 바뀔 때마다 필터 엔진으로 재계산
- 검색창 / 접이식 필터 패널 / 상태 표시
"""
from .log_table import LogTable
from .log_model import LogTableModel
from .filter_panel import FilterPanel

__all__ = ['LogTable', 'LogTableModel', 'FilterPanel']
