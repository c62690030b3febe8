"""
로그 테이블 모델 (QAbstractTableModel 기반)

전체 레코드는 내부 리스트로 보관하고, 필터 엔진이 계산한 인덱스만 유지.
뷰가 요청한 셀만 데이터를 반환한다.
"""
import logging
from typing import Any, Dict, List, Optional, Sequence

from PyQt6.QtCore import QAbstractTableModel, QModelIndex, Qt
from PyQt6.QtGui import QColor, QFont

from andlogview.core.filter_engine import compute_filtered_indices
from andlogview.core.filter_spec import FilterSpec
from andlogview.core.record import LogRecord

logger = logging.getLogger(__name__)

# 우선순위별 텍스트 색상
PRIORITY_COLORS: Dict[str, str] = {
    'V': '#808080',  # Verbose - Gray
    'D': '#0000FF',  # Debug - Blue
    'I': '#008000',  # Info - Green
    'W': '#FFA500',  # Warning - Orange
    'E': '#FF0000',  # Error - Red
    'F': '#8B0000',  # Fatal - Dark Red
}
UNKNOWN_PRIORITY_COLOR = '#000000'


def priority_color(priority: str) -> str:
    """우선순위 코드에 해당하는 색상 (알 수 없는 코드는 검정)"""
    return PRIORITY_COLORS.get(priority, UNKNOWN_PRIORITY_COLOR)


class LogTableModel(QAbstractTableModel):
    """
    로그 레코드용 테이블 모델

    필터 스펙이 바뀔 때마다 전체 레코드에 필터 엔진을 다시 실행하고
    이전 결과는 버린다 (증분 필터링 없음).
    """

    # 컬럼 정의
    COLUMNS = ["Time", "Priority", "Tag", "PID", "Message"]
    COLUMN_COUNT = len(COLUMNS)

    # 컬럼 인덱스
    COL_TIME = 0
    COL_PRIORITY = 1
    COL_TAG = 2
    COL_PID = 3
    COL_MESSAGE = 4

    def __init__(self, records: Optional[Sequence[LogRecord]] = None, parent=None):
        super().__init__(parent)

        # 모든 로그 레코드
        self._all_records: List[LogRecord] = list(records) if records else []

        # 필터링된 레코드 인덱스 (_all_records의 인덱스)
        self._filtered_indices: List[int] = []

        self._spec = FilterSpec()

        # 폰트 캐시
        self._default_font = QFont("Consolas", 9)
        self._bold_font = QFont("Consolas", 9, QFont.Weight.Bold)

        # 색상 캐시
        self._priority_colors = {code: QColor(color) for code, color in PRIORITY_COLORS.items()}
        self._unknown_color = QColor(UNKNOWN_PRIORITY_COLOR)

        self._filtered_indices = compute_filtered_indices(self._all_records, self._spec)

    def rowCount(self, parent: QModelIndex = QModelIndex()) -> int:
        """필터링된 레코드 개수"""
        if parent.isValid():
            return 0
        return len(self._filtered_indices)

    def columnCount(self, parent: QModelIndex = QModelIndex()) -> int:
        if parent.isValid():
            return 0
        return self.COLUMN_COUNT

    def data(self, index: QModelIndex, role: int = Qt.ItemDataRole.DisplayRole) -> Any:
        """셀 데이터 반환"""
        if not index.isValid():
            return None

        row = index.row()
        col = index.column()

        if row < 0 or row >= len(self._filtered_indices):
            return None

        record = self._all_records[self._filtered_indices[row]]

        if role == Qt.ItemDataRole.DisplayRole:
            if col == self.COL_TIME:
                return record.timestamp
            elif col == self.COL_PRIORITY:
                return record.priority
            elif col == self.COL_TAG:
                return record.tag
            elif col == self.COL_PID:
                return str(record.pid)
            elif col == self.COL_MESSAGE:
                return record.message

        elif role == Qt.ItemDataRole.FontRole:
            if col == self.COL_PRIORITY:
                return self._bold_font
            return self._default_font

        elif role == Qt.ItemDataRole.ForegroundRole:
            if col == self.COL_PRIORITY:
                return self._priority_colors.get(record.priority, self._unknown_color)

        elif role == Qt.ItemDataRole.TextAlignmentRole:
            if col == self.COL_PRIORITY:
                return Qt.AlignmentFlag.AlignCenter
            return Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter

        return None

    def headerData(self, section: int, orientation: Qt.Orientation, role: int = Qt.ItemDataRole.DisplayRole) -> Any:
        if role == Qt.ItemDataRole.DisplayRole and orientation == Qt.Orientation.Horizontal:
            if 0 <= section < len(self.COLUMNS):
                return self.COLUMNS[section]
        return None

    # ========== 데이터 관리 메서드 ==========

    def set_records(self, records: Sequence[LogRecord]) -> None:
        """전체 레코드 교체 후 현재 스펙으로 재필터링"""
        self.beginResetModel()
        self._all_records = list(records)
        self._filtered_indices = compute_filtered_indices(self._all_records, self._spec)
        self.endResetModel()
        logger.info(f"[LogModel] 레코드 {len(self._all_records)}개 로드, {len(self._filtered_indices)}개 표시")

    def add_records(self, records: Sequence[LogRecord]) -> None:
        """
        레코드 배치 추가

        새 레코드에만 필터를 적용하고 통과한 행만 삽입 알림.
        """
        if not records:
            return

        start_idx = len(self._all_records)
        self._all_records.extend(records)

        new_filtered = [start_idx + i for i in compute_filtered_indices(records, self._spec)]
        if new_filtered:
            first_new_row = len(self._filtered_indices)
            last_new_row = first_new_row + len(new_filtered) - 1

            self.beginInsertRows(QModelIndex(), first_new_row, last_new_row)
            self._filtered_indices.extend(new_filtered)
            self.endInsertRows()

    def add_record(self, record: LogRecord) -> None:
        self.add_records([record])

    def set_filter_spec(self, spec: FilterSpec) -> None:
        """
        필터 스펙 설정 및 재적용

        Raises:
            TypeError: spec이 FilterSpec이 아닌 경우
        """
        # 검증 실패 시 기존 상태 유지
        filtered = compute_filtered_indices(self._all_records, spec)

        self.beginResetModel()
        self._spec = spec
        self._filtered_indices = filtered
        self.endResetModel()

    def filter_spec(self) -> FilterSpec:
        return self._spec

    def clear(self) -> None:
        """모든 레코드 삭제 (필터 스펙은 유지)"""
        self.beginResetModel()
        self._all_records.clear()
        self._filtered_indices.clear()
        self.endResetModel()
        logger.info("[LogModel] 로그 초기화")

    def get_filtered_count(self) -> int:
        return len(self._filtered_indices)

    def get_total_count(self) -> int:
        return len(self._all_records)

    def get_filtered_records(self) -> List[LogRecord]:
        return [self._all_records[i] for i in self._filtered_indices]

    def record_at(self, row: int) -> Optional[LogRecord]:
        """특정 행의 레코드 반환"""
        if 0 <= row < len(self._filtered_indices):
            return self._all_records[self._filtered_indices[row]]
        return None
