"""
로그 테이블 메인 위젯

검색창 + 접이식 필터 패널 + 상태 표시 + QTableView
- 필터/검색이 바뀔 때마다 모델이 필터 엔진을 다시 실행
"""
import logging
from typing import Optional, Sequence

from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QTableView, QAbstractItemView,
    QPushButton, QLineEdit, QLabel, QApplication
)
from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QFont

from andlogview.core.filter_spec import FilterSpec
from andlogview.core.record import LogRecord
from .filter_panel import FilterPanel
from .log_model import LogTableModel

logger = logging.getLogger(__name__)


def format_status(filtered: int, total: int) -> str:
    return f"Showing {filtered} of {total} log entries"


class LogTable(QWidget):
    # 상태 메시지 시그널
    status_message = pyqtSignal(str)
    # 필터 패널 표시 여부 변경
    filter_panel_toggled = pyqtSignal(bool)

    def __init__(self, records: Optional[Sequence[LogRecord]] = None, parent=None):
        super().__init__(parent)
        self.auto_scroll = True
        self._setup_ui(records)

    def _setup_ui(self, records):
        layout = QVBoxLayout(self)

        # Search bar
        search_layout = QHBoxLayout()
        self.search_edit = QLineEdit()
        self.search_edit.setPlaceholderText("Search logs...")
        self.search_edit.textChanged.connect(self._on_search_changed)
        self.clear_search_btn = QPushButton("Clear")
        self.clear_search_btn.clicked.connect(self.search_edit.clear)
        self.toggle_filters_btn = QPushButton("Show Filters")
        self.toggle_filters_btn.clicked.connect(self.toggle_filter_panel)

        search_layout.addWidget(self.search_edit)
        search_layout.addWidget(self.clear_search_btn)
        search_layout.addWidget(self.toggle_filters_btn)
        layout.addLayout(search_layout)

        # Filter panel (기본 숨김)
        self.filter_panel = FilterPanel(self)
        self.filter_panel.filter_changed.connect(self._on_filter_changed)
        self.filter_panel.setVisible(False)
        layout.addWidget(self.filter_panel)

        # Status
        self.status_label = QLabel()
        layout.addWidget(self.status_label)

        # Log Table
        self.log_model = LogTableModel(records, self)
        self.table = QTableView()
        self.table.setModel(self.log_model)

        self.table.setAlternatingRowColors(True)
        self.table.setSelectionBehavior(QAbstractItemView.SelectionBehavior.SelectRows)
        self.table.setSelectionMode(QAbstractItemView.SelectionMode.ExtendedSelection)
        self.table.setFont(QFont("Consolas", 10))
        self.table.verticalHeader().setVisible(False)
        self.table.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)

        # 컬럼 너비 설정
        header = self.table.horizontalHeader()
        self.table.setColumnWidth(LogTableModel.COL_TIME, 180)
        self.table.setColumnWidth(LogTableModel.COL_PRIORITY, 60)
        self.table.setColumnWidth(LogTableModel.COL_TAG, 150)
        self.table.setColumnWidth(LogTableModel.COL_PID, 60)
        header.setStretchLastSection(True)   # Message 컬럼 자동 확장

        layout.addWidget(self.table)

        self._update_status()

    # ========== 필터 ==========

    def current_spec(self) -> FilterSpec:
        return self.log_model.filter_spec()

    def _apply_spec(self, spec: FilterSpec):
        self.log_model.set_filter_spec(spec)
        self._update_status()

    def _on_filter_changed(self, spec: FilterSpec):
        # 검색어는 필터 패널이 아닌 검색창 소유
        self._apply_spec(spec.with_search(self.search_edit.text()))

    def _on_search_changed(self, text: str):
        self._apply_spec(self.current_spec().with_search(text))

    def is_filter_panel_visible(self) -> bool:
        return not self.filter_panel.isHidden()

    def toggle_filter_panel(self):
        visible = not self.is_filter_panel_visible()
        self.filter_panel.setVisible(visible)
        self.toggle_filters_btn.setText("Hide Filters" if visible else "Show Filters")
        self.filter_panel_toggled.emit(visible)

    # ========== 데이터 ==========

    def set_records(self, records: Sequence[LogRecord]):
        self.log_model.set_records(records)
        self._update_status()

    def add_records(self, records: Sequence[LogRecord]):
        self.log_model.add_records(records)
        if self.auto_scroll and self.log_model.rowCount() > 0:
            self.table.scrollToBottom()
        self._update_status()

    def clear_logs(self):
        self.log_model.clear()
        self._update_status()

    def set_auto_scroll(self, enabled: bool):
        self.auto_scroll = enabled
        logger.debug(f"[LogTable] Auto Scroll: {enabled}")

    def _update_status(self):
        text = format_status(self.log_model.get_filtered_count(), self.log_model.get_total_count())
        self.status_label.setText(text)
        self.status_message.emit(text)

    # ========== Edit 동작 ==========

    def selected_text(self) -> str:
        """선택된 행을 탭 구분 텍스트로 변환"""
        rows = sorted({index.row() for index in self.table.selectionModel().selectedRows()})
        lines = []
        for row in rows:
            record = self.log_model.record_at(row)
            if record is not None:
                lines.append("\t".join([record.timestamp, record.priority, record.tag,
                                        str(record.pid), record.message]))
        return "\n".join(lines)

    def copy_selection(self):
        text = self.selected_text()
        if text:
            QApplication.clipboard().setText(text)

    def select_all(self):
        self.table.selectAll()

    def focus_search(self):
        self.search_edit.setFocus()
        self.search_edit.selectAll()
