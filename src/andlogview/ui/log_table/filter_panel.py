"""
필터 패널 - 우선순위 토글 및 Tag/PID/Message 입력
"""
import logging
from typing import Optional

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QGroupBox, QGridLayout,
    QLabel, QLineEdit, QCheckBox
)

from andlogview.core.filter_spec import FilterSpec
from andlogview.core.record import ALL_PRIORITY_CODES

logger = logging.getLogger(__name__)


class FilterPanel(QWidget):
    """
    필터 패널

    컨트롤이 바뀔 때마다 이전 스펙에서 새 스펙을 만들어 filter_changed로 전달.
    """
    filter_changed = pyqtSignal(object)  # FilterSpec

    def __init__(self, parent=None, spec: Optional[FilterSpec] = None):
        super().__init__(parent)
        self._spec = spec if spec is not None else FilterSpec()
        self._loading = False

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        group = QGroupBox("Filters")
        group_layout = QVBoxLayout()
        group_layout.setContentsMargins(5, 5, 5, 5)
        group_layout.setSpacing(5)

        # Priority
        priority_layout = QHBoxLayout()
        priority_layout.setSpacing(10)
        priority_layout.addWidget(QLabel("Priority:"))
        self.priority_checks = {}
        for code in ALL_PRIORITY_CODES:
            cb = QCheckBox(code)
            cb.toggled.connect(lambda _checked, c=code: self._on_priority_toggled(c))
            self.priority_checks[code] = cb
            priority_layout.addWidget(cb)
        priority_layout.addStretch()
        group_layout.addLayout(priority_layout)

        # Fields
        fields_layout = QGridLayout()
        fields_layout.setSpacing(5)

        fields_layout.addWidget(QLabel("Tag:"), 0, 0)
        self.tag_edit = QLineEdit()
        self.tag_edit.setPlaceholderText("Filter by tag")
        self.tag_edit.textChanged.connect(self._on_tag_changed)
        fields_layout.addWidget(self.tag_edit, 0, 1)

        fields_layout.addWidget(QLabel("PID:"), 1, 0)
        self.pid_edit = QLineEdit()
        self.pid_edit.setPlaceholderText("Filter by process ID")
        self.pid_edit.textChanged.connect(self._on_pid_changed)
        fields_layout.addWidget(self.pid_edit, 1, 1)

        fields_layout.addWidget(QLabel("Message:"), 2, 0)
        self.message_edit = QLineEdit()
        self.message_edit.setPlaceholderText("Filter by message content")
        self.message_edit.textChanged.connect(self._on_message_changed)
        fields_layout.addWidget(self.message_edit, 2, 1)

        group_layout.addLayout(fields_layout)
        group.setLayout(group_layout)
        layout.addWidget(group)

        self._load_spec(self._spec)

    def filter_spec(self) -> FilterSpec:
        return self._spec

    def set_filter_spec(self, spec: FilterSpec) -> None:
        """스펙을 컨트롤에 반영 (filter_changed 발생 안 함)"""
        if not isinstance(spec, FilterSpec):
            raise TypeError(f"spec must be a FilterSpec, got {type(spec).__name__}")
        self._spec = spec
        self._load_spec(spec)

    def _load_spec(self, spec: FilterSpec):
        """스펙 값으로 컨트롤 채우기"""
        self._loading = True
        try:
            for code, cb in self.priority_checks.items():
                cb.setChecked(spec.is_priority_selected(code))
            self.tag_edit.setText(spec.tag)
            self.pid_edit.setText(spec.pid)
            self.message_edit.setText(spec.message)
        finally:
            self._loading = False

    def _publish(self, spec: FilterSpec):
        if self._loading:
            return
        self._spec = spec
        logger.debug(f"[FilterPanel] 필터 변경: {spec}")
        self.filter_changed.emit(spec)

    def _on_priority_toggled(self, code: str):
        self._publish(self._spec.with_priority_toggled(code))

    def _on_tag_changed(self, text: str):
        self._publish(self._spec.with_tag(text))

    def _on_pid_changed(self, text: str):
        self._publish(self._spec.with_pid(text))

    def _on_message_changed(self, text: str):
        self._publish(self._spec.with_message(text))
