import logging

from PyQt6.QtWidgets import QMainWindow, QMessageBox, QStatusBar

from andlogview import __version__
from andlogview.core.sample_data import sample_records
from andlogview.ui.log_table import LogTable
from andlogview.ui.menu import create_menu_structure, install_menu

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    TITLE = "AndLogView"
    DEFAULT_WIDTH = 1200
    DEFAULT_HEIGHT = 800

    def __init__(self, records=None):
        super().__init__()
        self.setWindowTitle(self.TITLE)
        self.resize(self.DEFAULT_WIDTH, self.DEFAULT_HEIGHT)

        # 레코드 소스가 없으면 샘플 데이터로 시작
        if records is None:
            records = sample_records()

        self.log_table = LogTable(records, self)
        self.setCentralWidget(self.log_table)

        self._create_menu_bar()

        self.setStatusBar(QStatusBar())
        self.log_table.status_message.connect(self._on_log_table_status)
        self._on_log_table_status(self.log_table.status_label.text())

        logger.info(f"[MainWindow] {self.log_table.log_model.get_total_count()}개 레코드로 시작")

    def _create_menu_bar(self):
        # 파일/디바이스 입력, 저장, 환경설정은 이 앱에서 지원하지 않으므로 비활성
        self.menu_items = create_menu_structure(
            on_open_file=None,
            on_connect_device=None,
            on_save_log=None,
            on_exit=self.close,
            on_show_preferences=None,
            on_show_about=self._show_about,
            on_toggle_auto_scroll=self._toggle_auto_scroll,
            on_clear_log=self.log_table.clear_logs,
            on_copy=self.log_table.copy_selection,
            on_select_all=self.log_table.select_all,
            on_find=self.log_table.focus_search,
            on_toggle_filters=self.log_table.toggle_filter_panel,
        )
        self.menu_actions = install_menu(self.menuBar(), self.menu_items)

        # 버튼으로 패널을 토글해도 메뉴 체크 상태 유지
        self.log_table.filter_panel_toggled.connect(self.menu_actions["Show Filters"].setChecked)

    def _toggle_auto_scroll(self):
        self.log_table.set_auto_scroll(not self.log_table.auto_scroll)

    def _show_about(self):
        QMessageBox.about(
            self,
            f"About {self.TITLE}",
            f"{self.TITLE} {__version__}\n\n로그 레코드를 우선순위, 태그, PID, 검색어로 필터링합니다."
        )

    def _on_log_table_status(self, message: str):
        """LogTable 상태 메시지를 상태바에 표시"""
        self.statusBar().showMessage(message)
