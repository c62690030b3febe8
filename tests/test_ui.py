"""Tests for the PyQt6 filter panel, log table and menu"""

import pytest

pytest.importorskip("PyQt6.QtWidgets")

from andlogview.core.filter_spec import FilterSpec  # noqa: E402
from andlogview.ui.log_table import FilterPanel, LogTable  # noqa: E402
from andlogview.ui.log_table.log_table import format_status  # noqa: E402
from andlogview.ui.main_window import MainWindow  # noqa: E402
from andlogview.ui.menu import MenuItem, create_menu_structure  # noqa: E402


class TestFilterPanel:
    def test_initial_state(self, qapp):
        panel = FilterPanel()
        assert all(cb.isChecked() for cb in panel.priority_checks.values())
        assert panel.filter_spec() == FilterSpec()

    def test_toggle_emits_new_spec(self, qapp):
        panel = FilterPanel()
        received = []
        panel.filter_changed.connect(received.append)
        panel.priority_checks["V"].setChecked(False)
        assert received[-1].selected_priorities == frozenset({"D", "I", "W", "E", "F"})

    def test_text_edits_emit(self, qapp):
        panel = FilterPanel()
        received = []
        panel.filter_changed.connect(received.append)
        panel.tag_edit.setText("net")
        panel.pid_edit.setText("23")
        panel.message_edit.setText("fail")
        spec = received[-1]
        assert (spec.tag, spec.pid, spec.message) == ("net", "23", "fail")

    def test_set_filter_spec_is_silent(self, qapp):
        panel = FilterPanel()
        received = []
        panel.filter_changed.connect(received.append)
        panel.set_filter_spec(FilterSpec(selected_priorities=["E"], tag="db"))
        assert received == []
        assert panel.tag_edit.text() == "db"
        assert not panel.priority_checks["I"].isChecked()


class TestLogTable:
    def test_status_text(self, qapp, records):
        table = LogTable(records)
        assert table.status_label.text() == "Showing 8 of 8 log entries"

    def test_search_filters(self, qapp, records):
        table = LogTable(records)
        table.search_edit.setText("timeout")
        assert table.log_model.get_filtered_count() == 1
        assert table.status_label.text() == format_status(1, 8)

    def test_panel_and_search_combine(self, qapp, records):
        table = LogTable(records)
        table.search_edit.setText("connection")
        table.filter_panel.priority_checks["W"].setChecked(False)
        assert [r.message for r in table.log_model.get_filtered_records()] == ["Connection established"]
        assert table.current_spec().search == "connection"

    def test_clear_search(self, qapp, records):
        table = LogTable(records)
        table.search_edit.setText("timeout")
        table.clear_search_btn.click()
        assert table.log_model.get_filtered_count() == 8

    def test_toggle_filter_panel(self, qapp, records):
        table = LogTable(records)
        assert not table.is_filter_panel_visible()
        table.toggle_filter_panel()
        assert table.is_filter_panel_visible()
        assert table.toggle_filters_btn.text() == "Hide Filters"

    def test_toggle_emits_visibility(self, qapp, records):
        table = LogTable(records)
        received = []
        table.filter_panel_toggled.connect(received.append)
        table.toggle_filter_panel()
        table.toggle_filter_panel()
        assert received == [True, False]

    def test_starts_empty_without_records(self, qapp):
        table = LogTable()
        assert table.status_label.text() == "Showing 0 of 0 log entries"

    def test_clear_logs(self, qapp, records):
        table = LogTable(records)
        table.clear_logs()
        assert table.status_label.text() == "Showing 0 of 0 log entries"

    def test_selected_text(self, qapp, records):
        table = LogTable(records)
        table.table.selectRow(2)
        assert table.selected_text() == "2026-01-21 12:00:02.789\tW\tNetworkManager\t2345\tConnection timeout"


class TestMenuStructure:
    def _menu(self, **overrides):
        callbacks = dict(
            on_open_file=None,
            on_connect_device=None,
            on_save_log=None,
            on_exit=lambda: None,
            on_show_preferences=None,
            on_show_about=lambda: None,
            on_toggle_auto_scroll=lambda: None,
            on_clear_log=lambda: None,
        )
        callbacks.update(overrides)
        return create_menu_structure(**callbacks)

    def test_top_level(self):
        assert [m.label for m in self._menu()] == ["File", "Edit", "View", "Tools", "Help"]

    def test_file_shortcuts(self):
        file_menu = self._menu()[0]
        assert [(m.label, m.shortcut) for m in file_menu.submenu] == [
            ("Open File...", "Ctrl+O"),
            ("Connect to Device...", "Ctrl+D"),
            ("Save Log...", "Ctrl+S"),
            ("Exit", "Ctrl+Q"),
        ]

    def test_missing_callback_disables_item(self):
        file_menu = self._menu()[0]
        assert not file_menu.submenu[0].enabled
        assert file_menu.submenu[3].enabled

    def test_callback_wired(self):
        calls = []
        view_menu = self._menu(on_clear_log=lambda: calls.append("clear"))[2]
        clear_item = next(m for m in view_menu.submenu if m.label == "Clear Log")
        clear_item.on_click()
        assert calls == ["clear"]

    def test_menu_item_defaults(self):
        item = MenuItem("About")
        assert item.enabled and item.shortcut is None and item.submenu is None


def _menu_actions(window):
    """메뉴바의 (최상위 메뉴, 항목 라벨) -> QAction"""
    found = {}
    for top in window.menuBar().actions():
        for action in top.menu().actions():
            found[(top.text(), action.text())] = action
    return found


class TestMainWindow:
    @pytest.fixture
    def window(self, qapp):
        return MainWindow()

    def test_title_and_size(self, window):
        assert window.windowTitle() == "AndLogView"
        assert (window.width(), window.height()) == (1200, 800)

    def test_starts_with_sample_records(self, window):
        assert window.log_table.log_model.get_total_count() == 8
        assert window.statusBar().currentMessage() == "Showing 8 of 8 log entries"

    def test_explicit_records(self, qapp, records):
        window = MainWindow(records[:3])
        assert window.log_table.log_model.get_total_count() == 3

    def test_menu_installed(self, window):
        assert [a.text() for a in window.menuBar().actions()] == ["File", "Edit", "View", "Tools", "Help"]
        actions = _menu_actions(window)
        assert actions[("File", "Open File...")].shortcut().toString() == "Ctrl+O"
        assert actions[("Edit", "Find...")].shortcut().toString() == "Ctrl+F"

    def test_unsupported_entries_disabled(self, window):
        actions = _menu_actions(window)
        for key in [("File", "Open File..."), ("File", "Connect to Device..."),
                    ("File", "Save Log..."), ("Tools", "Preferences...")]:
            assert not actions[key].isEnabled()
        assert actions[("File", "Exit")].isEnabled()
        assert actions[("Help", "About")].isEnabled()

    def test_auto_scroll_action(self, window):
        action = _menu_actions(window)[("View", "Auto Scroll")]
        assert action.isCheckable() and action.isChecked()
        action.trigger()
        assert not action.isChecked()
        assert window.log_table.auto_scroll is False

    def test_clear_log_action(self, window):
        _menu_actions(window)[("View", "Clear Log")].trigger()
        assert window.log_table.log_model.get_total_count() == 0
        assert window.statusBar().currentMessage() == "Showing 0 of 0 log entries"

    def test_show_filters_action_toggles_panel(self, window):
        action = _menu_actions(window)[("View", "Show Filters")]
        action.trigger()
        assert window.log_table.is_filter_panel_visible()
        assert action.isChecked()

    def test_show_filters_action_follows_button(self, window):
        action = _menu_actions(window)[("View", "Show Filters")]
        window.log_table.toggle_filters_btn.click()
        assert action.isChecked()
        window.log_table.toggle_filters_btn.click()
        assert not action.isChecked()

    def test_select_all_action(self, window):
        _menu_actions(window)[("Edit", "Select All")].trigger()
        assert len(window.log_table.table.selectionModel().selectedRows()) == 8
