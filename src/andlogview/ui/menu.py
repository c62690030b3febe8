"""
메뉴 구조 정의

메뉴 구성은 정적 데이터(MenuItem 트리)로 만들고,
install_menu()가 QMenuBar에 QMenu/QAction으로 설치한다.
"""
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import QMenu, QMenuBar


def _noop():
    pass


@dataclass
class MenuItem:
    """메뉴 항목 (submenu가 있으면 하위 메뉴)"""
    label: str
    on_click: Callable[[], None] = _noop
    enabled: bool = True
    shortcut: Optional[str] = None
    submenu: Optional[List["MenuItem"]] = None
    checkable: bool = False
    checked: bool = False


def create_menu_structure(
    on_open_file: Optional[Callable[[], None]],
    on_connect_device: Optional[Callable[[], None]],
    on_save_log: Optional[Callable[[], None]],
    on_exit: Callable[[], None],
    on_show_preferences: Optional[Callable[[], None]],
    on_show_about: Callable[[], None],
    on_toggle_auto_scroll: Callable[[], None],
    on_clear_log: Callable[[], None],
    on_copy: Callable[[], None] = _noop,
    on_select_all: Callable[[], None] = _noop,
    on_find: Callable[[], None] = _noop,
    on_toggle_filters: Callable[[], None] = _noop,
) -> List[MenuItem]:
    """
    AndLogView 메뉴 구조 생성

    콜백이 None인 항목은 비활성 상태로 만든다.

    Returns:
        최상위 메뉴 리스트 (File, Edit, View, Tools, Help)
    """
    def item(label, callback, shortcut=None, **kwargs):
        return MenuItem(label, callback or _noop, enabled=callback is not None, shortcut=shortcut, **kwargs)

    return [
        MenuItem("File", submenu=[
            item("Open File...", on_open_file, "Ctrl+O"),
            item("Connect to Device...", on_connect_device, "Ctrl+D"),
            item("Save Log...", on_save_log, "Ctrl+S"),
            item("Exit", on_exit, "Ctrl+Q"),
        ]),
        MenuItem("Edit", submenu=[
            item("Copy", on_copy, "Ctrl+C"),
            item("Select All", on_select_all, "Ctrl+A"),
            item("Find...", on_find, "Ctrl+F"),
        ]),
        MenuItem("View", submenu=[
            item("Auto Scroll", on_toggle_auto_scroll, checkable=True, checked=True),
            item("Show Filters", on_toggle_filters, checkable=True),
            item("Clear Log", on_clear_log),
        ]),
        MenuItem("Tools", submenu=[
            item("Preferences...", on_show_preferences),
        ]),
        MenuItem("Help", submenu=[
            item("About", on_show_about),
        ]),
    ]


def _add_items(menu: QMenu, items: List[MenuItem], actions: Dict[str, QAction]) -> None:
    for entry in items:
        if entry.submenu is not None:
            sub = menu.addMenu(entry.label)
            _add_items(sub, entry.submenu, actions)
            continue

        action = QAction(entry.label, menu)
        if entry.shortcut:
            action.setShortcut(QKeySequence(entry.shortcut))
        action.setEnabled(entry.enabled)
        if entry.checkable:
            action.setCheckable(True)
            action.setChecked(entry.checked)
        action.triggered.connect(lambda _checked=False, cb=entry.on_click: cb())
        menu.addAction(action)
        actions[entry.label] = action


def install_menu(menubar: QMenuBar, items: List[MenuItem]) -> Dict[str, QAction]:
    """
    메뉴 구조를 메뉴바에 설치

    Returns:
        라벨 -> QAction 매핑 (체크 상태 동기화용)
    """
    actions: Dict[str, QAction] = {}
    for entry in items:
        top = menubar.addMenu(entry.label)
        _add_items(top, entry.submenu or [], actions)
    return actions
