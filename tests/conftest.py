import os

import pytest

from andlogview.core.record import LogRecord
from andlogview.core.sample_data import sample_records

# Qt 테스트는 화면 없이 실행
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture
def records():
    return sample_records()


@pytest.fixture
def make_record():
    def _make(priority="I", tag="Tag", pid=100, message="msg", timestamp="2026-01-21 12:00:00.000"):
        return LogRecord(timestamp, priority, tag, pid, message)
    return _make


@pytest.fixture(scope="session")
def qapp():
    QtWidgets = pytest.importorskip("PyQt6.QtWidgets")
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app
