import logging
import os
import sys

LOG_LEVEL_ENV = 'ANDLOGVIEW_LOG_LEVEL'
DEFAULT_LOG_LEVEL = 'INFO'


def get_log_level() -> int:
    """환경 변수에서 로그 레벨 읽기 (잘못된 값이면 INFO)"""
    name = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    if isinstance(level, int):
        return level
    logging.getLogger(__name__).warning(
        f"[Main] 알 수 없는 로그 레벨 {name!r}, {DEFAULT_LOG_LEVEL} 사용"
    )
    return logging.INFO


def setup_logging():
    # 로깅 설정
    logging.basicConfig(
        level=get_log_level(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )


def main():
    setup_logging()

    from PyQt6.QtWidgets import QApplication
    from andlogview.ui.main_window import MainWindow

    app = QApplication(sys.argv)

    window = MainWindow()
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
