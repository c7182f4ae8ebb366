import sys

from PyQt6 import QtWidgets

from .logging_config import setup_logging
from .ui.main_window import MainWindow


def main() -> int:
    logger = setup_logging()
    app = QtWidgets.QApplication(sys.argv)
    win = MainWindow()
    win.show()
    logger.info("app_started")
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
