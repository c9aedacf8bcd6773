'''
    File Name: main.py
    Version: 1.0.0
    Date: 17/10/2026
'''
import sys
import logging

from PyQt6 import QtWidgets

from config import APP_NAME, APP_VERSION, DATABASE_PATH, LOGGING_CONFIG, ensure_data_dir
from database.db_manager import DatabaseManager
from ui.expense_screen import ExpenseScreen

logging.basicConfig(**LOGGING_CONFIG)
logger = logging.getLogger(__name__)


def main() -> int:
    # Ensure runtime dirs exist early
    try:
        ensure_data_dir()
    except OSError:
        logger.exception("Failed to ensure data directory exists")

    app = QtWidgets.QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setApplicationVersion(APP_VERSION)

    # Friendly global exception hook that logs and shows a dialog
    def _excepthook(exc_type, exc_value, exc_tb):
        logger.critical("Uncaught exception", exc_info=(exc_type, exc_value, exc_tb))
        QtWidgets.QMessageBox.critical(None, "Unhandled Exception", str(exc_value))
        # Delegate to default handler as well
        sys.__excepthook__(exc_type, exc_value, exc_tb)

    sys.excepthook = _excepthook

    # The one store handle for this session, passed explicitly to the screen
    store = DatabaseManager(DATABASE_PATH)
    window = ExpenseScreen(store=store)
    window.show()

    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
