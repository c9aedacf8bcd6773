'''
    File Name: config.py
    Version: 1.0.0
    Date: 17/10/2026
'''

from pathlib import Path
import logging

# Project paths & files
BASE_DIR = Path(__file__).resolve().parent
DATA_DIR = BASE_DIR / "data"
DB_FILENAME = "expenses.db"
DATABASE_PATH = DATA_DIR / DB_FILENAME   # Path object
EXPENSES_TABLE = "expenses"

# App metadata
APP_NAME = "Student Expense Tracker"
APP_VERSION = "1.0.0"

# UI / formatting
CURRENCY_SYMBOL = "$"
DATE_FORMAT = "%Y-%m-%d"
STYLESHEET_PATH = BASE_DIR / "resources" / "styles.qss"

# Logging (simple default; modules can call logging.basicConfig(**config))
LOGGING_CONFIG = {
    "level": logging.INFO,
    "format": "%(asctime)s - %(levelname)s - %(name)s - %(message)s",
}

# Helpers
def ensure_data_dir():
    """
    Ensure the data directory exists. Table creation is handled by
    the schema reconciler (see `database.schema.SchemaReconciler`).
    """
    DATA_DIR.mkdir(parents=True, exist_ok=True)
