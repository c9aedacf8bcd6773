'''
    File Name: schema.py
    Version: 1.0.0
    Date: 17/10/2026
'''

import logging
from datetime import date
from typing import Callable, List

import config
from models.errors import StoreError

logger = logging.getLogger(__name__)

CREATED = "created"
MIGRATED = "migrated"
UNCHANGED = "unchanged"
REBUILT = "rebuilt"


class SchemaReconciler:
    """Bring the persisted expenses table to the expected five-column layout.

    Run once at startup, before the ledger reads or writes anything:

    - no table: create it;
    - table without a `date` column: add the column and backfill every row
      with today's date;
    - table already up to date: leave it alone.

    If any of that fails, the table is dropped and recreated empty. If even
    that fails, `StoreError` is raised and the session runs without a usable
    store.
    """

    def __init__(self, store, table: str = config.EXPENSES_TABLE,
                 today: Callable[[], date] = date.today):
        self.store = store
        self.table = table
        self._today = today

    def _create_sql(self) -> str:
        return f"""
            CREATE TABLE {self.table} (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                amount REAL NOT NULL,
                category TEXT NOT NULL,
                note TEXT,
                date TEXT NOT NULL
            );
        """

    def column_names(self) -> List[str]:
        """Return the table's column names (empty if the table does not exist)."""
        rows = self.store.query_all(f"PRAGMA table_info({self.table});")
        return [r["name"] for r in rows]

    def reconcile(self) -> str:
        """Run the minimal migration and return which path was taken."""
        try:
            return self._migrate()
        except StoreError:
            logger.exception("Schema setup failed for table %s; rebuilding it", self.table)

        try:
            self.store.execute(f"DROP TABLE IF EXISTS {self.table};")
            self.store.execute(self._create_sql())
        except StoreError:
            logger.critical("Fallback rebuild of table %s failed; store unusable this session", self.table)
            raise
        logger.info("Rebuilt table %s from scratch", self.table)
        return REBUILT

    def _migrate(self) -> str:
        columns = self.column_names()

        if not columns:
            self.store.execute(self._create_sql())
            logger.info("Created table %s", self.table)
            return CREATED

        if "date" not in columns:
            self.store.execute(f"ALTER TABLE {self.table} ADD COLUMN date TEXT;")
            today = self._today().isoformat()
            filled = self.store.execute(
                f"UPDATE {self.table} SET date = ? WHERE date IS NULL;", (today,)
            )
            logger.info("Added date column to %s and backfilled %s row(s) with %s", self.table, filled, today)
            return MIGRATED

        logger.debug("Table %s already up to date", self.table)
        return UNCHANGED
