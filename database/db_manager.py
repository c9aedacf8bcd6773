'''
    File Name: db_manager.py
    Version: 1.0.0
    Date: 17/10/2026
'''

import sqlite3
from pathlib import Path
import logging
from typing import Any, Dict, List, Sequence

import config
from models.errors import StoreError

logger = logging.getLogger(__name__)


class DatabaseManager:
    """Record store over a local SQLite file.

    Exposes the two primitives the ledger needs: `query_all()` for reads and
    `execute()` for DDL and DML. Every call opens its own connection, runs a
    single statement and closes it again; there is no transaction spanning
    several calls.
    """

    def __init__(self, db_path: Path = None):
        # prefer explicit path, otherwise config value
        if db_path is not None:
            self.db_path = Path(db_path)
        else:
            self.db_path = Path(config.DATABASE_PATH)

    def _connect(self):
        """Return a new sqlite3 connection to the configured DB path."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(str(self.db_path))
        conn.row_factory = sqlite3.Row
        return conn

    def query_all(self, statement: str, params: Sequence[Any] = ()) -> List[Dict[str, Any]]:
        """Run a read statement and return every row as a dict, in order."""
        logger.debug("query_all: %s %s", statement.strip(), tuple(params))
        try:
            conn = self._connect()
            try:
                cur = conn.execute(statement, tuple(params))
                rows = cur.fetchall()
            finally:
                conn.close()
        except (sqlite3.Error, OSError) as exc:
            logger.exception("Query failed: %s", statement.strip())
            raise StoreError(f"Query failed: {exc}") from exc
        return [dict(r) for r in rows]

    def execute(self, statement: str, params: Sequence[Any] = ()) -> int:
        """Run one DDL/DML statement, commit it, and return the affected row count."""
        logger.debug("execute: %s %s", statement.strip(), tuple(params))
        try:
            conn = self._connect()
            try:
                cur = conn.execute(statement, tuple(params))
                conn.commit()
                affected = cur.rowcount
            finally:
                conn.close()
        except (sqlite3.Error, OSError) as exc:
            logger.exception("Statement failed: %s", statement.strip())
            raise StoreError(f"Statement failed: {exc}") from exc
        return affected
