import logging
import sqlite3
from typing import Optional

from iptvdesk.dao.host_storage.base import BaseHostStorage

logger = logging.getLogger(__name__)

SELECTED_HOST_KEY = "updateurl_vps"


class HostStorageSQLite(BaseHostStorage):
    def __init__(self, filepath: str) -> None:
        self.conn: sqlite3.Connection = sqlite3.connect(filepath)
        self.conn.row_factory = sqlite3.Row
        self._create_schema()
        logger.debug(f"Initialized SQLite host storage at {filepath}")

    def _create_schema(self) -> None:
        cursor: sqlite3.Cursor = self.conn.cursor()
        cursor.execute(
            """
            CREATE TABLE IF NOT EXISTS settings (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL
            ) WITHOUT ROWID
            """
        )
        self.conn.commit()

    def get_selected_host(self) -> Optional[str]:
        cursor: sqlite3.Cursor = self.conn.cursor()
        cursor.execute("SELECT value FROM settings WHERE key = ?", (SELECTED_HOST_KEY,))
        row: Optional[sqlite3.Row] = cursor.fetchone()
        if row:
            return row["value"]
        return None

    def save_selected_host(self, host: str) -> None:
        logger.debug(f"Saving selected host '{host}'")
        cursor: sqlite3.Cursor = self.conn.cursor()
        cursor.execute(
            """
            INSERT OR REPLACE INTO settings (key, value)
            VALUES (?, ?)
            """,
            (SELECTED_HOST_KEY, host),
        )
        self.conn.commit()

    def close(self) -> None:
        self.conn.close()
