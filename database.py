import logging
import sqlite3
from datetime import datetime

from config import DB_NAME

logger = logging.getLogger(__name__)


class DatabaseManager:
    """Durable key-value storage backed by a single sqlite table.

    Values are stored as text; callers serialize before writing.
    """

    def __init__(self, db_name=DB_NAME):
        self.db_name = db_name
        self.check_schema()

    def connect(self):
        # Wait for locks rather than failing immediately.
        conn = sqlite3.connect(self.db_name, timeout=30)
        conn.row_factory = sqlite3.Row
        return conn

    def check_schema(self):
        conn = self.connect()
        try:
            c = conn.cursor()
            try:
                c.execute('PRAGMA journal_mode=WAL')
            except sqlite3.Error:
                pass
            try:
                # busy_timeout in milliseconds
                c.execute('PRAGMA busy_timeout = 30000')
            except sqlite3.Error:
                pass

            c.execute('''CREATE TABLE IF NOT EXISTS storage (
                key TEXT PRIMARY KEY,
                value TEXT,
                updated_at TEXT NOT NULL
            )''')
            conn.commit()
        finally:
            conn.close()

    def get_item(self, key):
        """Return the stored value for `key`, or None when absent or unreadable."""
        try:
            conn = self.connect()
            try:
                row = conn.execute("SELECT value FROM storage WHERE key = ?", (key,)).fetchone()
            finally:
                conn.close()
        except sqlite3.Error:
            logger.exception("Could not read %r from %s", key, self.db_name)
            return None
        return row['value'] if row else None

    def _upsert(self, key, value):
        conn = self.connect()
        try:
            conn.execute(
                "INSERT INTO storage (key, value, updated_at) VALUES (?, ?, ?) "
                "ON CONFLICT(key) DO UPDATE SET value = excluded.value, updated_at = excluded.updated_at",
                (key, value, datetime.now().strftime("%Y-%m-%d %H:%M:%S"))
            )
            conn.commit()
        finally:
            conn.close()

    def set_item(self, key, value, retry=True):
        """Write `value` under `key`. If the table is missing, recreate it and retry once.

        Returns False when the write could not be made.
        """
        try:
            self._upsert(key, value)
            return True
        except sqlite3.OperationalError as e:
            if retry and 'no such table' in str(e).lower():
                logger.warning("Storage table missing in %s, recreating", self.db_name)
                try:
                    self.check_schema()
                except sqlite3.Error:
                    logger.exception("Could not recreate storage schema")
                    return False
                return self.set_item(key, value, retry=False)
            logger.exception("Could not write %r to %s", key, self.db_name)
            return False
        except sqlite3.Error:
            logger.exception("Could not write %r to %s", key, self.db_name)
            return False

    def remove_item(self, key):
        try:
            conn = self.connect()
            try:
                conn.execute("DELETE FROM storage WHERE key = ?", (key,))
                conn.commit()
            finally:
                conn.close()
        except sqlite3.Error:
            logger.exception("Could not remove %r from %s", key, self.db_name)
            return False
        return True
