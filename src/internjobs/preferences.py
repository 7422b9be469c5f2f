import logging
import sqlite3
from types import TracebackType

logger = logging.getLogger(__name__)

EDUCATION_LEVEL_KEY = "educationLevel"


class PreferenceStore:
    """
    Local key-value store for user preferences, backed by SQLite.

    Storage problems never propagate: if the database cannot be opened or a
    statement fails, reads return None and writes are dropped with a warning.
    Supports context manager protocol for proper resource cleanup.
    """

    def __init__(self, db_path: str = "preferences.db", key: str = EDUCATION_LEVEL_KEY) -> None:
        self.db_path = db_path
        self.key = key
        self._conn: sqlite3.Connection | None = None
        try:
            self._conn = sqlite3.connect(db_path)
            self.init_db()
        except sqlite3.Error as e:
            logger.warning(f"Preference storage unavailable at {db_path}: {e}")
            self.close()

    @property
    def available(self) -> bool:
        return self._conn is not None

    @property
    def connection(self) -> sqlite3.Connection:
        """Return the persistent database connection."""
        if self._conn is None:
            raise RuntimeError("Preference store connection is closed")
        return self._conn

    def init_db(self) -> None:
        """Create the preferences table if it doesn't exist."""
        cursor = self.connection.cursor()
        cursor.execute("""
            CREATE TABLE IF NOT EXISTS preferences (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL,
                updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)
        self.connection.commit()
        logger.debug(f"Preference store initialized at {self.db_path}")

    def read(self, key: str | None = None) -> str | None:
        """Return the stored value, or None when the key is absent or storage is unavailable."""
        if self._conn is None:
            return None
        try:
            cursor = self._conn.cursor()
            cursor.execute("SELECT value FROM preferences WHERE key = ?", (key or self.key,))
            row = cursor.fetchone()
        except sqlite3.Error as e:
            logger.warning(f"Could not read preference '{key or self.key}': {e}")
            return None
        return row[0] if row else None

    def exists(self, key: str | None = None) -> bool:
        return self.read(key) is not None

    def write(self, value: str | None, key: str | None = None) -> None:
        """
        Store a value. An empty or None value removes the key instead,
        so a later read() returns None rather than "".
        """
        if not value:
            self.clear(key)
            return
        if self._conn is None:
            logger.warning(f"Preference '{key or self.key}' not persisted: storage unavailable")
            return
        try:
            self._conn.execute(
                """
                INSERT INTO preferences (key, value, updated_at)
                VALUES (?, ?, CURRENT_TIMESTAMP)
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = excluded.updated_at
            """,
                (key or self.key, value),
            )
            self._conn.commit()
        except sqlite3.Error as e:
            logger.warning(f"Could not persist preference '{key or self.key}': {e}")

    def clear(self, key: str | None = None) -> None:
        """Remove the key. Missing keys and unavailable storage are not errors."""
        if self._conn is None:
            return
        try:
            self._conn.execute("DELETE FROM preferences WHERE key = ?", (key or self.key,))
            self._conn.commit()
        except sqlite3.Error as e:
            logger.warning(f"Could not clear preference '{key or self.key}': {e}")

    def close(self) -> None:
        """Close the database connection."""
        if self._conn:
            self._conn.close()
            self._conn = None

    def __enter__(self) -> "PreferenceStore":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()
