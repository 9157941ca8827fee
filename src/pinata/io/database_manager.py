"""SQLite-backed usage ledger persistence."""

import sqlite3
from datetime import date
from pathlib import Path
from typing import List, Tuple


class DatabaseManager:
    """Owns SQLite connection, schema, and daily usage helpers."""

    def __init__(self, db_path: Path) -> None:
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self.connection = sqlite3.connect(self.db_path)
        self.connection.row_factory = sqlite3.Row

    def ensure_schema(self) -> None:
        """Create tables if they do not exist."""
        cur = self.connection.cursor()
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS daily_usage (
                day TEXT PRIMARY KEY,
                request_count INTEGER NOT NULL DEFAULT 0,
                last_request TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP
            );
            """
        )
        self.connection.commit()

    def get_usage_count(self, day: date) -> int:
        """Number of vocabulary requests recorded for ``day``."""
        cur = self.connection.cursor()
        cur.execute(
            "SELECT request_count FROM daily_usage WHERE day = ?",
            (day.isoformat(),),
        )
        row = cur.fetchone()
        return int(row["request_count"]) if row else 0

    def increment_usage(self, day: date) -> int:
        """Record one request for ``day`` and return the new count."""
        cur = self.connection.cursor()
        cur.execute(
            """
            INSERT INTO daily_usage (day, request_count)
            VALUES (?, 1)
            ON CONFLICT(day) DO UPDATE SET
                request_count = request_count + 1,
                last_request = CURRENT_TIMESTAMP
            """,
            (day.isoformat(),),
        )
        self.connection.commit()
        return self.get_usage_count(day)

    def list_usage(self) -> List[Tuple[str, int]]:
        """All (day, request_count) rows, most recent first."""
        cur = self.connection.cursor()
        cur.execute("SELECT day, request_count FROM daily_usage ORDER BY day DESC")
        return [(row["day"], int(row["request_count"])) for row in cur.fetchall()]

    def close(self) -> None:
        self.connection.close()
