import sqlite3
from datetime import datetime, timezone

from app.db.database import Database, fits_sqlite_integer, register_schema_sql
from app.models.memo.models import Memo


@register_schema_sql
def _create_memos_table() -> str:
    return """
        CREATE TABLE IF NOT EXISTS memos (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            title TEXT NOT NULL,
            content TEXT NOT NULL,
            created_at TEXT NOT NULL,
            updated_at TEXT NOT NULL
        )
    """


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class MemoRepo:
    """Repository for memo data access"""

    def __init__(self, db: Database) -> None:
        self.db = db

    def create_memo(self, title: str, content: str) -> Memo:
        """Insert a memo and return it with its assigned id"""
        now = datetime.now(timezone.utc)
        memo_id = self.db.execute_insert(
            """
            INSERT INTO memos (title, content, created_at, updated_at)
            VALUES (?, ?, ?, ?)
            """,
            (title, content, now.isoformat(), now.isoformat()),
        )

        return Memo(
            id=memo_id,
            title=title,
            content=content,
            created_at=now,
            updated_at=now,
        )

    def get_memo_by_id(self, memo_id: int) -> Memo | None:
        if not fits_sqlite_integer(memo_id):
            return None

        rows = self.db.execute_query(
            "SELECT id, title, content, created_at, updated_at FROM memos WHERE id = ?",
            (memo_id,),
        )

        if not rows:
            return None
        return self._row_to_memo(rows[0])

    def list_memos(self, title_query: str | None = None) -> list[Memo]:
        """List memos newest first, optionally filtered by a title substring"""
        if title_query:
            rows = self.db.execute_query(
                """
                SELECT id, title, content, created_at, updated_at
                FROM memos
                WHERE title LIKE ? ESCAPE '\\'
                ORDER BY id DESC
                """,
                (f"%{_escape_like(title_query)}%",),
            )
        else:
            rows = self.db.execute_query(
                """
                SELECT id, title, content, created_at, updated_at
                FROM memos
                ORDER BY id DESC
                """
            )

        return [self._row_to_memo(row) for row in rows]

    def _row_to_memo(self, row: sqlite3.Row) -> Memo:
        return Memo(
            id=row["id"],
            title=row["title"],
            content=row["content"],
            created_at=datetime.fromisoformat(row["created_at"]),
            updated_at=datetime.fromisoformat(row["updated_at"]),
        )
