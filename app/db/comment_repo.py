from datetime import datetime, timezone

from app.db.database import Database, fits_sqlite_integer, register_schema_sql
from app.models.memo.models import Comment


@register_schema_sql
def _create_comments_table() -> str:
    return """
        CREATE TABLE IF NOT EXISTS comments (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            memo_id INTEGER NOT NULL,
            content TEXT NOT NULL,
            created_at TEXT NOT NULL,
            FOREIGN KEY (memo_id) REFERENCES memos(id) ON DELETE CASCADE
        )
    """


@register_schema_sql
def _create_comments_memo_index() -> str:
    return """
        CREATE INDEX IF NOT EXISTS idx_comments_memo_id
        ON comments(memo_id)
    """


class CommentRepo:
    """Repository for comment data access"""

    def __init__(self, db: Database) -> None:
        self.db = db

    def create_comment(self, memo_id: int, content: str) -> Comment:
        now = datetime.now(timezone.utc)
        comment_id = self.db.execute_insert(
            "INSERT INTO comments (memo_id, content, created_at) VALUES (?, ?, ?)",
            (memo_id, content, now.isoformat()),
        )

        return Comment(
            id=comment_id,
            memo_id=memo_id,
            content=content,
            created_at=now,
        )

    def list_comments_by_memo(self, memo_id: int) -> list[Comment]:
        """List a memo's comments, newest first"""
        if not fits_sqlite_integer(memo_id):
            return []

        rows = self.db.execute_query(
            """
            SELECT id, memo_id, content, created_at
            FROM comments
            WHERE memo_id = ?
            ORDER BY id DESC
            """,
            (memo_id,),
        )

        return [
            Comment(
                id=row["id"],
                memo_id=row["memo_id"],
                content=row["content"],
                created_at=datetime.fromisoformat(row["created_at"]),
            )
            for row in rows
        ]
