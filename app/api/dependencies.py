from typing import Annotated

from fastapi import Depends

from app.db.comment_repo import CommentRepo
from app.db.database import Database
from app.db.memo_repo import MemoRepo
from app.services.memo_service import MemoService

# Singleton instances
_database_instance = Database()
_memo_repo_instance = MemoRepo(_database_instance)
_comment_repo_instance = CommentRepo(_database_instance)
_memo_service_instance = MemoService(
    memo_repo=_memo_repo_instance,
    comment_repo=_comment_repo_instance,
)


def get_database() -> Database:
    """Get the singleton Database instance"""
    return _database_instance


def get_memo_service() -> MemoService:
    """Get the singleton MemoService instance"""
    return _memo_service_instance


# Type annotations for dependencies
MemoServiceDep = Annotated[MemoService, Depends(get_memo_service)]
