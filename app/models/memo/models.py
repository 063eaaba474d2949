from datetime import datetime
from dataclasses import dataclass

from app.models.memo.responses import CommentResponse, MemoDetailResponse, MemoResponse
from app.models.memo.validation import validate_memo


@dataclass
class Comment:
    id: int
    memo_id: int
    content: str
    created_at: datetime

    def to_response(self) -> CommentResponse:
        return CommentResponse(
            id=self.id,
            memo_id=self.memo_id,
            content=self.content,
            created_at=self.created_at,
        )


@dataclass
class Memo:
    id: int | None
    title: str | None
    content: str | None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def is_valid(self) -> bool:
        return validate_memo(self.title, self.content).is_valid

    def errors(self) -> list[str]:
        """Validation messages for the current field values, title first"""
        return validate_memo(self.title, self.content).errors

    def to_response(self) -> MemoResponse:
        return MemoResponse(
            id=self.id,
            title=self.title,
            content=self.content,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


@dataclass
class MemoWithComments:
    memo: Memo
    comments: list[Comment]

    def to_response(self) -> MemoDetailResponse:
        return MemoDetailResponse(
            **self.memo.to_response().model_dump(),
            comments=[c.to_response() for c in self.comments],
        )
