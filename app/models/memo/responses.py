from datetime import datetime
from pydantic import BaseModel


class CommentResponse(BaseModel):
    id: int
    memo_id: int
    content: str
    created_at: datetime


class MemoResponse(BaseModel):
    id: int
    title: str
    content: str
    created_at: datetime
    updated_at: datetime


class MemoDetailResponse(MemoResponse):
    comments: list[CommentResponse]


class MemoListResponse(BaseModel):
    memos: list[MemoResponse]


class MemoDetailEnvelope(BaseModel):
    memo: MemoDetailResponse


class ErrorMessageResponse(BaseModel):
    message: str
