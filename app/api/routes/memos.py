from fastapi import APIRouter, Query, status

from app.api.dependencies import MemoServiceDep
from app.models.memo.responses import (
    ErrorMessageResponse,
    MemoDetailEnvelope,
    MemoListResponse,
)

router = APIRouter(
    prefix="/memos",
    tags=["memos"],
)


@router.get("", response_model=MemoListResponse)
async def list_memos(
    memo_service: MemoServiceDep,
    title: str | None = Query(None, description="Partial match on memo title"),
) -> MemoListResponse:
    """
    List memos, newest first.

    An empty or missing `title` returns every memo.
    """
    memos = await memo_service.list_memos(title=title)

    return MemoListResponse(
        memos=[m.to_response() for m in memos],
    )


@router.get(
    "/{memo_id}",
    response_model=MemoDetailEnvelope,
    responses={status.HTTP_404_NOT_FOUND: {"model": ErrorMessageResponse}},
)
async def get_memo(
    memo_id: int,
    memo_service: MemoServiceDep,
) -> MemoDetailEnvelope:
    memo = await memo_service.get_memo_with_comments(memo_id)
    return MemoDetailEnvelope(memo=memo.to_response())
