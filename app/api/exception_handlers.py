from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from app.services.memo_service import MemoNotFoundError


async def memo_not_found_handler(request: Request, exc: MemoNotFoundError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"message": exc.message},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(MemoNotFoundError, memo_not_found_handler)
