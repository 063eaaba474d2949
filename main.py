from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.dependencies import get_database, get_memo_service
from app.api.exception_handlers import register_exception_handlers
from app.api.routes.health import router as health_router
from app.api.routes.memos import router as memos_router
from app.db.comment_repo import CommentRepo
from app.db.database import Database
from app.db.memo_repo import MemoRepo
from app.logging_config import setup_logger
from app.services.memo_service import MemoService
from app.settings import settings


def create_app(database: Database | None = None) -> FastAPI:
    """
    Build the FastAPI application.

    Passing a `database` wires the memo service to it instead of the
    singleton configured from settings.
    """
    logger = setup_logger(settings.log_level)
    db = database if database is not None else get_database()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        db.setup()
        logger.info("%s %s started", settings.app_name, settings.app_version)
        yield

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Memo backend with comments",
        lifespan=lifespan,
    )
    
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if database is not None:
        memo_service = MemoService(MemoRepo(db), CommentRepo(db))
        app.dependency_overrides[get_memo_service] = lambda: memo_service

    register_exception_handlers(app)
    app.include_router(health_router)
    app.include_router(memos_router)
    
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
