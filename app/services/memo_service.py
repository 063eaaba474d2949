from app.db.comment_repo import CommentRepo
from app.db.memo_repo import MemoRepo
from app.logging_config import get_logger
from app.models.memo.models import Comment, Memo, MemoWithComments
from app.models.memo.validation import ensure_valid_memo


MEMO_NOT_FOUND_MESSAGE = "メモが見つかりません"

logger = get_logger("memo_service")


class MemoNotFoundError(LookupError):
    """Raised when a memo id does not exist"""

    def __init__(self, memo_id: int) -> None:
        super().__init__(MEMO_NOT_FOUND_MESSAGE)
        self.memo_id = memo_id
        self.message = MEMO_NOT_FOUND_MESSAGE


class MemoService:
    def __init__(self, memo_repo: MemoRepo, comment_repo: CommentRepo) -> None:
        self.memo_repo = memo_repo
        self.comment_repo = comment_repo

    async def list_memos(self, title: str | None = None) -> list[Memo]:
        return self.memo_repo.list_memos(title_query=title)

    async def get_memo_with_comments(self, memo_id: int) -> MemoWithComments:
        """
        Load a memo together with its comments, newest comment first.

        Raises:
            MemoNotFoundError: If no memo has the given id
        """
        memo = self.memo_repo.get_memo_by_id(memo_id)
        if memo is None:
            logger.info("Memo %s not found", memo_id)
            raise MemoNotFoundError(memo_id)

        return MemoWithComments(
            memo=memo,
            comments=self.comment_repo.list_comments_by_memo(memo_id),
        )

    async def create_memo(self, title: str | None, content: str | None) -> Memo:
        """
        Raises:
            MemoValidationError: If title or content is blank
        """
        ensure_valid_memo(title, content)
        memo = self.memo_repo.create_memo(title, content)
        logger.debug("Created memo %s", memo.id)
        return memo

    async def add_comment(self, memo_id: int, content: str) -> Comment:
        """
        Raises:
            MemoNotFoundError: If no memo has the given id
        """
        if self.memo_repo.get_memo_by_id(memo_id) is None:
            raise MemoNotFoundError(memo_id)

        return self.comment_repo.create_comment(memo_id, content)
