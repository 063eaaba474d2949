from dataclasses import dataclass, field


TITLE_REQUIRED_MESSAGE = "タイトルを入力してください"
CONTENT_REQUIRED_MESSAGE = "コンテンツを入力してください"


class MemoValidationError(ValueError):
    """Raised when a memo fails validation"""

    def __init__(self, messages: list[str]) -> None:
        super().__init__(", ".join(messages))
        self.messages = messages


@dataclass
class MemoValidationResult:
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors


def _is_blank(value: str | None) -> bool:
    return value is None or value.strip() == ""


def validate_memo(title: str | None, content: str | None) -> MemoValidationResult:
    """
    Check that title and content are present.

    Rules run in a fixed order (title, then content) and every violated
    rule adds its own message, so both messages are returned when both
    fields are blank.
    """
    result = MemoValidationResult()

    if _is_blank(title):
        result.errors.append(TITLE_REQUIRED_MESSAGE)

    if _is_blank(content):
        result.errors.append(CONTENT_REQUIRED_MESSAGE)

    return result


def ensure_valid_memo(title: str | None, content: str | None) -> None:
    """
    Raises:
        MemoValidationError: If title or content is blank
    """
    result = validate_memo(title, content)
    if not result.is_valid:
        raise MemoValidationError(result.errors)
