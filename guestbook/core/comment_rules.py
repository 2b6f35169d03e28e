"""Comment Rules — pure validation shared by every store.

Invariants:
    - require_comment_text() accepts any non-empty str, whitespace included
    - None, non-str and "" raise ValidationError with the public message
"""

from guestbook.core.errors import ValidationError

TEXT_REQUIRED_MESSAGE = "Comment text is required"


def require_comment_text(text: object) -> str:
    """Return text unchanged, or raise ValidationError if it is missing/empty."""
    if not isinstance(text, str) or not text:
        raise ValidationError(TEXT_REQUIRED_MESSAGE, field="text")
    return text
