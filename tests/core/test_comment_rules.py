"""Tests for require_comment_text — pure validation, no IO."""

import pytest

from guestbook.core.comment_rules import TEXT_REQUIRED_MESSAGE, require_comment_text
from guestbook.core.errors import ValidationError


@pytest.mark.parametrize("text", ["hi", " ", "a" * 10_000, "émoji 👋"])
def test_non_empty_strings_pass_through_unchanged(text):
    assert require_comment_text(text) == text


@pytest.mark.parametrize("text", [None, "", 0, b"bytes", {"text": "x"}])
def test_missing_or_non_string_text_is_rejected(text):
    with pytest.raises(ValidationError) as exc_info:
        require_comment_text(text)

    err = exc_info.value
    assert err.message == TEXT_REQUIRED_MESSAGE
    assert err.field == "text"
    assert err.http_status == 400
