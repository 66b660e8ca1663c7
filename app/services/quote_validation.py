from __future__ import annotations

from typing import Any

from app.core.config import settings
from app.services.quote_errors import QuoteValidationError

_ID_DIGITS = "0123456789"


def validate_quote_submission(
    text: Any,
    author: Any,
    *,
    text_max_length: int | None = None,
    author_max_length: int | None = None,
) -> tuple[str, str]:
    text_limit = settings.QUOTE_TEXT_MAX_LENGTH if text_max_length is None else int(text_max_length)
    author_limit = settings.QUOTE_AUTHOR_MAX_LENGTH if author_max_length is None else int(author_max_length)

    if not text or not author:
        raise QuoteValidationError('Both "text" and "author" fields are required')
    if not isinstance(text, str) or not isinstance(author, str):
        raise QuoteValidationError('Both "text" and "author" must be strings')
    if not text.strip() or not author.strip():
        raise QuoteValidationError('Both "text" and "author" cannot be empty')
    # Limits apply to the submitted value, before trimming.
    if len(text) > text_limit:
        raise QuoteValidationError(f"Quote text cannot exceed {text_limit} characters")
    if len(author) > author_limit:
        raise QuoteValidationError(f"Author name cannot exceed {author_limit} characters")
    return text.strip(), author.strip()


def validate_quote_id(raw: Any) -> int:
    if isinstance(raw, bool):
        raise QuoteValidationError("Quote id must be a positive integer")
    if isinstance(raw, int):
        value = raw
    else:
        candidate = str(raw or "").strip()
        if not candidate or any(ch not in _ID_DIGITS for ch in candidate):
            raise QuoteValidationError("Quote id must be a positive integer")
        value = int(candidate)
    if value <= 0:
        raise QuoteValidationError("Quote id must be a positive integer")
    return value
