from __future__ import annotations


class QuoteError(Exception):
    kind = "Quote error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class QuoteValidationError(QuoteError):
    kind = "Validation error"


class QuoteModerationError(QuoteError):
    kind = "Profanity detected"


class QuoteStoreError(QuoteError):
    kind = "Store fault"
