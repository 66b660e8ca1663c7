import os
import unittest

os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")

from app.services.quote_errors import QuoteValidationError
from app.services.quote_validation import validate_quote_id, validate_quote_submission


class QuoteSubmissionValidationTests(unittest.TestCase):
    def assertRejected(self, text, author, message):
        with self.assertRaises(QuoteValidationError) as ctx:
            validate_quote_submission(text, author)
        self.assertEqual(ctx.exception.message, message)

    def test_valid_pair_is_trimmed(self):
        self.assertEqual(validate_quote_submission("  Stay hungry.  ", " Steve Jobs "), ("Stay hungry.", "Steve Jobs"))

    def test_missing_fields(self):
        self.assertRejected(None, "Author", 'Both "text" and "author" fields are required')
        self.assertRejected("Text", None, 'Both "text" and "author" fields are required')
        self.assertRejected("", "Author", 'Both "text" and "author" fields are required')

    def test_non_string_fields(self):
        self.assertRejected(42, "Author", 'Both "text" and "author" must be strings')
        self.assertRejected("Text", ["Author"], 'Both "text" and "author" must be strings')

    def test_blank_fields(self):
        self.assertRejected("   ", "Author", 'Both "text" and "author" cannot be empty')
        self.assertRejected("Text", "\t\n", 'Both "text" and "author" cannot be empty')

    def test_text_length_limit(self):
        validate_quote_submission("a" * 1000, "Author")
        self.assertRejected("a" * 1001, "Author", "Quote text cannot exceed 1000 characters")

    def test_text_length_is_checked_before_trimming(self):
        self.assertRejected("a" * 999 + "   ", "Author", "Quote text cannot exceed 1000 characters")

    def test_author_length_limit(self):
        validate_quote_submission("Text", "b" * 100)
        self.assertRejected("Text", "b" * 101, "Author name cannot exceed 100 characters")

    def test_explicit_zero_limit_is_respected(self):
        with self.assertRaises(QuoteValidationError) as ctx:
            validate_quote_submission("Text", "Author", text_max_length=0)
        self.assertEqual(ctx.exception.message, "Quote text cannot exceed 0 characters")
        with self.assertRaises(QuoteValidationError):
            validate_quote_submission("Text", "Author", author_max_length=0)

    def test_first_failure_wins(self):
        # Missing author is reported even though text is also too long.
        self.assertRejected("a" * 2000, None, 'Both "text" and "author" fields are required')
        self.assertRejected("a" * 2000, "b" * 200, "Quote text cannot exceed 1000 characters")


class QuoteIdValidationTests(unittest.TestCase):
    def test_accepts_positive_integers(self):
        self.assertEqual(validate_quote_id("7"), 7)
        self.assertEqual(validate_quote_id(12), 12)

    def test_rejects_malformed_ids(self):
        for raw in ("0", "-3", "abc", "1.5", "", None, 0, True, "12abc"):
            with self.subTest(raw=raw):
                with self.assertRaises(QuoteValidationError):
                    validate_quote_id(raw)
