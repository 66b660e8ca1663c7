import os
import unittest

from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

# Ensure settings can be initialized in test environments
os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")

from app.data.quotes_seed import INITIAL_QUOTES
from app.models.quote import Quote
from app.scripts.seed_quotes import seed_quotes
from app.services.quote_store import QuoteStore


class QuotesSeedTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.engine = create_engine(
            "sqlite+pysqlite:///:memory:",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        Quote.__table__.create(bind=cls.engine)
        cls.store = QuoteStore(cls.engine)

    @classmethod
    def tearDownClass(cls):
        Quote.__table__.drop(bind=cls.engine)
        cls.engine.dispose()

    def setUp(self):
        for quote in self.store.get_all_quotes():
            self.store.delete_quote(quote.id)

    def test_seed_fills_empty_store_and_is_idempotent(self):
        created = seed_quotes(self.store, INITIAL_QUOTES)
        self.assertEqual(created, len(INITIAL_QUOTES))
        self.assertEqual(self.store.count(), len(INITIAL_QUOTES))

        created2 = seed_quotes(self.store, INITIAL_QUOTES)
        self.assertEqual(created2, 0)
        self.assertEqual(self.store.count(), len(INITIAL_QUOTES))

    def test_seed_skips_non_empty_store(self):
        self.store.add_quote("Already here", "Someone")
        self.assertEqual(seed_quotes(self.store, INITIAL_QUOTES), 0)
        self.assertEqual(self.store.count(), 1)

    def test_seed_skips_blank_items(self):
        created = seed_quotes(self.store, [{"text": "  ", "author": "Nobody"}, {"text": "Kept", "author": " A "}])
        self.assertEqual(created, 1)
        self.assertEqual(self.store.get_all_quotes()[0].author, "A")

    def test_seed_quotes_pass_moderation_and_limits(self):
        from app.services.moderation import ProfanityFilter, validate_quote
        from app.services.quote_validation import validate_quote_submission

        moderation = ProfanityFilter()
        for item in INITIAL_QUOTES:
            text, author = validate_quote_submission(item["text"], item["author"])
            self.assertTrue(validate_quote(moderation, text, author).is_valid, item)
