from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.engine import Engine

from app.core.config import settings
from app.models.quote import Quote
from app.services.moderation import WordClassifier, build_profanity_filter, validate_quote
from app.services.quote_errors import QuoteModerationError
from app.services.quote_metrics import MetricsRegistry
from app.services.quote_stats import QuoteStats, StatsSnapshot
from app.services.quote_store import QuoteStore
from app.services.quote_validation import validate_quote_id, validate_quote_submission

_LOG = logging.getLogger("app.quotes")


class QuoteService:
    """Entry point for the HTTP layer: validation, moderation, storage and counters."""

    def __init__(
        self,
        store: QuoteStore,
        *,
        metrics: MetricsRegistry | None = None,
        classifier: WordClassifier | None = None,
    ):
        self.store = store
        self.metrics = metrics or MetricsRegistry()
        self.classifier = classifier or build_profanity_filter()
        self.stats = QuoteStats(store, self.metrics)

    def fetch_random_quote(self) -> Quote | None:
        quote = self.store.get_random_quote()
        if quote is not None:
            self.metrics.quotes_served.inc()
        return quote

    def submit_quote(self, text: Any, author: Any) -> Quote:
        clean_text, clean_author = validate_quote_submission(text, author)
        verdict = validate_quote(self.classifier, clean_text, clean_author)
        if not verdict.is_valid:
            self.metrics.profanity_blocked.inc()
            _LOG.warning("quote submission blocked: %s", verdict.reason)
            raise QuoteModerationError(verdict.reason or "Quote contains inappropriate language")
        quote = self.store.add_quote(clean_text, clean_author)
        self.metrics.quotes_added.inc()
        _LOG.info("quote added id=%s", quote.id)
        return quote

    def list_quotes(self) -> list[Quote]:
        return self.store.get_all_quotes()

    def remove_quote(self, raw_id: Any) -> bool:
        quote_id = validate_quote_id(raw_id)
        removed = self.store.delete_quote(quote_id)
        if removed:
            _LOG.info("quote deleted id=%s", quote_id)
        return removed

    def get_statistics(self) -> StatsSnapshot:
        return self.stats.snapshot()

    def export_metrics(self) -> bytes:
        return self.metrics.render()


def build_quote_service(bind: Engine) -> QuoteService:
    store = QuoteStore(bind, random_pick_attempts=settings.RANDOM_PICK_ATTEMPTS)
    return QuoteService(store)
