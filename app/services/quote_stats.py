from __future__ import annotations

from dataclasses import dataclass

from app.services.quote_metrics import MetricsRegistry
from app.services.quote_store import QuoteStore


@dataclass(frozen=True)
class StatsSnapshot:
    total_quotes: int
    total_views: int
    quotes_added: int
    profanity_blocked: int


class QuoteStats:
    def __init__(self, store: QuoteStore, metrics: MetricsRegistry):
        self.store = store
        self.metrics = metrics

    def snapshot(self) -> StatsSnapshot:
        store_stats = self.store.get_stats()
        return StatsSnapshot(
            total_quotes=store_stats["total_quotes"],
            total_views=store_stats["total_views"],
            quotes_added=int(self.metrics.value("quotes_added_total")),
            profanity_blocked=int(self.metrics.value("profanity_blocked_total")),
        )
