from __future__ import annotations

from prometheus_client import CONTENT_TYPE_LATEST, CollectorRegistry, Counter, Histogram, generate_latest

REQUEST_DURATION_BUCKETS = (0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1, 2.5, 5)


class MetricsRegistry:
    """Owns a private collector registry, so each app or test gets its own counters."""

    content_type = CONTENT_TYPE_LATEST

    def __init__(self):
        self.registry = CollectorRegistry(auto_describe=True)
        self.quotes_served = Counter(
            "quotes_served",
            "Total number of random quotes served",
            registry=self.registry,
        )
        self.quotes_added = Counter(
            "quotes_added",
            "Total number of quotes successfully added",
            registry=self.registry,
        )
        self.profanity_blocked = Counter(
            "profanity_blocked",
            "Total number of quotes blocked due to profanity",
            registry=self.registry,
        )
        self.http_requests = Counter(
            "http_requests",
            "Total number of HTTP requests received",
            ["method", "route", "status"],
            registry=self.registry,
        )
        self.request_duration = Histogram(
            "http_request_duration_seconds",
            "Histogram of HTTP request durations in seconds",
            ["method", "route"],
            buckets=REQUEST_DURATION_BUCKETS,
            registry=self.registry,
        )

    def observe_request(self, method: str, route: str, status: int | str, duration_seconds: float) -> None:
        self.http_requests.labels(method=method, route=route, status=str(status)).inc()
        self.request_duration.labels(method=method, route=route).observe(max(float(duration_seconds), 0.0))

    def value(self, name: str, labels: dict[str, str] | None = None) -> float:
        return float(self.registry.get_sample_value(name, labels or {}) or 0.0)

    def render(self) -> bytes:
        return generate_latest(self.registry)
