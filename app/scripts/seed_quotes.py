from __future__ import annotations

from app.data.quotes_seed import INITIAL_QUOTES
from app.db.session import engine
from app.services.quote_store import QuoteStore


def seed_quotes(store: QuoteStore, quotes: list[dict]) -> int:
    if store.count() > 0:
        return 0

    created = 0
    for item in quotes:
        text = str(item["text"]).strip()
        author = str(item["author"]).strip()
        if not text or not author:
            continue
        store.add_quote(text, author)
        created += 1
    return created


def main() -> None:
    store = QuoteStore(engine)
    created = seed_quotes(store, INITIAL_QUOTES)
    total = store.count()
    print(f"quotes seed done: created={created}, total={total}")


if __name__ == "__main__":
    main()
