from __future__ import annotations

import logging
import random
from contextlib import contextmanager
from threading import Lock
from typing import Iterator

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from app.db.session import build_sessionmaker
from app.models.common import utcnow
from app.models.quote import Quote
from app.services.quote_errors import QuoteStoreError

_LOG = logging.getLogger("app.quote_store")

DEFAULT_RANDOM_PICK_ATTEMPTS = 3
# Largest id a signed 64-bit INTEGER column can hold
MAX_QUOTE_ID = 2**63 - 1


class QuoteStore:
    """Owns every quote row and is the only writer of ``views``.

    Operations that touch rows run under one lock and in their own
    transaction, so a random read and a delete of the same quote are
    serialized and view increments are never lost.
    """

    def __init__(self, bind: Engine, *, random_pick_attempts: int = DEFAULT_RANDOM_PICK_ATTEMPTS):
        self._session_factory = build_sessionmaker(bind)
        self._lock = Lock()
        self._random_pick_attempts = max(int(random_pick_attempts), 1)
        self._random = random.SystemRandom()

    @contextmanager
    def _session(self, operation: str) -> Iterator[Session]:
        with self._lock:
            db = self._session_factory()
            try:
                yield db
                db.commit()
            except SQLAlchemyError as exc:
                db.rollback()
                _LOG.exception("quote store operation failed: %s", operation)
                raise QuoteStoreError(f"Failed to {operation}: {exc.__class__.__name__}") from exc
            finally:
                db.close()

    def add_quote(self, text: str, author: str) -> Quote:
        with self._session("add quote") as db:
            row = Quote(text=text, author=author, views=0, created_at=utcnow())
            db.add(row)
            db.flush()
            db.refresh(row)
        return row

    def get_random_quote(self) -> Quote | None:
        with self._session("fetch random quote") as db:
            for _ in range(self._random_pick_attempts):
                ids = db.execute(select(Quote.id)).scalars().all()
                if not ids:
                    return None
                picked_id = self._random.choice(ids)
                result = db.execute(
                    update(Quote).where(Quote.id == picked_id).values(views=Quote.views + 1)
                )
                if result.rowcount != 1:
                    _LOG.info("random quote %s vanished before update; retrying", picked_id)
                    continue
                row = db.get(Quote, picked_id, populate_existing=True)
                if row is not None:
                    return row
            return None

    def get_all_quotes(self) -> list[Quote]:
        with self._session("fetch quotes") as db:
            return list(db.execute(select(Quote).order_by(Quote.created_at.asc(), Quote.id.asc())).scalars().all())

    def delete_quote(self, quote_id: int) -> bool:
        if int(quote_id) > MAX_QUOTE_ID:
            return False
        with self._session("delete quote") as db:
            result = db.execute(delete(Quote).where(Quote.id == int(quote_id)))
            return result.rowcount > 0

    def get_stats(self) -> dict[str, int]:
        with self._session("fetch statistics") as db:
            total_quotes, total_views = db.execute(
                select(func.count(Quote.id), func.coalesce(func.sum(Quote.views), 0))
            ).one()
        return {"total_quotes": int(total_quotes or 0), "total_views": int(total_views or 0)}

    def count(self) -> int:
        with self._session("count quotes") as db:
            return int(db.execute(select(func.count(Quote.id))).scalar_one() or 0)
