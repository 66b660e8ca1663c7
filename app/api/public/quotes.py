from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, Response

from app.core.deps import get_quote_service
from app.schemas.public import (
    QuoteEnvelope,
    QuoteListEnvelope,
    QuoteListItem,
    QuoteRead,
    StatsEnvelope,
    StatsRead,
)
from app.services.quote_errors import QuoteError, QuoteStoreError
from app.services.quote_service import QuoteService

router = APIRouter()
_LOG = logging.getLogger("app.quotes")


def _error(status_code: int, error: str, message: str | None = None) -> JSONResponse:
    body = {"success": False, "error": error}
    if message is not None:
        body["message"] = message
    return JSONResponse(body, status_code=status_code)


def _store_failure(action: str, exc: QuoteStoreError) -> JSONResponse:
    _LOG.error("%s: %s", action, exc.message)
    return _error(500, action, exc.message)


async def _json_body(request: Request) -> Any:
    try:
        return await request.json()
    except ValueError:
        return None


@router.get("/quote", response_model=QuoteEnvelope, response_model_exclude_none=True)
def get_random_quote(service: QuoteService = Depends(get_quote_service)):
    try:
        quote = service.fetch_random_quote()
    except QuoteStoreError as exc:
        return _store_failure("Failed to fetch quote", exc)
    if quote is None:
        return _error(404, "No quotes found in database")
    return QuoteEnvelope(data=QuoteRead(**quote.as_public_dict()))


@router.post("/quote", response_model=QuoteEnvelope, status_code=201)
def add_quote(payload: Any = Depends(_json_body), service: QuoteService = Depends(get_quote_service)):
    # Non-object bodies fall through to the "required" validation message.
    submission = payload if isinstance(payload, dict) else {}
    try:
        quote = service.submit_quote(submission.get("text"), submission.get("author"))
    except QuoteStoreError as exc:
        return _store_failure("Failed to add quote", exc)
    except QuoteError as exc:
        return _error(400, exc.kind, exc.message)
    return QuoteEnvelope(message="Quote added successfully", data=QuoteRead(**quote.as_public_dict()))


@router.get("/quotes", response_model=QuoteListEnvelope)
def list_quotes(service: QuoteService = Depends(get_quote_service)):
    try:
        quotes = service.list_quotes()
    except QuoteStoreError as exc:
        return _store_failure("Failed to fetch quotes", exc)
    return QuoteListEnvelope(data=[QuoteListItem(**q.as_dict()) for q in quotes])


@router.get("/stats", response_model=StatsEnvelope)
def get_stats(service: QuoteService = Depends(get_quote_service)):
    try:
        snapshot = service.get_statistics()
    except QuoteStoreError as exc:
        return _store_failure("Failed to fetch statistics", exc)
    return StatsEnvelope(
        data=StatsRead(
            totalQuotes=snapshot.total_quotes,
            totalRandomQuoteRequests=snapshot.total_views,
            quotesAdded=snapshot.quotes_added,
            profanityBlocked=snapshot.profanity_blocked,
        )
    )


@router.delete("/quote/{quote_id}")
def delete_quote(quote_id: str, service: QuoteService = Depends(get_quote_service)):
    try:
        removed = service.remove_quote(quote_id)
    except QuoteStoreError as exc:
        return _store_failure("Failed to delete quote", exc)
    except QuoteError as exc:
        return _error(400, exc.kind, exc.message)
    if not removed:
        return _error(404, "Not Found", f"Quote with id {quote_id} does not exist")
    return {"success": True, "message": "Quote deleted successfully"}


@router.get("/metrics")
def metrics(service: QuoteService = Depends(get_quote_service)):
    return Response(content=service.export_metrics(), media_type=service.metrics.content_type)
