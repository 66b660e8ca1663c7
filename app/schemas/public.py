from pydantic import BaseModel
from typing import Optional, List


class QuoteRead(BaseModel):
    id: int
    text: str
    author: str
    views: int


class QuoteListItem(QuoteRead):
    created_at: Optional[str] = None


class QuoteEnvelope(BaseModel):
    success: bool = True
    message: Optional[str] = None
    data: QuoteRead


class QuoteListEnvelope(BaseModel):
    success: bool = True
    data: List[QuoteListItem]


class StatsRead(BaseModel):
    totalQuotes: int
    totalRandomQuoteRequests: int
    quotesAdded: int
    profanityBlocked: int


class StatsEnvelope(BaseModel):
    success: bool = True
    data: StatsRead
