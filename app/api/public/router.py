from fastapi import APIRouter
from app.api.public import quotes

router = APIRouter()
router.include_router(quotes.router, tags=["Quotes"])
