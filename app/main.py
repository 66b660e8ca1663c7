import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.core.config import settings
from app.core.http_hardening import install_http_hardening
from app.api.public.router import router as public_router
from app.data.quotes_seed import INITIAL_QUOTES
from app.db.session import Base, engine
from app.scripts.seed_quotes import seed_quotes
from app.services.quote_service import build_quote_service

logging.getLogger("app").setLevel(settings.LOG_LEVEL.upper())
_LOG = logging.getLogger("app.main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    Base.metadata.create_all(bind=engine)
    if settings.SEED_QUOTES_ON_STARTUP:
        created = seed_quotes(app.state.quote_service.store, INITIAL_QUOTES)
        if created:
            _LOG.info("seeded %s initial quotes", created)
    yield
    engine.dispose()


app = FastAPI(title=settings.APP_NAME, version="1.0.0", lifespan=lifespan)
app.state.quote_service = build_quote_service(engine)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)
install_http_hardening(app)

app.include_router(public_router)

@app.get("/", include_in_schema=False)
def landing():
    return {
        "service": settings.APP_NAME,
        "status": "ok",
        "endpoints": {
            "GET /quote": "Get a random quote",
            "POST /quote": "Add a new quote",
            "GET /quotes": "List all quotes",
            "DELETE /quote/{id}": "Delete a quote",
            "GET /stats": "Service statistics",
            "GET /metrics": "Prometheus metrics",
            "GET /health": "Health check",
        },
    }

@app.get("/health")
def health():
    return {"success": True, "status": "healthy", "timestamp": datetime.now(timezone.utc).isoformat()}
