"""Card Transfer API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map CardTransferError -> structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup and disposed on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event
    - Three error handler layers: CardTransferError (domain), RequestValidationError
      (Pydantic), Exception (catch-all)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from card_transfer.api.error_handlers import register_error_handlers
from card_transfer.infrastructure.database import init_db, close_db
from card_transfer.infrastructure.observability import setup_logging
from card_transfer.config import get_settings
from card_transfer.api.routes import cards, health, transactions, transfers

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info(f"Card Transfer API started for {settings.bank_name}")
    yield
    await close_db()
    logger.info("Card Transfer API shutting down")


app = FastAPI(
    title="Card Transfer API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(cards.router)
app.include_router(transfers.router)
app.include_router(transactions.router)

register_error_handlers(app)
