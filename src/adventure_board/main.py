# src/adventure_board/main.py
"""
Adventure Board API

Read-only JSON endpoints over the bot's adventure/character store.

Usage:
    uvicorn adventure_board.main:app --host 0.0.0.0 --port 3000
    adventure-board-api
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration
import uvicorn

from adventure_board.config import settings
from adventure_board.db.session import DB
from adventure_board.tools.logger import Logger
from adventure_board.api.errors import register_exception_handlers
from adventure_board.api.middleware.rate_limit import RateLimitMiddleware
from adventure_board.api.routers import adventures, characters, health


sentry_sdk.init(
    dsn=settings.SENTRY_DSN,
    environment=settings.ENVIRONMENT,
    traces_sample_rate=1.0,
    integrations=[FastApiIntegration()],
)

_LOG, log_config = Logger().create(
    application="api",
    file_name="adventure_board_api",
    logger_name="adventure_board",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    _LOG.info(f"Adventure Board API starting (environment: {settings.ENVIRONMENT})")
    try:
        await DB.fetch_one("SELECT 1")
        _LOG.info("Database connected successfully")
    except Exception as e:
        # Keep serving; /api/health reports the store state per request
        _LOG.error(f"Database connection failed: {e}")

    try:
        yield
    finally:
        _LOG.info("Shutting down, closing database pool")
        await DB.close()


app = FastAPI(
    title="Adventure Board",
    description="Active adventures, parties and character sheets for the tabletop-RPG bot",
    version=settings.VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

if settings.RATE_LIMIT_ENABLED:
    app.add_middleware(RateLimitMiddleware)

register_exception_handlers(app)


@app.get("/", include_in_schema=False)
async def root():
    return {
        "message": "Adventure Board API",
        "docs_url": "/docs",
        "version": settings.VERSION,
    }


app.include_router(adventures.router, prefix="/api", tags=["Adventures"])
app.include_router(characters.router, prefix="/api", tags=["Characters"])
app.include_router(health.router, prefix="/api", tags=["Health"])


def run() -> None:
    uvicorn.run(app, host=settings.HOST_API, port=settings.PORT_API, log_config=log_config)


if __name__ == "__main__":
    run()
