from __future__ import annotations

import httpx
import pytest
from fastapi import FastAPI

from adventure_board.api.middleware.rate_limit import RateLimitMiddleware


def _app(max_requests: int, window_ms: int = 60_000) -> FastAPI:
    app = FastAPI()
    app.add_middleware(RateLimitMiddleware, window_ms=window_ms, max_requests=max_requests)

    @app.get("/api/adventures")
    async def adventures():
        return {"success": True, "adventures": []}

    @app.get("/api/health")
    async def health():
        return {"success": True}

    return app


def _client(app: FastAPI) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test")


@pytest.mark.asyncio
async def test_blocks_after_threshold() -> None:
    async with _client(_app(max_requests=2)) as client:
        statuses = [(await client.get("/api/adventures")).status_code for _ in range(3)]
        blocked = await client.get("/api/adventures")

    assert statuses == [200, 200, 429]
    assert blocked.json() == {
        "success": False,
        "error": "Too many requests from this IP, please try again later.",
    }
    assert int(blocked.headers["Retry-After"]) >= 1


@pytest.mark.asyncio
async def test_counts_per_forwarded_ip() -> None:
    async with _client(_app(max_requests=1)) as client:
        a = await client.get("/api/adventures", headers={"X-Forwarded-For": "10.0.0.1, 172.16.0.1"})
        b = await client.get("/api/adventures", headers={"X-Forwarded-For": "10.0.0.2"})
        a_again = await client.get("/api/adventures", headers={"X-Forwarded-For": "10.0.0.1"})

    assert (a.status_code, b.status_code, a_again.status_code) == (200, 200, 429)


@pytest.mark.asyncio
async def test_health_is_never_limited() -> None:
    async with _client(_app(max_requests=1)) as client:
        statuses = [(await client.get("/api/health")).status_code for _ in range(3)]

    assert statuses == [200, 200, 200]


@pytest.mark.asyncio
async def test_window_resets() -> None:
    async with _client(_app(max_requests=1, window_ms=0)) as client:
        statuses = [(await client.get("/api/adventures")).status_code for _ in range(3)]

    assert statuses == [200, 200, 200]


@pytest.mark.asyncio
async def test_rate_limit_headers() -> None:
    async with _client(_app(max_requests=5)) as client:
        resp = await client.get("/api/adventures")

    assert resp.headers["X-RateLimit-Limit"] == "5"
    assert resp.headers["X-RateLimit-Remaining"] == "4"
