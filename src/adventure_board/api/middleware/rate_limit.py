# src/adventure_board/api/middleware/rate_limit.py
"""Fixed-window, per-IP rate limiting."""

import time
from typing import Dict, Tuple

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse

from adventure_board.config import settings


class RateLimitMiddleware(BaseHTTPMiddleware):
    """
    Counts requests per client IP inside a fixed window.

    Once ``max_requests`` is reached the remaining requests of the window get
    a 429 envelope. Health probes are never limited.
    """

    def __init__(self, app, window_ms: int = None, max_requests: int = None):
        super().__init__(app)
        self.window = (window_ms if window_ms is not None else settings.RATE_LIMIT_WINDOW_MS) / 1000.0
        self.max_requests = max_requests if max_requests is not None else settings.RATE_LIMIT_MAX_REQUESTS

        # ip -> (window start, count)
        self._windows: Dict[str, Tuple[float, int]] = {}

    def _get_client_ip(self, request: Request) -> str:
        # Behind a proxy the first hop is the real client
        forwarded = request.headers.get("X-Forwarded-For")
        if forwarded:
            return forwarded.split(",")[0].strip()
        return request.client.host if request.client else "unknown"

    def _hit(self, ip: str, now: float) -> Tuple[bool, int, float]:
        started, count = self._windows.get(ip, (now, 0))
        if now - started >= self.window:
            started, count = now, 0
        count += 1
        self._windows[ip] = (started, count)

        # Drop expired windows so the map does not grow without bound
        if len(self._windows) > 10000:
            self._windows = {
                k: v for k, v in self._windows.items() if now - v[0] < self.window
            }

        reset_in = max(0.0, self.window - (now - started))
        return count <= self.max_requests, max(0, self.max_requests - count), reset_in

    async def dispatch(self, request: Request, call_next) -> Response:
        if request.url.path == "/api/health":
            return await call_next(request)

        allowed, remaining, reset_in = self._hit(self._get_client_ip(request), time.monotonic())
        if not allowed:
            return JSONResponse(
                status_code=429,
                content={
                    "success": False,
                    "error": "Too many requests from this IP, please try again later.",
                },
                headers={"Retry-After": str(int(reset_in) + 1)},
            )

        response = await call_next(request)
        response.headers["X-RateLimit-Limit"] = str(self.max_requests)
        response.headers["X-RateLimit-Remaining"] = str(remaining)
        return response
