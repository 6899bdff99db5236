from collections import deque
from collections.abc import Awaitable
from collections.abc import Callable
from collections.abc import Mapping
from threading import RLock
from time import monotonic
from typing import NamedTuple

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from statscene.settings import Settings


class RouteLimit(NamedTuple):
    requests: int
    window_seconds: int


def scene_route_limits(
    app_settings: Settings,
) -> dict[tuple[str, str], RouteLimit]:
    """Per-route budgets.

    `GET /scene/me` costs two GitHub requests per call, while
    `POST /scene/render` only renders the posted record, so each route has
    its own budget and its own buckets.
    """

    window = max(1, app_settings.rate_limit_window_seconds)
    return {
        ("GET", "/scene/me"): RouteLimit(
            max(1, app_settings.rate_limit_per_minute), window
        ),
        ("POST", "/scene/render"): RouteLimit(
            max(1, app_settings.render_rate_limit_per_minute), window
        ),
    }


class SlidingWindow:
    """Request timestamps per (route, client) key."""

    def __init__(self) -> None:
        self._hits: dict[tuple[str, str, str], deque[float]] = {}
        self._lock = RLock()

    def acquire(
        self, key: tuple[str, str, str], limit: RouteLimit, now: float
    ) -> int | None:
        """Record a hit for key, or return seconds to wait when over limit."""

        with self._lock:
            hits = self._hits.setdefault(key, deque())
            while hits and hits[0] <= now - limit.window_seconds:
                hits.popleft()

            if len(hits) >= limit.requests:
                return max(1, int(limit.window_seconds - (now - hits[0])))

            hits.append(now)
            return None


class SceneRateLimitMiddleware(BaseHTTPMiddleware):
    """Rejects clients exceeding the budget of a scene route with 429."""

    def __init__(self, app, limits: Mapping[tuple[str, str], RouteLimit]) -> None:
        super().__init__(app)
        self.limits = dict(limits)
        self.window = SlidingWindow()

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        route = (request.method, request.url.path)
        limit = self.limits.get(route)
        if limit is None:
            return await call_next(request)

        retry_after = self.window.acquire(
            (*route, client_address(request)), limit, monotonic()
        )
        if retry_after is not None:
            return JSONResponse(
                status_code=429,
                content={"detail": "Too Many Requests"},
                headers={"Retry-After": str(retry_after)},
            )

        return await call_next(request)


def client_address(request: Request) -> str:
    # First X-Forwarded-For entry is the original client behind a proxy.
    forwarded_for = request.headers.get("x-forwarded-for", "")
    address = forwarded_for.split(",")[0].strip()
    if address:
        return address
    if request.client and request.client.host:
        return request.client.host
    return "unknown"
