"""File server hit counter."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from fastapi import Request, Response

FILESERVER_PREFIX = "/app"


@dataclass
class ApiMetrics:
    """Process-wide hit counter.

    Created once per application and kept on ``app.state.metrics``. Only the
    file server middleware increments it and only the admin reset zeroes it.
    """

    fileserver_hits: int = 0

    def record_hit(self) -> None:
        self.fileserver_hits += 1

    def reset(self) -> None:
        self.fileserver_hits = 0


def get_metrics(request: Request) -> ApiMetrics:
    """Dependency returning the application's metrics."""
    return request.app.state.metrics


async def fileserver_metrics_middleware(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """Count requests served from the static file server."""
    path = request.url.path
    if path == FILESERVER_PREFIX or path.startswith(f"{FILESERVER_PREFIX}/"):
        get_metrics(request).record_hit()
    return await call_next(request)
