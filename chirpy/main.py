import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles
from slowapi.errors import RateLimitExceeded
from sqlalchemy.exc import SQLAlchemyError

from chirpy.config.settings import settings
from chirpy.database import client as db_client
from chirpy.features.admin.metrics import FILESERVER_PREFIX, ApiMetrics, fileserver_metrics_middleware
from chirpy.features.admin.router import router as admin_router
from chirpy.features.auth.router import router as auth_router
from chirpy.features.chirp.router import router as chirp_router
from chirpy.features.polka.router import router as polka_router
from chirpy.features.user.router import router as user_router
from chirpy.shared.middlewares.response_logging import log_non_ok_responses_middleware
from chirpy.shared.rate_limit import limiter, rate_limit_handler

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).parent / "static"


async def storage_failure_handler(request: Request, exc: Exception) -> JSONResponse:
    """Surface database errors as a generic 500 without internals."""
    logger.exception("Database operation failed", exc_info=exc)
    return JSONResponse(
        status_code=500,
        content={"detail": "Something went wrong on our end"},
    )


@asynccontextmanager
async def lifespan(_: FastAPI):
    """Handle startup and shutdown events."""
    # Startup
    await db_client.init_db()
    yield
    # Shutdown
    await db_client.close_db()


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

# Process-wide state, created once per application
app.state.metrics = ApiMetrics()

# Rate limiting
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, rate_limit_handler)

app.add_exception_handler(SQLAlchemyError, storage_failure_handler)

app.middleware("http")(fileserver_metrics_middleware)
app.middleware("http")(log_non_ok_responses_middleware)

# Router Registration

api_routers: list[APIRouter] = [
    auth_router,
    user_router,
    chirp_router,
    polka_router,
]

for router in api_routers:
    app.include_router(router, prefix=settings.api_prefix)

app.include_router(admin_router)

app.mount(FILESERVER_PREFIX, StaticFiles(directory=STATIC_DIR, html=True), name="fileserver")


@app.get(f"{settings.api_prefix}/healthz", response_class=PlainTextResponse)
async def healthz():
    return "OK"
