"""FastAPI application entrypoint."""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fabric_dashboard.api.dependencies import get_menu_writer
from fabric_dashboard.api.routes import router
from fabric_dashboard.config import settings, use_supabase_store
from fabric_dashboard.logging_config import configure_logging

logger = structlog.get_logger()


# ---------------------------------------------------------------------------
# CORS configuration
# ---------------------------------------------------------------------------

_DEFAULT_ORIGINS = {
    "http://localhost:5173",
    "http://localhost:8080",
    "http://127.0.0.1:5173",
    "http://127.0.0.1:8080",
}


def _get_allowed_origins() -> set[str]:
    origins = set(_DEFAULT_ORIGINS)
    if settings.allowed_origins:
        origins.update(o.strip() for o in settings.allowed_origins.split(",") if o.strip())
    return origins


def _build_origin_regex(origins: set[str]) -> str | None:
    """Build a regex matching preview deployments of the configured origins.

    For example, "https://fabric-dashboard.lovable.app" also admits
    "https://preview--fabric-dashboard.lovable.app".
    """
    patterns: list[str] = []
    for origin in origins:
        if "lovable.app" in origin:
            patterns.append(r"https://[a-zA-Z0-9\-]+\.lovable\.app")
        elif "vercel.app" in origin:
            patterns.append(r"https://[a-zA-Z0-9\-]+\.vercel\.app")
    if not patterns:
        return None
    unique = sorted(set(patterns))
    return "^(" + "|".join(unique) + ")$"


_ALLOWED_ORIGINS = _get_allowed_origins()
_ORIGIN_REGEX = _build_origin_regex(_ALLOWED_ORIGINS)


# ---------------------------------------------------------------------------
# App lifecycle
# ---------------------------------------------------------------------------


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging on startup and flush queued menu writes on shutdown."""
    configure_logging()
    logger.info(
        "app.startup",
        allowed_origins=sorted(_ALLOWED_ORIGINS),
        origin_regex=_ORIGIN_REGEX,
        menu_store="supabase" if use_supabase_store() else "memory",
    )
    try:
        yield
    finally:
        await get_menu_writer().flush()
        logger.info("app.shutdown")


app = FastAPI(
    title="Fabric Order Dashboard",
    description="Fabric purchase-order dashboard backend",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(_ALLOWED_ORIGINS),
    allow_origin_regex=_ORIGIN_REGEX,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


@app.get("/health")
async def health_check():
    return {"status": "ok"}
