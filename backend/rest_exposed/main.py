"""
Main FastAPI application hosting the REST exposure bootstrap.
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging
from contextlib import asynccontextmanager

from .config import get_settings
from .plugin import bootstrap
from .routers.health import router as health_router
from .routers.exposure import router as exposure_router
from .services.options import build_option_store


settings = get_settings()
logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: register types and apply stored exposure once
    store = getattr(app.state, "option_store", None) or build_option_store(settings)
    plugin = bootstrap(settings, store)
    app.state.option_store = store
    app.state.hooks = plugin.hooks
    app.state.plugin = plugin
    logger.info(
        "Initialized %d content types (%d configured)",
        len(plugin.registry), len(plugin.enabled_post_types),
    )
    try:
        yield
    finally:
        # Shutdown: the next startup reloads preferences from a fresh store
        for name in ("plugin", "hooks", "option_store"):
            if hasattr(app.state, name):
                delattr(app.state, name)


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in settings.CORS_ORIGINS],
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

# Routers
app.include_router(health_router, prefix=settings.API_PREFIX)
app.include_router(exposure_router, prefix=settings.API_PREFIX)

@app.get("/", tags=["root"])
async def root() -> dict:
    """Simple root endpoint."""
    return {"name": app.title, "version": app.version}
