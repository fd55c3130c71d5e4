"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from formcheck import __version__
from formcheck.api import get_loader, rules_router, validate_router
from formcheck.core import configure_logging, get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    settings = get_settings()
    configure_logging()
    logger.info("Starting %s...", settings.app_name)
    logger.info("Rules directory: %s", settings.rules_dir)

    loader = get_loader()
    logger.info("Loaded %d rule map(s)", len(loader.get_all_maps()))

    yield

    logger.info("Shutting down...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Declarative field validation over rule maps",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.include_router(rules_router)     # /rules
    app.include_router(validate_router)  # /validate

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "name": settings.app_name,
            "version": __version__,
            "endpoints": {
                "rules": "/rules - Rule map inspection",
                "validate": "/validate/form, /validate/field - Value validation",
            },
        }

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
