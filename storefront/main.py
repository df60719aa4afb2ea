"""
Application entry point.
Run with:  uvicorn storefront.main:app --reload
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storefront.core.logging_config import configure_logging
from storefront.core.config import settings
from storefront.core.exception_handlers import register_exception_handlers
from storefront.core.security import password_encoder
from storefront.api.router import api_router
from storefront.db.database import get_connection, init_db
from storefront.db.seeder import seed_admin

configure_logging()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application instance."""
    logger = logging.getLogger(__name__)
    logger.info("Starting FastAPI application setup")
    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="E-commerce backend for products, categories, users and orders.",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # ── Middleware ──────────────────────────────────────────────────────────
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Error translation ───────────────────────────────────────────────────
    register_exception_handlers(app)

    # ── Routers ─────────────────────────────────────────────────────────────
    app.include_router(api_router)

    @app.get("/health", tags=["Health"])
    def health() -> dict:
        return {"status": "healthy", "version": settings.APP_VERSION}

    # ── Startup ─────────────────────────────────────────────────────────────
    @app.on_event("startup")
    def on_startup() -> None:
        """Create the schema and, in development, the default admin."""
        logger.info("Initializing database")
        init_db()
        if settings.SEED_ADMIN:
            conn = get_connection()
            try:
                seed_admin(conn, password_encoder)
            finally:
                conn.close()

    return app


app = create_app()
