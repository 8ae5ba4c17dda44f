"""
HexaShop — FastAPI ASGI Entry Point
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hexashop.api.v1.router import api_router
from hexashop.config import get_settings
from hexashop.core.auth_middleware import JWTAuthMiddleware
from hexashop.core.logging_config import setup_logging
from hexashop.core.responses import register_exception_handlers
from hexashop.db.session import create_tables

settings = get_settings()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: logging setup and optional schema creation."""
    setup_logging()
    if settings.AUTO_CREATE_TABLES:
        await create_tables()
    logger.info("HexaShop started (environment=%s)", settings.ENVIRONMENT)
    yield
    logger.info("HexaShop shutting down")


def create_app() -> FastAPI:
    app = FastAPI(
        title="HexaShop",
        description="Posts, products and users behind a hexagonal FastAPI backend",
        version="0.1.0",
        docs_url="/api/v1/docs",
        redoc_url="/api/v1/redoc",
        openapi_url="/api/v1/openapi.json",
        lifespan=lifespan,
    )
    app.add_middleware(JWTAuthMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.include_router(api_router, prefix="/api/v1")

    @app.get("/health")
    async def health():
        """Health check for load balancers and Docker."""
        return {"status": "ok", "service": "hexashop"}

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn on the configured port."""
    import uvicorn

    uvicorn.run("hexashop.main:app", host="0.0.0.0", port=settings.PORT)
