from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from typing import Optional
import httpx
import structlog

from transaction_gateway.core.config import Settings, get_settings
from transaction_gateway.core.http_client import build_http_client
from transaction_gateway.core.logging import setup_logging
from transaction_gateway.core.middleware import AuditLogMiddleware, SecurityHeadersMiddleware
from transaction_gateway.api.api import api_router
from transaction_gateway.api.schemas import HealthCheckResponse
from transaction_gateway.gateway import TransactionGateway


def create_application(
    settings: Optional[Settings] = None,
    http_client: Optional[httpx.AsyncClient] = None,
) -> FastAPI:
    """Create and configure FastAPI application
    
    Settings are read from the environment when not given, so a missing
    Astra DB setting raises here, before anything is served. A caller-supplied
    ``http_client`` is used as-is and left open on shutdown.
    """
    
    if settings is None:
        settings = get_settings()
    owns_client = http_client is None
    if owns_client:
        http_client = build_http_client(settings)
    
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan events"""
        # Startup
        setup_logging(settings)
        logger = structlog.get_logger()
        
        logger.info(
            "Starting transaction gateway",
            version=settings.APP_VERSION,
            keyspace=settings.ASTRA_DB_REST_KEYSPACE,
        )
        
        yield
        
        # Shutdown
        if owns_client:
            await http_client.aclose()
        logger.info("Shutting down transaction gateway")
    
    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Transaction proxy in front of the Astra DB REST API",
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.gateway = TransactionGateway(settings, http_client)
    
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(AuditLogMiddleware)
    
    if settings.ALLOWED_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.ALLOWED_ORIGINS,
            allow_credentials=settings.ALLOW_CREDENTIALS,
            allow_methods=["GET", "POST"],
            allow_headers=["*"],
        )
    
    app.include_router(api_router, prefix="/api")
    
    @app.get("/health", response_model=HealthCheckResponse)
    async def health_check():
        """Health check endpoint"""
        return HealthCheckResponse(status="healthy", version=settings.APP_VERSION)
    
    return app


def run() -> None:
    """Serve the application with uvicorn"""
    import uvicorn
    
    settings = get_settings()
    uvicorn.run(
        "transaction_gateway.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_config=None,
    )


app = create_application()
