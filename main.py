from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from typing import Optional
import uvicorn
import logging

from config import Settings, settings as default_settings, configure_logging
from core.error_handlers import register_exception_handlers
from core.middleware import RequestLoggingMiddleware
from database.db import Database
from models.common import HealthCheckResponse
from routes import (
    auth_router,
    pets_router,
    favorites_router,
    adoption_router,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Maneja el ciclo de vida de la aplicación."""
    database: Database = app.state.database
    # Startup
    try:
        database.create_tables()
    except Exception as e:
        logger.warning(f"No se pudieron crear tablas en la base de datos: {e}")
    yield
    # Shutdown
    database.dispose()
    logger.info("Conexiones de base de datos cerradas")


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """
    Construye la aplicación.

    Args:
        settings: Configuración (por defecto la global)
        database: Handle de base de datos; si no se pasa se crea desde DATABASE_URL
    """
    settings = settings or default_settings
    database = database or Database(settings.database_url)

    app = FastAPI(
        title=settings.app_name,
        description="API de adopción de mascotas: pets, favoritos e interés de adopción.",
        version=settings.app_version,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
        debug=settings.debug_mode
    )
    app.state.settings = settings
    app.state.database = database

    app.add_middleware(RequestLoggingMiddleware)
    # CORS para el frontend SPA
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app, debug=settings.debug_mode)

    @app.get("/")
    async def root():
        """Endpoint raíz con información de la API."""
        return {
            "message": settings.app_name,
            "version": settings.app_version,
            "status": "active",
            "environment": "production" if settings.is_production else "development",
            "docs": "/docs",
            "redoc": "/redoc"
        }

    @app.get("/health", response_model=HealthCheckResponse)
    def health_check(request: Request):
        """Health check endpoint con verificación de base de datos."""
        db_status = "connected" if request.app.state.database.ping() else "disconnected"
        return HealthCheckResponse(
            status="healthy" if db_status == "connected" else "unhealthy",
            service=settings.app_name,
            version=settings.app_version,
            database=db_status,
            environment="production" if settings.is_production else "development",
        )

    app.include_router(auth_router)
    app.include_router(pets_router)
    app.include_router(favorites_router)
    app.include_router(adoption_router)

    logger.info(f"{settings.app_name} v{settings.app_version} usando {database.masked_url}")
    return app


# Configurar logging una sola vez al inicio
configure_logging()

app = create_app()

if __name__ == "__main__":
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=8000,
        log_level="info"
    )
