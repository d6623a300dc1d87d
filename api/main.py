"""
API HTTP principal del generador de blueprints AIS.

Esta aplicación FastAPI expone endpoints REST que usan el core interno
(blueprint_core.engine) para generar documentos blueprint.

Uso:
    uvicorn api.main:app --reload --port 10000
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from blueprint_core.config import Settings, get_settings

from .errors import register_error_handlers
from .middleware import RateLimitMiddleware, RequestContextMiddleware
from .rate_limit import FixedWindowRateLimiter
from .routes import blueprints, health

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def configure_logging(log_level: str) -> None:
    """Configura logging según `LOG_LEVEL` ("SILENT" apaga todo)."""
    if log_level == "SILENT":
        logging.disable(logging.CRITICAL)
        return
    logging.disable(logging.NOTSET)
    logging.basicConfig(level=getattr(logging, log_level, logging.INFO), format=LOG_FORMAT)


def create_app(
    settings: Optional[Settings] = None,
    rate_limiter: Optional[FixedWindowRateLimiter] = None,
) -> FastAPI:
    """
    Construye la app FastAPI.

    Args:
        settings: Configuración; por defecto `get_settings()` (entorno/.env)
        rate_limiter: Limiter a usar; por defecto uno en memoria según settings

    Returns:
        App lista para uvicorn o para `TestClient`
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    logger.info(f"🚀 Iniciando {settings.service_name} en ambiente: {settings.environment}")

    app = FastAPI(
        title="AIS Blueprint API",
        description="API para generar documentos blueprint a partir de una descripción",
        version="1.0.0",
    )
    app.state.settings = settings
    app.state.rate_limiter = rate_limiter or FixedWindowRateLimiter(
        max_requests=settings.rate_limit_max,
        window_s=settings.rate_limit_window_ms / 1000,
    )

    # Orden: el último agregado es el más externo
    app.add_middleware(
        RateLimitMiddleware,
        limiter=app.state.rate_limiter,
        trust_proxy=settings.trust_proxy,
    )
    logger.info(f"🌐 CORS origins configurados: {settings.cors_origins}")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["x-request-id", "x-ratelimit-limit", "x-ratelimit-remaining", "retry-after"],
    )
    app.add_middleware(RequestContextMiddleware, trust_proxy=settings.trust_proxy)

    register_error_handlers(app)

    # Registrar rutas
    app.include_router(health.router)
    for router in blueprints.routers:
        app.include_router(router)

    for source, path in blueprints.BLUEPRINT_ENDPOINTS.items():
        logger.info(f"📐 Endpoint de blueprint ({source}): {path}")

    return app


app = create_app()
