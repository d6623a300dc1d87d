"""
Endpoints de health/status.

Siempre disponibles y excluidos del rate limit. No dependen del generador.
"""

import platform

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from blueprint_core.config import Settings

from ..dependencies import get_settings_from_app, now_iso
from .blueprints import BLUEPRINT_ENDPOINTS

router = APIRouter(tags=["health"])

HEALTH_PATHS = ("/healthz", "/health", "/status", "/")


def status_payload(settings: Settings) -> dict:
    return {
        "status": "ok",
        "service": settings.service_name,
        "message": (
            "Deployment successful. MCP online. AIS blueprint endpoints at "
            f"{BLUEPRINT_ENDPOINTS['mcp']} and {BLUEPRINT_ENDPOINTS['api']}."
        ),
        "env": {
            "python": platform.python_version(),
            "port": str(settings.port),
            "logLevel": settings.log_level,
        },
        "time": now_iso(),
    }


@router.get("/")
async def root(settings: Settings = Depends(get_settings_from_app)):
    """Status del servicio."""
    return status_payload(settings)


@router.get("/status")
async def status(settings: Settings = Depends(get_settings_from_app)):
    """Alias de `/`."""
    return status_payload(settings)


@router.get("/health")
async def health():
    return {"status": "ok", "time": now_iso()}


@router.get("/healthz", response_class=PlainTextResponse)
async def healthz():
    """Liveness probe para la plataforma (texto plano)."""
    return "ok"
