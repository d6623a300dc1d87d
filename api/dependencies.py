"""
Dependencias y helpers de request compartidos por rutas y middleware.

Este módulo proporciona:
- Acceso a `Settings` y al rate limiter guardados en `app.state`
- El request id asignado por el middleware
- La IP del cliente (respetando `X-Forwarded-For` si hay proxy de confianza)
"""

import uuid

from fastapi import Request

from blueprint_core.config import Settings
from blueprint_core.domain_models import format_timestamp
from blueprint_core.engine import utc_now

REQUEST_ID_HEADER = "x-request-id"


def now_iso() -> str:
    return format_timestamp(utc_now())


def new_request_id() -> str:
    return uuid.uuid4().hex


def get_settings_from_app(request: Request) -> Settings:
    """Dependencia de FastAPI: devuelve los `Settings` con que se creó la app."""
    return request.app.state.settings


def get_request_id(request: Request) -> str:
    """
    Devuelve el request id asignado por `RequestContextMiddleware`.

    Si el request no pasó por el middleware (ej: tests de unidad de un
    handler), se genera uno nuevo para no romper el sobre de error.
    """
    request_id = getattr(request.state, "request_id", None)
    if not request_id:
        request_id = new_request_id()
        request.state.request_id = request_id
    return request_id


def client_address(request: Request, trust_proxy: bool) -> str:
    """
    IP del cliente, usada como clave del rate limit y en el log de acceso.

    Con `trust_proxy`, se usa el primer valor de `X-Forwarded-For` (el
    cliente original según el proxy).
    """
    if trust_proxy:
        forwarded = request.headers.get("x-forwarded-for", "")
        first = forwarded.split(",")[0].strip()
        if first:
            return first
    if request.client and request.client.host:
        return request.client.host
    return "unknown"
