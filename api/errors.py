"""
Errores HTTP de la API y sus handlers.

Todas las respuestas de error comparten el mismo sobre:

    {"ok": false, "error": "<CODE>", "message": "...", "requestId": "...", "time": "..."}

Los errores 5xx nunca exponen el detalle al cliente: el traceback se loguea
con el request id.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .dependencies import get_request_id, now_iso

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """
    Error de request con status HTTP y código estable.

    Args:
        status_code: Status HTTP (400, 413, 429, ...)
        code: Código estable para clientes (ej: "BAD_JSON")
        message: Mensaje legible
        headers: Headers extra para la respuesta (ej: retry-after)
    """

    def __init__(
        self,
        status_code: int,
        code: str,
        message: str,
        headers: Optional[Dict[str, str]] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.code = code
        self.message = message
        self.headers = headers or {}


def error_payload(request: Request, code: str, message: str, **extra: Any) -> Dict[str, Any]:
    payload = {
        "ok": False,
        "error": code,
        "message": message,
        "requestId": get_request_id(request),
    }
    payload.update(extra)
    payload["time"] = now_iso()
    return payload


def error_response(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=error_payload(request, exc.code, exc.message),
        headers=exc.headers,
    )


def internal_error_response(request: Request) -> JSONResponse:
    return JSONResponse(
        status_code=500,
        content=error_payload(request, "INTERNAL_ERROR", "Unexpected failure"),
    )


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    logger.warning(
        f"Request {get_request_id(request)} rechazado: {exc.status_code} {exc.code} - {exc.message}"
    )
    return error_response(request, exc)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Envuelve los 404/405 de Starlette en el sobre estándar."""
    if exc.status_code == 404:
        # Import local: routes.blueprints importa este módulo
        from .routes.blueprints import BLUEPRINT_ENDPOINTS
        from .routes.health import HEALTH_PATHS

        return JSONResponse(
            status_code=404,
            content=error_payload(
                request,
                "NOT_FOUND",
                "Not Found",
                path=request.url.path,
                hint={
                    "health": list(HEALTH_PATHS),
                    "blueprint": list(BLUEPRINT_ENDPOINTS.values()),
                },
            ),
        )

    code = "METHOD_NOT_ALLOWED" if exc.status_code == 405 else f"HTTP_{exc.status_code}"
    return JSONResponse(
        status_code=exc.status_code,
        content=error_payload(request, code, str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
