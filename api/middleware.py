"""
Middleware HTTP del servicio.

- `RequestContextMiddleware`: request id, headers de seguridad, log de acceso
  y captura de errores inesperados (500 sin detalle para el cliente).
- `RateLimitMiddleware`: límite por IP con `FixedWindowRateLimiter`.

Orden en `create_app`: RequestContext (más externo) → CORS → RateLimit → rutas.
"""

import json
import logging
import time

from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from .dependencies import (
    REQUEST_ID_HEADER,
    client_address,
    get_request_id,
    new_request_id,
    now_iso,
)
from .errors import error_payload, internal_error_response
from .rate_limit import FixedWindowRateLimiter
from .routes.health import HEALTH_PATHS

logger = logging.getLogger(__name__)
access_logger = logging.getLogger("api.access")

SECURITY_HEADERS = {
    "x-content-type-options": "nosniff",
    "x-frame-options": "DENY",
    "referrer-policy": "no-referrer",
    "x-xss-protection": "0",
    "permissions-policy": "geolocation=(), microphone=(), camera=()",
}


class RequestContextMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, trust_proxy: bool = True):
        super().__init__(app)
        self.trust_proxy = trust_proxy

    async def dispatch(self, request: Request, call_next) -> Response:
        request.state.request_id = request.headers.get(REQUEST_ID_HEADER) or new_request_id()
        t0 = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            logger.exception(f"Error inesperado en request {request.state.request_id}")
            response = internal_error_response(request)

        response.headers[REQUEST_ID_HEADER] = request.state.request_id
        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)

        access_logger.info(json.dumps({
            "t": now_iso(),
            "requestId": request.state.request_id,
            "ip": client_address(request, self.trust_proxy),
            "method": request.method,
            "path": request.url.path,
            "status": response.status_code,
            "ms": int((time.perf_counter() - t0) * 1000),
        }))
        return response


class RateLimitMiddleware(BaseHTTPMiddleware):
    """
    Aplica el rate limit a todo excepto los endpoints de health/status.

    La respuesta 429 se arma acá mismo: las excepciones lanzadas en un
    middleware no pasan por los exception handlers de la app.
    """

    def __init__(self, app, limiter: FixedWindowRateLimiter, trust_proxy: bool = True):
        super().__init__(app)
        self.limiter = limiter
        self.trust_proxy = trust_proxy

    async def dispatch(self, request: Request, call_next) -> Response:
        if request.url.path in HEALTH_PATHS:
            return await call_next(request)

        ip = client_address(request, self.trust_proxy)
        decision = self.limiter.hit(ip)
        headers = {
            "x-ratelimit-limit": str(decision.limit),
            "x-ratelimit-remaining": str(decision.remaining),
        }

        if not decision.allowed:
            logger.warning(f"Rate limit excedido para {ip} (request {get_request_id(request)})")
            headers["retry-after"] = str(decision.retry_after)
            return JSONResponse(
                status_code=429,
                content=error_payload(request, "RATE_LIMIT", "Rate limit exceeded"),
                headers=headers,
            )

        response = await call_next(request)
        response.headers.update(headers)
        return response
