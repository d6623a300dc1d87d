"""
Endpoints de generación de blueprints.

Se monta el mismo handler en dos paths, parametrizado por `source`:
- POST /mcp/generate-ais-blueprint (source="mcp")
- POST /api/ais-blueprint (source="api")

Cada path expone además un GET con un ejemplo de uso.
"""

import json
import logging
import math

from fastapi import APIRouter, Depends, Request

from blueprint_core.config import Settings
from blueprint_core.engine import generate_blueprint

from ..dependencies import get_request_id, get_settings_from_app, now_iso
from ..errors import ApiError
from ..models.requests import BlueprintExample, BlueprintRequest

logger = logging.getLogger(__name__)

BLUEPRINT_ENDPOINTS = {
    "mcp": "/mcp/generate-ais-blueprint",
    "api": "/api/ais-blueprint",
}

EXAMPLE_BODY = {
    "description": "Acme Repairs does on-site fixes",
    "meta": {"source": "client"},
}


# Anidamiento máximo aceptado en el body (objetos + listas)
MAX_JSON_DEPTH = 100


def _reject_constant(name: str):
    # NaN / Infinity / -Infinity no son JSON estándar
    raise ValueError(f"Invalid JSON constant: {name}")


def _parse_float(raw: str):
    # Floats fuera de rango (ej: 1e999) → null, como JSON.stringify
    value = float(raw)
    return value if math.isfinite(value) else None


def json_depth(value) -> int:
    """Profundidad de anidamiento de un valor JSON, calculada sin recursión."""
    depth = 0
    stack = [(value, 1)]
    while stack:
        current, level = stack.pop()
        if isinstance(current, dict):
            children = current.values()
        elif isinstance(current, list):
            children = current
        else:
            continue
        depth = max(depth, level)
        stack.extend((child, level + 1) for child in children)
    return depth


async def read_body(request: Request, limit: int) -> bytes:
    """
    Lee el body en streaming, cortando apenas se supera `limit`.

    Raises:
        ApiError: 413 PAYLOAD_TOO_LARGE
    """
    too_large = ApiError(413, "PAYLOAD_TOO_LARGE", f"Request body exceeds {limit} bytes")

    content_length = request.headers.get("content-length")
    if content_length and content_length.isdigit() and int(content_length) > limit:
        raise too_large

    chunks = []
    size = 0
    async for chunk in request.stream():
        size += len(chunk)
        if size > limit:
            raise too_large
        chunks.append(chunk)
    return b"".join(chunks)


async def read_json_object(request: Request, limit: int) -> dict:
    """
    Lee el body y exige que sea un objeto JSON.

    Un body vacío equivale a `{}`.

    Raises:
        ApiError: 413 si el body supera `limit` bytes; 400 BAD_JSON si no es
            JSON válido, está anidado más de `MAX_JSON_DEPTH` niveles o no
            es un objeto.
    """
    raw = await read_body(request, limit)
    if not raw.strip():
        return {}

    try:
        body = json.loads(raw, parse_constant=_reject_constant, parse_float=_parse_float)
    except RecursionError:
        raise ApiError(400, "BAD_JSON", "Request body nesting is too deep")
    except ValueError:
        # JSONDecodeError, UnicodeDecodeError y constantes rechazadas
        raise ApiError(400, "BAD_JSON", "Request body is not valid JSON")

    if not isinstance(body, dict):
        raise ApiError(400, "BAD_JSON", "Request body must be a JSON object")
    if json_depth(body) > MAX_JSON_DEPTH:
        raise ApiError(400, "BAD_JSON", "Request body nesting is too deep")
    return body


def build_blueprint_router(path: str, source: str) -> APIRouter:
    """
    Crea el router de un endpoint de blueprint.

    Args:
        path: Path donde se monta (GET de ejemplo + POST de generación)
        source: Etiqueta que se devuelve en la respuesta (ej: "mcp", "api")

    Returns:
        APIRouter listo para `app.include_router`
    """
    router = APIRouter(prefix=path, tags=["blueprints"])

    @router.get("", response_model=BlueprintExample)
    async def explain_blueprint():
        """Ejemplo de uso del endpoint (método, content type y body)."""
        return BlueprintExample(endpoint=path, example=EXAMPLE_BODY)

    @router.post("")
    async def create_blueprint(
        request: Request,
        settings: Settings = Depends(get_settings_from_app),
    ):
        """
        Genera un blueprint a partir de la descripción del body.

        Una descripción vacía o ausente es válida: el documento usa el
        resumen por defecto.

        Returns:
            {"ok": true, "source", "result": <BlueprintDocument>, "meta": {requestId, time}}
        """
        body = await read_json_object(request, settings.json_limit)
        payload = BlueprintRequest.model_validate(body)

        doc = generate_blueprint(payload.description, payload.meta)
        request_id = get_request_id(request)
        logger.info(f"Blueprint {doc.id} generado (source={source}, request={request_id})")

        return {
            "ok": True,
            "source": source,
            "result": doc.to_dict(),
            "meta": {"requestId": request_id, "time": now_iso()},
        }

    return router


routers = [build_blueprint_router(path, source) for source, path in BLUEPRINT_ENDPOINTS.items()]
