# blueprint_core/config.py
from dataclasses import dataclass, field
from functools import lru_cache
import os
import re
from typing import List

from dotenv import load_dotenv

"""
blueprint_core.config
=====================

Gestión centralizada de configuración del servicio.

Este módulo define:
- La estructura de configuración (`Settings`)
- El mecanismo para cargar variables desde entorno (.env)
- Un acceso único y cacheado a la configuración (`get_settings`)

Convenciones
------------
- Las variables de entorno se cargan desde un archivo `.env` si existe.
- Los defaults están pensados para desarrollo local y para un deploy
  de instancia única (el rate limit es en memoria).
- Este módulo NO decide lógica de negocio: solo expone valores ya resueltos.
"""

# Cargar variables de entorno desde .env (si existe)
load_dotenv()

_SIZE_UNITS = {
    "b": 1,
    "kb": 1024,
    "mb": 1024 ** 2,
    "gb": 1024 ** 3,
}
_SIZE_RE = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*([a-z]*)\s*$", re.IGNORECASE)


def parse_size(value: str | int) -> int:
    """
    Convierte un tamaño legible ("2mb", "512kb", "1024") a bytes.

    Un número sin unidad se interpreta como bytes.

    Raises
    ------
    ValueError
        Si el valor no tiene formato reconocible o la unidad es desconocida.
    """
    if isinstance(value, int):
        return value

    match = _SIZE_RE.match(value)
    if not match:
        raise ValueError(f"Tamaño inválido: {value!r}")

    number, unit = match.groups()
    unit = (unit or "b").lower()
    if unit not in _SIZE_UNITS:
        raise ValueError(f"Unidad de tamaño desconocida: {unit!r}")
    return int(float(number) * _SIZE_UNITS[unit])


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class Settings:
    """
    Contenedor tipado de configuración del servicio.

    Attributes
    ----------
    service_name:
        Nombre humano del servicio (aparece en los payloads de status).
    port:
        Puerto en el que escucha uvicorn.
    environment:
        Ambiente informativo (local, staging, production).
    log_level:
        Nombre de nivel de `logging` ("DEBUG", "INFO", ...) o "SILENT"
        para no emitir logs.
    json_limit:
        Tamaño máximo del body JSON, en bytes.
    rate_limit_window_ms:
        Duración de la ventana fija del rate limit.
    rate_limit_max:
        Requests permitidos por cliente y por ventana.
    cors_origins:
        Orígenes habilitados para CORS ("*" habilita todos).
    trust_proxy:
        Si es True, la IP del cliente se toma del primer valor de
        `X-Forwarded-For` (deploy detrás de un proxy/load balancer).
    """

    service_name: str = "Autokirk MCP Server"
    port: int = 10000
    environment: str = "local"
    log_level: str = "INFO"

    # HTTP
    json_limit: int = 2 * 1024 ** 2
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    trust_proxy: bool = True

    # Rate limit (por IP, ventana fija)
    rate_limit_window_ms: int = 60_000
    rate_limit_max: int = 300


@lru_cache
def get_settings() -> Settings:
    """
    Devuelve una instancia única y cacheada de `Settings`.

    Variables de entorno utilizadas
    -------------------------------
    - PORT (default: 10000)
    - SERVICE_NAME (default: "Autokirk MCP Server")
    - ENVIRONMENT (default: "local")
    - LOG_LEVEL (default: "INFO")
    - JSON_LIMIT (default: "2mb")
    - RATE_LIMIT_WINDOW_MS (default: 60000)
    - RATE_LIMIT_MAX (default: 300)
    - CORS_ORIGINS (default: "*", separado por comas)
    - TRUST_PROXY (default: "true")

    Notas
    -----
    En tests conviene construir `Settings(...)` directamente y pasarlo a
    `api.main.create_app`, en lugar de tocar el entorno.
    """
    cors_origins_str = os.getenv("CORS_ORIGINS", "*")
    cors_origins = [origin.strip() for origin in cors_origins_str.split(",") if origin.strip()]

    return Settings(
        service_name=os.getenv("SERVICE_NAME", "Autokirk MCP Server"),
        port=int(os.getenv("PORT", "10000")),
        environment=os.getenv("ENVIRONMENT", "local"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        json_limit=parse_size(os.getenv("JSON_LIMIT", "2mb")),
        cors_origins=cors_origins or ["*"],
        trust_proxy=_parse_bool(os.getenv("TRUST_PROXY", "true")),
        rate_limit_window_ms=int(os.getenv("RATE_LIMIT_WINDOW_MS", "60000")),
        rate_limit_max=int(os.getenv("RATE_LIMIT_MAX", "300")),
    )
