"""
Modelos de request para la API.

Estos modelos definen la estructura esperada de los requests HTTP antes de
pasarlos al core. La única validación real (que el body sea un objeto JSON)
ocurre antes, en la ruta; acá solo se resuelven los alias de campos.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Nombres alternativos que usan distintos clientes para la descripción
DESCRIPTION_ALIASES = ("description", "prompt", "query", "text", "businessDescription")


class BlueprintRequest(BaseModel):
    """
    Request para generar un blueprint.

    El nombre canónico es `description`; se aceptan también `prompt`, `query`,
    `text` y `businessDescription`. Gana el primero, en ese orden, cuyo valor
    no sea null (un `"description": null` no tapa a `prompt`).
    Los campos no se validan: el core acepta cualquier valor y lo convierte
    a string.
    """

    model_config = ConfigDict(extra="ignore")

    description: Any = Field(
        default=None,
        description="Descripción libre del negocio",
    )
    meta: Any = Field(
        default=None,
        description="Metadata arbitraria; se devuelve tal cual en el documento",
    )

    @model_validator(mode="before")
    @classmethod
    def resolve_description_alias(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        value = next(
            (data[name] for name in DESCRIPTION_ALIASES if data.get(name) is not None),
            None,
        )
        return {**data, "description": value}


class BlueprintExample(BaseModel):
    """Ejemplo de uso que devuelve el GET de cada endpoint de blueprint."""

    ok: bool = True
    endpoint: str = Field(..., description="Path del endpoint")
    method: str = Field(default="POST", description="Método para generar")
    contentType: str = Field(default="application/json", description="Content-Type esperado")
    example: dict = Field(..., description="Body de ejemplo")
