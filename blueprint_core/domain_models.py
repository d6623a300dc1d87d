"""
Modelos de dominio del documento blueprint.

Todos los modelos son dataclasses inmutables: un documento se construye una
sola vez por llamada a `engine.generate_blueprint` y no se modifica después.
`BlueprintDocument.to_dict()` define la forma JSON que viaja por HTTP.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Tuple

BLUEPRINT_VERSION = "1.0.0"
DEFAULT_BUSINESS_NAME = "Unnamed Business"
EMPTY_SUMMARY = "No description provided."


@dataclass(frozen=True)
class Division:
    id: str
    label: str
    engines: Tuple[Any, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "label": self.label, "engines": list(self.engines)}


# Divisiones fijas, en este orden, para cualquier input
DIVISIONS: Tuple[Division, ...] = (
    Division(id="ops", label="Operations"),
    Division(id="growth", label="Growth"),
    Division(id="finance", label="Finance"),
)


@dataclass(frozen=True)
class BlueprintInput:
    description: str
    meta: Any = None


@dataclass(frozen=True)
class BusinessInfo:
    name: str
    summary: str


@dataclass(frozen=True)
class BlueprintStructure:
    divisions: Tuple[Division, ...] = DIVISIONS
    # Reservados para extensiones futuras: presentes pero vacíos
    engines: Tuple[Any, ...] = ()
    modules: Tuple[Any, ...] = ()
    agents: Tuple[Any, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "divisions": [d.to_dict() for d in self.divisions],
            "engines": list(self.engines),
            "modules": list(self.modules),
            "agents": list(self.agents),
        }


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 en UTC con milisegundos y sufijo `Z` (ej: 2024-01-01T00:00:00.000Z)."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


@dataclass(frozen=True)
class BlueprintDocument:
    """
    Documento blueprint generado a partir de una descripción libre.

    Attributes
    ----------
    id:
        Token único por invocación (no se reutiliza dentro del proceso).
    version:
        Versión fija del esquema (`BLUEPRINT_VERSION`).
    generated_at:
        Momento de generación (se serializa como `generatedAt`).
    input:
        Eco del request ya normalizado (descripción recortada + meta).
    business:
        Nombre extraído y resumen.
    structure:
        Esqueleto organizacional fijo de tres divisiones.
    """

    id: str
    version: str
    generated_at: datetime
    input: BlueprintInput
    business: BusinessInfo
    structure: BlueprintStructure = field(default_factory=BlueprintStructure)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "version": self.version,
            "generatedAt": format_timestamp(self.generated_at),
            "input": {
                "description": self.input.description,
                "meta": self.input.meta,
            },
            "business": {
                "name": self.business.name,
                "summary": self.business.summary,
            },
            "structure": self.structure.to_dict(),
        }
