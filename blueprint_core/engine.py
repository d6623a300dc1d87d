from __future__ import annotations

"""
blueprint_core.engine
=====================

Generador de documentos blueprint.

Este módulo expone la **API interna** y estable del core: transforma una
descripción libre (más metadata opcional) en un `BlueprintDocument`, sin
preocuparse por:

- HTTP
- frameworks web
- detalles de CLI

La capa HTTP (`api/`) y la CLI (`cli.py`) llaman a `generate_blueprint`;
ninguna arma documentos por su cuenta.
"""

import copy
import json
import time
import uuid
from datetime import datetime, timezone
from typing import Any, Optional

from .core.abstractions import Clock, IdFactory, NameExtractor
from .domain_models import (
    BLUEPRINT_VERSION,
    EMPTY_SUMMARY,
    BlueprintDocument,
    BlueprintInput,
    BlueprintStructure,
    BusinessInfo,
)
from .naming import default_extractor


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def new_blueprint_id() -> str:
    """
    ID único dentro del proceso: timestamp en ms + sufijo aleatorio.

    El timestamp solo no alcanza (dos llamadas en el mismo milisegundo).
    """
    return f"bp_{int(time.time() * 1000)}_{uuid.uuid4().hex[:8]}"


def normalize_description(description: Any) -> str:
    """
    Convierte la descripción a string recortado.

    `None` → "", strings tal cual, cualquier otro valor con su forma JSON
    (`True` → "true", `{"a": 1}` → '{"a": 1}'). Lo no serializable cae a
    `str(valor)`.
    """
    if description is None:
        return ""
    if isinstance(description, str):
        return description.strip()
    try:
        text = json.dumps(description, ensure_ascii=False, default=str)
    except (ValueError, RecursionError):
        # Referencias circulares o anidamiento excesivo
        text = str(description)
    return text.strip()


def generate_blueprint(
    description: Any,
    meta: Any = None,
    *,
    extractor: Optional[NameExtractor] = None,
    clock: Optional[Clock] = None,
    id_factory: Optional[IdFactory] = None,
) -> BlueprintDocument:
    """
    Genera un `BlueprintDocument` a partir de una descripción libre.

    Flujo:
    ------
    1) Normalización: la descripción se convierte a string y se recorta.
    2) Nombre: `extractor.extract_name(text)` (por defecto, regex).
    3) Resumen: el texto tal cual, o "No description provided." si está vacío.
    4) Estructura: tres divisiones fijas (ops, growth, finance) y listas
       `engines`/`modules`/`agents` vacías.
    5) Sellos: `generated_at` (reloj) e `id` (fábrica de IDs).

    Esta función es total: no lanza para ningún input convertible a string
    (incluidos "" y None). No hace I/O ni comparte estado entre llamadas.

    Args:
        description:
            Descripción del negocio. Cualquier valor; se convierte a string.
        meta:
            Valor JSON arbitrario. Se guarda tal cual (copia profunda), nunca
            se interpreta.
        extractor:
            Estrategia de extracción del nombre. Default: `RegexNameExtractor`.
        clock:
            Fuente de tiempo. Default: hora actual en UTC.
        id_factory:
            Fuente de IDs. Default: `new_blueprint_id`.

    Returns:
        BlueprintDocument:
            Documento inmutable. Dos llamadas con el mismo input solo difieren
            en `id` y `generated_at`.
    """
    extractor = extractor or default_extractor
    clock = clock or utc_now
    id_factory = id_factory or new_blueprint_id

    text = normalize_description(description)

    return BlueprintDocument(
        id=id_factory(),
        version=BLUEPRINT_VERSION,
        generated_at=clock(),
        input=BlueprintInput(description=text, meta=copy.deepcopy(meta)),
        business=BusinessInfo(
            name=extractor.extract_name(text),
            summary=text or EMPTY_SUMMARY,
        ),
        structure=BlueprintStructure(),
    )
