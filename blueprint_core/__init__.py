"""
Core del generador de blueprints AIS.

Transforma una descripción libre de un negocio en un documento JSON de forma
fija (nombre, resumen y un esqueleto de tres divisiones). No depende de HTTP:
la API (`api/`) y la CLI (`blueprint_core.cli`) lo usan por igual.
"""

from .domain_models import BLUEPRINT_VERSION, BlueprintDocument
from .engine import generate_blueprint

__all__ = ["BLUEPRINT_VERSION", "BlueprintDocument", "generate_blueprint"]
