"""
Extracción heurística del nombre del negocio.

No es un paso de NLP: toma la primera corrida que empieza con mayúscula
para darle algo de variedad al documento de demo.
"""

from __future__ import annotations

import re

from .domain_models import DEFAULT_BUSINESS_NAME

# Una mayúscula seguida de 2 a 40 letras, dígitos, "&" o espacios
NAME_PATTERN = re.compile(r"[A-Z][A-Za-z0-9& ]{2,40}")


class RegexNameExtractor:
    """
    Implementa `NameExtractor` con una única búsqueda por regex.

    Se queda con el match más a la izquierda (nunca busca el "mejor"
    candidato) y lo recorta. Si no hay match devuelve `default_name`.
    """

    def __init__(
        self,
        pattern: re.Pattern[str] = NAME_PATTERN,
        default_name: str = DEFAULT_BUSINESS_NAME,
    ) -> None:
        self.pattern = pattern
        self.default_name = default_name

    def extract_name(self, text: str) -> str:
        match = self.pattern.search(text)
        if not match:
            return self.default_name
        return match.group(0).strip()


default_extractor = RegexNameExtractor()


def extract_name(text: str) -> str:
    return default_extractor.extract_name(text)
