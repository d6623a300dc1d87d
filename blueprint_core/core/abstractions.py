"""
Abstracciones (Protocols) del generador de blueprints.

Estos protocols definen las piezas reemplazables del motor, para que una
implementación futura (NLP, tabla de lookup, etc.) pueda sustituir a la
actual sin tocar el armado del documento.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol


class NameExtractor(Protocol):
    """
    Interfaz para extraer el nombre del negocio desde la descripción.
    """

    def extract_name(self, text: str) -> str:
        """
        Devuelve el nombre del negocio para `text`.

        Args:
            text: Descripción ya convertida a string y recortada.

        Returns:
            Nombre extraído, o un nombre por defecto si no hay candidato.
            Nunca lanza excepciones.
        """
        ...


class Clock(Protocol):
    def __call__(self) -> datetime:
        ...


class IdFactory(Protocol):
    def __call__(self) -> str:
        ...
