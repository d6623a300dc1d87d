"""Rutas de la API."""

from . import blueprints, health

__all__ = ["blueprints", "health"]
