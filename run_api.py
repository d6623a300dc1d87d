#!/usr/bin/env python3
"""
Script helper para ejecutar la API FastAPI.
Ejecutar desde la raíz del proyecto para que Python encuentre el módulo 'api'.
"""

import sys

import uvicorn

from blueprint_core.config import get_settings

if __name__ == "__main__":
    settings = get_settings()
    print(f"🚀 Iniciando {settings.service_name} en http://localhost:{settings.port}")
    print(f"📖 Documentación disponible en http://localhost:{settings.port}/docs")
    try:
        uvicorn.run("api.main:app", host="0.0.0.0", port=settings.port)
    except Exception as e:
        print(f"❌ Error al iniciar el servidor: {e}")
        sys.exit(1)
