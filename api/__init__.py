"""
API HTTP del generador de blueprints.

Esta capa expone endpoints REST que usan el core interno (blueprint_core.engine)
para generar documentos blueprint, y agrega lo propio del transporte:
request id, logging de acceso, headers de seguridad, CORS y rate limit.
"""
