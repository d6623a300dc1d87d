"""
Núcleo reemplazable del generador.

Contiene las interfaces (Protocols) que el motor usa para extraer el nombre
del negocio, leer la hora y generar IDs.
"""
