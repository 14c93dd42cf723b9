# kv/__init__.py
"""
kv - key:value store de línea de comandos sobre un único archivo JSON.

Módulos:
- paths: dónde vive el archivo del store
- store: lectura / escritura del archivo
- ops: get, set, delete, list, complete-keys
- cli: parser y subcomandos
"""

__version__ = "0.3.0"
