"""
Core: lógica de scaffolding sin CLI.

ENFORCEMENT:
- Este paquete NO debe importar kubescaffold.cli ni leer variables de entorno.
- Permitido: typing, pathlib, pydantic, yaml, rich (solo Console opcional).
"""

from kubescaffold.core.errors import (
    ScaffoldError,
    ConfigError,
    ProjectFileReadError,
    ProjectFileParseError,
)

__all__ = ["ScaffoldError", "ConfigError", "ProjectFileReadError", "ProjectFileParseError"]
