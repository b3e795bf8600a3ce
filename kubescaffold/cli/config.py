"""
Configuración de la CLI.

- .env del directorio de trabajo (python-dotenv), si existe.
- KUBESCAFFOLD_PROJECT_FILE: ruta del archivo PROJECT (por defecto ./PROJECT).

El core no lee variables de entorno; solo la CLI.
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from kubescaffold.core.project import PROJECT_FILE_NAME


PROJECT_FILE_ENV = "KUBESCAFFOLD_PROJECT_FILE"


def load_env(cwd: Optional[Path] = None) -> bool:
    """Carga el .env del directorio de trabajo. Devuelve True si había uno."""
    env_file = (cwd or Path.cwd()) / ".env"
    if not env_file.exists():
        return False
    return load_dotenv(env_file)


def project_file_path(cwd: Optional[Path] = None) -> Path:
    """
    Ruta del archivo PROJECT.
    Resolución: KUBESCAFFOLD_PROJECT_FILE (relativa al cwd si no es absoluta) → <cwd>/PROJECT.
    """
    base = cwd or Path.cwd()
    explicit = os.environ.get(PROJECT_FILE_ENV, "").strip()
    if explicit:
        p = Path(explicit).expanduser()
        return p if p.is_absolute() else base / p
    return base / PROJECT_FILE_NAME
