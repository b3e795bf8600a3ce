"""
Resolución del paquete Go que declara los tipos de un recurso.

- Si api/<version>/<kind>_types.go NO existe y el grupo es conocido → k8s.io/api/<group>.
- En cualquier otro caso → <repo>/api con group.domain del proyecto.

Solo se distingue "no existe" del resto de resultados de stat: un archivo sin
permisos de lectura cuenta como existente.
"""

import os
import posixpath
from enum import Enum
from pathlib import Path
from typing import Optional, Tuple, Union

from rich.console import Console

from kubescaffold.core.resource.groups import CORE_API_PACKAGE, core_group_domain
from kubescaffold.core.resource.models import Resource


API_DIR = "api"
TYPES_FILE_SUFFIX = "_types.go"


class FileStatus(str, Enum):
    EXISTS = "exists"
    NOT_EXIST = "not_exist"
    ERROR = "error"


def file_status(path: Union[str, Path]) -> FileStatus:
    """Estado de un path según stat: existe, no existe u otro error."""
    try:
        os.stat(path)
    except FileNotFoundError:
        return FileStatus.NOT_EXIST
    except (OSError, ValueError):
        # ValueError: byte NUL en el path
        return FileStatus.ERROR
    return FileStatus.EXISTS


def resource_types_path(resource: Resource, base_dir: Optional[Path] = None) -> Path:
    """Path local esperado de los tipos: api/<version>/<kind>_types.go."""
    rel = Path(API_DIR, resource.version, f"{resource.kind.lower()}{TYPES_FILE_SUFFIX}")
    if base_dir is None:
        return rel
    return Path(base_dir) / rel


def _join_import_path(*parts: str) -> str:
    """Une segmentos de import path con '/' y limpia separadores sobrantes."""
    parts = tuple(p for p in parts if p)
    if not parts:
        return ""
    return posixpath.normpath(posixpath.join(*parts))


def get_resource_info(
    resource: Resource,
    repo: str,
    domain: str,
    *,
    base_dir: Optional[Path] = None,
    console: Optional[Console] = None,
) -> Tuple[str, str]:
    """
    Devuelve (resource_package, group_domain) para el recurso.

    Args:
        resource: Recurso (group, version, kind)
        repo: Import path raíz del proyecto (ej: github.com/org/project)
        domain: Dominio del proyecto (ej: example.com)
        base_dir: Directorio desde el que se busca api/ (por defecto: cwd)
        console: Console de Rich para salida de diagnóstico

    Nunca lanza excepciones: lo desconocido cae en la convención local.
    """
    types_path = resource_types_path(resource, base_dir)
    status = file_status(types_path)
    if status is FileStatus.NOT_EXIST:
        group_suffix = core_group_domain(resource.group)
        if group_suffix is not None:
            resource_package = _join_import_path(CORE_API_PACKAGE, resource.group)
            group_domain = resource.group
            if group_suffix:
                group_domain = f"{resource.group}.{group_suffix}"
            if console:
                console.print(f"[dim]{resource.kind}: grupo conocido '{resource.group}' → {resource_package}[/dim]")
            return resource_package, group_domain
        # TODO: soportar un flag --resource-pkg-path para indicar el path de los tipos
    if console:
        console.print(f"[dim]{resource.kind}: {types_path} ({status.value}) → paquete local[/dim]")
    return _join_import_path(repo, API_DIR), f"{resource.group}.{domain}"


def get_resource_info_for(
    kind: str,
    version: str,
    group: str,
    repo: str,
    domain: str,
    console: Optional[Console] = None,
) -> Tuple[str, str]:
    """Variante plana de get_resource_info (kind, version, group sueltos)."""
    resource = Resource(group=group, version=version, kind=kind)
    return get_resource_info(resource, repo, domain, console=console)
