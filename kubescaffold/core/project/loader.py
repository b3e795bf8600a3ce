"""
Carga del archivo PROJECT.

Una sola lectura y un solo parseo; cualquier fallo termina la llamada.
"""

from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import ValidationError
from rich.console import Console

from kubescaffold.core.errors import ProjectFileParseError, ProjectFileReadError
from kubescaffold.core.project.models import VERSION_1, ProjectFile


NULL_TAG = "tag:yaml.org,2002:null"


def _raw_version(node: Optional[yaml.Node]) -> Optional[str]:
    """
    Texto literal del escalar `version` del mapping raíz.
    version: 1.0e3 se conserva como "1.0e3" y version: true como "true".
    """
    if not isinstance(node, yaml.MappingNode):
        return None
    for key, value in node.value:
        if isinstance(key, yaml.ScalarNode) and key.value == "version":
            if isinstance(value, yaml.ScalarNode) and value.tag != NULL_TAG:
                return value.value
            return None
    return None


def load_project_file(path: Union[str, Path], console: Optional[Console] = None) -> ProjectFile:
    """
    Lee el archivo PROJECT y lo deserializa en un ProjectFile.

    Args:
        path: Ruta al archivo PROJECT
        console: Console de Rich para salida

    Returns:
        ProjectFile con version rellenada (VERSION_1 si el archivo no la declara)

    Raises:
        ProjectFileReadError: el archivo no se pudo leer
        ProjectFileParseError: el contenido no es un mapping YAML válido
    """
    path = Path(path)
    try:
        content = path.read_bytes()
    except OSError as e:
        if console:
            console.print(f"[red]✘ Error al leer {path}: {e}[/red]")
        raise ProjectFileReadError(path, e) from e

    try:
        # Bytes: la decodificación (UTF-8/UTF-16) la hace el reader de PyYAML
        data = yaml.safe_load(content)
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise TypeError(f"se esperaba un mapping YAML, se obtuvo {type(data).__name__}")
        data = {str(k): v for k, v in data.items()}
        raw = _raw_version(yaml.compose(content, Loader=yaml.SafeLoader))
        if raw is not None:
            data["version"] = raw
        project = ProjectFile(**data)
    except (yaml.YAMLError, TypeError, ValidationError) as e:
        if console:
            console.print(f"[red]✘ Error al parsear YAML de {path.name}: {e}[/red]")
        raise ProjectFileParseError(path, e) from e

    if project.version == "":
        # Proyectos antiguos no declaran versión de scaffolding: se asume la 1
        project.version = VERSION_1

    if console:
        console.print(f"[green]✔ Proyecto cargado: {path.name} (version {project.version})[/green]")
    return project
