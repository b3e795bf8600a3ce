"""
Resource: a qué paquete de API pertenece un recurso.
"""

from kubescaffold.core.resource.models import Resource
from kubescaffold.core.resource.groups import CORE_GROUPS
from kubescaffold.core.resource.resolver import (
    FileStatus,
    file_status,
    get_resource_info,
    get_resource_info_for,
    resource_types_path,
)

__all__ = [
    "Resource",
    "CORE_GROUPS",
    "FileStatus",
    "file_status",
    "get_resource_info",
    "get_resource_info_for",
    "resource_types_path",
]
