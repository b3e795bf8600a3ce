"""
Modelo del archivo PROJECT (descriptor del proyecto generado).
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# Versiones del formato de scaffolding
VERSION_1 = "1"
VERSION_2 = "2"

PROJECT_FILE_NAME = "PROJECT"


class ProjectFile(BaseModel):
    """
    Descriptor del proyecto. Solo version, domain y repo tienen tipo;
    el resto de claves del YAML se conservan como extras.
    """
    model_config = ConfigDict(extra="allow")

    version: str = Field("", description="Versión del formato de scaffolding")
    domain: Optional[str] = Field(None, description="Dominio de los grupos de API (ej: example.com)")
    repo: Optional[str] = Field(None, description="Import path del repositorio")

    @field_validator("version", mode="before")
    @classmethod
    def version_as_str(cls, v: Any) -> Any:
        # ProjectFile(version=2) construido a mano
        if v is None:
            return ""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v
