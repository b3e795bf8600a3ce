"""
Modelo de recurso (group/version/kind) que recibe el resolver.

Sin validación semántica: cadenas vacías producen salida degenerada, no errores.
"""

from pydantic import BaseModel, ConfigDict, Field


class Resource(BaseModel):
    """Recurso de API identificado por group, version y kind."""
    model_config = ConfigDict(frozen=True)

    group: str = Field("", description="Grupo de API (ej: apps, networking)")
    version: str = Field("", description="Versión de API (ej: v1, v1beta1)")
    kind: str = Field("", description="Nombre del tipo (ej: Pod, Deployment)")
