"""
Tabla de grupos de API conocidos (core/extensiones de Kubernetes).

Los tipos de estos grupos viven en k8s.io/api/<group>. El valor es el sufijo de
dominio del grupo; vacío significa que el grupo se usa sin dominio (ej: apps).
Cualquier grupo ausente de esta tabla se considera local al proyecto.
"""

from types import MappingProxyType
from typing import Mapping, Optional


CORE_API_PACKAGE = "k8s.io/api"

# TODO: apiextensions.k8s.io vive en k8s.io/apiextensions-apiserver/pkg/apis/apiextensions
# y metrics.k8s.io en k8s.io/metrics/pkg/apis/metrics, no en k8s.io/api.
CORE_GROUPS: Mapping[str, str] = MappingProxyType({
    "apps": "",
    "admission": "k8s.io",
    "admissionregistration": "k8s.io",
    "auditregistration": "k8s.io",
    "apiextensions": "k8s.io",
    "authentication": "k8s.io",
    "authorization": "k8s.io",
    "autoscaling": "",
    "batch": "",
    "certificates": "k8s.io",
    "coordination": "k8s.io",
    "core": "",
    "events": "k8s.io",
    "extensions": "",
    "imagepolicy": "k8s.io",
    "networking": "k8s.io",
    "node": "k8s.io",
    "metrics": "k8s.io",
    "policy": "",
    "rbac.authorization": "k8s.io",
    "scheduling": "k8s.io",
    "setting": "k8s.io",
    "storage": "k8s.io",
})


def core_group_domain(group: str) -> Optional[str]:
    """Sufijo de dominio del grupo si es un grupo conocido; None si no lo es."""
    return CORE_GROUPS.get(group)
