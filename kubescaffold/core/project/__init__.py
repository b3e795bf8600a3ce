"""
Project: modelo y carga del archivo PROJECT.
"""

from kubescaffold.core.project.models import PROJECT_FILE_NAME, VERSION_1, VERSION_2, ProjectFile
from kubescaffold.core.project.loader import load_project_file

__all__ = [
    "PROJECT_FILE_NAME",
    "VERSION_1",
    "VERSION_2",
    "ProjectFile",
    "load_project_file",
]
