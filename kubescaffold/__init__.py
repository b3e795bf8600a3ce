"""
kubescaffold: resolución de paquetes de API y carga del archivo PROJECT.
"""

__version__ = "0.1.0"
