"""
Errores del core de scaffolding.

El core solo define excepciones; la CLI se encarga del formato de salida.
"""


class ScaffoldError(Exception):
    """Error base de kubescaffold."""
    pass


class ConfigError(ScaffoldError):
    """Error de configuración (archivo faltante, formato inválido)."""
    pass


class ProjectFileReadError(ConfigError):
    """No se pudo leer el archivo PROJECT. `cause` es el OSError original."""

    def __init__(self, path, cause: OSError):
        super().__init__(str(cause))
        self.path = path
        self.cause = cause


class ProjectFileParseError(ConfigError):
    """El archivo PROJECT no es un documento YAML de tipo mapping válido."""

    def __init__(self, path, cause: Exception):
        super().__init__(str(cause))
        self.path = path
        self.cause = cause
