# exceptions.py
class EnvScaffoldError(Exception):
    """Base exception for all envscaffold errors."""
    pass

class ConfigError(EnvScaffoldError):
    """Raised when the manager configuration or a schema file is invalid."""
    pass

class ConfigValidationError(ConfigError):
    """Raised when an entry declaration fails validation at scaffold time."""
    pass

class ConfigNotFoundError(EnvScaffoldError):
    """Raised when neither the config file nor its fallback can be found."""
    pass
