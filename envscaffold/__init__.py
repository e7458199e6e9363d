# envscaffold/__init__.py
"""
envscaffold - scaffold and validate .env configuration files.

Declare the environment variables an application expects, write a commented
template for them, and check a filled-in file for missing entries.
"""

__version__ = "0.1.0"
__all__ = [
    "__version__",
    "ConfigManager",
    "ManagerConfig",
    "EntryDeclaration",
    "Importance",
    "Notifier",
    "ValidationTally",
    "EnvironmentStore",
    "ProcessEnvironment",
    "MemoryEnvironment",
    "load_env_file",
    "load_entries",
    "save_entries",
    "setup_logging",
    "EnvScaffoldError",
    "ConfigError",
    "ConfigValidationError",
    "ConfigNotFoundError",
]

from .environment import EnvironmentStore, MemoryEnvironment, ProcessEnvironment, load_env_file
from .exceptions import ConfigError, ConfigNotFoundError, ConfigValidationError, EnvScaffoldError
from .log_config import setup_logging
from .manager import ConfigManager
from .models import EntryDeclaration, Importance, ManagerConfig, Notifier, ValidationTally
from .schema import load_entries, save_entries
