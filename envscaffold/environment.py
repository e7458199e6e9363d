"""
Environment stores and the .env loader.

The manager never touches ``os.environ`` directly; it reads and writes through
an ``EnvironmentStore`` so tests and embedders can supply an isolated table.
"""

import os
import logging
from pathlib import Path
from typing import Dict, Mapping, Optional, Protocol, Union

from dotenv import dotenv_values

_log = logging.getLogger(__name__)


class EnvironmentStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...

    def has(self, key: str) -> bool: ...


class ProcessEnvironment:
    """Store backed by the live process environment."""

    def get(self, key: str) -> Optional[str]:
        return os.environ.get(key)

    def set(self, key: str, value: str) -> None:
        os.environ[key] = value

    def has(self, key: str) -> bool:
        return key in os.environ


class MemoryEnvironment:
    """Isolated in-memory store."""

    def __init__(self, initial: Optional[Mapping[str, str]] = None):
        self._values: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def has(self, key: str) -> bool:
        return key in self._values

    def as_dict(self) -> Dict[str, str]:
        return dict(self._values)


def load_env_file(path: Union[str, Path], env: EnvironmentStore) -> int:
    """
    Parse a dotenv file and bind its keys into ``env``.

    Keys already bound in the store are left untouched, so the first file
    loaded for a given key wins. ``${VAR}`` references are kept as literal
    text. Keys declared without ``=`` carry no value and are skipped.

    Args:
        path: Path of the dotenv file.
        env: Target environment store.

    Returns:
        Number of keys newly bound.
    """
    bound = 0
    for key, value in dotenv_values(path, interpolate=False).items():
        if value is None or env.has(key):
            continue
        env.set(key, value)
        bound += 1
    _log.debug("Loaded %s: %d new key(s) bound", path, bound)
    return bound
