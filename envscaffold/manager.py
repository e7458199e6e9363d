"""
Scaffolding and validation of .env configuration files.

``ConfigManager`` owns a fixed list of entry declarations and exposes two
operations:

- ``init_config()`` writes a commented template for a human to fill in.
- ``load_config()`` binds an existing file into the environment store and
  tallies the declared entries that are still missing.
"""

import re
import logging
from pathlib import Path
from typing import List, Optional, Set

from .environment import EnvironmentStore, ProcessEnvironment, load_env_file
from .exceptions import ConfigError, ConfigNotFoundError, ConfigValidationError
from .filesystem import FileSystem, LocalFileSystem
from .models import EntryDeclaration, Importance, ManagerConfig, Notifier, ValidationTally
from .template import render_entry, render_header

_log = logging.getLogger(__name__)

FILE_PATTERN = re.compile(r"[a-z]+\.env")
NAME_PATTERN = re.compile(r"[A-Z_]+")
TITLE_PATTERN = re.compile(r"[A-Za-z ]+")


class ConfigManager:
    """Scaffolds and validates one .env file from a list of declarations."""

    def __init__(
        self,
        config: ManagerConfig,
        env: Optional[EnvironmentStore] = None,
        fs: Optional[FileSystem] = None,
    ):
        if not FILE_PATTERN.fullmatch(config.file):
            raise ConfigError("Filename must only have lowercase letters and end with .env")

        self._config = config
        self._env = env if env is not None else ProcessEnvironment()
        self._fs = fs if fs is not None else LocalFileSystem()
        self._notifier = config.logger or Notifier()

        self.root = Path(config.root_dir)
        self.path = self.root / config.file
        self.fallback_path = self.root / config.fallback if config.fallback else None

    @property
    def entries(self) -> List[EntryDeclaration]:
        return self._config.entries

    # ------------------------------------------------------------------
    # Scaffolding
    # ------------------------------------------------------------------
    def init_config(self) -> None:
        """Write a template file for every declared entry.

        Never overwrites: fails if the file is already there. All
        declarations are checked before anything is written.
        """
        if not self._fs.exists(self.root):
            self._fs.mkdir(self.root)
        if self._fs.exists(self.path):
            raise ConfigError("File already exists")
        if not self.entries:
            raise ConfigError("No entries given")

        self._validate_entries()

        self._fs.append(self.path, render_header())
        for entry in self.entries:
            self._fs.append(self.path, render_entry(entry))

        _log.info("Wrote template %s with %d entries", self.path.as_posix(), len(self.entries))

    def _validate_entries(self) -> None:
        seen: Set[str] = set()
        for entry in self.entries:
            self._validate_entry(entry, seen)
            seen.add(entry.name)

    def _validate_entry(self, entry: EntryDeclaration, seen: Set[str]) -> None:
        if not NAME_PATTERN.fullmatch(entry.name):
            raise ConfigValidationError(
                "Invalid value for 'name'. May only have uppercase letters and underscores"
            )
        if not TITLE_PATTERN.fullmatch(entry.title):
            raise ConfigValidationError(
                "Invalid value for 'title'. May only have letters and spaces."
            )
        if entry.name in seen:
            raise ConfigValidationError(f"Duplicate entry '{entry.name}'")
        if self._env.get(entry.name):
            raise ConfigValidationError(f"Entry '{entry.name}' is already set in the environment")

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------
    def load_config(self) -> ValidationTally:
        """Load the config file (or its fallback) and check every declaration.

        Missing entries are reported through the notifier and counted in
        the returned tally; they never raise.

        Raises:
            ConfigNotFoundError: if no file could be resolved.
        """
        path = self._resolve()
        _log.info("Loading %s", path.as_posix())
        load_env_file(path, self._env)

        errors = warnings = ignored = 0
        for entry in self.entries:
            if self._env.get(entry.name):
                continue
            message = f"In {self.path.as_posix()}: Property '{entry.name}' is missing"
            if entry.importance is Importance.ERROR:
                self._emit(self._notifier.error, message)
                errors += 1
            elif entry.importance is Importance.WARN:
                self._emit(self._notifier.warn, message)
                warnings += 1
            else:
                self._emit(self._notifier.info, message)
                ignored += 1

        self._summarize(errors, warnings, ignored)
        return ValidationTally(errors=errors, warnings=warnings, ignored=ignored)

    def _resolve(self) -> Path:
        if self._fs.exists(self.path):
            return self.path

        if self.fallback_path is not None:
            if self._fs.exists(self.fallback_path):
                self._emit(
                    self._notifier.warn,
                    f"Couldn't find {self.path.as_posix()}. "
                    f"Falling back to {self.fallback_path.as_posix()}",
                )
                return self.fallback_path
            raise ConfigNotFoundError("Fallback file not found")

        raise ConfigNotFoundError("File not found")

    def _summarize(self, errors: int, warnings: int, ignored: int) -> None:
        n = self._notifier
        if n.error is not None and errors > 0:
            n.error(f"Failed to verify config. {errors} error, {warnings} warnings, {ignored} ignored")
        elif n.warn is not None and warnings > 0:
            n.warn(f"Verified config. {warnings} warnings, {ignored} ignored")
        elif n.info is not None and ignored > 0:
            n.info(f"Verified config. {ignored} ignored")
        elif n.info is not None:
            n.info("Verified config")

    @staticmethod
    def _emit(sink, message: str) -> None:
        if sink is not None:
            sink(message)
