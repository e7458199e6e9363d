#envscaffold/schema.py
"""
Entry declarations stored as TOML.

A schema file holds one ``[[entry]]`` table per declaration::

    [[entry]]
    name = "LOGLEVEL"
    title = "Log level"
    description = "The required level for a message to be logged"
    options = "debug | info | warn | error"
    default = "info"
    importance = "error"
"""
from pathlib import Path
from typing import List, Sequence, Union
import logging

import tomlkit
from pydantic import ValidationError
from tomlkit.exceptions import TOMLKitError

from .exceptions import ConfigError
from .filesystem import atomic_write_text
from .models import EntryDeclaration

_log = logging.getLogger(__name__)

ENTRY_TABLE = "entry"


def load_entries(path: Union[str, Path]) -> List[EntryDeclaration]:
    """
    Read entry declarations from a TOML schema file.

    Args:
        path: Path to the schema file.

    Returns:
        Declarations in file order.

    Raises:
        ConfigError: if the file is missing, is not valid TOML, or holds
            an entry that does not fit the declaration model.
    """
    path = Path(path)
    if not path.exists():
        raise ConfigError(f"Schema file not found: {path}")

    try:
        data = tomlkit.loads(path.read_text(encoding="utf-8")).unwrap()
    except TOMLKitError as e:
        raise ConfigError(f"Failed to parse TOML schema {path}: {e}") from e

    raw_entries = data.get(ENTRY_TABLE, [])
    if not isinstance(raw_entries, list):
        raise ConfigError(f"'{ENTRY_TABLE}' in {path} must be an array of tables")

    try:
        entries = [EntryDeclaration.model_validate(raw) for raw in raw_entries]
    except ValidationError as e:
        raise ConfigError(f"Invalid entry in {path}: {e}") from e

    _log.debug("Loaded %d entries from %s", len(entries), path)
    return entries


def dumps_entries(entries: Sequence[EntryDeclaration]) -> str:
    doc = tomlkit.document()
    tables = tomlkit.aot()
    for entry in entries:
        table = tomlkit.table()
        for key, value in entry.model_dump(mode="json", exclude_none=True).items():
            table.add(key, value)
        tables.append(table)
    doc.add(ENTRY_TABLE, tables)
    return tomlkit.dumps(doc)


def save_entries(entries: Sequence[EntryDeclaration], path: Union[str, Path]) -> None:
    """Write declarations to a TOML schema file, replacing it atomically."""
    atomic_write_text(path, dumps_entries(entries))
    _log.info("Saved %d entries to %s", len(entries), path)
