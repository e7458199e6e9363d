#envscaffold/models.py
from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Any, Callable, List, Optional
from pydantic import BaseModel, ConfigDict, Field

# --- CUSTOM PYDANTIC TYPES ---
NonNegativeInt = Annotated[int, Field(ge=0)]
Sink = Callable[[str], Any]
# ------------------------------------------------------------------


class Importance(str, Enum):
    """Severity applied when a declared variable is missing at load time."""
    IGNORE = "ignore"
    WARN = "warn"
    ERROR = "error"


@dataclass(frozen=True)
class Notifier:
    """Three independently optional message sinks.

    A sink left as ``None`` means messages of that severity are dropped;
    there is no fallback to another sink.
    """
    info: Optional[Sink] = None
    warn: Optional[Sink] = None
    error: Optional[Sink] = None

    @classmethod
    def from_logger(cls, logger: logging.Logger) -> "Notifier":
        """Route all three sinks to a stdlib logger."""
        return cls(info=logger.info, warn=logger.warning, error=logger.error)


class EntryDeclaration(BaseModel):
    """One expected environment variable.

    ``name`` and ``title`` are only checked when a template is scaffolded,
    so callers that only load never pay for it.
    """
    model_config = ConfigDict(frozen=True)

    name: str
    title: str
    description: str
    options: str
    default: Optional[str] = None
    importance: Importance


class ManagerConfig(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    entries: List[EntryDeclaration]
    file: str
    fallback: Optional[str] = None
    logger: Optional[Notifier] = None
    root_dir: str = "config"


class ValidationTally(BaseModel):
    """Missing-entry counts produced by a single load."""
    model_config = ConfigDict(frozen=True)

    errors: NonNegativeInt = 0
    warnings: NonNegativeInt = 0
    ignored: NonNegativeInt = 0

    @property
    def ok(self) -> bool:
        return self.errors == 0
