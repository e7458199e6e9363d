"""Text of the scaffolded .env template."""

from .models import EntryDeclaration

HEADER = (
    "# Title\n"
    "# description: Description\n"
    "# required   : no | warn | fatal\n"
    "# default    : default value\n"
    "# options    : possible values\n"
    "# SOME_VARIABLE=some-value\n\n"
)

NO_DEFAULT = "<none>"


def render_header() -> str:
    return HEADER


def render_entry(entry: EntryDeclaration) -> str:
    """Comment block plus the live ``NAME=value`` line for one declaration."""
    return (
        f"# {entry.title}\n"
        f"# description: {entry.description}\n"
        f"# required   : {entry.importance.value}\n"
        f"# default    : {entry.default or NO_DEFAULT}\n"
        f"# options    : {entry.options}\n"
        f"{entry.name}={entry.default or ''}\n\n"
    )
