import os
import logging
import tempfile
from pathlib import Path
from typing import Protocol, Union

file_io_logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class FileSystem(Protocol):
    def exists(self, path: PathLike) -> bool: ...

    def mkdir(self, path: PathLike) -> None: ...

    def append(self, path: PathLike, text: str) -> None: ...


class LocalFileSystem:
    """FileSystem implementation over the local disk."""

    def exists(self, path: PathLike) -> bool:
        return os.path.exists(path)

    def mkdir(self, path: PathLike) -> None:
        os.makedirs(path, exist_ok=True)
        file_io_logger.debug(f"Created directory {path}")

    def append(self, path: PathLike, text: str) -> None:
        with open(path, "a", encoding="utf-8") as fp:
            fp.write(text)


def atomic_write_text(filepath: PathLike, text: str) -> None:
    """
    Atomically write text to a file.

    Steps:
    - Write to a temp file in the same directory.
    - Replace target atomically with os.replace().

    Errors are logged and re-raised; the temp file is removed on failure.
    """
    filepath = str(filepath)
    dir_path = os.path.dirname(filepath)
    if dir_path:
        os.makedirs(dir_path, exist_ok=True)

    temp_file_name = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w", delete=False, dir=dir_path or None, encoding="utf-8"
        ) as tmp_fp:
            tmp_fp.write(text)
            temp_file_name = tmp_fp.name

        os.replace(temp_file_name, filepath)
        file_io_logger.info(f"Successfully saved {filepath} atomically.")
    except OSError as e:
        file_io_logger.error(f"Error during atomic save to {filepath}: {e}")
        if temp_file_name and os.path.exists(temp_file_name):
            os.remove(temp_file_name)
        raise
