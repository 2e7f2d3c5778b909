import logging
import os
import shutil
from pathlib import Path
from typing import BinaryIO

from errors import StorageError

logger = logging.getLogger(__name__)

_UNSAFE_CHARACTERS = ("/", "\\", "\x00")


class DiskStorage:
    """Durable blob storage in a single local directory."""

    def __init__(self, directory):
        self.directory = Path(directory).resolve()
        self.directory.mkdir(parents=True, exist_ok=True)

    @staticmethod
    def safe_name(name: str) -> str:
        for character in _UNSAFE_CHARACTERS:
            name = name.replace(character, "_")
        if name in ("", ".", ".."):
            name = "unnamed"
        return name

    def path_for(self, name: str) -> Path:
        path = (self.directory / name).resolve()
        if path.parent != self.directory:
            raise StorageError(f"Storage name escapes the upload directory: {name!r}")
        return path

    def write(self, name: str, content: BinaryIO) -> int:
        """Write ``content`` under ``name`` and return the number of bytes written.

        Raises FileExistsError if the name is taken; nothing is overwritten.
        """
        path = self.path_for(name)
        try:
            with open(path, "xb") as destination:
                shutil.copyfileobj(content, destination)
                destination.flush()
                os.fsync(destination.fileno())
                written = destination.tell()
        except FileExistsError:
            raise
        except OSError as error:
            if path.exists():
                path.unlink()
            raise StorageError(f"Could not write {name}: {error}") from error
        return written

    def exists(self, name: str) -> bool:
        try:
            return self.path_for(name).is_file()
        except StorageError:
            return False

    def list_names(self) -> list[str]:
        return sorted(entry.name for entry in self.directory.iterdir() if entry.is_file())
