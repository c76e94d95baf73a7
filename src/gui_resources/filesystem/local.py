import os
from typing import IO, Any

from gui_resources.filesystem import base


class LocalFile(base.BaseFile):
    """A resource file on local disk, opened for one whole-file read."""

    def __init__(self, path: str, mode: str = "rb"):
        self.path = path
        self.mode = mode
        self.file: IO[Any] | None = None

    def open(self):
        """Open the underlying file handle."""
        self.file = open(self.path, self.mode)  # noqa: SIM115

    def read(self, size: int = -1) -> bytes:
        """Read up to ``size`` bytes, the rest of the file by default."""
        if self.file is None:
            raise ValueError("File is not open!")
        return self.file.read(size)

    def close(self) -> None:
        """Release the file handle, safe to call more than once."""
        if self.file:
            self.file.close()
            self.file = None


class LocalFileSystem(base.BaseFileSystem[LocalFile]):
    """Reads resources from the local disk."""

    def open(self, path: str, mode: str = "rb") -> LocalFile:
        """Open a resource file, ``rb`` unless told otherwise."""
        local_file = LocalFile(path, mode)
        local_file.open()
        return local_file

    def exists(self, path: str) -> bool:
        """Whether the resource path exists on disk."""
        return os.path.exists(path)
