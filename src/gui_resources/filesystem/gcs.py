import gcsfs
from gcsfs import core

from gui_resources import logging
from gui_resources.filesystem import base

LOGGER = logging.get_logger(__name__)


class GCSFile(base.BaseFile):
    """Google Cloud Storage file implementation."""

    def __init__(self, fs: gcsfs.GCSFileSystem, path: str, mode: str = "rb"):
        self.fs = fs
        self.path = path
        self.mode = mode
        self.file: core.GCSFile | None = None

    def open(self):
        """Open the file."""
        self.file = self.fs.open(self.path, self.mode)

    def read(self, size: int = -1) -> bytes:
        """Read data from the file."""
        if self.file is None:
            raise ValueError("File is not open!")
        LOGGER.debug("Reading %s bytes from %s", size, self.path)
        return self.file.read(size)

    def close(self):
        """Close the file."""
        if self.file:
            self.file.close()
            self.file = None


class GCSFileSystem(base.BaseFileSystem[GCSFile]):
    """Google Cloud Storage file system implementation."""

    def __init__(self):
        self.fs = gcsfs.GCSFileSystem()

    def open(self, path: str, mode: str = "rb") -> GCSFile:
        """Open a file in the specified mode."""
        gcs_file = GCSFile(self.fs, path, mode)
        gcs_file.open()
        return gcs_file

    def exists(self, path: str) -> bool:
        return self.fs.exists(path)
