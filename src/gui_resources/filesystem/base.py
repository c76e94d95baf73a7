import abc
from typing import Generic, TypeVar

GenericFile = TypeVar("GenericFile", bound="BaseFile")


class BaseFile(abc.ABC):
    """Abstract base class for resource file access."""

    @abc.abstractmethod
    def read(self, size: int = -1) -> bytes:
        """Read data from the file."""

    @abc.abstractmethod
    def close(self):
        """Close the file."""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False


class BaseFileSystem(Generic[GenericFile], abc.ABC):
    """Abstract base class for the file systems resources are read from."""

    @abc.abstractmethod
    def open(self, path: str, mode: str = "rb") -> GenericFile:
        """Open a file in the specified mode."""

    @abc.abstractmethod
    def exists(self, path: str) -> bool:
        """Check if a path exists in the file system."""

    def read_bytes(self, path: str) -> bytes:
        """Read the whole file in a single blocking call."""
        with self.open(path, "rb") as file:
            return file.read()
