import os.path
from pathlib import Path

from gui_resources.filesystem.base import BaseFile, BaseFileSystem

try:
    from gui_resources.filesystem.gcs import GCSFileSystem  # type: ignore[no-redef]
except ModuleNotFoundError:

    def GCSFileSystem() -> BaseFileSystem:  # type: ignore[no-redef]
        raise ImportError(
            "Google storage features are disabled. "
            "Please install it with `pip install gui-resources[google]`."
        )


from gui_resources.filesystem.local import LocalFile, LocalFileSystem

GCS_PREFIX = "gs://"


def get_file_system(path: str | Path) -> BaseFileSystem:
    """Pick the file system a resource path lives on, ``gs://`` paths go to GCS."""
    if str(path).startswith(GCS_PREFIX):
        return GCSFileSystem()
    if os.path.exists(path):
        return LocalFileSystem()
    raise FileNotFoundError(f"Resource path {path} does not exist.")


def join_path(base_path: str, suffix: str) -> str:
    """Append a resource filename to a base directory or ``gs://`` prefix."""
    if not base_path.endswith("/"):
        base_path += "/"
    return base_path + suffix


def read_bytes(path: str | Path) -> bytes:
    """Read a whole resource file from local disk or Google Cloud Storage."""
    return get_file_system(path).read_bytes(str(path))


__all__ = [
    "GCS_PREFIX",
    "BaseFile",
    "BaseFileSystem",
    "GCSFileSystem",
    "LocalFile",
    "LocalFileSystem",
    "get_file_system",
    "join_path",
    "read_bytes",
]
