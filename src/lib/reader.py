"""
Bounded target-file reading and resolver errors
"""

from pathlib import Path
from typing import Union


class CssModJumpError(Exception):
    """Base class for errors surfaced to the host"""
    pass


class TargetReadError(CssModJumpError):
    """Raised when a resolved target file cannot be read"""

    def __init__(self, path: Union[str, Path], reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Cannot read {self.path}: {reason}")


class TargetFileTooLargeError(TargetReadError):
    """Raised when a target file exceeds the configured read limit"""

    def __init__(self, path: Union[str, Path], size: int, limit: int) -> None:
        self.size = size
        self.limit = limit
        super().__init__(path, f"{size} bytes exceeds the {limit} byte limit")


def text_read(path: Union[str, Path], max_bytes: int) -> str:
    """
    Read a whole stylesheet or YAML file as UTF-8 text

    Args:
        path: File to read
        max_bytes: Upper bound on the file size

    Returns:
        The file content (undecodable bytes replaced)

    Raises:
        TargetFileTooLargeError: If the file is larger than max_bytes
        TargetReadError: If the file is missing or unreadable
    """
    file_path = Path(path)
    try:
        size = file_path.stat().st_size
        if size > max_bytes:
            raise TargetFileTooLargeError(file_path, size, max_bytes)
        return file_path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise TargetReadError(file_path, e.strerror or str(e)) from e
