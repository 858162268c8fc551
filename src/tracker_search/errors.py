"""Errors raised by the loading surfaces around the index.

Building and searching never raise; only reading record payloads does.
"""

from pathlib import Path


class RecordLoadError(ValueError):
    """A records or people file could not be read or validated."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")
