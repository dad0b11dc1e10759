from __future__ import annotations

from pathlib import Path


class TracplsError(RuntimeError):
    pass


class UsageError(TracplsError):
    pass


class MissingCredentialError(TracplsError):
    pass


class FetchError(TracplsError):
    """Upstream or transport failure; the message is shown to the user as-is."""


class PathEncodingError(TracplsError):
    def __init__(self, base_dir: str | Path, name: str, reason: str) -> None:
        self.base_dir = base_dir
        self.name = name
        super().__init__(
            f"cannot compose output path from {str(base_dir)!r} and {name!r}: {reason}"
        )


class DirCreateError(TracplsError):
    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"failed to create directory {path}: {cause}")


class FileWriteError(TracplsError):
    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"failed to write {path}: {cause}")
