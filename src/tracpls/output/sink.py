from __future__ import annotations

from pathlib import Path

from ..errors import FileWriteError


def write_file(filepath: Path, content: str) -> Path:
    # newline="" keeps the already-normalized terminators byte for byte.
    try:
        with filepath.open("w", encoding="utf-8", newline="") as fh:
            fh.write(content)
    except OSError as exc:
        raise FileWriteError(filepath, exc) from exc
    return filepath
