from __future__ import annotations

from pathlib import Path

from ..errors import DirCreateError, PathEncodingError


def _relative_parts(base_dir: str | Path, name: str) -> list[str]:
    raw = name.replace("\\", "/").strip()
    parts = [p for p in raw.split("/") if p not in {"", "."}]
    if not parts:
        raise PathEncodingError(base_dir, name, "empty file name")
    if any(p == ".." for p in parts):
        raise PathEncodingError(base_dir, name, "path traversal is not allowed")
    return parts


def compose(base_dir: str | Path, name: str) -> Path:
    """Join ``name`` under ``base_dir``.

    Names coming from multi-file bundles are relative source paths such as
    ``contracts/token/Token.sol``; they are kept as nested segments but can
    never escape ``base_dir``.
    """
    path = Path(base_dir).joinpath(*_relative_parts(base_dir, name))
    text = str(path)
    if "\x00" in text:
        raise PathEncodingError(base_dir, name, "path contains a NUL character")
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise PathEncodingError(base_dir, name, "path is not valid UTF-8 text") from exc
    return path


def ensure_parent_dirs(filepath: Path) -> Path:
    parent = filepath.parent
    try:
        parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise DirCreateError(parent, exc) from exc
    return parent
