from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

import typer

from ..models import (
    MULTI_FILE_METADATA_ENTRIES,
    AbiBlob,
    Artifact,
    PresentationOptions,
    SourceBundle,
)
from ..text import normalize
from .paths import compose, ensure_parent_dirs
from .sink import write_file

ABI_FILENAME = "abi.json"
SOURCE_EXTENSION = ".sol"
BANNER_DELIMITER = "-" * 10


def echo_verbatim(text: str) -> None:
    # color=True stops click from stripping ANSI sequences when stdout is piped.
    typer.echo(text, color=True)


def banner(name: str) -> str:
    return f"{BANNER_DELIMITER} {name} {BANNER_DELIMITER}"


def single_file_name(contract_name: str) -> str:
    if contract_name.lower().endswith(SOURCE_EXTENSION):
        return contract_name
    return f"{contract_name}{SOURCE_EXTENSION}"


@dataclass(frozen=True)
class OutputRouter:
    """Print an artifact to stdout or persist it under an output directory.

    The mode is fixed by ``options.output_directory`` for the whole run. In
    directory mode the first filesystem failure propagates immediately; files
    written before it are left in place.
    """

    options: PresentationOptions
    metadata_entries: int = MULTI_FILE_METADATA_ENTRIES
    echo: Callable[[str], None] = field(default=echo_verbatim)

    def route(self, artifact: Artifact) -> list[Path]:
        if isinstance(artifact, AbiBlob):
            return self._route_abi(artifact)
        if isinstance(artifact, SourceBundle):
            if artifact.submitted_as_multi_file:
                return self._route_multi_file(artifact)
            return self._route_single_file(artifact)
        raise TypeError(f"unsupported artifact type: {type(artifact).__name__}")

    def _prepare(self, text: str) -> str:
        if self.options.normalize_line_endings:
            return normalize(text, self.options.line_ending)
        return text

    def _persist(self, out_dir: Path, name: str, content: str) -> Path:
        path = compose(out_dir, name)
        ensure_parent_dirs(path)
        write_file(path, self._prepare(content))
        if not self.options.quiet:
            self.echo(str(path))
        return path

    def _route_abi(self, abi: AbiBlob) -> list[Path]:
        out_dir = self.options.output_directory
        if out_dir is None:
            self.echo(self._prepare(abi.text))
            return []
        return [self._persist(out_dir, ABI_FILENAME, abi.text)]

    def _route_single_file(self, bundle: SourceBundle) -> list[Path]:
        (source,) = bundle.rendered_files()
        out_dir = self.options.output_directory
        if out_dir is None:
            self.echo(self._prepare(source.source_code))
            return []
        return [
            self._persist(out_dir, single_file_name(source.contract_name), source.source_code)
        ]

    def _route_multi_file(self, bundle: SourceBundle) -> list[Path]:
        files = bundle.rendered_files(self.metadata_entries)
        out_dir = self.options.output_directory
        if out_dir is None:
            for source in files:
                self.echo(banner(source.contract_name))
                self.echo(self._prepare(source.source_code))
            return []
        written: list[Path] = []
        for source in files:
            written.append(self._persist(out_dir, source.contract_name, source.source_code))
        return written
