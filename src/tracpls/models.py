from __future__ import annotations

from pathlib import Path
from typing import Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .text import LineEnding, host_line_ending

# Multi-file submissions come back with a metadata/settings record in front of
# the actual source files. Only this constant encodes how many to skip.
MULTI_FILE_METADATA_ENTRIES = 1

DEFAULT_API_URL = "https://api.bscscan.com/api"


class AbiBlob(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str


class SourceFile(BaseModel):
    model_config = ConfigDict(frozen=True)

    contract_name: str
    source_code: str


class SourceBundle(BaseModel):
    model_config = ConfigDict(frozen=True)

    files: tuple[SourceFile, ...]
    submitted_as_multi_file: bool = False

    @model_validator(mode="after")
    def _validate_file_count(self) -> "SourceBundle":
        if not self.submitted_as_multi_file and len(self.files) != 1:
            raise ValueError(
                f"single-file bundle must hold exactly one file, got {len(self.files)}"
            )
        if self.submitted_as_multi_file and not self.files:
            raise ValueError("multi-file bundle must hold at least one entry")
        return self

    def rendered_files(
        self, metadata_entries: int = MULTI_FILE_METADATA_ENTRIES
    ) -> tuple[SourceFile, ...]:
        """Files that are actually shown or written.

        A single-file bundle yields its only file. A multi-file bundle drops
        the leading ``metadata_entries`` records and keeps the rest in their
        original order, duplicates included.
        """
        if not self.submitted_as_multi_file:
            return self.files[:1]
        return self.files[metadata_entries:]


Artifact = Union[AbiBlob, SourceBundle]


class PresentationOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    output_directory: Path | None = None
    normalize_line_endings: bool = True
    quiet: bool = False
    line_ending: LineEnding = Field(default_factory=host_line_ending)


class Context(BaseModel):
    model_config = ConfigDict(frozen=True)

    api_key: str
    api_url: str = DEFAULT_API_URL
