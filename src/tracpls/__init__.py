from .errors import (
    DirCreateError,
    FetchError,
    FileWriteError,
    MissingCredentialError,
    PathEncodingError,
    TracplsError,
    UsageError,
)
from .models import AbiBlob, PresentationOptions, SourceBundle, SourceFile
from .text import LineEnding, normalize

__all__ = [
    "AbiBlob",
    "DirCreateError",
    "FetchError",
    "FileWriteError",
    "LineEnding",
    "MissingCredentialError",
    "PathEncodingError",
    "PresentationOptions",
    "SourceBundle",
    "SourceFile",
    "TracplsError",
    "UsageError",
    "normalize",
]
