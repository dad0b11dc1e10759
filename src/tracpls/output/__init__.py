from .paths import compose, ensure_parent_dirs
from .router import ABI_FILENAME, SOURCE_EXTENSION, OutputRouter, banner
from .sink import write_file

__all__ = [
    "ABI_FILENAME",
    "SOURCE_EXTENSION",
    "OutputRouter",
    "banner",
    "compose",
    "ensure_parent_dirs",
    "write_file",
]
