from __future__ import annotations

import sys
from enum import StrEnum


class LineEnding(StrEnum):
    LF = "lf"
    CR = "cr"
    MIXED = "mixed"


def line_ending_for_platform(platform: str) -> LineEnding:
    """Map a ``sys.platform`` identifier to the line terminator it expects.

    Linux uses bare line feeds and macOS is treated as carriage-return only.
    Anything else (notably Windows) accepts CR/LF pairs and is left alone.
    """
    if platform.startswith("linux"):
        return LineEnding.LF
    if platform == "darwin":
        return LineEnding.CR
    return LineEnding.MIXED


def host_line_ending() -> LineEnding:
    return line_ending_for_platform(sys.platform)


def normalize(text: str, line_ending: LineEnding) -> str:
    if line_ending is LineEnding.LF:
        return text.replace("\r\n", "\n").replace("\r", "\n")
    if line_ending is LineEnding.CR:
        return text.replace("\r\n", "\r").replace("\n", "\r")
    return text
