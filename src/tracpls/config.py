from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping

from pydantic import BaseModel, ConfigDict

from .errors import MissingCredentialError, UsageError
from .models import DEFAULT_API_URL, Context, PresentationOptions
from .text import LineEnding, host_line_ending

API_KEY_ENV = "TRACPLS_BSCSCAN_APIKEY"
API_URL_ENV = "TRACPLS_BSCSCAN_API_URL"


class RunConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    address: str
    abi_only: bool = False
    abi_pretty_print: bool = True
    clean_crlf: bool = True
    out_dir: Path | None = None
    silence: bool = False

    def presentation_options(
        self, line_ending: LineEnding | None = None
    ) -> PresentationOptions:
        return PresentationOptions(
            output_directory=self.out_dir,
            normalize_line_endings=self.clean_crlf,
            quiet=self.silence,
            line_ending=line_ending or host_line_ending(),
        )


def build_run_config(
    *,
    address: str,
    no_clean_crlf: bool = False,
    abi_only: bool = False,
    no_abi_pretty_print: bool = False,
    out_dir: str | Path | None = None,
    silence: bool = False,
) -> RunConfig:
    """Validate raw command-line values into a ``RunConfig``.

    Runs before any credential lookup, network or filesystem access.
    """
    if no_abi_pretty_print and not abi_only:
        raise UsageError("--no-abi-pretty-print can only be used together with --abi-only")
    return RunConfig(
        address=address,
        abi_only=abi_only,
        abi_pretty_print=not no_abi_pretty_print,
        clean_crlf=not no_clean_crlf,
        out_dir=Path(out_dir) if out_dir is not None else None,
        silence=silence,
    )


def load_context(environ: Mapping[str, str] | None = None) -> Context:
    env = os.environ if environ is None else environ
    api_key = (env.get(API_KEY_ENV) or "").strip()
    if not api_key:
        raise MissingCredentialError(
            f"Required environment variable '{API_KEY_ENV}' to be defined"
        )
    api_url = (env.get(API_URL_ENV) or "").strip() or DEFAULT_API_URL
    return Context(api_key=api_key, api_url=api_url)
