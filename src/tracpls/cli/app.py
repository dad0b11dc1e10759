from __future__ import annotations

from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape

from ..bscscan.client import BscScanClient
from ..config import build_run_config, load_context
from ..errors import TracplsError
from ..runner import run_tracpls

app = typer.Typer(
    add_completion=False,
    pretty_exceptions_show_locals=False,
    help="Get a smart contract's verified source code or ABI for viewing on the terminal.",
)

_err = Console(stderr=True, highlight=False)


def _fail(exc: Exception) -> NoReturn:
    _err.print(f"[bold red]error:[/bold red] {escape(str(exc))}", soft_wrap=True)
    raise typer.Exit(code=1)


@app.command()
def main(
    address: str = typer.Option(
        ..., "--address", "-a", help="Contract address to get source code or ABI from"
    ),
    no_clean_crlf: bool = typer.Option(
        False,
        "--no-clean-crlf",
        help="Keep CR/LF sequences as served instead of matching this platform",
    ),
    abi_only: bool = typer.Option(False, "--abi-only", help="Get only the contract ABI"),
    no_abi_pretty_print: bool = typer.Option(
        False,
        "--no-abi-pretty-print",
        help="Print the ABI as served. Only valid with --abi-only",
    ),
    out_dir: str | None = typer.Option(
        None, "--out-dir", help="Write files under this directory instead of stdout"
    ),
    silence: bool = typer.Option(
        False, "--silence", "-s", help="Do not print paths of written files"
    ),
) -> None:
    """Fetch a contract's source code (or ABI) and print or save it."""
    try:
        cfg = build_run_config(
            address=address,
            no_clean_crlf=no_clean_crlf,
            abi_only=abi_only,
            no_abi_pretty_print=no_abi_pretty_print,
            out_dir=out_dir,
            silence=silence,
        )
        ctx = load_context()
        with BscScanClient() as client:
            run_tracpls(cfg, ctx, client=client)
    except TracplsError as exc:
        _fail(exc)
