from __future__ import annotations

from pathlib import Path

from .bscscan.client import BscScanClient
from .config import RunConfig
from .models import Artifact, Context, PresentationOptions
from .output.router import OutputRouter


def fetch_artifact(cfg: RunConfig, ctx: Context, *, client: BscScanClient) -> Artifact:
    if cfg.abi_only:
        return client.get_abi(ctx, cfg.address, pretty_print=cfg.abi_pretty_print)
    return client.get_source(ctx, cfg.address)


def run_tracpls(
    cfg: RunConfig,
    ctx: Context,
    *,
    client: BscScanClient,
    options: PresentationOptions | None = None,
    router: OutputRouter | None = None,
) -> list[Path]:
    """Fetch the requested artifact and hand it to the output router once."""
    artifact = fetch_artifact(cfg, ctx, client=client)
    out = router or OutputRouter(options=options or cfg.presentation_options())
    return out.route(artifact)
