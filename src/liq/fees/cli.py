"""Typer-based CLI entrypoints for liq-fees."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import typer
from rich.console import Console
from rich.table import Table

from liq.fees.config import FeeServiceConfig
from liq.fees.exceptions import FeeError
from liq.fees.maker_share import MakerShareConfig
from liq.fees.snapshot import ShareConfigSnapshot
from liq.fees.tiers import FEE_DENOMINATOR, FeeTier, parse_tier, ratio_of, total_fee

app = typer.Typer(help="liq-fees CLI")
console = Console()


def _load_json(path: Path) -> Any:
    with path.open() as f:
        return json.load(f)


_JSON_LOG_FORMAT = (
    '{"time": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", "message": "%(message)s"}'
)


def _configure_logging(cfg: FeeServiceConfig) -> None:
    fmt = _JSON_LOG_FORMAT if cfg.log_format == "json" else logging.BASIC_FORMAT
    logging.basicConfig(level=cfg.log_level, format=fmt)


def _fail(exc: Exception) -> typer.Exit:
    console.print(f"[red]Error:[/red] {exc}")
    return typer.Exit(1)


@app.command("tiers")
def list_tiers() -> None:
    """Show registered fee tiers and their ratios."""
    table = Table(title="Fee Tiers", show_lines=False)
    table.add_column("Tier")
    table.add_column("Tag")
    table.add_column(f"Ratio (/{FEE_DENOMINATOR})", justify="right")
    for tier in FeeTier:
        table.add_row(tier.name, tier.value, str(ratio_of(tier)))
    console.print(table)


@app.command("total-fee")
def show_total_fee(
    notional: int = typer.Argument(..., help="Trade notional in base units"),
    tier: str = typer.Argument(..., help="Fee tier tag (e.g. 0.05%) or name"),
) -> None:
    """Compute the total fee for a notional at a tier."""
    try:
        fee = total_fee(notional, parse_tier(tier))
    except FeeError as exc:
        raise _fail(exc) from None
    console.print(f"[cyan]Total fee:[/cyan] {fee}")


@app.command("validate-config")
def validate_config(
    config_path: Path = typer.Argument(..., help="Path to fee service config JSON"),  # noqa: B008
) -> None:
    """Validate a fee service configuration."""
    try:
        FeeServiceConfig(**_load_json(config_path))
    except Exception as exc:  # noqa: BLE001
        console.print(f"[red]Invalid config:[/red] {exc}")
        raise typer.Exit(1) from None
    console.print("[green]Config is valid.[/green]")


@app.command("init")
def init_config(
    config_path: Path = typer.Argument(..., help="Path to fee service config JSON"),  # noqa: B008
    snapshot_out: Path = typer.Argument(..., help="Where to write the configuration snapshot"),  # noqa: B008
) -> None:
    """Initialize the maker share configuration with default proportions."""
    cfg = FeeServiceConfig(**_load_json(config_path))
    _configure_logging(cfg)
    if snapshot_out.exists():
        raise _fail(FeeError(f"snapshot {snapshot_out} already exists; configuration is already initialized"))
    service = MakerShareConfig(admin=cfg.admin)
    service.initialize(cfg.admin)
    service.to_snapshot().save(snapshot_out)
    record = service.proportions()
    console.print(
        f"[green]Initialized:[/green] grid={record.grid_proportion} order={record.order_proportion}"
    )


@app.command("set-shares")
def set_shares(
    snapshot_path: Path = typer.Argument(
        ..., exists=True, dir_okay=False, help="Configuration snapshot to update"
    ),  # noqa: B008
    grid: int = typer.Argument(..., help="Maker proportion of grid fees (0-1000)"),
    order: int = typer.Argument(..., help="Maker proportion of order fees (0-1000)"),
    caller: str = typer.Option(..., help="Identity performing the update"),
) -> None:
    """Update maker proportions; only the administrator may do this."""
    try:
        service = MakerShareConfig.from_snapshot(ShareConfigSnapshot.load(snapshot_path))
        service.set_shares(caller, grid, order)
    except FeeError as exc:
        raise _fail(exc) from None
    service.to_snapshot().save(snapshot_path)
    console.print(f"[green]Updated:[/green] grid={grid} order={order}")


@app.command("split")
def split(
    snapshot_path: Path = typer.Argument(
        ..., exists=True, dir_okay=False, help="Configuration snapshot"
    ),  # noqa: B008
    fee: int = typer.Argument(..., help="Total fee to split"),
    grid: bool = typer.Option(False, "--grid/--order", help="Split as a grid fee or an order fee"),
) -> None:
    """Split a fee between maker and platform."""
    try:
        service = MakerShareConfig.from_snapshot(ShareConfigSnapshot.load(snapshot_path))
        result = service.split_fee(fee, is_grid=grid)
    except FeeError as exc:
        raise _fail(exc) from None
    table = Table(title="Fee Split", show_lines=False)
    table.add_column("Maker", justify="right")
    table.add_column("Platform", justify="right")
    table.add_row(str(result.maker_share), str(result.platform_share))
    console.print(table)


if __name__ == "__main__":
    app()
