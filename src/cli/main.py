"""Typer CLI entrypoint.

Why Typer + Rich:
- Commands are plain functions with typed options.
- Rich renders the namespaces as tables and hosts the log handler.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from adapters.json_exporter import export_registry_json, registry_to_json_text
from cli import doctor
from cli.ui_components import (
    build_flags_table,
    build_namespace_table,
    build_profile_table,
    build_tx_types_table,
    format_value,
    load_settings,
    print_banner,
)
from core.addresses import format_lite_account_address, is_valid_accumulate_url
from core.domain.network import NetworkType
from core.feature_flags import FEATURE_FLAGS
from core.registry import REGISTRY, Namespace, UnknownKeyError

app = typer.Typer(
    no_args_is_help=True,
    help="Inspect the Accumulate wallet configuration registry.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=_err_console, rich_tracebacks=True)],
        force=True,
    )


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level."),
) -> None:
    settings = load_settings(_err_console)
    configure_logging("DEBUG" if verbose else settings.log_level)


@app.command()
def show(
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of tables."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Also write JSON to this file."),
    banner: bool = typer.Option(True, "--banner/--no-banner"),
) -> None:
    """Print every namespace."""

    if output is not None:
        path = export_registry_json(registry=REGISTRY, output_path=output)
        _err_console.print(f"[green]JSON written to:[/green] {path}")

    if as_json:
        typer.echo(registry_to_json_text(REGISTRY), nl=False)
        return

    if banner:
        print_banner(_console)
    for ns in Namespace:
        _console.print(build_namespace_table(REGISTRY, ns))


@app.command()
def get(
    namespace: str = typer.Argument(..., help="e.g. network-endpoints"),
    key: str = typer.Argument(..., help="e.g. defaultMainnetUrl"),
) -> None:
    """Print a single value."""

    try:
        value = REGISTRY.get(namespace, key)
    except UnknownKeyError as exc:
        _err_console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1) from exc
    typer.echo(format_value(value))


@app.command()
def endpoints(
    network: Optional[str] = typer.Option(
        None, "--network", "-n", help="testnet or mainnet (default: settings)."
    ),
) -> None:
    """Show API, explorer and faucet locations for a network."""

    if network is None:
        selected = load_settings(_err_console).network
    else:
        try:
            selected = NetworkType.parse(network)
        except ValueError as exc:
            raise typer.BadParameter(str(exc), param_hint="--network") from exc

    _console.print(build_profile_table(REGISTRY.endpoints_for(selected)))


@app.command(name="tx-types")
def tx_types() -> None:
    """List transaction-type identifiers."""

    _console.print(build_tx_types_table())


@app.command()
def flags(
    user: Optional[str] = typer.Option(None, "--user", "-u", help="Show the rollout decision for this user id."),
) -> None:
    """Show feature flags and, optionally, one user's rollout bucket."""

    _console.print(build_flags_table(FEATURE_FLAGS))
    if user is not None:
        enabled = FEATURE_FLAGS.is_computed_state_enabled_for_user(user)
        percentile = FEATURE_FLAGS.user_percentile(user)
        typer.echo(f"{user}: percentile={percentile} computed_state={'on' if enabled else 'off'}")


@app.command(name="format-address")
def format_address(address: str = typer.Argument(..., help="acc://... lite account")) -> None:
    """Shorten a lite account address for display."""

    if not is_valid_accumulate_url(address):
        _err_console.print(f"[yellow]Not an acc:// URL, left unchanged:[/yellow] {address}")
    typer.echo(format_lite_account_address(address))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
