"""Doctor commands: registry sanity checks and connectivity."""

from __future__ import annotations

import asyncio
import logging
from datetime import timedelta

import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client, probe_endpoint
from cli.ui_components import load_settings
from core.config import ENV_PREFIX, AppSettings, write_user_env_vars
from core.domain.models import is_absolute_https_url
from core.feature_flags import FEATURE_FLAGS
from core.domain.network import NetworkType
from core.registry import REGISTRY, ConfigRegistry, Namespace

app = typer.Typer(no_args_is_help=True, help="Registry diagnostics and network selection.")

_console = Console()
_err_console = Console(stderr=True)
logger = logging.getLogger(__name__)

_URL_NAMESPACES = (Namespace.NETWORK_ENDPOINTS, Namespace.EXPLORER_ENDPOINTS)


def check_registry(registry: ConfigRegistry) -> list[tuple[str, bool, str]]:
    """Re-check the registry invariants, one row per value."""

    rows: list[tuple[str, bool, str]] = []
    for ns in _URL_NAMESPACES:
        for key, value in registry.items(ns):
            ok = is_absolute_https_url(str(value))
            rows.append((f"{ns.value}.{key}", ok, str(value)))
    for key, value in registry.items(Namespace.POLLING_INTERVALS):
        ok = isinstance(value, timedelta) and value > timedelta(0)
        rows.append((f"{Namespace.POLLING_INTERVALS.value}.{key}", ok, str(value)))

    seen: set[str] = set()
    for key, value in registry.items(Namespace.DOMAIN_VOCABULARY):
        ok = bool(value) and value not in seen
        seen.add(str(value))
        rows.append((f"{Namespace.DOMAIN_VOCABULARY.value}.{key}", ok, str(value)))
    return rows


async def _check_http(urls: list[str], settings: AppSettings) -> list[tuple[str, bool, str]]:
    async with build_async_client(settings) as client:
        results = await asyncio.gather(*(probe_endpoint(client, url) for url in urls))
    return [(url, ok, detail) for url, (ok, detail) in zip(urls, results)]


@app.command()
def run(
    offline: bool = typer.Option(False, "--offline", help="Skip HTTP connectivity checks."),
) -> None:
    """Validate the registry and probe every endpoint."""

    settings = load_settings(_err_console)

    table = Table(title="ACME Wallet Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white", no_wrap=True)
    table.add_column("Details", style="dim")

    table.add_row("Active network", "OK", settings.network.value)

    failures = 0
    for name, ok, detail in check_registry(REGISTRY):
        failures += 0 if ok else 1
        table.add_row(name, "OK" if ok else "FAIL", detail)

    flag_warnings = FEATURE_FLAGS.validate_configuration()
    for warning in flag_warnings:
        table.add_row("Feature flags", "WARN", warning)
    if not flag_warnings:
        rollout = FEATURE_FLAGS.computed_state_rollout_percentage
        table.add_row("Feature flags", "OK", f"computed state rollout {rollout}%")

    if offline:
        table.add_row("HTTP connectivity", "SKIPPED", "--offline")
    else:
        urls = [str(v) for ns in _URL_NAMESPACES for _, v in REGISTRY.items(ns)]
        for url, ok, detail in asyncio.run(_check_http(urls, settings)):
            # Unreachable endpoints are reported, not fatal.
            table.add_row(f"GET {url}", "OK" if ok else "FAIL", detail)

    _console.print(table)

    if failures:
        logger.error("%d registry check(s) failed", failures)
        raise typer.Exit(code=1)


@app.command(name="use-network")
def use_network(
    network: str = typer.Argument(..., help="testnet or mainnet"),
) -> None:
    """Store the preferred network in the user config .env."""

    try:
        selected = NetworkType.parse(network)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    env_path = write_user_env_vars({f"{ENV_PREFIX}NETWORK": selected.value})
    _console.print(f"[green]Saved network '{selected.value}' to:[/green] {env_path}")
