"""Rich UI components for the CLI.

Why separate components:
- Keeps command logic apart from presentation details.
- Tables are reused by several commands.
"""

from __future__ import annotations

from datetime import timedelta

import typer
from pydantic import ValidationError
from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.config import AppSettings
from core.constants import APP_NAME, APP_VERSION
from core.domain.models import NetworkProfile
from core.feature_flags import FeatureFlags
from core.domain.transactions import TransactionType
from core.registry import ConfigRegistry, Namespace, Value


def print_banner(console: Console) -> None:
    title = Text("ACME Wallet Config", style="bold cyan")
    subtitle = Text(f"{APP_NAME} {APP_VERSION} • Endpoints • Intervals • Vocabulary", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def format_value(value: Value) -> str:
    """Durations as ``45s`` / ``30m``; everything else verbatim."""

    if isinstance(value, timedelta):
        seconds = int(value.total_seconds())
        if seconds % 3600 == 0:
            return f"{seconds // 3600}h"
        if seconds % 60 == 0:
            return f"{seconds // 60}m"
        return f"{seconds}s"
    return str(value)


def build_namespace_table(registry: ConfigRegistry, namespace: Namespace) -> Table:
    table = Table(title=namespace.value)
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    for key, value in registry.items(namespace):
        table.add_row(key, format_value(value))
    return table


def build_profile_table(profile: NetworkProfile) -> Table:
    table = Table(title=f"{profile.network.label()} endpoints")
    table.add_column("Role", style="cyan", no_wrap=True)
    table.add_column("Location", style="magenta")
    table.add_row("API", profile.api_url)
    table.add_row("Explorer", profile.explorer_url)
    table.add_row("Faucet", profile.faucet_address or "-")
    return table


def build_tx_types_table() -> Table:
    table = Table(title="Transaction types")
    table.add_column("Identifier", style="cyan", no_wrap=True)
    table.add_column("Label", style="white")
    for tx_type in TransactionType:
        table.add_row(tx_type.value, tx_type.label())
    return table


def load_settings(err_console: Console) -> AppSettings:
    """Build `AppSettings`, turning a bad env/.env value into a clean exit."""

    try:
        return AppSettings()
    except ValidationError as exc:
        err_console.print("[red]Invalid settings (environment or .env):[/red]")
        for error in exc.errors():
            field = ".".join(str(part) for part in error["loc"]) or "?"
            err_console.print(f"[red]- {field}: {error['msg']}[/red]")
        raise typer.Exit(code=1) from exc


def build_flags_table(flags: FeatureFlags) -> Table:
    table = Table(title="Feature flags")
    table.add_column("Flag", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    for name, info in type(flags).model_fields.items():
        table.add_row(info.alias or name, str(getattr(flags, name)))
    return table
