"""JSON export of the registry.

Why JSON:
- Lets non-Python parts of the wallet (mobile app, pollers) consume the same
  values without re-typing them.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.registry import ConfigRegistry


def registry_to_json_text(registry: ConfigRegistry) -> str:
    """Stable, UTF-8 JSON rendering (sorted keys, durations in seconds)."""

    return json.dumps(registry.to_json(), ensure_ascii=False, indent=2, sort_keys=True) + "\n"


def export_registry_json(*, registry: ConfigRegistry, output_path: Path) -> Path:
    """Write the registry snapshot to ``output_path``."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(registry_to_json_text(registry), encoding="utf-8")
    return output_path
