from __future__ import annotations

import json
from datetime import timedelta

import httpx
from pydantic import ValidationError
from typer.testing import CliRunner

from adapters import http_client
from cli import doctor
from cli.main import app
from core import constants
from core.config import get_user_env_file
from core.domain.models import NetworkEndpoints, PollingIntervals
from core.registry import ConfigRegistry

runner = CliRunner()


def test_get_value():
    result = runner.invoke(app, ["get", "network-endpoints", "defaultMainnetUrl"])
    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == "https://mainnet.accumulatenetwork.io/v3"


def test_get_interval_is_formatted():
    result = runner.invoke(app, ["get", "polling-intervals", "badgeRefreshInterval"])
    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == "30m"


def test_get_unknown_key_exits_1():
    result = runner.invoke(app, ["get", "network-endpoints", "nope"])
    assert result.exit_code == 1


def test_show_json():
    result = runner.invoke(app, ["show", "--json"])
    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload["network-endpoints"]["defaultMainnetUrl"] == "https://mainnet.accumulatenetwork.io/v3"
    assert payload["polling-intervals"]["defaultPendingTxPollingInterval"] == 45.0


def test_show_writes_output_file(tmp_path):
    out = tmp_path / "exports" / "registry.json"
    result = runner.invoke(app, ["show", "--json", "--output", str(out)])
    assert result.exit_code == 0, result.output
    assert json.loads(out.read_text(encoding="utf-8"))["domain-vocabulary"]["acmeTokenType"] == "ACME"


def test_show_tables():
    result = runner.invoke(app, ["show", "--no-banner"])
    assert result.exit_code == 0, result.output
    assert "acmeTokenType" in result.stdout
    assert "add_tx_memos" in result.stdout


def test_endpoints_mainnet():
    result = runner.invoke(app, ["endpoints", "--network", "mainnet"])
    assert result.exit_code == 0, result.output
    assert "https://explorer.accumulatenetwork.io" in result.stdout


def test_endpoints_default_from_settings(monkeypatch):
    monkeypatch.setenv("ACME_WALLET_NETWORK", "testnet")
    result = runner.invoke(app, ["endpoints"])
    assert result.exit_code == 0, result.output
    assert "acc://faucet.testnet/ACME" in result.stdout


def test_endpoints_rejects_unknown_network():
    result = runner.invoke(app, ["endpoints", "--network", "devnet"])
    assert result.exit_code == 2


def test_tx_types():
    result = runner.invoke(app, ["tx-types"])
    assert result.exit_code == 0, result.output
    for identifier in ("sendTokens", "addCredits", "updateKey"):
        assert identifier in result.stdout


def test_format_address():
    result = runner.invoke(
        app, ["format-address", "acc://a21555da824d14f3f066214657a44e6a1a347dad3052a23a/ACME"]
    )
    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == "acc://a21555...52a23a/ACME"


def test_doctor_offline():
    result = runner.invoke(app, ["doctor", "run", "--offline"])
    assert result.exit_code == 0, result.output
    assert "FAIL" not in result.stdout
    assert "SKIPPED" in result.stdout


def test_doctor_checks_every_endpoint(monkeypatch):
    seen: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(str(request.url))
        return httpx.Response(200)

    original = http_client.build_async_client

    def fake_client(settings=None, **kwargs):
        return original(settings, transport=httpx.MockTransport(handler))

    monkeypatch.setattr(doctor, "build_async_client", fake_client)
    result = runner.invoke(app, ["doctor", "run"])
    assert result.exit_code == 0, result.output
    assert len(seen) == 4


def test_doctor_check_registry_all_ok():
    from core.registry import REGISTRY

    rows = doctor.check_registry(REGISTRY)
    assert rows
    assert all(ok for _, ok, _ in rows)


def test_use_network_writes_user_env():
    result = runner.invoke(app, ["doctor", "use-network", "Mainnet"])
    assert result.exit_code == 0, result.output
    assert "ACME_WALLET_NETWORK=mainnet" in get_user_env_file().read_text(encoding="utf-8")


def test_use_network_rejects_unknown():
    result = runner.invoke(app, ["doctor", "use-network", "devnet"])
    assert result.exit_code == 2


def test_invalid_log_level_exits_cleanly(monkeypatch):
    monkeypatch.setenv("ACME_WALLET_LOG_LEVEL", "verbose")
    result = runner.invoke(app, ["get", "network-endpoints", "defaultMainnetUrl"])
    assert result.exit_code == 1
    assert not isinstance(result.exception, ValidationError)
    assert "log_level" in result.output


def test_invalid_network_setting_exits_cleanly(monkeypatch):
    monkeypatch.setenv("ACME_WALLET_NETWORK", "devnet")
    for args in (["endpoints"], ["doctor", "run", "--offline"]):
        result = runner.invoke(app, args)
        assert result.exit_code == 1, args
        assert not isinstance(result.exception, ValidationError)


def test_doctor_fails_on_bad_registry_value(monkeypatch):
    broken = ConfigRegistry(
        network_endpoints=NetworkEndpoints.model_construct(
            default_accumulate_testnet_url="https://:443/v3",
            default_mainnet_url="https://mainnet.accumulatenetwork.io/v3",
        ),
        explorer_endpoints=constants.EXPLORER_ENDPOINTS,
        polling_intervals=PollingIntervals.model_construct(
            default_pending_tx_polling_interval=timedelta(0),
            badge_refresh_interval=timedelta(minutes=30),
        ),
        domain_vocabulary=constants.DOMAIN_VOCABULARY,
    )
    monkeypatch.setattr(doctor, "REGISTRY", broken)

    rows = {name: ok for name, ok, _ in doctor.check_registry(broken)}
    assert rows["network-endpoints.defaultAccumulateTestnetUrl"] is False
    assert rows["polling-intervals.defaultPendingTxPollingInterval"] is False
    assert rows["network-endpoints.defaultMainnetUrl"] is True

    result = runner.invoke(app, ["doctor", "run", "--offline"])
    assert result.exit_code == 1
    assert "FAIL" in result.stdout


def test_flags_command():
    result = runner.invoke(app, ["flags", "--user", "alice"])
    assert result.exit_code == 0, result.output
    assert "computedStateRolloutPercentage" in result.stdout
    assert "alice: percentile=" in result.stdout
    assert "computed_state=on" in result.stdout
