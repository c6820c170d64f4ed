"""Namespace models for the configuration registry (Pydantic v2).

Why Pydantic in the domain:
- Each namespace is a typed, frozen structure: a typo in an attribute name is
  caught by the type checker and a bad literal fails at import time.
- Aliases keep the camelCase keys used by the rest of the wallet while the
  Python side stays snake_case.

Note:
- These models describe *what* the constants are, not how they are consumed.
"""

from __future__ import annotations

from datetime import timedelta
from urllib.parse import urlsplit

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict

from core.domain.network import NetworkType


def is_absolute_https_url(value: str) -> bool:
    """True for ``https://<host>[...]``; a bare port or userinfo is not a host."""

    parts = urlsplit(value)
    return parts.scheme == "https" and bool(parts.hostname)


def _require_https_url(value: str) -> str:
    if not is_absolute_https_url(value):
        raise ValueError(f"expected an absolute https URL, got {value!r}")
    return value


class NamespaceModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")


class NetworkEndpoints(NamespaceModel):
    """Accumulate API endpoints, one per network."""

    default_accumulate_testnet_url: str = Field(
        ...,
        alias="defaultAccumulateTestnetUrl",
        min_length=1,
        description="JSON-RPC v3 endpoint of the public testnet.",
    )
    default_mainnet_url: str = Field(
        ...,
        alias="defaultMainnetUrl",
        min_length=1,
        description="JSON-RPC v3 endpoint of mainnet.",
    )

    @field_validator("*")
    @classmethod
    def check_https(cls, value: str) -> str:
        return _require_https_url(value)


class ExplorerEndpoints(NamespaceModel):
    """Block explorer base URLs, one per network."""

    testnet_explorer_base_url: str = Field(
        ...,
        alias="testnetExplorerBaseUrl",
        min_length=1,
        description="Explorer root for testnet.",
    )
    mainnet_explorer_base_url: str = Field(
        ...,
        alias="mainnetExplorerBaseUrl",
        min_length=1,
        description="Explorer root for mainnet.",
    )

    @field_validator("*")
    @classmethod
    def check_https(cls, value: str) -> str:
        return _require_https_url(value)


class PollingIntervals(NamespaceModel):
    default_pending_tx_polling_interval: timedelta = Field(
        ...,
        alias="defaultPendingTxPollingInterval",
        description="How often pending transactions are re-checked.",
    )
    badge_refresh_interval: timedelta = Field(
        ...,
        alias="badgeRefreshInterval",
        description="How often the pending-signature badge is refreshed.",
    )

    @field_validator("*")
    @classmethod
    def check_positive(cls, value: timedelta) -> timedelta:
        if value <= timedelta(0):
            raise ValueError("polling intervals must be strictly positive")
        return value


class DomainVocabulary(NamespaceModel):
    """Token, account and storage identifiers shared across the wallet."""

    acme_token_type: str = Field(
        ...,
        alias="acmeTokenType",
        min_length=1,
        description="Symbol of the network's native token.",
    )
    default_book_path: str = Field(
        ...,
        alias="defaultBookPath",
        min_length=1,
        description="Path of the first key page under an ADI.",
    )
    user_id_key: str = Field(
        ...,
        alias="userIdKey",
        min_length=1,
        description="Local storage key for the signed-in user id.",
    )
    add_tx_memos_key: str = Field(
        ...,
        alias="addTxMemosKey",
        min_length=1,
        description="Local storage key for transaction memos.",
    )
    testnet_faucet_address: str = Field(
        ...,
        alias="testnetFaucetAddress",
        min_length=1,
        description="Token account the testnet faucet pays from.",
    )


class NetworkProfile(NamespaceModel):
    """Everything a client needs to point at one network."""

    network: NetworkType = Field(..., description="Network the profile belongs to.")
    api_url: str = Field(..., description="Accumulate API endpoint.")
    explorer_url: str = Field(..., description="Block explorer base URL.")
    faucet_address: str | None = Field(
        default=None,
        description="Faucet account, only on networks that have one.",
    )
