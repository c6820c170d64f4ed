"""Wallet-wide constant values.

Each namespace is built once, validated by its model, and never written
again. Prefer attribute access (``NETWORK_ENDPOINTS.default_mainnet_url``)
over string lookups through the registry.
"""

from __future__ import annotations

from datetime import timedelta

from core.domain.models import (
    DomainVocabulary,
    ExplorerEndpoints,
    NetworkEndpoints,
    PollingIntervals,
)

ACC_URL_SCHEME = "acc://"

NETWORK_ENDPOINTS = NetworkEndpoints(
    default_accumulate_testnet_url="https://testnet.accumulatenetwork.io/v3",
    default_mainnet_url="https://mainnet.accumulatenetwork.io/v3",
)

EXPLORER_ENDPOINTS = ExplorerEndpoints(
    testnet_explorer_base_url="https://explorer.testnet.accumulatenetwork.io",
    mainnet_explorer_base_url="https://explorer.accumulatenetwork.io",
)

POLLING_INTERVALS = PollingIntervals(
    default_pending_tx_polling_interval=timedelta(seconds=45),
    badge_refresh_interval=timedelta(minutes=30),
)

DOMAIN_VOCABULARY = DomainVocabulary(
    acme_token_type="ACME",
    default_book_path="/book/1",
    user_id_key="userId",
    add_tx_memos_key="add_tx_memos",
    testnet_faucet_address=f"{ACC_URL_SCHEME}faucet.testnet/ACME",
)

APP_NAME = "Accumulate Lite Wallet"
APP_VERSION = "1.0.0"
