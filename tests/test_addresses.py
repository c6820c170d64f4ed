from __future__ import annotations

import pytest

from core.addresses import format_lite_account_address, is_valid_accumulate_url

LITE = "acc://a21555da824d14f3f066214657a44e6a1a347dad3052a23a/ACME"


def test_lite_address_is_shortened():
    assert format_lite_account_address(LITE) == "acc://a21555...52a23a/ACME"


def test_without_token_suffix():
    address = "acc://a21555da824d14f3f066214657a44e6a1a347dad3052a23a"
    assert format_lite_account_address(address) == "acc://a21555...52a23a"


def test_nested_suffix_kept():
    address = "acc://a21555da824d14f3f066214657a44e6a1a347dad3052a23a/book/1"
    assert format_lite_account_address(address).endswith("/book/1")


@pytest.mark.parametrize(
    "address",
    [
        "acc://faucet.testnet/ACME",
        "acc://short",
        "https://explorer.accumulatenetwork.io",
        "",
    ],
)
def test_left_unchanged(address):
    assert format_lite_account_address(address) == address


@pytest.mark.parametrize(
    "value, expected",
    [
        ("acc://faucet.testnet/ACME", True),
        ("acc://alice.acme", True),
        ("acc:///ACME", False),
        ("acc://", False),
        ("https://alice.acme", False),
    ],
)
def test_is_valid_accumulate_url(value, expected):
    assert is_valid_accumulate_url(value) is expected
