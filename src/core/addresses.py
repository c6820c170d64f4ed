"""Helpers for Accumulate account URLs (``acc://...``)."""

from __future__ import annotations

import logging
import re

from core.constants import ACC_URL_SCHEME

logger = logging.getLogger(__name__)

_KEEP = 6
_LITE_HASH = re.compile(r"[0-9a-fA-F]+")


def is_valid_accumulate_url(value: str) -> bool:
    """True for ``acc://<authority>[/path]`` with a non-empty authority."""

    if not value.startswith(ACC_URL_SCHEME):
        return False
    authority = value[len(ACC_URL_SCHEME):].split("/", 1)[0]
    return bool(authority.strip())


def format_lite_account_address(address: str) -> str:
    """Shorten a lite account address for display.

    ``acc://a21555da824d14f3f066214657a44e6a1a347dad3052a23a/ACME`` becomes
    ``acc://a21555...52a23a/ACME``. ADI URLs and anything else that is
    not a long hex lite hash are returned unchanged.
    """

    if not address.startswith(ACC_URL_SCHEME):
        return address

    rest = address[len(ACC_URL_SCHEME):]
    if "/" in rest:
        account_hash, suffix = rest.split("/", 1)
        suffix = "/" + suffix
    else:
        account_hash, suffix = rest, ""

    if len(account_hash) <= 2 * _KEEP or not _LITE_HASH.fullmatch(account_hash):
        logger.debug("Not a shortenable lite address: %s", address)
        return address

    return f"{ACC_URL_SCHEME}{account_hash[:_KEEP]}...{account_hash[-_KEEP:]}{suffix}"
