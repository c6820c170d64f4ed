"""Network selection for the wallet.

Both the API client and the explorer links depend on which Accumulate
network is active, so the choice lives in the domain layer as a closed
enumeration instead of loose strings.
"""

from __future__ import annotations

from enum import Enum, unique


@unique
class NetworkType(str, Enum):
    """Accumulate networks the wallet can talk to."""

    TESTNET = "testnet"
    MAINNET = "mainnet"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def default(cls) -> "NetworkType":
        """Return the network used when nothing else is configured."""

        return cls.TESTNET

    @classmethod
    def parse(cls, value: "str | NetworkType") -> "NetworkType":
        """Resolve a user-supplied value (case-insensitive) to a member."""

        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        valid = ", ".join(m.value for m in cls)
        raise ValueError(f"Unknown network {value!r} (expected one of: {valid})")

    def label(self) -> str:
        return "Testnet" if self is NetworkType.TESTNET else "Mainnet"
