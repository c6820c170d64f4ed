"""Domain types of the wallet configuration.

Why:
- Pure data: closed enumerations and frozen namespace models.
- The domain knows nothing about HTTP, the CLI or settings files.
"""

from core.domain.models import (
    DomainVocabulary,
    ExplorerEndpoints,
    NetworkEndpoints,
    NetworkProfile,
    PollingIntervals,
)
from core.domain.network import NetworkType
from core.domain.transactions import TransactionType

__all__ = [
    "DomainVocabulary",
    "ExplorerEndpoints",
    "NetworkEndpoints",
    "NetworkProfile",
    "NetworkType",
    "PollingIntervals",
    "TransactionType",
]
