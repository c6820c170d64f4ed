"""Transaction kinds the wallet knows how to build."""

from __future__ import annotations

import re
from enum import Enum, unique


@unique
class TransactionType(str, Enum):
    """Closed set of ledger operations, serialized by their wire identifier."""

    CREATE_DATA_ACCOUNT = "createDataAccount"
    WRITE_DATA = "writeData"
    CREATE_TOKEN_ACCOUNT = "createTokenAccount"
    SEND_TOKENS = "sendTokens"
    CREATE_KEY_PAGE = "createKeyPage"
    CREATE_KEY_BOOK = "createKeyBook"
    ADD_CREDITS = "addCredits"
    UPDATE_KEY = "updateKey"

    def __str__(self) -> str:
        return self.value

    def label(self) -> str:
        """Human readable label, e.g. ``sendTokens`` -> ``Send Tokens``."""

        words = re.sub(r"(?<!^)(?=[A-Z])", " ", self.value)
        return words[:1].upper() + words[1:]
