"""External service clients."""

from aptos_helper.services.aptos import (
    AptosService,
    BalanceResult,
    LedgerClient,
    LedgerError,
    LedgerErrorKind,
    Network,
)

__all__ = [
    "AptosService",
    "BalanceResult",
    "LedgerClient",
    "LedgerError",
    "LedgerErrorKind",
    "Network",
]
