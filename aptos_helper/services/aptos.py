"""Aptos ledger client and APT balance lookup."""
import logging
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Optional

from aptos_sdk.account_address import AccountAddress
from aptos_sdk.async_client import ResourceNotFound, RestClient

from aptos_helper.config import settings

logger = logging.getLogger(__name__)

APT_COIN_STORE = "0x1::coin::CoinStore<0x1::aptos_coin::AptosCoin>"
APT_DECIMALS = 8

ACCOUNT_NOT_FOUND_ERROR = "Account not found or has no APT tokens"
FETCH_FAILED_ERROR = "Unable to fetch balance"


class Network(Enum):
    """Aptos networks the bot holds a client for."""

    TESTNET = "testnet"
    MAINNET = "mainnet"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class LedgerErrorKind(Enum):
    """Why a ledger query failed."""

    NOT_FOUND = "not_found"
    OTHER = "other"


class LedgerError(Exception):
    """A ledger query failed; ``kind`` tells missing resources from other faults."""

    def __init__(self, kind: LedgerErrorKind, message: str = ""):
        super().__init__(message or kind.value)
        self.kind = kind


@dataclass(frozen=True)
class BalanceResult:
    """Outcome of a balance query."""

    success: bool
    balance: Optional[str] = None
    network: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, balance: str, network: Network) -> "BalanceResult":
        return cls(success=True, balance=balance, network=network.label)

    @classmethod
    def failed(cls, error: str) -> "BalanceResult":
        return cls(success=False, error=error)


def format_octas(value: Any, decimals: int = APT_DECIMALS) -> str:
    """Render an integer amount of octas as a fixed-point APT string."""
    amount = Decimal(int(value)).scaleb(-decimals)
    return f"{amount:.{decimals}f}"


class LedgerClient:
    """Async resource reader for a single Aptos network."""

    def __init__(self, network: Network, base_url: str, rest_client: RestClient | None = None):
        """Initialize with optional REST client."""
        self.network = network
        self.base_url = base_url
        self._client = rest_client

    def _get_client(self) -> RestClient:
        """Get or create REST client."""
        if self._client is None:
            self._client = RestClient(self.base_url)
        return self._client

    async def get_account_resource(self, address: str, resource_type: str) -> dict:
        """
        Fetch the ``data`` of an account resource.

        Raises:
            LedgerError: NOT_FOUND when the account or resource does not exist,
                OTHER for any other failure
        """
        try:
            account_address = AccountAddress.from_str_relaxed(address)
            resource = await self._get_client().account_resource(account_address, resource_type)
            return resource["data"]
        except ResourceNotFound as e:
            raise LedgerError(LedgerErrorKind.NOT_FOUND, f"Resource not found: {resource_type}") from e
        except Exception as e:
            raise LedgerError(LedgerErrorKind.OTHER, str(e)) from e

    async def close(self) -> None:
        """Close REST client if it was created."""
        if self._client is not None:
            await self._client.close()
            self._client = None


class AptosService:
    """Balance lookup against the preconfigured testnet and mainnet clients."""

    def __init__(
        self,
        testnet_client: LedgerClient | None = None,
        mainnet_client: LedgerClient | None = None,
    ):
        self.testnet_client = testnet_client or LedgerClient(
            Network.TESTNET, settings.APTOS_TESTNET_URL
        )
        self.mainnet_client = mainnet_client or LedgerClient(
            Network.MAINNET, settings.APTOS_MAINNET_URL
        )

    async def get_account_balance(self, address: str, use_testnet: bool = True) -> BalanceResult:
        """Look up the APT balance of *address*; never raises."""
        client = self.testnet_client if use_testnet else self.mainnet_client

        try:
            resource = await client.get_account_resource(address, APT_COIN_STORE)
            balance = format_octas(resource["coin"]["value"])
        except LedgerError as e:
            if e.kind is LedgerErrorKind.NOT_FOUND:
                logger.info(f"No coin store for {address} on {client.network.label}")
                return BalanceResult.failed(ACCOUNT_NOT_FOUND_ERROR)
            logger.warning(f"Balance query failed for {address} on {client.network.label}: {e}")
            return BalanceResult.failed(FETCH_FAILED_ERROR)
        except (KeyError, TypeError, ValueError, InvalidOperation) as e:
            logger.warning(f"Unexpected coin store payload for {address}: {e}")
            return BalanceResult.failed(FETCH_FAILED_ERROR)

        return BalanceResult.ok(balance, client.network)

    async def close(self) -> None:
        """Close both ledger clients."""
        await self.testnet_client.close()
        await self.mainnet_client.close()
