"""Aptos account address normalisation and (syntactic) validation."""
import re

# Full-length addresses and the short form are both accepted.
FULL_ADDRESS_PATTERN = re.compile(r"0x[a-fA-F0-9]{64}")
SHORT_ADDRESS_PATTERN = re.compile(r"0x[a-fA-F0-9]{1,64}")


def _with_prefix(address: str) -> str:
    return address if address.startswith("0x") else f"0x{address}"


def format_address(address: str) -> str:
    """Prefix *address* with ``0x`` if needed and lowercase it."""
    return _with_prefix(address).lower()


def is_valid_address(address: str) -> bool:
    """Check that *address* is ``0x`` followed by 1-64 hex digits.

    No checksum is verified, so any short hex string passes.
    """
    clean = _with_prefix(address)
    return bool(FULL_ADDRESS_PATTERN.fullmatch(clean) or SHORT_ADDRESS_PATTERN.fullmatch(clean))
