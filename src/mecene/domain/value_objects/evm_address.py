"""
EvmAddress value object - Immutable EVM account address.
"""

from dataclasses import dataclass
from typing import Union

from eth_utils import is_address, to_checksum_address

from mecene.domain.exceptions import ValidationError

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"


@dataclass(frozen=True)
class EvmAddress:
    """
    Value object representing a validated EVM address.

    Business rules:
    - 20-byte hex string with 0x prefix
    - All-lowercase, all-uppercase or valid EIP-55 checksum accepted
    - Stored in checksum form, compared case-insensitively
    """

    address: str

    def __post_init__(self):
        """Validate and normalise address on creation."""
        if not self.address or not isinstance(self.address, str):
            raise ValidationError(field="address", reason="cannot be empty")

        candidate = self.address.strip()
        if not is_address(candidate):
            raise ValidationError(
                field="address",
                reason=f"'{self.address}' is not a valid Ethereum address",
            )

        object.__setattr__(self, "address", to_checksum_address(candidate))

    @property
    def is_zero(self) -> bool:
        """True for the zero address (empty struct slot on-chain)."""
        return self.address == ZERO_ADDRESS

    def matches(self, other: Union["EvmAddress", str]) -> bool:
        """Case-insensitive comparison against another address."""
        other_value = other.address if isinstance(other, EvmAddress) else other
        return self.address.lower() == str(other_value).lower()

    def truncated(self) -> str:
        """Return truncated address for display (e.g., '0xc221...a6bB')."""
        return f"{self.address[:6]}...{self.address[-4:]}"

    def __str__(self) -> str:
        """String representation returns full checksum address."""
        return self.address
