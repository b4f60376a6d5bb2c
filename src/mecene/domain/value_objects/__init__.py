"""
Value objects for Mecene domain.
"""

from mecene.domain.value_objects.ether_amount import ETHER_DECIMALS, EtherAmount
from mecene.domain.value_objects.evm_address import ZERO_ADDRESS, EvmAddress

__all__ = [
    "EvmAddress",
    "EtherAmount",
    "ETHER_DECIMALS",
    "ZERO_ADDRESS",
]
