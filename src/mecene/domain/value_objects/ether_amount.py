"""
EtherAmount value object - exact native-currency amount in wei.

All arithmetic is done on integer wei so that summing display amounts
such as "0.01" + "0.02" never drifts.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, localcontext
from typing import Iterable, Union

from eth_utils import from_wei, to_wei

from mecene.domain.exceptions import ValidationError

ETHER_DECIMALS = 18


@dataclass(frozen=True)
class EtherAmount:
    """
    Value object for an amount of the chain's native currency.

    Business rules:
    - Stored as integer wei
    - Parsed from non-negative decimal strings with at most 18
      fractional digits
    - Differences of on-chain values are kept as-is, even if negative
    """

    wei: int

    def __post_init__(self):
        """Validate wei value on creation."""
        if isinstance(self.wei, bool) or not isinstance(self.wei, int):
            raise ValidationError(field="amount", reason="wei must be an integer")

    @classmethod
    def from_display(
        cls,
        value: Union[str, int, Decimal],
        field: str = "amount",
    ) -> "EtherAmount":
        """
        Parse a display amount such as "0.01" into wei.

        Args:
            value: Decimal amount in ETH
            field: Field name used in validation messages

        Returns:
            EtherAmount

        Raises:
            ValidationError: If value is not a finite, non-negative decimal
                with at most 18 fractional digits
        """
        text = str(value).strip()
        if not text:
            raise ValidationError(field=field, reason="amount cannot be empty")

        with localcontext() as ctx:
            ctx.prec = 100
            try:
                amount = Decimal(text)
            except InvalidOperation:
                raise ValidationError(
                    field=field,
                    reason=f'Invalid amount "{text}". Must be a valid ETH value.',
                )

            if not amount.is_finite():
                raise ValidationError(
                    field=field,
                    reason=f'Invalid amount "{text}". Must be a finite number.',
                )
            if amount < 0:
                raise ValidationError(
                    field=field,
                    reason=f'Invalid amount "{text}". Cannot be negative.',
                )

            scaled = amount.scaleb(ETHER_DECIMALS)
            if scaled != scaled.to_integral_value():
                raise ValidationError(
                    field=field,
                    reason=(
                        f'Invalid amount "{text}". '
                        f"At most {ETHER_DECIMALS} decimal places allowed."
                    ),
                )

            try:
                wei = to_wei(amount, "ether")
            except ValueError as e:
                raise ValidationError(field=field, reason=str(e))

        return cls(wei=int(wei))

    @classmethod
    def zero(cls) -> "EtherAmount":
        """Zero amount."""
        return cls(wei=0)

    @classmethod
    def total(cls, amounts: Iterable["EtherAmount"]) -> "EtherAmount":
        """Exact sum of amounts, computed in wei."""
        return cls(wei=sum(amount.wei for amount in amounts))

    def to_decimal(self) -> Decimal:
        """Amount in ETH as Decimal."""
        magnitude = Decimal(from_wei(abs(self.wei), "ether"))
        return -magnitude if self.wei < 0 else magnitude

    def display(self) -> str:
        """Plain decimal string in ETH, e.g. '0.06'."""
        return f"{self.to_decimal():f}"

    def with_symbol(self, symbol: str = "ETH") -> str:
        """Display string with currency symbol, e.g. '0.06 ETH'."""
        return f"{self.display()} {symbol}"

    def __add__(self, other: "EtherAmount") -> "EtherAmount":
        return EtherAmount(wei=self.wei + other.wei)

    def __sub__(self, other: "EtherAmount") -> "EtherAmount":
        return EtherAmount(wei=self.wei - other.wei)

    def __str__(self) -> str:
        return self.display()
