"""Value Objects shared across the domain.

Immutable, compared by value, and validated on construction so an
invalid price or quantity can never be passed around.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from storefront.domain.exceptions import ValidationError

CENTS = Decimal("0.01")


@dataclass(frozen=True)
class Money:
    """A non-negative amount in one currency.

    Amounts keep full Decimal precision so summing many cart lines never
    drifts by a cent; ``rounded()`` applies half-up rounding to whole
    cents for display and comparison of totals.
    """

    amount: Decimal
    currency: str = "USD"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if self.amount < 0:
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    def __add__(self, other: Money) -> Money:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )
        return Money(self.amount + other.amount, self.currency)

    def __mul__(self, factor: int) -> Money:
        if isinstance(factor, bool) or not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor, self.currency)

    @property
    def is_positive(self) -> bool:
        return self.amount > 0

    def rounded(self) -> Money:
        return Money(self.amount.quantize(CENTS, rounding=ROUND_HALF_UP), self.currency)

    def __str__(self) -> str:
        return f"${self.rounded().amount}"

    @staticmethod
    def of(amount: str | int | Decimal) -> Money:
        """Parse user or config input; floats are routed through ``str``."""
        try:
            return Money(Decimal(str(amount).strip()))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0.00"))

    @staticmethod
    def total(amounts: Iterable[Money]) -> Money:
        result = Money.zero()
        for amount in amounts:
            result = result + amount
        return result


@dataclass(frozen=True)
class Quantity:
    """Units of one product on an order line; always at least one."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value < 1:
            raise ValidationError("Quantity must be positive")

    def __str__(self) -> str:
        return str(self.value)
