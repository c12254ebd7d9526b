"""Integer cent value type used by every ledger computation."""

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Money:
    """Amount expressed in minor currency units (cents).

    Money never converts to or from floating point. Division is not
    offered here: splitting an amount is the job of the split calculator,
    which owns the remainder policy.

    Attributes:
        cents: Signed number of minor units.
    """

    cents: int

    def __post_init__(self) -> None:
        if isinstance(self.cents, bool) or not isinstance(self.cents, int):
            raise TypeError(
                f"Money requires an integer cent count, got {self.cents!r}"
            )

    @classmethod
    def zero(cls) -> "Money":
        """Return a zero amount."""
        return cls(0)

    @classmethod
    def total(cls, amounts: Iterable["Money"]) -> "Money":
        """Sum amounts exactly, starting from zero."""
        cents = 0
        for amount in amounts:
            cents += amount.cents
        return cls(cents)

    def __add__(self, other: "Money") -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        return Money(self.cents + other.cents)

    def __sub__(self, other: "Money") -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        return Money(self.cents - other.cents)

    def __neg__(self) -> "Money":
        return Money(-self.cents)

    def __abs__(self) -> "Money":
        return Money(abs(self.cents))

    def is_zero(self) -> bool:
        return self.cents == 0

    def is_positive(self) -> bool:
        return self.cents > 0

    def is_negative(self) -> bool:
        return self.cents < 0

    def __str__(self) -> str:
        return f"{self.cents}c"


__all__ = ["Money"]
