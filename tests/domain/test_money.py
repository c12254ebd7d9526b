"""Tests for the Money value type."""

from decimal import Decimal

import pytest

from src.domain.models import Money


def test_arithmetic_is_exact_on_cents() -> None:
    """Addition, subtraction, negation and abs operate on integers."""
    assert Money(250) + Money(125) == Money(375)
    assert Money(100) - Money(250) == Money(-150)
    assert -Money(40) == Money(-40)
    assert abs(Money(-40)) == Money(40)


def test_ordering_and_equality_are_value_based() -> None:
    """Comparisons use the cent value."""
    assert Money(1) < Money(2)
    assert Money(-5) <= Money(-5)
    assert max(Money(3), Money(7), Money(5)) == Money(7)
    assert Money(10) == Money(10)
    assert hash(Money(10)) == hash(Money(10))


@pytest.mark.parametrize("value", [1.5, Decimal("1"), "10", True, None])
def test_construction_rejects_non_integers(value) -> None:
    """Only integer cent counts are accepted."""
    with pytest.raises(TypeError):
        Money(value)


def test_total_sums_from_zero() -> None:
    """Money.total should handle empty input and mixed signs."""
    assert Money.total([]) == Money.zero()
    assert Money.total([Money(5), Money(-3), Money(10)]) == Money(12)


def test_sign_helpers() -> None:
    assert Money(1).is_positive()
    assert Money(-1).is_negative()
    assert Money(0).is_zero()
    assert not Money(0).is_positive()


def test_adding_a_non_money_value_fails() -> None:
    """No implicit conversion from plain numbers."""
    with pytest.raises(TypeError):
        Money(1) + 1
