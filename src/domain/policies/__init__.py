"""Domain policies package."""

from .rounding import percentage_share, round_half_up

__all__ = ["round_half_up", "percentage_share"]
