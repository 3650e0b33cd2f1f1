"""Sequential rounding utilities.

Rounding a stream of amounts independently lets the per-value errors pile up.
A SequentialRounder carries the remainder of each rounding into the next
value, so the sum of the rounded outputs never drifts more than half a unit
from the sum of the true values. Ties round away from zero, so the carried
balance always lies in the closed interval [-0.5, 0.5].
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal


def round_half_away_from_zero(value: float) -> int:
    """Round to the nearest integer; 0.5 -> 1 and -0.5 -> -1."""
    return int(Decimal(value).to_integral_value(rounding=ROUND_HALF_UP))


@dataclass
class SequentialRounder:
    balance: float = 0.0  # previous remainder, always in [-0.5, 0.5]

    def round(self, value: float) -> int:
        value += self.balance
        rounded = round_half_away_from_zero(value)
        self.balance = value - rounded
        return rounded
