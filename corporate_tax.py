"""Cumulative corporate income tax.

Tax is a flat 20% of each month's income, applied one month at a time over a
tax year, with two exceptions:

1. The month that turns the year profitable again is only taxed on the
   cumulative profit, not on its own (larger) income.
2. While the year is at a cumulative loss, a month's tax credit can never
   exceed the tax collected so far, so cumulative tax never goes below zero.

Months must be applied in chronological order, starting with the first month
of the year. There is no reset; create a new TaxAccumulator for a new year.
"""
import logging
from dataclasses import dataclass
from enum import Enum

from sequential_rounding import SequentialRounder

logger = logging.getLogger(__name__)

TAX_RATE = 0.2  # 20%


class TaxAdjustment(str, Enum):
    """Which rule, if any, replaced the default income * rate tax."""

    NONE = "none"
    PROFIT_CAP = "profit_cap"
    REFUND_FLOOR = "refund_floor"


@dataclass(frozen=True)
class MonthlyTax:
    income: float
    tax: float            # unrounded, after any adjustment
    rounded_tax: int
    adjustment: TaxAdjustment
    cumulative_income: float
    cumulative_tax: float


class TaxAccumulator:
    def __init__(self, tax_rate: float = TAX_RATE):
        self.tax_rate = tax_rate
        self.cumulative_income = 0.0
        self.cumulative_tax = 0.0
        self._rounder = SequentialRounder()

    @property
    def cumulative_round_balance(self) -> float:
        return self._rounder.balance

    def assess(self, income: float) -> MonthlyTax:
        """Apply one month's income and return the full assessment.

        Args:
            income: net income for the month; negative for a loss.

        Returns:
            MonthlyTax with the unrounded and rounded tax for the month and
            the running totals after it.
        """
        tax = income * self.tax_rate
        adjustment = TaxAdjustment.NONE
        self.cumulative_income += income

        if self.cumulative_income >= 0:
            if self.cumulative_income < income:
                tax = self.cumulative_income * self.tax_rate
                adjustment = TaxAdjustment.PROFIT_CAP
        else:
            if abs(tax) > self.cumulative_tax:
                tax = -self.cumulative_tax
                adjustment = TaxAdjustment.REFUND_FLOOR

        self.cumulative_tax += tax
        rounded = self._rounder.round(tax)

        if adjustment is not TaxAdjustment.NONE:
            logger.info(
                "tax_adjusted",
                extra={
                    "adjustment": adjustment.value,
                    "income": income,
                    "default_tax": income * self.tax_rate,
                    "tax": tax,
                    "cumulative_income": self.cumulative_income,
                },
            )
        logger.debug(
            "monthly_tax_assessed",
            extra={
                "income": income,
                "tax": tax,
                "rounded_tax": rounded,
                "cumulative_tax": self.cumulative_tax,
                "round_balance": self._rounder.balance,
            },
        )

        return MonthlyTax(
            income=income,
            tax=tax,
            rounded_tax=rounded,
            adjustment=adjustment,
            cumulative_income=self.cumulative_income,
            cumulative_tax=self.cumulative_tax,
        )

    def apply_monthly_income(self, income: float) -> int:
        """Apply one month's income and return the tax due, as an integer."""
        return self.assess(income).rounded_tax
