"""Run a tax year of monthly incomes through the cumulative tax calculator.

Each month's income is applied in order to a fresh TaxAccumulator and the
result is collected as a TaxYearRow. Rows can be exported as the
comma-separated list of monthly taxes or as a pandas DataFrame.

Assumptions:

- The first income is for start_month (January by default) and the year ends
  in December, so at most 12 - start_month + 1 incomes are accepted.
- Incomes are taken as given; no bounds are checked.
"""

from dataclasses import asdict, dataclass, field

from corporate_tax import TAX_RATE, TaxAccumulator

MONTH_NAMES = {
    1: "January",
    2: "February",
    3: "March",
    4: "April",
    5: "May",
    6: "June",
    7: "July",
    8: "August",
    9: "September",
    10: "October",
    11: "November",
    12: "December",
}


@dataclass
class TaxYearInputs:
    monthly_incomes: list[float] = field(default_factory=list)
    start_month: int = 1
    tax_rate: float = TAX_RATE

    def __post_init__(self) -> None:
        if self.start_month not in MONTH_NAMES:
            raise ValueError(f"start_month must be 1..12, got {self.start_month}")
        months_left = 12 - self.start_month + 1
        if len(self.monthly_incomes) > months_left:
            raise ValueError(
                f"{len(self.monthly_incomes)} incomes starting in "
                f"{MONTH_NAMES[self.start_month]} run past the end of the tax year"
            )


@dataclass
class TaxYearRow:
    month: int
    month_name: str
    income: float
    cumulative_income: float
    tax: float
    cumulative_tax: float
    rounded_tax: int
    adjustment: str


def simulate(inputs: TaxYearInputs) -> list[TaxYearRow]:
    accumulator = TaxAccumulator(tax_rate=inputs.tax_rate)

    rows: list[TaxYearRow] = []
    for i, income in enumerate(inputs.monthly_incomes):
        month = inputs.start_month + i
        assessed = accumulator.assess(income)

        row = TaxYearRow(
            month=month,
            month_name=MONTH_NAMES[month],
            income=round(income, 2),
            cumulative_income=round(assessed.cumulative_income, 2),
            tax=round(assessed.tax, 2),
            cumulative_tax=round(assessed.cumulative_tax, 2),
            rounded_tax=assessed.rounded_tax,
            adjustment=assessed.adjustment.value,
        )
        rows.append(row)

    return rows


def rounded_taxes(rows: list[TaxYearRow]) -> list[int]:
    return [r.rounded_tax for r in rows]


def format_csv(values: list[int]) -> str:
    """Comma-separated values with no trailing separator."""
    return ",".join(str(v) for v in values)


def to_dataframe(rows: list[TaxYearRow]):
    try:
        import pandas as pd
    except ImportError as exc:
        raise RuntimeError("pandas is required to build a DataFrame output") from exc
    return pd.DataFrame([asdict(r) for r in rows])
