import logging

from tax_year import TaxYearInputs, format_csv, rounded_taxes, simulate, to_dataframe

logging.basicConfig(level=logging.WARNING)

# index 0 = January ... index 11 = December
inputs = TaxYearInputs(
    monthly_incomes=[
        86813, -27380, 36814, 96913, -135308, -162659,
        -113682, 213781, 291863, 173176, 223632, 136823,
    ],
)

rows = simulate(inputs)
print(format_csv(rounded_taxes(rows)))

df = to_dataframe(rows)
print(df.to_string(index=False))
