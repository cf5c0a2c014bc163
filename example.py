from decimal import Decimal

from money_calc import MoneyCalc, MoneyCalcConfig, RateTable
from money_calc.ingestion.models import Currency

print(MoneyCalc.__version__)  # 0.1.0

# Default usage: FIXER_API_KEY from the environment, static rates otherwise
calc = MoneyCalc()
print(calc.rates())

# Convert an in-memory expense list (first line is a header)
result = calc.calculate(
    [
        "Description,BRL,EUR,USD",
        "Spotify,,,10",
        "Netflix,,15,",
        "YouTube,20,,",
    ]
)
print("\n".join(result.table))
print("\n".join(result.csv))

# Bring your own rates
BRL, EUR, USD = Currency.BRL, Currency.EUR, Currency.USD
rates = RateTable.from_pairs(
    {
        (USD, BRL): Decimal(5),
        (USD, EUR): Decimal("0.9"),
        (EUR, BRL): Decimal(6),
        (BRL, EUR): Decimal(1) / 6,
        (BRL, USD): Decimal(1) / 5,
        (EUR, USD): Decimal(1) / Decimal("0.9"),
    }
)
calc = MoneyCalc(MoneyCalcConfig(), rate_table=rates)
print(calc.run().csv_path)  # ./output.csv built from the bundled sample
