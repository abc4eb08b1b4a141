import logging

from formatting import breakdown_rows, format_inr
from tax_estimator import TaxEstimator, to_dataframe

logging.basicConfig(level=logging.DEBUG)

estimator = TaxEstimator()
estimator.subscribe(lambda result: print(f"Estimated annual tax: {format_inr(result.total_tax)}"))

# Income recorded so far this month, as the dashboard would report it
estimator.set_period_income(95_000.0)

summary = estimator.summary
print(f"Annual income:     {format_inr(summary.annual_income)}")
print(f"Monthly provision: {format_inr(summary.monthly_provision)}")
for label, amount in breakdown_rows(estimator.result):
    print(f"  {label:<32} {amount:>12}")

# Manual entry from the calculator dialog
estimator.calculate_from_text("₹20,00,000")
df = to_dataframe(estimator.result)
df.to_csv("example_output.csv", index=False)
print(df.to_string(index=False))
