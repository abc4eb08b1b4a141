"""Health and Education Cess utilities.

The cess is a flat surcharge levied on the slab tax already computed,
never on gross income.
"""

CESS_RATE: float = 0.04
CESS_LABEL: str = "Health and Education Cess (4%)"


def cess_on_tax(tax: float, rate: float = CESS_RATE) -> float:
    return tax * rate
