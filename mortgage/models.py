from __future__ import annotations

from dataclasses import dataclass
from typing import NewType

# Rates are fractions (0.065), never percentages (6.5). Percent is reserved for
# display-oriented outputs such as equity share and ROI.
Fraction = NewType("Fraction", float)
Percent = NewType("Percent", float)


def fraction_to_percent(value: float) -> Percent:
    return Percent(value * 100.0)


def percent_to_fraction(value: float) -> Fraction:
    return Fraction(value / 100.0)


class FinanceInputError(ValueError):
    """Raised when calculator inputs fall outside their valid ranges."""


@dataclass(frozen=True)
class FinanceInputs:
    home_value: float
    tax_annual: float
    hoa_monthly: float
    insurance_annual: float
    interest_rate: Fraction
    loan_term_years: int
    down_payment_percent: Fraction
    rent_estimate: float

    # Operating expenses, each a share of monthly rent
    vacancy_rate: Fraction
    maintenance_rate: Fraction
    management_rate: Fraction

    closing_cost_rate: Fraction = Fraction(0.03)
    include_pmi: bool = False

    @property
    def total_expense_rate(self) -> Fraction:
        return Fraction(self.vacancy_rate + self.maintenance_rate + self.management_rate)


@dataclass(frozen=True)
class FinanceResult:
    loan: float
    pi: float
    pmi_monthly: float
    piti: float
    rent_break_even: float
    operating_expenses: float
    cash_flow: float
    noi: float
    cap_rate: Fraction
    cash_invested: float
    coc: Fraction


@dataclass(frozen=True)
class AffordabilityResult:
    income_monthly: float
    max_piti_by_dti: float
