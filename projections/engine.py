"""Thirty-year hold projection: appreciation, rent growth, amortization and cash flow."""

from __future__ import annotations

import math
from typing import Iterable

import pandas as pd

from mortgage.calculations import remaining_balance
from mortgage.models import FinanceInputError, fraction_to_percent

from .models import ProjectionInputs, YearlyProjection

PROJECTION_YEARS = 30


def round_currency(value: float) -> int:
    """Round half-up to a whole currency unit."""
    return int(math.floor(value + 0.5))


def validate_projection_inputs(inputs: ProjectionInputs) -> ProjectionInputs:
    errors = []
    if inputs.home_value <= 0:
        errors.append("home_value must be positive.")
    if inputs.loan_amount < 0:
        errors.append("loan_amount cannot be negative.")
    if inputs.interest_rate < 0:
        errors.append("interest_rate cannot be negative.")
    if inputs.loan_term_years <= 0:
        errors.append("loan_term_years must be positive.")
    if inputs.appreciation_rate <= -1:
        errors.append("appreciation_rate must be greater than -1.")
    if inputs.rent_growth_rate <= -1:
        errors.append("rent_growth_rate must be greater than -1.")
    if errors:
        raise FinanceInputError("Invalid projection inputs: " + " ".join(errors))
    return inputs


def calculate_30_year_projection(inputs: ProjectionInputs) -> list[YearlyProjection]:
    """
    Year-by-year projection for years 1..30.

    Annual cash flow is today's monthly cash flow grown at the rent growth rate,
    i.e. expenses are assumed to track rent. It is not stepped up once the loan
    is paid off, so results after payoff understate cash flow.

    Values are accumulated unrounded and rounded only when each row is emitted.
    """
    validate_projection_inputs(inputs)

    projections: list[YearlyProjection] = []
    cumulative_cash_flow = 0.0

    for year in range(1, PROJECTION_YEARS + 1):
        home_value = inputs.home_value * (1 + inputs.appreciation_rate) ** year

        growth = (1 + inputs.rent_growth_rate) ** year
        rent_monthly = inputs.rent_estimate * growth
        rent_annual = rent_monthly * 12

        loan_balance = remaining_balance(
            inputs.loan_amount,
            inputs.interest_rate,
            inputs.loan_term_years,
            year,
        )
        equity = max(0.0, home_value - loan_balance)

        annual_cash_flow = inputs.monthly_cash_flow * 12 * growth
        cumulative_cash_flow += annual_cash_flow
        total_return = equity + cumulative_cash_flow

        projections.append(YearlyProjection(
            year=year,
            home_value=round_currency(home_value),
            rent_monthly=round_currency(rent_monthly),
            rent_annual=round_currency(rent_annual),
            loan_balance=round_currency(loan_balance),
            equity=round_currency(equity),
            annual_cash_flow=round_currency(annual_cash_flow),
            total_cash_flow=round_currency(cumulative_cash_flow),
            equity_percent=fraction_to_percent(equity / home_value),
            total_return=round_currency(total_return),
        ))

    return projections


def payoff_year(projections: Iterable[YearlyProjection]) -> int | None:
    for row in projections:
        if row.loan_balance == 0:
            return row.year
    return None


def projections_frame(projections: Iterable[YearlyProjection]) -> pd.DataFrame:
    rows = [
        {
            "Year": p.year,
            "Home Value": p.home_value,
            "Rent (Monthly)": p.rent_monthly,
            "Rent (Annual)": p.rent_annual,
            "Loan Balance": p.loan_balance,
            "Equity": p.equity,
            "Equity %": round(p.equity_percent, 2),
            "Annual Cash Flow": p.annual_cash_flow,
            "Total Cash Flow": p.total_cash_flow,
            "Total Return": p.total_return,
        }
        for p in projections
    ]
    return pd.DataFrame(rows)
