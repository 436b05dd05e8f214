from __future__ import annotations

from dataclasses import dataclass

from mortgage.models import Fraction, Percent


@dataclass(frozen=True)
class ProjectionInputs:
    home_value: float
    down_payment: float
    loan_amount: float
    interest_rate: Fraction
    loan_term_years: int
    monthly_pi: float
    monthly_piti: float
    rent_estimate: float
    monthly_cash_flow: float
    appreciation_rate: Fraction = Fraction(0.03)
    rent_growth_rate: Fraction = Fraction(0.02)


@dataclass(frozen=True)
class YearlyProjection:
    year: int
    home_value: int
    rent_monthly: int
    rent_annual: int
    loan_balance: int
    equity: int
    annual_cash_flow: int  # for this year only
    total_cash_flow: int  # cumulative through this year
    equity_percent: Percent
    total_return: int  # equity + cumulative cash flow


@dataclass(frozen=True)
class MilestoneSummary:
    home_value: int
    equity: int
    total_cash_flow: int
    total_return: int
    roi: Percent


@dataclass(frozen=True)
class ProjectionMetrics:
    year5: MilestoneSummary
    year10: MilestoneSummary
    year30: MilestoneSummary
