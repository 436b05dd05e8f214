"""Boundary validation for an analysis request."""

from __future__ import annotations

from dataclasses import dataclass, field

from mortgage.models import FinanceInputError, Fraction


@dataclass(frozen=True)
class AnalysisRequest:
    address: str
    income_annual: float
    interest_rate: Fraction
    loan_term_years: int = 30
    down_payment_percent: Fraction = Fraction(0.20)
    vacancy_rate: Fraction = Fraction(0.05)
    maintenance_rate: Fraction = Fraction(0.08)
    management_rate: Fraction = Fraction(0.08)
    other_debt_monthly: float = 0.0
    include_pmi: bool = True
    custom_rent: float | None = None
    selected_comp_ids: tuple[str, ...] = field(default_factory=tuple)


# (field, lower, upper), inclusive
_RANGES = [
    ("interest_rate", 0.01, 0.5),
    ("loan_term_years", 1, 40),
    ("down_payment_percent", 0.0, 0.9),
    ("vacancy_rate", 0.0, 0.5),
    ("maintenance_rate", 0.0, 0.5),
    ("management_rate", 0.0, 0.5),
]


def analysis_request_errors(request: AnalysisRequest) -> list[str]:
    errors = []
    if len(request.address.strip()) < 3:
        errors.append("address must be at least 3 characters.")
    if request.income_annual <= 0:
        errors.append("income_annual must be positive.")
    for name, lower, upper in _RANGES:
        value = getattr(request, name)
        if value < lower or value > upper:
            errors.append(f"{name} must be between {lower:g} and {upper:g}, got {value:g}.")
    if request.other_debt_monthly < 0:
        errors.append("other_debt_monthly cannot be negative.")
    if request.custom_rent is not None and request.custom_rent < 0:
        errors.append("custom_rent cannot be negative.")
    return errors


def validate_analysis_request(request: AnalysisRequest) -> AnalysisRequest:
    errors = analysis_request_errors(request)
    if errors:
        raise FinanceInputError("Invalid analysis request: " + " ".join(errors))
    return request
