from __future__ import annotations

import logging
from dataclasses import dataclass
from statistics import mean
from typing import Callable, Iterable

from config.assumptions import get_assumption_defaults
from mortgage.affordability import calc_affordability
from mortgage.cashflow import calc_finance
from mortgage.models import AffordabilityResult, FinanceInputs, FinanceResult, Fraction
from mortgage.validation import validate_finance_inputs
from projections.engine import calculate_30_year_projection
from projections.metrics import calculate_projection_metrics
from projections.models import ProjectionInputs, ProjectionMetrics, YearlyProjection
from rentcast.providers import PropertyData, RentCastComp, fetch_property_data

from .validation import AnalysisRequest, validate_analysis_request

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PropertyAnalysis:
    address: str
    property_data: PropertyData
    rent_used: float
    finance_inputs: FinanceInputs
    finance: FinanceResult
    affordability: AffordabilityResult


def resolve_rent(
    estimate: float,
    comps: Iterable[RentCastComp],
    custom_rent: float | None = None,
    selected_comp_ids: Iterable[str] = (),
) -> float:
    """Custom rent wins, then the mean of selected comps, then the provider estimate."""
    if custom_rent:
        return custom_rent
    selected = set(selected_comp_ids)
    rents = [comp.rent for comp in comps if comp.id in selected]
    if rents:
        return mean(rents)
    return estimate


def analyze_property(
    request: AnalysisRequest,
    *,
    fetcher: Callable[[str], PropertyData] = fetch_property_data,
) -> PropertyAnalysis:
    validate_analysis_request(request)
    defaults = get_assumption_defaults()

    data = fetcher(request.address)
    rent = resolve_rent(
        data.rent.estimate,
        data.comps,
        custom_rent=request.custom_rent,
        selected_comp_ids=request.selected_comp_ids,
    )
    if rent != data.rent.estimate:
        logger.info(
            "Using adjusted rent %.2f instead of estimate %.2f for '%s'",
            rent,
            data.rent.estimate,
            request.address,
        )

    finance_inputs = validate_finance_inputs(FinanceInputs(
        home_value=data.property.avm,
        tax_annual=data.property.tax_annual,
        hoa_monthly=data.property.hoa_monthly,
        insurance_annual=data.property.insurance_annual,
        interest_rate=request.interest_rate,
        loan_term_years=request.loan_term_years,
        down_payment_percent=request.down_payment_percent,
        rent_estimate=rent,
        vacancy_rate=request.vacancy_rate,
        maintenance_rate=request.maintenance_rate,
        management_rate=request.management_rate,
        closing_cost_rate=Fraction(defaults.closing_cost_rate),
        include_pmi=request.include_pmi,
    ))
    finance = calc_finance(finance_inputs)
    affordability = calc_affordability(
        income_annual=request.income_annual,
        other_debt_monthly=request.other_debt_monthly,
        piti=finance.piti,
        front_end_dti=defaults.front_end_dti,
        back_end_dti=defaults.back_end_dti,
    )

    return PropertyAnalysis(
        address=request.address,
        property_data=data,
        rent_used=rent,
        finance_inputs=finance_inputs,
        finance=finance,
        affordability=affordability,
    )


def build_projection_inputs(
    finance_inputs: FinanceInputs,
    finance: FinanceResult,
    appreciation_rate: float = 0.03,
    rent_growth_rate: float = 0.02,
) -> ProjectionInputs:
    return ProjectionInputs(
        home_value=finance_inputs.home_value,
        down_payment=finance_inputs.home_value * finance_inputs.down_payment_percent,
        loan_amount=finance.loan,
        interest_rate=finance_inputs.interest_rate,
        loan_term_years=finance_inputs.loan_term_years,
        monthly_pi=finance.pi,
        monthly_piti=finance.piti,
        rent_estimate=finance_inputs.rent_estimate,
        monthly_cash_flow=finance.cash_flow,
        appreciation_rate=Fraction(appreciation_rate),
        rent_growth_rate=Fraction(rent_growth_rate),
    )


def project_analysis(
    analysis: PropertyAnalysis,
    appreciation_rate: float = 0.03,
    rent_growth_rate: float = 0.02,
) -> tuple[list[YearlyProjection], ProjectionMetrics]:
    """30-year projection and milestones, with the down payment as the initial investment."""
    inputs = build_projection_inputs(
        analysis.finance_inputs,
        analysis.finance,
        appreciation_rate=appreciation_rate,
        rent_growth_rate=rent_growth_rate,
    )
    projections = calculate_30_year_projection(inputs)
    metrics = calculate_projection_metrics(projections, inputs.down_payment)
    return projections, metrics
