from .models import AffordabilityResult

DEFAULT_FRONT_END_DTI = 0.28
DEFAULT_BACK_END_DTI = 0.36


def calc_affordability(
    income_annual: float,
    other_debt_monthly: float,
    piti: float,
    front_end_dti: float = DEFAULT_FRONT_END_DTI,
    back_end_dti: float = DEFAULT_BACK_END_DTI,
) -> AffordabilityResult:
    """
    Maximum monthly housing payment allowed by front-end and back-end DTI.

    `piti` is accepted so callers can compare it against the result; it does
    not change the limit. A negative limit means existing debt already exceeds
    the back-end ratio and is kept so "tight" and "impossible" stay distinct.
    """
    income_monthly = income_annual / 12.0
    max_housing = front_end_dti * income_monthly
    max_all_debt = back_end_dti * income_monthly - other_debt_monthly
    return AffordabilityResult(
        income_monthly=income_monthly,
        max_piti_by_dti=min(max_housing, max_all_debt),
    )
