import pytest

from mortgage.models import FinanceInputError
from projections.engine import calculate_30_year_projection
from projections.metrics import calculate_projection_metrics
from projections.models import ProjectionInputs


@pytest.fixture
def projections():
    return calculate_30_year_projection(ProjectionInputs(
        home_value=400_000.0,
        down_payment=80_000.0,
        loan_amount=320_000.0,
        interest_rate=0.07,
        loan_term_years=30,
        monthly_pi=2_128.97,
        monthly_piti=2_700.0,
        rent_estimate=2_600.0,
        monthly_cash_flow=-150.0,
    ))


def test_milestones_are_years_five_ten_thirty(projections):
    metrics = calculate_projection_metrics(projections, 80_000.0)

    for summary, row in (
            (metrics.year5, projections[4]),
            (metrics.year10, projections[9]),
            (metrics.year30, projections[29]),
    ):
        assert summary.home_value == row.home_value
        assert summary.equity == row.equity
        assert summary.total_cash_flow == row.total_cash_flow
        assert summary.total_return == row.total_return
        assert summary.roi == pytest.approx((row.total_return - 80_000.0) / 80_000.0 * 100)


def test_roi_grows_over_time(projections):
    metrics = calculate_projection_metrics(projections, 80_000.0)
    assert metrics.year5.roi < metrics.year10.roi < metrics.year30.roi


@pytest.mark.parametrize("initial_investment", [0.0, -10_000.0])
def test_non_positive_investment_is_rejected(projections, initial_investment):
    with pytest.raises(FinanceInputError, match="initial_investment"):
        calculate_projection_metrics(projections, initial_investment)


def test_short_projection_is_rejected(projections):
    with pytest.raises(FinanceInputError, match="30"):
        calculate_projection_metrics(projections[:10], 80_000.0)
