import pytest

from mortgage.calculations import amortized_pi, remaining_balance
from mortgage.models import FinanceInputError
from projections.engine import (
    calculate_30_year_projection,
    payoff_year,
    projections_frame,
    round_currency,
)
from projections.models import ProjectionInputs


def _inputs(**overrides):
    base = dict(
        home_value=500_000.0,
        down_payment=100_000.0,
        loan_amount=400_000.0,
        interest_rate=0.065,
        loan_term_years=30,
        monthly_pi=amortized_pi(400_000.0, 0.065, 30),
        monthly_piti=3_153.27,
        rent_estimate=2_850.0,
        monthly_cash_flow=123.45,
    )
    base.update(overrides)
    return ProjectionInputs(**base)


def test_thirty_consecutive_years():
    projections = calculate_30_year_projection(_inputs())

    assert len(projections) == 30
    assert [p.year for p in projections] == list(range(1, 31))


def test_loan_balance_declines_to_zero():
    projections = calculate_30_year_projection(_inputs())
    balances = [p.loan_balance for p in projections]

    assert all(later <= earlier for earlier, later in zip(balances, balances[1:]))
    assert balances[-1] == 0
    assert all(balance >= 0 for balance in balances)


def test_short_term_loan_is_paid_off_at_term():
    projections = calculate_30_year_projection(_inputs(loan_term_years=15))

    assert projections[13].loan_balance > 0
    assert all(p.loan_balance == 0 for p in projections[14:])
    assert payoff_year(projections) == 15


def test_growth_and_equity():
    inputs = _inputs()
    projections = calculate_30_year_projection(inputs)
    year10 = projections[9]

    home_value = 500_000.0 * 1.03 ** 10
    balance = remaining_balance(400_000.0, 0.065, 30, 10)
    assert year10.home_value == round_currency(home_value)
    assert year10.rent_monthly == round_currency(2_850.0 * 1.02 ** 10)
    assert year10.rent_annual == round_currency(2_850.0 * 1.02 ** 10 * 12)
    assert year10.loan_balance == round_currency(balance)
    assert year10.equity == round_currency(home_value - balance)
    assert year10.equity_percent == pytest.approx((home_value - balance) / home_value * 100)


def test_cash_flow_grows_with_rent_even_after_payoff():
    projections = calculate_30_year_projection(_inputs(loan_term_years=10))

    for p in projections:
        assert p.annual_cash_flow == round_currency(123.45 * 12 * 1.02 ** p.year)


def test_rounding_happens_only_at_emission():
    projections = calculate_30_year_projection(_inputs())

    exact_total = 0.0
    for p in projections:
        exact_total += 123.45 * 12 * 1.02 ** p.year
        assert p.total_cash_flow == round_currency(exact_total)
        assert p.total_return == round_currency(
            max(0.0, 500_000.0 * 1.03 ** p.year - remaining_balance(400_000.0, 0.065, 30, p.year))
            + exact_total
        )


def test_total_cash_flow_non_decreasing_for_positive_cash_flow():
    projections = calculate_30_year_projection(_inputs())
    totals = [p.total_cash_flow for p in projections]
    assert totals == sorted(totals)


def test_negative_cash_flow_accumulates_losses():
    projections = calculate_30_year_projection(_inputs(monthly_cash_flow=-200.0))
    assert projections[-1].total_cash_flow < projections[0].total_cash_flow < 0


def test_equity_never_negative_when_value_collapses():
    projections = calculate_30_year_projection(_inputs(
        home_value=100_000.0,
        loan_amount=95_000.0,
        appreciation_rate=-0.5,
    ))
    assert projections[0].equity == 0
    assert projections[0].equity_percent == 0


def test_zero_rate_loan_projection():
    projections = calculate_30_year_projection(_inputs(interest_rate=0.0, loan_term_years=20))
    assert projections[9].loan_balance == 200_000
    assert projections[19].loan_balance == 0


def test_round_currency_rounds_half_up():
    assert round_currency(2.5) == 3
    assert round_currency(3.5) == 4
    assert round_currency(-2.5) == -2
    assert round_currency(1234.49) == 1234


@pytest.mark.parametrize(
    "overrides",
    [
        {"home_value": 0.0},
        {"loan_amount": -1.0},
        {"interest_rate": -0.01},
        {"loan_term_years": 0},
        {"rent_growth_rate": -1.0},
    ],
)
def test_invalid_projection_inputs(overrides):
    with pytest.raises(FinanceInputError):
        calculate_30_year_projection(_inputs(**overrides))


def test_projections_frame():
    table = projections_frame(calculate_30_year_projection(_inputs()))

    assert len(table) == 30
    assert table["Year"].tolist() == list(range(1, 31))
    assert {"Home Value", "Loan Balance", "Equity", "Total Return"} <= set(table.columns)
