import pytest

from mortgage.affordability import calc_affordability


def test_front_end_ratio_binds_without_other_debt():
    result = calc_affordability(income_annual=120_000.0, other_debt_monthly=0.0, piti=2_200.0)

    assert result.income_monthly == pytest.approx(10_000.0)
    assert result.max_piti_by_dti == pytest.approx(2_800.0)


def test_back_end_ratio_binds_with_other_debt():
    result = calc_affordability(income_annual=120_000.0, other_debt_monthly=1_500.0, piti=2_200.0)
    assert result.max_piti_by_dti == pytest.approx(3_600.0 - 1_500.0)


def test_custom_ratios():
    result = calc_affordability(
        income_annual=60_000.0,
        other_debt_monthly=0.0,
        piti=0.0,
        front_end_dti=0.31,
        back_end_dti=0.43,
    )
    assert result.max_piti_by_dti == pytest.approx(0.31 * 5_000.0)


def test_negative_headroom_is_not_clamped():
    result = calc_affordability(income_annual=36_000.0, other_debt_monthly=2_000.0, piti=1_000.0)
    assert result.max_piti_by_dti == pytest.approx(0.36 * 3_000.0 - 2_000.0)
    assert result.max_piti_by_dti < 0
