import pytest

from config import assumptions
from config.assumptions import get_assumption_defaults, get_assumptions_version, get_demo_comps


def test_defaults_are_fractions():
    defaults = get_assumption_defaults()

    assert defaults.interest_rate == pytest.approx(0.065)
    assert defaults.down_payment_percent == pytest.approx(0.20)
    assert defaults.front_end_dti == pytest.approx(0.28)
    assert defaults.back_end_dti == pytest.approx(0.36)
    assert defaults.appreciation_rate == pytest.approx(0.03)
    assert defaults.rent_growth_rate == pytest.approx(0.02)
    assert defaults.vacancy_rate + defaults.maintenance_rate + defaults.management_rate < 1


def test_version_and_demo_comps():
    assert get_assumptions_version() == "2026-10"
    assert len(get_demo_comps()) == 5


def test_missing_file_raises(monkeypatch, tmp_path):
    monkeypatch.setattr(assumptions, "ASSUMPTIONS_PATH", tmp_path / "missing.json")
    with pytest.raises(FileNotFoundError):
        get_assumptions_version()
