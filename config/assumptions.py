"""Default underwriting assumptions and the demo property dataset."""

from __future__ import annotations

import json
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List


ASSUMPTIONS_PATH = Path(__file__).resolve().parent / "assumptions.json"


@dataclass(frozen=True)
class AssumptionDefaults:
    interest_rate: float
    loan_term_years: int
    down_payment_percent: float
    closing_cost_rate: float
    include_pmi: bool
    vacancy_rate: float
    maintenance_rate: float
    management_rate: float
    front_end_dti: float
    back_end_dti: float
    appreciation_rate: float
    rent_growth_rate: float


def _load_assumptions_data() -> dict:
    if not ASSUMPTIONS_PATH.exists():
        raise FileNotFoundError(f"Assumptions file not found: {ASSUMPTIONS_PATH}")
    with ASSUMPTIONS_PATH.open("r", encoding="utf-8") as handle:
        return json.load(handle)


def get_assumptions_version() -> str:
    data = _load_assumptions_data()
    metadata = data.get("metadata", {})
    return metadata.get("version", "unknown")


@lru_cache(maxsize=1)
def get_assumption_defaults() -> AssumptionDefaults:
    data = _load_assumptions_data()
    financing = data.get("financing", {})
    operating = data.get("operating", {})
    affordability = data.get("affordability", {})
    projection = data.get("projection", {})
    return AssumptionDefaults(
        interest_rate=float(financing.get("interest_rate", 0.065)),
        loan_term_years=int(financing.get("loan_term_years", 30)),
        down_payment_percent=float(financing.get("down_payment_percent", 0.20)),
        closing_cost_rate=float(financing.get("closing_cost_rate", 0.03)),
        include_pmi=bool(financing.get("include_pmi", True)),
        vacancy_rate=float(operating.get("vacancy_rate", 0.05)),
        maintenance_rate=float(operating.get("maintenance_rate", 0.08)),
        management_rate=float(operating.get("management_rate", 0.08)),
        front_end_dti=float(affordability.get("front_end_dti", 0.28)),
        back_end_dti=float(affordability.get("back_end_dti", 0.36)),
        appreciation_rate=float(projection.get("appreciation_rate", 0.03)),
        rent_growth_rate=float(projection.get("rent_growth_rate", 0.02)),
    )


def get_demo_property() -> Dict[str, Any]:
    data = _load_assumptions_data()
    return dict(data.get("demo_property", {}))


def get_demo_comps() -> List[Dict[str, Any]]:
    data = _load_assumptions_data()
    return [dict(entry) for entry in data.get("demo_comps", [])]
