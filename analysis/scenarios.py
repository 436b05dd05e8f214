"""Side-by-side financing scenarios for the same property."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable

import pandas as pd

from mortgage.cashflow import calc_finance
from mortgage.models import FinanceInputs, Fraction, fraction_to_percent

# A 3-2-1 buydown's first year carries a rate three points under the note rate.
BUYDOWN_YEAR1_DISCOUNT = 0.03


@dataclass(frozen=True)
class Scenario:
    name: str
    interest_rate: Fraction
    down_payment_percent: Fraction
    piti: float
    cash_flow: float


def _scenario(name: str, inputs: FinanceInputs) -> Scenario:
    result = calc_finance(inputs)
    return Scenario(
        name=name,
        interest_rate=inputs.interest_rate,
        down_payment_percent=inputs.down_payment_percent,
        piti=result.piti,
        cash_flow=result.cash_flow,
    )


def compare_scenarios(inputs: FinanceInputs) -> list[Scenario]:
    buydown_rate = Fraction(max(inputs.interest_rate - BUYDOWN_YEAR1_DISCOUNT, 0.0))
    return [
        _scenario(
            "10% + PMI",
            replace(inputs, down_payment_percent=Fraction(0.10), include_pmi=True),
        ),
        _scenario(
            "20% down",
            replace(inputs, down_payment_percent=Fraction(0.20)),
        ),
        _scenario(
            "3-2-1 Buydown (Yr1)",
            replace(inputs, interest_rate=buydown_rate),
        ),
    ]


def scenarios_frame(scenarios: Iterable[Scenario]) -> pd.DataFrame:
    return pd.DataFrame([
        {
            "Scenario": s.name,
            "Rate (%)": round(fraction_to_percent(s.interest_rate), 2),
            "Down (%)": round(fraction_to_percent(s.down_payment_percent)),
            "PITI ($/mo)": round(s.piti),
            "Cash Flow ($/mo)": round(s.cash_flow),
        }
        for s in scenarios
    ])
