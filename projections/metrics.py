from __future__ import annotations

from typing import Sequence

from mortgage.models import FinanceInputError, Percent

from .engine import PROJECTION_YEARS
from .models import MilestoneSummary, ProjectionMetrics, YearlyProjection

MILESTONE_YEARS = (5, 10, 30)


def roi_percent(total_return: float, initial_investment: float) -> Percent:
    return Percent((total_return - initial_investment) / initial_investment * 100)


def _summarize(row: YearlyProjection, initial_investment: float) -> MilestoneSummary:
    return MilestoneSummary(
        home_value=row.home_value,
        equity=row.equity,
        total_cash_flow=row.total_cash_flow,
        total_return=row.total_return,
        roi=roi_percent(row.total_return, initial_investment),
    )


def calculate_projection_metrics(
    projections: Sequence[YearlyProjection],
    initial_investment: float,
) -> ProjectionMetrics:
    """Snapshot years 5, 10 and 30 with ROI against the cash originally invested."""
    if initial_investment <= 0:
        raise FinanceInputError(
            f"initial_investment must be positive to compute ROI, got {initial_investment}"
        )
    if len(projections) < PROJECTION_YEARS:
        raise FinanceInputError(
            f"Expected {PROJECTION_YEARS} yearly projections, got {len(projections)}"
        )

    year5, year10, year30 = (projections[year - 1] for year in MILESTONE_YEARS)
    return ProjectionMetrics(
        year5=_summarize(year5, initial_investment),
        year10=_summarize(year10, initial_investment),
        year30=_summarize(year30, initial_investment),
    )
