import pandas as pd

from .models import FinanceInputError


def amortized_pi(loan: float, annual_rate: float, years: int) -> float:
    """
    Standard fixed-rate amortization payment:
      M = P * [ r(1+r)^n / ((1+r)^n - 1) ]
    where r = annual_rate/12, n = years*12. annual_rate is a fraction.

    A zero rate has no interest component, so the loan is repaid linearly.
    """
    if years <= 0:
        raise FinanceInputError(f"loan_term_years must be positive, got {years}")
    if loan <= 0:
        return 0.0
    n = years * 12
    r = annual_rate / 12.0
    if r == 0:
        return loan / n
    num = r * (1 + r) ** n
    den = (1 + r) ** n - 1
    return loan * (num / den)


def remaining_balance(loan: float, annual_rate: float, term_years: int, years_paid: int) -> float:
    """
    Closed-form balance left after `years_paid` full years of scheduled payments:
      B = M * ((1+r)^k - 1) / (r * (1+r)^k)
    where k is the number of months still to pay.
    """
    if years_paid >= term_years or loan <= 0:
        return 0.0

    total_months = term_years * 12
    remaining_months = total_months - years_paid * 12
    r = annual_rate / 12.0
    if r == 0:
        return max(0.0, loan * remaining_months / total_months)

    payment = amortized_pi(loan, annual_rate, term_years)
    growth = (1 + r) ** remaining_months
    balance = payment * (growth - 1) / (r * growth)
    return max(0.0, balance)


def amortization_schedule(
    principal: float,
    annual_rate: float,
    term_years: int,
    payment: float,
) -> pd.DataFrame:
    """
    Yearly totals of a cent-rounded monthly schedule.

    The last scheduled month pays whatever principal is left, so the
    final ending balance is exactly 0.00.
    """
    if term_years <= 0:
        raise FinanceInputError(f"loan_term_years must be positive, got {term_years}")

    total_months = term_years * 12
    monthly_rate = annual_rate / 12.0
    balance = round(principal, 2)

    totals: dict[int, dict] = {}
    for month in range(1, total_months + 1):
        if balance <= 0:
            break

        interest = round(balance * monthly_rate, 2)
        if month == total_months:
            principal_paid = balance
        else:
            principal_paid = min(balance, round(payment - interest, 2))
        balance = round(balance - principal_paid, 2)

        year = (month - 1) // 12 + 1
        row = totals.setdefault(year, {"Year": year, "Interest": 0.0, "Principal": 0.0})
        row["Interest"] = round(row["Interest"] + interest, 2)
        row["Principal"] = round(row["Principal"] + principal_paid, 2)
        row["Ending Balance"] = balance

    return pd.DataFrame(
        list(totals.values()),
        columns=["Year", "Interest", "Principal", "Ending Balance"],
    )
