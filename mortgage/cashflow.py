from .calculations import amortized_pi
from .costs import compute_costs_monthly
from .models import FinanceInputs, FinanceResult, Fraction


def calc_finance(inputs: FinanceInputs) -> FinanceResult:
    """
    Monthly payment, cash flow and return snapshot for a rental purchase.

    Inputs are expected to be validated already (see validate_finance_inputs).
    Negative cash flow is a meaningful result and is returned as-is.
    """
    loan = inputs.home_value * (1 - inputs.down_payment_percent)
    pi = amortized_pi(loan, inputs.interest_rate, inputs.loan_term_years)

    costs = compute_costs_monthly(inputs, loan)
    # Escrowed carrying costs, no debt service
    carrying = (
            costs["property_tax_monthly"]
            + costs["home_insurance_monthly"]
            + costs["hoa_monthly"]
    )
    piti = pi + carrying + costs["pmi_monthly"]

    expense_rate = inputs.total_expense_rate
    rent_break_even = piti / (1 - expense_rate)

    rent = inputs.rent_estimate
    operating_expenses = rent * expense_rate
    cash_flow = rent - (piti + operating_expenses)

    # NOI excludes PI and PMI
    noi = rent - operating_expenses - carrying
    cap_rate = noi * 12 / inputs.home_value

    cash_invested = (
            inputs.home_value * inputs.down_payment_percent
            + inputs.closing_cost_rate * inputs.home_value
    )
    # With no cash in the deal CoC is meaningless; the floor only keeps it finite.
    coc = (cash_flow * 12) / max(cash_invested, 1)

    return FinanceResult(
        loan=loan,
        pi=pi,
        pmi_monthly=costs["pmi_monthly"],
        piti=piti,
        rent_break_even=rent_break_even,
        operating_expenses=operating_expenses,
        cash_flow=cash_flow,
        noi=noi,
        cap_rate=Fraction(cap_rate),
        cash_invested=cash_invested,
        coc=Fraction(coc),
    )
