from __future__ import annotations

from .models import FinanceInputError, FinanceInputs


def _validate_fraction(errors: list[str], name: str, value: float, *, upper: float = 1.0) -> None:
    if value < 0:
        errors.append(f"{name} cannot be negative.")
    elif value > upper:
        errors.append(f"{name} cannot exceed {upper:g} (rates are fractions, e.g. 0.05).")


def finance_input_errors(inputs: FinanceInputs) -> list[str]:
    errors = []
    if inputs.home_value <= 0:
        errors.append("home_value must be positive.")
    for name in ("tax_annual", "hoa_monthly", "insurance_annual", "rent_estimate"):
        if getattr(inputs, name) < 0:
            errors.append(f"{name} cannot be negative.")

    if inputs.interest_rate < 0:
        errors.append("interest_rate cannot be negative.")
    if inputs.loan_term_years <= 0:
        errors.append("loan_term_years must be positive.")

    if inputs.down_payment_percent < 0:
        errors.append("down_payment_percent cannot be negative.")
    elif inputs.down_payment_percent >= 1:
        errors.append("down_payment_percent must be below 1 (a fraction, e.g. 0.20).")

    for name in ("vacancy_rate", "maintenance_rate", "management_rate"):
        _validate_fraction(errors, name, getattr(inputs, name))
    if inputs.total_expense_rate >= 1:
        errors.append("vacancy, maintenance and management rates must total less than 1.")

    if inputs.closing_cost_rate < 0:
        errors.append("closing_cost_rate cannot be negative.")
    return errors


def validate_finance_inputs(inputs: FinanceInputs) -> FinanceInputs:
    errors = finance_input_errors(inputs)
    if errors:
        raise FinanceInputError("Invalid finance inputs: " + " ".join(errors))
    return inputs
