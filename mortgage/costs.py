from .models import FinanceInputs

# Flat PMI approximation: 0.5% of the loan per year while equity is under 20%.
# Real underwriting varies with LTV and credit profile.
PMI_ANNUAL_RATE = 0.005
PMI_EQUITY_THRESHOLD = 0.20


def pmi_applies(inputs: FinanceInputs) -> bool:
    return inputs.include_pmi and inputs.down_payment_percent < PMI_EQUITY_THRESHOLD


def compute_costs_monthly(inputs: FinanceInputs, loan: float) -> dict:
    """
    Normalize carrying costs to monthly amounts.

    Tax and insurance are entered per year; HOA is already monthly. PMI is
    derived from the loan amount rather than entered.
    """
    property_tax_monthly = inputs.tax_annual / 12.0
    home_insurance_monthly = inputs.insurance_annual / 12.0
    hoa_monthly = inputs.hoa_monthly
    pmi_monthly = loan * PMI_ANNUAL_RATE / 12.0 if pmi_applies(inputs) else 0.0

    return {
        "property_tax_monthly": property_tax_monthly,
        "home_insurance_monthly": home_insurance_monthly,
        "hoa_monthly": hoa_monthly,
        "pmi_monthly": pmi_monthly,
    }
