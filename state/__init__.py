import streamlit as st

from config.assumptions import get_assumption_defaults
from mortgage.models import fraction_to_percent


def init_state():
    defaults = get_assumption_defaults()

    if "analysis_inputs" not in st.session_state:
        # Widgets take percentages; everything downstream takes fractions.
        st.session_state["analysis_inputs"] = {
            "address": "",
            "income_annual": 120000.0,
            "other_debt_monthly": 0.0,
            "interest_rate_pct": fraction_to_percent(defaults.interest_rate),
            "loan_term_years": defaults.loan_term_years,
            "down_payment_pct": fraction_to_percent(defaults.down_payment_percent),
            "vacancy_pct": fraction_to_percent(defaults.vacancy_rate),
            "maintenance_pct": fraction_to_percent(defaults.maintenance_rate),
            "management_pct": fraction_to_percent(defaults.management_rate),
            "include_pmi": defaults.include_pmi,
        }

    if "analysis" not in st.session_state:
        st.session_state["analysis"] = None

    if "analysis_badge" not in st.session_state:
        st.session_state["analysis_badge"] = "Cash flow: —"

    if "selected_comp_ids" not in st.session_state:
        st.session_state["selected_comp_ids"] = []
