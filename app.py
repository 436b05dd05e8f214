import logging

import streamlit as st
from dotenv import load_dotenv

from analysis.logic import analyze_property, project_analysis
from analysis.scenarios import compare_scenarios, scenarios_frame
from analysis.validation import AnalysisRequest
from config.assumptions import get_assumption_defaults, get_assumptions_version
from mortgage.calculations import amortization_schedule
from mortgage.models import FinanceInputError, fraction_to_percent, percent_to_fraction
from projections.engine import payoff_year, projections_frame
from state import init_state

# ---------------------------------------------
# Load environment variables (.env)
# ---------------------------------------------
load_dotenv()

logger = logging.getLogger(__name__)


def _run_analysis(custom_rent: float | None = None) -> None:
    inputs = st.session_state["analysis_inputs"]
    request = AnalysisRequest(
        address=inputs["address"],
        income_annual=inputs["income_annual"],
        interest_rate=percent_to_fraction(inputs["interest_rate_pct"]),
        loan_term_years=int(inputs["loan_term_years"]),
        down_payment_percent=percent_to_fraction(inputs["down_payment_pct"]),
        vacancy_rate=percent_to_fraction(inputs["vacancy_pct"]),
        maintenance_rate=percent_to_fraction(inputs["maintenance_pct"]),
        management_rate=percent_to_fraction(inputs["management_pct"]),
        other_debt_monthly=inputs["other_debt_monthly"],
        include_pmi=inputs["include_pmi"],
        custom_rent=custom_rent,
        selected_comp_ids=tuple(st.session_state["selected_comp_ids"]),
    )
    try:
        analysis = analyze_property(request)
    except FinanceInputError as exc:
        st.session_state["analysis_error"] = str(exc)
        return
    st.session_state.pop("analysis_error", None)
    st.session_state["analysis"] = analysis
    st.session_state["analysis_badge"] = f"Cash flow: ${analysis.finance.cash_flow:,.0f}/mo"


# -----------------------------
# Streamlit UI
# -----------------------------
st.set_page_config(page_title="RentPax Analyzer", layout="wide")
init_state()

st.title("Find value, rent & cash flow in seconds")
st.caption(f"Default assumptions v{get_assumptions_version()}")

inputs = st.session_state["analysis_inputs"]
defaults = get_assumption_defaults()

with st.expander(f"Property & Assumptions  •  {st.session_state['analysis_badge']}", expanded=True):
    left, right = st.columns([1.05, 1.25], gap="large")

    with left:
        inputs["address"] = st.text_input(
            "Property Address", value=inputs["address"], placeholder="123 Main St, City, ST"
        )
        inputs["income_annual"] = st.number_input(
            "Household Income ($/year)", min_value=0.0, value=float(inputs["income_annual"]), step=1000.0
        )
        inputs["other_debt_monthly"] = st.number_input(
            "Other Debt ($/month)", min_value=0.0, value=float(inputs["other_debt_monthly"]), step=50.0
        )
        inputs["interest_rate_pct"] = st.slider(
            "Interest Rate (%)", 1.0, 15.0, float(inputs["interest_rate_pct"]), step=0.05
        )
        inputs["loan_term_years"] = st.number_input(
            "Loan Term (years)", min_value=1, max_value=40, value=int(inputs["loan_term_years"]), step=1
        )
        inputs["down_payment_pct"] = st.slider(
            "Down Payment (%)", 0.0, 90.0, float(inputs["down_payment_pct"]), step=1.0
        )
        inputs["include_pmi"] = st.checkbox("Include PMI under 20% down", value=bool(inputs["include_pmi"]))

    with right:
        st.markdown("### Operating Expenses (% of rent)")
        inputs["vacancy_pct"] = st.slider("Vacancy", 0.0, 50.0, float(inputs["vacancy_pct"]), step=0.5)
        inputs["maintenance_pct"] = st.slider("Maintenance", 0.0, 50.0, float(inputs["maintenance_pct"]), step=0.5)
        inputs["management_pct"] = st.slider("Management", 0.0, 50.0, float(inputs["management_pct"]), step=0.5)

    st.button("Analyze My Property", type="primary", on_click=_run_analysis)

if st.session_state.get("analysis_error"):
    st.error(st.session_state["analysis_error"])

analysis = st.session_state["analysis"]
if analysis is not None:
    data = analysis.property_data
    finance = analysis.finance
    if data.is_demo:
        st.info("Showing demo property data. Set RENTCAST_API_KEY for live valuations.")

    st.subheader(analysis.address)
    cols = st.columns(4)
    cols[0].metric("Estimated Value", f"${data.property.avm:,.0f}")
    cols[1].metric("Rent Used", f"${analysis.rent_used:,.0f}/mo")
    cols[2].metric("PITI", f"${finance.piti:,.0f}/mo")
    cols[3].metric("Cash Flow", f"${finance.cash_flow:,.0f}/mo")

    cols = st.columns(4)
    cols[0].metric("Break-even Rent", f"${finance.rent_break_even:,.0f}/mo")
    cols[1].metric("NOI", f"${finance.noi:,.0f}/mo")
    cols[2].metric("Cap Rate", f"{fraction_to_percent(finance.cap_rate):.2f}%")
    cols[3].metric("Cash-on-Cash", f"{fraction_to_percent(finance.coc):.2f}%")

    max_piti = analysis.affordability.max_piti_by_dti
    if max_piti < 0:
        st.error("Existing debt already exceeds the back-end DTI limit.")
    elif finance.piti > max_piti:
        st.warning(f"PITI exceeds the DTI limit of ${max_piti:,.0f}/mo.")
    else:
        st.success(f"PITI is within the DTI limit of ${max_piti:,.0f}/mo.")

    st.markdown("### Scenario Compare")
    st.dataframe(scenarios_frame(compare_scenarios(analysis.finance_inputs)), hide_index=True)

    if data.comps:
        st.markdown("### Rental Comps")
        comp_labels = {comp.id: f"{comp.address} (${comp.rent:,.0f})" for comp in data.comps}
        st.session_state["selected_comp_ids"] = st.multiselect(
            "Average selected comps",
            options=list(comp_labels),
            format_func=comp_labels.get,
            default=[cid for cid in st.session_state["selected_comp_ids"] if cid in comp_labels],
        )
        custom_rent = st.number_input("Custom Rent ($/month)", min_value=0.0, value=0.0, step=50.0)
        st.button(
            "Recalculate with Custom Rent",
            on_click=_run_analysis,
            args=(custom_rent or None,),
        )

    st.markdown("### 30-Year Projection")
    growth_cols = st.columns(2)
    appreciation_pct = growth_cols[0].slider(
        "Appreciation (%/yr)", -5.0, 10.0, fraction_to_percent(defaults.appreciation_rate), step=0.5
    )
    rent_growth_pct = growth_cols[1].slider(
        "Rent Growth (%/yr)", -5.0, 10.0, fraction_to_percent(defaults.rent_growth_rate), step=0.5
    )
    try:
        projections, metrics = project_analysis(
            analysis,
            appreciation_rate=percent_to_fraction(appreciation_pct),
            rent_growth_rate=percent_to_fraction(rent_growth_pct),
        )
    except FinanceInputError as exc:
        logger.warning("Projection skipped: %s", exc)
        st.warning(f"Projection unavailable: {exc}")
    else:
        cols = st.columns(3)
        for col, label, summary in (
                (cols[0], "Year 5", metrics.year5),
                (cols[1], "Year 10", metrics.year10),
                (cols[2], "Year 30", metrics.year30),
        ):
            col.metric(f"{label} Total Return", f"${summary.total_return:,.0f}", f"{summary.roi:.1f}% ROI")

        table = projections_frame(projections)
        st.line_chart(table.set_index("Year")[["Home Value", "Loan Balance", "Equity", "Total Cash Flow"]])
        st.dataframe(table, hide_index=True)
        paid_off = payoff_year(projections)
        if paid_off is not None:
            st.caption(f"Loan paid off in year {paid_off}.")

    with st.expander("Amortization Schedule", expanded=False):
        st.dataframe(
            amortization_schedule(
                finance.loan,
                analysis.finance_inputs.interest_rate,
                analysis.finance_inputs.loan_term_years,
                finance.pi,
            ),
            hide_index=True,
        )
