"""ROI dashboard: summary cards, financial composition and lead flow metrics."""

import streamlit as st
import pandas as pd

from engine.composition import build_composition, scale_slices, SLICE_ORDER
from engine.metrics import total_cost_percent, clinical_cost_percent, ad_spend_per_start
from engine.projections import view_multiplier, VIEW_PER_ARCH, VIEW_MONTHLY
from utils.formatting import format_currency, format_percent, format_multiplier, format_count
from utils.visualizations import create_composition_donut


def render_summary_cards(inputs, res):
    c1, c2, c3 = st.columns(3)
    with c1:
        st.metric("Marketing ROI", format_multiplier(res.return_on_marketing))
        st.caption("Return on Ad Spend")
    with c2:
        st.metric("Total Cost %", format_percent(total_cost_percent(inputs, res)))
        st.caption("Percentage of Production")
    with c3:
        st.metric("Profit Margin", format_percent(res.profit_margin))
        st.caption("Net per arch / treatment price")


def render_composition(inputs, res, settings):
    view = st.radio(
        "View", [VIEW_PER_ARCH, VIEW_MONTHLY],
        format_func=lambda v: "Per Arch" if v == VIEW_PER_ARCH else "Monthly",
        horizontal=True, key="view_type"
    )
    multiplier = view_multiplier(view, inputs)

    hidden = ()
    if settings.series_toggle:
        shown = st.multiselect("Series", list(SLICE_ORDER), default=list(SLICE_ORDER),
                               key="shown_series")
        hidden = [name for name in SLICE_ORDER if name not in shown]

    slices = scale_slices(build_composition(inputs, res, hidden=hidden), multiplier)
    center_label = "PER ARCH REVENUE" if view == VIEW_PER_ARCH else "MONTHLY REVENUE"
    fig = create_composition_donut(slices, center_label,
                                   format_currency(inputs.average_fee * multiplier))
    st.plotly_chart(fig, use_container_width=True)

    legend = pd.DataFrame([
        {"Bucket": s.name, "Amount": format_currency(s.value),
         "Share": format_percent(s.percentage)}
        for s in slices
    ])
    st.dataframe(legend, hide_index=True, use_container_width=True)
    return view, multiplier


def render_lead_flow_card(inputs, res, view, multiplier):
    st.markdown("#### 👥 Lead Flow Metrics")
    st.metric("Monthly Leads Required", format_count(res.leads_required))
    st.caption(f"At {inputs.conversion_rate:g}% conversion")
    st.metric("Ad Spend Per Start", format_currency(ad_spend_per_start(inputs, res)))
    st.metric("Clinical Cost %", format_percent(clinical_cost_percent(inputs)))

    st.divider()
    per_arch = view == VIEW_PER_ARCH
    st.metric("Total Cost", format_currency(res.total_cost_per_arch * multiplier))
    st.caption("ALL-IN PER ARCH" if per_arch else "MONTHLY ALL-IN")
    st.metric("Total Profit", format_currency(res.profit_per_arch * multiplier))
    st.caption("NET PER ARCH" if per_arch else "MONTHLY NET")
    if res.profit_per_arch < 0:
        st.warning("⚠️ Costs exceed the treatment price; each arch runs at a loss.")


def render_dashboard_tab(inputs, res, settings):
    """Render the main dashboard tab and return the active view."""
    render_summary_cards(inputs, res)
    col1, col2 = st.columns([7, 5])
    with col1:
        st.subheader("Financial Composition")
        view, multiplier = render_composition(inputs, res, settings)
    with col2:
        render_lead_flow_card(inputs, res, view, multiplier)
    return view
