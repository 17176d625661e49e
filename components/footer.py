import streamlit as st

from config.default_params import DISCLAIMER
from engine.projections import monthly_footer
from utils.formatting import format_currency

# (label, footer key, caption)
FOOTER_CARDS = (
    ("Gross Revenue", 'gross_revenue', "PROJECTED MONTHLY"),
    ("Clinical Costs", 'clinical_costs', "SUPPLIES & LAB FEES"),
    ("Ad Investment", 'ad_investment', "TOTAL ADSPEND BUDGET"),
    ("Monthly Net", 'monthly_net', "AFTER-TAX ESTIMATES"),
)


def render_footer(inputs, res):
    """Monthly aggregates and the advice disclaimer."""
    totals = monthly_footer(inputs, res)
    st.divider()
    cols = st.columns(len(FOOTER_CARDS))
    for col, (label, key, caption) in zip(cols, FOOTER_CARDS):
        with col:
            st.metric(label, format_currency(totals[key]))
            st.caption(caption)
    st.caption(f"Note: {DISCLAIMER}")
