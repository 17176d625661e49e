"""Monthly projections tab component."""

import streamlit as st

from config.default_params import ARCHES_MIN, ARCHES_MAX
from engine.projections import volume_projection
from utils.formatting import format_currency
from utils.visualizations import create_volume_chart


def render_projections_tab(inputs, res):
    """Render monthly economics across the case volume range."""
    st.header("Monthly Projections")
    st.caption("Every other input held at its current value")

    projection_df = volume_projection(inputs, ARCHES_MIN, ARCHES_MAX)

    col1, col2, col3, col4 = st.columns(4)
    with col1:
        st.metric("Current Volume", f"{inputs.arches_per_month} arches")
    with col2:
        st.metric("Monthly Net", format_currency(res.monthly_profit))
    with col3:
        st.metric(f"Net at {ARCHES_MAX} Arches",
                  format_currency(projection_df['Profit'].iloc[-1]))
    with col4:
        st.metric("Break-even", f"{res.break_even_arches:.1f} arches")

    if res.profit_before_marketing <= 0:
        st.warning("⚠️ Non-marketing costs exceed the treatment price; break-even is not reachable")

    fig = create_volume_chart(projection_df, inputs.arches_per_month, res.break_even_arches)
    st.plotly_chart(fig, use_container_width=True)

    with st.expander("View Detailed Volume Projections"):
        display_df = projection_df.copy()
        for col in ['Revenue', 'Marketing Spend', 'Total Cost', 'Profit']:
            display_df[col] = display_df[col].apply(format_currency)
        display_df['Leads Required'] = display_df['Leads Required'].apply(lambda x: f"{int(x):,}")
        st.dataframe(display_df, use_container_width=True, hide_index=True)
