"""Visualization utilities for the ROI calculator."""

import plotly.graph_objects as go


def create_composition_donut(slices, center_label, center_value):
    """Donut chart of the fee split, with the revenue figure in the hole."""
    fig = go.Figure()
    fig.add_trace(go.Pie(
        labels=[s.name for s in slices],
        values=[s.value for s in slices],
        marker=dict(colors=[s.color for s in slices]),
        hole=0.75,
        sort=False,
        direction='clockwise',
        textinfo='none',
        hovertemplate='%{label}: $%{value:,.0f}<extra></extra>',
    ))
    fig.update_layout(
        showlegend=False,
        height=320,
        margin=dict(t=10, b=10, l=10, r=10),
        annotations=[
            dict(text=center_label, x=0.5, y=0.58, showarrow=False,
                 font=dict(size=11, color='#94a3b8')),
            dict(text=center_value, x=0.5, y=0.45, showarrow=False,
                 font=dict(size=28, color='#1a365d')),
        ],
    )
    return fig


def create_volume_chart(projection_df, current_arches=None, break_even=None):
    """Monthly revenue, spend and profit across case volumes."""
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=projection_df['Arches'],
        y=projection_df['Revenue'],
        mode='lines',
        name='Gross Revenue',
        line=dict(color='#1a365d', width=2)
    ))
    fig.add_trace(go.Scatter(
        x=projection_df['Arches'],
        y=projection_df['Marketing Spend'],
        mode='lines',
        name='Ad Investment',
        line=dict(color='#3b82f6', width=2, dash='dash')
    ))
    fig.add_trace(go.Scatter(
        x=projection_df['Arches'],
        y=projection_df['Profit'],
        mode='lines+markers',
        name='Monthly Net',
        line=dict(color='#10b981', width=2)
    ))
    fig.add_hline(y=0, line_dash="dash", line_color="gray")
    if current_arches is not None:
        fig.add_vline(x=current_arches, line_dash="dot", line_color="#64748b",
                      annotation_text="Current")
    if break_even:
        fig.add_vline(x=break_even, line_dash="dot", line_color="#f59e0b",
                      annotation_text="Break-even")
    fig.update_layout(
        title='Monthly Economics by Case Volume',
        xaxis_title='Arches per Month',
        yaxis_title='Amount ($)',
        height=400
    )
    return fig
