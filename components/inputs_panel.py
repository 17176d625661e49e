"""Sidebar input controls backed by a single ROIInputs in session state."""

import streamlit as st

from config.default_params import PRESETS, ARCHES_MIN, ARCHES_MAX
from engine.models import ROIInputs
from engine.inputs import (
    update_field, apply_preset, match_preset, negative_field_warnings
)
from utils.formatting import format_currency

INPUTS_KEY = 'inputs'

# field -> (label, kind)
FIELD_LABELS = {
    'average_fee': ("Treatment price per arch", 'currency'),
    'lab_cost': ("Lab cost per arch", 'currency'),
    'supplies_cost': ("Implants & surgical supplies", 'currency'),
    'provider_comp_percent': ("Outside provider fee (%)", 'percent'),
    'tc_commission_percent': ("TC Commission (%)", 'percent'),
    'financing_usage_percent': ("Usage Rate (%)", 'percent'),
    'financing_amt_percent': ("Avg. % Financed", 'percent'),
    'financing_fee_percent': ("Lender Fee (%)", 'percent'),
    'marketing_cost_per_arch': ("Marketing cost per arch", 'currency'),
    'cost_per_lead': ("Cost per lead", 'currency'),
    'conversion_rate': ("Lead conversion rate (%)", 'percent'),
}
STEPS = {'currency': 100.0, 'percent': 0.5}


def widget_key(name):
    return f"w_{name}"


def init_inputs_state():
    if INPUTS_KEY not in st.session_state:
        st.session_state[INPUTS_KEY] = ROIInputs()


def _sync_field(name):
    """Widget on_change: push the widget value into the canonical inputs"""
    st.session_state[INPUTS_KEY] = update_field(
        st.session_state[INPUTS_KEY], name, st.session_state[widget_key(name)]
    )


def _select_preset(name):
    st.session_state[INPUTS_KEY] = apply_preset(st.session_state[INPUTS_KEY], name)
    # drop widget state so every control reseeds from the preset
    for field in FIELD_LABELS:
        st.session_state.pop(widget_key(field), None)
    st.session_state.pop(widget_key('arches_per_month'), None)


def _number_field(name, warnings):
    label, kind = FIELD_LABELS[name]
    key = widget_key(name)
    if key not in st.session_state:
        st.session_state[key] = float(getattr(st.session_state[INPUTS_KEY], name))
    st.number_input(
        label, key=key, step=STEPS[kind], format="%.2f" if kind == 'percent' else "%.0f",
        on_change=_sync_field, args=(name,)
    )
    if name in warnings:
        st.warning(warnings[name])


def render_inputs_panel(settings):
    """Render sidebar controls and return the current ROIInputs snapshot."""
    init_inputs_state()
    inputs = st.session_state[INPUTS_KEY]
    warnings = negative_field_warnings(inputs)

    with st.sidebar:
        st.subheader("⚙️ Practice Presets")
        active = match_preset(inputs)
        cols = st.columns(len(PRESETS))
        for col, name in zip(cols, PRESETS):
            with col:
                st.button(
                    name.replace('-', ' ').title(),
                    key=f"preset_{name}",
                    type="primary" if name == active else "secondary",
                    on_click=_select_preset, args=(name,),
                    use_container_width=True,
                )

        with st.expander("Treatment & Clinical", expanded=True):
            for name in ('average_fee', 'lab_cost', 'supplies_cost'):
                _number_field(name, warnings)

        with st.expander("Financing & Provider"):
            for name in ('provider_comp_percent', 'tc_commission_percent'):
                _number_field(name, warnings)
            if st.toggle("Unlock financing details", key="financing_unlocked"):
                for name in ('financing_usage_percent', 'financing_amt_percent',
                             'financing_fee_percent'):
                    _number_field(name, warnings)
            else:
                st.caption(
                    f"Usage {inputs.financing_usage_percent:g}% · "
                    f"Financed {inputs.financing_amt_percent:g}% · "
                    f"Lender fee {inputs.financing_fee_percent:g}%"
                )

        with st.expander("Marketing & Volume"):
            if settings.lead_flow:
                lead_key = widget_key('use_lead_flow')
                if lead_key not in st.session_state:
                    st.session_state[lead_key] = inputs.use_lead_flow
                st.toggle("Lead flow logic", key=lead_key,
                          on_change=_sync_field, args=('use_lead_flow',))
            if settings.lead_flow and inputs.use_lead_flow:
                _number_field('cost_per_lead', warnings)
                _number_field('conversion_rate', warnings)
            else:
                _number_field('marketing_cost_per_arch', warnings)

            arches_key = widget_key('arches_per_month')
            if arches_key not in st.session_state:
                st.session_state[arches_key] = min(
                    ARCHES_MAX, max(ARCHES_MIN, int(inputs.arches_per_month))
                )
            st.slider("Monthly Arches", ARCHES_MIN, ARCHES_MAX, key=arches_key,
                      on_change=_sync_field, args=('arches_per_month',))

    inputs = st.session_state[INPUTS_KEY]
    if not settings.lead_flow and inputs.use_lead_flow:
        # variant without lead flow controls always uses the flat model
        inputs = update_field(inputs, 'use_lead_flow', False)
        st.session_state[INPUTS_KEY] = inputs
    return inputs


def render_break_even(res):
    with st.sidebar:
        st.markdown("#### ⚡ Break-Even Milestone")
        st.metric("Arches / month", f"{res.break_even_arches:.1f}")
        st.caption(
            "Monthly volume needed to cover the total marketing investment "
            f"of {format_currency(res.monthly_marketing_spend)}."
        )
