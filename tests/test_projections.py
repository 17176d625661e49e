"""Test per-arch/monthly views, footer totals and the volume what-if"""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
from engine.models import ROIInputs
from engine.compute import compute
from engine.inputs import inputs_from_preset
from engine.projections import (
    view_multiplier, monthly_footer, volume_projection, VIEW_PER_ARCH, VIEW_MONTHLY
)


def base_inputs():
    return inputs_from_preset('high-volume')


def test_view_multiplier():
    inputs = base_inputs()
    assert view_multiplier(VIEW_PER_ARCH, inputs) == 1
    assert view_multiplier(VIEW_MONTHLY, inputs) == 15
    with pytest.raises(ValueError):
        view_multiplier('yearly', inputs)


def test_monthly_footer_totals():
    inputs = base_inputs()
    res = compute(inputs)
    totals = monthly_footer(inputs, res)
    assert totals['gross_revenue'] == pytest.approx(360000)
    assert totals['clinical_costs'] == pytest.approx((4500 + 2000) * 15)
    assert totals['ad_investment'] == pytest.approx(22500)
    assert totals['monthly_net'] == pytest.approx(222288)


def test_footer_cards_cover_monthly_totals():
    from components.footer import FOOTER_CARDS
    inputs = base_inputs()
    totals = monthly_footer(inputs, compute(inputs))
    assert [key for _, key, _ in FOOTER_CARDS] == list(totals)
    captions = {label: caption for label, _, caption in FOOTER_CARDS}
    assert captions["Monthly Net"] == "AFTER-TAX ESTIMATES"


def test_volume_projection_shape_and_current_row():
    """One row per slider volume; the current volume matches the engine"""
    inputs = base_inputs()
    df = volume_projection(inputs)
    assert list(df['Arches']) == list(range(1, 31))
    assert list(df.columns) == ['Arches', 'Revenue', 'Marketing Spend', 'Total Cost',
                                'Profit', 'Leads Required']

    row = df[df['Arches'] == 15].iloc[0]
    res = compute(inputs)
    assert row['Profit'] == pytest.approx(res.monthly_profit)
    assert row['Revenue'] == pytest.approx(res.monthly_revenue)
    assert row['Revenue'] - row['Total Cost'] == pytest.approx(row['Profit'])


def test_volume_projection_is_linear_in_volume():
    df = volume_projection(base_inputs(), 2, 6)
    per_arch = df['Profit'] / df['Arches']
    assert per_arch.max() - per_arch.min() < 1e-6


def test_volume_projection_leaves_inputs_untouched():
    inputs = base_inputs()
    volume_projection(inputs, 1, 5)
    assert inputs.arches_per_month == 15


def test_volume_projection_lead_flow():
    inputs = ROIInputs(use_lead_flow=True, cost_per_lead=150, conversion_rate=10)
    df = volume_projection(inputs, 10, 10)
    assert df['Leads Required'].iloc[0] == pytest.approx(100)
    assert df['Marketing Spend'].iloc[0] == pytest.approx(15000)


def test_volume_projection_bad_range():
    with pytest.raises(ValueError):
        volume_projection(base_inputs(), 10, 5)
