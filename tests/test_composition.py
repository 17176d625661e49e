import pytest
from config.default_params import SLICE_COLORS
from engine.compute import compute
from engine.composition import build_composition, scale_slices, SLICE_ORDER
from engine.inputs import inputs_from_preset


def test_slices_order_and_percentages():
    """Each bucket is a share of the full treatment price"""
    inputs = inputs_from_preset('high-volume')
    slices = build_composition(inputs, compute(inputs))
    assert [s.name for s in slices] == list(SLICE_ORDER)

    by_name = {s.name: s for s in slices}
    assert by_name['Lab'].value == pytest.approx(6500)
    assert by_name['Lab'].percentage == pytest.approx(6500 / 24000 * 100)
    assert by_name['Marketing'].value == pytest.approx(1500)
    assert by_name['Fee/Comp'].value == pytest.approx(240)
    assert by_name['Financing'].value == pytest.approx(940.8)
    assert by_name['Profit'].value == pytest.approx(14819.2)
    assert by_name['Profit'].color == SLICE_COLORS['Profit']

    # profitable practice: buckets add back to the whole fee
    assert sum(s.percentage for s in slices) == pytest.approx(100)


def test_loss_shows_empty_profit_slice():
    """Profit is floored at zero for the chart only"""
    inputs = inputs_from_preset('high-volume')
    inputs.lab_cost = 30000
    res = compute(inputs)
    slices = build_composition(inputs, res)
    profit = [s for s in slices if s.name == 'Profit'][0]
    assert res.profit_per_arch < 0
    assert profit.value == 0
    assert profit.percentage == 0


def test_zero_fee_percentages_are_finite():
    inputs = inputs_from_preset('standard')
    inputs.average_fee = 0
    slices = build_composition(inputs, compute(inputs))
    lab = slices[0]
    assert lab.percentage == pytest.approx((6000 + 2000) * 100)


def test_hidden_series_do_not_rescale_others():
    inputs = inputs_from_preset('boutique')
    res = compute(inputs)
    full = {s.name: s.percentage for s in build_composition(inputs, res)}
    partial = build_composition(inputs, res, hidden=['Profit', 'Financing'])
    assert [s.name for s in partial] == ['Lab', 'Marketing', 'Providers', 'Fee/Comp']
    for s in partial:
        assert s.percentage == pytest.approx(full[s.name])


def test_unknown_series_rejected():
    inputs = inputs_from_preset('boutique')
    with pytest.raises(ValueError):
        build_composition(inputs, compute(inputs), hidden=['Rent'])


def test_scale_slices_to_monthly():
    inputs = inputs_from_preset('high-volume')
    slices = build_composition(inputs, compute(inputs))
    monthly = scale_slices(slices, inputs.arches_per_month)
    for per_arch, month in zip(slices, monthly):
        assert month.value == pytest.approx(per_arch.value * 15)
        assert month.percentage == per_arch.percentage
    # originals untouched
    assert slices[0].value == pytest.approx(6500)
