import pytest
from config.default_params import PRESETS, DEFAULT_INPUTS
from engine.models import ROIInputs
from engine.compute import compute
from engine.inputs import (
    coerce_number, update_field, apply_preset, inputs_from_preset, match_preset,
    negative_field_warnings, NEGATIVE_WARNING
)


@pytest.mark.parametrize("raw, expected", [
    (12, 12.0),
    ("1500", 1500.0),
    (" 1,200 ", 1200.0),
    ("$150", 150.0),
    ("7%", 7.0),
    ("-250", -250.0),
    ("abc", 0.0),
    ("12abc", 0.0),
    ("", 0.0),
    (None, 0.0),
    ("nan", 0.0),
    (float("inf"), 0.0),
])
def test_coerce_number(raw, expected):
    assert coerce_number(raw) == expected


def test_update_field_returns_new_record():
    inputs = ROIInputs()
    edited = update_field(inputs, 'lab_cost', "5000")
    assert edited.lab_cost == 5000.0
    assert inputs.lab_cost == DEFAULT_INPUTS['lab_cost']


def test_update_field_non_numeric_becomes_zero():
    edited = update_field(ROIInputs(), 'average_fee', "twenty thousand")
    assert edited.average_fee == 0.0
    # still computes
    assert compute(edited).profit_margin == compute(edited).profit_per_arch * 100


def test_update_field_arches_is_integer():
    edited = update_field(ROIInputs(), 'arches_per_month', 12.6)
    assert edited.arches_per_month == 13
    assert isinstance(edited.arches_per_month, int)


def test_update_field_lead_flow_flag():
    assert update_field(ROIInputs(), 'use_lead_flow', True).use_lead_flow is True
    assert update_field(ROIInputs(use_lead_flow=True), 'use_lead_flow', 0).use_lead_flow is False


def test_update_field_unknown():
    with pytest.raises(AttributeError):
        update_field(ROIInputs(), 'rent', 100)


def test_apply_preset_overwrites_only_preset_fields():
    inputs = ROIInputs(cost_per_lead=275, conversion_rate=12, use_lead_flow=True)
    boutique = apply_preset(inputs, 'boutique')
    for key, val in PRESETS['boutique'].items():
        assert getattr(boutique, key) == val
    assert boutique.cost_per_lead == 275
    assert boutique.conversion_rate == 12
    assert boutique.use_lead_flow is True


def test_apply_unknown_preset():
    with pytest.raises(KeyError):
        apply_preset(ROIInputs(), 'luxury')


def test_high_volume_preset_scenario():
    res = compute(inputs_from_preset('high-volume'))
    assert res.financing_fees == pytest.approx(940.8)
    assert res.monthly_profit == pytest.approx(222288)


def test_match_preset():
    assert match_preset(inputs_from_preset('standard')) == 'standard'
    assert match_preset(inputs_from_preset('boutique')) == 'boutique'
    edited = update_field(inputs_from_preset('standard'), 'lab_cost', 6100)
    assert match_preset(edited) is None
    # defaults differ from high-volume only by the 7% lender fee
    assert match_preset(ROIInputs()) is None


def test_negative_field_warnings():
    """Negative values are flagged but the engine still runs"""
    assert negative_field_warnings(ROIInputs()) == {}

    inputs = ROIInputs(lab_cost=-10, conversion_rate=-1)
    warnings = negative_field_warnings(inputs)
    assert warnings == {'lab_cost': NEGATIVE_WARNING, 'conversion_rate': NEGATIVE_WARNING}
    assert compute(inputs).total_cost_per_arch < compute(ROIInputs()).total_cost_per_arch
