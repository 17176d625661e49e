"""Input store helpers: coercion, presets, edits and negative-value warnings.

Every edit produces a new ``ROIInputs``; the caller (the Streamlit session)
owns the single current snapshot.
"""
import logging
import math
from dataclasses import replace, fields
from typing import Dict, Optional

from config.default_params import PRESETS
from .models import ROIInputs

logger = logging.getLogger(__name__)

NEGATIVE_WARNING = "Value must be 0 or greater."


def coerce_number(raw) -> float:
    """Turn widget input into a float; anything non-numeric becomes 0

    Lenient on purpose: thousands separators, a leading $ and a trailing %
    are stripped first, so "1,200" reads as 1200. Partial numbers such as
    "12abc" are rejected outright (0), not read up to the first bad character.
    """
    if isinstance(raw, bool):
        return float(raw)
    if isinstance(raw, str):
        raw = raw.strip().replace(',', '').lstrip('$').rstrip('%')
    try:
        val = float(raw)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(val) or math.isinf(val):
        return 0.0
    return val


def update_field(inputs: ROIInputs, name: str, raw) -> ROIInputs:
    """Return a copy of inputs with a single field edited"""
    known = {f.name for f in fields(ROIInputs)}
    if name not in known:
        raise AttributeError(f"ROIInputs has no field '{name}'")

    if name == 'use_lead_flow':
        return replace(inputs, use_lead_flow=bool(raw))
    val = coerce_number(raw)
    if name == 'arches_per_month':
        val = int(round(val))
    return replace(inputs, **{name: val})


def apply_preset(inputs: ROIInputs, name: str) -> ROIInputs:
    """Overwrite the preset's fields in one step, keeping the rest"""
    if name not in PRESETS:
        raise KeyError(f"Unknown preset '{name}'. Available: {', '.join(PRESETS)}")
    logger.debug("Applying preset %s", name)
    return replace(inputs, **PRESETS[name])


def inputs_from_preset(name: str) -> ROIInputs:
    return apply_preset(ROIInputs(), name)


def match_preset(inputs: ROIInputs) -> Optional[str]:
    """Name of the preset the inputs currently equal, if any"""
    for name, values in PRESETS.items():
        if all(getattr(inputs, k) == v for k, v in values.items()):
            return name
    return None


def negative_field_warnings(inputs: ROIInputs) -> Dict[str, str]:
    """Fields holding negative values; informational only, never blocks compute"""
    return {
        name: NEGATIVE_WARNING
        for name in ROIInputs.numeric_fields()
        if getattr(inputs, name) < 0
    }
