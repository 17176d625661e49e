"""Per-arch vs monthly views and the monthly volume what-if"""
from dataclasses import replace

import pandas as pd

from config.default_params import ARCHES_MIN, ARCHES_MAX
from .models import ROIInputs, ROIResults
from .compute import compute

VIEW_PER_ARCH = 'per-arch'
VIEW_MONTHLY = 'monthly'
VIEWS = (VIEW_PER_ARCH, VIEW_MONTHLY)


def view_multiplier(view: str, inputs: ROIInputs) -> float:
    """1 for the per-arch view, monthly volume for the monthly view"""
    if view == VIEW_PER_ARCH:
        return 1
    if view == VIEW_MONTHLY:
        return inputs.arches_per_month
    raise ValueError(f"Unknown view '{view}', expected one of {VIEWS}")


def monthly_footer(inputs: ROIInputs, res: ROIResults) -> dict:
    """Monthly aggregates shown in the page footer"""
    return {
        'gross_revenue': res.monthly_revenue,
        'clinical_costs': inputs.clinical_cost_per_arch * inputs.arches_per_month,
        'ad_investment': res.monthly_marketing_spend,
        'monthly_net': res.monthly_profit,
    }


def volume_projection(inputs: ROIInputs, min_arches: int = ARCHES_MIN,
                      max_arches: int = ARCHES_MAX) -> pd.DataFrame:
    """Monthly economics for each case volume in [min_arches, max_arches]

    Every other input is held at its current value; each row is a full
    recompute, not a rescale, so lead-derived figures stay consistent.
    """
    if min_arches > max_arches:
        raise ValueError(f"min_arches ({min_arches}) exceeds max_arches ({max_arches})")

    rows = []
    for arches in range(min_arches, max_arches + 1):
        res = compute(replace(inputs, arches_per_month=arches))
        rows.append({
            'Arches': arches,
            'Revenue': res.monthly_revenue,
            'Marketing Spend': res.monthly_marketing_spend,
            'Total Cost': res.total_cost_per_arch * arches,
            'Profit': res.monthly_profit,
            'Leads Required': res.leads_required,
        })
    return pd.DataFrame(rows)
