"""Per-arch financial composition used by the donut chart and its legend"""
from dataclasses import replace
from typing import Iterable, List

from config.default_params import SLICE_COLORS
from .models import ROIInputs, ROIResults, CostSlice
from .metrics import percent_of_fee

SLICE_ORDER = ('Lab', 'Marketing', 'Providers', 'Fee/Comp', 'Financing', 'Profit')


def build_composition(inputs: ROIInputs, res: ROIResults,
                      hidden: Iterable[str] = ()) -> List[CostSlice]:
    """Split the treatment fee into named cost buckets plus profit.

    Percentages are always taken against the full fee, so hiding a series
    does not rescale the others. Profit is floored at zero here only; a loss
    still shows as a negative profit in the numeric cards.
    """
    values = {
        'Lab': inputs.clinical_cost_per_arch,
        'Marketing': res.marketing_cost_per_arch,
        'Providers': res.provider_comp,
        'Fee/Comp': res.tc_commission,
        'Financing': res.financing_fees,
        'Profit': max(0, res.profit_per_arch),
    }
    hidden = set(hidden)
    unknown = hidden.difference(SLICE_ORDER)
    if unknown:
        raise ValueError(f"Unknown series: {sorted(unknown)}")

    return [
        CostSlice(
            name=name,
            value=values[name],
            percentage=percent_of_fee(values[name], inputs.average_fee),
            color=SLICE_COLORS[name],
        )
        for name in SLICE_ORDER if name not in hidden
    ]


def scale_slices(slices: List[CostSlice], multiplier: float) -> List[CostSlice]:
    """Scale slice values (e.g. to monthly); percentages are unchanged"""
    return [replace(s, value=s.value * multiplier) for s in slices]
