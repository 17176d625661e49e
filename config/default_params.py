"""Default parameters and practice presets for the ROI calculator."""

# Financing assumptions applied on first load (whole-number percentages)
DEFAULT_FINANCING_ASSUMPTIONS = {
    'usage_percent': 70,
    'financed_percent': 70,
    'fee_percent': 7,
}

DEFAULT_INPUTS = {
    # Treatment & clinical
    'average_fee': 24000,
    'lab_cost': 4500,
    'supplies_cost': 2000,
    # Provider & coordinator
    'provider_comp_percent': 0,
    'tc_commission_percent': 1,
    # Marketing & volume
    'marketing_cost_per_arch': 1500,
    'arches_per_month': 15,
    # Financing
    'financing_usage_percent': DEFAULT_FINANCING_ASSUMPTIONS['usage_percent'],
    'financing_amt_percent': DEFAULT_FINANCING_ASSUMPTIONS['financed_percent'],
    'financing_fee_percent': DEFAULT_FINANCING_ASSUMPTIONS['fee_percent'],
    # Lead flow
    'cost_per_lead': 150,
    'conversion_rate': 10,
    'use_lead_flow': False,
}

PRESETS = {
    'standard': {
        'average_fee': 28000,
        'lab_cost': 6000,
        'supplies_cost': 2000,
        'marketing_cost_per_arch': 2000,
        'arches_per_month': 8,
        'provider_comp_percent': 0,
        'tc_commission_percent': 1,
        'financing_usage_percent': 60,
        'financing_amt_percent': 80,
        'financing_fee_percent': 7,
    },
    'boutique': {
        'average_fee': 35000,
        'lab_cost': 8500,
        'supplies_cost': 2500,
        'marketing_cost_per_arch': 3500,
        'arches_per_month': 4,
        'provider_comp_percent': 0,
        'tc_commission_percent': 1.5,
        'financing_usage_percent': 40,
        'financing_amt_percent': 100,
        'financing_fee_percent': 6,
    },
    'high-volume': {
        'average_fee': 24000,
        'lab_cost': 4500,
        'supplies_cost': 2000,
        'marketing_cost_per_arch': 1500,
        'arches_per_month': 15,
        'provider_comp_percent': 0,
        'tc_commission_percent': 1,
        'financing_usage_percent': 70,
        'financing_amt_percent': 70,
        'financing_fee_percent': 8,
    },
}

# Monthly volume slider bounds
ARCHES_MIN = 1
ARCHES_MAX = 30

# Donut chart palette keyed by slice name
SLICE_COLORS = {
    'Lab': '#93c5fd',
    'Marketing': '#3b82f6',
    'Providers': '#60a5fa',
    'Fee/Comp': '#fde047',
    'Financing': '#e0f2fe',
    'Profit': '#1e293b',
}

DISCLAIMER = (
    "All calculations are projections based on user-provided inputs and industry "
    "benchmarks. These figures are for informational purposes only and do not "
    "constitute financial or professional accounting advice. Individual practice "
    "results may vary significantly based on overhead, location, and operational "
    "efficiency."
)
