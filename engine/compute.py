from .models import ROIInputs, ROIResults
from .finance import financing_fees, effective_marketing_cost, leads_required
from .metrics import percent_of_fee, return_on_marketing


def compute(inputs: ROIInputs) -> ROIResults:
    """
    Compute all per-arch and monthly profitability metrics from one input snapshot

    Pure and total: degenerate values (zero fee, zero conversion, no marketing
    spend) are guarded arithmetically and negative inputs are passed through
    unclamped.

    Args:
        inputs: Current practice economics
    """
    fee = inputs.average_fee
    volume = inputs.arches_per_month

    # Marketing cost per arch (flat or lead-flow)
    marketing = effective_marketing_cost(inputs)

    # Per-arch cost components
    provider_comp = fee * (inputs.provider_comp_percent / 100)
    tc_commission = fee * (inputs.tc_commission_percent / 100)
    fin_fees = financing_fees(fee, inputs.financing)

    costs_before_marketing = (
        inputs.lab_cost + inputs.supplies_cost +
        provider_comp + tc_commission + fin_fees
    )
    total_cost_per_arch = costs_before_marketing + marketing
    profit_per_arch = fee - total_cost_per_arch

    # Monthly aggregates
    monthly_marketing_spend = marketing * volume

    # Break-even: arches whose pre-marketing profit covers the monthly ad budget
    profit_before_marketing = fee - costs_before_marketing
    if profit_before_marketing > 0:
        break_even_arches = monthly_marketing_spend / profit_before_marketing
    else:
        break_even_arches = 0

    return ROIResults(
        provider_comp=provider_comp,
        tc_commission=tc_commission,
        financing_fees=fin_fees,
        total_cost_per_arch=total_cost_per_arch,
        profit_per_arch=profit_per_arch,
        profit_margin=percent_of_fee(profit_per_arch, fee),
        return_on_marketing=return_on_marketing(profit_per_arch, marketing),
        monthly_revenue=fee * volume,
        monthly_marketing_spend=monthly_marketing_spend,
        monthly_profit=profit_per_arch * volume,
        break_even_arches=break_even_arches,
        leads_required=leads_required(volume, inputs.conversion_rate),
        marketing_cost_per_arch=marketing,
        profit_before_marketing=profit_before_marketing,
    )
