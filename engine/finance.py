"""Financing fee and marketing cost derivations"""
from .models import FinancingAssumptions

# 0% conversion is treated as 1% so lead math stays finite
MIN_CONVERSION_FRACTION = 0.01


def financing_fees(average_fee: float, financing: FinancingAssumptions) -> float:
    """Lender fee per arch.

    The fee rate applies only to the financed share of the fee, and only for
    the share of patients who finance: usage x financed fraction x fee rate.
    """
    usage = financing.usage_percent / 100
    financed = financing.financed_percent / 100
    fee = financing.fee_percent / 100
    return average_fee * usage * financed * fee


def conversion_fraction(conversion_rate: float) -> float:
    """Lead conversion as a fraction, falling back to 1% when zero"""
    return (conversion_rate / 100) or MIN_CONVERSION_FRACTION


def lead_flow_cost_per_arch(cost_per_lead: float, conversion_rate: float) -> float:
    """Marketing cost to produce one started arch from paid leads"""
    return cost_per_lead / conversion_fraction(conversion_rate)


def effective_marketing_cost(inputs) -> float:
    """Marketing cost per arch under whichever model is active"""
    if inputs.use_lead_flow:
        return lead_flow_cost_per_arch(inputs.cost_per_lead, inputs.conversion_rate)
    return inputs.marketing_cost_per_arch


def leads_required(arches_per_month: float, conversion_rate: float) -> float:
    """Monthly leads needed to start the target number of arches"""
    return arches_per_month / conversion_fraction(conversion_rate)
