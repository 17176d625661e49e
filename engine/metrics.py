def fee_denominator(average_fee: float) -> float:
    """Average fee for use as a divisor; 0 becomes 1 to avoid NaN"""
    return average_fee or 1


def percent_of_fee(value: float, average_fee: float) -> float:
    """Value expressed as a percentage of the treatment fee"""
    return value / fee_denominator(average_fee) * 100


def return_on_marketing(profit_per_arch: float, marketing_cost: float) -> float:
    """Profit multiple on ad spend; 0 when nothing is spent"""
    return profit_per_arch / marketing_cost if marketing_cost > 0 else 0


def total_cost_percent(inputs, res) -> float:
    """All-in cost as % of production"""
    return percent_of_fee(res.total_cost_per_arch, inputs.average_fee)


def clinical_cost_percent(inputs) -> float:
    """Lab + supplies as % of production"""
    return percent_of_fee(inputs.clinical_cost_per_arch, inputs.average_fee)


def ad_spend_per_start(inputs, res) -> float:
    """Monthly ad spend divided across started arches"""
    return res.monthly_marketing_spend / (inputs.arches_per_month or 1)
