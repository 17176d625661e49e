from dataclasses import dataclass, field, fields

from config.default_params import DEFAULT_INPUTS, DEFAULT_FINANCING_ASSUMPTIONS


@dataclass
class FinancingAssumptions:
    # whole-number percentages, e.g. 7 means 7%
    usage_percent: float = DEFAULT_FINANCING_ASSUMPTIONS['usage_percent']
    financed_percent: float = DEFAULT_FINANCING_ASSUMPTIONS['financed_percent']
    fee_percent: float = DEFAULT_FINANCING_ASSUMPTIONS['fee_percent']


@dataclass
class ROIInputs:
    """Practice economics snapshot fed to the engine.

    Percent fields hold whole numbers (7 == 7%) and are only divided by 100
    inside the engine.
    """
    average_fee: float = DEFAULT_INPUTS['average_fee']
    lab_cost: float = DEFAULT_INPUTS['lab_cost']
    supplies_cost: float = DEFAULT_INPUTS['supplies_cost']
    provider_comp_percent: float = DEFAULT_INPUTS['provider_comp_percent']
    tc_commission_percent: float = DEFAULT_INPUTS['tc_commission_percent']
    marketing_cost_per_arch: float = DEFAULT_INPUTS['marketing_cost_per_arch']
    arches_per_month: int = DEFAULT_INPUTS['arches_per_month']
    financing_usage_percent: float = DEFAULT_INPUTS['financing_usage_percent']
    financing_amt_percent: float = DEFAULT_INPUTS['financing_amt_percent']
    financing_fee_percent: float = DEFAULT_INPUTS['financing_fee_percent']
    # Lead flow model
    cost_per_lead: float = DEFAULT_INPUTS['cost_per_lead']
    conversion_rate: float = DEFAULT_INPUTS['conversion_rate']
    use_lead_flow: bool = DEFAULT_INPUTS['use_lead_flow']

    @property
    def financing(self) -> FinancingAssumptions:
        return FinancingAssumptions(
            usage_percent=self.financing_usage_percent,
            financed_percent=self.financing_amt_percent,
            fee_percent=self.financing_fee_percent,
        )

    @property
    def clinical_cost_per_arch(self) -> float:
        """Lab fees plus implants & surgical supplies"""
        return self.lab_cost + self.supplies_cost

    @classmethod
    def numeric_fields(cls):
        return [f.name for f in fields(cls) if f.name != 'use_lead_flow']


@dataclass
class ROIResults:
    provider_comp: float
    tc_commission: float
    financing_fees: float
    total_cost_per_arch: float
    profit_per_arch: float
    profit_margin: float          # percent
    return_on_marketing: float    # "x" multiplier
    monthly_revenue: float
    monthly_marketing_spend: float
    monthly_profit: float
    break_even_arches: float
    leads_required: float
    # effective marketing cost per arch (flat or lead-flow derived)
    marketing_cost_per_arch: float = 0.0
    profit_before_marketing: float = 0.0


@dataclass
class CostSlice:
    name: str
    value: float
    percentage: float
    color: str = field(default='#94a3b8')
