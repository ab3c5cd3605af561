from dataclasses import dataclass, field
from typing import Dict, List, Optional

from config import DEFAULT_VALUES, PROPERTY_DEFAULTS, RANGE_SPREAD

MODES = ("new", "existing")
INCOME_MODES = ("detailed", "net")

# Range field -> scalar input it overrides in sensitivity runs
RANGE_FIELDS = {
    "interest_rate_range": "interest_rate",
    "monthly_rent_range": "monthly_rent",
    "net_monthly_income_range": "net_monthly_income",
    "utilities_range": "utilities",
    "appreciation_range": "appreciation_rate",
    "rent_growth_range": "rent_growth_rate",
    "expense_growth_range": "expense_growth_rate",
    "alternative_return_range": "alternative_return",
}


@dataclass(frozen=True)
class RangeValue:
    enabled: bool
    base: float
    min: float
    max: float

    def __post_init__(self):
        if self.enabled and not (self.min <= self.base <= self.max):
            raise ValueError(
                f"range must satisfy min <= base <= max, got "
                f"min={self.min}, base={self.base}, max={self.max}"
            )

    @classmethod
    def spread(
        cls,
        value: float,
        lower: float = float("-inf"),
        upper: float = float("inf"),
    ) -> "RangeValue":
        """Enabled range of +/- RANGE_SPREAD around value, clamped to [lower, upper]."""
        delta = value * RANGE_SPREAD
        lo = max(lower, value - delta)
        hi = min(upper, value + delta)
        # A negative value flips the spread; keep the bounds ordered.
        lo, hi = min(lo, hi), max(lo, hi)
        return cls(enabled=True, base=min(max(value, lo), hi), min=lo, max=hi)

    @classmethod
    def disabled(cls, value: float) -> "RangeValue":
        return cls(enabled=False, base=value, min=value, max=value)

    def update(self, name: str, value: float) -> "RangeValue":
        """Return a copy with one bound changed, pulling the others along."""
        lo, base, hi = self.min, self.base, self.max
        if name == "min":
            lo = value
            base = max(value, min(self.base, self.max))
            hi = max(hi, base)
        elif name == "max":
            hi = value
            base = min(value, max(self.base, self.min))
            lo = min(lo, base)
        elif name == "base":
            base = value
            lo = min(lo, value)
            hi = max(hi, value)
        else:
            raise ValueError(f"unknown range field: {name!r}")
        return RangeValue(enabled=self.enabled, base=base, min=lo, max=hi)


@dataclass
class PropertyInputs:
    # Property details
    property_value: float
    property_type: str  # 'SFH', 'Duplex', 'Triplex' or 'Fourplex'

    # Financing
    mode: str  # 'new' or 'existing'
    down_payment: float
    down_payment_percent: float
    interest_rate: float
    loan_term: int
    closing_costs: float

    # Existing property
    current_loan_balance: float
    monthly_payment: float
    remaining_term: int
    is_piti: bool

    # Income
    income_mode: str  # 'detailed' or 'net'
    monthly_rent: float
    vacancy_rate: float
    other_income: float
    net_monthly_income: float

    # Operating expenses
    property_tax: float
    insurance: float
    hoa_fees: float
    utilities: float
    maintenance_percent: float
    management_percent: float
    capex_percent: float

    # Growth projections
    analysis_period: int
    appreciation_rate: float
    rent_growth_rate: float
    expense_growth_rate: float

    # Tax & opportunity
    tax_bracket: float
    depreciation_period: float
    building_value_percent: float
    alternative_return: float
    selling_costs: float

    # Sensitivity ranges
    interest_rate_range: Optional[RangeValue] = None
    monthly_rent_range: Optional[RangeValue] = None
    net_monthly_income_range: Optional[RangeValue] = None
    utilities_range: Optional[RangeValue] = None
    appreciation_range: Optional[RangeValue] = None
    rent_growth_range: Optional[RangeValue] = None
    expense_growth_range: Optional[RangeValue] = None
    alternative_return_range: Optional[RangeValue] = None

    def __post_init__(self):
        if self.mode not in MODES:
            raise ValueError(f"mode must be one of {MODES}, got {self.mode!r}")
        if self.income_mode not in INCOME_MODES:
            raise ValueError(
                f"income_mode must be one of {INCOME_MODES}, got {self.income_mode!r}"
            )
        if self.property_type not in PROPERTY_DEFAULTS:
            raise ValueError(f"unknown property type: {self.property_type!r}")

    @classmethod
    def from_defaults(cls, **overrides) -> "PropertyInputs":
        return cls(**{**DEFAULT_VALUES, **overrides})

    @property
    def loan_amount(self) -> float:
        """Principal financed: price less deposit, or the balance still owed."""
        if self.mode == "new":
            return self.property_value - self.down_payment
        return self.current_loan_balance

    @property
    def active_loan_term(self) -> int:
        return self.loan_term if self.mode == "new" else self.remaining_term

    def update(self, key: str, value) -> "PropertyInputs":
        """Set one field, keeping linked fields in step the way the input form does."""
        changes = {key: value}
        if key == "down_payment_percent":
            changes["down_payment"] = self.property_value * (value / 100)
        elif key == "down_payment":
            changes["down_payment_percent"] = (
                (value / self.property_value) * 100 if self.property_value else 0.0
            )
        elif key == "property_type":
            if value not in PROPERTY_DEFAULTS:
                raise ValueError(f"unknown property type: {value!r}")
            defaults = PROPERTY_DEFAULTS[value]
            changes["maintenance_percent"] = defaults["maintenance"]
            changes["capex_percent"] = defaults["capex"]
            changes["vacancy_rate"] = defaults["vacancy"]
        return PropertyInputs(**{**self.__dict__, **changes})


DEFAULT_INPUTS = PropertyInputs.from_defaults()


@dataclass
class AmortizationEntry:
    year: int
    month: int
    payment: float
    principal: float
    interest: float
    balance: float


@dataclass
class MortgageResult:
    monthly_payment: float
    total_interest: float
    total_principal: float
    amortization_schedule: List[AmortizationEntry] = field(default_factory=list)


@dataclass
class YearlyData:
    year: int

    # Property value and loan
    property_value: float
    loan_balance: float
    equity: float

    # Income
    gross_rent: float
    vacancy: float
    other_income: float
    effective_income: float

    # Expenses
    property_tax: float
    insurance: float
    hoa_fees: float
    utilities: float
    maintenance: float
    management: float
    capex: float
    total_expenses: float

    # Mortgage
    mortgage_payment: float
    principal_paid: float
    interest_paid: float

    # Cash flow
    noi: float
    cash_flow: float
    cumulative_cash_flow: float

    # Tax
    depreciation_deduction: float
    deductible_expenses: float
    taxable_income: float
    tax_savings: float
    cumulative_tax_savings: float

    # Wealth
    equity_buildup: float
    appreciation_gain: float
    total_wealth: float


@dataclass
class ReturnMetrics:
    cash_on_cash_return: float
    cap_rate: float
    total_return: float
    roi: float


@dataclass
class WealthProjection:
    yearly_wealth: List[float]
    final_wealth: float
    total_cash_flow: float
    capital_gains: float
    tax_on_gains: float


@dataclass
class OpportunityCostAnalysis:
    hold_scenario: WealthProjection
    sell_scenario: WealthProjection
    recommendation: str  # 'hold' or 'sell'
    wealth_difference: float
    break_even_year: Optional[int] = None


@dataclass
class ScenarioResult:
    label: str
    yearly_data: List[YearlyData]
    return_metrics: ReturnMetrics
    final_wealth: float
    total_cash_flow: float


@dataclass
class SensitivityAnalysis:
    enabled: bool
    scenarios: Dict[str, ScenarioResult]

    @property
    def best(self) -> ScenarioResult:
        return self.scenarios["best"]

    @property
    def base(self) -> ScenarioResult:
        return self.scenarios["base"]

    @property
    def worst(self) -> ScenarioResult:
        return self.scenarios["worst"]


@dataclass
class WhatIfMetric:
    label: str
    base: float
    adjusted: float

    @property
    def change(self) -> float:
        return self.adjusted - self.base


@dataclass
class WhatIfComparison:
    adjusted_inputs: PropertyInputs
    metrics: List[WhatIfMetric]


@dataclass
class CalculationResults:
    mortgage: MortgageResult
    yearly_data: List[YearlyData]
    return_metrics: ReturnMetrics
    opportunity_cost: OpportunityCostAnalysis
    total_investment: float
    inputs: PropertyInputs
    sensitivity: Optional[SensitivityAnalysis] = None
