import logging
from typing import Optional

from config import SCENARIO_LABELS
from models import (
    RANGE_FIELDS,
    PropertyInputs,
    ScenarioResult,
    SensitivityAnalysis,
    WhatIfComparison,
    WhatIfMetric,
)
from finance.mortgage import calculate_mortgage
from analytics.projection import calculate_yearly_projections
from analytics.returns import calculate_return_metrics

logger = logging.getLogger(__name__)

# Inputs where a lower value favours the investor: best takes the min
LOWER_IS_BETTER = {
    "interest_rate_range",
    "utilities_range",
    "expense_growth_range",
    "alternative_return_range",
}

# Ranges that only apply under one financing or income mode
MODE_CONDITIONS = {
    "interest_rate_range": ("mode", "new"),
    "monthly_rent_range": ("income_mode", "detailed"),
    "net_monthly_income_range": ("income_mode", "net"),
}


def has_sensitivity_ranges(inputs: PropertyInputs) -> bool:
    return any(
        rng is not None and rng.enabled
        for rng in (getattr(inputs, name) for name in RANGE_FIELDS)
    )


def _range_applies(inputs: PropertyInputs, name: str) -> bool:
    rng = getattr(inputs, name)
    if rng is None or not rng.enabled:
        return False
    if name in MODE_CONDITIONS:
        attr, wanted = MODE_CONDITIONS[name]
        return getattr(inputs, attr) == wanted
    return True


def create_scenario_inputs(inputs: PropertyInputs, scenario: str) -> PropertyInputs:
    """Swap each applicable ranged input for its best/base/worst value."""
    if scenario not in SCENARIO_LABELS:
        raise ValueError(f"unknown scenario: {scenario!r}")
    changes = {}
    for name, target in RANGE_FIELDS.items():
        if not _range_applies(inputs, name):
            continue
        rng = getattr(inputs, name)
        if scenario == "base":
            changes[target] = rng.base
        elif (scenario == "best") != (name in LOWER_IS_BETTER):
            changes[target] = rng.max
        else:
            changes[target] = rng.min
    return PropertyInputs(**{**inputs.__dict__, **changes})


def calculate_scenario(label: str, inputs: PropertyInputs) -> ScenarioResult:
    """Run one input set through mortgage -> projection -> returns."""
    mortgage = calculate_mortgage(
        inputs.loan_amount, inputs.interest_rate, inputs.active_loan_term
    )
    yearly_data = calculate_yearly_projections(inputs, mortgage)
    return_metrics = calculate_return_metrics(inputs, yearly_data)

    last_year = yearly_data[-1] if yearly_data else None
    return ScenarioResult(
        label=label,
        yearly_data=yearly_data,
        return_metrics=return_metrics,
        final_wealth=last_year.total_wealth if last_year else 0.0,
        total_cash_flow=last_year.cumulative_cash_flow if last_year else 0.0,
    )


def calculate_sensitivity(inputs: PropertyInputs) -> Optional[SensitivityAnalysis]:
    if not has_sensitivity_ranges(inputs):
        return None

    scenarios = {}
    for key, label in SCENARIO_LABELS.items():
        scenarios[key] = calculate_scenario(label, create_scenario_inputs(inputs, key))
        logger.debug("%s final wealth %.2f", label, scenarios[key].final_wealth)

    return SensitivityAnalysis(enabled=True, scenarios=scenarios)


def what_if(
    inputs: PropertyInputs,
    rent_delta: float = 0.0,
    appreciation_delta: float = 0.0,
    expense_delta: float = 0.0,
) -> WhatIfComparison:
    """
    Nudge rent (percent change), appreciation and expense growth (percentage
    points) and compare headline figures against the unadjusted inputs.
    Net monthly income moves with rent only in net income mode.
    """
    rent_factor = 1 + rent_delta / 100
    adjusted_inputs = PropertyInputs(
        **{
            **inputs.__dict__,
            "monthly_rent": inputs.monthly_rent * rent_factor,
            "net_monthly_income": (
                inputs.net_monthly_income * rent_factor
                if inputs.income_mode == "net"
                else inputs.net_monthly_income
            ),
            "appreciation_rate": inputs.appreciation_rate + appreciation_delta,
            "expense_growth_rate": inputs.expense_growth_rate + expense_delta,
        }
    )

    base = calculate_scenario("Base", inputs)
    adjusted = calculate_scenario("Adjusted", adjusted_inputs)

    def first(res, attr):
        return getattr(res.yearly_data[0], attr) if res.yearly_data else 0.0

    def last(res, attr):
        return getattr(res.yearly_data[-1], attr) if res.yearly_data else 0.0

    metrics = [
        WhatIfMetric(
            "Year 1 Monthly Cash Flow",
            first(base, "cash_flow") / 12,
            first(adjusted, "cash_flow") / 12,
        ),
        WhatIfMetric(
            "Cash-on-Cash Return",
            base.return_metrics.cash_on_cash_return,
            adjusted.return_metrics.cash_on_cash_return,
        ),
        WhatIfMetric(
            f"{inputs.analysis_period}-Year Total Wealth",
            last(base, "total_wealth"),
            last(adjusted, "total_wealth"),
        ),
        WhatIfMetric(
            f"{inputs.analysis_period}-Year Equity",
            last(base, "equity"),
            last(adjusted, "equity"),
        ),
    ]
    return WhatIfComparison(adjusted_inputs=adjusted_inputs, metrics=metrics)
