import argparse
import json
import logging
import math
from dataclasses import fields

import pandas as pd

from models import RANGE_FIELDS, PropertyInputs, RangeValue
from analytics.simulation import simulate
from analytics.trajectories import (
    sensitivity_bands,
    wealth_trajectories,
    yearly_dataframe,
)

logger = logging.getLogger(__name__)

SUMMARY_COLUMNS = [
    "property_value",
    "loan_balance",
    "equity",
    "noi",
    "cash_flow",
    "cumulative_cash_flow",
    "cumulative_tax_savings",
    "total_wealth",
]


def _coerce(name, kind, value):
    """Check one JSON value against a dataclass field type."""
    if kind is bool:
        if not isinstance(value, bool):
            raise ValueError(f"{name} must be true or false, got {value!r}")
        return value
    if kind is str:
        if not isinstance(value, str):
            raise ValueError(f"{name} must be a string, got {value!r}")
        return value
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{name} must be a number, got {value!r}")
    if kind is int:
        if isinstance(value, float) and not value.is_integer():
            raise ValueError(f"{name} must be a whole number, got {value!r}")
        return int(value)
    return float(value)


def _load_range(name, value):
    if value is None:
        return None
    if not isinstance(value, dict):
        raise ValueError(f"{name} must be an object with enabled/base/min/max")
    kinds = {f.name: f.type for f in fields(RangeValue)}
    unknown = set(value) - set(kinds)
    if unknown:
        raise ValueError(f"{name} has unknown keys: {', '.join(sorted(unknown))}")
    return RangeValue(
        **{key: _coerce(f"{name}.{key}", kinds[key], v) for key, v in value.items()}
    )


def load_inputs(path):
    """Default inputs overridden by the fields of a JSON object, ranges as dicts."""
    if path is None:
        return PropertyInputs.from_defaults()
    with open(path) as fh:
        overrides = json.load(fh)
    if not isinstance(overrides, dict):
        raise ValueError("inputs file must hold a JSON object")

    kinds = {f.name: f.type for f in fields(PropertyInputs)}
    unknown = set(overrides) - set(kinds)
    if unknown:
        raise ValueError(f"unknown input fields: {', '.join(sorted(unknown))}")
    for name, value in overrides.items():
        if name in RANGE_FIELDS:
            overrides[name] = _load_range(name, value)
        else:
            overrides[name] = _coerce(name, kinds[name], value)
    return PropertyInputs.from_defaults(**overrides)


def fmt_currency(value: float) -> str:
    return f"${value:,.0f}"


def fmt_percent(value: float) -> str:
    return "n/a" if math.isnan(value) or math.isinf(value) else f"{value:.1f}%"


def print_report(results) -> None:
    metrics = results.return_metrics
    opp = results.opportunity_cost
    print(f"Monthly payment:     {fmt_currency(results.mortgage.monthly_payment)}")
    print(f"Total interest:      {fmt_currency(results.mortgage.total_interest)}")
    print(f"Total investment:    {fmt_currency(results.total_investment)}")
    print(f"Cash-on-cash return: {fmt_percent(metrics.cash_on_cash_return)}")
    print(f"Cap rate:            {fmt_percent(metrics.cap_rate)}")
    print(f"Total return (ann.): {fmt_percent(metrics.total_return)}")
    print(f"ROI:                 {fmt_percent(metrics.roi)}")
    print()

    with pd.option_context("display.float_format", "{:,.0f}".format):
        print(yearly_dataframe(results.yearly_data)[SUMMARY_COLUMNS].to_string())
        print()
        print(wealth_trajectories(opp).to_string(index=False))
        if results.sensitivity is not None:
            print()
            print(sensitivity_bands(results.sensitivity).to_string(index=False))
    print()

    print(
        f"Recommendation: {opp.recommendation.upper()} "
        f"(difference {fmt_currency(opp.wealth_difference)})"
    )
    if opp.break_even_year:
        print(f"Holding overtakes selling in year {opp.break_even_year}.")


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(
        description="Project rental cash flow, wealth and hold-vs-sell outcomes."
    )
    parser.add_argument("--inputs", help="JSON file of input fields to override")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        inputs = load_inputs(args.inputs)
    except (OSError, ValueError, TypeError) as exc:
        parser.error(f"could not load inputs: {exc}")

    logger.info("Running %d-year projection", inputs.analysis_period)
    print_report(simulate(inputs))


if __name__ == "__main__":
    main()
