import logging
from typing import List

from models import PropertyInputs, ReturnMetrics, YearlyData

logger = logging.getLogger(__name__)

NAN = float("nan")


def calculate_total_investment(inputs: PropertyInputs) -> float:
    """Cash basis reported alongside results.

    Existing properties fall back to current equity when no down payment is given.
    """
    if inputs.mode == "new":
        return inputs.down_payment + inputs.closing_costs
    return inputs.down_payment or (
        inputs.property_value - inputs.current_loan_balance
    )


def _metrics_investment(inputs: PropertyInputs) -> float:
    if inputs.mode == "new":
        return inputs.down_payment + inputs.closing_costs
    # Down payment stands in for the original cash basis
    return inputs.down_payment


def _ratio_pct(numerator: float, denominator: float) -> float:
    if denominator <= 0:
        return NAN
    return numerator / denominator * 100


def calculate_return_metrics(
    inputs: PropertyInputs, yearly_data: List[YearlyData]
) -> ReturnMetrics:
    """
    Year-1 cash-on-cash and cap rate, plus annualised total return (CAGR of
    final wealth over cash invested) and simple ROI.

    Ratios over a non-positive investment or property value are NaN, as is a
    CAGR over a negative wealth ratio; nothing here raises.
    """
    if not yearly_data:
        logger.warning("No projection years; returning zero metrics")
        return ReturnMetrics(
            cash_on_cash_return=0.0, cap_rate=0.0, total_return=0.0, roi=0.0
        )

    total_investment = _metrics_investment(inputs)
    if total_investment <= 0:
        logger.warning(
            "Non-positive total investment (%s); investment ratios are undefined",
            total_investment,
        )
    first = yearly_data[0]
    final_wealth = yearly_data[-1].total_wealth

    cash_on_cash = _ratio_pct(first.cash_flow, total_investment)
    cap_rate = _ratio_pct(first.noi, inputs.property_value)

    years = inputs.analysis_period
    if total_investment <= 0 or years <= 0:
        total_return = NAN
    else:
        multiple = final_wealth / total_investment
        total_return = (multiple ** (1 / years) - 1) * 100 if multiple >= 0 else NAN

    roi = _ratio_pct(final_wealth - total_investment, total_investment)

    return ReturnMetrics(
        cash_on_cash_return=cash_on_cash,
        cap_rate=cap_rate,
        total_return=total_return,
        roi=roi,
    )
