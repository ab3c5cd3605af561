import logging
from typing import List

from config import LONG_TERM_CAPITAL_GAINS_RATE
from models import OpportunityCostAnalysis, PropertyInputs, WealthProjection, YearlyData

logger = logging.getLogger(__name__)


def calculate_opportunity_cost(
    inputs: PropertyInputs, yearly_data: List[YearlyData]
) -> OpportunityCostAnalysis:
    """Hold the property vs sell today and invest the net proceeds.

    SELL: current equity less selling costs, compounded annually at the
    alternative return. Selling at today's value realises no gain.

    HOLD: year-by-year wealth is the projection's total wealth as-is. Only the
    final figure nets out selling costs and a blended capital gains tax
    (bracket x 15%) on appreciation, so break-even compares untaxed hold
    wealth against the sell path.
    """
    if inputs.mode == "new":
        current_equity = inputs.down_payment
    else:
        current_equity = inputs.property_value - inputs.current_loan_balance

    # SELL NOW
    selling_cost_amount = inputs.property_value * (inputs.selling_costs / 100)
    net_proceeds = current_equity - selling_cost_amount
    purchase_price = inputs.property_value
    capital_gains = 0.0
    tax_on_gains = capital_gains * (inputs.tax_bracket / 100)
    investment_proceeds = net_proceeds - tax_on_gains

    growth = 1 + inputs.alternative_return / 100
    sell_yearly_wealth = [
        investment_proceeds * growth**year
        for year in range(1, inputs.analysis_period + 1)
    ]
    sell_scenario = WealthProjection(
        yearly_wealth=sell_yearly_wealth,
        final_wealth=sell_yearly_wealth[-1] if sell_yearly_wealth else 0.0,
        total_cash_flow=0.0,
        capital_gains=capital_gains,
        tax_on_gains=tax_on_gains,
    )

    # HOLD
    hold_yearly_wealth = [yd.total_wealth for yd in yearly_data]
    if yearly_data:
        final = yearly_data[-1]
        final_equity = final.property_value - final.loan_balance
        hold_capital_gains = final.property_value - purchase_price
        hold_tax_on_gains = (
            hold_capital_gains
            * (inputs.tax_bracket / 100)
            * LONG_TERM_CAPITAL_GAINS_RATE
        )
        hold_selling_cost = final.property_value * (inputs.selling_costs / 100)
        hold_net_proceeds = final_equity - hold_selling_cost - hold_tax_on_gains
        hold_cash_flow = final.cumulative_cash_flow
        hold_final_wealth = hold_net_proceeds + hold_cash_flow
    else:
        logger.warning("No projection years; hold scenario defaults to 0")
        hold_capital_gains = hold_tax_on_gains = 0.0
        hold_cash_flow = hold_final_wealth = 0.0

    hold_scenario = WealthProjection(
        yearly_wealth=hold_yearly_wealth,
        final_wealth=hold_final_wealth,
        total_cash_flow=hold_cash_flow,
        capital_gains=hold_capital_gains,
        tax_on_gains=hold_tax_on_gains,
    )

    wealth_difference = hold_scenario.final_wealth - sell_scenario.final_wealth
    recommendation = "hold" if wealth_difference > 0 else "sell"

    break_even_year = None
    for year, (hold, sell) in enumerate(
        zip(hold_yearly_wealth, sell_yearly_wealth), start=1
    ):
        if hold > sell:
            break_even_year = year
            break

    logger.debug(
        "Hold vs sell: %s by %.2f (break-even year %s)",
        recommendation,
        wealth_difference,
        break_even_year,
    )
    return OpportunityCostAnalysis(
        hold_scenario=hold_scenario,
        sell_scenario=sell_scenario,
        recommendation=recommendation,
        wealth_difference=wealth_difference,
        break_even_year=break_even_year,
    )
