# Import required modules
import logging

from models import CalculationResults, PropertyInputs
from finance.mortgage import calculate_mortgage

# Import analytics functions
from analytics.projection import calculate_yearly_projections
from analytics.returns import calculate_return_metrics, calculate_total_investment
from analytics.opportunity import calculate_opportunity_cost
from analytics.sensitivity import calculate_sensitivity

logger = logging.getLogger(__name__)


def simulate(inputs: PropertyInputs) -> CalculationResults:
    """Pure computation of every result for one input set.

    Nothing is cached; callers re-run with the full inputs whenever any of
    them changes.
    """
    mortgage = calculate_mortgage(
        inputs.loan_amount, inputs.interest_rate, inputs.active_loan_term
    )
    yearly_data = calculate_yearly_projections(inputs, mortgage)
    return_metrics = calculate_return_metrics(inputs, yearly_data)
    opportunity_cost = calculate_opportunity_cost(inputs, yearly_data)
    sensitivity = calculate_sensitivity(inputs)

    logger.debug(
        "Simulated %d years; sensitivity %s",
        len(yearly_data),
        "on" if sensitivity else "off",
    )
    return CalculationResults(
        mortgage=mortgage,
        yearly_data=yearly_data,
        return_metrics=return_metrics,
        opportunity_cost=opportunity_cost,
        total_investment=calculate_total_investment(inputs),
        inputs=inputs,
        sensitivity=sensitivity,
    )
