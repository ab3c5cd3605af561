import logging
from math import ceil, floor
from typing import Dict, List

from models import AmortizationEntry, MortgageResult

logger = logging.getLogger(__name__)


def calculate_monthly_payment(
    principal: float, annual_rate: float, years: float
) -> float:
    """
    Standard fixed-rate amortization payment:
      M = P * [ r(1+r)^n / ((1+r)^n - 1) ]
    where r = annual_rate/100/12 and n = years*12.

    Non-positive principal or term pays nothing; a zero (or negative) rate is
    repaid straight-line as P / n.
    """
    if principal <= 0 or years <= 0:
        return 0.0
    n = years * 12
    if annual_rate <= 0:
        return principal / n
    r = annual_rate / 100 / 12
    pow_ = (1 + r) ** n
    return principal * (r * pow_) / (pow_ - 1)


def _whole_months(years: float) -> int:
    # Tolerate float error such as 2.9999999 months
    return floor(years * 12 + 1e-9) if years > 0 else 0


def generate_amortization_schedule(
    principal: float, annual_rate: float, years: float
) -> List[AmortizationEntry]:
    """Month-by-month schedule; the final month is forced to a zero balance.

    A fractional term is amortized over floor(years * 12) whole payments so
    the principal column still repays the whole loan.
    """
    months = _whole_months(years)
    if principal <= 0:
        principal = 0.0
    payment = calculate_monthly_payment(principal, annual_rate, months / 12)
    r = annual_rate / 100 / 12 if annual_rate > 0 else 0.0

    schedule = []
    bal = principal
    for m in range(1, months + 1):
        interest = bal * r
        principal_paid = payment - interest
        bal -= principal_paid
        if m == months:
            bal = 0.0
        schedule.append(
            AmortizationEntry(
                year=ceil(m / 12),
                month=m,
                payment=payment,
                principal=principal_paid,
                interest=interest,
                balance=max(0.0, bal),
            )
        )
    return schedule


def calculate_mortgage(
    principal: float, annual_rate: float, years: float
) -> MortgageResult:
    if principal <= 0 or years <= 0:
        logger.warning(
            "Degenerate loan (principal=%s, years=%s); payments default to 0",
            principal,
            years,
        )
    payment = calculate_monthly_payment(
        principal, annual_rate, _whole_months(years) / 12
    )
    schedule = generate_amortization_schedule(principal, annual_rate, years)
    total_interest = sum(entry.interest for entry in schedule)
    logger.debug(
        "Amortized %.2f at %.3f%% over %s years: %d payments of %.2f",
        principal,
        annual_rate,
        years,
        len(schedule),
        payment,
    )
    return MortgageResult(
        monthly_payment=payment,
        total_interest=total_interest,
        total_principal=max(0.0, principal),
        amortization_schedule=schedule,
    )


def calculate_remaining_balance(
    principal: float, annual_rate: float, total_years: float, years_passed: float
) -> float:
    """Closed-form balance outstanding after a whole number of years."""
    if years_passed >= total_years:
        return 0.0
    if years_passed <= 0:
        return principal
    remaining = (total_years - years_passed) * 12
    payment = calculate_monthly_payment(principal, annual_rate, total_years)
    if annual_rate <= 0:
        return max(0.0, payment * remaining)
    r = annual_rate / 100 / 12
    pow_ = (1 + r) ** remaining
    bal = payment * (pow_ - 1) / (r * pow_)
    return max(0.0, bal)


def calculate_yearly_principal_interest(
    schedule: List[AmortizationEntry], year: int
) -> Dict[str, float]:
    principal = 0.0
    interest = 0.0
    for entry in schedule:
        if entry.year == year:
            principal += entry.principal
            interest += entry.interest
    return {"principal": principal, "interest": interest}
