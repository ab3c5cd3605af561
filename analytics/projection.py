import logging
from typing import List

from models import MortgageResult, PropertyInputs, YearlyData
from finance.mortgage import calculate_yearly_principal_interest

logger = logging.getLogger(__name__)


def calculate_yearly_projections(
    inputs: PropertyInputs, mortgage: MortgageResult
) -> List[YearlyData]:
    """
    Walk the amortization schedule year by year and project income, expenses,
    cash flow, tax savings and wealth for years 1..analysis_period.

    Growth is compounded from year-1 baselines (exponent year - 1) for income
    and expenses; property value appreciates from day one (exponent year).
    Property tax and insurance are always tracked so PITI loans stay correct:
    under PITI they leave total_expenses but are still paid out of cash flow
    until the loan is paid off, and they stay deductible either way.
    """
    schedule = mortgage.amortization_schedule
    mortgage_term = inputs.active_loan_term
    rent_growth = 1 + inputs.rent_growth_rate / 100
    expense_growth = 1 + inputs.expense_growth_rate / 100
    depreciation = (
        inputs.property_value * (inputs.building_value_percent / 100)
    ) / inputs.depreciation_period

    rows = []
    cumulative_cash_flow = 0.0
    cumulative_tax_savings = 0.0
    for year in range(1, inputs.analysis_period + 1):
        g = year - 1

        property_value = inputs.property_value * (
            (1 + inputs.appreciation_rate / 100) ** year
        )

        # Balance at the last month booked to this year; 0 once paid off
        year_entries = [entry for entry in schedule if entry.year == year]
        loan_balance = year_entries[-1].balance if year_entries else 0.0
        equity = property_value - loan_balance

        split = calculate_yearly_principal_interest(schedule, year)
        principal_paid = split["principal"]
        interest_paid = split["interest"]

        paid_off = year > mortgage_term
        mortgage_payment = 0.0
        if not paid_off:
            if inputs.mode == "existing" and inputs.monthly_payment > 0:
                # Declared payment may already bundle taxes and insurance
                mortgage_payment = inputs.monthly_payment * 12
            else:
                mortgage_payment = principal_paid + interest_paid

        # Income
        if inputs.income_mode == "detailed":
            gross_rent = inputs.monthly_rent * 12 * rent_growth**g
            vacancy = gross_rent * (inputs.vacancy_rate / 100)
            other_income = inputs.other_income * 12 * rent_growth**g
            effective_income = gross_rent - vacancy + other_income
        else:
            gross_rent = 0.0
            vacancy = 0.0
            other_income = 0.0
            effective_income = inputs.net_monthly_income * 12 * rent_growth**g

        # Expenses
        property_tax = inputs.property_tax * expense_growth**g
        insurance = inputs.insurance * expense_growth**g
        utilities = inputs.utilities * 12 * expense_growth**g
        if inputs.income_mode == "detailed":
            hoa_fees = inputs.hoa_fees * 12 * expense_growth**g
            current_rent = inputs.monthly_rent * rent_growth**g
            maintenance = current_rent * 12 * (inputs.maintenance_percent / 100)
            management = current_rent * 12 * (inputs.management_percent / 100)
            capex = current_rent * 12 * (inputs.capex_percent / 100)
        else:
            # Net income already has these baked in
            hoa_fees = 0.0
            maintenance = 0.0
            management = 0.0
            capex = 0.0

        other_expenses = hoa_fees + utilities + maintenance + management + capex
        actual_expenses = property_tax + insurance + other_expenses
        total_expenses = other_expenses if inputs.is_piti else actual_expenses

        noi = effective_income - total_expenses

        cash_flow = noi - mortgage_payment
        if inputs.is_piti and not paid_off:
            cash_flow -= property_tax + insurance
        cumulative_cash_flow += cash_flow

        # Tax shield
        deductible_expenses = actual_expenses + interest_paid + depreciation
        taxable_income = effective_income - deductible_expenses
        tax_savings = (
            abs(taxable_income) * (inputs.tax_bracket / 100)
            if taxable_income < 0
            else 0.0
        )
        cumulative_tax_savings += tax_savings

        rows.append(
            YearlyData(
                year=year,
                property_value=property_value,
                loan_balance=loan_balance,
                equity=equity,
                gross_rent=gross_rent,
                vacancy=vacancy,
                other_income=other_income,
                effective_income=effective_income,
                property_tax=property_tax,
                insurance=insurance,
                hoa_fees=hoa_fees,
                utilities=utilities,
                maintenance=maintenance,
                management=management,
                capex=capex,
                total_expenses=total_expenses,
                mortgage_payment=mortgage_payment,
                principal_paid=principal_paid,
                interest_paid=interest_paid,
                noi=noi,
                cash_flow=cash_flow,
                cumulative_cash_flow=cumulative_cash_flow,
                depreciation_deduction=depreciation,
                deductible_expenses=deductible_expenses,
                taxable_income=taxable_income,
                tax_savings=tax_savings,
                cumulative_tax_savings=cumulative_tax_savings,
                equity_buildup=principal_paid,
                appreciation_gain=inputs.property_value
                * (inputs.appreciation_rate / 100)
                * year,
                total_wealth=equity + cumulative_cash_flow + cumulative_tax_savings,
            )
        )

    logger.debug(
        "Projected %d years (%s financing, %s income)",
        len(rows),
        inputs.mode,
        inputs.income_mode,
    )
    return rows
