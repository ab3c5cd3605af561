DEFAULT_VALUES = {
    # Property details
    "property_value": 400000.0,
    "property_type": "SFH",
    # Financing
    "mode": "new",
    "down_payment": 80000.0,
    "down_payment_percent": 20.0,  # percentage
    "interest_rate": 7.0,  # percentage
    "loan_term": 30,
    "closing_costs": 12000.0,
    # Existing property
    "current_loan_balance": 320000.0,
    "monthly_payment": 2400.0,
    "remaining_term": 28,
    "is_piti": False,
    # Income
    "income_mode": "detailed",
    "monthly_rent": 3200.0,
    "vacancy_rate": 5.0,  # percentage
    "other_income": 0.0,  # monthly
    "net_monthly_income": 2800.0,
    # Operating expenses
    "property_tax": 4800.0,  # annual
    "insurance": 1200.0,  # annual
    "hoa_fees": 0.0,  # monthly
    "utilities": 0.0,  # monthly
    "maintenance_percent": 1.5,  # percentage of rent
    "management_percent": 8.0,  # percentage of rent
    "capex_percent": 1.0,  # percentage of rent
    # Growth projections
    "analysis_period": 10,
    "appreciation_rate": 3.0,  # percentage
    "rent_growth_rate": 2.0,  # percentage
    "expense_growth_rate": 2.0,  # percentage
    # Tax & opportunity
    "tax_bracket": 24.0,  # percentage
    "depreciation_period": 27.5,
    "building_value_percent": 80.0,  # percentage
    "alternative_return": 7.0,  # percentage
    "selling_costs": 6.0,  # percentage of sale price
}

PROPERTY_DEFAULTS = {
    "SFH": {"maintenance": 1.5, "capex": 1.0, "vacancy": 5.0},
    "Duplex": {"maintenance": 2.0, "capex": 1.5, "vacancy": 7.0},
    "Triplex": {"maintenance": 2.5, "capex": 2.0, "vacancy": 8.0},
    "Fourplex": {"maintenance": 3.0, "capex": 2.5, "vacancy": 8.0},
}

# Blended long-term capital gains factor applied on top of the tax bracket
LONG_TERM_CAPITAL_GAINS_RATE = 0.15

# Default +/- spread when a sensitivity range is switched on
RANGE_SPREAD = 0.20

SCENARIO_LABELS = {
    "best": "Best Case",
    "base": "Base Case",
    "worst": "Worst Case",
}
