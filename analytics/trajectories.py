# Import required modules
from dataclasses import asdict, fields
from typing import List

import pandas as pd

from models import (
    MortgageResult,
    OpportunityCostAnalysis,
    SensitivityAnalysis,
    YearlyData,
)


def yearly_dataframe(yearly_data: List[YearlyData]) -> pd.DataFrame:
    """One row per projection year, one column per YearlyData field, indexed by year."""
    columns = [f.name for f in fields(YearlyData)]
    df = pd.DataFrame([asdict(yd) for yd in yearly_data], columns=columns)
    return df.set_index("year")


def amortization_dataframe(mortgage: MortgageResult) -> pd.DataFrame:
    """
    Monthly schedule aggregated by loan year: interest and principal paid in
    the year and the balance left after its last payment.
    """
    columns = ["Year", "Interest", "Principal", "Ending Balance"]
    if not mortgage.amortization_schedule:
        return pd.DataFrame(columns=columns)

    monthly = pd.DataFrame([asdict(e) for e in mortgage.amortization_schedule])
    yearly = monthly.groupby("year").agg(
        Interest=("interest", "sum"),
        Principal=("principal", "sum"),
        **{"Ending Balance": ("balance", "last")},
    )
    return yearly.reset_index().rename(columns={"year": "Year"})[columns]


def wealth_trajectories(analysis: OpportunityCostAnalysis) -> pd.DataFrame:
    """Return DataFrame with years, hold wealth and sell-and-invest wealth.

    Hold wealth is the untaxed yearly total wealth; selling costs and gains tax
    only show up in the hold scenario's final figure, not along this path.
    """
    hold = analysis.hold_scenario.yearly_wealth
    sell = analysis.sell_scenario.yearly_wealth
    n = min(len(hold), len(sell))
    df = pd.DataFrame(
        {
            "Year": list(range(1, n + 1)),
            "Hold_Wealth": hold[:n],
            "Sell_Wealth": sell[:n],
        }
    )
    df["Difference"] = df["Hold_Wealth"] - df["Sell_Wealth"]
    return df


def sensitivity_bands(sensitivity: SensitivityAnalysis) -> pd.DataFrame:
    """Total wealth per year for the worst, base and best scenarios."""
    df = pd.DataFrame(
        {
            "Year": [yd.year for yd in sensitivity.base.yearly_data],
            "Worst": [yd.total_wealth for yd in sensitivity.worst.yearly_data],
            "Base": [yd.total_wealth for yd in sensitivity.base.yearly_data],
            "Best": [yd.total_wealth for yd in sensitivity.best.yearly_data],
        }
    )
    return df


# --- Operating expense breakdown for a single year (pie chart) ---


def expense_breakdown(year: YearlyData) -> pd.DataFrame:
    """Return DataFrame with categories and amounts, zero categories dropped."""
    data = {
        "Category": [
            "Property Tax",
            "Insurance",
            "HOA Fees",
            "Utilities",
            "Maintenance",
            "Management",
            "CapEx",
        ],
        "Amount": [
            year.property_tax,
            year.insurance,
            year.hoa_fees,
            year.utilities,
            year.maintenance,
            year.management,
            year.capex,
        ],
    }
    df = pd.DataFrame(data)
    return df[df["Amount"] != 0].reset_index(drop=True)
