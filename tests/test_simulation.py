import json

import pytest

import app
from models import DEFAULT_INPUTS, PropertyInputs, RangeValue
from analytics.simulation import simulate
from analytics.trajectories import (
    amortization_dataframe,
    expense_breakdown,
    sensitivity_bands,
    wealth_trajectories,
    yearly_dataframe,
)


def test_simulate_defaults():
    results = simulate(DEFAULT_INPUTS)
    assert results.inputs is DEFAULT_INPUTS
    assert results.total_investment == 92000
    assert results.mortgage.monthly_payment == pytest.approx(2128.97, abs=0.01)
    assert len(results.yearly_data) == 10
    assert results.yearly_data[9].year == 10
    assert results.sensitivity is None


def test_simulate_with_ranges_includes_sensitivity():
    inputs = PropertyInputs.from_defaults(
        appreciation_range=RangeValue(enabled=True, base=3, min=1, max=5)
    )
    results = simulate(inputs)
    assert results.sensitivity is not None
    assert results.sensitivity.base.final_wealth == pytest.approx(
        results.yearly_data[-1].total_wealth
    )


def test_yearly_dataframe():
    df = yearly_dataframe(simulate(DEFAULT_INPUTS).yearly_data)
    assert list(df.index) == list(range(1, 11))
    assert "total_wealth" in df.columns
    assert "year" not in df.columns


def test_yearly_dataframe_empty():
    df = yearly_dataframe([])
    assert df.empty
    assert "cash_flow" in df.columns


def test_amortization_dataframe():
    df = amortization_dataframe(simulate(DEFAULT_INPUTS).mortgage)
    assert len(df) == 30
    assert list(df.columns) == ["Year", "Interest", "Principal", "Ending Balance"]
    assert df["Principal"].sum() == pytest.approx(320000)
    assert df["Ending Balance"].iloc[-1] == 0
    assert df["Year"].tolist() == list(range(1, 31))


def test_wealth_trajectories():
    analysis = simulate(DEFAULT_INPUTS).opportunity_cost
    df = wealth_trajectories(analysis)
    assert len(df) == 10
    assert df["Hold_Wealth"].tolist() == analysis.hold_scenario.yearly_wealth
    assert df["Difference"].iloc[0] == pytest.approx(
        analysis.hold_scenario.yearly_wealth[0]
        - analysis.sell_scenario.yearly_wealth[0]
    )


def test_sensitivity_bands():
    inputs = PropertyInputs.from_defaults(
        appreciation_range=RangeValue(enabled=True, base=3, min=1, max=5)
    )
    df = sensitivity_bands(simulate(inputs).sensitivity)
    assert list(df.columns) == ["Year", "Worst", "Base", "Best"]
    assert (df["Worst"] <= df["Base"]).all()
    assert (df["Base"] <= df["Best"]).all()


def test_expense_breakdown_drops_zero_categories():
    df = expense_breakdown(simulate(DEFAULT_INPUTS).yearly_data[0])
    assert df["Category"].tolist() == [
        "Property Tax",
        "Insurance",
        "Maintenance",
        "Management",
        "CapEx",
    ]
    assert df["Amount"].iloc[0] == pytest.approx(4800)


def test_load_inputs_defaults():
    assert app.load_inputs(None) == DEFAULT_INPUTS


def test_load_inputs_from_json(tmp_path):
    path = tmp_path / "inputs.json"
    path.write_text(
        json.dumps(
            {
                "analysis_period": 5,
                "appreciation_range": {"enabled": True, "base": 3, "min": 1, "max": 5},
            }
        )
    )
    inputs = app.load_inputs(str(path))
    assert inputs.analysis_period == 5
    assert inputs.appreciation_range == RangeValue(enabled=True, base=3, min=1, max=5)


def test_main_prints_report(tmp_path, capsys):
    path = tmp_path / "inputs.json"
    path.write_text(json.dumps({"analysis_period": 3}))
    app.main(["--inputs", str(path)])
    out = capsys.readouterr().out
    assert "Monthly payment:     $2,129" in out
    assert "Recommendation: HOLD" in out


def test_main_rejects_bad_inputs(tmp_path):
    path = tmp_path / "inputs.json"
    path.write_text(json.dumps({"mode": "lease"}))
    with pytest.raises(SystemExit) as exc:
        app.main(["--inputs", str(path)])
    assert exc.value.code == 2


@pytest.mark.parametrize(
    "overrides",
    [
        {"analysis_period": 10.5},
        {"monthly_rent": "3200"},
        {"is_piti": "yes"},
        {"mode": 1},
        {"loan_term": True},
        {"price": 400000},
        {"appreciation_range": [1, 3, 5]},
        {"appreciation_range": {"enabled": True, "base": "3", "min": 1, "max": 5}},
        {"appreciation_range": {"enabled": True, "base": 3}},
    ],
)
def test_main_rejects_mistyped_inputs(tmp_path, overrides):
    path = tmp_path / "inputs.json"
    path.write_text(json.dumps(overrides))
    with pytest.raises(SystemExit) as exc:
        app.main(["--inputs", str(path)])
    assert exc.value.code == 2


def test_load_inputs_normalises_numbers(tmp_path):
    path = tmp_path / "inputs.json"
    path.write_text(
        json.dumps({"analysis_period": 5.0, "monthly_rent": 3000, "is_piti": True})
    )
    inputs = app.load_inputs(str(path))
    assert inputs.analysis_period == 5
    assert isinstance(inputs.analysis_period, int)
    assert isinstance(inputs.monthly_rent, float)
    assert inputs.is_piti is True
    assert len(simulate(inputs).yearly_data) == 5
