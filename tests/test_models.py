import pytest

from models import DEFAULT_INPUTS, PropertyInputs, RangeValue


def test_enabled_range_must_be_ordered():
    with pytest.raises(ValueError):
        RangeValue(enabled=True, base=3, min=4, max=5)
    with pytest.raises(ValueError):
        RangeValue(enabled=True, base=6, min=4, max=5)
    # Disabled ranges are not checked
    RangeValue(enabled=False, base=6, min=4, max=5)


def test_spread_brackets_value():
    rng = RangeValue.spread(3.0)
    assert rng.enabled
    assert rng.base == 3.0
    assert rng.min == pytest.approx(2.4)
    assert rng.max == pytest.approx(3.6)


def test_spread_clamps_to_limits():
    rng = RangeValue.spread(10.0, lower=0.0, upper=11.0)
    assert rng.min == pytest.approx(8.0)
    assert rng.max == 11.0


def test_disabled_collapses_range():
    rng = RangeValue.disabled(7.0)
    assert not rng.enabled
    assert rng.min == rng.base == rng.max == 7.0


@pytest.mark.parametrize(
    "name, value, expected",
    [
        ("min", 2.0, (2.0, 3.0, 5.0)),
        ("min", 4.0, (4.0, 4.0, 5.0)),
        ("min", 6.0, (6.0, 6.0, 6.0)),
        ("max", 4.0, (1.0, 3.0, 4.0)),
        ("max", 2.0, (1.0, 2.0, 2.0)),
        ("max", 0.5, (0.5, 0.5, 0.5)),
        ("base", 0.0, (0.0, 0.0, 5.0)),
        ("base", 8.0, (1.0, 8.0, 8.0)),
    ],
)
def test_update_keeps_min_base_max_order(name, value, expected):
    rng = RangeValue(enabled=True, base=3.0, min=1.0, max=5.0)
    updated = rng.update(name, value)
    assert (updated.min, updated.base, updated.max) == expected
    assert rng.base == 3.0


def test_update_rejects_unknown_bound():
    with pytest.raises(ValueError):
        RangeValue.disabled(1.0).update("mid", 2.0)


def test_default_inputs():
    assert DEFAULT_INPUTS.property_value == 400000
    assert DEFAULT_INPUTS.mode == "new"
    assert DEFAULT_INPUTS.loan_amount == 320000
    assert DEFAULT_INPUTS.active_loan_term == 30
    assert DEFAULT_INPUTS.appreciation_range is None


def test_existing_mode_loan_fields():
    inputs = PropertyInputs.from_defaults(mode="existing")
    assert inputs.loan_amount == inputs.current_loan_balance
    assert inputs.active_loan_term == inputs.remaining_term


@pytest.mark.parametrize(
    "field, value",
    [("mode", "refinance"), ("income_mode", "gross"), ("property_type", "Castle")],
)
def test_invalid_discriminants_rejected(field, value):
    with pytest.raises(ValueError):
        PropertyInputs.from_defaults(**{field: value})


def test_unknown_field_rejected():
    with pytest.raises(TypeError):
        PropertyInputs.from_defaults(price=1)


def test_update_down_payment_percent_sets_amount():
    updated = DEFAULT_INPUTS.update("down_payment_percent", 25)
    assert updated.down_payment == pytest.approx(100000)
    assert DEFAULT_INPUTS.down_payment == 80000


def test_update_down_payment_sets_percent():
    updated = DEFAULT_INPUTS.update("down_payment", 60000)
    assert updated.down_payment_percent == pytest.approx(15)


def test_update_down_payment_with_zero_value_property():
    inputs = DEFAULT_INPUTS.update("property_value", 0)
    assert inputs.update("down_payment", 1000).down_payment_percent == 0.0


def test_update_property_type_applies_defaults():
    updated = DEFAULT_INPUTS.update("property_type", "Fourplex")
    assert updated.property_type == "Fourplex"
    assert updated.maintenance_percent == 3.0
    assert updated.capex_percent == 2.5
    assert updated.vacancy_rate == 8.0
