"""Boundary validation for the calculator forms."""

import pytest
from werkzeug.datastructures import MultiDict

from allwayscalc.blueprints.calculators import forms
from allwayscalc.blueprints.converters.forms import ConversionRequestForm, ConverterForm


def _bind(form_cls, **data):
    return form_cls(formdata=MultiDict(data), meta={"csrf": False})


@pytest.fixture
def request_ctx(app):
    with app.test_request_context():
        yield


def test_fuel_form_enforces_minimums(request_ctx):
    form = _bind(forms.FuelCostForm, distance="0.5", efficiency="0", fuel_price="100")
    assert not form.validate()
    assert form.errors["distance"] == ["Distance must be positive."]
    assert form.errors["efficiency"] == ["Fuel efficiency must be positive."]
    assert "fuel_price" not in form.errors


def test_fuel_form_rejects_missing_and_non_numeric(request_ctx):
    form = _bind(forms.FuelCostForm, distance="", efficiency="fast")
    assert not form.validate()
    assert set(form.errors) == {"distance", "efficiency", "fuel_price"}


@pytest.mark.parametrize("value", ["inf", "-inf", "nan"])
def test_number_fields_reject_non_finite_values(request_ctx, value):
    form = _bind(forms.FuelCostForm, distance=value, efficiency="15", fuel_price="100")
    assert not form.validate()
    assert "distance" in form.errors


def test_modulo_form_rejects_zero_divisor(request_ctx):
    form = _bind(forms.ModuloForm, dividend="10", divisor="0")
    assert not form.validate()
    assert form.errors == {"divisor": ["Divisor cannot be zero."]}


def test_love_form_requires_both_names(request_ctx):
    form = _bind(forms.LoveCompatibilityForm, name1="Romeo", name2="   ")
    assert not form.validate()
    assert form.errors == {"name2": ["Please enter the second name."]}


def test_date_forms_require_a_real_date(request_ctx):
    form = _bind(forms.LuckyNumberForm, birth_date="1990-02-30")
    assert not form.validate()
    assert "birth_date" in form.errors

    form = _bind(forms.LuckyNumberForm, birth_date="1990-05-15")
    assert form.validate()


def test_tip_form_requires_whole_people(request_ctx):
    form = _bind(forms.TipForm, bill="1000", tip_percentage="15", people="0")
    assert not form.validate()
    assert form.errors["people"] == ["Must be at least one person"]

    form = _bind(forms.TipForm, bill="1000", tip_percentage="101", people="2")
    assert not form.validate()
    assert "tip_percentage" in form.errors


def test_lcm_form_parses_numbers(request_ctx):
    form = _bind(forms.LcmHcfForm, numbers="12, 15, 75")
    assert form.validate()
    assert form.parsed_numbers == (12, 15, 75)

    form = _bind(forms.LcmHcfForm, numbers="12")
    assert not form.validate()
    assert "numbers" in form.errors


def test_speed_form_requires_the_two_known_values(request_ctx):
    form = _bind(forms.SpeedDistanceTimeForm, solve_for="speed", distance="120", time="")
    assert not form.validate()
    assert form.errors == {"time": ["Time (hours) is required to solve for speed."]}


def test_speed_form_rejects_zero_divisor(request_ctx):
    form = _bind(forms.SpeedDistanceTimeForm, solve_for="time", distance="120", speed="0")
    assert not form.validate()
    assert form.errors == {"speed": ["Speed (km/h) cannot be zero."]}


def test_speed_form_accepts_complete_input(request_ctx):
    form = _bind(forms.SpeedDistanceTimeForm, solve_for="distance", speed="60", time="2", distance="")
    assert form.validate()


def test_bmi_form_requires_fields_for_selected_system(request_ctx):
    form = _bind(forms.BmiForm, unit_system="imperial", height_cm="170", weight_kg="65")
    assert not form.validate()
    assert form.errors == {"unit_system": ["Please fill in the required fields for the selected unit system."]}

    form = _bind(forms.BmiForm, unit_system="metric", height_cm="170", weight_kg="65")
    assert form.validate()


def test_algebra_form_limits_problem_length(app, request_ctx):
    app.config["ALGEBRA_MAX_PROBLEM_LENGTH"] = 10
    form = _bind(forms.AlgebraForm, problem="x" * 11)
    assert not form.validate()
    assert form.errors == {"problem": ["Problem must be at most 10 characters."]}


def test_algebra_form_rejects_blank_problem(request_ctx):
    form = _bind(forms.AlgebraForm, problem="   ")
    assert not form.validate()
    assert form.errors == {"problem": ["Please enter a math problem."]}


def test_converter_form_checks_units_against_quantity(request_ctx):
    form = ConverterForm.for_quantity(
        "mass",
        formdata=MultiDict({"from_value": "1", "from_unit": "kilogram", "to_unit": "meter", "changed": "from_value"}),
        meta={"csrf": False},
    )
    assert not form.validate()
    assert "to_unit" in form.errors


def test_converter_form_rejects_unknown_changed_field(request_ctx):
    form = ConverterForm.for_quantity(
        "length",
        formdata=MultiDict({"from_unit": "meter", "to_unit": "foot", "changed": "pixels"}),
        meta={"csrf": False},
    )
    assert not form.validate()
    assert "changed" in form.errors


def test_conversion_request_requires_numeric_value(request_ctx):
    form = ConversionRequestForm.for_quantity(
        "temperature",
        formdata=MultiDict({"value": "warm", "from_unit": "celsius", "to_unit": "kelvin"}),
        meta={"csrf": False},
    )
    assert not form.validate()
    assert list(form.errors) == ["value"]


def test_loan_form_bounds(request_ctx):
    form = _bind(forms.LoanForm, loan_amount="0", interest_rate="120", loan_term="60")
    assert not form.validate()
    assert form.errors == {
        "loan_amount": ["Loan amount must be positive"],
        "interest_rate": ["Interest rate must be between 0 and 100"],
        "loan_term": ["Loan term must be between 1 and 50 years"],
    }


def test_loan_form_requires_whole_years(request_ctx):
    form = _bind(forms.LoanForm, loan_amount="500000", interest_rate="8.5", loan_term="2.5")
    assert not form.validate()
    assert "loan_term" in form.errors


def test_finance_amounts_are_capped(request_ctx):
    form = _bind(forms.SipForm, monthly_investment="1e300", rate="12", years="10")
    assert not form.validate()
    assert form.errors == {"monthly_investment": ["Amount is too large."]}


def test_compound_interest_form_limits_frequency(request_ctx):
    form = _bind(forms.CompoundInterestForm, principal="10000", rate="7", years="10", compounds_per_year="0")
    assert not form.validate()
    assert form.errors == {"compounds_per_year": ["Compounding must be between annually and daily."]}


def test_gst_form_rejects_unknown_mode(request_ctx):
    form = _bind(forms.GstForm, amount="1000", gst_rate="18", calculation_type="double")
    assert not form.validate()
    assert "calculation_type" in form.errors
