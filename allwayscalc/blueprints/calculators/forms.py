"""Flask-WTF forms for the standalone calculators.

Every numeric bound and message mirrors what the public pages have always
enforced. A form that validates is safe to hand to the matching formula in
``allwayscalc.services.calculators``.
"""

from __future__ import annotations

from flask import current_app
from flask_wtf import FlaskForm
from wtforms import DateField, IntegerField, SelectField, StringField, TextAreaField
from wtforms.validators import DataRequired, InputRequired, Length, NumberRange, Optional, ValidationError

from ...services.calculators import parse_integer_list
from ...services.calculators.finance import GST_ADD, GST_PRESET_RATES, GST_REMOVE
from ...services.calculators.health import IMPERIAL, METRIC
from ...utils.form_fields import FiniteFloatField

DEFAULT_ALGEBRA_PROBLEM = "Solve for x: 2x + 10 = 40"


def _number(label, message="Please enter a number.", **kwargs):
    validators = [InputRequired(message=message)] + list(kwargs.pop("validators", []))
    return FiniteFloatField(label, validators=validators, **kwargs)


def _birth_date(label="Date of Birth"):
    return DateField(
        label,
        format="%Y-%m-%d",
        validators=[InputRequired(message="Please enter a valid date.")],
    )


class FuelCostForm(FlaskForm):
    distance = _number(
        "Total Distance (km)",
        default=400,
        validators=[NumberRange(min=1, message="Distance must be positive.")],
    )
    efficiency = _number(
        "Vehicle Mileage (km/L)",
        default=15,
        validators=[NumberRange(min=0.1, message="Fuel efficiency must be positive.")],
    )
    fuel_price = _number(
        "Fuel Price (per Liter)",
        default=100,
        validators=[NumberRange(min=0.1, message="Fuel price must be positive.")],
    )


class ModuloForm(FlaskForm):
    dividend = _number("Dividend")
    divisor = _number("Divisor")

    def validate_divisor(self, field):
        if field.data == 0:
            raise ValidationError("Divisor cannot be zero.")


class LuckyNumberForm(FlaskForm):
    birth_date = _birth_date()


class LoveCompatibilityForm(FlaskForm):
    name1 = StringField("Your Name", validators=[DataRequired(message="Please enter the first name."), Length(max=100)])
    name2 = StringField("Partner's Name", validators=[DataRequired(message="Please enter the second name."), Length(max=100)])


class TipForm(FlaskForm):
    bill = _number(
        "Bill Amount (₹)",
        validators=[NumberRange(min=0, message="Bill amount must be positive")],
    )
    tip_percentage = _number(
        "Tip Percentage (%)",
        default=15,
        validators=[NumberRange(min=0, max=100, message="Tip percentage must be between 0 and 100")],
    )
    people = IntegerField(
        "Number of People",
        default=1,
        validators=[
            InputRequired(message="Please enter the number of people."),
            NumberRange(min=1, message="Must be at least one person"),
        ],
    )


class SimpleInterestForm(FlaskForm):
    principal = _number(
        "Principal Amount (₹)",
        default=10000,
        validators=[NumberRange(min=0, message="Principal must be a positive number.")],
    )
    rate = _number(
        "Annual Interest Rate (%)",
        default=5,
        validators=[NumberRange(min=0, message="Interest rate must be a positive number.")],
    )
    years = _number(
        "Time Period (Years)",
        default=5,
        validators=[NumberRange(min=0, message="Term must be a positive number.")],
    )


class DiscountForm(FlaskForm):
    original_price = _number(
        "Original Price (₹)",
        validators=[NumberRange(min=0, message="Original price must be positive")],
    )
    discount = _number(
        "Discount (%)",
        default=10,
        validators=[NumberRange(min=0, max=100, message="Discount must be between 0 and 100%")],
    )


MAX_AMOUNT = 1e15


def _amount(label, minimum, message, **kwargs):
    return _number(
        label,
        validators=[
            NumberRange(min=minimum, message=message),
            NumberRange(max=MAX_AMOUNT, message="Amount is too large."),
        ],
        **kwargs,
    )


def _whole_years(label, maximum, message, **kwargs):
    return IntegerField(
        label,
        validators=[
            InputRequired(message="Please enter a whole number of years."),
            NumberRange(min=1, max=maximum, message=message),
        ],
        **kwargs,
    )


class LoanForm(FlaskForm):
    loan_amount = _amount("Loan Amount (₹)", 1, "Loan amount must be positive")
    interest_rate = _number(
        "Annual Interest Rate (%)",
        default=8.5,
        validators=[NumberRange(min=0, max=100, message="Interest rate must be between 0 and 100")],
    )
    loan_term = _whole_years("Loan Term (Years)", 50, "Loan term must be between 1 and 50 years", default=20)


class CompoundInterestForm(FlaskForm):
    principal = _amount("Principal Amount (₹)", 0, "Principal must be a positive number.", default=10000)
    rate = _number(
        "Annual Interest Rate (%)",
        default=7,
        validators=[NumberRange(min=0, max=100, message="Interest rate must be between 0 and 100.")],
    )
    years = _whole_years("Time Period (Years)", 100, "Term must be between 1 and 100 years.", default=10)
    compounds_per_year = IntegerField(
        "Compounds per Year",
        default=12,
        description="1 for annually, 12 for monthly, 365 for daily.",
        validators=[
            InputRequired(message="Please enter how often interest compounds."),
            NumberRange(min=1, max=365, message="Compounding must be between annually and daily."),
        ],
    )


class SipForm(FlaskForm):
    monthly_investment = _amount(
        "Monthly Investment (₹)", 1, "Investment amount must be positive.", default=10000
    )
    rate = _number(
        "Expected Return Rate (% p.a.)",
        default=12,
        validators=[NumberRange(min=0, max=100, message="Expected return rate must be between 0 and 100.")],
    )
    years = _whole_years("Time Period (Years)", 50, "Term must be between 1 and 50 years.", default=10)


class GstForm(FlaskForm):
    amount = _amount("Amount (₹)", 0.01, "Amount must be greater than zero.")
    gst_rate = _number(
        "GST Rate (%)",
        default=18,
        description="Common slabs: " + ", ".join(f"{rate}%" for rate in GST_PRESET_RATES) + ".",
        validators=[NumberRange(min=0, max=100, message="GST rate must be between 0 and 100.")],
    )
    calculation_type = SelectField(
        "Calculation",
        choices=[(GST_ADD, "Add GST"), (GST_REMOVE, "Remove GST")],
        default=GST_ADD,
    )


class PercentageForm(FlaskForm):
    percentage = _number(
        "Percentage (%)",
        validators=[NumberRange(min=0, message="Percentage must be positive")],
    )
    total_value = _number(
        "Of Total Value",
        validators=[NumberRange(min=0, message="Total value must be positive")],
    )


class PercentageChangeForm(FlaskForm):
    initial_value = _number("Initial Value")
    final_value = _number("Final Value")


class LcmHcfForm(FlaskForm):
    numbers = StringField(
        "Numbers (comma-separated)",
        default="12, 15, 75",
        validators=[
            InputRequired(message="Please enter at least two numbers."),
            DataRequired(message="Please enter at least two numbers."),
            Length(max=1000, message="Please enter at most 1000 characters."),
        ],
    )

    def validate_numbers(self, field):
        try:
            self.parsed_numbers = parse_integer_list(field.data)
        except ValueError as exc:
            raise ValidationError(str(exc)) from exc


class SpeedDistanceTimeForm(FlaskForm):
    solve_for = SelectField(
        "Solve For",
        choices=[("distance", "Distance"), ("speed", "Speed"), ("time", "Time")],
        default="distance",
    )
    speed = FiniteFloatField("Speed (km/h)", default=60, validators=[Optional()])
    distance = FiniteFloatField("Distance (km)", validators=[Optional()])
    time = FiniteFloatField("Time (hours)", default=2, validators=[Optional()])

    _REQUIRED = {
        "distance": ("speed", "time"),
        "speed": ("distance", "time"),
        "time": ("distance", "speed"),
    }

    def validate(self, extra_validators=None):
        if not super().validate(extra_validators=extra_validators):
            return False
        valid = True
        for name in self._REQUIRED[self.solve_for.data]:
            field = self[name]
            if field.data is None or not field.raw_data:
                field.errors.append(f"{field.label.text} is required to solve for {self.solve_for.data}.")
                valid = False
        if valid:
            divisor = {"speed": "time", "time": "speed"}.get(self.solve_for.data)
            if divisor and self[divisor].data == 0:
                self[divisor].errors.append(f"{self[divisor].label.text} cannot be zero.")
                valid = False
        return valid


class TravelTimeForm(FlaskForm):
    distance = _number(
        "Total Distance (km)",
        default=100,
        validators=[NumberRange(min=1, message="Distance must be positive.")],
    )
    speed = _number(
        "Average Speed (km/h)",
        default=60,
        validators=[NumberRange(min=1, message="Average speed must be positive.")],
    )


class BmiForm(FlaskForm):
    unit_system = SelectField(
        "Unit System",
        choices=[(METRIC, "Metric (cm, kg)"), (IMPERIAL, "Imperial (ft, in, lbs)")],
        default=METRIC,
    )
    height_cm = FiniteFloatField("Height (cm)", validators=[Optional(), NumberRange(min=0)])
    weight_kg = FiniteFloatField("Weight (kg)", validators=[Optional(), NumberRange(min=0)])
    height_ft = FiniteFloatField("Height (ft)", validators=[Optional(), NumberRange(min=0)])
    height_in = FiniteFloatField("Height (in)", default=0, validators=[Optional(), NumberRange(min=0)])
    weight_lbs = FiniteFloatField("Weight (lbs)", validators=[Optional(), NumberRange(min=0)])

    def validate(self, extra_validators=None):
        if not super().validate(extra_validators=extra_validators):
            return False
        if self.unit_system.data == METRIC:
            required = (self.height_cm.data, self.weight_kg.data)
        else:
            required = (self.height_ft.data, self.weight_lbs.data)
        if not all(value and value > 0 for value in required):
            self.unit_system.errors.append("Please fill in the required fields for the selected unit system.")
            return False
        return True


class ZodiacSignForm(FlaskForm):
    birth_date = _birth_date()


class NumerologyForm(FlaskForm):
    birth_date = _birth_date()


class AlgebraForm(FlaskForm):
    problem = TextAreaField(
        "Algebra Problem",
        default=DEFAULT_ALGEBRA_PROBLEM,
        validators=[
            InputRequired(message="Please enter a math problem."),
            DataRequired(message="Please enter a math problem."),
        ],
    )

    def validate_problem(self, field):
        limit = current_app.config.get("ALGEBRA_MAX_PROBLEM_LENGTH", 2000)
        if len(field.data) > limit:
            raise ValidationError(f"Problem must be at most {limit} characters.")

