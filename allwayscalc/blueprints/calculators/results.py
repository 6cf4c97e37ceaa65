"""Glue between validated calculator forms and the pure formulas.

Each handler reads a validated form, runs one formula and returns a
``CalculatorOutcome`` carrying both the machine-readable values (JSON API) and
the labelled display lines plus share text (HTML pages).
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Tuple, Type

from flask_wtf import FlaskForm

from ...services import calculators as calc
from ...utils.number_format import format_hours, format_inr, format_number, round_value
from . import forms


@dataclass
class CalculatorOutcome:
    data: Dict[str, Any]
    lines: List[Tuple[str, str]] = field(default_factory=list)
    share_text: str = ""
    headline: str | None = None


@dataclass(frozen=True)
class CalculatorHandler:
    form_class: Type[FlaskForm]
    compute: Callable[[Any], CalculatorOutcome]


def _fuel_cost(form: forms.FuelCostForm) -> CalculatorOutcome:
    result = calc.calculate_fuel_cost(form.distance.data, form.efficiency.data, form.fuel_price.data)
    fuel = format_number(result.fuel_needed, 2)
    cost = format_inr(result.total_cost)
    return CalculatorOutcome(
        data={
            "fuel_needed": round_value(result.fuel_needed, 3),
            "total_cost": round_value(result.total_cost, 2),
        },
        lines=[("Total Fuel Needed", f"{fuel} Liters"), ("Total Fuel Cost", cost)],
        share_text=f"For a trip of {format_number(form.distance.data)} km, you'll need {fuel} liters of fuel, costing {cost}.",
        headline=cost,
    )


def _modulo(form: forms.ModuloForm) -> CalculatorOutcome:
    result = calc.calculate_modulo(form.dividend.data, form.divisor.data)
    expression = f"{format_number(result.dividend)} mod {format_number(result.divisor)}"
    remainder = format_number(result.remainder, 6)
    return CalculatorOutcome(
        data={"dividend": result.dividend, "divisor": result.divisor, "remainder": result.remainder},
        lines=[("Expression", expression), ("Remainder", remainder)],
        share_text=f"The result of {expression} is {remainder}.",
        headline=remainder,
    )


def _lucky_number(form: forms.LuckyNumberForm) -> CalculatorOutcome:
    lucky = calc.get_lucky_number(form.birth_date.data)
    return CalculatorOutcome(
        data={"lucky_number": lucky},
        lines=[("Your Lucky Number", str(lucky))],
        share_text=f"My lucky number is {lucky}! Find yours with the Lucky Number Calculator.",
        headline=str(lucky),
    )


def _love_compatibility(form: forms.LoveCompatibilityForm) -> CalculatorOutcome:
    score = calc.calculate_love_score(form.name1.data, form.name2.data)
    return CalculatorOutcome(
        data={"score": score},
        lines=[("Compatibility Score", f"{score}%")],
        share_text=f"{form.name1.data} and {form.name2.data} have a love compatibility score of {score}%!",
        headline=f"{score}%",
    )


def _tip(form: forms.TipForm) -> CalculatorOutcome:
    result = calc.calculate_tip(form.bill.data, form.tip_percentage.data, form.people.data)
    per_person = format_inr(result.per_person)
    return CalculatorOutcome(
        data={
            "tip_amount": round_value(result.tip_amount, 2),
            "total_bill": round_value(result.total_bill, 2),
            "per_person": round_value(result.per_person, 2),
        },
        lines=[
            ("Tip Amount", format_inr(result.tip_amount)),
            ("Total Bill", format_inr(result.total_bill)),
            ("Amount per Person", per_person),
        ],
        share_text=f"Total bill: {format_inr(result.total_bill)}, {per_person} per person.",
        headline=per_person,
    )


def _simple_interest(form: forms.SimpleInterestForm) -> CalculatorOutcome:
    result = calc.calculate_simple_interest(form.principal.data, form.rate.data, form.years.data)
    return CalculatorOutcome(
        data={
            "principal": result.principal,
            "total_interest": round_value(result.total_interest, 2),
            "total_value": round_value(result.total_value, 2),
        },
        lines=[
            ("Principal Amount", format_inr(result.principal)),
            ("Total Interest", format_inr(result.total_interest)),
            ("Total Value", format_inr(result.total_value)),
        ],
        share_text=(
            f"Simple interest on {format_inr(result.principal)} is {format_inr(result.total_interest)}, "
            f"for a total of {format_inr(result.total_value)}."
        ),
        headline=format_inr(result.total_value),
    )


def _discount(form: forms.DiscountForm) -> CalculatorOutcome:
    result = calc.calculate_discount(form.original_price.data, form.discount.data)
    final = format_inr(result.final_price)
    return CalculatorOutcome(
        data={"saved_amount": result.saved_amount, "final_price": result.final_price},
        lines=[("Final Price", final), ("You Save", format_inr(result.saved_amount))],
        share_text=f"Final price after a {format_number(form.discount.data)}% discount: {final}.",
        headline=final,
    )


def _loan(form: forms.LoanForm) -> CalculatorOutcome:
    result = calc.calculate_loan_emi(form.loan_amount.data, form.interest_rate.data, form.loan_term.data)
    emi = format_inr(result.monthly_payment)
    return CalculatorOutcome(
        data={
            "monthly_payment": round_value(result.monthly_payment, 2),
            "total_payment": round_value(result.total_payment, 2),
            "total_interest": round_value(result.total_interest, 2),
            "loan_amount": result.loan_amount,
        },
        lines=[
            ("Monthly EMI", emi),
            ("Principal Amount", format_inr(result.loan_amount)),
            ("Total Interest", format_inr(result.total_interest)),
            ("Total Payment", format_inr(result.total_payment)),
        ],
        share_text=(
            f"A loan of {format_inr(result.loan_amount)} at {format_number(form.interest_rate.data)}% "
            f"for {form.loan_term.data} years has a monthly EMI of {emi}."
        ),
        headline=emi,
    )


def _compound_interest(form: forms.CompoundInterestForm) -> CalculatorOutcome:
    result = calc.calculate_compound_interest(
        form.principal.data, form.rate.data, form.years.data, form.compounds_per_year.data
    )
    future_value = format_inr(result.future_value)
    return CalculatorOutcome(
        data={
            "principal": result.principal,
            "future_value": round_value(result.future_value, 2),
            "total_interest": round_value(result.total_interest, 2),
        },
        lines=[
            ("Future Value", future_value),
            ("Principal Amount", format_inr(result.principal)),
            ("Total Interest Earned", format_inr(result.total_interest)),
        ],
        share_text=(
            f"{format_inr(result.principal)} grows to {future_value} in {form.years.data} years "
            f"at {format_number(form.rate.data)}% compound interest."
        ),
        headline=future_value,
    )


def _sip(form: forms.SipForm) -> CalculatorOutcome:
    result = calc.calculate_sip(form.monthly_investment.data, form.rate.data, form.years.data)
    future_value = format_inr(result.future_value)
    return CalculatorOutcome(
        data={
            "total_investment": round_value(result.total_investment, 2),
            "future_value": round_value(result.future_value, 2),
            "total_interest": round_value(result.total_interest, 2),
        },
        lines=[
            ("Invested Amount", format_inr(result.total_investment)),
            ("Estimated Returns", format_inr(result.total_interest)),
            ("Total Value", future_value),
        ],
        share_text=(
            f"Investing {format_inr(form.monthly_investment.data)} a month for {form.years.data} years "
            f"could grow to {future_value}."
        ),
        headline=future_value,
    )


def _gst(form: forms.GstForm) -> CalculatorOutcome:
    result = calc.calculate_gst(form.amount.data, form.gst_rate.data, form.calculation_type.data)
    total = format_inr(result.total_amount)
    rate = format_number(form.gst_rate.data)
    return CalculatorOutcome(
        data={
            "base_amount": round_value(result.base_amount, 2),
            "gst_amount": round_value(result.gst_amount, 2),
            "cgst": round_value(result.cgst, 2),
            "sgst": round_value(result.sgst, 2),
            "total_amount": round_value(result.total_amount, 2),
        },
        lines=[
            ("Net Amount", format_inr(result.base_amount)),
            (f"GST ({rate}%)", format_inr(result.gst_amount)),
            ("CGST", format_inr(result.cgst)),
            ("SGST", format_inr(result.sgst)),
            ("Total Amount", total),
        ],
        share_text=f"Net {format_inr(result.base_amount)} + GST {format_inr(result.gst_amount)} at {rate}% = {total}.",
        headline=total,
    )


def _percentage(form: forms.PercentageForm) -> CalculatorOutcome:
    result = calc.calculate_percentage(form.percentage.data, form.total_value.data)
    statement = (
        f"{format_number(result.percentage)}% of {format_number(result.total_value)} "
        f"is {format_number(result.result_value)}"
    )
    return CalculatorOutcome(
        data={"result_value": result.result_value},
        lines=[("Result", format_number(result.result_value))],
        share_text=f"{statement}.",
        headline=statement,
    )


def _percentage_change(form: forms.PercentageChangeForm) -> CalculatorOutcome:
    result = calc.calculate_percentage_change(form.initial_value.data, form.final_value.data)
    change = format_number(abs(result.change))
    label = {"increase": "Increase", "decrease": "Decrease", "no-change": "No Change"}[result.change_type]
    return CalculatorOutcome(
        data={
            # JSON has no infinity; a zero starting value reports null
            "change": result.change if math.isfinite(result.change) else None,
            "change_type": result.change_type,
        },
        lines=[("Percentage Change", f"{change}%"), ("Direction", label)],
        share_text=f"The percentage change is a {change}% {result.change_type.replace('-', ' ')}.",
        headline=f"{change}% {label}",
    )


def _lcm_hcf(form: forms.LcmHcfForm) -> CalculatorOutcome:
    result = calc.calculate_lcm_hcf(form.parsed_numbers)
    numbers = ", ".join(str(n) for n in result.numbers)
    return CalculatorOutcome(
        data={"numbers": list(result.numbers), "lcm": result.lcm, "hcf": result.hcf},
        lines=[("LCM (Least Common Multiple)", str(result.lcm)), ("HCF (Highest Common Factor)", str(result.hcf))],
        share_text=f"For the numbers {numbers}: LCM is {result.lcm}, HCF is {result.hcf}.",
    )


def _speed_distance_time(form: forms.SpeedDistanceTimeForm) -> CalculatorOutcome:
    result = calc.solve_speed_distance_time(
        form.solve_for.data,
        speed=form.speed.data,
        distance=form.distance.data,
        time=form.time.data,
    )
    rendered = f"{format_number(result.value, 2)} {result.unit}"
    return CalculatorOutcome(
        data={"solve_for": result.solve_for, "value": round_value(result.value, 2), "unit": result.unit},
        lines=[(f"Calculated {result.solve_for.title()}", rendered)],
        share_text=f"The calculated {result.solve_for} is {rendered}.",
        headline=rendered,
    )


def _travel_time(form: forms.TravelTimeForm) -> CalculatorOutcome:
    result = calc.estimate_travel_time(form.distance.data, form.speed.data)
    readable = format_hours(result.time_in_hours)
    return CalculatorOutcome(
        data={"time_in_hours": round_value(result.time_in_hours, 4), "readable": readable},
        lines=[("Estimated Travel Time", readable)],
        share_text=f"Estimated travel time for {format_number(form.distance.data)} km: {readable}.",
        headline=readable,
    )


def _bmi(form: forms.BmiForm) -> CalculatorOutcome:
    result = calc.calculate_bmi(
        form.unit_system.data,
        height_cm=form.height_cm.data,
        weight_kg=form.weight_kg.data,
        height_ft=form.height_ft.data,
        height_in=form.height_in.data,
        weight_lbs=form.weight_lbs.data,
    )
    bmi = format_number(result.bmi, 1)
    return CalculatorOutcome(
        data={"bmi": result.bmi, "category": result.category},
        lines=[("Your BMI", bmi), ("Category", result.category)],
        share_text=f"My BMI is {bmi} ({result.category}).",
        headline=bmi,
    )


def _zodiac_sign(form: forms.ZodiacSignForm) -> CalculatorOutcome:
    sign = calc.get_zodiac_sign(form.birth_date.data)
    return CalculatorOutcome(
        data={"sign": sign.name, "symbol": sign.symbol, "traits": sign.traits},
        lines=[("Your Zodiac Sign", f"{sign.symbol} {sign.name}"), ("Traits", sign.traits)],
        share_text=f"My zodiac sign is {sign.name} {sign.symbol}!",
        headline=f"{sign.symbol} {sign.name}",
    )


def _numerology(form: forms.NumerologyForm) -> CalculatorOutcome:
    result = calc.get_life_path(form.birth_date.data)
    profile = result.profile
    return CalculatorOutcome(
        data={
            "life_path_number": result.life_path_number,
            "name": profile.name,
            "traits": profile.traits,
            "keywords": profile.keywords,
        },
        lines=[
            ("Life Path Number", f"{result.life_path_number} ({profile.name})"),
            ("Traits", profile.traits),
            ("Keywords", profile.keywords),
        ],
        share_text=f"My Life Path Number is {result.life_path_number} - {profile.name}!",
        headline=str(result.life_path_number),
    )


CALCULATOR_HANDLERS: Dict[str, CalculatorHandler] = {
    "distance-fuel-cost-calculator": CalculatorHandler(forms.FuelCostForm, _fuel_cost),
    "modulo-calculator": CalculatorHandler(forms.ModuloForm, _modulo),
    "lucky-number-calculator": CalculatorHandler(forms.LuckyNumberForm, _lucky_number),
    "love-compatibility-calculator": CalculatorHandler(forms.LoveCompatibilityForm, _love_compatibility),
    "tip-calculator": CalculatorHandler(forms.TipForm, _tip),
    "simple-interest-calculator": CalculatorHandler(forms.SimpleInterestForm, _simple_interest),
    "discount-calculator": CalculatorHandler(forms.DiscountForm, _discount),
    "loan-calculator": CalculatorHandler(forms.LoanForm, _loan),
    "compound-interest-calculator": CalculatorHandler(forms.CompoundInterestForm, _compound_interest),
    "sip-calculator": CalculatorHandler(forms.SipForm, _sip),
    "gst-calculator": CalculatorHandler(forms.GstForm, _gst),
    "percentage-calculator": CalculatorHandler(forms.PercentageForm, _percentage),
    "percentage-change-calculator": CalculatorHandler(forms.PercentageChangeForm, _percentage_change),
    "lcm-hcf-calculator": CalculatorHandler(forms.LcmHcfForm, _lcm_hcf),
    "speed-distance-time-calculator": CalculatorHandler(forms.SpeedDistanceTimeForm, _speed_distance_time),
    "travel-time-estimator": CalculatorHandler(forms.TravelTimeForm, _travel_time),
    "bmi-calculator": CalculatorHandler(forms.BmiForm, _bmi),
    "zodiac-sign-calculator": CalculatorHandler(forms.ZodiacSignForm, _zodiac_sign),
    "numerology-calculator": CalculatorHandler(forms.NumerologyForm, _numerology),
}
