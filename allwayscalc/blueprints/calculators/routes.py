"""Calculator page routes.

Each page GETs with its defaults and POSTs back to itself. Validation errors
render inline; a valid submission renders the result panel with share text.
"""

from __future__ import annotations

import logging

from flask import abort, render_template, url_for

from ...extensions import algebra_limit
from ...services.ai import GoogleAIClientError
from ...services.algebra_service import AlgebraInput, AlgebraSolverError, AlgebraSolverService
from ...services.calculator_catalog import get_calculator
from . import calculators_bp
from .forms import AlgebraForm
from .results import CALCULATOR_HANDLERS

logger = logging.getLogger(__name__)

ALGEBRA_FAILURE_MESSAGE = "Sorry, I encountered an error while solving this problem."


def _page_context(tool):
    return {
        "tool": tool,
        "page_title": f"{tool['name']} | AllWaysCalc",
        "page_description": tool["summary"],
        "canonical_url": url_for(tool["route_endpoint"], _external=True),
    }


# --- Render calculator ---
# Purpose: Shared GET/POST flow for every form calculator page.
# Inputs: Catalog slug whose handler owns the form and formula.
# Outputs: Rendered page with inline errors or a result panel.
def _render_calculator(slug: str):
    tool = get_calculator(slug)
    handler = CALCULATOR_HANDLERS.get(slug)
    if tool is None or handler is None:
        abort(404)

    form = handler.form_class()
    outcome = None
    if form.validate_on_submit():
        outcome = handler.compute(form)
    return render_template(
        "calculators/calculator.html",
        form=form,
        outcome=outcome,
        **_page_context(tool),
    )


@calculators_bp.route("/distance-fuel-cost-calculator", methods=["GET", "POST"])
def distance_fuel_cost_calculator():
    return _render_calculator("distance-fuel-cost-calculator")


@calculators_bp.route("/modulo-calculator", methods=["GET", "POST"])
def modulo_calculator():
    return _render_calculator("modulo-calculator")


@calculators_bp.route("/lucky-number-calculator", methods=["GET", "POST"])
def lucky_number_calculator():
    return _render_calculator("lucky-number-calculator")


@calculators_bp.route("/love-compatibility-calculator", methods=["GET", "POST"])
def love_compatibility_calculator():
    return _render_calculator("love-compatibility-calculator")


@calculators_bp.route("/tip-calculator", methods=["GET", "POST"])
def tip_calculator():
    return _render_calculator("tip-calculator")


@calculators_bp.route("/simple-interest-calculator", methods=["GET", "POST"])
def simple_interest_calculator():
    return _render_calculator("simple-interest-calculator")


@calculators_bp.route("/discount-calculator", methods=["GET", "POST"])
def discount_calculator():
    return _render_calculator("discount-calculator")


@calculators_bp.route("/loan-calculator", methods=["GET", "POST"])
def loan_calculator():
    return _render_calculator("loan-calculator")


@calculators_bp.route("/compound-interest-calculator", methods=["GET", "POST"])
def compound_interest_calculator():
    return _render_calculator("compound-interest-calculator")


@calculators_bp.route("/sip-calculator", methods=["GET", "POST"])
def sip_calculator():
    return _render_calculator("sip-calculator")


@calculators_bp.route("/gst-calculator", methods=["GET", "POST"])
def gst_calculator():
    return _render_calculator("gst-calculator")


@calculators_bp.route("/percentage-calculator", methods=["GET", "POST"])
def percentage_calculator():
    return _render_calculator("percentage-calculator")


@calculators_bp.route("/percentage-change-calculator", methods=["GET", "POST"])
def percentage_change_calculator():
    return _render_calculator("percentage-change-calculator")


@calculators_bp.route("/lcm-hcf-calculator", methods=["GET", "POST"])
def lcm_hcf_calculator():
    return _render_calculator("lcm-hcf-calculator")


@calculators_bp.route("/speed-distance-time-calculator", methods=["GET", "POST"])
def speed_distance_time_calculator():
    return _render_calculator("speed-distance-time-calculator")


@calculators_bp.route("/travel-time-estimator", methods=["GET", "POST"])
def travel_time_estimator():
    return _render_calculator("travel-time-estimator")


@calculators_bp.route("/bmi-calculator", methods=["GET", "POST"])
def bmi_calculator():
    return _render_calculator("bmi-calculator")


@calculators_bp.route("/zodiac-sign-calculator", methods=["GET", "POST"])
def zodiac_sign_calculator():
    return _render_calculator("zodiac-sign-calculator")


@calculators_bp.route("/numerology-calculator", methods=["GET", "POST"])
def numerology_calculator():
    return _render_calculator("numerology-calculator")


@calculators_bp.route("/algebra-calculator", methods=["GET", "POST"])
@algebra_limit
def algebra_calculator():
    """AI tutor page; upstream failures render as an inline message, never a 5xx."""
    tool = get_calculator("algebra-calculator")
    form = AlgebraForm()
    solution = None
    error = None

    if form.validate_on_submit():
        try:
            service = AlgebraSolverService()
            solution = service.solve(AlgebraInput(problem=form.problem.data.strip())).solution
        except AlgebraSolverError as exc:
            logger.warning("Algebra solver unavailable: %s", exc)
            error = ALGEBRA_FAILURE_MESSAGE
        except GoogleAIClientError:
            logger.exception("Algebra solver AI failure")
            error = ALGEBRA_FAILURE_MESSAGE

    return render_template(
        "calculators/algebra.html",
        form=form,
        solution=solution,
        error=error,
        **_page_context(tool),
    )
