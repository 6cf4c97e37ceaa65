from __future__ import annotations

import logging

from flask import render_template, url_for

from ...services.calculator_catalog import get_calculator
from ...services.unit_conversion import ConversionEngine, sync_pixel_em
from . import converters_bp
from .forms import ConverterForm, PixelEmForm

logger = logging.getLogger(__name__)

# quantity -> (initial value, from unit, to unit)
CONVERTER_DEFAULTS = {
    "mass": ("1", "kilogram", "pound"),
    "speed": ("100", "km/h", "mph"),
    "length": ("1", "meter", "foot"),
    "volume": ("1", "liter", "gallon"),
    "temperature": ("25", "celsius", "fahrenheit"),
}


def _page_context(slug):
    tool = get_calculator(slug)
    return {
        "tool": tool,
        "page_title": f"{tool['name']} | AllWaysCalc",
        "page_description": tool["summary"],
        "canonical_url": url_for(tool["route_endpoint"], _external=True),
    }


def _render_converter(quantity: str):
    value, from_unit, to_unit = CONVERTER_DEFAULTS[quantity]
    form = ConverterForm.for_quantity(quantity, from_value=value, from_unit=from_unit, to_unit=to_unit)

    if form.validate_on_submit():
        changed = form.changed.data
    else:
        # Initial render (or a rejected post) fills the right side from the left.
        changed = "from_value"
        if form.errors:
            logger.debug("Rejected %s converter post: %s", quantity, form.errors)
            form = ConverterForm.for_quantity(
                quantity, formdata=None, from_value=value, from_unit=from_unit, to_unit=to_unit
            )

    form.apply_state(ConversionEngine.sync_pair(quantity, form.to_state(), changed))
    return render_template(
        "converters/converter.html",
        form=form,
        quantity=quantity,
        **_page_context(f"{quantity}-converter"),
    )


@converters_bp.route("/mass-converter", methods=["GET", "POST"])
def mass_converter():
    return _render_converter("mass")


@converters_bp.route("/speed-converter", methods=["GET", "POST"])
def speed_converter():
    return _render_converter("speed")


@converters_bp.route("/length-converter", methods=["GET", "POST"])
def length_converter():
    return _render_converter("length")


@converters_bp.route("/volume-converter", methods=["GET", "POST"])
def volume_converter():
    return _render_converter("volume")


@converters_bp.route("/temperature-converter", methods=["GET", "POST"])
def temperature_converter():
    return _render_converter("temperature")


@converters_bp.route("/pixel-to-em-converter", methods=["GET", "POST"])
def pixel_to_em_converter():
    form = PixelEmForm()
    if form.validate_on_submit():
        form.apply_state(sync_pixel_em(form.to_state(), form.changed.data))
    return render_template(
        "converters/pixel_em.html",
        form=form,
        **_page_context("pixel-to-em-converter"),
    )
