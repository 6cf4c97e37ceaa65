"""Anonymous JSON API mirroring the calculator pages.

Request bodies are JSON objects. They are validated by the same WTForms
classes the HTML pages use, so both surfaces accept and reject exactly the same
input. CSRF does not apply: nothing here reads cookies or changes state.
"""

import logging
from dataclasses import asdict

from flask import Blueprint, current_app
from werkzeug.datastructures import MultiDict

from allwayscalc.blueprints.calculators.forms import AlgebraForm
from allwayscalc.blueprints.calculators.results import CALCULATOR_HANDLERS
from allwayscalc.blueprints.converters.forms import ConversionRequestForm, ConverterForm, PixelEmForm
from allwayscalc.extensions import algebra_limit, csrf
from allwayscalc.services.ai import GoogleAIClientError
from allwayscalc.services.algebra_service import AlgebraInput, AlgebraSolverError, AlgebraSolverService
from allwayscalc.services.calculator_catalog import get_calculator
from allwayscalc.services.unit_conversion import TEMPERATURE, UNIT_TABLES, ConversionEngine, sync_pixel_em
from allwayscalc.utils.api_responses import APIResponse
from allwayscalc.utils.number_format import format_number

logger = logging.getLogger(__name__)

public_api_bp = Blueprint("public_api", __name__)
csrf.exempt(public_api_bp)


def _formdata(payload):
    """Flatten a JSON object into form data; nulls and nested values are treated as missing."""
    return MultiDict(
        [
            (key, str(value))
            for key, value in payload.items()
            if value is not None and not isinstance(value, (dict, list, bool))
        ]
    )


def _bind(form_factory, payload):
    return form_factory(formdata=_formdata(payload), meta={"csrf": False})


def _invalid_body():
    return APIResponse.error("Request body must be a JSON object.", status_code=400)


def _known_quantity(quantity: str) -> bool:
    return quantity in ConversionEngine.quantities()


@public_api_bp.route("/units/<quantity>", methods=["GET"])
def list_units(quantity):
    if not _known_quantity(quantity):
        return APIResponse.not_found("Quantity")

    if quantity == TEMPERATURE:
        units = [{"key": key, "name": name} for key, name in ConversionEngine.unit_choices(quantity)]
        base_unit = "celsius"
    else:
        table = UNIT_TABLES[quantity]
        units = [
            {"key": unit.key, "name": unit.display_name, "factor_to_base": unit.factor_to_base}
            for unit in table.values()
        ]
        base_unit = table.base_unit.key
    return APIResponse.success(
        {
            "quantity": quantity,
            "base_unit": base_unit,
            "decimals": ConversionEngine.decimals_for(quantity),
            "units": units,
        }
    )


@public_api_bp.route("/convert/<quantity>", methods=["POST"])
def convert(quantity):
    """Convert ``{value, from_unit, to_unit}`` within one quantity."""
    if not _known_quantity(quantity):
        return APIResponse.not_found("Quantity")
    payload = APIResponse.json_payload()
    if payload is None:
        return _invalid_body()

    form = ConversionRequestForm.for_quantity(quantity, formdata=_formdata(payload), meta={"csrf": False})
    if not form.validate():
        return APIResponse.validation_error(form.errors)

    converted = ConversionEngine.convert_quantity(quantity, form.value.data, form.from_unit.data, form.to_unit.data)
    decimals = ConversionEngine.decimals_for(quantity)
    return APIResponse.success(
        {
            "quantity": quantity,
            "value": form.value.data,
            "from_unit": form.from_unit.data,
            "to_unit": form.to_unit.data,
            "result": ConversionEngine.round_value(converted, decimals),
            "display": format_number(converted, decimals),
        }
    )


@public_api_bp.route("/convert/<quantity>/sync", methods=["POST"])
def sync_converter(quantity):
    """Recompute the dependent side of a two-field converter after ``changed`` was edited."""
    if not _known_quantity(quantity):
        return APIResponse.not_found("Quantity")
    payload = APIResponse.json_payload()
    if payload is None:
        return _invalid_body()

    form = ConverterForm.for_quantity(quantity, formdata=_formdata(payload), meta={"csrf": False})
    if not form.validate():
        return APIResponse.validation_error(form.errors)

    state = ConversionEngine.sync_pair(quantity, form.to_state(), form.changed.data)
    return APIResponse.success(asdict(state))


@public_api_bp.route("/pixel-em/sync", methods=["POST"])
def sync_pixel_em_state():
    payload = APIResponse.json_payload()
    if payload is None:
        return _invalid_body()

    form = _bind(PixelEmForm, payload)
    if not form.validate():
        return APIResponse.validation_error(form.errors)
    return APIResponse.success(asdict(sync_pixel_em(form.to_state(), form.changed.data)))


@public_api_bp.route("/calculators/<slug>", methods=["POST"])
def run_calculator(slug):
    """Run any form calculator by its page slug."""
    handler = CALCULATOR_HANDLERS.get(slug)
    if handler is None:
        return APIResponse.not_found("Calculator")
    payload = APIResponse.json_payload()
    if payload is None:
        return _invalid_body()

    form = _bind(handler.form_class, payload)
    if not form.validate():
        return APIResponse.validation_error(form.errors)

    outcome = handler.compute(form)
    return APIResponse.success(
        {
            "calculator": slug,
            "name": get_calculator(slug)["name"],
            "result": outcome.data,
            "lines": [{"label": label, "value": value} for label, value in outcome.lines],
            "share_text": outcome.share_text,
        }
    )


@public_api_bp.route("/algebra/solve", methods=["POST"])
@algebra_limit
def solve_algebra():
    payload = APIResponse.json_payload()
    if payload is None:
        return _invalid_body()

    form = _bind(AlgebraForm, payload)
    if not form.validate():
        return APIResponse.validation_error(form.errors)

    try:
        service = AlgebraSolverService()
        output = service.solve(AlgebraInput(problem=form.problem.data.strip()))
        return APIResponse.success({"solution": output.solution})
    except AlgebraSolverError as exc:
        current_app.logger.warning("Algebra solver unavailable: %s", exc)
        return APIResponse.unavailable("Algebra solver is not available right now.")
    except GoogleAIClientError as exc:
        current_app.logger.exception("Algebra solver AI failure")
        return APIResponse.upstream_failure(str(exc))
    except Exception:
        current_app.logger.exception("Algebra solver unexpected error")
        return APIResponse.error("Unexpected algebra solver failure.", status_code=500)
