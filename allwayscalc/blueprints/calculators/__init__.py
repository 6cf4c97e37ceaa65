from flask import Blueprint

calculators_bp = Blueprint("calculators", __name__)

from . import routes  # noqa: E402,F401
