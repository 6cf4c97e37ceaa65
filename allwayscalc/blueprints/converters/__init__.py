from flask import Blueprint

converters_bp = Blueprint("converters", __name__)

from . import routes  # noqa: E402,F401
