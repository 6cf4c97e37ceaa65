from __future__ import annotations

from datetime import date
from typing import Any, Dict

from flask import Flask, request
from flask_wtf.csrf import generate_csrf

from .services.calculator_catalog import get_calculator_by_endpoint, group_by_category
from .utils.number_format import format_hours, format_inr, format_number


def register_template_context(app: Flask) -> None:
    """Register globally available template context helpers."""

    @app.context_processor
    def _inject_csrf() -> Dict[str, Any]:
        return {"csrf_token": generate_csrf}

    @app.context_processor
    def _inject_site() -> Dict[str, Any]:
        return {
            "site_name": app.config.get("SITE_NAME", "AllWaysCalc"),
            "contact_email": app.config.get("CONTACT_EMAIL"),
            "current_year": date.today().year,
        }

    @app.context_processor
    def _inject_navigation() -> Dict[str, Any]:
        # Endpoint is None while rendering error pages for unmatched URLs.
        return {
            "nav_categories": group_by_category(),
            "current_tool": get_calculator_by_endpoint(request.endpoint),
        }

    app.add_template_filter(format_inr, "inr")
    app.add_template_filter(format_number, "number")
    app.add_template_filter(format_hours, "hours")
