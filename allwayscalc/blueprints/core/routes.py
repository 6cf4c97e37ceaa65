"""Core public routes.

Synopsis:
Homepage calculator directory, crawler-facing sitemap/robots documents, the
site-wide "Suggest a Calculator" endpoint and a health probe.

Glossary:
- Directory: Homepage list of calculators grouped by category.
- Suggestion: Free-text idea for a new calculator; logged, never stored.
"""

from __future__ import annotations

import logging

from flask import (
    current_app,
    flash,
    jsonify,
    redirect,
    render_template,
    request,
    url_for,
)
from flask_wtf import FlaskForm
from wtforms import HiddenField, TextAreaField
from wtforms.validators import DataRequired, Length

from ...extensions import cache, limiter, suggestion_limit
from ...services.calculator_catalog import group_by_category, search_calculators
from ...services.sitemap_service import build_sitemap_entries, render_robots_txt, render_sitemap_xml
from . import core_bp

logger = logging.getLogger(__name__)

SUGGESTION_THANKS = "Thank you for your feedback. We'll review your suggestion soon."
SITEMAP_CACHE_KEY = "public:sitemap:v1"


class SuggestionForm(FlaskForm):
    suggestion = TextAreaField(
        "Your Suggestion",
        validators=[
            DataRequired(message="Please describe the calculator you would like to see."),
            Length(max=1000, message="Please keep suggestions under 1000 characters."),
        ],
    )
    next_url = HiddenField()


def _safe_next(target: str | None) -> str:
    if target and target.startswith("/") and not target.startswith("//"):
        return target
    return url_for("core.index")


def _site_base_url() -> str:
    return current_app.config.get("APP_BASE_URL") or request.url_root


@core_bp.route("/")
def index():
    """Homepage: every calculator grouped by category, optionally filtered by ``?q=``."""
    query = (request.args.get("q") or "").strip()
    matches = search_calculators(query)
    return render_template(
        "home.html",
        query=query,
        categories=group_by_category(matches),
        match_count=len(matches),
        page_title="AllWaysCalc - The Ultimate Calculator Suite",
        page_description="From simple math to complex engineering, find the right tool for any calculation.",
        canonical_url=url_for("core.index", _external=True),
    )


@core_bp.route("/sitemap.xml")
def sitemap_xml():
    """XML sitemap for search engine discovery."""
    body = cache.get(SITEMAP_CACHE_KEY)
    if body is None:
        body = render_sitemap_xml(build_sitemap_entries(_site_base_url()))
        try:
            cache.set(SITEMAP_CACHE_KEY, body, timeout=current_app.config.get("SITEMAP_CACHE_TIMEOUT", 3600))
        except Exception:
            logger.warning("Sitemap cache unavailable; serving uncached copy", exc_info=True)
    return current_app.response_class(body, mimetype="application/xml")


@core_bp.route("/robots.txt")
def robots_txt():
    """Robots directives for crawlers."""
    return current_app.response_class(
        render_robots_txt(_site_base_url()),
        mimetype="text/plain",
    )


@core_bp.route("/suggestions", methods=["POST"])
@suggestion_limit
def submit_suggestion():
    form = SuggestionForm()
    if form.validate_on_submit():
        logger.info("Calculator suggestion received (%d chars): %s", len(form.suggestion.data), form.suggestion.data)
        flash(SUGGESTION_THANKS, "success")
    else:
        for errors in form.errors.values():
            for message in errors:
                flash(message, "error")
    return redirect(_safe_next(form.next_url.data))


@core_bp.route("/health", methods=["GET", "HEAD"])
@limiter.exempt
def health_check():
    """Lightweight probe endpoint for load balancers and uptime monitors."""
    if request.method == "HEAD":
        return "", 200
    return jsonify({"status": "ok"})
