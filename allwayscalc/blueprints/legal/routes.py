"""Public informational and legal page routes."""

from urllib.parse import quote

from flask import current_app, render_template, url_for
from flask_wtf import FlaskForm
from wtforms import StringField, TextAreaField
from wtforms.validators import DataRequired, Length, Regexp

from . import legal_bp
from .content import FAQ_SECTIONS

_EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class ContactForm(FlaskForm):
    name = StringField("Name", validators=[DataRequired(), Length(min=2, message="Name must be at least 2 characters.")])
    email = StringField(
        "Email",
        validators=[DataRequired(), Regexp(_EMAIL_PATTERN, message="Please enter a valid email address.")],
    )
    subject = StringField("Subject", validators=[DataRequired(), Length(min=5, message="Subject must be at least 5 characters.")])
    message = TextAreaField(
        "Message",
        validators=[DataRequired(), Length(min=10, max=5000, message="Message must be at least 10 characters.")],
    )


def build_mailto_url(recipient: str, form: ContactForm) -> str:
    body = f"Name: {form.name.data}\nEmail: {form.email.data}\n\nMessage:\n{form.message.data}"
    return f"mailto:{recipient}?subject={quote(form.subject.data)}&body={quote(body)}"


@legal_bp.route("/about-us")
def about_us():
    """About page."""
    return render_template(
        "legal/about_us.html",
        page_title="About AllWaysCalc - Our Mission and Vision",
        page_description=(
            "Learn about the mission behind AllWaysCalc. We are dedicated to providing a comprehensive, "
            "intuitive, and free suite of calculators for finance, health, science, and more."
        ),
        canonical_url=url_for("legal.about_us", _external=True),
    )


@legal_bp.route("/contact-us", methods=["GET", "POST"])
def contact_us():
    """Contact page; a valid form hands off to the visitor's mail client."""
    form = ContactForm()
    mailto_url = None
    if form.validate_on_submit():
        mailto_url = build_mailto_url(current_app.config["CONTACT_EMAIL"], form)
    return render_template(
        "legal/contact_us.html",
        form=form,
        mailto_url=mailto_url,
        page_title="Contact Us - AllWaysCalc",
        page_description="Questions, feedback or a bug report? Send the AllWaysCalc team a message.",
        canonical_url=url_for("legal.contact_us", _external=True),
    )


@legal_bp.route("/faq")
def faq():
    """Frequently asked questions page."""
    return render_template(
        "legal/faq.html",
        faq_sections=FAQ_SECTIONS,
        page_title="Frequently Asked Questions (FAQ) - AllWaysCalc",
        page_description=(
            "Find answers to common questions about our calculators, the concepts behind them, "
            "and how to use our tools effectively."
        ),
        canonical_url=url_for("legal.faq", _external=True),
    )


@legal_bp.route("/privacy-policy")
def privacy_policy():
    """Privacy policy page."""
    return render_template(
        "legal/privacy_policy.html",
        page_title="Privacy Policy - AllWaysCalc",
        page_description="How AllWaysCalc handles the little data it sees: nothing you type into a calculator is stored.",
        canonical_url=url_for("legal.privacy_policy", _external=True),
    )


@legal_bp.route("/terms-and-conditions")
def terms_and_conditions():
    """Terms and conditions page."""
    return render_template(
        "legal/terms_and_conditions.html",
        page_title="Terms and Conditions - AllWaysCalc",
        page_description=(
            "Read the terms and conditions for using AllWaysCalc. By using our website and tools, "
            "you agree to these terms."
        ),
        canonical_url=url_for("legal.terms_and_conditions", _external=True),
    )


@legal_bp.route("/disclaimer")
def disclaimer():
    """Legal disclaimer page."""
    return render_template(
        "legal/disclaimer.html",
        page_title="Disclaimer - AllWaysCalc",
        page_description="AllWaysCalc results are for general information only and are not professional advice.",
        canonical_url=url_for("legal.disclaimer", _external=True),
    )
