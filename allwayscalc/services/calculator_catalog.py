"""Public calculator catalog and homepage grouping helpers.

Synopsis:
Single source of truth for the calculator pages the site serves. The homepage
cards, header navigation, sitemap, CLI listing and the JSON API all read from
``CALCULATOR_CATALOG`` so a page can never be linked without being routed.

Glossary:
- Slug: URL path segment of a calculator page (``/modulo-calculator``).
- Route endpoint: Flask endpoint name rendering that page.
- Category: Homepage section heading the calculator is listed under.
"""

from __future__ import annotations

from collections import OrderedDict
from typing import Any, Dict, List

CATEGORY_ORDER: tuple[str, ...] = (
    "Finance & Investment",
    "Business & Tax",
    "Education & Student",
    "Math & Geometry",
    "Health & Fitness",
    "Conversions",
    "Life & Personal",
    "Travel & Transport",
)

CALCULATOR_CATALOG: tuple[Dict[str, Any], ...] = (
    {
        "slug": "loan-calculator",
        "route_endpoint": "calculators.loan_calculator",
        "name": "Loan EMI Calculator",
        "category": "Finance & Investment",
        "summary": "Monthly EMI, total interest and total repayment for a loan.",
    },
    {
        "slug": "compound-interest-calculator",
        "route_endpoint": "calculators.compound_interest_calculator",
        "name": "Compound Interest",
        "category": "Finance & Investment",
        "summary": "Future value of an investment with interest compounded over time.",
    },
    {
        "slug": "sip-calculator",
        "route_endpoint": "calculators.sip_calculator",
        "name": "SIP Calculator",
        "category": "Finance & Investment",
        "summary": "Maturity value of a monthly systematic investment plan.",
    },
    {
        "slug": "tip-calculator",
        "route_endpoint": "calculators.tip_calculator",
        "name": "Tip Calculator",
        "category": "Finance & Investment",
        "summary": "Work out the tip, the total bill and each person's share.",
    },
    {
        "slug": "simple-interest-calculator",
        "route_endpoint": "calculators.simple_interest_calculator",
        "name": "Simple Interest",
        "category": "Finance & Investment",
        "summary": "Interest earned on a principal at a flat annual rate.",
    },
    {
        "slug": "discount-calculator",
        "route_endpoint": "calculators.discount_calculator",
        "name": "Discount Calculator",
        "category": "Business & Tax",
        "summary": "Final price and amount saved after a percentage discount.",
    },
    {
        "slug": "gst-calculator",
        "route_endpoint": "calculators.gst_calculator",
        "name": "GST Calculator",
        "category": "Business & Tax",
        "summary": "Add or remove GST from an amount, with the CGST and SGST split.",
    },
    {
        "slug": "percentage-calculator",
        "route_endpoint": "calculators.percentage_calculator",
        "name": "Percentage Calculator",
        "category": "Education & Student",
        "summary": "Find what a given percentage of a value is.",
    },
    {
        "slug": "percentage-change-calculator",
        "route_endpoint": "calculators.percentage_change_calculator",
        "name": "Percentage Change Calculator",
        "category": "Math & Geometry",
        "summary": "Percentage increase or decrease between two values.",
    },
    {
        "slug": "algebra-calculator",
        "route_endpoint": "calculators.algebra_calculator",
        "name": "Algebra Calculator",
        "category": "Math & Geometry",
        "summary": "Step-by-step solutions to algebra problems from an AI tutor.",
    },
    {
        "slug": "lcm-hcf-calculator",
        "route_endpoint": "calculators.lcm_hcf_calculator",
        "name": "LCM & HCF Calculator",
        "category": "Math & Geometry",
        "summary": "Least common multiple and highest common factor of a list of integers.",
    },
    {
        "slug": "modulo-calculator",
        "route_endpoint": "calculators.modulo_calculator",
        "name": "Modulo Calculator",
        "category": "Math & Geometry",
        "summary": "Remainder of a division, with the sign of the dividend.",
    },
    {
        "slug": "speed-distance-time-calculator",
        "route_endpoint": "calculators.speed_distance_time_calculator",
        "name": "Speed, Distance & Time",
        "category": "Math & Geometry",
        "summary": "Solve for speed, distance or time from the other two.",
    },
    {
        "slug": "bmi-calculator",
        "route_endpoint": "calculators.bmi_calculator",
        "name": "BMI Calculator",
        "category": "Health & Fitness",
        "summary": "Body Mass Index from metric or imperial height and weight.",
    },
    {
        "slug": "length-converter",
        "route_endpoint": "converters.length_converter",
        "name": "Length Converter",
        "category": "Conversions",
        "summary": "Convert between meters, miles, feet, inches and more.",
    },
    {
        "slug": "mass-converter",
        "route_endpoint": "converters.mass_converter",
        "name": "Mass Converter",
        "category": "Conversions",
        "summary": "Convert between kilograms, pounds, ounces and more.",
    },
    {
        "slug": "temperature-converter",
        "route_endpoint": "converters.temperature_converter",
        "name": "Temperature Converter",
        "category": "Conversions",
        "summary": "Convert between Celsius, Fahrenheit and Kelvin.",
    },
    {
        "slug": "volume-converter",
        "route_endpoint": "converters.volume_converter",
        "name": "Volume Converter",
        "category": "Conversions",
        "summary": "Convert between liters, gallons, cups and more.",
    },
    {
        "slug": "speed-converter",
        "route_endpoint": "converters.speed_converter",
        "name": "Speed Converter",
        "category": "Conversions",
        "summary": "Convert between m/s, km/h, mph and knots.",
    },
    {
        "slug": "pixel-to-em-converter",
        "route_endpoint": "converters.pixel_to_em_converter",
        "name": "Pixel to EM Converter",
        "category": "Conversions",
        "summary": "Convert CSS pixels to em units for a given base font size.",
    },
    {
        "slug": "zodiac-sign-calculator",
        "route_endpoint": "calculators.zodiac_sign_calculator",
        "name": "Zodiac Sign Calculator",
        "category": "Life & Personal",
        "summary": "Find the zodiac sign for a birth date.",
    },
    {
        "slug": "love-compatibility-calculator",
        "route_endpoint": "calculators.love_compatibility_calculator",
        "name": "Love Compatibility",
        "category": "Life & Personal",
        "summary": "A just-for-fun compatibility score for two names.",
    },
    {
        "slug": "numerology-calculator",
        "route_endpoint": "calculators.numerology_calculator",
        "name": "Numerology Calculator",
        "category": "Life & Personal",
        "summary": "Life path number and profile for a birth date.",
    },
    {
        "slug": "lucky-number-calculator",
        "route_endpoint": "calculators.lucky_number_calculator",
        "name": "Lucky Number Calculator",
        "category": "Life & Personal",
        "summary": "A single-digit lucky number from a birth date.",
    },
    {
        "slug": "distance-fuel-cost-calculator",
        "route_endpoint": "calculators.distance_fuel_cost_calculator",
        "name": "Distance & Fuel Cost",
        "category": "Travel & Transport",
        "summary": "Fuel needed and trip cost from distance, mileage and fuel price.",
    },
    {
        "slug": "travel-time-estimator",
        "route_endpoint": "calculators.travel_time_estimator",
        "name": "Travel Time Estimator",
        "category": "Travel & Transport",
        "summary": "Journey time from distance and average speed.",
    },
)

_CATALOG_BY_SLUG: Dict[str, Dict[str, Any]] = {entry["slug"]: entry for entry in CALCULATOR_CATALOG}


def get_calculator(slug: str) -> Dict[str, Any] | None:
    return _CATALOG_BY_SLUG.get(slug)


def get_calculator_by_endpoint(endpoint: str | None) -> Dict[str, Any] | None:
    if not endpoint:
        return None
    for entry in CALCULATOR_CATALOG:
        if entry["route_endpoint"] == endpoint:
            return entry
    return None


def search_calculators(query: str | None) -> List[Dict[str, Any]]:
    """Case-insensitive match on calculator name or category; empty query returns everything."""
    needle = (query or "").strip().lower()
    if not needle:
        return list(CALCULATOR_CATALOG)
    return [
        entry
        for entry in CALCULATOR_CATALOG
        if needle in entry["name"].lower() or needle in entry["category"].lower()
    ]


def group_by_category(entries=None) -> "OrderedDict[str, List[Dict[str, Any]]]":
    """Group catalog entries under their category headings, in homepage order."""
    source = CALCULATOR_CATALOG if entries is None else entries
    grouped: "OrderedDict[str, List[Dict[str, Any]]]" = OrderedDict()
    for category in CATEGORY_ORDER:
        members = [entry for entry in source if entry["category"] == category]
        if members:
            grouped[category] = members
    return grouped
