"""Static copy for the informational pages."""

from __future__ import annotations

from typing import NamedTuple


class FaqEntry(NamedTuple):
    question: str
    answer: str


FAQ_SECTIONS: tuple[tuple[str, tuple[FaqEntry, ...]], ...] = (
    (
        "General",
        (
            FaqEntry(
                "Are the calculators on this website accurate?",
                "Our calculators are designed to be as accurate as possible for informational and educational "
                "purposes, based on standard, publicly available formulas. However, for critical financial, "
                "medical, or engineering decisions, you should always consult a qualified professional. Think of "
                "these tools as excellent starting points and estimators, not as a substitute for professional advice.",
            ),
            FaqEntry(
                "Is my data saved when I use a calculator?",
                "No. We prioritize your privacy. Calculations are computed for your request and immediately "
                "discarded. We do not store or share any of the personal or financial data you enter into the calculators.",
            ),
            FaqEntry(
                "How often are the calculators updated?",
                "We periodically review our calculators to ensure they are using up-to-date formulas and "
                "information. If you believe a calculator is out of date, please let us know.",
            ),
            FaqEntry(
                "Can I suggest a new calculator?",
                "Absolutely! We are always looking to expand our suite of tools. Please use the "
                "\"Suggest a Calculator\" button at the bottom of every page.",
            ),
        ),
    ),
    (
        "Finance & Investment",
        (
            FaqEntry(
                "What is the difference between simple and compound interest?",
                "Simple interest is calculated only on the original principal amount. Compound interest is "
                "calculated on the principal amount plus the accumulated interest from previous periods. This "
                "'interest on interest' effect makes compounding much more powerful for long-term growth.",
            ),
        ),
    ),
    (
        "Health & Fitness",
        (
            FaqEntry(
                "What is BMI and is it a good measure of health?",
                "Body Mass Index (BMI) is a simple ratio of your weight to your height. It's a useful, quick "
                "screening tool for potential weight-related health risks but it's not perfect. It can't "
                "distinguish between muscle mass and fat, so a very muscular person might have a high BMI.",
            ),
        ),
    ),
    (
        "Math & Science",
        (
            FaqEntry(
                "What is the difference between mass and weight?",
                "Mass is the amount of matter in an object and is constant everywhere (measured in kg). Weight "
                "is the force of gravity acting on that mass and can change depending on where you are (e.g., "
                "on the Moon). In everyday language, we often use the terms interchangeably.",
            ),
            FaqEntry(
                "Why can the modulo of a negative number be negative?",
                "Our modulo calculator uses truncating division, so the remainder always takes the sign of the "
                "dividend: -7 mod 3 is -1, while 7 mod -3 is 1.",
            ),
        ),
    ),
)
