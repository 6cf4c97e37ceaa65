from __future__ import annotations

from dataclasses import dataclass

from ...utils.number_format import round_value

METRIC = "metric"
IMPERIAL = "imperial"


@dataclass(frozen=True)
class BmiResult:
    bmi: float
    category: str


def bmi_category(bmi: float) -> str:
    # Thresholds (including the 24.9/29.9 gaps) match the published site.
    if bmi < 18.5:
        return "Underweight"
    if bmi < 24.9:
        return "Normal weight"
    if 25 <= bmi < 29.9:
        return "Overweight"
    return "Obesity"


def calculate_bmi(
    unit_system: str,
    *,
    height_cm: float | None = None,
    weight_kg: float | None = None,
    height_ft: float | None = None,
    height_in: float | None = None,
    weight_lbs: float | None = None,
) -> BmiResult:
    if unit_system == METRIC:
        if not height_cm or not weight_kg or height_cm <= 0 or weight_kg <= 0:
            raise ValueError("Height (cm) and weight (kg) are required.")
        height_m = height_cm / 100
        bmi = weight_kg / (height_m * height_m)
    elif unit_system == IMPERIAL:
        if not height_ft or not weight_lbs or height_ft <= 0 or weight_lbs <= 0:
            raise ValueError("Height (ft) and weight (lbs) are required.")
        total_inches = height_ft * 12 + (height_in or 0)
        bmi = weight_lbs / (total_inches * total_inches) * 703
    else:
        raise ValueError(f"Unknown unit system: {unit_system!r}")
    return BmiResult(bmi=round_value(bmi, 1), category=bmi_category(bmi))
