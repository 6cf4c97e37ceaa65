"""Stateless calculator formulas. Inputs are validated by the form layer first."""

from .arithmetic import (
    calculate_lcm_hcf,
    calculate_modulo,
    calculate_percentage,
    calculate_percentage_change,
    parse_integer_list,
)
from .finance import (
    calculate_compound_interest,
    calculate_discount,
    calculate_gst,
    calculate_loan_emi,
    calculate_simple_interest,
    calculate_sip,
    calculate_tip,
)
from .fun import (
    calculate_love_score,
    digital_root,
    get_life_path,
    get_lucky_number,
    get_zodiac_sign,
)
from .health import calculate_bmi
from .travel import calculate_fuel_cost, estimate_travel_time, solve_speed_distance_time

__all__ = [
    "calculate_bmi",
    "calculate_compound_interest",
    "calculate_discount",
    "calculate_fuel_cost",
    "calculate_gst",
    "calculate_lcm_hcf",
    "calculate_loan_emi",
    "calculate_love_score",
    "calculate_modulo",
    "calculate_percentage",
    "calculate_percentage_change",
    "calculate_simple_interest",
    "calculate_sip",
    "calculate_tip",
    "digital_root",
    "estimate_travel_time",
    "get_life_path",
    "get_lucky_number",
    "get_zodiac_sign",
    "parse_integer_list",
    "solve_speed_distance_time",
]
