"""Trip calculators: fuel cost, travel time and speed/distance/time."""

from __future__ import annotations

from dataclasses import dataclass

SOLVE_FOR_UNITS = {
    "distance": "km",
    "speed": "km/h",
    "time": "hours",
}


@dataclass(frozen=True)
class FuelCostResult:
    fuel_needed: float
    total_cost: float


@dataclass(frozen=True)
class TravelTimeResult:
    time_in_hours: float


@dataclass(frozen=True)
class SpeedDistanceTimeResult:
    solve_for: str
    value: float
    unit: str


def calculate_fuel_cost(distance: float, efficiency: float, fuel_price: float) -> FuelCostResult:
    """Fuel for ``distance`` km at ``efficiency`` km/L and its cost at ``fuel_price`` per liter."""
    if efficiency <= 0:
        raise ValueError("Fuel efficiency must be positive.")
    fuel_needed = distance / efficiency
    return FuelCostResult(fuel_needed=fuel_needed, total_cost=fuel_needed * fuel_price)


def estimate_travel_time(distance: float, speed: float) -> TravelTimeResult:
    if speed <= 0:
        raise ValueError("Average speed must be positive.")
    return TravelTimeResult(time_in_hours=distance / speed)


def solve_speed_distance_time(
    solve_for: str,
    *,
    speed: float | None = None,
    distance: float | None = None,
    time: float | None = None,
) -> SpeedDistanceTimeResult:
    """Solve ``distance = speed * time`` for the requested variable."""
    if solve_for == "distance":
        if speed is None or time is None:
            raise ValueError("Speed and time are required to solve for distance.")
        value = speed * time
    elif solve_for == "speed":
        if distance is None or time is None:
            raise ValueError("Distance and time are required to solve for speed.")
        if time == 0:
            raise ValueError("Time cannot be zero.")
        value = distance / time
    elif solve_for == "time":
        if distance is None or speed is None:
            raise ValueError("Distance and speed are required to solve for time.")
        if speed == 0:
            raise ValueError("Speed cannot be zero.")
        value = distance / speed
    else:
        raise ValueError(f"Cannot solve for {solve_for!r}.")
    return SpeedDistanceTimeResult(solve_for=solve_for, value=value, unit=SOLVE_FOR_UNITS[solve_for])
