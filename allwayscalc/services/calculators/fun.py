"""
Entertainment calculators keyed on names and birth dates.

None of these are predictive. The constants (mod 101, the floor of 40, the
digit-sum rules) are product choices kept as-is so results stay stable for
visitors who come back with the same inputs.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from types import MappingProxyType

_NON_ALPHA = re.compile(r"[^a-z]")
LOVE_SCORE_MODULUS = 101
LOVE_SCORE_FLOOR = 40
MASTER_NUMBERS = (11, 22)


@dataclass(frozen=True)
class ZodiacSign:
    name: str
    start: tuple[int, int]
    end: tuple[int, int]
    symbol: str
    traits: str


@dataclass(frozen=True)
class NumerologyProfile:
    name: str
    traits: str
    keywords: str


@dataclass(frozen=True)
class LifePathResult:
    life_path_number: int
    profile: NumerologyProfile


ZODIAC_SIGNS = (
    ZodiacSign("Aries", (3, 21), (4, 19), "♈", "Ambitious, Independent, Impatient"),
    ZodiacSign("Taurus", (4, 20), (5, 20), "♉", "Dependable, Musical, Stubborn"),
    ZodiacSign("Gemini", (5, 21), (6, 20), "♊", "Curious, Adaptable, Indecisive"),
    ZodiacSign("Cancer", (6, 21), (7, 22), "♋", "Emotional, Imaginative, Moody"),
    ZodiacSign("Leo", (7, 23), (8, 22), "♌", "Creative, Passionate, Arrogant"),
    ZodiacSign("Virgo", (8, 23), (9, 22), "♍", "Loyal, Analytical, Overly Critical"),
    ZodiacSign("Libra", (9, 23), (10, 22), "♎", "Social, Fair-minded, Indecisive"),
    ZodiacSign("Scorpio", (10, 23), (11, 21), "♏", "Passionate, Brave, Jealous"),
    ZodiacSign("Sagittarius", (11, 22), (12, 21), "♐", "Generous, Idealistic, Promises more than can deliver"),
    ZodiacSign("Capricorn", (12, 22), (1, 19), "♑", "Responsible, Disciplined, Unforgiving"),
    ZodiacSign("Aquarius", (1, 20), (2, 18), "♒", "Progressive, Original, Aloof"),
    ZodiacSign("Pisces", (2, 19), (3, 20), "♓", "Compassionate, Artistic, Fearful"),
)

NUMEROLOGY_PROFILES = MappingProxyType({
    1: NumerologyProfile("The Leader", "Independent, pioneering, and a natural leader. Tends to be ambitious and self-reliant.", "Leadership, Independence, Innovation"),
    2: NumerologyProfile("The Diplomat", "Cooperative, sensitive, and a natural peacemaker. Values harmony and relationships.", "Cooperation, Harmony, Sensitivity"),
    3: NumerologyProfile("The Communicator", "Expressive, creative, and sociable. Enjoys communication and self-expression.", "Creativity, Communication, Joy"),
    4: NumerologyProfile("The Builder", "Practical, organized, and hardworking. Values stability, order, and discipline.", "Stability, Discipline, Hard Work"),
    5: NumerologyProfile("The Adventurer", "Loves freedom, adventure, and change. Adaptable, curious, and versatile.", "Freedom, Adventure, Change"),
    6: NumerologyProfile("The Nurturer", "Responsible, caring, and community-oriented. Seeks to serve and support others.", "Responsibility, Nurturing, Community"),
    7: NumerologyProfile("The Seeker", "Analytical, introspective, and spiritual. Seeks knowledge and truth.", "Analysis, Spirituality, Wisdom"),
    8: NumerologyProfile("The Powerhouse", "Ambitious, authoritative, and business-savvy. Strives for success and material achievement.", "Abundance, Power, Success"),
    9: NumerologyProfile("The Humanitarian", "Compassionate, idealistic, and generous. Has a broad vision for a better world.", "Compassion, Idealism, Humanitarianism"),
    11: NumerologyProfile("The Visionary", "Intuitive, charismatic, and idealistic. Possesses a heightened spiritual awareness and a desire to inspire.", "Intuition, Illumination, Vision"),
    22: NumerologyProfile("The Master Builder", "Combines the practicality of the 4 with the grand vision of the 11. Can turn dreams into reality.", "Vision, Pragmatism, Manifestation"),
})


def calculate_love_score(name1: str, name2: str) -> int:
    """Deterministic 40-100 "compatibility" score for two names."""
    combined = _NON_ALPHA.sub("", (name1 + name2).lower())
    char_sum = sum(ord(char) for char in combined)
    seed = len(name1) * len(name2)
    score = (char_sum + seed) % LOVE_SCORE_MODULUS
    return max(LOVE_SCORE_FLOOR, score)


def digit_sum(number: int) -> int:
    return sum(int(digit) for digit in str(abs(number)))


def digital_root(number: int) -> int:
    total = number
    while total > 9:
        total = digit_sum(total)
    return total


def get_lucky_number(birth_date: date) -> int:
    """Digital root of the digits of day, month and year written without padding."""
    date_digits = f"{birth_date.day}{birth_date.month}{birth_date.year}"
    return digital_root(sum(int(digit) for digit in date_digits))


def reduce_number(number: int) -> int:
    """Digit-sum down to one digit, stopping early on the master numbers 11 and 22."""
    if number in MASTER_NUMBERS:
        return number
    total = digit_sum(number)
    if total > 9 and total not in MASTER_NUMBERS:
        return reduce_number(total)
    return total


def get_life_path(birth_date: date) -> LifePathResult:
    life_path = reduce_number(
        reduce_number(birth_date.month) + reduce_number(birth_date.day) + reduce_number(birth_date.year)
    )
    return LifePathResult(life_path_number=life_path, profile=NUMEROLOGY_PROFILES[life_path])


def get_zodiac_sign(birth_date: date) -> ZodiacSign:
    month, day = birth_date.month, birth_date.day
    for sign in ZODIAC_SIGNS:
        start_month, start_day = sign.start
        end_month, end_day = sign.end
        if start_month == 12:
            if (month == 12 and day >= start_day) or (month == 1 and day <= end_day):
                return sign
        elif month == start_month and day >= start_day:
            return sign
        elif month == end_month and day <= end_day:
            return sign
        elif start_month < month < end_month:
            return sign
    raise ValueError(f"No zodiac sign covers {birth_date.isoformat()}")  # pragma: no cover
