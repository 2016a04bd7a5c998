# cringe_horoscope/models.py
"""
Shared shapes + guards for the horoscope core.

- Literal aliases for signs, days and modes.
- CringeLevel is the dense index into every pool and transform table.
- Result records are plain dicts (TypedDict); optional lucky keys are left
  out entirely rather than set to None.
- InvalidInputError is the one error callers should expect for bad input.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Dict, List, Literal, Tuple, TypedDict

# =========================
# Literals & constants
# =========================
ZodiacSign = Literal[
    "aries", "taurus", "gemini", "cancer", "leo", "virgo",
    "libra", "scorpio", "sagittarius", "capricorn", "aquarius", "pisces",
]
Day = Literal["yesterday", "today", "tomorrow"]
Mode = Literal["official", "roast", "mix"]
Source = Literal["official", "roast", "mix"]

ZODIAC_SIGNS: Tuple[str, ...] = (
    "aries", "taurus", "gemini", "cancer", "leo", "virgo",
    "libra", "scorpio", "sagittarius", "capricorn", "aquarius", "pisces",
)
DAYS: Tuple[str, ...] = ("yesterday", "today", "tomorrow")
MODES: Tuple[str, ...] = ("official", "roast", "mix")


class CringeLevel(IntEnum):
    GENTLE = 0
    IRONIC = 1
    SARCASTIC = 2
    CRINGE_HARD = 3


CRINGE_LABELS: Dict[int, str] = {
    CringeLevel.GENTLE: "Gentle",
    CringeLevel.IRONIC: "Ironic",
    CringeLevel.SARCASTIC: "Sarcastic",
    CringeLevel.CRINGE_HARD: "Cringe Hard",
}

# =========================
# Records
# =========================
class RoastResult(TypedDict):
    text: str


class OfficialResult(TypedDict, total=False):
    text: str
    lucky_color: str
    lucky_number: int


class ComposedResult(TypedDict, total=False):
    text: str
    source: Source
    lucky_color: str
    lucky_number: int


class AvailableOptions(TypedDict, total=False):
    moods: List[str]
    work_situations: List[str]
    love_situations: List[str]
    tips: List[str]
    emojis: List[str]
    punchlines: List[str]


class CringeMapping(TypedDict):
    level: int
    label: str
    description: str
    transform_features: List[str]
    available_options: AvailableOptions


class CringePreview(TypedDict):
    level: int
    label: str
    sign: str
    sample_texts: List[str]
    seeds: List[int]


class CompositionStats(TypedDict):
    sentence_count: int
    word_count: int
    has_lucky_info: bool

# =========================
# Errors + boundary guards
# =========================
class InvalidInputError(ValueError):
    """Bad caller input (mode, sign, day, cringe level, date). Never coerced."""


def require_cringe(value: Any) -> CringeLevel:
    # bool is an int subclass; True must not sneak in as level 1
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(f"Invalid cringe level: {value!r}. Expected 0-3")
    if not 0 <= value <= 3:
        raise InvalidInputError(f"Invalid cringe level: {value}. Expected 0-3")
    return CringeLevel(value)


def require_sign(value: Any) -> str:
    sign = str(value or "").strip().lower()
    if sign not in ZODIAC_SIGNS:
        raise InvalidInputError(f"Invalid zodiac sign: {value!r}")
    return sign


def require_day(value: Any) -> str:
    day = str(value or "").strip().lower()
    if day not in DAYS:
        raise InvalidInputError(f"Invalid day: {value!r}. Expected one of {', '.join(DAYS)}")
    return day


def require_mode(value: Any) -> str:
    if value not in MODES:
        raise InvalidInputError(f"Unknown mode: {value!r}")
    return value
