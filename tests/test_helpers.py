from datetime import date

import pytest

from cringe_horoscope.composer import get_composition_stats
from cringe_horoscope.dates import resolve_date, validate_date_string
from cringe_horoscope.lucky import css_color, describe_lucky, is_light_color, text_color
from cringe_horoscope.models import (
    CringeLevel,
    InvalidInputError,
    require_cringe,
    require_day,
    require_mode,
    require_sign,
)


def test_resolve_date():
    assert resolve_date("yesterday", date(2025, 3, 1)) == "2025-02-28"
    assert resolve_date("today", date(2025, 3, 1)) == "2025-03-01"
    assert resolve_date("tomorrow", date(2024, 12, 31)) == "2025-01-01"
    with pytest.raises(InvalidInputError):
        resolve_date("someday", date(2025, 3, 1))


def test_validate_date_string():
    assert validate_date_string("2024-02-29") == "2024-02-29"
    for bad in ("2023-02-29", "2024-13-01", "24-02-01", 20250820, None):
        with pytest.raises(InvalidInputError):
            validate_date_string(bad)


def test_guards():
    assert require_cringe(CringeLevel.IRONIC) is CringeLevel.IRONIC
    assert require_cringe(3) == CringeLevel.CRINGE_HARD
    with pytest.raises(InvalidInputError):
        require_cringe(True)
    with pytest.raises(InvalidInputError):
        require_cringe(1.0)
    assert require_sign(" LEO ") == "leo"
    assert require_day("Today") == "today"
    assert require_mode("mix") == "mix"
    with pytest.raises(InvalidInputError):
        require_mode("Roast")


def test_css_color():
    assert css_color("Gold") == "#ffd700"
    assert css_color("#123456") == "#123456"
    assert css_color("mystery") == "#ffffff"


def test_light_and_text_colors():
    assert is_light_color("white")
    assert is_light_color("#fff")
    assert not is_light_color("black")
    assert not is_light_color("nonsense")
    assert text_color("navy") == "#ffffff"
    assert text_color("yellow") == "#000000"
    assert text_color("mystery") == "#000000"


def test_describe_lucky():
    assert describe_lucky({"text": "x"}) is None
    assert describe_lucky({"lucky_number": 7}) == {"number": 7}
    assert describe_lucky({"lucky_color": "navy", "lucky_number": 3}) == {
        "number": 3,
        "color": "navy",
        "css": "#000080",
        "text_color": "#ffffff",
    }


def test_zero_is_a_lucky_number():
    assert describe_lucky({"lucky_number": 0}) == {"number": 0}
    assert get_composition_stats({"text": "Hi.", "lucky_number": 0})["has_lucky_info"] is True
