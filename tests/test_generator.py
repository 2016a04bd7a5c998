import asyncio
from datetime import date

import httpx
import pytest

from cringe_horoscope import generator
from cringe_horoscope.generator import generate_horoscope, pick_seed
from cringe_horoscope.models import InvalidInputError
from cringe_horoscope.official import FALLBACK_COLORS, FALLBACK_TEXT
from cringe_horoscope.prng import MASK_32, PRNG
from cringe_horoscope.roast import generate_roast
from cringe_horoscope.roast_transforms import apply_transforms

DAY = date(2025, 8, 20)


def _generate(handler, *args, **kwargs):
    async def go():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            return await generate_horoscope(*args, today=DAY, client=client, **kwargs)

    return asyncio.run(go())


def test_roast_mode_is_seeded_from_sign_date_level():
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(200, json=[{"description": "unused"}])

    result = _generate(handler, "aries", "today", "roast", 1)
    assert calls == []
    assert result["seed"] == 1813347119
    assert result["date"] == "2025-08-20"
    assert result["text"] == generate_roast("aries", "today", 1, 1813347119)["text"]
    assert result["source"] == "roast"
    assert result["deterministic"] is True
    assert result["official_fallback"] is False
    assert "lucky_color" not in result
    assert result["stats"]["has_lucky_info"] is False


def test_day_offsets():
    def handler(request):
        raise AssertionError("not needed")

    assert _generate(handler, "leo", "yesterday", "roast", 0)["date"] == "2025-08-19"
    assert _generate(handler, "leo", "tomorrow", "roast", 0)["date"] == "2025-08-21"


def test_official_mode_uses_provider():
    def handler(request):
        return httpx.Response(200, json=[{"description": "Stars are calm.", "color": "gold", "lucky_number": 8}])

    result = _generate(handler, "cancer", "today", "official", 0)
    assert result["text"] == "Stars are calm."
    assert result["lucky_color"] == "gold"
    assert result["lucky_number"] == 8
    assert result["official_fallback"] is False


def test_provider_failure_falls_back_deterministically():
    def handler(request):
        return httpx.Response(502)

    first = _generate(handler, "aries", "today", "official", 2)
    assert first == _generate(handler, "aries", "today", "official", 2)
    assert first["official_fallback"] is True
    assert first["lucky_color"] in FALLBACK_COLORS["today"]
    assert first["text"] == apply_transforms(FALLBACK_TEXT["today"]["aries"], 2, PRNG(first["seed"]))


def test_mix_mode():
    def handler(request):
        return httpx.Response(200, json=[{"description": "Good things come. Stay kind."}])

    result = _generate(handler, "libra", "today", "mix", 3)
    assert result["source"] == "mix"
    assert result["cringe"] == 3
    assert result["stats"]["sentence_count"] >= 2


def test_explicit_seed_wins():
    def handler(request):
        raise AssertionError("not needed")

    result = _generate(handler, "aries", "today", "roast", 1, seed=7)
    assert result["seed"] == 7
    assert result["deterministic"] is False
    assert _generate(handler, "aries", "today", "roast", 1, seed=-1)["seed"] == MASK_32


def test_random_seed_when_not_deterministic(monkeypatch):
    monkeypatch.setattr(generator, "generate_random_seed", lambda: 99)

    def handler(request):
        raise AssertionError("not needed")

    result = _generate(handler, "aries", "today", "roast", 1, deterministic=False)
    assert result["seed"] == 99
    assert result["deterministic"] is False


@pytest.mark.parametrize(
    "args",
    [
        ("ophiuchus", "today", "roast", 1),
        ("aries", "next week", "roast", 1),
        ("aries", "today", "remix", 1),
        ("aries", "today", "roast", 4),
    ],
)
def test_bad_input_raises_before_any_fetch(args):
    def handler(request):
        raise AssertionError("provider should not be called")

    with pytest.raises(InvalidInputError):
        _generate(handler, *args)


def test_pick_seed():
    assert pick_seed("aries", "2025-08-20", 1, deterministic=True) == 1813347119
    assert pick_seed("aries", "2025-08-20", 1, deterministic=True, seed=2**32 + 3) == 3
    with pytest.raises(InvalidInputError):
        pick_seed("aries", "2025-08-20", 1, deterministic=True, seed="12")
