# cringe_horoscope/official.py
"""
Official horoscope provider + static fallback.

- fetch_official(): one POST to the provider, returns an OfficialResult or raises.
- fallback_official(): pre-written text per day/sign, lucky picks from day sets.
- get_official(): what callers use. Never raises for provider trouble;
  swaps in the fallback and logs why.
"""

from __future__ import annotations

import os
from typing import Any, Dict, Optional, Tuple

import httpx
from loguru import logger

from cringe_horoscope.models import OfficialResult, require_day, require_sign
from cringe_horoscope.prng import PRNG
from cringe_horoscope.seeds import generate_random_seed

# ---------- Env / defaults ----------
HOROSCOPE_API_URL = os.getenv("HOROSCOPE_API_URL", "https://api.aistrology.beandev.xyz/v1").strip()
HOROSCOPE_API_TIMEOUT_SEC = float(os.getenv("HOROSCOPE_API_TIMEOUT_SEC", "10"))


class OfficialUnavailable(RuntimeError):
    """Provider answered, but not with anything we can use."""

# ---------- Fallback copy ----------
FALLBACK_TEXT: Dict[str, Dict[str, str]] = {
    "yesterday": {
        "aries": "Yesterday's bold moves set the stage for future success. Your courage opened doors that were previously closed.",
        "taurus": "The patience you showed yesterday has planted seeds that will bloom soon. Your steady approach paid off.",
        "gemini": "Yesterday's conversations created lasting connections. Your words had more impact than you realized.",
        "cancer": "The emotional insights you gained yesterday will guide your relationships moving forward.",
        "leo": "Your leadership yesterday inspired others in ways you may not have noticed. The ripple effects continue.",
        "virgo": "The details you attended to yesterday prevented bigger problems today. Your diligence was worthwhile.",
        "libra": "The balance you sought yesterday brought harmony to your surroundings. Peace was your gift to others.",
        "scorpio": "Yesterday's transformation deepened your understanding of yourself. The change was necessary and powerful.",
        "sagittarius": "The adventure you embraced yesterday expanded your horizons in unexpected ways.",
        "capricorn": "Yesterday's hard work laid a solid foundation for the challenges ahead. Your effort was an investment.",
        "aquarius": "The innovative thinking you displayed yesterday sparked new possibilities for the future.",
        "pisces": "Yesterday's creative expressions touched hearts and opened minds. Your imagination was a healing force.",
    },
    "today": {
        "aries": "Your fiery energy will guide you through today's challenges. Take bold action but remember to think before you leap.",
        "taurus": "Stability and patience will be your allies today. Trust in your practical nature to make the right decisions.",
        "gemini": "Communication is key today. Your versatility will help you adapt to changing circumstances with ease.",
        "cancer": "Trust your intuition and nurture the relationships that matter most to you. Home brings comfort today.",
        "leo": "Your natural leadership shines bright today. Share your generous spirit with others and watch magic happen.",
        "virgo": "Attention to detail will serve you well today. Your analytical mind sees solutions others might miss.",
        "libra": "Balance and harmony guide your path today. Your diplomatic nature helps resolve conflicts around you.",
        "scorpio": "Deep transformation awaits you today. Trust your instincts and embrace the power of change.",
        "sagittarius": "Adventure calls to your spirit today. Your optimism and wisdom will inspire those around you.",
        "capricorn": "Discipline and determination lead you to success today. Your ambitious nature pays dividends.",
        "aquarius": "Innovation and independence mark your day. Your unique perspective brings fresh solutions to old problems.",
        "pisces": "Creativity and compassion flow through you today. Trust your dreams and let your imagination soar.",
    },
    "tomorrow": {
        "aries": "Tomorrow brings opportunities for leadership that will test your courage. Prepare to step into your power.",
        "taurus": "A steady approach tomorrow will yield results that surprise even you. Trust in your methodical nature.",
        "gemini": "Tomorrow's conversations will open doors to new possibilities. Your words will carry special weight.",
        "cancer": "Emotional clarity awaits you tomorrow. Trust the feelings that guide you toward meaningful connections.",
        "leo": "Tomorrow you'll shine in ways that inspire others to find their own light. Your presence will be a gift.",
        "virgo": "The attention to detail you bring tomorrow will solve a puzzle that has long confused others.",
        "libra": "Tomorrow brings a chance to create harmony where there has been discord. Your diplomatic skills are needed.",
        "scorpio": "A powerful transformation begins tomorrow. Embrace the changes that will ultimately strengthen you.",
        "sagittarius": "Tomorrow's journey will take you further than you expect. Pack light but bring your curiosity.",
        "capricorn": "Tomorrow's challenges require the discipline you've been building. Your preparation will pay off.",
        "aquarius": "Tomorrow brings a breakthrough that changes your perspective. Your innovative mind will see the way forward.",
        "pisces": "Tomorrow your intuition will guide you to exactly where you need to be. Trust the flow of events.",
    },
}

FALLBACK_COLORS: Dict[str, Tuple[str, ...]] = {
    "yesterday": ("slate gray", "bronze", "mahogany", "navy", "purple"),
    "today": ("blue", "red", "green", "purple", "orange", "pink", "yellow", "indigo"),
    "tomorrow": ("gold", "amber", "jade-green", "amethyst", "lavender", "sea green"),
}

FALLBACK_NUMBERS: Dict[str, Tuple[int, ...]] = {
    "yesterday": (1, 3, 5, 7, 9, 11, 13),
    "today": (1, 3, 7, 9, 11, 13, 17, 21, 23, 27),
    "tomorrow": (8, 12, 16, 18, 22, 24, 28, 30, 33, 36),
}

# ---------- helpers ----------
def _first_item(payload: Any) -> Dict[str, Any]:
    if isinstance(payload, list):
        payload = payload[0] if payload else {}
    if not isinstance(payload, dict):
        raise OfficialUnavailable(f"unexpected payload type {type(payload).__name__}")
    return payload


def _to_official(item: Dict[str, Any]) -> OfficialResult:
    text = str(item.get("description") or "").strip()
    if not text:
        raise OfficialUnavailable("provider returned no description")
    out: OfficialResult = {"text": text}
    color = str(item.get("color") or "").strip()
    if color:
        out["lucky_color"] = color
    number = item.get("lucky_number")
    if isinstance(number, float) and not number.is_integer():
        logger.warning("[Official] ignoring fractional lucky_number={!r}", number)
        return out
    try:
        if number is not None and str(number).strip() != "":
            out["lucky_number"] = int(number)
    except (TypeError, ValueError):
        logger.warning("[Official] ignoring non-numeric lucky_number={!r}", number)
    return out

# ---------- Public API ----------
async def fetch_official(sign: str, day: str, *, client: Optional[httpx.AsyncClient] = None) -> OfficialResult:
    """
    POST {HOROSCOPE_API_URL}?sign=..&day=.. and normalize the first item.
    Raises httpx errors / OfficialUnavailable; callers decide what to do.
    """
    sign_key = require_sign(sign)
    day_key = require_day(day)
    params = {"sign": sign_key, "day": day_key}
    headers = {"Content-Type": "application/x-www-form-urlencoded"}

    if client is None:
        async with httpx.AsyncClient(timeout=HOROSCOPE_API_TIMEOUT_SEC) as own:
            r = await own.post(HOROSCOPE_API_URL, params=params, headers=headers)
    else:
        r = await client.post(HOROSCOPE_API_URL, params=params, headers=headers)
    r.raise_for_status()

    result = _to_official(_first_item(r.json()))
    logger.info("[Official] fetched sign={} day={} chars={}", sign_key, day_key, len(result["text"]))
    return result


def fallback_official(sign: str, day: str, prng: Optional[PRNG] = None) -> OfficialResult:
    sign_key = require_sign(sign)
    day_key = require_day(day)
    rng = prng if prng is not None else PRNG(generate_random_seed())
    return {
        "text": FALLBACK_TEXT[day_key][sign_key],
        "lucky_color": rng.choose(FALLBACK_COLORS[day_key]),
        "lucky_number": rng.choose(FALLBACK_NUMBERS[day_key]),
    }


async def get_official(
    sign: str,
    day: str,
    *,
    client: Optional[httpx.AsyncClient] = None,
    prng: Optional[PRNG] = None,
) -> Tuple[OfficialResult, bool]:
    """Returns (official, used_fallback)."""
    # bad input is the caller's problem, not the provider's
    sign_key = require_sign(sign)
    day_key = require_day(day)
    try:
        return await fetch_official(sign_key, day_key, client=client), False
    except (httpx.HTTPError, OfficialUnavailable, ValueError) as e:
        # ValueError covers undecodable JSON bodies
        logger.warning("[Official] provider failed for sign={} day={}: {}; using fallback", sign_key, day_key, e)
        return fallback_official(sign_key, day_key, prng), True
