# cringe_horoscope/generator.py
"""
One horoscope request end to end.

  0) Validate everything up front
  1) Resolve the calendar date + seed
  2) Roast from the seed
  3) Official text (only when the mode needs it), fallback on provider trouble
  4) Compose + stats

Every call builds its own PRNGs. Nothing random lives at module level.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional

import httpx
from loguru import logger

from cringe_horoscope.composer import compose_result, get_composition_stats
from cringe_horoscope.dates import resolve_date
from cringe_horoscope.models import (
    InvalidInputError,
    OfficialResult,
    require_cringe,
    require_day,
    require_mode,
    require_sign,
)
from cringe_horoscope.official import get_official
from cringe_horoscope.prng import MASK_32, PRNG
from cringe_horoscope.roast import generate_roast
from cringe_horoscope.seeds import generate_deterministic_seed, generate_random_seed

# Fallback lucky picks get their own stream so they never shift roast/compose draws
FALLBACK_STREAM_SALT = 0x9E3779B9

_MODES_NEEDING_OFFICIAL = ("official", "mix")


def pick_seed(sign: str, date_str: str, cringe: int, *, deterministic: bool, seed: Optional[int] = None) -> int:
    if seed is not None:
        if isinstance(seed, bool) or not isinstance(seed, int):
            raise InvalidInputError(f"seed must be an int, got {type(seed).__name__}")
        return seed & MASK_32
    if deterministic:
        return generate_deterministic_seed(sign, date_str, cringe)
    return generate_random_seed()


async def generate_horoscope(
    sign: str,
    day: str,
    mode: str,
    cringe: int,
    *,
    deterministic: bool = True,
    seed: Optional[int] = None,
    today: Optional[date] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> Dict[str, Any]:
    # 0) Validate -----------------------------------------------------------------
    sign_key = require_sign(sign)
    day_key = require_day(day)
    require_mode(mode)
    level = require_cringe(cringe)

    # 1) Date + seed --------------------------------------------------------------
    date_str = resolve_date(day_key, today)
    seed_val = pick_seed(sign_key, date_str, level, deterministic=deterministic, seed=seed)
    logger.info(
        "[Generate] sign={} day={} date={} mode={} cringe={} deterministic={} seed={}",
        sign_key, day_key, date_str, mode, int(level), deterministic, seed_val,
    )

    # 2) Roast --------------------------------------------------------------------
    roast = generate_roast(sign_key, day_key, level, seed_val)

    # 3) Official -----------------------------------------------------------------
    official: OfficialResult = {"text": ""}
    used_fallback = False
    if mode in _MODES_NEEDING_OFFICIAL:
        official, used_fallback = await get_official(
            sign_key,
            day_key,
            client=client,
            prng=PRNG(seed_val ^ FALLBACK_STREAM_SALT),
        )

    # 4) Compose ------------------------------------------------------------------
    result = compose_result(mode, official, roast, level, seed_val)

    return {
        **result,
        "sign": sign_key,
        "day": day_key,
        "date": date_str,
        "mode": mode,
        "cringe": int(level),
        "seed": seed_val,
        "deterministic": seed is None and deterministic,
        "official_fallback": used_fallback,
        "stats": get_composition_stats(result),
    }
