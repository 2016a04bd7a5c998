# cringe_horoscope/seeds.py
"""
Seed derivation.

Deterministic path: abs(djb2_32("{sign}|{YYYY-MM-DD}|{cringe}")). This formula
is what makes results shareable, so it has to stay bit exact.
Random path: secure 32-bit draw, with a non-crypto fallback. Not reproducible.
"""

from __future__ import annotations

import random
import secrets
from typing import Any

from loguru import logger

from cringe_horoscope.dates import validate_date_string
from cringe_horoscope.models import require_cringe, require_sign
from cringe_horoscope.prng import MASK_32

DJB2_START = 5381


def djb2_hash(text: str) -> int:
    """
    DJB2 over UTF-16 code units (hash*33 + unit, wrapping at 32 bits),
    read back as a signed int32 and made non-negative.
    """
    h = DJB2_START
    raw = (text or "").encode("utf-16-le")
    for i in range(0, len(raw), 2):
        unit = raw[i] | (raw[i + 1] << 8)
        h = (h * 33 + unit) & MASK_32
    if h >= 0x80000000:
        h -= 0x100000000
    return abs(h)


def validate_seed_params(sign: Any, date: Any, cringe: Any) -> bool:
    require_sign(sign)
    validate_date_string(date)
    require_cringe(cringe)
    return True


def generate_deterministic_seed(sign: str, date: str, cringe: int) -> int:
    sign_key = require_sign(sign)
    date_key = validate_date_string(date)
    level = require_cringe(cringe)
    seed = djb2_hash(f"{sign_key}|{date_key}|{int(level)}")
    logger.debug("[Seed] deterministic {}|{}|{} -> {}", sign_key, date_key, int(level), seed)
    return seed


def generate_random_seed() -> int:
    try:
        return secrets.randbits(32)
    except (NotImplementedError, OSError) as e:
        # no OS entropy source; this path is never reproducible anyway
        logger.warning("[Seed] secure random unavailable ({}), using random.getrandbits", e)
        return random.getrandbits(32)
