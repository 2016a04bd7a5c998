# cringe_horoscope/roast.py
"""
Roast generator: template + pools + transforms + punchline, all from one seed.

Usage:
    from cringe_horoscope.roast import generate_roast
    generate_roast("leo", "today", 2, seed=1813347119)["text"]
"""

from __future__ import annotations

from typing import List

from loguru import logger

from cringe_horoscope.models import (
    CRINGE_LABELS,
    CringePreview,
    RoastResult,
    require_cringe,
    require_day,
    require_sign,
)
from cringe_horoscope.prng import MASK_32, PRNG
from cringe_horoscope.roast_transforms import apply_transforms
from cringe_horoscope.roast_voice import display_sign, roast_punchlines, select_template_and_fillers
from cringe_horoscope.seeds import djb2_hash

PREVIEW_SEED_STRIDE = 1000


def generate_roast(sign: str, day: str, cringe: int, seed: int) -> RoastResult:
    sign_key = require_sign(sign)
    require_day(day)
    level = require_cringe(cringe)

    prng = PRNG(seed)
    text = select_template_and_fillers(level, prng, sign_name=display_sign(sign_key))
    text = apply_transforms(text, level, prng)

    punchlines = roast_punchlines(level)
    if punchlines:
        text += " " + prng.choose(punchlines)

    logger.debug("[Roast] sign={} cringe={} seed={} len={}", sign_key, int(level), seed, len(text))
    return {"text": text}


def generate_cringe_preview(cringe: int, sign: str, samples: int = 3) -> CringePreview:
    """A few seeded samples for the mapping view. Same inputs, same samples."""
    level = require_cringe(cringe)
    sign_key = require_sign(sign)
    base = djb2_hash(f"{sign_key}|preview|{int(level)}")

    seeds: List[int] = []
    texts: List[str] = []
    for i in range(max(samples, 0)):
        seed = (base + i * PREVIEW_SEED_STRIDE) & MASK_32
        seeds.append(seed)
        texts.append(generate_roast(sign_key, "today", level, seed)["text"])

    return {
        "level": int(level),
        "label": CRINGE_LABELS[level],
        "sign": sign_key,
        "sample_texts": texts,
        "seeds": seeds,
    }
