# cringe_horoscope/composer.py
"""
Compose the final horoscope from an official text and a roast text.

- roast:    roast text as-is, no lucky info.
- official: official text run through the cringe transforms (same seed).
- mix:      official transformed at <= level 2, 1-2 sentences from each side,
            coin flip for order, punchline on levels 2-3.

Inputs are validated before any text is built, so a bad call never returns
a half-mixed string.
"""

from __future__ import annotations

import re
from typing import List, Mapping, Optional, Tuple

from loguru import logger

from cringe_horoscope.models import (
    ComposedResult,
    CompositionStats,
    CringeLevel,
    OfficialResult,
    RoastResult,
    require_cringe,
    require_mode,
)
from cringe_horoscope.prng import MASK_32, PRNG
from cringe_horoscope.roast_transforms import apply_transforms

# Mix-mode closers. Index = cringe level; levels 0-1 get none.
MIX_PUNCHLINES: Tuple[Optional[Tuple[str, ...]], ...] = (
    None,
    None,
    ("Just saying.", "You're welcome.", "Deal with it.", "That's the tea.", "No cap."),
    ("PERIOD.", "FACTS ONLY.", "THAT'S IT. THAT'S THE TWEET.", "MAIN CHARACTER ENERGY.", "ICONIC BEHAVIOR."),
)

# Level 3 mutations are kept for pure roast text
MIX_OFFICIAL_MAX_LEVEL = CringeLevel.SARCASTIC

_SENTENCE_RE = re.compile(r"[^.!?]+[.!?]*")
_SPLIT_RE = re.compile(r"[.!?]+")
_WORD_SPLIT_RE = re.compile(r"\s+")

_MODE_DESCRIPTIONS = {
    "official": "Official horoscope with cringe-level transforms",
    "roast": "Generated roast horoscope",
    "mix": "Mixed: Transformed official + Roast combination",
}

# ----------------------- SENTENCES -------------------- #
def _capitalize(sentence: str) -> str:
    return sentence[:1].upper() + sentence[1:]


def split_sentences(text: str) -> List[str]:
    """Trimmed, capitalised sentences with their terminators kept."""
    out: List[str] = []
    for chunk in _SENTENCE_RE.findall(text or ""):
        chunk = chunk.strip()
        if chunk and _SPLIT_RE.sub("", chunk).strip():
            out.append(_capitalize(chunk))
    return out


def normalize_official(text: str) -> List[str]:
    """Sentence list with terminators dropped."""
    parts = (p.strip() for p in _SPLIT_RE.split(text or ""))
    return [_capitalize(p) for p in parts if p]

# ----------------------- LUCKY ------------------------ #
def _lucky(official: Mapping) -> dict:
    out = {}
    if official.get("lucky_color") is not None:
        out["lucky_color"] = official["lucky_color"]
    if official.get("lucky_number") is not None:
        out["lucky_number"] = official["lucky_number"]
    return out

# ----------------------- MODES ------------------------ #
def _compose_official(official: OfficialResult, level: CringeLevel, seed: int) -> ComposedResult:
    text = apply_transforms(official.get("text", ""), level, PRNG(seed))
    return {"text": text, "source": "official", **_lucky(official)}


def _compose_roast(roast: RoastResult) -> ComposedResult:
    return {"text": roast.get("text", ""), "source": "roast"}


def _compose_mix(official: OfficialResult, roast: RoastResult, level: CringeLevel, seed: int) -> ComposedResult:
    official_level = min(level, MIX_OFFICIAL_MAX_LEVEL)
    transformed = apply_transforms(official.get("text", ""), official_level, PRNG(seed))

    official_sentences = split_sentences(transformed)
    roast_sentences = split_sentences(roast.get("text", ""))

    # separate stream so mixing picks don't track transform picks
    mixer = PRNG((seed + 1) & MASK_32)
    picked_official = official_sentences[: min(len(official_sentences), mixer.next_int(1, 2))]
    picked_roast = roast_sentences[: min(len(roast_sentences), mixer.next_int(1, 2))]

    if mixer.probability(0.5):
        sentences = picked_official + picked_roast
    else:
        sentences = picked_roast + picked_official

    closers = MIX_PUNCHLINES[level]
    if closers:
        sentences.append(mixer.choose(closers))

    text = " ".join(s for s in sentences if s.strip())
    return {"text": text, "source": "mix", **_lucky(official)}


def compose_result(
    mode: str,
    official: OfficialResult,
    roast: RoastResult,
    cringe: int,
    seed: int,
) -> ComposedResult:
    require_mode(mode)
    level = require_cringe(cringe)
    logger.debug("[Compose] mode={} cringe={} seed={}", mode, int(level), seed)

    if mode == "roast":
        return _compose_roast(roast)
    if mode == "official":
        return _compose_official(official, level, seed)
    return _compose_mix(official, roast, level, seed)

# ----------------------- DESCRIBE --------------------- #
def get_mode_description(mode: str) -> str:
    return _MODE_DESCRIPTIONS.get(mode, "Unknown mode")


def get_composition_stats(result: Mapping) -> CompositionStats:
    text = result.get("text", "") or ""
    sentences = [s for s in _SPLIT_RE.split(text) if s.strip()]
    words = [w for w in _WORD_SPLIT_RE.split(text) if w.strip()]
    return {
        "sentence_count": len(sentences),
        "word_count": len(words),
        "has_lucky_info": bool(result.get("lucky_color")) or result.get("lucky_number") is not None,
    }
