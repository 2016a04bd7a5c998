# cringe_horoscope/roast_transforms.py
"""
Cringe transforms: probability-gated text mutations, stronger per level.

- Level 0 leaves text alone.
- Level 1 hedges and nudges one emoji.
- Level 2 adds sPoNgE case, hyperbole, slang interjections, emoji flourishes.
- Level 3 stretches vowels, piles on slang, rewrites adjectives in CAPS.

Order inside each level is fixed. Every gate and pick draws from the shared
PRNG, so reordering steps changes output for the same seed.
"""

from __future__ import annotations

import re
from typing import Callable, List, Sequence, Tuple

from cringe_horoscope.models import require_cringe
from cringe_horoscope.prng import PRNG

# ----------------------- TABLES ----------------------- #
HEDGES: Tuple[str, ...] = (
    "(you know what I mean)",
    "(or so the stars claim)",
    "(no pressure though)",
    "(allegedly)",
)

# One-step upgrades. Fixed glyphs, never random ones.
EMOJI_UPGRADES = {
    "😊": "😊✨",
    "🌟": "🌟💫",
    "💫": "💫✨",
    "🌸": "🌸🌷",
    "✨": "✨🌟",
    "😏": "😏👑",
    "🙄": "🙄💅",
    "😉": "😉😏",
    "😎": "😎🕶️",
    "🤷‍♀️": "🤷‍♀️💁‍♀️",
    "💀": "💀☠️",
    "🔥": "🔥🔥",
    "😈": "😈👿",
    "💣": "💣💥",
    "⚡": "⚡🌩️",
    "🤡": "🤡🎪",
    "💥": "💥💣",
    "🌪️": "🌪️🌀",
    "👹": "👹👺",
    "🎭": "🎭🎪",
}

FLOURISHES_SARCASTIC: Tuple[str, ...] = ("👑", "💅", "✨", "😌")
FLOURISHES_CRINGE: Tuple[str, ...] = ("🎪", "💥", "⚡", "🌪️", "💯", "🤩", "👑")

SLANG_SARCASTIC: Tuple[str, ...] = ("OMG", "LITERALLY", "ngl", "tbh", "lowkey", "periodt")
SLANG_CRINGE: Tuple[str, ...] = ("FR FR", "NO CAP", "BESTIE", "IT'S GIVING", "SLAY", "PERIODT", "OMG")

HYPERBOLE_MILD: Tuple[Tuple[str, str], ...] = (
    ("very", "INCREDIBLY"),
    ("really", "ABSOLUTELY"),
    ("quite", "TOTALLY"),
    ("pretty", "RIDICULOUSLY"),
    ("good", "AMAZING"),
    ("great", "PHENOMENAL"),
    ("bad", "TERRIBLE"),
    ("small", "MICROSCOPIC"),
    ("big", "GIGANTIC"),
)

HYPERBOLE_INTENSE: Tuple[Tuple[str, str], ...] = (
    ("very", "EXTREMELY"),
    ("really", "ABSOLUTELY"),
    ("quite", "INCREDIBLY"),
    ("pretty", "RIDICULOUSLY"),
    ("good", "AMAZING"),
    ("bad", "TERRIBLE"),
    ("big", "HUGE"),
    ("small", "TINY"),
    ("nice", "FANTASTIC"),
    ("great", "PHENOMENAL"),
    ("okay", "MIND-BLOWING"),
    ("fine", "SPECTACULAR"),
    ("bold", "UNHINGED"),
    ("new", "BRAND-NEW"),
    ("everything", "ABSOLUTELY EVERYTHING"),
)

# Gate probabilities
P_HEDGE = 0.10
P_EMOJI_L1 = 0.15
P_CAPS_L2 = 0.20
P_INTERJECT_L2 = 0.25
P_EMOJI_L2 = 0.30
P_ELONGATE_L3 = 0.40
P_CAPS_L3 = 0.35
P_HYPERBOLE_L3 = 0.30
P_INTERJECT_L3 = 0.40
P_EMOJI_L3 = 0.50
P_FLOURISH = 0.40

# ----------------------- REGEXES ---------------------- #
_MIXED_CASE_RE = re.compile(r"[A-Z].*[a-z].*[A-Z]")
_ELONGATED_RE = re.compile(r"([aeiou])\1{2,}", re.I)
_VOWEL_RE = re.compile(r"[aeiou]", re.I)
_SENTENCE_END_RE = re.compile(r"[.!?]")


def _word_re(word: str) -> re.Pattern:
    return re.compile(rf"\b{re.escape(word)}\b", re.I)


_MILD_PATTERNS = [(_word_re(w), repl) for w, repl in HYPERBOLE_MILD]
_INTENSE_PATTERNS = [(_word_re(w), repl) for w, repl in HYPERBOLE_INTENSE]

# ----------------------- WORD-LEVEL MUTATIONS --------- #
def alternate_case(word: str) -> str:
    """amazing -> aMaZiNg (letters only; position decides the case)."""
    out = []
    for i, ch in enumerate(word):
        if ch.isalpha():
            out.append(ch.upper() if i % 2 else ch.lower())
        else:
            out.append(ch)
    return "".join(out)


def alternate_case_words(text: str, count: int, prng: PRNG) -> str:
    words = text.split(" ")
    for _ in range(min(count, len(words))):
        idx = prng.next_int(0, len(words) - 1)
        word = words[idx]
        if len(word) < 3 or _MIXED_CASE_RE.search(word):
            continue
        words[idx] = alternate_case(word)
    return " ".join(words)


def elongate_vowels(text: str, count: int, prng: PRNG) -> str:
    """good -> goooood, on `count` random words."""
    words = text.split(" ")
    for _ in range(min(count, len(words))):
        idx = prng.next_int(0, len(words) - 1)
        word = words[idx]
        if len(word) < 3 or _ELONGATED_RE.search(word):
            continue
        spots = [m.start() for m in _VOWEL_RE.finditer(word)]
        if not spots:
            continue
        pos = prng.choose(spots)
        extra = prng.next_int(3, 5)
        words[idx] = word[: pos + 1] + word[pos] * extra + word[pos + 1 :]
    return " ".join(words)

# ----------------------- TEXT-LEVEL MUTATIONS --------- #
def add_hedge(text: str, prng: PRNG) -> str:
    return f"{text} {prng.choose(HEDGES)}"


def hyperbole_once(text: str) -> str:
    """First matching map entry wins; one occurrence replaced."""
    for pat, repl in _MILD_PATTERNS:
        if pat.search(text):
            return pat.sub(repl, text, count=1)
    return text


def hyperbole_storm(text: str, prng: PRNG) -> str:
    """Every entry present in the text gets its own 30% roll."""
    for pat, repl in _INTENSE_PATTERNS:
        if pat.search(text) and prng.probability(P_HYPERBOLE_L3):
            text = pat.sub(repl, text)
    return text


def insert_interjection(text: str, slang: Sequence[str], prng: PRNG) -> str:
    """Prefix the text, or splice in right before the first . ! or ?"""
    token = prng.choose(slang)
    at_start = prng.probability(0.5)
    m = _SENTENCE_END_RE.search(text)
    if at_start or not m:
        return f"{token}, {text}"
    return f"{text[:m.start()]}, {token}{text[m.start():]}"


def upgrade_emoji(text: str) -> Tuple[str, int]:
    """
    Upgrade the earliest known emoji in the text (longest key wins a tie).
    Returns (text, index just past the upgraded glyph) or (text, -1).
    """
    best_at, best_key = -1, ""
    for key in EMOJI_UPGRADES:
        at = text.find(key)
        if at < 0:
            continue
        if best_at < 0 or at < best_at or (at == best_at and len(key) > len(best_key)):
            best_at, best_key = at, key
    if best_at < 0:
        return text, -1
    upgraded = EMOJI_UPGRADES[best_key]
    text = text[:best_at] + upgraded + text[best_at + len(best_key):]
    return text, best_at + len(upgraded)


def add_flourishes(text: str, anchor: int, count: int, pool: Sequence[str], prng: PRNG) -> str:
    extras: List[str] = []
    for _ in range(count):
        if prng.probability(P_FLOURISH):
            extras.append(prng.choose(pool))
    if not extras:
        return text
    burst = "".join(extras)
    if anchor >= 0:
        return text[:anchor] + burst + text[anchor:]
    return f"{text} {burst}"

# ----------------------- LEVEL PIPELINES -------------- #
def _gentle(text: str, prng: PRNG) -> str:
    return text


def _ironic(text: str, prng: PRNG) -> str:
    if prng.probability(P_HEDGE):
        text = add_hedge(text, prng)
    if prng.probability(P_EMOJI_L1):
        text, _ = upgrade_emoji(text)
    return text


def _sarcastic(text: str, prng: PRNG) -> str:
    if prng.probability(P_CAPS_L2):
        text = alternate_case_words(text, 1, prng)
    text = hyperbole_once(text)
    if prng.probability(P_INTERJECT_L2):
        text = insert_interjection(text, SLANG_SARCASTIC, prng)
    if prng.probability(P_EMOJI_L2):
        text, anchor = upgrade_emoji(text)
        text = add_flourishes(text, anchor, 2, FLOURISHES_SARCASTIC, prng)
    return text


def _cringe_hard(text: str, prng: PRNG) -> str:
    if prng.probability(P_ELONGATE_L3):
        text = elongate_vowels(text, prng.next_int(2, 3), prng)
    if prng.probability(P_CAPS_L3):
        text = alternate_case_words(text, prng.next_int(2, 3), prng)
    text = hyperbole_storm(text, prng)
    if prng.probability(P_INTERJECT_L3):
        for _ in range(2):
            text = insert_interjection(text, SLANG_CRINGE, prng)
    anchor = -1
    if prng.probability(P_EMOJI_L3):
        text, anchor = upgrade_emoji(text)
    return add_flourishes(text, anchor, 3, FLOURISHES_CRINGE, prng)


# Dense, indexed by cringe level
_PIPELINES: Tuple[Callable[[str, PRNG], str], ...] = (_gentle, _ironic, _sarcastic, _cringe_hard)


def apply_transforms(text: str, cringe: int, prng: PRNG) -> str:
    level = require_cringe(cringe)
    if not (text or "").strip():
        return text or ""
    return _PIPELINES[level](text, prng)
