# cringe_horoscope/roast_voice.py
"""
The comedic DNA of the roast horoscope: templates, per-level content pools,
punchlines, and the template filler.

Every pool is a 4-tuple indexed by cringe level (0 Gentle .. 3 Cringe Hard).
Order inside a pool matters: selection is by PRNG-drawn index, so reordering
entries changes every seeded result.
"""

from __future__ import annotations

import re
from typing import Dict, List, Optional, Tuple

from cringe_horoscope.models import (
    CRINGE_LABELS,
    AvailableOptions,
    CringeMapping,
    require_cringe,
)
from cringe_horoscope.prng import PRNG

Pool = Tuple[str, ...]

# ----------------------------
# ✨ Templates
# ----------------------------

TEMPLATES: Pool = (
    "Today {sign} will feel {mood}. At work: {work}. In love: {love}. Advice: {tip} {emoji}",
    "{sign}, get ready! {mood} awaits you. Work brings {work}. Daily wisdom: {tip} {emoji}",
    "Dear {sign}, {mood} is your everything today. {work} at work. Don't forget: {tip} {emoji}",
    "Hey {sign}! {mood} is knocking at your door. Workday: {work}. Wisdom of the day: {tip} {emoji}",
)

# ----------------------------
# ✨ Content pools by cringe level
# ----------------------------

MOODS: Tuple[Pool, ...] = (
    (
        "mild anxiety", "pleasant surprise", "calm confidence",
        "gentle determination", "quiet joy",
    ),
    (
        "ironic mood", "light skepticism", "playful doubt",
        "sarcastic smile", "condescending patience",
    ),
    (
        "malicious grin", "spiteful pleasure", "caustic righteousness",
        "premium sarcasm", "cynical wisdom",
    ),
    (
        "ABSOLUTE CHAOS in your soul", "CRINGE EUPHORIA", "TOXIC POSITIVITY",
        "DESTRUCTIVE ENERGY", "INSANE confidence in being right",
    ),
)

WORK_SITUATIONS: Tuple[Pool, ...] = (
    (
        "steady progress", "small successes", "productive collaboration",
        "useful meetings", "constructive solutions",
    ),
    (
        "another pointless meeting", "simulation of busy activity",
        "diplomatic conflict avoidance", "creative procrastination",
    ),
    (
        "theater of the absurd", "circus with horses", "parade of ambitions",
        "festival of incompetence", "carnival of office politics",
    ),
    (
        "EPIC SYSTEM MELTDOWN", "REVOLUTION AGAINST COMMON SENSE",
        "CHAOTIC DANCE OF DEADLINES", "MADNESS OF CORPORATE CULTURE",
    ),
)

LOVE_SITUATIONS: Tuple[Pool, ...] = (
    (
        "harmony in relationships", "mutual understanding", "pleasant surprises",
        "romantic moments", "emotional closeness",
    ),
    (
        "slight misunderstandings", "ironic compliments",
        "playful arguments", "sarcasm as love language",
    ),
    (
        "dramatic relationship clarifications", "epic fights over trivial things",
        "passive aggression", "war for the TV remote",
    ),
    (
        "ROMANTIC APOCALYPSE", "LOVE CATASTROPHE",
        "CHAOS OF FEELINGS AND EMOTIONS", "TOXIC WHIRLPOOL OF PASSION",
    ),
)

TIPS: Tuple[Pool, ...] = (
    (
        "pay attention to details", "trust your intuition",
        "don't rush to conclusions", "appreciate simple joys",
    ),
    (
        "activate 'I don't care' mode", "practice the art of sarcasm",
        "don't take everything to heart", "laugh at life's absurdity",
    ),
    (
        "prepare for battle with stupidity", "arm yourself with patience and venom",
        "don't hesitate to show your superiority", "let everyone burn with blue flame",
    ),
    (
        "DESTROY STEREOTYPES LEFT AND RIGHT", "BE THE EMBODIMENT OF CHAOS",
        "SHOW THE WORLD WHO'S THE ALPHA", "START A REVOLUTION IN YOUR HEAD",
    ),
)

EMOJIS: Tuple[Pool, ...] = (
    ("😊", "🌟", "💫", "🌸", "✨"),
    ("😏", "🙄", "😉", "🤷‍♀️", "😎"),
    ("💀", "🔥", "😈", "💣", "⚡"),
    ("🤡", "💥", "🌪️", "👹", "🎭", "🔥💥", "⚡👹"),
)

# Closing lines appended to roast text (levels 2-3 only)
ROAST_PUNCHLINES: Tuple[Optional[Pool], ...] = (
    None,
    None,
    (
        "P.S. Life is pain, get used to it.",
        "Good luck, you'll need it.",
        "Remember: everything passes, and this too shall pass... or not.",
    ),
    (
        "P.S. YOU'RE A LEGEND, SOME JUST DON'T KNOW IT YET!!!",
        "REMEMBER: THE WORLD ISN'T READY FOR YOUR GREATNESS!!!",
        "MOST IMPORTANTLY - BELIEVE IN YOURSELF, EVEN WHEN NO ONE ELSE DOES!!!",
    ),
)

SIGN_NAMES: Dict[str, str] = {
    "aries": "Aries",
    "taurus": "Taurus",
    "gemini": "Gemini",
    "cancer": "Cancer",
    "leo": "Leo",
    "virgo": "Virgo",
    "libra": "Libra",
    "scorpio": "Scorpio",
    "sagittarius": "Sagittarius",
    "capricorn": "Capricorn",
    "aquarius": "Aquarius",
    "pisces": "Pisces",
}

# ----------------------------
# ✨ Level descriptions (for the mapping view)
# ----------------------------

_DESCRIPTIONS: Tuple[str, ...] = (
    "Clean, supportive horoscope copy. No mutations, just vibes.",
    "Light irony. The stars are smirking, but politely.",
    "Open sarcasm. Random caps, hyperbole and slang start leaking in.",
    "Maximum cringe. Stretched vowels, sPoNgE cAsE, slang pileups and emoji storms.",
)

_TRANSFORM_FEATURES: Tuple[Tuple[str, ...], ...] = (
    ("Clean, unmodified text", "Professional tone", "Standard emojis"),
    (
        "10% parenthetical hedge: (you know what I mean)",
        "15% emoji upgrade: 😊 → 😊✨",
    ),
    (
        "20% alternating caps on one word: amazing → aMaZiNg",
        "Hyperbole on one word: very → INCREDIBLY",
        "25% slang interjection: OMG, LITERALLY",
        "30% emoji upgrade plus up to 2 flourish emojis",
        "Punchline appended",
    ),
    (
        "40% vowel elongation in 2-3 words: good → goooood",
        "35% alternating caps on 2-3 words",
        "Maximum hyperbole: nice → FANTASTIC, okay → MIND-BLOWING",
        "40% double interjections: FR FR, NO CAP",
        "50% emoji upgrade plus up to 3 flourish emojis",
        "ALL CAPS punchline appended",
    ),
)

# ----------------------------
# ✨ Template filler
# ----------------------------

_PLACEHOLDER_RE = re.compile(r"\{(sign|mood|work|love|tip|emoji)\}")


def _substitute(template: str, pairs: List[Tuple[str, str]]) -> str:
    """
    Single pass over the template: each token is replaced at its first
    occurrence only, and inserted values are never rescanned.
    """
    pending = dict(pairs)

    def _swap(m: re.Match) -> str:
        token = m.group(0)
        if token in pending:
            return pending.pop(token)
        return token

    return _PLACEHOLDER_RE.sub(_swap, template)


def select_template_and_fillers(cringe: int, prng: PRNG, *, sign_name: str = "{sign}") -> str:
    level = require_cringe(cringe)
    template = prng.choose(TEMPLATES)
    # all five are drawn every time so consumption never depends on the template
    mood = prng.choose(MOODS[level])
    work = prng.choose(WORK_SITUATIONS[level])
    love = prng.choose(LOVE_SITUATIONS[level])
    tip = prng.choose(TIPS[level])
    emoji = prng.choose(EMOJIS[level])
    pairs = [
        ("{sign}", sign_name),
        ("{mood}", mood),
        ("{work}", work),
        ("{love}", love),
        ("{tip}", tip),
        ("{emoji}", emoji),
    ]
    return _substitute(template, pairs)


def roast_punchlines(cringe: int) -> Optional[Pool]:
    return ROAST_PUNCHLINES[require_cringe(cringe)]


def display_sign(sign: str) -> str:
    return SIGN_NAMES.get(sign, sign.capitalize())

# ----------------------------
# 🎛️ Cringe mapping snapshot
# ----------------------------

def get_cringe_mapping(cringe: int) -> CringeMapping:
    """Fresh copy of everything a level can produce. Safe to mutate."""
    level = require_cringe(cringe)
    options: AvailableOptions = {
        "moods": list(MOODS[level]),
        "work_situations": list(WORK_SITUATIONS[level]),
        "love_situations": list(LOVE_SITUATIONS[level]),
        "tips": list(TIPS[level]),
        "emojis": list(EMOJIS[level]),
    }
    punchlines = ROAST_PUNCHLINES[level]
    if punchlines:
        options["punchlines"] = list(punchlines)
    return {
        "level": int(level),
        "label": CRINGE_LABELS[level],
        "description": _DESCRIPTIONS[level],
        "transform_features": list(_TRANSFORM_FEATURES[level]),
        "available_options": options,
    }
