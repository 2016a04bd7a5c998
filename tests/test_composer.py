import re

import pytest

from cringe_horoscope.composer import (
    MIX_PUNCHLINES,
    compose_result,
    get_composition_stats,
    get_mode_description,
    normalize_official,
    split_sentences,
)
from cringe_horoscope.models import InvalidInputError
from cringe_horoscope.prng import MASK_32, PRNG
from cringe_horoscope.roast_transforms import apply_transforms

OFFICIAL = {
    "text": "You will have a very good day. Trust your instincts. Great things are coming.",
    "lucky_color": "red",
    "lucky_number": 7,
}
ROAST = {"text": "Plain roast here. Second line. Third one."}
FOUR_VOWEL_RUN = re.compile(r"([aeiou])\1{3,}", re.I)


def test_roast_mode_passes_text_through():
    assert compose_result("roast", {"text": ""}, {"text": "X"}, 0, 1) == {"text": "X", "source": "roast"}
    # lucky info never rides along with a roast
    assert "lucky_color" not in compose_result("roast", OFFICIAL, ROAST, 3, 1)


def test_official_mode_gentle_keeps_text_and_lucky():
    assert compose_result("official", OFFICIAL, ROAST, 0, 5) == {
        "text": OFFICIAL["text"],
        "source": "official",
        "lucky_color": "red",
        "lucky_number": 7,
    }


def test_official_mode_omits_missing_lucky_keys():
    result = compose_result("official", {"text": "Hi."}, ROAST, 0, 5)
    assert result == {"text": "Hi.", "source": "official"}


def test_official_mode_transforms_with_the_seed():
    for seed in range(20):
        result = compose_result("official", OFFICIAL, ROAST, 2, seed)
        assert result["text"] == apply_transforms(OFFICIAL["text"], 2, PRNG(seed))


def test_mix_is_deterministic_and_keeps_lucky():
    first = compose_result("mix", OFFICIAL, ROAST, 1, 77)
    assert first == compose_result("mix", OFFICIAL, ROAST, 1, 77)
    assert first["source"] == "mix"
    assert first["lucky_color"] == "red"
    assert first["lucky_number"] == 7


def test_mix_gentle_sentence_count():
    for seed in range(40):
        text = compose_result("mix", OFFICIAL, ROAST, 0, seed)["text"]
        assert 2 <= len(split_sentences(text)) <= 4
        assert split_sentences(OFFICIAL["text"])[0] in text
        assert "Plain roast here." in text


def test_mix_caps_official_transforms_at_sarcastic():
    for seed in range(200):
        text = compose_result("mix", OFFICIAL, ROAST, 3, seed)["text"]
        assert not FOUR_VOWEL_RUN.search(text)
        capped = split_sentences(apply_transforms(OFFICIAL["text"], 2, PRNG(seed)))
        assert capped[0] in text


@pytest.mark.parametrize("level", [2, 3])
def test_mix_punchline(level):
    for seed in range(30):
        text = compose_result("mix", OFFICIAL, ROAST, level, seed)["text"]
        assert any(text.endswith(p) for p in MIX_PUNCHLINES[level])


def test_mix_seed_wraps():
    result = compose_result("mix", OFFICIAL, ROAST, 2, MASK_32)
    assert result["text"]


def test_invalid_mode_or_level_raises():
    with pytest.raises(InvalidInputError):
        compose_result("remix", OFFICIAL, ROAST, 1, 1)
    with pytest.raises(InvalidInputError):
        compose_result("mix", OFFICIAL, ROAST, 5, 1)


def test_split_sentences():
    assert split_sentences("hello world! how are you? fine.") == ["Hello world!", "How are you?", "Fine."]
    assert split_sentences("...") == []
    assert split_sentences("") == []


def test_normalize_official():
    assert normalize_official("a. b! c?") == ["A", "B", "C"]


def test_mode_description():
    assert get_mode_description("mix") == "Mixed: Transformed official + Roast combination"
    assert get_mode_description("nope") == "Unknown mode"


def test_composition_stats():
    stats = get_composition_stats({"text": "One two. Three!", "lucky_color": "red"})
    assert stats == {"sentence_count": 2, "word_count": 3, "has_lucky_info": True}
    assert get_composition_stats({"text": ""}) == {"sentence_count": 0, "word_count": 0, "has_lucky_info": False}
