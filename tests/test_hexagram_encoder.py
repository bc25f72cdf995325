import pytest

from config import KING_WEN_TABLE, TRIGRAM_NAMES
from hexagram_encoder import (
    describe_trigrams,
    encode,
    line_pattern,
    pattern_for_number,
    split_trigrams,
    trigram_index,
    trigram_name,
)
from line_generator import LineState

YANG = LineState.STATIC_YANG
YIN = LineState.STATIC_YIN


def lines_for_pattern(pattern):
    return [YANG if pattern >> i & 1 else YIN for i in range(6)]


def test_encode_is_a_bijection_onto_1_to_64():
    numbers = [encode(lines_for_pattern(p)) for p in range(64)]
    assert sorted(numbers) == list(range(1, 65))
    assert numbers == list(KING_WEN_TABLE)


def test_all_yang_is_1_and_all_yin_is_2():
    assert encode([YANG] * 6) == 1
    assert encode([YIN] * 6) == 2


def test_volatility_does_not_affect_number():
    assert encode([LineState.CHANGING_YANG] * 6) == 1
    assert encode([LineState.CHANGING_YIN] * 6) == 2


def test_mixed_lines():
    lines = [
        LineState.STATIC_YIN,
        LineState.CHANGING_YANG,
        LineState.STATIC_YANG,
        LineState.CHANGING_YIN,
        LineState.STATIC_YIN,
        LineState.STATIC_YANG,
    ]
    assert line_pattern(lines) == 38
    assert encode(lines) == 18


def test_bottom_line_is_bit_zero():
    # Return: only the first line is yang
    assert line_pattern([YANG] + [YIN] * 5) == 1
    assert encode([YANG] + [YIN] * 5) == 24
    # Splitting Apart: only the top line is yang
    assert encode([YIN] * 5 + [YANG]) == 23


def test_trigram_names():
    assert [trigram_name(i) for i in range(8)] == [
        "Earth", "Thunder", "Water", "Lake",
        "Mountain", "Fire", "Wind", "Heaven",
    ]
    assert TRIGRAM_NAMES[0] == "Earth"
    assert TRIGRAM_NAMES[7] == "Heaven"


def test_trigram_index_bit_order():
    assert trigram_index([YANG, YIN, YIN]) == 1
    assert trigram_index([YIN, YIN, YANG]) == 4
    assert trigram_index([YANG, YANG, YANG]) == 7


def test_split_and_describe_trigrams():
    lines = [YIN, YANG, YANG, YIN, YIN, YANG]
    assert split_trigrams(lines) == ("Wind", "Mountain")
    assert describe_trigrams(lines) == "Mountain over Wind"
    # Water over Fire is After Completion
    water_over_fire = [YANG, YIN, YANG, YIN, YANG, YIN]
    assert describe_trigrams(water_over_fire) == "Water over Fire"
    assert encode(water_over_fire) == 63


def test_pattern_for_number_inverts_table():
    assert pattern_for_number(1) == 63
    assert pattern_for_number(2) == 0
    assert pattern_for_number(56) == 44
    assert all(KING_WEN_TABLE[pattern_for_number(n)] == n for n in range(1, 65))


@pytest.mark.parametrize("number", [0, 65, -1])
def test_pattern_for_number_rejects_out_of_range(number):
    with pytest.raises(ValueError):
        pattern_for_number(number)


@pytest.mark.parametrize("count", [0, 5, 7])
def test_encode_rejects_wrong_length(count):
    with pytest.raises(ValueError):
        encode([YANG] * count)


def test_trigram_name_rejects_out_of_range():
    with pytest.raises(ValueError):
        trigram_name(8)
