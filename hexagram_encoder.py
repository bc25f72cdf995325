"""Three-Coin I-Ching 專案卦象編碼模組.

將六爻轉為文王卦序與上下卦：

- 每爻陽=1、陰=0（與動靜無關），bit 0 為初爻（底部），bit 5 為上爻（頂部）
- 以六位二進制值查 KING_WEN_TABLE 得卦序 1-64
- 初爻至三爻為下卦（內卦），四爻至上爻為上卦（外卦）
"""

from typing import Sequence, Tuple

from config import KING_WEN_TABLE, TRIGRAM_NAMES
from line_generator import LineState

LINES_PER_HEXAGRAM = 6
LINES_PER_TRIGRAM = 3

# 卦序 -> 二進制值（由 KING_WEN_TABLE 反推）
_PATTERN_BY_NUMBER = {number: pattern for pattern, number in enumerate(KING_WEN_TABLE)}


def _bits(lines: Sequence[LineState]) -> int:
    value = 0
    for i, line in enumerate(lines):
        if line.is_yang:
            value |= 1 << i
    return value


def _check_length(lines: Sequence[LineState], expected: int) -> None:
    if len(lines) != expected:
        raise ValueError(
            f"爻序列必須包含恰好 {expected} 個元素，實際得到 {len(lines)} 個"
        )


def line_pattern(lines: Sequence[LineState]) -> int:
    """回傳六爻的二進制值（0-63）."""
    _check_length(lines, LINES_PER_HEXAGRAM)
    return _bits(lines)


def encode(lines: Sequence[LineState]) -> int:
    """計算六爻的文王卦序.

    Args:
        lines: 6 個 LineState，索引 0 為初爻（底部），索引 5 為上爻（頂部）。

    Returns:
        文王卦序（1-64）。老陽與少陽、老陰與少陰編碼相同。

    Raises:
        ValueError: 如果 `lines` 長度不等於 6
    """
    return KING_WEN_TABLE[line_pattern(lines)]


def pattern_for_number(number: int) -> int:
    """由文王卦序反查六位二進制值.

    Raises:
        ValueError: 如果 `number` 不在 1-64 之間
    """
    try:
        return _PATTERN_BY_NUMBER[number]
    except KeyError:
        raise ValueError(f"卦序必須介於 1 到 64，實際得到 {number}") from None


def trigram_index(lines: Sequence[LineState]) -> int:
    """回傳三爻的二進制值（0-7），bit 0 為該卦最下一爻."""
    _check_length(lines, LINES_PER_TRIGRAM)
    return _bits(lines)


def trigram_name(index: int) -> str:
    """依三爻二進制值回傳八卦名稱（0 = Earth ... 7 = Heaven）."""
    if not 0 <= index < len(TRIGRAM_NAMES):
        raise ValueError(f"三爻值必須介於 0 到 7，實際得到 {index}")
    return TRIGRAM_NAMES[index]


def split_trigrams(lines: Sequence[LineState]) -> Tuple[str, str]:
    """將六爻拆成（下卦名稱, 上卦名稱）."""
    _check_length(lines, LINES_PER_HEXAGRAM)
    lower = trigram_name(trigram_index(lines[:LINES_PER_TRIGRAM]))
    upper = trigram_name(trigram_index(lines[LINES_PER_TRIGRAM:]))
    return lower, upper


def describe_trigrams(lines: Sequence[LineState]) -> str:
    """回傳 "<上卦> over <下卦>"，例如 "Mountain over Wind"."""
    lower, upper = split_trigrams(lines)
    return f"{upper} over {lower}"
