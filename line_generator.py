"""Three-Coin I-Ching 專案擲錢起爻模組.

以三枚錢幣法產生單一爻：每枚錢正面（True）計 3，反面（False）計 2，
三枚相加得 6、7、8、9 之一：

- 6 (老陰)：變爻，機率 1/8
- 7 (少陽)：不變，機率 3/8
- 8 (少陰)：不變，機率 3/8
- 9 (老陽)：變爻，機率 1/8

亂數來源以參數注入（無參數、回傳 bool 的 callable），方便以固定序列測試。
"""

import enum
import logging
from typing import Callable, Iterable, Optional

import numpy as np

logger = logging.getLogger(__name__)

# 擲一枚公正錢幣：回傳 True（正面）或 False（反面）
CoinFlip = Callable[[], bool]

HEADS_VALUE = 3
TAILS_VALUE = 2
COINS_PER_LINE = 3


class LineState(enum.Enum):
    """爻的四種狀態，值為傳統儀式數字."""

    CHANGING_YIN = 6
    STATIC_YANG = 7
    STATIC_YIN = 8
    CHANGING_YANG = 9

    @property
    def is_yang(self) -> bool:
        """陽爻（7、9）為 True，陰爻（6、8）為 False."""
        return self in (LineState.STATIC_YANG, LineState.CHANGING_YANG)

    @property
    def is_changing(self) -> bool:
        """動爻（6、9）為 True."""
        return self in (LineState.CHANGING_YIN, LineState.CHANGING_YANG)

    @property
    def glyph(self) -> str:
        return _GLYPHS[self]

    def transformed(self) -> "LineState":
        """回傳變爻後的爻：老陽變少陰、老陰變少陽，靜爻不變."""
        if self is LineState.CHANGING_YANG:
            return LineState.STATIC_YIN
        if self is LineState.CHANGING_YIN:
            return LineState.STATIC_YANG
        return self


_GLYPHS = {
    LineState.STATIC_YANG: "---------",
    LineState.STATIC_YIN: "---   ---",
    LineState.CHANGING_YANG: "----o----",
    LineState.CHANGING_YIN: "--- x ---",
}

_SUM_TO_LINE = {
    6: LineState.CHANGING_YIN,
    7: LineState.STATIC_YANG,
    8: LineState.STATIC_YIN,
    9: LineState.CHANGING_YANG,
}


def generate_line(coin: CoinFlip) -> LineState:
    """擲三枚錢產生一爻.

    Args:
        coin: 擲錢函數，每次呼叫回傳一次獨立、公正的 True/False。

    Returns:
        對應總和的 LineState。

    Raises:
        ValueError: 總和不在 6-9 之間（代表亂數來源損壞，屬程式錯誤）
    """
    total = sum(
        HEADS_VALUE if coin() else TAILS_VALUE
        for _ in range(COINS_PER_LINE)
    )
    try:
        line = _SUM_TO_LINE[total]
    except KeyError:
        raise ValueError(
            f"擲錢總和必須為 6, 7, 8, 9 之一，實際得到 {total}"
        ) from None
    logger.debug("擲錢總和 %d -> %s", total, line.name)
    return line


def numpy_coin(seed: Optional[int] = None) -> CoinFlip:
    """以 numpy Generator 建立擲錢函數.

    Args:
        seed: 亂數種子；None 代表使用作業系統提供的新熵。
            相同種子會產生相同的擲錢序列。

    Returns:
        每次呼叫回傳一個公正 bool 的函數。每個函數擁有獨立的 Generator。
    """
    rng = np.random.default_rng(seed)

    def flip() -> bool:
        return bool(rng.integers(0, 2))

    return flip


def sequence_coin(draws: Iterable[bool]) -> CoinFlip:
    """以固定的擲錢結果序列建立擲錢函數（用於重播與測試）.

    Raises:
        ValueError: 序列已用完仍被呼叫時
    """
    iterator = iter(draws)

    def flip() -> bool:
        try:
            return bool(next(iterator))
        except StopIteration:
            raise ValueError("擲錢序列已用完") from None

    return flip
