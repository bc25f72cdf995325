"""Three-Coin I-Ching 專案易經核心邏輯模組.

此模組提供起卦、本卦編碼與未來卦（之卦/Zhi Gua）計算的核心功能。
"""

import dataclasses
import logging
from typing import List, Optional, Sequence, Tuple

from config import HEXAGRAM_NAMES, HexagramDict, settings
from hexagram_encoder import (
    LINES_PER_HEXAGRAM,
    describe_trigrams,
    encode,
    line_pattern,
    split_trigrams,
)
from line_generator import CoinFlip, LineState, generate_line, numpy_coin

logger = logging.getLogger(__name__)


def transform_line(line: LineState) -> LineState:
    """變爻規則.

    - 9 (老陽) -> 8 (少陰)
    - 6 (老陰) -> 7 (少陽)
    - 7 (少陽)、8 (少陰) -> 保持不變
    """
    return line.transformed()


@dataclasses.dataclass(frozen=True)
class Hexagram:
    """六爻卦象（不可變）.

    Attributes:
        lines: 6 個 LineState，索引 0 為初爻（底部），索引 5 為上爻（頂部）
        number: 文王卦序（1-64），建構時由 lines 計算，不可另行指定
    """
    lines: Tuple[LineState, ...]
    number: int = dataclasses.field(init=False)

    def __post_init__(self) -> None:
        lines = tuple(self.lines)
        if len(lines) != LINES_PER_HEXAGRAM:
            raise ValueError(
                f"卦象必須包含恰好 6 爻，實際得到 {len(lines)} 爻"
            )
        object.__setattr__(self, "lines", lines)
        object.__setattr__(self, "number", encode(lines))

    @property
    def pattern(self) -> int:
        return line_pattern(self.lines)

    @property
    def binary(self) -> str:
        """六位二進制字串，由初爻到上爻，"1" 代表陽爻（例如 "111111"）."""
        return "".join("1" if line.is_yang else "0" for line in self.lines)

    @property
    def lower_trigram(self) -> str:
        return split_trigrams(self.lines)[0]

    @property
    def upper_trigram(self) -> str:
        return split_trigrams(self.lines)[1]

    @property
    def trigrams(self) -> str:
        return describe_trigrams(self.lines)

    @property
    def changing_lines(self) -> List[int]:
        """動爻位置（1-based，由下而上遞增）."""
        return [i + 1 for i, line in enumerate(self.lines) if line.is_changing]

    def transformed(self) -> "Hexagram":
        """套用變爻規則，回傳新的卦象；本卦不受影響."""
        return Hexagram(tuple(transform_line(line) for line in self.lines))


@dataclasses.dataclass(frozen=True)
class Divination:
    """一次占卜結果：本卦與之卦.

    Attributes:
        present: 本卦
        future: 之卦；本卦無動爻時為 None
    """
    present: Hexagram
    future: Optional[Hexagram] = None

    def __post_init__(self) -> None:
        has_changing = bool(self.present.changing_lines)
        if has_changing and self.future is None:
            raise ValueError("本卦有動爻時必須提供之卦")
        if not has_changing and self.future is not None:
            raise ValueError("本卦無動爻時不得有之卦")

    @property
    def changing_lines(self) -> List[int]:
        return self.present.changing_lines

    @property
    def is_unchanging(self) -> bool:
        return self.future is None


def divination_from_lines(lines: Sequence[LineState]) -> Divination:
    """由已知的六爻建立占卜結果（不消耗亂數）.

    Args:
        lines: 6 個 LineState，由初爻到上爻。

    Returns:
        Divination；有動爻時之卦為重新編碼後的新卦象。

    Raises:
        ValueError: 如果 `lines` 長度不等於 6
    """
    present = Hexagram(tuple(lines))
    future = present.transformed() if present.changing_lines else None
    logger.debug(
        "本卦 %d (%s)，動爻 %s，之卦 %s",
        present.number,
        present.binary,
        present.changing_lines,
        future.number if future is not None else "-",
    )
    return Divination(present=present, future=future)


def cast(coin: Optional[CoinFlip] = None) -> Divination:
    """以三錢法起卦.

    由初爻至上爻依序擲 6 次（共 18 次擲錢），組成本卦並計算之卦。

    Args:
        coin: 擲錢函數；None 時使用 `numpy_coin(settings.seed())`。

    Returns:
        一次性產生的 Divination。
    """
    if coin is None:
        coin = numpy_coin(settings.seed())
    lines = [generate_line(coin) for _ in range(LINES_PER_HEXAGRAM)]
    return divination_from_lines(lines)


class IChingCore:
    """易經核心邏輯類別.

    提供起卦、卦象查詢和儀式數字序列解釋功能。

    核心概念：
    - 當前卦（本卦）：由六爻直接編碼而成的卦象
    - 未來卦（之卦）：根據變爻規則計算出的變動後卦象
    - 動爻：值為 6 或 9 的爻位，代表正在變動的狀態
    """

    def __init__(self, coin: Optional[CoinFlip] = None) -> None:
        """初始化 IChingCore.

        Args:
            coin: 擲錢函數；None 時每次起卦都建立新的 numpy 擲錢函數。
        """
        self.coin = coin

    def cast(self) -> Divination:
        """擲錢起卦."""
        return cast(self.coin)

    def get_hexagram_name(self, number: int) -> HexagramDict:
        """查詢卦象預設名稱.

        Args:
            number: 文王卦序（1-64）。

        Returns:
            包含卦象資訊的字典：
            - `id`: 卦象編號（1-64）
            - `name`: 卦象英文/拼音名稱
            - `nature`: 卦象繁體中文名稱

        Raises:
            ValueError: 如果 `number` 不在 1-64 之間
        """
        try:
            return HEXAGRAM_NAMES[number]
        except KeyError:
            raise ValueError(f"卦序必須介於 1 到 64，實際得到 {number}") from None

    def interpret_sequence(self, ritual_sequence: Sequence[int]) -> Divination:
        """解釋儀式數字序列.

        Args:
            ritual_sequence: 包含 6 個整數的序列，代表六爻的儀式數字。
                例如：`[9, 8, 7, 8, 9, 6]`
                順序：索引 0 為底部第1爻，索引 5 為頂部第6爻

        Returns:
            Divination（本卦、之卦、動爻）。

        Raises:
            ValueError: 如果長度不等於 6，或有數字不是 6, 7, 8, 9 之一

        Example:
            >>> core = IChingCore()
            >>> result = core.interpret_sequence([9, 8, 7, 8, 9, 6])
            >>> result.changing_lines
            [1, 5, 6]
        """
        if len(ritual_sequence) != LINES_PER_HEXAGRAM:
            raise ValueError(
                f"儀式數字序列必須包含恰好 6 個元素，實際得到 {len(ritual_sequence)} 個"
            )
        lines = []
        for num in ritual_sequence:
            try:
                lines.append(LineState(num))
            except ValueError:
                raise ValueError(
                    f"儀式數字必須為 6, 7, 8, 9 之一，實際得到 {num}"
                ) from None
        return divination_from_lines(lines)
