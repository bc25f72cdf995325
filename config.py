"""Three-Coin I-Ching 專案配置模組.

此模組提供全專案共用的配置設定，包括：
- 全局設定（知識庫路徑、亂數種子、日誌等級），可由環境變數或 .env 覆寫
- 文王六十四卦對照表（二進制爻型 -> 卦序）
- 八卦名稱表
- 六十四卦預設名稱（未載入知識庫時使用）
"""

import dataclasses
import logging
import os
from typing import Optional, TypedDict

from dotenv import load_dotenv


# 載入環境變數
load_dotenv()


class HexagramDict(TypedDict):
    """六十四卦字典結構定義."""
    id: int
    name: str
    nature: str  # 繁體中文卦名


@dataclasses.dataclass(frozen=True)
class Settings:
    """全局配置設定類別.

    使用 frozen dataclass 確保設定不可變。環境變數在此僅保留原始字串，
    由 `seed()`、`log_level()` 於使用時驗證，匯入本模組不會因設定錯誤而失敗。

    Attributes:
        LEXICON_PATH: 易經知識庫 JSON 路徑（環境變數 ICHING_LEXICON_PATH）
        RANDOM_SEED: 擲錢亂數種子字串，空字串代表每次使用新的熵（環境變數 ICHING_SEED）
        LOG_LEVEL: 日誌等級名稱（環境變數 ICHING_LOG_LEVEL，預設 WARNING）
    """
    LEXICON_PATH: str = dataclasses.field(
        default_factory=lambda: os.getenv(
            "ICHING_LEXICON_PATH", "data/iching_complete.json"
        )
    )
    RANDOM_SEED: str = dataclasses.field(
        default_factory=lambda: os.getenv("ICHING_SEED", "").strip()
    )
    LOG_LEVEL: str = dataclasses.field(
        default_factory=lambda: os.getenv("ICHING_LOG_LEVEL", "WARNING").strip().upper()
    )

    def seed(self) -> Optional[int]:
        """回傳整數種子，未設定時回傳 None.

        Raises:
            ValueError: ICHING_SEED 不是整數
        """
        if not self.RANDOM_SEED:
            return None
        try:
            return int(self.RANDOM_SEED)
        except ValueError:
            raise ValueError(
                f"環境變數 ICHING_SEED 必須為整數，實際得到 {self.RANDOM_SEED!r}"
            ) from None

    def log_level(self) -> int:
        """回傳 logging 等級數值.

        Raises:
            ValueError: ICHING_LOG_LEVEL 不是有效的等級名稱
        """
        level = logging.getLevelName(self.LOG_LEVEL)
        if not isinstance(level, int):
            raise ValueError(
                f"環境變數 ICHING_LOG_LEVEL 必須為 DEBUG/INFO/WARNING/ERROR/CRITICAL，"
                f"實際得到 {self.LOG_LEVEL!r}"
            )
        return level


# 文王卦序對照表
# 索引為六爻二進制值（bit 0 = 初爻/底部，bit 5 = 上爻/頂部；陽=1，陰=0），
# 值為文王卦序 1-64。此表為歷史資料，無公式可推導，須逐字保留。
KING_WEN_TABLE: tuple[int, ...] = (
    2, 24, 7, 19, 15, 36, 46, 11,
    16, 51, 40, 54, 62, 55, 32, 34,
    8, 3, 29, 60, 39, 63, 48, 5,
    45, 17, 47, 58, 31, 49, 28, 43,
    23, 27, 4, 41, 52, 22, 18, 26,
    35, 21, 64, 38, 56, 30, 50, 14,
    20, 42, 59, 61, 53, 37, 57, 9,
    12, 25, 6, 10, 33, 13, 44, 1,
)

# 八卦名稱表
# 索引為三爻二進制值（bit 0 = 該卦最下一爻），依序為坤、震、坎、兌、艮、離、巽、乾
TRIGRAM_NAMES: tuple[str, ...] = (
    "Earth",
    "Thunder",
    "Water",
    "Lake",
    "Mountain",
    "Fire",
    "Wind",
    "Heaven",
)


# 六十四卦預設名稱表
# 鍵值為文王卦序，值為卦象資訊字典
HEXAGRAM_NAMES: dict[int, HexagramDict] = {
    1: {"id": 1, "name": "Qian (The Creative)", "nature": "乾"},
    2: {"id": 2, "name": "Kun (The Receptive)", "nature": "坤"},
    3: {"id": 3, "name": "Chun (Difficulty at the Beginning)", "nature": "屯"},
    4: {"id": 4, "name": "Meng (Youthful Folly)", "nature": "蒙"},
    5: {"id": 5, "name": "Xu (Waiting)", "nature": "需"},
    6: {"id": 6, "name": "Song (Conflict)", "nature": "訟"},
    7: {"id": 7, "name": "Shi (The Army)", "nature": "師"},
    8: {"id": 8, "name": "Bi (Holding Together)", "nature": "比"},
    9: {"id": 9, "name": "Xiao Chu (The Taming Power of the Small)", "nature": "小畜"},
    10: {"id": 10, "name": "Lv (Treading)", "nature": "履"},
    11: {"id": 11, "name": "Tai (Peace)", "nature": "泰"},
    12: {"id": 12, "name": "Pi (Standstill)", "nature": "否"},
    13: {"id": 13, "name": "Tong Ren (Fellowship with Men)", "nature": "同人"},
    14: {"id": 14, "name": "Da You (Possession in Great Measure)", "nature": "大有"},
    15: {"id": 15, "name": "Qian (Modesty)", "nature": "謙"},
    16: {"id": 16, "name": "Yu (Enthusiasm)", "nature": "豫"},
    17: {"id": 17, "name": "Sui (Following)", "nature": "隨"},
    18: {"id": 18, "name": "Gu (Work on What Has Been Spoiled)", "nature": "蠱"},
    19: {"id": 19, "name": "Lin (Approach)", "nature": "臨"},
    20: {"id": 20, "name": "Guan (Contemplation)", "nature": "觀"},
    21: {"id": 21, "name": "Shi He (Biting Through)", "nature": "噬嗑"},
    22: {"id": 22, "name": "Bi (Grace)", "nature": "賁"},
    23: {"id": 23, "name": "Bo (Splitting Apart)", "nature": "剝"},
    24: {"id": 24, "name": "Fu (Return)", "nature": "復"},
    25: {"id": 25, "name": "Wu Wang (Innocence)", "nature": "無妄"},
    26: {"id": 26, "name": "Da Chu (The Taming Power of the Great)", "nature": "大畜"},
    27: {"id": 27, "name": "Yi (The Corners of the Mouth)", "nature": "頤"},
    28: {"id": 28, "name": "Da Guo (Preponderance of the Great)", "nature": "大過"},
    29: {"id": 29, "name": "Kan (The Abysmal)", "nature": "坎"},
    30: {"id": 30, "name": "Li (The Clinging, Fire)", "nature": "離"},
    31: {"id": 31, "name": "Xian (Influence)", "nature": "咸"},
    32: {"id": 32, "name": "Heng (Duration)", "nature": "恆"},
    33: {"id": 33, "name": "Dun (Retreat)", "nature": "遯"},
    34: {"id": 34, "name": "Da Zhuang (The Power of the Great)", "nature": "大壯"},
    35: {"id": 35, "name": "Jin (Progress)", "nature": "晉"},
    36: {"id": 36, "name": "Ming Yi (Darkening of the Light)", "nature": "明夷"},
    37: {"id": 37, "name": "Jia Ren (The Family)", "nature": "家人"},
    38: {"id": 38, "name": "Kui (Opposition)", "nature": "睽"},
    39: {"id": 39, "name": "Jian (Obstruction)", "nature": "蹇"},
    40: {"id": 40, "name": "Xie (Deliverance)", "nature": "解"},
    41: {"id": 41, "name": "Sun (Decrease)", "nature": "損"},
    42: {"id": 42, "name": "Yi (Increase)", "nature": "益"},
    43: {"id": 43, "name": "Guai (Break-through)", "nature": "夬"},
    44: {"id": 44, "name": "Gou (Coming to Meet)", "nature": "姤"},
    45: {"id": 45, "name": "Cui (Gathering Together)", "nature": "萃"},
    46: {"id": 46, "name": "Sheng (Pushing Upward)", "nature": "升"},
    47: {"id": 47, "name": "Kun (Oppression)", "nature": "困"},
    48: {"id": 48, "name": "Jing (The Well)", "nature": "井"},
    49: {"id": 49, "name": "Ge (Revolution)", "nature": "革"},
    50: {"id": 50, "name": "Ding (The Cauldron)", "nature": "鼎"},
    51: {"id": 51, "name": "Zhen (The Arousing, Shock)", "nature": "震"},
    52: {"id": 52, "name": "Gen (Keeping Still, Mountain)", "nature": "艮"},
    53: {"id": 53, "name": "Jian (Development)", "nature": "漸"},
    54: {"id": 54, "name": "Gui Mei (The Marrying Maiden)", "nature": "歸妹"},
    55: {"id": 55, "name": "Feng (Abundance)", "nature": "豐"},
    56: {"id": 56, "name": "Lv (The Wanderer)", "nature": "旅"},
    57: {"id": 57, "name": "Sun (The Gentle, Wind)", "nature": "巽"},
    58: {"id": 58, "name": "Dui (The Joyous, Lake)", "nature": "兌"},
    59: {"id": 59, "name": "Huan (Dispersion)", "nature": "渙"},
    60: {"id": 60, "name": "Jie (Limitation)", "nature": "節"},
    61: {"id": 61, "name": "Zhong Fu (Inner Truth)", "nature": "中孚"},
    62: {"id": 62, "name": "Xiao Guo (Preponderance of the Small)", "nature": "小過"},
    63: {"id": 63, "name": "Ji Ji (After Completion)", "nature": "既濟"},
    64: {"id": 64, "name": "Wei Ji (Before Completion)", "nature": "未濟"},
}


# 全局設定實例
settings = Settings()
