"""Three-Coin I-Ching 專案知識庫載入模組.

從 data/iching_complete.json 載入易經譯文（卦名、上下卦、卦辭、象辭、六爻爻辭），
經嚴格驗證後提供依文王卦序查詢的唯讀 Lexicon。

檔案格式（兩種皆可）：

    {"metadata": {"source": "...", "version": "..."}, "hexagrams": [...64 筆...]}
    [...64 筆...]

每筆卦象：number, name, upper_trigram, lower_trigram, judgement（或 judgment）,
image, lines（恰好 6 筆；字串，或含 position 與 text/meaning 的物件）。
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple, Union

HEXAGRAM_COUNT = 64
LINE_COUNT = 6

logger = logging.getLogger(__name__)


class LexiconError(Exception):
    """知識庫載入錯誤的基底類別."""


class LexiconFileError(LexiconError):
    """知識庫檔案不存在或無法讀取."""


class LexiconFormatError(LexiconError):
    """知識庫內容不是有效 JSON，或結構不符."""


class LexiconValidationError(LexiconError):
    """知識庫資料驗證失敗（卦數、爻數、卦序範圍）.

    Attributes:
        record_index: 出錯卦象在檔案中的索引（0-based），整體錯誤時為 None
        number: 出錯卦象的卦序（若可取得）
    """

    def __init__(
        self,
        message: str,
        record_index: Optional[int] = None,
        number: Optional[int] = None,
    ) -> None:
        if record_index is not None:
            message = f"第 {record_index} 筆卦象資料（number={number}）：{message}"
        super().__init__(message)
        self.record_index = record_index
        self.number = number


@dataclass(frozen=True)
class LexiconEntry:
    """單一卦象的譯文資料.

    Attributes:
        number: 文王卦序（1-64）
        name: 卦名
        upper_trigram: 上卦說明
        lower_trigram: 下卦說明
        judgement: 卦辭
        image: 象辭
        lines: 六爻爻辭，索引 0 為初爻
    """
    number: int
    name: str
    upper_trigram: str
    lower_trigram: str
    judgement: str
    image: str
    lines: Tuple[str, ...]

    def line_text(self, position: int) -> str:
        """取得第 position 爻（1-6）的爻辭."""
        if not 1 <= position <= LINE_COUNT:
            raise ValueError(f"爻位必須介於 1 到 6，實際得到 {position}")
        return self.lines[position - 1]


@dataclass(frozen=True)
class Lexicon(Mapping[int, LexiconEntry]):
    """依文王卦序查詢的唯讀知識庫."""
    entries: Mapping[int, LexiconEntry]
    metadata: Dict[str, Any] = field(default_factory=dict)

    def __getitem__(self, number: int) -> LexiconEntry:
        return self.entries[number]

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self.entries))

    def __len__(self) -> int:
        return len(self.entries)


def _text(item: Mapping[str, Any], *keys: str) -> str:
    for key in keys:
        value = item.get(key)
        if value:
            return str(value)
    return ""


def _parse_lines(raw_lines: Any, index: int, number: int) -> Tuple[str, ...]:
    if not isinstance(raw_lines, list):
        raise LexiconFormatError(
            f"第 {index} 筆卦象資料（number={number}）的 'lines' 必須為 list"
        )
    if len(raw_lines) != LINE_COUNT:
        raise LexiconValidationError(
            f"爻辭數應為 {LINE_COUNT}，實際為 {len(raw_lines)}",
            record_index=index,
            number=number,
        )

    parsed: List[Tuple[int, str]] = []
    for i, line in enumerate(raw_lines):
        if isinstance(line, str):
            parsed.append((i + 1, line))
        elif isinstance(line, dict):
            pos = line.get("position", i + 1)
            if isinstance(pos, bool) or not isinstance(pos, int):
                raise LexiconFormatError(
                    f"第 {index} 筆卦象資料（number={number}）第 {i + 1} 爻的 position 必須為整數"
                )
            if not 1 <= pos <= LINE_COUNT:
                raise LexiconValidationError(
                    f"爻位必須介於 1 到 {LINE_COUNT}，實際為 {pos}",
                    record_index=index,
                    number=number,
                )
            parsed.append((pos, _text(line, "text", "meaning")))
        else:
            raise LexiconFormatError(
                f"第 {index} 筆卦象資料（number={number}）第 {i + 1} 爻必須為字串或物件"
            )

    positions = sorted(pos for pos, _ in parsed)
    if positions != list(range(1, LINE_COUNT + 1)):
        raise LexiconValidationError(
            f"爻位必須恰為 1 到 {LINE_COUNT} 各一次，實際為 {positions}",
            record_index=index,
            number=number,
        )
    return tuple(text for _, text in sorted(parsed))


def parse_lexicon(data: Any) -> Lexicon:
    """驗證已解析的 JSON 資料並建立 Lexicon.

    Raises:
        LexiconFormatError: 結構不符
        LexiconValidationError: 卦數、爻數或卦序範圍錯誤
    """
    metadata: Dict[str, Any] = {}
    if isinstance(data, dict):
        records = data.get("hexagrams")
        raw_meta = data.get("metadata") or {}
        if not isinstance(raw_meta, dict):
            raise LexiconFormatError("'metadata' 必須為物件")
        metadata = dict(raw_meta)
    elif isinstance(data, list):
        records = data
    else:
        raise LexiconFormatError(
            f"預期頂層為 list 或 object，實際為 {type(data).__name__}"
        )

    if not isinstance(records, list):
        raise LexiconFormatError("'hexagrams' 必須為 64 卦之 list")
    if len(records) != HEXAGRAM_COUNT:
        raise LexiconValidationError(
            f"卦數應為 {HEXAGRAM_COUNT}，實際為 {len(records)}"
        )

    entries: Dict[int, LexiconEntry] = {}
    for index, item in enumerate(records):
        if not isinstance(item, dict):
            raise LexiconFormatError(f"第 {index} 筆卦象資料必須為物件")
        number = item.get("number")
        if isinstance(number, bool) or not isinstance(number, int):
            raise LexiconFormatError(
                f"第 {index} 筆卦象資料的 number 必須為整數，實際為 {number!r}"
            )
        if not 1 <= number <= HEXAGRAM_COUNT:
            raise LexiconValidationError(
                f"卦序必須介於 1 到 {HEXAGRAM_COUNT}",
                record_index=index,
                number=number,
            )
        if number in entries:
            raise LexiconValidationError(
                "卦序重複", record_index=index, number=number
            )
        entries[number] = LexiconEntry(
            number=number,
            name=_text(item, "name"),
            upper_trigram=_text(item, "upper_trigram"),
            lower_trigram=_text(item, "lower_trigram"),
            judgement=_text(item, "judgement", "judgment"),
            image=_text(item, "image"),
            lines=_parse_lines(item.get("lines"), index, number),
        )

    return Lexicon(entries=entries, metadata=metadata)


class IChingKnowledgeLoader:
    """易經知識載入器.

    讀取 iching_complete.json，驗證後產生 Lexicon。任何錯誤都會中止載入，
    不提供部分資料。
    """

    def __init__(self, file_path: Union[str, Path] = "data/iching_complete.json") -> None:
        self.file_path = Path(file_path)

    def load(self) -> Lexicon:
        """載入並驗證知識庫.

        Raises:
            LexiconFileError: 檔案不存在或無法讀取
            LexiconFormatError: JSON 無效或結構不符
            LexiconValidationError: 資料驗證失敗
        """
        try:
            with open(self.file_path, "rb") as f:
                raw = f.read()
        except OSError as e:
            raise LexiconFileError(
                f"無法讀取知識庫檔案 {self.file_path}: {e}\n"
                f"可先執行: python scripts/seed_data.py"
            ) from e

        try:
            data = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise LexiconFormatError(
                f"知識庫檔案 {self.file_path} 不是有效的 UTF-8 JSON：{e}"
            ) from e

        lexicon = parse_lexicon(data)
        logger.info(
            "已載入知識庫 %s：%d 卦，metadata=%s",
            self.file_path,
            len(lexicon),
            lexicon.metadata,
        )
        return lexicon


def load_lexicon(path: Union[str, Path]) -> Lexicon:
    """`IChingKnowledgeLoader(path).load()` 的簡寫."""
    return IChingKnowledgeLoader(path).load()
