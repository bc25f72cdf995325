"""Three-Coin I-Ching 專案主程式.

整合所有模組，執行完整的起卦流程：
1. 等待使用者靜心發問（按 Enter）
2. 載入知識庫（可選）
3. 擲錢起卦（或解釋指定的儀式數字序列）
4. 輸出本卦、動爻與之卦報告
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from config import settings
from iching_core import Divination, Hexagram, IChingCore
from knowledge_loader import Lexicon, LexiconError, load_lexicon
from line_generator import LineState, numpy_coin

PROMPT = "Think deeply on your question and press Enter when ready..."

logger = logging.getLogger(__name__)


def format_line(position: int, line: LineState) -> str:
    """單一爻的文字：`"<爻位> <圖形>"`，例如 `"6 ----o----"`."""
    return f"{position} {line.glyph}"


def format_moving_lines(moving_lines: Sequence[int]) -> str:
    """格式化動爻列表為可讀字串.

    Args:
        moving_lines: 動爻列表（1-based index）

    Returns:
        格式化的字串，例如 "2, 4" 或 "none"
    """
    if not moving_lines:
        return "none"
    return ", ".join(map(str, sorted(moving_lines)))


def hexagram_title(hexagram: Hexagram, lexicon: Optional[Lexicon] = None) -> str:
    """卦名標題，優先使用知識庫卦名，否則使用預設名稱."""
    entry = lexicon.get(hexagram.number) if lexicon is not None else None
    if entry is not None and entry.name:
        name = entry.name
    else:
        info = IChingCore().get_hexagram_name(hexagram.number)
        name = f"{info['name']} {info['nature']}"
    return f"Hexagram {hexagram.number}: {name}"


def render_hexagram(hexagram: Hexagram, lexicon: Optional[Lexicon] = None) -> str:
    """以 ASCII 圖形顯示六爻卦象.

    從頂部（第6爻）到底部（第1爻）顯示，最後一行為 "<上卦> over <下卦>"。
    有知識庫時附上卦辭與象辭。
    """
    out: List[str] = [hexagram_title(hexagram, lexicon)]
    for i in range(len(hexagram.lines) - 1, -1, -1):
        out.append(format_line(i + 1, hexagram.lines[i]))
    out.append(hexagram.trigrams)

    entry = lexicon.get(hexagram.number) if lexicon is not None else None
    if entry is not None:
        if entry.judgement:
            out.append(f"Judgement: {entry.judgement}")
        if entry.image:
            out.append(f"Image: {entry.image}")
    return "\n".join(out)


def render_divination(divination: Divination, lexicon: Optional[Lexicon] = None) -> str:
    """產生完整占卜報告."""
    present = divination.present
    out: List[str] = [render_hexagram(present, lexicon), ""]

    out.append(f"Changing lines: {format_moving_lines(divination.changing_lines)}")
    entry = lexicon.get(present.number) if lexicon is not None else None
    if entry is not None:
        for position in divination.changing_lines:
            out.append(f"  Line {position}: {entry.line_text(position)}")

    if divination.future is None:
        out.append("Unchanging")
    else:
        out.append(f"Transition: {present.number} -> {divination.future.number}")
        out.append("")
        out.append(render_hexagram(divination.future, lexicon))
    return "\n".join(out)


def parse_ritual_digits(text: str) -> List[int]:
    """將 "987896" 轉為 [9, 8, 7, 8, 9, 6].

    Raises:
        ValueError: 含非數字字元
    """
    try:
        return [int(char) for char in text.strip()]
    except ValueError:
        raise ValueError(f"無法解析儀式數字序列: {text!r}") from None


def resolve_lexicon(path: Optional[str]) -> Optional[Lexicon]:
    """載入知識庫.

    未指定路徑且預設檔案不存在時回傳 None（不附譯文）；
    明確指定的檔案不存在則視為錯誤。

    Raises:
        LexiconError: 檔案無法讀取、格式錯誤或驗證失敗
    """
    if path is None:
        default = Path(settings.LEXICON_PATH)
        if not default.exists():
            logger.debug("預設知識庫 %s 不存在，略過譯文", default)
            return None
        path = str(default)
    return load_lexicon(path)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Cast an I Ching hexagram with the three-coin method."
    )
    parser.add_argument(
        "--lexicon",
        default=None,
        help=f"translation JSON file (default: {settings.LEXICON_PATH} if present)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="random seed for a reproducible casting (default: ICHING_SEED)",
    )
    parser.add_argument(
        "--lines",
        default=None,
        help="interpret six ritual digits bottom to top (e.g. 987896) instead of casting",
    )
    parser.add_argument(
        "--no-prompt",
        action="store_true",
        help="do not wait for Enter before casting",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """主程式執行函數.

    Returns:
        結束代碼：0 成功，1 知識庫錯誤或輸入無效
    """
    args = build_parser().parse_args(argv)

    try:
        logging.basicConfig(
            level=settings.log_level(),
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        )
        seed = args.seed if args.seed is not None else settings.seed()
        lexicon = resolve_lexicon(args.lexicon)
        core = IChingCore(numpy_coin(seed))

        if args.lines is not None:
            divination = core.interpret_sequence(parse_ritual_digits(args.lines))
        else:
            if not args.no_prompt:
                print(PROMPT)
                try:
                    input()
                except EOFError:
                    # stdin 已關閉或為空：不等待，直接起卦
                    pass
            divination = core.cast()
    except LexiconError as e:
        logger.error("知識庫載入失敗: %s", e)
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1

    print(render_divination(divination, lexicon))
    return 0


def cli() -> None:
    """console script 進入點."""
    sys.exit(main())


if __name__ == "__main__":
    cli()
