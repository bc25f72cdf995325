"""易經知識庫種子腳本.

此腳本生成包含完整 64 卦結構的 JSON 範本（卦名、上下卦、卦辭、象辭、六爻），
可通過 knowledge_loader 的驗證，之後再以實際譯文替換文字。
"""

import argparse
import json
import sys
from pathlib import Path

# 將父目錄加入路徑，以便匯入專案模組
sys.path.insert(0, str(Path(__file__).parent.parent))

from config import HEXAGRAM_NAMES, TRIGRAM_NAMES
from hexagram_encoder import pattern_for_number

# 前 8 卦的完整資料（Judgement 和 Image）
FIRST_8_DETAILS = {
    1: {
        "judgement": "The Creative works sublime success, furthering through perseverance.",
        "image": "The movement of heaven is full of power. Thus the superior man makes himself strong and untiring."
    },
    2: {
        "judgement": "The Receptive brings about sublime success, furthering through the perseverance of a mare.",
        "image": "The earth's condition is receptive devotion. Thus the superior man who has breadth of character carries the outer world."
    },
    3: {
        "judgement": "Difficulty at the Beginning works supreme success, furthering through perseverance.",
        "image": "Clouds and thunder: The image of Difficulty at the Beginning. Thus the superior man brings order out of confusion."
    },
    4: {
        "judgement": "Youthful Folly has success. It is not I who seek the young fool; the young fool seeks me.",
        "image": "A spring wells up at the foot of the mountain: The image of Youthful Folly."
    },
    5: {
        "judgement": "Waiting. If you are sincere, you have light and success. Perseverance brings good fortune.",
        "image": "Clouds rise up to heaven: The image of Waiting. Thus the superior man eats and drinks, is joyous and of good cheer."
    },
    6: {
        "judgement": "Conflict. You are sincere and are being obstructed. A cautious halt halfway brings good fortune.",
        "image": "Heaven and water go their opposite ways: The image of Conflict."
    },
    7: {
        "judgement": "The Army. The army needs perseverance and a strong man. Good fortune without blame.",
        "image": "In the middle of the earth is water: The image of The Army."
    },
    8: {
        "judgement": "Holding Together brings good fortune. Inquire of the oracle once again whether you possess sublimity, constancy, and perseverance.",
        "image": "On the earth is water: The image of Holding Together."
    }
}


def build_records() -> list:
    """依卦序 1-64 建立卦象紀錄."""
    records = []
    for hex_id in range(1, 65):
        hex_entry = HEXAGRAM_NAMES[hex_id]
        pattern = pattern_for_number(hex_id)
        lower = TRIGRAM_NAMES[pattern & 0b111]
        upper = TRIGRAM_NAMES[pattern >> 3]

        name = f"{hex_entry['name']} {hex_entry['nature']}"
        if hex_id in FIRST_8_DETAILS:
            judgement = FIRST_8_DETAILS[hex_id]["judgement"]
            image = FIRST_8_DETAILS[hex_id]["image"]
        else:
            # 第 9-64 卦使用通用文字
            judgement = f"The hexagram {name} marks a moment in the cycle of change."
            image = f"{upper} over {lower}: the image of {hex_entry['name']}."

        records.append({
            "number": hex_id,
            "name": name,
            "upper_trigram": upper,
            "lower_trigram": lower,
            "judgement": judgement,
            "image": image,
            "lines": [
                {"position": pos, "text": f"Line {pos} of {hex_entry['name']}."}
                for pos in range(1, 7)
            ],
        })
    return records


def main() -> None:
    parser = argparse.ArgumentParser(description="Write a template I Ching lexicon.")
    parser.add_argument("--output", default="data/iching_complete.json")
    args = parser.parse_args()

    document = {
        "metadata": {"source": "seed_data template", "version": "1"},
        "hexagrams": build_records(),
    }

    output_path = Path(args.output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(document, f, indent=2, ensure_ascii=False)

    print(f"Successfully seeded {len(document['hexagrams'])} hexagrams to {output_path}")


if __name__ == "__main__":
    main()
