import importlib.util
import json
import sys
from pathlib import Path

from knowledge_loader import load_lexicon, parse_lexicon

SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "seed_data.py"


def load_script():
    module_spec = importlib.util.spec_from_file_location("seed_data", SCRIPT)
    module = importlib.util.module_from_spec(module_spec)
    module_spec.loader.exec_module(module)
    return module


def test_seeded_records_pass_validation():
    lexicon = parse_lexicon(load_script().build_records())
    assert len(lexicon) == 64
    assert lexicon[18].upper_trigram == "Mountain"
    assert lexicon[18].lower_trigram == "Wind"
    assert lexicon[1].upper_trigram == lexicon[1].lower_trigram == "Heaven"
    assert lexicon[1].judgement.startswith("The Creative")


def test_main_writes_loadable_file(tmp_path, monkeypatch, capsys):
    output = tmp_path / "data" / "lexicon.json"
    monkeypatch.setattr(sys, "argv", ["seed_data.py", "--output", str(output)])
    load_script().main()
    assert "64 hexagrams" in capsys.readouterr().out
    assert json.loads(output.read_text(encoding="utf-8"))["metadata"]["version"] == "1"
    assert len(load_lexicon(output)) == 64
