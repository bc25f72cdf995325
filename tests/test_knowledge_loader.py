import pytest

from knowledge_loader import (
    IChingKnowledgeLoader,
    Lexicon,
    LexiconError,
    LexiconFileError,
    LexiconFormatError,
    LexiconValidationError,
    load_lexicon,
    parse_lexicon,
)


def test_load_object_document(records, write_lexicon):
    path = write_lexicon({"metadata": {"source": "test", "version": "2"}, "hexagrams": records})
    lexicon = IChingKnowledgeLoader(path).load()
    assert isinstance(lexicon, Lexicon)
    assert len(lexicon) == 64
    assert list(lexicon) == list(range(1, 65))
    assert lexicon.metadata == {"source": "test", "version": "2"}
    entry = lexicon[18]
    assert entry.name == "Hexagram 18"
    assert entry.judgement == "Judgement 18"
    assert entry.image == "Image 18"
    assert entry.line_text(2) == "Line 2 of 18"
    assert 64 in lexicon and 65 not in lexicon


def test_load_bare_list(records, write_lexicon):
    lexicon = load_lexicon(write_lexicon(records))
    assert len(lexicon) == 64
    assert lexicon.metadata == {}


def test_judgment_alias_and_string_lines(records):
    records[0] = {
        "number": 1,
        "name": "Qian",
        "judgment": "Sublime success.",
        "lines": ["one", "two", "three", "four", "five", "six"],
    }
    entry = parse_lexicon(records)[1]
    assert entry.judgement == "Sublime success."
    assert entry.lines == ("one", "two", "three", "four", "five", "six")
    assert entry.upper_trigram == ""


def test_lines_are_ordered_by_position(records):
    records[5]["lines"].reverse()
    entry = parse_lexicon(records)[6]
    assert entry.line_text(1) == "Line 1 of 6"
    assert entry.line_text(6) == "Line 6 of 6"


@pytest.mark.parametrize("count", [63, 65])
def test_wrong_hexagram_count_fails(make_record, count):
    records = [make_record((n % 64) + 1) for n in range(count)]
    with pytest.raises(LexiconValidationError, match=str(count)):
        parse_lexicon(records)


@pytest.mark.parametrize("line_count", [5, 7])
def test_wrong_line_count_fails(records, make_record, line_count):
    records[9] = make_record(10, line_count=line_count)
    with pytest.raises(LexiconValidationError) as excinfo:
        parse_lexicon(records)
    assert excinfo.value.record_index == 9
    assert excinfo.value.number == 10


@pytest.mark.parametrize("number", [0, 65])
def test_out_of_range_number_fails(records, make_record, number):
    records[3] = make_record(number)
    with pytest.raises(LexiconValidationError) as excinfo:
        parse_lexicon(records)
    assert excinfo.value.number == number
    assert excinfo.value.record_index == 3


def test_duplicate_number_fails(records, make_record):
    records[63] = make_record(1)
    with pytest.raises(LexiconValidationError):
        parse_lexicon(records)


def test_repeated_line_position_fails(records):
    records[0]["lines"][5]["position"] = 1
    with pytest.raises(LexiconValidationError):
        parse_lexicon(records)


def test_missing_file(tmp_path):
    with pytest.raises(LexiconFileError):
        load_lexicon(tmp_path / "missing.json")


def test_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(LexiconFormatError):
        load_lexicon(path)


@pytest.mark.parametrize(
    "data",
    [
        "hexagrams",
        {"hexagrams": "nope"},
        {"metadata": ["x"], "hexagrams": []},
    ],
)
def test_wrong_structure(data):
    with pytest.raises(LexiconFormatError):
        parse_lexicon(data)


def test_non_integer_number(records):
    records[0]["number"] = "1"
    with pytest.raises(LexiconFormatError):
        parse_lexicon(records)


def test_errors_share_a_base_class():
    for cls in (LexiconFileError, LexiconFormatError, LexiconValidationError):
        assert issubclass(cls, LexiconError)


def test_line_text_position_range(records):
    entry = parse_lexicon(records)[1]
    with pytest.raises(ValueError):
        entry.line_text(0)
    with pytest.raises(ValueError):
        entry.line_text(7)


def test_non_utf8_file_is_a_format_error(tmp_path):
    path = tmp_path / "latin.json"
    path.write_bytes(b'{"hexagrams": "\xff\xfe"}')
    with pytest.raises(LexiconFormatError):
        load_lexicon(path)
