"""Tests for the import layer (decoding, read failures, text repair)."""

import json

import pytest

from messenger_stats.chat_import import (
    ParseError,
    SchemaInvalid,
    SourceUnavailable,
    load_corpus,
    parse_corpus,
)
from messenger_stats.chat_import.core import fix_mojibake
from messenger_stats.chat_import.schema import Reaction, Sticker


def test_parse_minimal_export(export_data):
    corpus, warnings = parse_corpus(json.dumps(export_data))

    assert [p.name for p in corpus.participants] == ["Alice Smith", "Bob Jones", "Carol"]
    assert len(corpus.messages) == 5
    assert warnings == []

    first = corpus.messages[0]
    assert first.sender_name == "Alice Smith"
    assert first.timestamp_ms == 1546300800000
    assert first.reactions == (Reaction("❤", "Bob Jones"),)
    assert first.sticker is None

    sticker_msg = corpus.messages[2]
    assert sticker_msg.content == ""
    assert sticker_msg.reactions is None
    assert sticker_msg.sticker == Sticker("https://scontent.xx.fbcdn.net/v/t39.1997-6/123456_n_987654321.png")


def test_unknown_type_passed_through(export_data):
    corpus, _ = parse_corpus(json.dumps(export_data))
    assert corpus.messages[4].type == "Share"


def test_optional_fields_default():
    corpus, _ = parse_corpus(json.dumps({"participants": [{"name": "A"}], "messages": [{"sender_name": "A"}]}))
    msg = corpus.messages[0]
    assert msg.timestamp_ms == 0
    assert msg.content == ""
    assert msg.type == "Generic"


def test_duplicate_participants_collapse():
    raw = json.dumps({"participants": [{"name": "A"}, {"name": "A"}], "messages": []})
    corpus, warnings = parse_corpus(raw)
    assert corpus.participant_names() == ["A"]
    assert len(warnings) == 1


@pytest.mark.parametrize(
    "raw",
    [
        "not json",
        "[]",
        json.dumps({"messages": []}),
        json.dumps({"participants": [], "messages": {}}),
        json.dumps({"participants": [{"nom": "A"}], "messages": []}),
        json.dumps({"participants": [], "messages": [{"content": "hi"}]}),
        json.dumps({"participants": [], "messages": [{"sender_name": "A", "sticker": "x"}]}),
        json.dumps({"participants": [], "messages": [{"sender_name": "A", "reactions": [{"reaction": "x"}]}]}),
        json.dumps({"participants": [], "messages": [{"sender_name": "A", "timestamp_ms": "soon"}]}),
        '{"participants": [], "messages": [{"sender_name": "A", "timestamp_ms": Infinity}]}',
        '{"participants": [], "messages": [{"sender_name": "A", "timestamp_ms": 1e400}]}',
        "[" * 100000 + "]" * 100000,
    ],
)
def test_schema_errors(raw):
    with pytest.raises(SchemaInvalid) as exc:
        parse_corpus(raw)
    assert exc.value.stage == "decode"
    assert isinstance(exc.value, ParseError)


def test_fix_mojibake():
    assert fix_mojibake("â\u009d¤") == "❤"
    assert fix_mojibake("ð\u009f\u0098\u0082") == "\U0001f602"
    assert fix_mojibake("café") == "café"
    assert fix_mojibake("plain") == "plain"
    # latin-1 text that also decodes as UTF-8 is rewritten too
    assert fix_mojibake("Ã©") == "é"
    assert fix_mojibake("") == ""


def test_exporter_encoding_repaired():
    raw = (
        '{"participants": [{"name": "Jos\\u00c3\\u00a9"}],'
        ' "messages": [{"sender_name": "Jos\\u00c3\\u00a9", "content": "hi",'
        ' "reactions": [{"reaction": "\\u00e2\\u009d\\u00a4", "actor": "Jos\\u00c3\\u00a9"}]}]}'
    )
    corpus, _ = parse_corpus(raw, fix_encoding=True)
    assert corpus.participants[0].name == "José"
    assert corpus.messages[0].reactions == (Reaction("❤", "José"),)

    corpus, _ = parse_corpus(raw, fix_encoding=False)
    assert corpus.participants[0].name == "JosÃ©"


def test_load_corpus_reads_file(export_file):
    result = load_corpus(export_file)
    assert len(result.corpus.messages) == 5
    assert result.corpus.time_range == {"startTsMs": 1546300800000, "endTsMs": 1546301040000}


def test_load_corpus_missing_file(tmp_path):
    with pytest.raises(SourceUnavailable) as exc:
        load_corpus(tmp_path / "nope.json")
    assert exc.value.stage == "read"


def test_load_corpus_too_large(export_file):
    with pytest.raises(SourceUnavailable):
        load_corpus(export_file, options={"maxSizeMb": 0})


def test_load_corpus_decode_failure_names_source(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{", encoding="utf-8")
    with pytest.raises(SchemaInvalid) as exc:
        load_corpus(path)
    assert exc.value.source == str(path)
    assert "[decode]" in str(exc.value)
