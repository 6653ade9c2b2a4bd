"""Shared test fixtures and configuration."""

import json
import sys
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from messenger_stats.chat_import.schema import Corpus, Message, Participant, Reaction, Sticker


PLACEHOLDER_URI = "https://scontent.xx.fbcdn.net/v/t39.1997-6/39178562_1505197616293642_5411344281094848512_n_369239263222822.png"


def sticker_uri(sticker_id: str) -> str:
    return f"https://scontent.xx.fbcdn.net/v/t39.1997-6/851557_{sticker_id}_n_{sticker_id}.png"


@pytest.fixture
def export_data():
    """A small export in the Messenger message.json shape."""
    return {
        "participants": [{"name": "Alice Smith"}, {"name": "Bob Jones"}, {"name": "Carol"}],
        "messages": [
            {
                "sender_name": "Alice Smith",
                "timestamp_ms": 1546300800000,
                "content": "Hello world hello @bob",
                "reactions": [{"reaction": "❤", "actor": "Bob Jones"}],
                "type": "Generic",
            },
            {
                "sender_name": "Bob Jones",
                "timestamp_ms": 1546300860000,
                "content": "Bob sent a photo.",
                "type": "Generic",
            },
            {
                "sender_name": "Bob Jones",
                "timestamp_ms": 1546300920000,
                "sticker": {"uri": "https://scontent.xx.fbcdn.net/v/t39.1997-6/123456_n_987654321.png"},
                "type": "Generic",
            },
            {
                "sender_name": "Alice Smith",
                "timestamp_ms": 1546300980000,
                "sticker": {"uri": PLACEHOLDER_URI},
                "type": "Generic",
            },
            {
                "sender_name": "Alice Smith",
                "timestamp_ms": 1546301040000,
                "content": "It's a world of pizza",
                "reactions": [
                    {"reaction": "\U0001f606", "actor": "Bob Jones"},
                    {"reaction": "❤", "actor": "Alice Smith"},
                ],
                "type": "Share",
            },
        ],
    }


@pytest.fixture
def export_file(tmp_path, export_data):
    path = tmp_path / "message_1.json"
    path.write_text(json.dumps(export_data), encoding="utf-8")
    return path


@pytest.fixture
def scenario_corpus():
    """A says "Hello world hello", B shares a photo and reacts to A."""
    return Corpus(
        participants=[Participant("A"), Participant("B")],
        messages=[
            Message(
                sender_name="A",
                timestamp_ms=1,
                content="Hello world hello",
                reactions=(Reaction("❤", "B"),),
            ),
            Message(sender_name="B", timestamp_ms=2, content="sent a photo."),
        ],
    )


@pytest.fixture
def make_message():
    def _make(sender="A", content="", sticker_id=None, sticker_uri_value=None, reactions=None, type="Generic"):
        sticker = None
        if sticker_uri_value is not None:
            sticker = Sticker(sticker_uri_value)
        elif sticker_id is not None:
            sticker = Sticker(sticker_uri(sticker_id))
        return Message(
            sender_name=sender,
            content=content,
            sticker=sticker,
            reactions=tuple(Reaction(g, a) for g, a in reactions) if reactions is not None else None,
            type=type,
        )

    return _make
