# tests/conftest.py
import pytest

from emoji_index import EmojiIndex
from emoji_index.utils.logger_utils import Log


@pytest.fixture(autouse=True)
def quiet_log(tmp_path, monkeypatch):
    """Keep test runs from writing into ./logs or spamming the console."""
    monkeypatch.setattr(Log, "path", str(tmp_path / "logs" / "test.log"))
    monkeypatch.setattr(Log, "echo", False)
    monkeypatch.setattr(Log, "min_level", "DEBUG")
    monkeypatch.setattr(Log, "use_color", True)
    return tmp_path / "logs" / "test.log"


@pytest.fixture
def dataset():
    return {
        "english": {"cat": "🐱 🐈", "car": "🚗", "cake": "🍰", "catalog": "📒", "dog": "🐶"},
        "russian": {"кот": "🐱", "кошка": "🐈"},
    }


@pytest.fixture
def index(dataset):
    return EmojiIndex(dataset)
