# tests/test_popularity.py
import json

from emoji_index.popularity import PopularityTracker


def test_counts_and_top():
    p = PopularityTracker()
    for g in ["🐱", "🔥", "🐱", "🚀", "🔥", "🐱"]:
        p.record(g)
    assert p.count("🐱") == 3
    assert p.count("🦄") == 0
    assert p.top(2) == [("🐱", 3), ("🔥", 2)]
    assert p.stats()["total_uses"] == 6
    assert p.stats()["unique_emojis"] == 3
    assert p.record("") == 0


def test_ties_broken_by_glyph():
    p = PopularityTracker()
    p.record("b")
    p.record("a")
    assert p.top() == [("a", 1), ("b", 1)]


def test_persistence_roundtrip(tmp_path):
    path = tmp_path / "pop" / "popularity.json"
    p = PopularityTracker(str(path))
    p.record("🐱")
    p.record("🐱")
    assert json.loads(path.read_text(encoding="utf-8")) == {"🐱": 2}

    again = PopularityTracker(str(path))
    assert again.count("🐱") == 2

    again.reset()
    assert again.top() == []
    assert PopularityTracker(str(path)).as_dict() == {}


def test_corrupt_file_is_ignored(tmp_path, quiet_log):
    path = tmp_path / "popularity.json"
    path.write_text("{broken", encoding="utf-8")
    p = PopularityTracker(str(path))
    assert p.as_dict() == {}
    assert "load failed" in quiet_log.read_text(encoding="utf-8")


def test_bad_counts_skipped(tmp_path):
    path = tmp_path / "popularity.json"
    path.write_text(json.dumps({"🐱": 3, "🔥": "x", "🚀": -1, "🎉": True}), encoding="utf-8")
    assert PopularityTracker(str(path)).as_dict() == {"🐱": 3}
