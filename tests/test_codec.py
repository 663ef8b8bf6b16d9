# tests/test_codec.py
import pytest

from emoji_index.core.codec import (
    EMPTY_RESULT,
    decode_language_list,
    decode_results,
    encode_or_empty,
    encode_results,
    try_encode,
)
from emoji_index.core.errors import EncodingFailure, MalformedInput


def test_encode_keeps_emoji_readable():
    text = encode_results([("cat", ["🐱", "🐈"])])
    assert text == '[["cat", ["🐱", "🐈"]]]'
    assert decode_results(text) == [("cat", ["🐱", "🐈"])]


def test_encode_failure_vs_empty():
    ok = try_encode([])
    assert ok.ok and ok.value == "[]"

    broken = try_encode([("cat", [object()])])
    assert not broken.ok
    assert isinstance(broken.error, EncodingFailure)
    assert broken.unwrap_or_empty() == EMPTY_RESULT

    with pytest.raises(EncodingFailure):
        encode_results([("cat", [object()])])


def test_encode_or_empty_logs(quiet_log):
    assert encode_or_empty([("cat", [object()])]) == "[]"
    assert "ERROR" in quiet_log.read_text(encoding="utf-8")


def test_decode_language_list():
    assert decode_language_list('["english", "russian"]') == ["english", "russian"]
    assert decode_language_list(("english",)) == ["english"]
    assert decode_language_list("[]") == []
    for bad in ("english", "{}", '["a", 2]', None, {"english"}):
        with pytest.raises(MalformedInput):
            decode_language_list(bad)


def test_decode_results_rejects_garbage():
    with pytest.raises(MalformedInput):
        decode_results("{}")
    with pytest.raises(MalformedInput):
        decode_results('[["cat"]]')
