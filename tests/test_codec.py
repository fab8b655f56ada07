"""Tests for the charset-bound Codec."""

import threading

import pytest

from bincodec import Codec, DEFAULT_CHARSET, decode, encode
from bincodec.errors import CharsetError, TruncatedInputError


def test_codec_matches_free_functions():
    codec = Codec(DEFAULT_CHARSET)
    data = b"the quick brown fox"
    assert codec.encode(data) == encode(DEFAULT_CHARSET, data)
    assert codec.decode(codec.encode(data)) == decode(DEFAULT_CHARSET, encode(DEFAULT_CHARSET, data))


def test_codec_known():
    codec = Codec(DEFAULT_CHARSET)
    assert codec.decode("aab0aabLaabZaab0") == "test"
    assert codec.decode_bytes("qqbc") == b"AB"


def test_codec_rejects_duplicates():
    with pytest.raises(CharsetError):
        Codec("aabbcc")


def test_codec_short_charset_decodes_only():
    codec = Codec("abcd")
    assert not codec.can_encode
    assert codec.decode_bytes("aaab") == b"\x01"
    with pytest.raises(CharsetError, match="needs at least 64"):
        codec.encode(b"x")


def test_codec_strict():
    codec = Codec(DEFAULT_CHARSET)
    with pytest.raises(TruncatedInputError):
        codec.decode("DgvZa", strict=True)


def test_codec_lookup_read_only():
    codec = Codec(DEFAULT_CHARSET)
    assert codec.lookup["="] == 63
    with pytest.raises(TypeError):
        codec.lookup["!"] = 64


def test_codec_equality():
    assert Codec(DEFAULT_CHARSET) == Codec(DEFAULT_CHARSET)
    assert Codec(DEFAULT_CHARSET) != Codec("abcd")
    assert len({Codec(DEFAULT_CHARSET), Codec(DEFAULT_CHARSET)}) == 1
    assert repr(Codec("abcd")) == "Codec('abcd')"


def test_codec_shared_between_threads():
    codec = Codec(DEFAULT_CHARSET)
    payloads = [bytes([i + 1]) * (i + 1) for i in range(32)]
    results: dict[int, bytes] = {}

    def work(i: int) -> None:
        results[i] = codec.decode_bytes(codec.encode(payloads[i]))

    threads = [threading.Thread(target=work, args=(i,)) for i in range(len(payloads))]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert [results[i] for i in range(len(payloads))] == payloads


def test_codec_attributes_read_only():
    codec = Codec(DEFAULT_CHARSET)
    with pytest.raises(AttributeError):
        codec.charset = "abcd"
    with pytest.raises(AttributeError):
        codec.lookup = {}
    assert codec.charset == DEFAULT_CHARSET


def test_codec_strict_keyword_only():
    codec = Codec(DEFAULT_CHARSET)
    with pytest.raises(TypeError):
        codec.decode("DgvZa", True)
    with pytest.raises(TypeError):
        codec.decode_bytes("DgvZa", True)
