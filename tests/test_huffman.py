import io
import itertools

import pytest

from algolab.huffman import huffman_codes, main

CLASSIC = {"a": 5, "b": 9, "c": 12, "d": 13, "e": 16, "f": 45}


def test_classic_cost():
    codes = huffman_codes(CLASSIC)
    assert sum(CLASSIC[s] * len(code) for s, code in codes.items()) == 224


@pytest.mark.parametrize(
    "freqs",
    [CLASSIC, {"x": 1, "y": 1}, {"p": 3, "q": 1, "r": 1, "s": 7, "t": 2}],
)
def test_codes_are_prefix_free(freqs):
    codes = huffman_codes(freqs)
    assert set(codes) == set(freqs)
    for a, b in itertools.permutations(codes.values(), 2):
        assert not b.startswith(a)


@pytest.mark.parametrize("freqs", [CLASSIC, {"p": 3, "q": 1, "r": 1, "s": 7, "t": 2}])
def test_code_is_complete(freqs):
    codes = huffman_codes(freqs)
    assert sum(2.0 ** -len(code) for code in codes.values()) == pytest.approx(1.0)


def test_frequent_symbols_get_shorter_codes():
    codes = huffman_codes(CLASSIC)
    ranked = sorted(CLASSIC, key=CLASSIC.get)
    lengths = [len(codes[s]) for s in ranked]
    assert lengths == sorted(lengths, reverse=True)


def test_two_symbols():
    assert sorted(huffman_codes({"x": 4, "y": 9}).values()) == ["0", "1"]


def test_single_symbol_has_empty_code():
    assert huffman_codes({"a": 5}) == {"a": ""}


def test_dollar_is_an_ordinary_symbol():
    codes = huffman_codes({"$": 2, "a": 3})
    assert set(codes) == {"$", "a"}


def test_empty_input():
    with pytest.raises(ValueError):
        huffman_codes({})


def test_main_prints_codes(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\na 5\nb 9\nc 12\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Huffman Codes:" in out
    for symbol, code in huffman_codes({"a": 5, "b": 9, "c": 12}).items():
        assert f"{symbol}: {code}\n" in out


def test_main_truncated(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\na 5\n"))
    assert main([]) == 1