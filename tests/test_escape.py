import ast
import random

import pytest

from radbuilder.codegen.escape import boolean, escape, num, offset, quote

TRICKY = [
    "",
    "plain",
    'say "hi"',
    "back\\slash",
    "trailing\\",
    "\\\"",
    "line\none",
    "cr\r\nlf",
    "tab\there",
    "nul\x00byte",
    "bell\x07",
    "del\x7f",
    "nbsp\xa0space",
    "line\u2028sep",
    "emoji \U0001f600",
    "icon \U0001f5bc\ufe0f",
    "zero\u200bwidth",
    "{braces} and %s",
    "'single' quotes",
    "lone \ud800 surrogate",
    "Pick a date",
]


@pytest.mark.parametrize("text", TRICKY)
def test_escape_round_trips_through_literal_eval(text):
    assert ast.literal_eval('"' + escape(text) + '"') == text


def random_text(rng, length):
    # ASCII, the rest of the BMP, lone surrogates and astral planes.
    pools = [(0x00, 0x7F), (0x80, 0xFFFF), (0xD800, 0xDFFF), (0x10000, 0x10FFFF)]
    chars = []
    for _ in range(length):
        low, high = rng.choice(pools)
        chars.append(chr(rng.randint(low, high)))
    return "".join(chars)


@pytest.mark.parametrize("seed", range(20))
def test_escape_round_trips_random_strings(seed):
    rng = random.Random(seed)
    for _ in range(200):
        text = random_text(rng, rng.randint(0, 40))
        literal = quote(text)
        assert ast.literal_eval(literal) == text
        assert "\n" not in literal


@pytest.mark.parametrize("text", TRICKY)
def test_escaped_literal_stays_on_one_line(text):
    assert "\n" not in quote(text)
    assert "\r" not in quote(text)


def test_escape_basic_sequences():
    assert escape('a"b') == 'a\\"b'
    assert escape("a\\b") == "a\\\\b"
    assert escape("a\nb") == "a\\nb"
    assert escape("\u00fc") == "\u00fc"


def test_num_formats_finite_and_special_values():
    assert num(42.0) == "42.000"
    assert num(1.26, 1) == "1.3"
    assert num(float("nan")) == 'float("nan")'
    assert num(float("inf")) == 'float("inf")'
    assert num(float("-inf")) == '-float("inf")'


def test_offset_avoids_plus_minus():
    assert offset("origin.x", 12.0) == "origin.x + 12.0"
    assert offset("origin.x", -8.0) == "origin.x - 8.0"
    assert offset("origin.y", float("nan")) == 'origin.y + float("nan")'


def test_boolean_literals():
    assert boolean(True) == "True"
    assert boolean(False) == "False"
