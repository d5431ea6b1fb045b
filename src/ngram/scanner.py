from __future__ import annotations
import re
from typing import Iterator, NamedTuple

from .models import Category

# First alternative that matches wins; whitespace is never matched, so finditer skips it.
# An unterminated quote fails the `string` branch and falls through to `punct`.
# Unlike a source-code scanner, a number never swallows a trailing "." ("1999." is
# a number then a stop, so the sentence still ends) and inner apostrophes stay
# inside the word ("don't" is one unit, not "don" + a broken char literal).
_UNIT = re.compile(
    r"""
      (?P<string>"(?:[^"\\]|\\.)*"|'(?:[^'\\]|\\.)*')
    | (?P<number>\d+(?:\.\d+)?)
    | (?P<word>[^\W\d]\w*(?:'[^\W\d]+)*)
    | (?P<punct>\S)
    """,
    re.VERBOSE | re.UNICODE,
)

_QUOTES = ('"', "'")


class Unit(NamedTuple):
    text: str
    category: str


def scan(line: str) -> Iterator[Unit]:
    """
    Split one line into lexical units.
    Rules:
      * "..." and '...' literals (same line, backslash escapes) -> STRING, delimiters kept
      * digits with optional fraction -> NUMBER ("1999." is 1999 followed by a stop)
      * letter/underscore runs, inner apostrophes allowed ("don't") -> WORD
      * "." -> STOP, any other single non-space char -> PUNCT
    """
    for m in _UNIT.finditer(line):
        kind = m.lastgroup
        text = m.group(0)
        if kind == "string":
            yield Unit(text, Category.STRING)
        elif kind == "number":
            yield Unit(text, Category.NUMBER)
        elif kind == "word":
            yield Unit(text, Category.WORD)
        elif text == ".":
            yield Unit(text, Category.STOP)
        else:
            yield Unit(text, Category.PUNCT)


def is_quote_literal(unit: Unit) -> bool:
    return unit.category == Category.STRING and unit.text[:1] in _QUOTES


def strip_quotes(text: str) -> str:
    """Interior of a quote literal."""
    return text[1:-1]
