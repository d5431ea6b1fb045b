# src/ngram/models.py
"""
Data models for the n-gram text model.

- Token: one dictionary entry (identity, canonical text, lexical category).
- Category: lexical classes produced by the scanner plus the synthetic markers.
- PositionClass: where a chain entry sits inside a sentence.
- SuffixCount / ChainEntry: one prefix and the distribution of words seen after it.

These classes hold no training logic; see chain.py and model.py for that.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Tuple


class Category(str, Enum):
    WORD = "word"
    NUMBER = "number"
    PUNCT = "punct"
    STOP = "stop"                      # the literal "."
    STRING = "string"                  # quote literal, never stored in the dictionary
    SENTENCE_START = "sentence_start"
    QUOTE_OPEN = "quote_open"
    QUOTE_CLOSE = "quote_close"


class PositionClass(str, Enum):
    SENTENCE_START = "start"
    MIDDLE = "middle"
    SENTENCE_END = "end"


# canonical texts of the synthetic marker tokens; the scanner never yields
# a single unit containing "<", so these cannot collide with input words
START_WORD = "<START>"
QUOTE_BEGIN_WORD = "<QUOTE_BEGIN>"
QUOTE_END_WORD = "<QUOTE_END>"


@dataclass(frozen=True, slots=True)
class Token:
    """
    One dictionary entry.

    Attributes
    ----------
    idx : int
        Stable identity assigned by the dictionary (0 for the first token ever added).
    word : str
        Literal text of the token.
    category : str
        Lexical class; a Category value for everything the scanner produces,
        but the dictionary accepts any string.
    """
    idx: int
    word: str
    category: str


@dataclass(slots=True)
class SuffixCount:
    idx: int
    count: int


PrefixKey = Tuple[str, ...]


@dataclass(slots=True)
class ChainEntry:
    """
    A prefix and all of its observed suffixes.

    `prefix` and `position` are fixed when the entry is first created;
    only `suffixes` changes on later observations.
    """
    prefix: Tuple[int, ...]
    position: PositionClass
    suffixes: Dict[str, SuffixCount] = field(default_factory=dict)

    def add_suffix(self, token: Token) -> None:
        seen = self.suffixes.get(token.word)
        if seen is not None:
            seen.count += 1
        else:
            self.suffixes[token.word] = SuffixCount(idx=token.idx, count=1)

    def total(self) -> int:
        return sum(s.count for s in self.suffixes.values())


def prefix_key(tokens) -> PrefixKey:
    """
    Lookup key for a window of tokens: their literal texts, in order.
    Text-based, so one word scanned under two categories shares a key; marker
    texts are bracketed and never clash with scanned words.
    """
    return tuple(t.word for t in tokens)
