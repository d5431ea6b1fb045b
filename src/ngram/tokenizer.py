from __future__ import annotations
from typing import List

from .DB.api import TokenDictionary
from .models import (
    Category,
    Token,
    START_WORD,
    QUOTE_BEGIN_WORD,
    QUOTE_END_WORD,
)
from .scanner import scan, is_quote_literal, strip_quotes


class Tokenizer:
    """Turns raw lines into dictionary-backed tokens, adding sentence and quote markers."""

    def __init__(self, dictionary: TokenDictionary) -> None:
        self.dictionary = dictionary

    def start_token(self) -> Token:
        return self.dictionary.add(START_WORD, Category.SENTENCE_START)

    def tokenize_line(self, line: str, tokens: List[Token]) -> List[Token]:
        """
        Append the tokens of one line to `tokens` and return it.

        A quote literal becomes QUOTE_BEGIN + tokens of its interior + QUOTE_END,
        so quoted speech is tokenized like a sub-sentence. A stop (".") is
        followed by a START marker, which resets the window at sentence boundaries.
        """
        for unit in scan(line):
            if is_quote_literal(unit):
                tokens.append(self.dictionary.add(QUOTE_BEGIN_WORD, Category.QUOTE_OPEN))
                self.tokenize_line(strip_quotes(unit.text), tokens)
                tokens.append(self.dictionary.add(QUOTE_END_WORD, Category.QUOTE_CLOSE))
                continue

            tokens.append(self.dictionary.add(unit.text, unit.category))
            if unit.category == Category.STOP:
                tokens.append(self.start_token())
        return tokens

    def tokenize(self, line: str) -> List[Token]:
        """Tokens of a single line, without the leading START marker."""
        return self.tokenize_line(line, [])
