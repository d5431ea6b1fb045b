from __future__ import annotations
import random
from typing import TYPE_CHECKING, List, Optional, Sequence

from . import config as CFG
from .models import Category, Token

if TYPE_CHECKING:
    from .model import Model

_NO_SPACE_BEFORE = {Category.PUNCT.value, Category.STOP.value, Category.QUOTE_CLOSE.value}


class SentenceGenerator:
    """
    Weighted random walk over a trained model.

    Starts from a random entry of `model.start`, then keeps sampling the next
    token with probability proportional to its observed count until the
    sentence is closed (a START marker follows a stop), the current window
    was never observed, or `max_words` tokens were produced.
    """

    def __init__(self, model: "Model", rng: Optional[random.Random] = None) -> None:
        self.model = model
        self.rng = rng or random.Random()

    def walk(self, max_words: Optional[int] = None) -> List[Token]:
        limit = max_words if max_words is not None else CFG.MAX_WORDS
        m = self.model
        if not m.start or limit <= 0:
            return []

        seed = self.rng.choice(m.start)
        words: List[Token] = []
        for idx in seed:
            tok = m.dictionary.get(idx)
            if tok.category == Category.SENTENCE_START:
                return words[:limit]
            words.append(tok)

        while len(words) < limit:
            key = tuple(t.word for t in words[-m.depth:])
            entry = m.chain.get(key)
            if entry is None or not entry.suffixes:
                break
            texts = list(entry.suffixes)
            weights = [entry.suffixes[t].count for t in texts]
            pick = entry.suffixes[self.rng.choices(texts, weights=weights)[0]]
            tok = m.dictionary.get(pick.idx)
            if tok.category == Category.SENTENCE_START:
                break
            words.append(tok)
        return words[:limit]

    def sentence(self, max_words: Optional[int] = None) -> str:
        return render(self.walk(max_words))


def render(tokens: Sequence[Token]) -> str:
    """Join tokens into text: markers dropped, quotes as '"', punctuation glued to the left."""
    out: List[str] = []
    glue = True  # no space before the next piece
    for tok in tokens:
        cat = tok.category
        if cat == Category.SENTENCE_START:
            continue
        if cat == Category.QUOTE_OPEN:
            text = '"'
        elif cat == Category.QUOTE_CLOSE:
            text = '"'
        else:
            text = tok.word
        if out and not glue and cat not in _NO_SPACE_BEFORE:
            out.append(" ")
        out.append(text)
        glue = cat == Category.QUOTE_OPEN
    return "".join(out)
