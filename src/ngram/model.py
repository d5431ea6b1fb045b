# ngram/model.py
from __future__ import annotations

import logging
import random
import threading
from typing import Iterable, List, Optional, Tuple

from . import config as CFG
from .chain import ChainTable, build_chain, derive_start, make_classifier
from .DB.api import TokenDictionary, make_dictionary
from .generator import SentenceGenerator
from .loader import read_lines
from .models import Token
from .tokenizer import Tokenizer

log = logging.getLogger(__name__)


class Model:
    """
    Fixed-order Markov text model.

    Owns:
      - a token dictionary (text -> stable integer identity), memory or SQLite backed,
      - the chain table: prefix key -> ChainEntry (suffix counts),
      - the start set: token-id sequences that may open a sentence.

    Public API (used by CLI/Flask):
      * train(path):        tokenize a file and fold it into the chain
      * train_lines(lines): same, for text already in memory
      * sentence():         generate one sentence by weighted random walk
      * stats():            summary counters
      * close():            persist and release the dictionary
    """

    # ------------- lifecycle -------------

    def __init__(
        self,
        name: str,
        depth: int = CFG.DEPTH,
        *,
        dictionary: Optional[TokenDictionary] = None,
        dsn: Optional[str] = None,
        position_mode: Optional[str] = None,
    ) -> None:
        if int(depth) < 1:
            raise ValueError(f"depth must be >= 1, got {depth}")
        self.name = name
        self.depth = int(depth)
        self.position_mode = position_mode or CFG.POSITION_MODE
        make_classifier(self.position_mode)  # validate early
        if dictionary is None:
            dictionary = make_dictionary(dsn or CFG.DICT_DSN)
        self.dictionary: TokenDictionary = dictionary
        self.tokenizer = Tokenizer(self.dictionary)
        self.chain: ChainTable = {}
        self.start: List[Tuple[int, ...]] = []
        self._lock = threading.Lock()
        # START is registered first, so on a fresh dictionary it gets identity 0
        self._start_token: Token = self.tokenizer.start_token()
        log.info("Model %r created: depth=%d dictionary=%s", name, self.depth, type(self.dictionary).__name__)

    @property
    def start_idx(self) -> int:
        return self._start_token.idx

    # ------------- training -------------

    # /* ~~~ Train on one file; the whole file is read before the chain is touched ~~~ */
    def train(self, path: str) -> int:
        lines = read_lines(path)
        log.info("Training %r on %s (%d lines)", self.name, path, len(lines))
        return self.train_lines(lines)

    def train_lines(self, lines: Iterable[str]) -> int:
        """Tokenize all lines, run one chain pass over them and rebuild the start set."""
        with self._lock:
            tokens: List[Token] = [self.tokenizer.start_token()]
            for line in lines:
                self.tokenizer.tokenize_line(line, tokens)

            windows = build_chain(
                self.chain, tokens, self.depth,
                start_idx=self.start_idx, mode=self.position_mode,
            )
            self.start = derive_start(self.chain, self.start_idx)
            self.dictionary.flush()
        log.info(
            "Training pass done: tokens=%d windows=%d entries=%d start=%d",
            len(tokens), windows, len(self.chain), len(self.start),
        )
        return windows

    # ------------- generation -------------

    def sentence(self, max_words: Optional[int] = None, rng: Optional[random.Random] = None) -> str:
        with self._lock:
            return SentenceGenerator(self, rng).sentence(max_words)

    # ------------- introspection -------------

    def stats(self) -> dict:
        return {
            "name": self.name,
            "depth": self.depth,
            "position_mode": self.position_mode,
            "entries": len(self.chain),
            "start": len(self.start),
            "tokens": len(self.dictionary),
        }

    # ------------- teardown -------------

    def close(self) -> None:
        self.dictionary.close()
        log.info("Model %r closed", self.name)
