# ngram/DB/memory_store.py
from __future__ import annotations
from typing import Dict, Iterator, List, Tuple
from .api import TokenDictionary
from ..models import Token


def _cat(category) -> str:
    # Category members and plain strings share one key space
    return str(getattr(category, "value", category))


class MemoryDictionary(TokenDictionary):
    """In-memory token dictionary; identities come from a per-instance counter starting at 0."""
    def __init__(self) -> None:
        self._by_key: Dict[Tuple[str, str], Token] = {}
        self._by_idx: List[Token] = []
        self._closed = False

    # C
    def add(self, text: str, category) -> Token:
        if self._closed:
            raise RuntimeError("dictionary is closed")
        key = (text, _cat(category))
        tok = self._by_key.get(key)
        if tok is None:
            tok = Token(idx=len(self._by_idx), word=text, category=key[1])
            self._remember(tok)
        return tok

    # R
    def get(self, idx: int) -> Token:
        idx = int(idx)
        if not 0 <= idx < len(self._by_idx):
            raise KeyError(idx)
        return self._by_idx[idx]

    def __len__(self) -> int:
        return len(self._by_idx)

    def __iter__(self) -> Iterator[Token]:
        return iter(self._by_idx)

    # lifecycle
    def flush(self) -> None:
        pass

    def close(self) -> None:
        self._closed = True

    def _remember(self, tok: Token) -> None:
        if tok.idx != len(self._by_idx):
            raise ValueError(f"non-contiguous token id {tok.idx} (expected {len(self._by_idx)})")
        self._by_key[(tok.word, tok.category)] = tok
        self._by_idx.append(tok)
