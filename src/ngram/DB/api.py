# ngram/DB/api.py
from __future__ import annotations
from typing import Protocol, Iterator

from ..models import Token


class TokenDictionary(Protocol):
    # Create (idempotent per text + category)
    def add(self, text: str, category: str) -> Token: ...
    # Read
    def get(self, idx: int) -> Token: ...
    def __len__(self) -> int: ...
    def __iter__(self) -> Iterator[Token]: ...
    # lifecycle
    def flush(self) -> None: ...
    def close(self) -> None: ...


def make_dictionary(dsn: str) -> TokenDictionary:
    """
    Factory:
      - sqlite:///path -> SQLiteDictionary (file is created if missing, existing ids are kept)
      - memory://      -> MemoryDictionary
    """
    if dsn.startswith("sqlite:///"):
        path = dsn.removeprefix("sqlite:///")
        # lazy import to keep the stores free of circular imports
        from .sqlite_store import SQLiteDictionary
        return SQLiteDictionary(path)

    if dsn.startswith("memory://"):
        from .memory_store import MemoryDictionary
        return MemoryDictionary()

    raise ValueError(f"Unsupported dictionary DSN: {dsn}")
