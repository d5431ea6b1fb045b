# ngram/DB/sqlite_store.py
from __future__ import annotations
import logging
import os
import sqlite3
from typing import Iterator
from .api import TokenDictionary
from .memory_store import MemoryDictionary, _cat
from ..models import Token

log = logging.getLogger(__name__)

_SCHEMA = """
CREATE TABLE IF NOT EXISTS tokens (
  idx INTEGER PRIMARY KEY,
  word TEXT NOT NULL,
  category TEXT NOT NULL,
  UNIQUE(word, category)
);
"""


class SQLiteDictionary(TokenDictionary):
    """
    SQLite-persisted token dictionary.
    All rows are loaded into a MemoryDictionary on open, so lookups never hit the DB;
    new tokens are inserted as they appear and committed on flush()/close().
    """
    def __init__(self, db_path: str) -> None:
        self.db_path = os.path.abspath(db_path)
        os.makedirs(os.path.dirname(self.db_path) or ".", exist_ok=True)
        self.conn: sqlite3.Connection | None = sqlite3.connect(self.db_path, check_same_thread=False)
        self.conn.execute("PRAGMA journal_mode=WAL;")
        self.conn.executescript(_SCHEMA)
        self._mem = MemoryDictionary()
        for idx, word, category in self.conn.execute(
            "SELECT idx, word, category FROM tokens ORDER BY idx"
        ):
            self._mem._remember(Token(idx=int(idx), word=word, category=category))
        log.info("Opened dictionary %s: %d tokens", self.db_path, len(self._mem))

    # ---- Create ----
    def add(self, text: str, category) -> Token:
        if self.conn is None:
            raise RuntimeError("dictionary is closed")
        before = len(self._mem)
        tok = self._mem.add(text, _cat(category))
        if len(self._mem) > before:
            self.conn.execute(
                "INSERT INTO tokens(idx, word, category) VALUES (?,?,?)",
                (tok.idx, tok.word, tok.category),
            )
        return tok

    # ---- Read ----
    def get(self, idx: int) -> Token:
        return self._mem.get(idx)

    def __len__(self) -> int:
        return len(self._mem)

    def __iter__(self) -> Iterator[Token]:
        return iter(self._mem)

    # ---- lifecycle ----
    def flush(self) -> None:
        if self.conn is not None:
            self.conn.commit()

    def close(self) -> None:
        if self.conn is None:
            return
        try:
            self.conn.commit()
        finally:
            self.conn.close()
            self.conn = None
            self._mem.close()
            log.info("Closed dictionary %s", self.db_path)
