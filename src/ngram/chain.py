from __future__ import annotations
import logging
from typing import Callable, Dict, List, Sequence, Tuple

from .models import (
    Category,
    ChainEntry,
    PositionClass,
    PrefixKey,
    Token,
    prefix_key,
)

log = logging.getLogger(__name__)

ChainTable = Dict[PrefixKey, ChainEntry]
Classifier = Callable[[Sequence[Token], Token, int], PositionClass]

POSITION_MODES = ("per_pass", "per_window")


def _per_pass(state: PositionClass) -> Classifier:
    # one class for the whole pass; never recomputed between windows
    def classify(prefix: Sequence[Token], suffix: Token, start_idx: int) -> PositionClass:
        return state
    return classify


def classify_window(prefix: Sequence[Token], suffix: Token, start_idx: int) -> PositionClass:
    """Classify a window from its own tokens."""
    if prefix[0].idx == start_idx:
        return PositionClass.SENTENCE_START
    if suffix.category == Category.STOP:
        return PositionClass.SENTENCE_END
    return PositionClass.MIDDLE


def make_classifier(mode: str) -> Classifier:
    if mode == "per_pass":
        return _per_pass(PositionClass.SENTENCE_START)
    if mode == "per_window":
        return classify_window
    raise ValueError(f"Unknown position mode: {mode!r} (expected one of {POSITION_MODES})")


def update(table: ChainTable, prefix: Sequence[Token], suffix: Token, position: PositionClass) -> ChainEntry:
    """Record one prefix -> suffix observation."""
    key = prefix_key(prefix)
    entry = table.get(key)
    if entry is None:
        entry = ChainEntry(prefix=tuple(t.idx for t in prefix), position=position)
    entry.add_suffix(suffix)
    table[key] = entry
    return entry


def build_chain(
    table: ChainTable,
    tokens: Sequence[Token],
    depth: int,
    *,
    start_idx: int = 0,
    mode: str = "per_pass",
) -> int:
    """
    Slide a `depth`-wide window over `tokens` and fold every
    (prefix, following token) pair into `table`.
    Sequences of `depth + 1` tokens or fewer contribute nothing.
    Returns the number of windows observed.
    """
    classify = make_classifier(mode)
    if len(tokens) <= depth + 1:
        log.debug("Skipping short sequence: %d tokens (depth=%d)", len(tokens), depth)
        return 0

    windows = len(tokens) - depth
    for pos in range(windows):
        prefix = tokens[pos:pos + depth]
        suffix = tokens[pos + depth]
        position = classify(prefix, suffix, start_idx)
        update(table, prefix, suffix, position)
    return windows


def derive_start(table: ChainTable, start_idx: int = 0) -> List[Tuple[int, ...]]:
    """
    Sentence openers: for every entry whose prefix begins with the START identity,
    the rest of the prefix plus one successor. With several successors the last
    one in iteration order wins.
    """
    start: List[Tuple[int, ...]] = []
    for entry in table.values():
        if entry.prefix[0] != start_idx:
            continue
        seq = None
        for s in entry.suffixes.values():
            seq = entry.prefix[1:] + (s.idx,)
        if seq is not None:
            start.append(seq)
    return start
