from __future__ import annotations
import os
from typing import Iterable, Iterator, List

from .config import TEXT_EXTS

# Progress logging (set NGRAM_VERBOSE=1 to enable)
def _verbose() -> bool:
    return os.environ.get("NGRAM_VERBOSE") == "1"


PROGRESS_EVERY_LINES = 100_000


class TrainingSourceError(RuntimeError):
    """A training file could not be opened or read."""
    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"training source unavailable: {path}: {reason}")
        self.path = path
        self.reason = reason


def read_lines(path: str) -> List[str]:
    """
    Read a whole training file into lines (without EOL).
    The file is read completely before anything is trained on it, so a read
    failure never leaves a half-trained chain behind.
    """
    lines: List[str] = []
    verbose = _verbose()
    try:
        with open(path, "r", encoding="utf-8", errors="ignore") as f:
            for i, raw in enumerate(f, start=1):
                lines.append(raw.rstrip("\r\n"))
                if verbose and i % PROGRESS_EVERY_LINES == 0:
                    print(f"[read] {path}: lines={i:,}")
    except OSError as e:
        raise TrainingSourceError(path, e.strerror or str(e)) from e
    return lines


def iter_training_files(roots: Iterable[str]) -> Iterator[str]:
    """Yield files as given and, for directories, matching text files found recursively."""
    for root in roots:
        if not os.path.isdir(root):
            yield root
            continue
        for dirpath, dirnames, filenames in os.walk(root):
            dirnames.sort()
            for fn in sorted(filenames):
                if fn.lower().endswith(TEXT_EXTS):
                    yield os.path.join(dirpath, fn)
