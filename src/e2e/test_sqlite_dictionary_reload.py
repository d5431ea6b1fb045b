from pathlib import Path
import pytest
from ngram.DB.api import make_dictionary
from ngram.DB.sqlite_store import SQLiteDictionary
from ngram.models import Category


def test_identities_survive_reopen(tmp_path: Path):
    path = tmp_path / "dict" / "words.sqlite"
    d1 = make_dictionary(f"sqlite:///{path}")
    assert isinstance(d1, SQLiteDictionary)
    start = d1.add("<START>", Category.SENTENCE_START)
    cat = d1.add("cat", Category.WORD)
    d1.close()
    assert path.exists()

    d2 = SQLiteDictionary(str(path))
    try:
        assert len(d2) == 2
        assert d2.add("<START>", Category.SENTENCE_START) == start
        assert d2.add("cat", Category.WORD) == cat
        dog = d2.add("dog", Category.WORD)
        assert dog.idx == 2
        assert d2.get(1).word == "cat"
    finally:
        d2.close()


def test_closed_sqlite_dictionary_rejects_add(tmp_path: Path):
    d = SQLiteDictionary(str(tmp_path / "d.sqlite"))
    d.close()
    d.close()  # second close is a no-op
    with pytest.raises(RuntimeError):
        d.add("late", Category.WORD)
