from collections import Counter
from pathlib import Path
import pytest
from ngram.model import Model


def _seed(tmp: Path, text: str, name: str = "corpus.txt") -> str:
    p = tmp / name
    p.write_text(text, encoding="utf-8")
    return str(p)


@pytest.mark.e2e
def test_single_sentence_depth_two(tmp_path: Path):
    m = Model("abc", 2)
    try:
        m.train(_seed(tmp_path, "A B.\n"))
        d = m.dictionary
        start = d.add("<START>", "sentence_start")
        a = d.add("A", "word")
        b = d.add("B", "word")

        entry = m.chain[("<START>", "A")]
        assert entry.prefix == (start.idx, a.idx)
        assert {w: s.count for w, s in entry.suffixes.items()} == {"B": 1}
        assert m.start == [(a.idx, b.idx)]
    finally:
        m.close()


@pytest.mark.e2e
def test_prefix_length_and_suffix_totals(tmp_path: Path):
    text = "the cat sat. the cat ran.\nA dog \"barked at the cat\".\n"
    m = Model("cats", 3)
    try:
        m.train(_seed(tmp_path, text))

        # rebuild the token stream to count window observations independently
        tokens = [m.tokenizer.start_token()]
        for line in text.splitlines():
            m.tokenizer.tokenize_line(line, tokens)
        seen = Counter(
            tuple(t.word for t in tokens[i:i + m.depth])
            for i in range(len(tokens) - m.depth)
        )

        assert set(m.chain) == set(seen)
        for key, entry in m.chain.items():
            assert len(entry.prefix) == m.depth
            assert entry.total() == seen[key]
        for seq in m.start:
            assert len(seq) == m.depth
    finally:
        m.close()


@pytest.mark.e2e
def test_start_set_is_rebuilt_from_all_openers(tmp_path: Path):
    m = Model("openers", 2)
    try:
        m.train(_seed(tmp_path, "the cat sat. a dog ran.\n"))
        d = m.dictionary
        words = {t.word: t.idx for t in d}
        assert sorted(m.start) == sorted([
            (words["the"], words["cat"]),
            (words["a"], words["dog"]),
        ])
    finally:
        m.close()


def test_depth_must_be_positive():
    with pytest.raises(ValueError):
        Model("bad", 0)


def test_opener_with_several_suffixes_keeps_the_last_one():
    m = Model("openers", 1)
    m.train_lines(["the cat. a dog."])
    a = m.dictionary.add("a", "word")
    opener = m.chain[("<START>",)]
    assert list(opener.suffixes) == ["the", "a"]
    assert m.start == [(a.idx,)]


def test_literal_start_word_is_not_the_marker():
    m = Model("markers", 1)
    m.train_lines(["START here. START now."])
    word = m.dictionary.add("START", "word")
    assert word.idx != m.start_idx
    assert {w: s.count for w, s in m.chain[("<START>",)].suffixes.items()} == {"START": 2}
    assert {w: s.count for w, s in m.chain[("START",)].suffixes.items()} == {"here": 1, "now": 1}
    assert m.start == [(word.idx,)]
