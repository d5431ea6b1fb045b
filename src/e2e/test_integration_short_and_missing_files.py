import copy
from pathlib import Path
import pytest
from ngram.loader import TrainingSourceError
from ngram.model import Model


@pytest.mark.e2e
@pytest.mark.parametrize("text", ["", "Hi\n", "Hi there\n"])
def test_short_file_leaves_model_unchanged(tmp_path: Path, text: str):
    m = Model("short", 2)
    try:
        m.train_lines(["the cat sat."])
        chain_before = copy.deepcopy(m.chain)
        start_before = list(m.start)

        f = tmp_path / "short.txt"
        f.write_text(text, encoding="utf-8")
        assert m.train(str(f)) == 0

        assert m.chain == chain_before
        assert m.start == start_before
    finally:
        m.close()


@pytest.mark.e2e
def test_missing_file_is_a_recoverable_error(tmp_path: Path):
    m = Model("missing", 2)
    try:
        m.train_lines(["the cat sat."])
        chain_before = copy.deepcopy(m.chain)
        start_before = list(m.start)

        missing = tmp_path / "nope.txt"
        with pytest.raises(TrainingSourceError) as ei:
            m.train(str(missing))
        assert ei.value.path == str(missing)

        assert m.chain == chain_before
        assert m.start == start_before
        # still usable afterwards
        assert m.train_lines(["a dog ran."]) > 0
    finally:
        m.close()
