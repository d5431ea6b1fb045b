from __future__ import annotations
import os
import pickle
from typing import TYPE_CHECKING, Any, Dict

from ..models import ChainEntry, PositionClass, SuffixCount
from .api import TokenDictionary

if TYPE_CHECKING:
    from ..model import Model

_FORMAT = 2


def _state(model: "Model") -> Dict[str, Any]:
    # plain builtins only, so snapshots do not depend on class layout
    return {
        "format": _FORMAT,
        "name": model.name,
        "depth": model.depth,
        "position_mode": model.position_mode,
        "tokens": [(t.idx, t.word, t.category) for t in model.dictionary],
        "chain": [
            (
                list(key),
                list(e.prefix),
                e.position.value,
                [(w, s.idx, s.count) for w, s in e.suffixes.items()],
            )
            for key, e in model.chain.items()
        ],
        "start": [list(seq) for seq in model.start],
    }


def save_model(model: "Model", path: str) -> None:
    """Pickle the chain state together with the dictionary tokens it refers to."""
    tmp = f"{path}.tmp"
    os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
    with open(tmp, "wb") as f:
        pickle.dump(_state(model), f, protocol=pickle.HIGHEST_PROTOCOL)
    os.replace(tmp, path)


def _restore_tokens(path: str, tokens, dictionary: TokenDictionary) -> None:
    """
    Make `dictionary` hold the snapshot's identities: an empty dictionary is
    filled from the snapshot, a non-empty one must already agree with it.
    """
    fill = len(dictionary) == 0
    for idx, word, category in tokens:
        if fill:
            tok = dictionary.add(word, category)
        else:
            try:
                tok = dictionary.get(idx)
            except KeyError:
                raise ValueError(f"{path}: dictionary has no token {idx} ({word!r})")
        if (tok.idx, tok.word, tok.category) != (idx, word, category):
            raise ValueError(
                f"{path}: dictionary token {tok.idx} is {tok.word!r}/{tok.category}, "
                f"snapshot expects {idx} {word!r}/{category}"
            )


def load_model(path: str, dictionary: TokenDictionary) -> "Model":
    """
    Rebuild a model from a snapshot around `dictionary`. An empty dictionary is
    filled with the snapshot's tokens; otherwise it must hold the identities the
    model was trained with (ValueError if not).
    """
    from ..model import Model

    with open(path, "rb") as f:
        data = pickle.load(f)
    if data.get("format") != _FORMAT:
        raise ValueError(f"{path}: unsupported snapshot format {data.get('format')!r}")
    _restore_tokens(path, data["tokens"], dictionary)

    model = Model(
        data["name"], data["depth"],
        dictionary=dictionary, position_mode=data["position_mode"],
    )
    for key, prefix, position, suffixes in data["chain"]:
        model.chain[tuple(key)] = ChainEntry(
            prefix=tuple(prefix),
            position=PositionClass(position),
            suffixes={w: SuffixCount(idx=i, count=c) for w, i, c in suffixes},
        )
    model.start = [tuple(seq) for seq in data["start"]]
    return model
