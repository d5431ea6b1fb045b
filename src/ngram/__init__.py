"""
N-gram (Markov) text model.

Builds a fixed-order Markov model from plain-text files: each line is split
into words and punctuation, sentence and quote boundaries get synthetic
marker tokens, and every `depth`-token prefix records the words that follow it.

Main pieces:
    Model:             train(path) / sentence() / stats() / close()
    make_dictionary:   token dictionary from a DSN ("memory://", "sqlite:///path")
    save_model / load_model: snapshot of a trained chain

Example Usage:
    from ngram import Model

    m = Model("alice", depth=2, dsn="sqlite:///var/alice.sqlite")
    m.train("alice.txt")
    print(m.sentence())
    m.close()
"""

from .model import Model
from .loader import TrainingSourceError
from .DB.api import make_dictionary
from .DB.storage import save_model, load_model

__version__ = "1.0.0"
__all__ = ["Model", "TrainingSourceError", "make_dictionary", "save_model", "load_model"]
