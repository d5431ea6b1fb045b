from __future__ import annotations
import argparse, json, logging, os, random, sys
from . import config as CFG
from .chain import POSITION_MODES
from .DB.api import make_dictionary
from .DB.storage import save_model, load_model
from .loader import TrainingSourceError, iter_training_files
from .model import Model


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="N-gram text model CLI")
    p.add_argument("--name", default=None, help="Model name (default: model)")
    p.add_argument("--depth", type=int, default=None, help=f"Prefix length (default: {CFG.DEPTH})")
    p.add_argument("--db", default=None, help='Dictionary DSN: "memory://" or "sqlite:///path"')
    p.add_argument("--train", nargs="+", default=[], help="Files or folders (*.txt) to train on")
    p.add_argument("--load", default=None, help="Model snapshot to start from")
    p.add_argument("--snapshot", default=None, help="Write the trained model snapshot here")
    p.add_argument("--sentences", type=int, default=0, help="Generate this many sentences")
    p.add_argument("--max-words", type=int, default=CFG.MAX_WORDS)
    p.add_argument("--seed", type=int, default=None, help="RNG seed for generation")
    p.add_argument("--position-mode", choices=POSITION_MODES, default=None)
    p.add_argument("--json", action="store_true", help="Emit JSON")
    p.add_argument("--verbose", action="store_true")
    args = p.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO)
        os.environ["NGRAM_VERBOSE"] = "1"

    dsn = args.db or CFG.DICT_DSN
    if args.load:
        # the snapshot defines these
        fixed = [flag for flag, v in (("--name", args.name), ("--depth", args.depth),
                                      ("--position-mode", args.position_mode)) if v is not None]
        if fixed:
            p.error(f"{', '.join(fixed)} cannot be combined with --load")
        dictionary = make_dictionary(dsn)
        try:
            model = load_model(args.load, dictionary)
        except ValueError as e:
            dictionary.close()
            p.error(str(e))
    else:
        model = Model(
            args.name or "model",
            args.depth if args.depth is not None else CFG.DEPTH,
            dsn=dsn, position_mode=args.position_mode,
        )

    try:
        for path in iter_training_files(args.train):
            try:
                model.train(path)
            except TrainingSourceError as e:
                print(f"error: {e}", file=sys.stderr)
                return 2

        if args.snapshot:
            save_model(model, args.snapshot)

        rng = random.Random(args.seed)
        sentences = [model.sentence(args.max_words, rng=rng) for _ in range(max(0, args.sentences))]

        if args.json:
            print(json.dumps({"stats": model.stats(), "sentences": sentences}, ensure_ascii=False, indent=2))
        else:
            st = model.stats()
            print(f"{st['name']}: depth={st['depth']} entries={st['entries']:,} "
                  f"start={st['start']:,} tokens={st['tokens']:,}")
            for i, s in enumerate(sentences, 1):
                print(f"{i:<3} {s or '(empty model)'}")
        return 0
    finally:
        model.close()


if __name__ == "__main__":
    raise SystemExit(main())
