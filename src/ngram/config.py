DEPTH: int = 2

# Dictionary location: "memory://" or "sqlite:///path/to/dict.sqlite"
DICT_DSN: str = "memory://"

# How new chain entries are classified:
# - "per_pass": one class for every entry created during a training call
# - "per_window": classify each window from its own tokens
POSITION_MODE: str = "per_pass"

# /* ~~~ cap on generated sentence length (tokens, markers included) ~~~ */
MAX_WORDS: int = 50

# file types picked up when a training root is a directory
TEXT_EXTS = (".txt",)
