# Copyright 2026, dictspell authors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.

from .argx import arg
from .dictionary import DEFAULT_LIMIT, DEFAULT_MAX_DISTANCE

arg.json = arg("--json", help="Raw json output", action="store_true", default=False)
arg.limit = arg("-n", "--limit", type=int, default=DEFAULT_LIMIT, help="Maximum number of suggestions")
arg.max_distance = arg(
    "-d",
    "--max-distance",
    type=int,
    default=DEFAULT_MAX_DISTANCE,
    help="Maximum edit distance of a suggestion, clamped to 1..len(word)-1",
)
arg.word = arg("word", help="Word to check")
arg.words = arg("words", metavar="word", nargs="+", help="Words to check")
