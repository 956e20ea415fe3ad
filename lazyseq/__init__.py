"""
Package for chaining lazy, pull-based, single-pass operations over iterators. Imports the
primary entrypoint at streams.seq and the Sequence class it builds.

Elements are produced one at a time as the final consumer asks for them; no operator buffers
ahead or replays what has already been consumed.
"""

from lazyseq.exceptions import EmptyReduceError, InvalidInputError, InvalidStepError, LazySeqError
from lazyseq.pipeline import Sequence
from lazyseq.streams import Stream, seq

__license__ = "MIT"
__version__ = "0.1.0"
__status__ = "Development"

__all__ = [
    "EmptyReduceError",
    "InvalidInputError",
    "InvalidStepError",
    "LazySeqError",
    "Sequence",
    "Stream",
    "seq",
]
