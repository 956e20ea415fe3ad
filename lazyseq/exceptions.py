class LazySeqError(Exception):
    """Base class for errors raised by lazyseq."""


class InvalidInputError(LazySeqError, TypeError):
    """Value given to a Sequence is neither a collection nor iterable."""

    def __init__(self, value):
        self.value = value
        super(InvalidInputError, self).__init__(
            f"Input is not iterable: {type(value).__name__!s} {value!r}"
        )


class EmptyReduceError(LazySeqError, ValueError):
    """reduce() ran over an empty sequence without an initial value."""

    def __init__(self):
        super(EmptyReduceError, self).__init__(
            "reduce of empty sequence with no initial value"
        )


class InvalidStepError(LazySeqError, ValueError):
    """range() got a step that is not a positive number."""

    def __init__(self, step):
        self.step = step
        super(InvalidStepError, self).__init__(f"step must be positive, got {step!r}")


__all__ = ("EmptyReduceError", "InvalidInputError", "InvalidStepError", "LazySeqError")
