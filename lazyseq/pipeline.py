"""
The Sequence class, which wraps a single pull-based cursor and exposes the chainable operators.
"""
import numbers

from lazyseq import transformations
from lazyseq.base import CursorOwner, to_cursor, to_cursors
from lazyseq.exceptions import EmptyReduceError, InvalidStepError
from lazyseq.logger import get_logger
from lazyseq.util import adapt_arity, range_length

logger = get_logger()


class Sequence(CursorOwner):
    """
    Lazy, single-pass sequence over a cursor.

    Lazy operators return a new Sequence (of the same class as the receiver) around a
    generator that owns the receiver's cursor; the receiver must not be pulled afterwards.
    Terminal operators (to_list, for_each, reduce, join) drain the cursor. Nothing is
    memoized: a drained Sequence stays empty.
    """

    __slots__ = ("_cursor",)

    def __init__(self, source):
        """
        Creates a Sequence from a list, tuple, iterator, iterable or another Sequence.

        >>> Sequence([1, 2, 3]).to_list()
        [1, 2, 3]

        :param source: values to wrap
        :raises InvalidInputError: if source is not iterable
        """
        self._cursor = to_cursor(source)

    def _release_cursor(self):
        return self._cursor

    def _wrap(self, cursor):
        """
        Constructs a Sequence of the receiver's own class around cursor. Every operator goes
        through here so subclasses survive chaining.
        """
        logger.d("%s: chaining %s", type(self).__name__, getattr(cursor, "__name__", type(cursor).__name__))
        return type(self)(cursor)

    def __iter__(self):
        return self

    def __next__(self):
        return next(self._cursor)

    def __repr__(self):
        return f"{type(self).__name__}({type(self._cursor).__name__})"

    # --------- terminal operators ----------

    def to_list(self):
        """
        Drains the sequence into a list. Never returns on an unbounded sequence.

        >>> Sequence.range(3).to_list()
        [0, 1, 2]

        :return: list of the remaining elements
        """
        return list(self._cursor)

    to_array = to_list

    def for_each(self, func):
        """
        Calls func(value, index) on every element, draining the sequence.

        :param func: callback, may take only the value
        """
        func = adapt_arity(func, 2)
        for index, value in enumerate(self._cursor):
            func(value, index)

    def reduce(self, func, *initial):
        """
        Folds the sequence with func(carry, value, index).

        Without an initial value the first element is the seed and the first folded element
        gets index 1. With an initial value the first folded element gets index 0.

        >>> Sequence([1, 2, 3, 4]).reduce(lambda carry, x: carry + x)
        10
        >>> Sequence([]).reduce(lambda carry, x: carry + x, 0)
        0

        :param func: fold function
        :param initial: optional single initial value
        :return: folded value
        :raises EmptyReduceError: on an empty sequence with no initial value
        """
        if len(initial) > 1:
            raise TypeError(f"reduce expected at most 1 initial value, got {len(initial)}")
        func = adapt_arity(func, 3, minimum=2)
        start = 0
        if initial:
            carry = initial[0]
        else:
            try:
                carry = next(self._cursor)
            except StopIteration:
                logger.err("reduce called on an empty sequence without an initial value")
                raise EmptyReduceError() from None
            start = 1
        for index, value in enumerate(self._cursor, start):
            carry = func(carry, value, index)
        return carry

    def join(self, delimiter=""):
        """
        Drains the sequence and joins str() of every element with delimiter.

        >>> Sequence([1, 2, 3]).join(",")
        '1,2,3'
        """
        return delimiter.join(str(value) for value in self.to_list())

    # --------- elementwise operators (lazy) ----------

    def pipe(self, func):
        """
        Hands the raw cursor to func and wraps what it returns. This is the way to plug in a
        custom generator.

        >>> def double(cursor):
        ...     for x in cursor:
        ...         yield x * 2
        >>> Sequence.range(3).pipe(double).to_list()
        [0, 2, 4]

        :param func: function from an iterator to an iterable
        :return: wrapped result
        """
        logger.d("pipe through %s", getattr(func, "__name__", func))
        return self._wrap(to_cursor(func(self._cursor)))

    def map(self, func):
        """
        Maps func(value, index) over the sequence.

        >>> Sequence.range(5).map(lambda x: x * 2).to_list()
        [0, 2, 4, 6, 8]
        """
        return self._wrap(transformations.map_t(self._cursor, adapt_arity(func, 2)))

    def filter(self, func):
        """
        Keeps the elements for which func(value, index) is truthy. The index counts every
        upstream element, kept or not.

        >>> Sequence.range(5).filter(lambda x: x % 2 == 0).to_list()
        [0, 2, 4]
        """
        return self._wrap(transformations.filter_t(self._cursor, adapt_arity(func, 2)))

    def take_while(self, func):
        """
        Yields elements until func(value, index) is falsy for the first time, then stops for
        good.

        >>> Sequence.range(5).take_while(lambda x: x < 3).to_list()
        [0, 1, 2]
        """
        return self._wrap(transformations.take_while_t(self._cursor, adapt_arity(func, 2)))

    while_ = take_while

    def take(self, count):
        return self.take_while(lambda value, index: index < count)

    def skip(self, count):
        """
        Drops the first count elements. They are still pulled, this is not a seek.
        """
        return self.filter(lambda value, index: index >= count)

    def every_nth(self, n):
        return self.filter(lambda value, index: index % n == 0)

    def even(self):
        """Elements at indexes 0, 2, 4, ..."""
        return self.every_nth(2)

    def odd(self):
        """Elements at indexes 1, 3, 5, ..."""
        return self.skip(1).every_nth(2)

    def enumerate(self):
        """
        Pairs each element with its zero-based index.

        >>> Sequence(["a", "b"]).enumerate().to_list()
        [(0, 'a'), (1, 'b')]
        """
        return self._wrap(transformations.enumerate_t(self._cursor))

    # --------- multi-source operators (lazy) ----------

    def concat(self, *sources):
        """
        The remaining elements of this sequence followed by each source in order.

        >>> Sequence([0, 1]).concat(["a"], ["b"]).to_list()
        [0, 1, 'a', 'b']
        """
        return self._wrap(transformations.concat_t([self._cursor] + to_cursors(sources)))

    def concat_left(self, *sources):
        """
        Each source in order followed by the remaining elements of this sequence.

        >>> Sequence([0, 1]).concat_left(["a"], ["b"]).to_list()
        ['a', 'b', 0, 1]
        """
        return self._wrap(transformations.concat_t(to_cursors(sources) + [self._cursor]))

    def merge(self, *sources):
        """
        Round-robin merge with this sequence first in turn order.

        >>> Sequence([0, 1, 2]).merge(["a", "b", "c"]).to_list()
        [0, 'a', 1, 'b', 2, 'c']
        """
        return type(self).from_multiple(self._cursor, *sources)

    def merge_left(self, *sources):
        """
        Round-robin merge with this sequence last in turn order.

        >>> Sequence([0, 1, 2]).merge_left(["a", "b", "c"]).to_list()
        ['a', 0, 'b', 1, 'c', 2]
        """
        return type(self).from_multiple(*sources, self._cursor)

    # --------- accumulation operators (lazy) ----------

    def accumulate_while(self, func, yield_rest=False):
        """
        Collects elements into a list and yields it each time func(group, value, index) is
        truthy, value being the element just appended. A trailing partial group is yielded
        only with yield_rest.

        >>> Sequence("abcabc").accumulate_while(lambda group, x: x == "c").to_list()
        [['a', 'b', 'c'], ['a', 'b', 'c']]

        :param func: flush predicate
        :param yield_rest: yield the trailing group instead of dropping it
        """
        func = adapt_arity(func, 3)
        return self._wrap(transformations.accumulate_while_t(self._cursor, func, yield_rest))

    def accumulate_n(self, n, yield_rest=False):
        """
        Chunks the sequence into lists of n.

        >>> Sequence.range(5).accumulate_n(2).to_list()
        [[0, 1], [2, 3]]
        >>> Sequence.range(5).accumulate_n(2, True).to_list()
        [[0, 1], [2, 3], [4]]
        """
        return self.accumulate_while(lambda group: len(group) == n, yield_rest)

    def sub_split(self, func):
        """
        Flattens func(value) into the sequence, one element at a time.

        >>> Sequence(["ab", "cd"]).sub_split(iter).to_list()
        ['a', 'b', 'c', 'd']

        :param func: function from an element to an iterable
        """
        return self._wrap(transformations.sub_split_t(self._cursor, func, to_cursor))

    # --------- sources ----------

    @classmethod
    def new(cls, source):
        return cls(source)

    @classmethod
    def from_array(cls, items):
        """
        Sequence over a snapshot of items.

        >>> Sequence.from_array([1, 2, 3]).to_list()
        [1, 2, 3]
        """
        return cls(transformations.array_t(tuple(items)))

    @classmethod
    def from_multiple(cls, *sources):
        """
        Round-robin interleaving of sources. A source that runs out drops out while the others
        continue.

        >>> Sequence.from_multiple([0, 1], ["a", "b", "c"]).to_list()
        [0, 'a', 1, 'b', 'c']
        """
        logger.d("%s: round-robin over %d sources", cls.__name__, len(sources))
        return cls(transformations.round_robin_t(to_cursors(sources)))

    @classmethod
    def range(cls, *args):
        """
        Inclusive numeric range.

        No argument gives 0..9, range(a) gives 0..a-1, range(a, b) gives a..b and
        range(a, b, step) walks a..b by step. The direction follows the endpoints, the step is
        always given as a positive number. When step does not divide the distance the last
        element stops short of b.

        >>> Sequence.range(2, 12, 3).to_list()
        [2, 5, 8, 11]
        >>> Sequence.range(10, 0, 3).to_list()
        [10, 7, 4, 1]

        :raises InvalidStepError: if step is not positive
        """
        if len(args) > 3:
            raise TypeError(f"range expected at most 3 arguments, got {len(args)}")
        start, end, step = 0, 9, 1
        if len(args) == 1:
            end = args[0] - 1
        elif len(args) >= 2:
            start, end = args[0], args[1]
        if len(args) == 3:
            step = args[2]
            if not isinstance(step, numbers.Real) or isinstance(step, bool) or not step > 0:
                logger.err("range step must be positive, got %r", step)
                raise InvalidStepError(step)
        length = range_length(start, end, step)
        if end < start:
            step = -step
        logger.d("range from %r to %r by %r, %d elements", start, end, step, length)
        return cls(transformations.range_t(start, end, step, length))

    @classmethod
    def counter(cls, step=1):
        """
        Unbounded sequence 0, step, 2 * step, ... Bound it with take or take_while.

        >>> Sequence.counter(-2).take(3).to_list()
        [0, -2, -4]
        """
        return cls(transformations.counter_t(step))
