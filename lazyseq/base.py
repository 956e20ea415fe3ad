"""
Protocol adapter: turns whatever the caller hands in into a single canonical cursor.
"""
from lazyseq.exceptions import InvalidInputError
from lazyseq.logger import get_logger
from lazyseq.transformations import pull_t
from lazyseq.util import is_collection, is_cursor, is_pullable

logger = get_logger()


class CursorOwner:
    """
    Anything holding a cursor it is willing to hand over. Sequence implements this so that
    wrapping a Sequence (or passing one to concat/merge) moves its cursor instead of stacking
    a second wrapper on top of it.
    """

    __slots__ = ()

    def _release_cursor(self):
        raise NotImplementedError


def to_cursor(source):
    """
    Normalize source into a cursor.

    Lists and tuples are snapshotted and iterated in their original order, iterators are used
    as they are, objects that only define __next__ are pulled through a generator and anything
    else iter() accepts (including the __getitem__ protocol) is converted with iter(). Nothing
    is pulled.

    :param source: collection, iterator, iterable or Sequence
    :return: an iterator
    :raises InvalidInputError: when source is not iterable
    """
    if isinstance(source, CursorOwner):
        logger.d("taking over cursor of %s", type(source).__name__)
        return source._release_cursor()
    if is_collection(source):
        logger.d("snapshotting %s of %d elements", type(source).__name__, len(source))
        return iter(tuple(source))
    if is_cursor(source):
        logger.d("using %s as cursor", type(source).__name__)
        return source
    if is_pullable(source):
        logger.d("pulling %s through next()", type(source).__name__)
        return pull_t(source)
    try:
        cursor = iter(source)
    except TypeError:
        logger.warn("rejecting non-iterable input of type %s", type(source).__name__)
        raise InvalidInputError(source) from None
    logger.d("iterating %s", type(source).__name__)
    return cursor


def to_cursors(sources):
    return [to_cursor(source) for source in sources]
