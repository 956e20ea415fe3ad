"""
Generator functions behind every lazy Sequence operator.

Each function takes the upstream cursor (or cursors) it exclusively owns and returns a new
generator. Every generator pulls at most one upstream element per element it is asked for and
keeps its counters and buffers as local state between pulls.
"""
from itertools import count


def map_t(cursor, func):
    for index, value in enumerate(cursor):
        yield func(value, index)


def filter_t(cursor, func):
    # index counts every upstream element, including the ones filtered out
    for index, value in enumerate(cursor):
        if func(value, index):
            yield value


def take_while_t(cursor, func):
    for index, value in enumerate(cursor):
        if not func(value, index):
            return
        yield value


def enumerate_t(cursor):
    for index, value in enumerate(cursor):
        yield index, value


def concat_t(cursors):
    for cursor in cursors:
        yield from cursor


def round_robin_t(cursors):
    """
    Interleave cursors one element at a time.

    Each round visits the still active cursors in order and yields the element pulled from
    each as soon as it arrives. A cursor that reports exhaustion is dropped on the spot (by
    position, never by equality) and is never pulled again. The generator ends when a round
    starts with nothing left.

    :param cursors: cursors in round-robin order
    """
    active = list(cursors)
    while active:
        position = 0
        while position < len(active):
            try:
                value = next(active[position])
            except StopIteration:
                del active[position]
                continue
            yield value
            position += 1


def accumulate_while_t(cursor, func, yield_rest):
    """
    Group consecutive elements, flushing the group whenever func(group, value, index) holds.

    :param cursor: upstream cursor
    :param func: flush predicate, called after each append
    :param yield_rest: yield a non-empty trailing group at exhaustion instead of dropping it
    """
    group = []
    for index, value in enumerate(cursor):
        group.append(value)
        if func(group, value, index):
            yield group
            group = []
    if group and yield_rest:
        yield group


def sub_split_t(cursor, func, adapt):
    for value in cursor:
        yield from adapt(func(value))


def pull_t(source):
    # source defines __next__ but cannot be handed to iter()
    while True:
        try:
            value = next(source)
        except StopIteration:
            return
        yield value


def array_t(items):
    for item in items:
        yield item


def range_t(start, end, step, length):
    for index in range(length):
        yield start + index * step


def counter_t(step):
    return count(0, step)
