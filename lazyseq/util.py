import collections.abc
import inspect
import math


_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def is_collection(val):
    """
    Check if val is a finite ordered collection that should be snapshotted rather than
    iterated in place.

    >>> is_collection([1, 2])
    True
    >>> is_collection((1, 2))
    True
    >>> is_collection(iter([1, 2]))
    False

    :param val: value to check
    :return: True if val is a list or tuple
    """
    return isinstance(val, (list, tuple))


def is_cursor(val):
    """
    Check if val is already a pull-based cursor, i.e. implements __next__ as well as __iter__.

    >>> is_cursor([1, 2])
    False
    >>> is_cursor(iter([1, 2]))
    True

    :param val: value to check
    :return: True if val is a collections.abc.Iterator
    """
    return isinstance(val, collections.abc.Iterator)


def is_pullable(val):
    """
    Check if val can be pulled with next() even though it is not a full iterator, i.e. it
    defines __next__ but no __iter__.

    >>> class Pull:
    ...     def __next__(self):
    ...         raise StopIteration
    >>> is_pullable(Pull())
    True
    >>> is_pullable([1, 2])
    False

    :param val: value to check
    :return: True if val has a callable __next__
    """
    return callable(getattr(type(val), "__next__", None))


def positional_capacity(func):
    """
    Number of positional arguments func accepts, or None when it takes *args. Returns 0 when
    the signature cannot be introspected, as with some builtins.

    >>> positional_capacity(lambda x, i: x)
    2
    >>> positional_capacity(lambda *args: args)

    :param func: callable to inspect
    :return: count of positional parameters or None for unbounded
    """
    try:
        parameters = inspect.signature(func).parameters.values()
    except (TypeError, ValueError):
        return 0
    capacity = 0
    for parameter in parameters:
        if parameter.kind == inspect.Parameter.VAR_POSITIONAL:
            return None
        if parameter.kind in _POSITIONAL:
            capacity += 1
    return capacity


def adapt_arity(func, arity, minimum=1):
    """
    Wrap func so it can always be called with ``arity`` positional arguments. Trailing
    arguments func has no parameter for are dropped; ``minimum`` leading arguments are always
    passed.

    >>> adapt_arity(lambda x: x * 2, 2)(3, 0)
    6
    >>> adapt_arity(lambda x, i: (x, i), 2)(3, 0)
    (3, 0)

    :param func: callback supplied by the caller
    :param arity: number of arguments the operator calls with
    :param minimum: number of arguments that are always passed
    :return: callable taking exactly ``arity`` arguments
    """
    capacity = positional_capacity(func)
    if capacity is None or capacity >= arity:
        return func
    accepted = max(capacity, minimum)
    if accepted >= arity:
        return func

    def adapted(*args):
        return func(*args[:accepted])

    return adapted


def range_length(start, end, step):
    """
    Number of elements an inclusive range from start to end walks with a positive step.

    >>> range_length(2, 12, 3)
    4
    >>> range_length(10, 0, 3)
    4

    :param start: first value
    :param end: inclusive bound, may lie below start
    :param step: positive step
    :return: floor(|end - start| / step) + 1
    """
    return math.floor(abs(end - start) / step) + 1

