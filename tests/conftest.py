import pytest


class CountingIterator:
    """Iterator over items that records how many times it has been pulled."""

    def __init__(self, items):
        self._items = iter(items)
        self.pulls = 0
        self.exhausted_pulls = 0

    def __iter__(self):
        return self

    def __next__(self):
        self.pulls += 1
        try:
            return next(self._items)
        except StopIteration:
            self.exhausted_pulls += 1
            raise


@pytest.fixture
def counting():
    """Factory for iterators that count their pulls"""
    return CountingIterator


@pytest.fixture
def gen_range():
    """Factory for generators over count consecutive integers"""
    def generate(count, start=0):
        for i in range(start, start + count):
            yield i
    return generate


@pytest.fixture
def chars():
    """Factory for generators over the characters of a string"""
    def generate(text):
        for char in text:
            yield char
    return generate
