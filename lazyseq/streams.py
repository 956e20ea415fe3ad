from lazyseq.pipeline import Sequence


class Stream(object):
    """
    Represents and implements a stream which separates the responsibilities of Sequence and
    the sources that feed it. The module level ``seq`` object is a Stream bound to Sequence.
    """

    def __init__(self, sequence_class=Sequence):
        """
        :param sequence_class: Sequence subclass every created sequence will be an instance of
        """
        self.sequence_class = sequence_class

    def __call__(self, *args):
        """
        Create a Sequence using a sequential (lazy) backend.

        >>> seq([1, 2, 3]).map(lambda x: x * 2).to_list()
        [2, 4, 6]

        >>> seq(1, 2, 3).map(lambda x: x * 2).to_list()
        [2, 4, 6]

        >>> seq().to_list()
        []

        :param args: one iterable or iterator to wrap, or several values to wrap as a list
        :return: wrapped sequence
        """
        if len(args) == 0:
            return self.sequence_class([])
        if len(args) == 1:
            return self.sequence_class(args[0])
        return self.sequence_class(list(args))

    def range(self, *args):
        """
        Alias to Sequence.range, with the same inclusive endpoints.

        >>> seq.range(1, 5).to_list()
        [1, 2, 3, 4, 5]
        """
        return self.sequence_class.range(*args)

    def counter(self, step=1):
        return self.sequence_class.counter(step)

    def from_array(self, items):
        return self.sequence_class.from_array(items)

    def from_multiple(self, *sources):
        """
        >>> seq.from_multiple([1, 2, 3], "abc").to_list()
        [1, 'a', 2, 'b', 3, 'c']
        """
        return self.sequence_class.from_multiple(*sources)


# pylint: disable=invalid-name
seq = Stream()
