from lazyseq import Sequence


class TestConcat:
    """Test end-to-end sequencing of several sources"""

    def test_concat(self, gen_range):
        """concat appends the sources after the receiver"""
        s = Sequence(gen_range(3)).concat(Sequence.from_array(["a", "b", "c"]))
        assert s.to_list() == [0, 1, 2, "a", "b", "c"]

    def test_concat_left(self, gen_range):
        """concat_left puts the sources before the receiver"""
        s = Sequence(gen_range(3)).concat_left(Sequence.from_array(["a", "b", "c"]))
        assert s.to_list() == ["a", "b", "c", 0, 1, 2]

    def test_concat_many_in_argument_order(self):
        """Several sources keep their argument order"""
        assert Sequence([0]).concat([1], iter([2]), "3").to_list() == [0, 1, 2, "3"]
        assert Sequence([0]).concat_left([1], iter([2]), "3").to_list() == [1, 2, "3", 0]

    def test_concat_nothing(self):
        """concat with no sources is the receiver alone"""
        assert Sequence([1, 2]).concat().to_list() == [1, 2]

    def test_concat_with_unbounded_receiver(self):
        """concat is lazy so an unbounded receiver can still be bounded downstream"""
        assert Sequence.counter().concat([99]).take(3).to_list() == [0, 1, 2]


class TestRoundRobin:
    """Test from_multiple, merge and merge_left"""

    def test_from_multiple_equal_lengths(self):
        """Equal-length sources interleave perfectly"""
        s = Sequence.from_multiple([0, 1, 2], ["a", "b", "c"])
        assert s.to_list() == [0, "a", 1, "b", 2, "c"]

    def test_from_multiple_unequal_lengths(self):
        """A shorter source drops out and the longer one continues alone"""
        s = Sequence.from_multiple([0, 1], ["a", "b", "c"])
        assert s.to_list() == [0, "a", 1, "b", "c"]

    def test_from_multiple_three_sources(self):
        """A source exhausted mid-round does not stall the ones after it"""
        s = Sequence.from_multiple([1], ["a", "b", "c"], [True, False])
        assert s.to_list() == [1, "a", True, "b", False, "c"]

    def test_from_multiple_sequences(self):
        """Sequences can be given as sources"""
        s = Sequence.from_multiple(Sequence.from_array([1, 2, 3]), Sequence.from_array("abc"))
        assert s.to_list() == [1, "a", 2, "b", 3, "c"]

    def test_from_multiple_no_sources(self):
        """No sources means an empty sequence"""
        assert Sequence.from_multiple().to_list() == []

    def test_from_multiple_all_empty(self):
        """Empty sources terminate immediately"""
        assert Sequence.from_multiple([], iter(()), "").to_list() == []

    def test_exhausted_source_never_pulled_again(self, counting):
        """A source is pulled exactly once after its last element"""
        short = counting([1])
        long = counting(range(5))
        assert Sequence.from_multiple(short, long).to_list() == [1, 0, 1, 2, 3, 4]
        assert short.exhausted_pulls == 1
        assert short.pulls == 2
        assert long.exhausted_pulls == 1

    def test_same_source_twice_removed_by_identity(self):
        """The same iterator given twice is drained once, its entries removed one by one"""
        shared = iter([1, 2, 3])
        other = iter(["a"])
        result = Sequence.from_multiple(shared, other, shared).to_list()
        assert result == [1, "a", 2, 3]

    def test_equal_sources_are_distinct(self):
        """Sources that compare equal are still tracked separately"""
        class AlwaysEqual:
            def __init__(self, items):
                self._items = iter(items)

            def __iter__(self):
                return self

            def __next__(self):
                return next(self._items)

            def __eq__(self, other):
                return True

            __hash__ = object.__hash__

        result = Sequence.from_multiple(AlwaysEqual([1, 2]), AlwaysEqual([])).to_list()
        assert result == [1, 2]

    def test_merge(self, gen_range):
        """merge puts the receiver first in turn order"""
        s = Sequence(gen_range(3)).merge(Sequence.from_array(["a", "b", "c"]))
        assert s.to_list() == [0, "a", 1, "b", 2, "c"]

    def test_merge_left(self, gen_range):
        """merge_left puts the receiver last in turn order"""
        s = Sequence(gen_range(3)).merge_left(Sequence.from_array(["a", "b", "c"]))
        assert s.to_list() == ["a", 0, "b", 1, "c", 2]

    def test_merge_with_unbounded_sources(self):
        """Round-robin over counters stays lazy"""
        s = Sequence.counter().merge(Sequence.counter(-1))
        assert s.take(6).to_list() == [0, 0, 1, -1, 2, -2]
