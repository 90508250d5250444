from __future__ import annotations

import itertools

import pytest

import zipkit.compose.zip as zip_module
from zipkit import (
    Couple,
    CoupleStream,
    NoSuchElementError,
    Trait,
    stream_of,
    zip_broadcast,
    zip_mapped,
    zip_pairs,
    zip_with,
)


def tracked(values, reads):
    for value in values:
        reads.append(value)
        yield value


class TestZipPairs:
    """Pairwise composer"""

    def test_equal_lengths(self):
        assert zip_pairs([1, 2, 3], ["A", "B", "C"]).to_list() == [
            Couple(1, "A"),
            Couple(2, "B"),
            Couple(3, "C"),
        ]

    def test_shorter_right_decides_length(self):
        assert zip_pairs([1, 2, 3, 4], ["A", "B"]).to_list() == [Couple(1, "A"), Couple(2, "B")]

    def test_shorter_left_decides_length(self):
        assert zip_pairs([1], ["A", "B"]).to_list() == [Couple(1, "A")]

    @pytest.mark.parametrize(
        ("left", "right"),
        [
            ([], []),
            ([1], []),
            ([], ["a"]),
            ([1, 2, 3], ["a"]),
            (list(range(7)), list("abcde")),
        ],
    )
    def test_length_is_minimum_and_positions_match(self, left, right):
        pairs = zip_pairs(left, right).to_list()
        assert len(pairs) == min(len(left), len(right))
        for index, pair in enumerate(pairs):
            assert pair == Couple(left[index], right[index])

    def test_none_sources(self):
        assert zip_pairs(None, [1, 2]).to_list() == []
        assert zip_pairs([1, 2], None).to_list() == []
        assert zip_pairs(None, None).to_list() == []

    def test_returns_couple_stream(self):
        assert isinstance(zip_pairs([1], [2]), CoupleStream)


class TestZipMetadata:
    """Size and traits of a zipped stream"""

    def test_size_is_minimum_of_sized_inputs(self):
        assert zip_pairs([1, 2, 3, 4], ["A", "B"]).size == 2

    def test_distinct_and_sorted_are_dropped(self):
        stream = zip_pairs(range(3), range(10, 13))
        assert Trait.DISTINCT not in stream.traits
        assert Trait.SORTED not in stream.traits
        assert Trait.ORDERED in stream.traits
        assert stream.size == 3

    def test_two_sets_are_sized_but_not_distinct(self):
        stream = zip_pairs({1, 2}, {3, 4})
        assert stream.size == 2
        assert Trait.DISTINCT not in stream.traits
        assert Trait.ORDERED not in stream.traits

    def test_unsized_side_makes_size_unknown(self):
        stream = zip_pairs([1, 2], (x for x in "ab"))
        assert stream.size is None
        assert Trait.SIZED not in stream.traits
        assert stream.to_list() == [Couple(1, "a"), Couple(2, "b")]


class TestZipLaziness:
    """Nothing past the shorter side is consumed"""

    def test_nothing_pulled_before_terminal(self):
        reads = []
        stream = zip_pairs(tracked([1, 2], reads), ["a", "b"])
        assert reads == []
        stream.find_first()
        assert reads == [1]

    def test_sized_left_never_over_reads_right(self):
        reads = []
        pairs = zip_pairs([1, 2], tracked(range(100), reads)).to_list()
        assert len(pairs) == 2
        assert reads == [0, 1]

    def test_unsized_left_never_over_reads_sized_right(self):
        reads = []
        pairs = zip_pairs(tracked(range(100), reads), ["a", "b"]).to_list()
        assert pairs == [Couple(0, "a"), Couple(1, "b")]
        assert reads == [0, 1]

    def test_sized_side_is_checked_first_on_each_pull(self):
        reads = []
        stream = zip_with(tracked(range(100), reads), ["a", "b"], zipper=lambda n, s: f"{s}{n}")
        cursor = stream.cursor
        assert cursor.next() == "a0"
        assert cursor.next() == "b1"
        assert cursor.has_next() is False
        assert reads == [0, 1]

    def test_infinite_right(self):
        assert zip_pairs("ab", itertools.count()).to_list() == [Couple("a", 0), Couple("b", 1)]

    def test_infinite_left(self):
        assert zip_pairs(itertools.count(), "ab").to_list() == [Couple(0, "a"), Couple(1, "b")]


class TestZipExhaustion:
    """Pulling after the end"""

    def test_no_restart(self):
        stream = zip_pairs([1, 2], ["a", "b"])
        assert stream.count() == 2
        assert stream.to_list() == []
        with pytest.raises(StopIteration):
            next(iter(stream))
        with pytest.raises(NoSuchElementError):
            stream.cursor.next()

    def test_zipper_failure_propagates_on_pull(self):
        def explode(a, b):
            raise ValueError("bad pair")

        stream = zip_with([1], [2], zipper=explode)
        with pytest.raises(ValueError, match="bad pair"):
            stream.to_list()


class TestZipMapped:
    """Key sequence against values derived per key"""

    def test_pairs_key_with_mapped_value(self):
        stream = zip_mapped([(1, 2), (3, 4), (5, 6)], lambda item: item[1])
        assert stream.to_list() == [Couple((1, 2), 2), Couple((3, 4), 4), Couple((5, 6), 6)]

    def test_mapper_called_once_per_key(self):
        calls = []
        stream = zip_mapped([1, 2, 3], lambda key: calls.append(key) or key * 2)
        assert calls == [1, 2, 3]
        assert stream.to_list() == [Couple(1, 2), Couple(2, 4), Couple(3, 6)]
        assert calls == [1, 2, 3]

    def test_one_shot_keys(self):
        stream = zip_mapped(iter(["a", "bb"]), len)
        assert stream.size == 2
        assert stream.to_list() == [Couple("a", 1), Couple("bb", 2)]

    def test_lazy_keys(self):
        assert zip_mapped(stream_of([1, 2]), str).to_dict() == {1: "1", 2: "2"}

    def test_none_keys_skip_mapper(self):
        def fail(key):
            pytest.fail("mapper must not run")

        assert zip_mapped(None, fail).to_list() == []

    def test_none_values_are_kept(self):
        assert zip_mapped([1, 2], lambda key: None).to_list() == [Couple(1, None), Couple(2, None)]

    def test_mapper_failure_propagates(self):
        with pytest.raises(ZeroDivisionError):
            zip_mapped([1, 0], lambda key: 1 / key)


class TestZipBroadcast:
    """Single key against every value"""

    def test_broadcast(self):
        assert zip_broadcast(5, [1, 2, 3]).to_list() == [Couple(5, 1), Couple(5, 2), Couple(5, 3)]

    def test_size_matches_values(self):
        stream = zip_broadcast("k", ["a", "b", "c", "d"])
        assert stream.size == 4
        assert stream.all_match(lambda pair: pair.left == "k")

    def test_none_key_is_empty(self):
        assert zip_broadcast(None, [1, 2, 3]).to_list() == []

    def test_none_values_is_empty(self):
        assert zip_broadcast(5, None).to_list() == []

    def test_unsized_values(self):
        stream = zip_broadcast(0, (x for x in "xy"))
        assert stream.size is None
        assert stream.to_list() == [Couple(0, "x"), Couple(0, "y")]

    def test_values_read_one_pair_at_a_time(self):
        reads = []
        stream = zip_broadcast("k", tracked(["x", "y", "z"], reads))
        assert stream.find_first().unwrap() == Couple("k", "x")
        assert reads == ["x"]
        assert stream.to_list() == [Couple("k", "y"), Couple("k", "z")]
        assert reads == ["x", "y", "z"]

    def test_key_never_runs_ahead_of_unsized_values(self, monkeypatch):
        repeats = []

        def counted_repeat(key, *count):
            assert count == ()
            while True:
                repeats.append(key)
                yield key

        monkeypatch.setattr(zip_module.itertools, "repeat", counted_repeat)
        stream = zip_broadcast("k", (v for v in "xy"))
        assert stream.to_list() == [Couple("k", "x"), Couple("k", "y")]
        assert repeats == ["k", "k"]

    def test_falsy_key_is_still_a_key(self):
        assert zip_broadcast(0, [1]).to_list() == [Couple(0, 1)]


class TestZipWith:
    """Generic composer with a zipper"""

    def test_custom_zipper(self):
        assert zip_with([1, 2, 3], [10, 20], zipper=lambda a, b: a + b).to_list() == [11, 22]

    def test_none_source(self):
        assert zip_with(None, [1], zipper=lambda a, b: a).to_list() == []
