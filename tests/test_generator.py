import itertools

import pytest

from lazyproduct import (
    MAX_ESTIMATE,
    Combination,
    Dimension,
    ProductConfig,
    ProductGenerator,
    Pull,
)
from lazyproduct.product.generator import EXHAUSTED, Active, Exhausted, initial_state, transition


def values_of(generator):
    return [tuple(c.all_remaining()) for c in generator]


class TestTraversalOrder:
    """Combinations follow nested-loop order, last dimension fastest."""

    def test_three_dimensions(self):
        gen = ProductGenerator([["a", "b"], [1, 2], [True, False]])
        assert values_of(gen) == [
            ("a", 1, True),
            ("a", 1, False),
            ("a", 2, True),
            ("a", 2, False),
            ("b", 1, True),
            ("b", 1, False),
            ("b", 2, True),
            ("b", 2, False),
        ]

    def test_four_dimensions(self):
        gen = ProductGenerator([["a", "b"], [1, 2], [1.1, 2.2], [True, False]])
        produced = values_of(gen)
        assert len(produced) == 16
        assert produced[0] == ("a", 1, 1.1, True)
        after = produced.index(("a", 2, 2.2, False)) + 1
        assert produced[after] == ("b", 1, 1.1, True)
        assert produced[-1] == ("b", 2, 2.2, False)

    @pytest.mark.parametrize("lengths", [[1], [3], [2, 3], [3, 1, 2], [2, 2, 2, 2], [4, 1, 1, 3]])
    def test_matches_itertools_product(self, lengths):
        dimensions = [list(range(n)) for n in lengths]
        produced = values_of(ProductGenerator(dimensions))
        assert produced == list(itertools.product(*dimensions))
        assert len(set(produced)) == len(produced)

    def test_single_dimension(self):
        assert values_of(ProductGenerator([["x", "y", "z"]])) == [("x",), ("y",), ("z",)]

    def test_typed_extraction_from_generator(self):
        gen = ProductGenerator([["a", "b"], [1, 2], [1.1, 2.2], [True, False]])
        first = next(gen)
        assert first.next(str) == "a"
        assert first.next_int() == 1
        assert first.next_double() == 1.1
        assert first.next_boolean() is True
        assert not first.has_next()


class TestEmptyDimensions:
    """Any empty dimension empties the product."""

    @pytest.mark.parametrize("position", [0, 1, 2])
    def test_empty_anywhere(self, position):
        dimensions = [[1, 2], [3, 4], [5, 6]]
        dimensions[position] = []
        gen = ProductGenerator(dimensions)
        assert gen.exhausted
        assert gen.estimate_size() == 0
        assert list(gen) == []

    def test_pull_on_empty(self):
        gen = ProductGenerator([[1], []])
        assert gen.pull() == Pull(None, False)
        assert gen.produced == 0


class TestPull:
    """The single-step pull operation."""

    def test_has_more_flag(self):
        gen = ProductGenerator([[1, 2], ["a"]])
        first = gen.pull()
        assert first.has_more
        assert first.combination.all_remaining() == [1, "a"]
        second = gen.pull()
        assert not second.has_more
        assert second.combination.all_remaining() == [2, "a"]
        assert gen.exhausted

    def test_pull_after_exhaustion_is_inert(self):
        gen = ProductGenerator([[1]])
        gen.pull()
        assert gen.pull() == Pull(None, False)
        assert gen.pull() == Pull(None, False)
        assert gen.produced == 1

    def test_exactly_product_of_lengths_pulls(self):
        gen = ProductGenerator([[1, 2, 3], [4, 5], [6, 7, 8, 9]])
        pulls = 0
        while True:
            combination, has_more = gen.pull()
            if combination is None:
                break
            pulls += 1
            if not has_more:
                break
        assert pulls == 24
        assert gen.exhausted

    def test_try_advance(self):
        gen = ProductGenerator([["a", "b"]])
        seen = []
        assert gen.try_advance(lambda c: seen.append(c.next()))
        assert gen.try_advance(lambda c: seen.append(c.next()))
        assert not gen.try_advance(lambda c: seen.append(c.next()))
        assert seen == ["a", "b"]

    def test_for_each_remaining(self):
        gen = ProductGenerator([[1, 2], [3, 4]])
        next(gen)
        seen = []
        gen.for_each_remaining(lambda c: seen.append(tuple(c.all_remaining(int))))
        assert seen == [(1, 4), (2, 3), (2, 4)]

    def test_not_restartable(self):
        gen = ProductGenerator([[1, 2]])
        assert len(list(gen)) == 2
        assert list(gen) == []
        assert iter(gen) is gen

    def test_combinations_are_independent(self):
        gen = ProductGenerator([[1, 2], [3]])
        first, second = next(gen), next(gen)
        assert first.next_int() == 1
        assert second.next_int() == 2
        assert first.next_int() == 3
        assert second.next_int() == 3


class TestEstimateSize:
    """Advisory size reporting."""

    def test_estimate_while_active(self):
        gen = ProductGenerator([[1, 2, 3], [1, 2, 3, 4], [1, 2, 3, 4, 5]])
        assert gen.estimate_size() == 60
        next(gen)
        assert gen.estimate_size() == 60

    def test_estimate_zero_when_exhausted(self):
        gen = ProductGenerator([[1]])
        list(gen)
        assert gen.estimate_size() == 0

    def test_estimate_respects_config(self):
        gen = ProductGenerator([range(10), range(10)], ProductConfig(max_estimate=50))
        assert gen.estimate_size() == 50

    def test_huge_product_is_lazy(self):
        big = Dimension(range(2**16))
        gen = ProductGenerator([big, big, big, big])
        assert gen.estimate_size() == MAX_ESTIMATE
        assert next(gen).all_remaining() == [0, 0, 0, 0]
        assert next(gen).all_remaining() == [0, 0, 0, 1]


class TestTransition:
    """The pure state transition function."""

    def test_exhausted_is_terminal(self):
        assert transition(EXHAUSTED) == (EXHAUSTED, None)

    def test_does_not_mutate_state(self):
        state = initial_state((Dimension.of(1, 2), Dimension.of("a", "b")))
        next_state, combination = transition(state)
        assert [c.index for c in state.cursors] == [0, 0]
        assert [c.index for c in next_state.cursors] == [0, 1]
        assert isinstance(combination, Combination)

    def test_carry_resets_trailing_cursors(self):
        state = initial_state((Dimension.of(1, 2), Dimension.of("a", "b")))
        state, _ = transition(state)
        state, _ = transition(state)
        assert isinstance(state, Active)
        assert [c.index for c in state.cursors] == [1, 0]

    def test_carry_out_of_first_cursor_exhausts(self):
        state = initial_state((Dimension.of(1),))
        state, combination = transition(state)
        assert isinstance(state, Exhausted)
        assert combination.all_remaining() == [1]

    def test_initial_state_with_empty_dimension(self):
        assert initial_state((Dimension.of(1), Dimension.of())) is EXHAUSTED

    def test_no_dimensions_yield_one_empty_combination(self):
        gen = ProductGenerator([])
        produced = list(gen)
        assert len(produced) == 1
        assert not produced[0].has_next()
