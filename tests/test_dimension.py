import pytest

from lazyproduct import Cursor, Dimension, ExhaustedError


class TestDimension:
    """Construction and immutability of dimensions."""

    def test_of_values(self):
        dim = Dimension.of("a", 1, 2.5, True)
        assert len(dim) == 4
        assert list(dim) == ["a", 1, 2.5, True]

    def test_from_iterator_is_drained_once(self):
        source = iter([1, 2, 3])
        dim = Dimension.from_iterable(source)
        assert list(dim) == [1, 2, 3]
        assert list(dim) == [1, 2, 3]
        assert list(source) == []

    def test_from_generator(self):
        dim = Dimension.from_iterable(x * x for x in range(4))
        assert dim.values == (0, 1, 4, 9)

    def test_string_is_not_split(self):
        with pytest.raises(TypeError, match="string"):
            Dimension.from_iterable("abc")

    def test_range_is_inclusive(self):
        assert Dimension.range(1, 5).values == (1, 2, 3, 4, 5)
        assert Dimension.range(0, 10, 5).values == (0, 5, 10)
        assert Dimension.range(3, 1, -1).values == (3, 2, 1)

    def test_range_zero_step(self):
        with pytest.raises(ValueError, match="step"):
            Dimension.range(1, 5, 0)

    def test_source_list_mutation_not_visible(self):
        values = [1, 2]
        dim = Dimension.from_iterable(values)
        values.append(3)
        assert len(dim) == 2

    def test_equality_and_repr(self):
        assert Dimension.of(1, 2) == Dimension.from_iterable([1, 2])
        assert repr(Dimension.of("a", 1)) == "Dimension('a', 1)"

    def test_empty(self):
        assert len(Dimension.of()) == 0


class TestCursor:
    """Cursor moves over one dimension."""

    def test_starts_at_first_value(self):
        cursor = Cursor(Dimension.of("x", "y"))
        assert cursor.index == 0
        assert cursor.current() == "x"
        assert not cursor.exhausted

    def test_advance_to_end(self):
        cursor = Cursor(Dimension.of("x", "y"))
        cursor = cursor.advanced()
        assert cursor.current() == "y"
        cursor = cursor.advanced()
        assert cursor.exhausted
        assert cursor.index == 2

    def test_advance_returns_new_cursor(self):
        cursor = Cursor(Dimension.of("x", "y"))
        moved = cursor.advanced()
        assert cursor.index == 0
        assert moved.index == 1

    def test_reset(self):
        cursor = Cursor(Dimension.of("x", "y"), 2)
        assert cursor.reset().current() == "x"

    def test_exhausted_cursor_has_no_value(self):
        cursor = Cursor(Dimension.of("x"), 1)
        with pytest.raises(ExhaustedError):
            cursor.current()
        with pytest.raises(ExhaustedError):
            cursor.advanced()

    def test_index_out_of_range(self):
        with pytest.raises(ValueError, match="outside"):
            Cursor(Dimension.of("x"), 2)
