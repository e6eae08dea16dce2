import pytest
from tabplot.errors import EmptyInputError
from tabplot.stats import avg_and_stddev, quartiles, round_half_up


class TestRoundHalfUp:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [(0.5, 1), (1.5, 2), (2.5, 3), (-0.5, 0), (-1.5, -1), (2.49, 2)],
    )
    def test_halves_round_up(self, value, expected):
        assert round_half_up(value) == expected


class TestQuartiles:
    def test_odd_count(self):
        assert quartiles([5, 1, 3, 2, 4]) == (1, 2, 3, 4, 5)

    def test_even_count_uses_nearest_rank(self):
        assert quartiles([1, 2, 3, 4]) == (1, 2, 3, 3, 4)

    def test_single_value(self):
        assert quartiles([7]) == (7, 7, 7, 7, 7)

    def test_does_not_sort_input(self):
        values = [3, 1, 2]
        quartiles(values)
        assert values == [3, 1, 2]

    def test_empty(self):
        with pytest.raises(EmptyInputError):
            quartiles([])


class TestAvgAndStddev:
    def test_population_stddev(self):
        assert avg_and_stddev([2, 4, 4, 4, 5, 5, 7, 9]) == (5.0, 2.0)

    def test_constant(self):
        assert avg_and_stddev([3, 3, 3]) == (3.0, 0.0)

    def test_empty(self):
        with pytest.raises(EmptyInputError):
            avg_and_stddev([])
