"""
Tests for the immutable Table.
"""

from pathlib import Path

import pytest
from tabplot.errors import (
    CsvParseError,
    DuplicateColumnError,
    EmptyInputError,
    MissingColumnError,
    RowLengthMismatchError,
)
from tabplot.table import Table


@pytest.fixture
def people() -> Table:
    return Table(
        [
            {"name": "ada", "age": 36},
            {"name": "bob", "age": 25},
            {"name": "cy", "age": 36},
            {"name": "di", "age": 19},
        ]
    )


class TestConstruction:
    def test_headers_from_first_row(self, people: Table):
        assert people.headers == ("name", "age")
        assert len(people) == 4

    def test_explicit_headers_on_empty(self):
        table = Table([], headers=["a", "b"])
        assert table.headers == ("a", "b")
        assert len(table) == 0

    def test_empty_without_headers(self):
        with pytest.raises(EmptyInputError):
            Table([])

    def test_row_missing_header(self):
        with pytest.raises(MissingColumnError) as exc:
            Table([{"a": 1, "b": 2}, {"a": 3}])
        assert exc.value.column == "b"
        assert exc.value.details == {"row": 1}

    def test_duplicate_headers(self):
        with pytest.raises(DuplicateColumnError):
            Table([{"a": 1}], headers=["a", "a"])

    def test_from_array(self):
        table = Table.from_array([3, 1, 2], "n")
        assert table.headers == ("n",)
        assert table.column("n") == [3, 1, 2]

    def test_from_columns(self):
        table = Table.from_columns({"x": [1, 2], "y": ["a", "b"]})
        assert table.rows[1] == {"x": 2, "y": "b"}

    def test_from_columns_length_mismatch(self):
        with pytest.raises(RowLengthMismatchError) as exc:
            Table.from_columns({"x": [1, 2], "y": [1]})
        assert exc.value.details["column"] == "y"

    def test_from_columns_unknown_header(self):
        with pytest.raises(MissingColumnError):
            Table.from_columns({"x": [1]}, headers=["x", "z"])

    def test_from_csv(self, tmp_path: Path):
        path = tmp_path / "data.csv"
        path.write_text("x,label\n1,one\n2,two\n", encoding="utf-8")

        table = Table.from_csv(path)

        assert table.column("x") == [1, 2]
        assert table.column("label") == ["one", "two"]

    def test_from_csv_string_empty(self):
        with pytest.raises(CsvParseError):
            Table.from_csv_string("")


class TestImmutability:
    def test_rows_are_read_only(self, people: Table):
        with pytest.raises(TypeError):
            people.rows[0]["age"] = 99  # type: ignore[index]

    def test_input_rows_are_copied(self):
        source = [{"a": 1}]
        table = Table(source)
        source[0]["a"] = 2
        assert table.row(0)["a"] == 1

    def test_add_column_returns_new_table(self, people: Table):
        wider = people.add_column("score", [1, 2, 3, 4])

        assert wider.headers == ("name", "age", "score")
        assert people.headers == ("name", "age")
        assert "score" not in people.row(0)

    def test_add_column_length_mismatch(self, people: Table):
        with pytest.raises(RowLengthMismatchError):
            people.add_column("score", [1, 2])

    def test_add_column_duplicate(self, people: Table):
        with pytest.raises(DuplicateColumnError):
            people.add_column("age", [1, 2, 3, 4])

    def test_add_computed_column(self, people: Table):
        table = people.add_computed_column("double", lambda row: row["age"] * 2)
        assert table.column("double") == [72, 50, 72, 38]


class TestQueries:
    def test_column_unknown(self, people: Table):
        with pytest.raises(MissingColumnError):
            people.column("height")

    def test_columns(self, people: Table):
        assert people.columns() == {"name": ["ada", "bob", "cy", "di"], "age": [36, 25, 36, 19]}

    def test_find(self, people: Table):
        assert people.find(lambda row: row["age"] == 36)["name"] == "ada"
        assert people.find(lambda row: row["age"] > 100) is None

    def test_find_index(self, people: Table):
        assert people.find_index(lambda row: row["name"] == "cy") == 2
        assert people.find_index(lambda row: row["name"] == "zed") == -1

    def test_iteration(self, people: Table):
        assert [row["name"] for row in people] == ["ada", "bob", "cy", "di"]


class TestSorting:
    def test_sort_by_column(self, people: Table):
        assert people.sort_by("age").column("age") == [19, 25, 36, 36]

    def test_sort_is_stable(self, people: Table):
        """Rows with equal keys keep their relative order."""
        assert people.sort_by("age").column("name") == ["di", "bob", "ada", "cy"]

    def test_sort_reverse(self, people: Table):
        assert people.sort_by("age", reverse=True).column("age") == [36, 36, 25, 19]

    def test_sort_does_not_mutate(self, people: Table):
        people.sort_by("age")
        assert people.column("age") == [36, 25, 36, 19]

    def test_sort_by_unknown_column(self, people: Table):
        with pytest.raises(MissingColumnError):
            people.sort_by("height")


class TestPrinting:
    def test_str_grid(self):
        table = Table.from_columns({"a": [1, 2], "b": ["x", "y"]})

        assert str(table) == (
            "┌─────────┬───┬─────┐\n"
            "│ (index) │ a │  b  │\n"
            "├─────────┼───┼─────┤\n"
            "│    0    │ 1 │ 'x' │\n"
            "│    1    │ 2 │ 'y' │\n"
            "└─────────┴───┴─────┘\n"
        )

    def test_repr(self, people: Table):
        assert repr(people) == "Table(headers=['name', 'age'], rows=4)"

    def test_bar_prints(self, capsys: pytest.CaptureFixture[str]):
        Table.from_columns({"x": [1, 2], "y": [1, 2]}).bar(width=40)

        out = capsys.readouterr().out
        assert "Graph of" in out
        assert "█" in out

    def test_plot_prints(self, capsys: pytest.CaptureFixture[str]):
        Table.from_columns({"x": [0, 1, 2, 3], "y": [0, 1, 4, 9]}).plot(width=40)

        out = capsys.readouterr().out
        assert "├" in out
        assert "┬" in out

    def test_bar_default_x_is_first_column(self, capsys: pytest.CaptureFixture[str]):
        Table.from_columns({"when": ["a", "b"], "v": [1, 2]}).bar(width=40)
        assert "with respect to when" in capsys.readouterr().out
