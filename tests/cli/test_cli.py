"""
Tests for the tabplot command line.
"""

import json
from pathlib import Path

import pytest
from tabplot.cli.main import main
from tabplot.text.ansi import strip_ansi


@pytest.fixture
def sales_csv(tmp_path: Path) -> Path:
    path = tmp_path / "sales.csv"
    path.write_text(
        "month,online,retail\n1,10,20\n2,15,18\n3,30,12\n4,25,16\n",
        encoding="utf-8",
    )
    return path


class TestShow:
    """Tests for `tabplot show`."""

    def test_prints_grid(self, sales_csv: Path, capsys: pytest.CaptureFixture[str]):
        assert main(["show", str(sales_csv)]) == 0

        out = capsys.readouterr().out
        assert "(index)" in out
        assert "online" in out

    def test_missing_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]):
        assert main(["show", str(tmp_path / "nope.csv")]) == 2
        assert "tabplot: error:" in capsys.readouterr().err


class TestBar:
    """Tests for `tabplot bar`."""

    def test_bar_chart(self, sales_csv: Path, capsys: pytest.CaptureFixture[str]):
        assert main(["bar", str(sales_csv), "--width", "50"]) == 0

        out = strip_ansi(capsys.readouterr().out)
        assert "Graph of online, retail with respect to month" in out
        assert "█" in out

    def test_selected_series(self, sales_csv: Path, capsys: pytest.CaptureFixture[str]):
        assert main(["bar", str(sales_csv), "--x", "month", "--y", "retail", "--width", "50"]) == 0

        out = strip_ansi(capsys.readouterr().out)
        assert "Graph of retail with respect to month" in out

    def test_infinite_value_is_not_drawn(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]):
        path = tmp_path / "inf.csv"
        path.write_text("x,y\na,1\nb,inf\n", encoding="utf-8")

        assert main(["bar", str(path), "--width", "40"]) == 0
        assert "█" in capsys.readouterr().out

    def test_unknown_column_is_data_error(self, sales_csv: Path, capsys: pytest.CaptureFixture[str]):
        assert main(["bar", str(sales_csv), "--y", "mail"]) == 1
        assert "mail" in capsys.readouterr().err


class TestPlot:
    """Tests for `tabplot plot`."""

    def test_line_plot(self, sales_csv: Path, capsys: pytest.CaptureFixture[str]):
        assert main(["plot", str(sales_csv), "--width", "60"]) == 0

        out = strip_ansi(capsys.readouterr().out)
        assert "Plot of online, retail with respect to month" in out
        assert "┬" in out

    def test_image_export(self, sales_csv: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]):
        pytest.importorskip("matplotlib")
        output = tmp_path / "sales.png"

        assert main(["plot", str(sales_csv), "-o", str(output)]) == 0

        assert output.exists()
        assert "Saved plot to" in capsys.readouterr().out

    def test_non_numeric_x(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]):
        path = tmp_path / "names.csv"
        path.write_text("name,v\na,1\nb,2\n", encoding="utf-8")

        assert main(["plot", str(path)]) == 1
        assert "numeric" in capsys.readouterr().err


class TestStats:
    """Tests for `tabplot stats`."""

    def test_text_output(self, sales_csv: Path, capsys: pytest.CaptureFixture[str]):
        assert main(["stats", str(sales_csv), "--column", "online"]) == 0

        out = capsys.readouterr().out
        assert out.startswith("Statistics for online (4 values)")
        assert "Average: 20.00" in out

    def test_json_output(self, sales_csv: Path, capsys: pytest.CaptureFixture[str]):
        assert main(["stats", str(sales_csv), "--column", "online", "--format", "json"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data["column"] == "online"
        assert data["count"] == 4
        assert data["min"] == 10
        assert data["max"] == 30
        assert data["avg"] == 20.0

    def test_string_column(self, tmp_path: Path):
        path = tmp_path / "names.csv"
        path.write_text("name,v\na,1\nb,2\n", encoding="utf-8")

        assert main(["stats", str(path), "--column", "name"]) == 1

    def test_infinite_value(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]):
        path = tmp_path / "inf.csv"
        path.write_text("v\n1\ninf\n", encoding="utf-8")

        assert main(["stats", str(path), "--column", "v"]) == 1
        assert "finite numeric" in capsys.readouterr().err


class TestConfig:
    """Tests for config discovery and errors."""

    def test_config_from_working_directory(
        self, sales_csv: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ):
        (tmp_path / "tabplot.json").write_text(json.dumps({"bar_glyph": "#"}), encoding="utf-8")
        monkeypatch.chdir(tmp_path)

        assert main(["bar", str(sales_csv), "--width", "50"]) == 0

        out = capsys.readouterr().out
        assert "#" in out
        assert "█" not in out

    def test_explicit_bad_config(self, sales_csv: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]):
        bad = tmp_path / "bad.json"
        bad.write_text(json.dumps({"nope": 1}), encoding="utf-8")

        assert main(["--config", str(bad), "show", str(sales_csv)]) == 1
        assert "Unknown config keys" in capsys.readouterr().err

    def test_missing_subcommand(self):
        with pytest.raises(SystemExit):
            main([])
