import os

import pytest
from tabplot.render import terminal
from tabplot.render.terminal import resolve_width, terminal_width


class TestTerminalWidth:
    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setattr(terminal.shutil, "get_terminal_size", lambda fallback: os.terminal_size((132, 40)))
        assert terminal_width() == 132

    def test_zero_columns_uses_fallback(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setattr(terminal.shutil, "get_terminal_size", lambda fallback: os.terminal_size((0, 0)))
        assert terminal_width(fallback=77) == 77

    def test_os_error_uses_fallback(self, monkeypatch: pytest.MonkeyPatch):
        def boom(fallback):
            raise OSError("no tty")

        monkeypatch.setattr(terminal.shutil, "get_terminal_size", boom)
        assert terminal_width() == 80


class TestResolveWidth:
    def test_explicit_width_wins(self):
        assert resolve_width(40) == 40

    @pytest.mark.parametrize("width", [None, 0, -5])
    def test_non_positive_reads_terminal(self, width, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setattr(terminal.shutil, "get_terminal_size", lambda fallback: os.terminal_size((100, 30)))
        assert resolve_width(width) == 100
