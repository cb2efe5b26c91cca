"""Tests for renderer.DiffRenderer."""

import pytest
from conftest import Screen, make_console, output_of, screen_of

from console_progress.config import DisplayConfig
from console_progress.renderer import DiffRenderer, common_prefix_length
from console_progress.terminal import Terminal


def _renderer(terminal, **overrides):
    return DiffRenderer(terminal, DisplayConfig(**overrides))


def _written_by(renderer, text):
    """Return exactly what one render call writes."""
    before = len(output_of(renderer.terminal))
    renderer.render(text)
    return output_of(renderer.terminal)[before:]


class TestCommonPrefix:
    @pytest.mark.parametrize(
        "a,b,expected",
        [
            ("", "", 0),
            ("abc", "", 0),
            ("", "abc", 0),
            ("abc", "abd", 2),
            ("abc", "abc", 3),
            ("abc", "abcdef", 3),
            ("xbc", "abc", 0),
        ],
    )
    def test_common_prefix_length(self, a, b, expected):
        assert common_prefix_length(a, b) == expected


class TestDiffMode:
    """Backspace to the first difference, write only the new suffix."""

    def test_first_render_writes_whole_text(self, terminal):
        renderer = _renderer(terminal)
        assert _written_by(renderer, "[#---] 25%") == "[#---] 25%"
        assert renderer.current_text == "[#---] 25%"

    def test_only_differing_suffix_is_rewritten(self, terminal):
        renderer = _renderer(terminal)
        renderer.render("[####------] 40% ")

        written = _written_by(renderer, "[#####-----] 50% ")

        # "[####" is shared; 12 trailing characters differ
        assert written == "\b" * 12 + "#-----] 50% "

    def test_same_text_writes_nothing(self, terminal):
        renderer = _renderer(terminal, foreground_color="red")
        renderer.render("[#####-----] 50% |")
        assert _written_by(renderer, "[#####-----] 50% |") == ""

    def test_shorter_text_blanks_overhang(self, terminal):
        renderer = _renderer(terminal)
        renderer.render("[##########] 100% ")

        written = _written_by(renderer, "[##########] 100%")

        assert written == "\b \b"
        screen = screen_of(terminal)
        assert screen.line == "[##########] 100%"
        assert screen.column == len("[##########] 100%")

    def test_much_shorter_text(self, terminal):
        renderer = _renderer(terminal)
        renderer.render("abcdefgh")
        written = _written_by(renderer, "abX")
        assert written == "\b" * 6 + "X" + "     " + "\b" * 5
        screen = screen_of(terminal)
        assert screen.line == "abX"
        assert screen.column == 3

    def test_sequence_keeps_screen_in_sync(self, terminal):
        renderer = _renderer(terminal)
        texts = [
            "[----------]   0% |",
            "[#---------]  10% /",
            "[##--------]  20% -",
            "[##########] 100%",
            "[] x",
            "",
            "[#####-----]  50% \\ 1:02 (30 left)",
            "[#####-----]  50% |",
        ]
        for text in texts:
            renderer.render(text)
            screen = screen_of(terminal)
            assert screen.line == text
            assert screen.column == len(text)

    def test_starts_after_existing_prefix(self, terminal):
        terminal.write("Copying: ")
        renderer = _renderer(terminal)
        renderer.render("[#---] 25%")
        renderer.render("[##--] 50%")
        screen = screen_of(terminal)
        assert screen.line == "Copying: [##--] 50%"
        assert screen.column == len("Copying: [##--] 50%")

    def test_reset_forgets_current_text(self, terminal):
        renderer = _renderer(terminal)
        renderer.render("abc")
        renderer.reset()
        assert renderer.current_text == ""
        assert _written_by(renderer, "abc") == "abc"


class TestFullRedrawMode:
    """Jump to the anchor column and rewrite everything."""

    def test_rewrites_from_anchor_column(self, terminal):
        terminal.write("Copy ")
        renderer = _renderer(terminal, redraw_whole_bar=True, column=5)
        renderer.render("[#---] 25%")

        written = _written_by(renderer, "[##--] 50%")

        assert written == "\x1b[6G[##--] 50%"
        screen = screen_of(terminal)
        assert screen.line == "Copy [##--] 50%"
        assert screen.column == len("Copy [##--] 50%")

    def test_heals_external_corruption(self, terminal):
        renderer = _renderer(terminal, redraw_whole_bar=True, column=0)
        renderer.render("[#---] 25%")
        terminal.write("\b\b\bXXX")
        renderer.render("[#---] 25%")
        assert screen_of(terminal).line == "[#---] 25%"

    def test_shorter_text_blanks_overhang(self, terminal):
        renderer = _renderer(terminal, redraw_whole_bar=True, column=0)
        renderer.render("[####] 100% ")
        written = _written_by(renderer, "[####] 100%")
        assert written == "\x1b[1G[####] 100% \b"
        screen = screen_of(terminal)
        assert screen.line == "[####] 100%"
        assert screen.column == len("[####] 100%")


class TestColor:
    def test_wraps_output_in_foreground_color(self, terminal):
        renderer = _renderer(terminal, foreground_color="red")
        written = _written_by(renderer, "abc")
        assert written == "\x1b[31mabc\x1b[39m"

    def test_color_does_not_change_visible_text(self, terminal):
        renderer = _renderer(terminal, foreground_color="bright_cyan")
        renderer.render("abcdef")
        renderer.render("abX")
        screen = screen_of(terminal)
        assert screen.line == "abX"
        assert screen.column == 3

    def test_no_color_codes_without_color_support(self):
        terminal = Terminal(make_console(color_system=None))
        renderer = _renderer(terminal, foreground_color="red")
        assert _written_by(renderer, "abc") == "abc"

    def test_no_color_codes_by_default(self, terminal):
        renderer = _renderer(terminal)
        assert "\x1b" not in _written_by(renderer, "abc")


def test_screen_helper_replays_backspaces():
    screen = Screen().feed("abc\b\bX")
    assert screen.line == "aXc"
    assert screen.column == 2
