"""Tests for the named spinner sequences."""

import pytest

from console_progress.animations import ANIMATIONS, DEFAULT, get_animation
from console_progress.exceptions import InvalidConfigError
from rich.cells import cell_len


class TestAnimations:
    def test_default_sequence(self):
        assert get_animation("default") == DEFAULT == "|/-\\"

    def test_lookup_is_case_insensitive(self):
        assert get_animation("DOTS") == ANIMATIONS["dots"]

    def test_unknown_name(self):
        with pytest.raises(InvalidConfigError) as exc_info:
            get_animation("sparkles")
        assert "default" in exc_info.value.reason

    @pytest.mark.parametrize("name", sorted(ANIMATIONS))
    def test_glyphs_are_single_cell(self, name):
        assert all(cell_len(glyph) == 1 for glyph in ANIMATIONS[name])
