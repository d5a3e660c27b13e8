"""Tests for format_path bracket rendering."""

from __future__ import annotations

import pytest

from json_node_editor.tree.formatter import format_path


class TestFormatPath:
    def test_none_is_root(self) -> None:
        assert format_path(None) == "$"

    def test_empty_is_root(self) -> None:
        assert format_path([]) == "$"
        assert format_path(()) == "$"

    def test_mixed_segments(self) -> None:
        assert format_path(["customer", 0, "name"]) == '$["customer"][0]["name"]'

    def test_single_index(self) -> None:
        assert format_path([3]) == "$[3]"

    def test_numeric_looking_key_is_quoted(self) -> None:
        assert format_path(["0"]) == '$["0"]'

    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            (['say "hi"'], '$["say "hi""]'),
            ([""], '$[""]'),
        ],
    )
    def test_keys_are_not_escaped(self, path: list[str], expected: str) -> None:
        assert format_path(path) == expected
