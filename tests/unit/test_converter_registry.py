#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_converter_registry.py
"""Unit tests for the grid format registry."""

import logging

import pytest

from gridtable.converter_registry import ConverterRegistry, FormatSpec, registry
from gridtable.exceptions import FormatError
from gridtable.options.grid import GridParserOptions, GridRendererOptions


@pytest.mark.unit
class TestBuiltinFormats:
    """Tests for the module-level registry."""

    def test_list_formats(self) -> None:
        """Test the built-in format names."""
        assert registry.list_formats() == ["ascii", "mysql"]

    def test_get_is_case_insensitive(self) -> None:
        """Test looking up a format by name."""
        assert registry.get("MySQL").name == "mysql"

    def test_unknown_format(self) -> None:
        """Test that an unknown name raises FormatError listing the supported formats."""
        with pytest.raises(FormatError, match="Unsupported format: 'csv'") as exc_info:
            registry.get("csv")
        assert exc_info.value.format_type == "csv"
        assert exc_info.value.supported_formats == ["ascii", "mysql"]

    @pytest.mark.parametrize(
        "path,expected",
        [
            ("table.txt", "ascii"),
            ("table.grid", "ascii"),
            ("query.mysql", "mysql"),
            ("QUERY.OUT", "mysql"),
            ("notes.md", "ascii"),
            (None, "ascii"),
        ],
    )
    def test_detect_format(self, path, expected: str) -> None:
        """Test detection by file extension with ascii as fallback."""
        assert registry.detect_format(path) == expected

    def test_detect_format_custom_default(self) -> None:
        """Test that the fallback can be overridden."""
        assert registry.detect_format("notes.md", default=None) is None

    def test_mysql_parser_defaults(self) -> None:
        """Test that mysql forces box style and anchor columns."""
        options = registry.parser_options_for("mysql", GridParserOptions(style="dot", strict=False))
        assert options.style == "box"
        assert options.column_boundaries == "anchors"
        assert options.strict is False

    def test_ascii_keeps_base_options(self) -> None:
        """Test that ascii has no defaults of its own."""
        base = GridRendererOptions(style="dot")
        assert registry.renderer_options_for("ascii", base) is base
        assert registry.parser_options_for("ascii") == GridParserOptions()


@pytest.mark.unit
class TestConverterRegistry:
    """Tests for registering formats."""

    def test_register_and_replace(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test registering a format and replacing it."""
        local = ConverterRegistry()
        local.register(FormatSpec(name="psql", description="PostgreSQL", extensions=(".psql",)))
        with caplog.at_level(logging.DEBUG, logger="gridtable.converter_registry"):
            local.register(
                FormatSpec(name="psql", description="PostgreSQL", renderer_defaults={"style": "plus"})
            )

        assert local.list_formats() == ["psql"]
        assert local.renderer_options_for("psql").style == "plus"
        assert local.detect_format("x.psql") == "ascii"
        assert "Replacing registered format: psql" in caplog.text
