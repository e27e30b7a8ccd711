#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_grid_parser.py
"""Unit tests for the grid table parser.

Tests cover:
- MySQL client output and leading/trailing noise
- Structural errors with line numbers
- End-of-input acceptance per parser state
- Lenient column-count handling
- Anchor-based column boundaries
- Fragmented input and partial-line reassembly
- Input source types

"""

import logging
from io import BytesIO, StringIO
from pathlib import Path
from unittest.mock import patch

import pytest

from gridtable.api import convert
from gridtable.exceptions import ConfigurationError, InvalidOptionsError, ParseError
from gridtable.options.grid import GridParserOptions, GridRendererOptions
from gridtable.parsers.grid import GridParser
from gridtable.table import Table


def _parse(text, **kwargs) -> Table:
    return GridParser(GridParserOptions(**kwargs)).parse(text)


@pytest.mark.unit
class TestGridParserBasic:
    """Tests for well-formed grid tables."""

    def test_mysql_describe(self, mysql_describe_output: str) -> None:
        """Test decoding the output of a MySQL DESCRIBE statement."""
        table = _parse(mysql_describe_output)

        assert table.headers == ["FIELD", "TYPE", "NULL", "KEY", "DEFAULT", "EXTRA"]
        assert table.rows == [["user_id", "smallint(5)", "NO", "PRI", "NULL", "auto_increment"]]

    def test_multiple_rows(self, simple_grid: str, simple_table: Table) -> None:
        """Test decoding several data rows."""
        assert _parse(simple_grid) == simple_table

    def test_leading_noise_ignored(self, simple_grid: str, simple_table: Table) -> None:
        """Test that text before the top border is skipped."""
        text = "mysql> SELECT id, name FROM users;\nsome | other + text\n\n" + simple_grid
        assert _parse(text) == simple_table

    def test_trailing_text_ignored(self, simple_grid: str, simple_table: Table) -> None:
        """Test that text after the bottom border is not parsed."""
        text = simple_grid + "2 rows in set (0.00 sec)\n| not | a | row |\n"
        assert _parse(text) == simple_table

    def test_blank_lines_inside_table_skipped(self) -> None:
        """Test that blank lines between table lines are ignored."""
        text = "+---+\n\n| A |\n   \n+---+\n| 1 |\n\n+---+\n"
        assert _parse(text) == Table(headers=["A"], rows=[["1"]])

    def test_indented_table(self) -> None:
        """Test a table indented as a whole."""
        text = "    +---+---+\n    | A | B |\n    +---+---+\n    | 1 | 2 |\n    +---+---+\n"
        assert _parse(text) == Table(headers=["A", "B"], rows=[["1", "2"]])

    def test_empty_cells(self) -> None:
        """Test that empty cells decode to empty strings."""
        text = "+---+---+\n| A | B |\n+---+---+\n|   | 2 |\n+---+---+\n"
        assert _parse(text).rows == [["", "2"]]

    def test_dot_style(self) -> None:
        """Test decoding a single-glyph style table."""
        text = "·········\n· A · B ·\n·········\n· 1 · 2 ·\n·········\n"
        assert _parse(text, style="dot") == Table(headers=["A", "B"], rows=[["1", "2"]])

    def test_literal_glyph_style(self) -> None:
        """Test decoding with a literal single-character style."""
        text = "*********\n* A * B *\n*********\n"
        assert _parse(text, style="*") == Table(headers=["A", "B"], rows=[])

    def test_wide_characters(self) -> None:
        """Test decoding cells holding double-width characters."""
        text = "+------+-----+\n| name | v   |\n+------+-----+\n| 中文 | abc |\n+------+-----+\n"
        assert _parse(text).rows == [["中文", "abc"]]

    def test_rows_stored_through_table(self, simple_grid: str) -> None:
        """Test that parsed rows go through Table.append_row."""
        with patch.object(Table, "append_row", autospec=True, side_effect=Table.append_row) as append_row:
            table = _parse(simple_grid)
        assert append_row.call_count == 2
        assert table.rows == [["1", "Alice"], ["2", "Bob"]]

    def test_debug_logging_of_transitions(self, simple_grid: str, caplog: pytest.LogCaptureFixture) -> None:
        """Test that state transitions are logged at debug level."""
        with caplog.at_level(logging.DEBUG, logger="gridtable.parsers.grid"):
            _parse(simple_grid)
        assert "start -> header" in caplog.text
        assert "data -> end" in caplog.text


@pytest.mark.unit
class TestGridParserErrors:
    """Tests for structural errors."""

    def test_column_count_mismatch(self) -> None:
        """Test that an extra data cell fails on the offending line."""
        text = "+--+--+\n| A | B |\n+--+--+\n| 1 | 2 | 3 |\n+--+--+"
        with pytest.raises(ParseError) as exc_info:
            _parse(text)

        error = exc_info.value
        assert error.line_number == 4
        assert "column count" in str(error)
        assert error.raw_line == "| 1 | 2 | 3 |"
        assert error.parsing_stage == "data"

    def test_second_border_instead_of_header(self) -> None:
        """Test a border where the header line is expected."""
        with pytest.raises(ParseError, match="got another border") as exc_info:
            _parse("+---+\n+---+\n")
        assert exc_info.value.line_number == 2

    def test_non_data_header(self) -> None:
        """Test text where the header line is expected."""
        with pytest.raises(ParseError, match="expected header data line") as exc_info:
            _parse("+---+\nhello\n")
        assert exc_info.value.line_number == 2

    def test_missing_header_separator(self) -> None:
        """Test a data line where the header separator is expected."""
        with pytest.raises(ParseError, match="expected header separator line") as exc_info:
            _parse("+---+\n| A |\n| B |\n")
        assert exc_info.value.line_number == 3
        assert exc_info.value.parsing_stage == "header_separator"

    def test_garbage_in_data(self) -> None:
        """Test an unexpected line inside the data section."""
        with pytest.raises(ParseError, match="expected data line") as exc_info:
            _parse("+---+\n| A |\n+---+\nhello\n")
        assert exc_info.value.line_number == 4

    def test_line_numbers_count_skipped_lines(self) -> None:
        """Test that blank and noise lines count toward line numbers."""
        text = "intro\n\n+--+--+\n| A | B |\n+--+--+\n\n| 1 | 2 | 3 |\n"
        with pytest.raises(ParseError) as exc_info:
            _parse(text)
        assert exc_info.value.line_number == 7

    def test_message_attribute_is_bare(self) -> None:
        """Test that the message attribute excludes the line prefix."""
        with pytest.raises(ParseError) as exc_info:
            _parse("+---+\n+---+\n")
        assert exc_info.value.message.startswith("expected header data line")
        assert str(exc_info.value).startswith("parse error on line 2: ")


@pytest.mark.unit
class TestGridParserEndOfInput:
    """Tests for end-of-input handling in each state."""

    def test_empty_input(self) -> None:
        """Test that input without a table is an error."""
        with pytest.raises(ParseError, match="ended unexpectedly in state 'start'") as exc_info:
            _parse("")
        assert exc_info.value.line_number == 1

    def test_noise_only(self) -> None:
        """Test that noise without a border is an error."""
        with pytest.raises(ParseError, match="state 'start'"):
            _parse("Empty set (0.00 sec)\n")

    def test_ends_after_top_border(self) -> None:
        """Test input ending before the header line."""
        with pytest.raises(ParseError, match="state 'header'"):
            _parse("+---+\n")

    def test_ends_after_header(self) -> None:
        """Test that a header without separator is accepted."""
        assert _parse("+---+\n| A |\n") == Table(headers=["A"], rows=[])

    def test_ends_after_header_separator(self) -> None:
        """Test that the canonical empty-table rendering decodes."""
        assert _parse("+---+---+\n| A | B |\n+---+---+\n") == Table(headers=["A", "B"], rows=[])

    def test_missing_bottom_border(self) -> None:
        """Test that rows without a bottom border are accepted."""
        assert _parse("+---+\n| A |\n+---+\n| 1 |\n").rows == [["1"]]

    def test_incomplete_fragment_at_end(self) -> None:
        """Test that a buffered fragment at the end of input is an error."""
        with pytest.raises(ParseError, match="incomplete line") as exc_info:
            _parse("+-----+\n| A   |\n+-----+\n| 1")
        assert exc_info.value.raw_line == "| 1"
        assert exc_info.value.line_number == 4


@pytest.mark.unit
class TestGridParserLenient:
    """Tests for strict=False."""

    def test_short_row_padded(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test that a row with too few cells is padded and a warning logged."""
        text = "+-----+-----+\n| A   | B   |\n+-----+-----+\n| 1         |\n+-----+-----+\n"
        with caplog.at_level(logging.WARNING, logger="gridtable.parsers.grid"):
            table = _parse(text, strict=False)
        assert table.rows == [["1", ""]]
        assert "normalizing row" in caplog.text

    def test_long_row_truncated(self) -> None:
        """Test that a row with too many cells is truncated."""
        text = "+--+--+\n| A | B |\n+--+--+\n| 1 | 2 | 3 |\n+--+--+"
        assert _parse(text, strict=False).rows == [["1", "2"]]

    def test_strict_is_default(self) -> None:
        """Test that mismatches fail without explicit options."""
        text = "+--+--+\n| A | B |\n+--+--+\n| 1 | 2 | 3 |\n+--+--+"
        with pytest.raises(ParseError):
            GridParser().parse(text)


@pytest.mark.unit
class TestGridParserAnchors:
    """Tests for column_boundaries='anchors'."""

    TEXT = "+----+-------+\n| id | expr  |\n+----+-------+\n| 1  | a|b   |\n+----+-------+\n"

    def test_delimiter_inside_cell(self) -> None:
        """Test that anchor mode keeps delimiter glyphs inside cells."""
        table = _parse(self.TEXT, column_boundaries="anchors")
        assert table.rows == [["1", "a|b"]]

    def test_delimiter_mode_splits_inside_cell(self) -> None:
        """Test that delimiter mode sees the extra delimiter as a boundary."""
        with pytest.raises(ParseError, match="column count"):
            _parse(self.TEXT)

    def test_misaligned_row_strict(self) -> None:
        """Test that misaligned cell boundaries fail in strict mode."""
        text = "+----+-------+\n| id | expr  |\n+----+-------+\n| 1 | ab      |\n+----+-------+\n"
        with pytest.raises(ParseError, match="do not line up") as exc_info:
            _parse(text, column_boundaries="anchors")
        assert exc_info.value.line_number == 4

    def test_misaligned_row_lenient(self) -> None:
        """Test that misaligned rows are cut at the anchors in lenient mode."""
        text = "+----+-------+\n| id | expr  |\n+----+-------+\n| 1 | ab      |\n+----+-------+\n"
        table = _parse(text, column_boundaries="anchors", strict=False)
        assert table.rows == [["1 |", "ab"]]

    def test_extra_trailing_cell_strict(self) -> None:
        """Test that a data cell right of the last anchor is a column count error."""
        text = "+---+---+\n| A | B |\n+---+---+\n| 1 | 2 | 3 |\n+---+---+\n"
        with pytest.raises(ParseError, match=r"data column count \(3\) does not match header count \(2\)") as exc_info:
            _parse(text, column_boundaries="anchors")
        assert exc_info.value.line_number == 4

    def test_extra_trailing_header_strict(self) -> None:
        """Test that a header wider than its border is rejected."""
        text = "+---+---+\n| A | B | C |\n+---+---+\n"
        with pytest.raises(ParseError, match="header column count") as exc_info:
            _parse(text, column_boundaries="anchors")
        assert exc_info.value.line_number == 2

    def test_extra_trailing_cell_lenient(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test that lenient mode truncates at the last anchor and warns."""
        text = "+---+---+\n| A | B |\n+---+---+\n| 1 | 2 | 3 |\n+---+---+\n"
        with caplog.at_level(logging.WARNING, logger="gridtable.parsers.grid"):
            table = _parse(text, column_boundaries="anchors", strict=False)
        assert table.rows == [["1", "2"]]
        assert "past the last border anchor" in caplog.text

    def test_mysql_format_rejects_extra_cell(self) -> None:
        """Test that the mysql format does not drop trailing cells."""
        text = "+---+---+\n| A | B |\n+---+---+\n| 1 | 2 | 3 |\n+---+---+\n"
        with pytest.raises(ParseError, match="column count"):
            convert(text, source_format="mysql")

    def test_single_glyph_style_rejected_before_reading(self) -> None:
        """Test that anchor mode with a single-glyph style fails before any input is read."""

        def lines():
            raise AssertionError("input was read")
            yield  # pragma: no cover

        parser = GridParser(GridParserOptions(style="dot", column_boundaries="anchors"))
        with pytest.raises(ConfigurationError):
            parser.parse(lines())


@pytest.mark.unit
class TestGridParserFragments:
    """Tests for inputs delivered as arbitrary fragments."""

    FRAGMENTS = [
        "+-----+-----+",
        "| a ",
        "  | b   |",
        "+--",
        "---+-----+",
        "| 1",
        "   | 2   |",
        "+-----+-----+",
    ]

    def test_fragments_reassembled(self) -> None:
        """Test that split lines are joined before classification."""
        assert _parse(self.FRAGMENTS) == Table(headers=["a", "b"], rows=[["1", "2"]])

    def test_reassembly_can_be_disabled(self) -> None:
        """Test that fragments fail when reassembly is turned off."""
        with pytest.raises(ParseError) as exc_info:
            _parse(self.FRAGMENTS, reassemble_partial_lines=False)
        assert exc_info.value.line_number == 2

    def test_short_lines_accepted_without_reassembly(self) -> None:
        """Test that a short row parses when reassembly is disabled."""
        text = "+-----+-----+\n| A   | B   |\n+-----+-----+\n| 1 |\n+-----+-----+\n"
        table = _parse(text, strict=False, reassemble_partial_lines=False)
        assert table.rows == [["1", ""]]

    def test_noise_before_table_not_buffered(self) -> None:
        """Test that short table-like noise before the first border is skipped."""
        fragments = ["| x", "+---+", "| A |", "+---+"]
        assert _parse(fragments) == Table(headers=["A"], rows=[])


@pytest.mark.unit
class TestGridParserSources:
    """Tests for the supported input source types."""

    def test_path(self, tmp_path: Path, simple_grid: str, simple_table: Table) -> None:
        """Test reading a file by Path."""
        path = tmp_path / "table.txt"
        path.write_text(simple_grid, encoding="utf-8")
        assert GridParser().parse(path) == simple_table

    def test_crlf_file(self, tmp_path: Path, simple_grid: str, simple_table: Table) -> None:
        """Test reading a file with CRLF line endings."""
        path = tmp_path / "table.txt"
        path.write_bytes(simple_grid.replace("\n", "\r\n").encode("utf-8"))
        assert GridParser().parse(path) == simple_table

    def test_bytes_with_bom(self, simple_grid: str, simple_table: Table) -> None:
        """Test decoding UTF-8 bytes carrying a byte order mark."""
        assert GridParser().parse(b"\xef\xbb\xbf" + simple_grid.encode("utf-8")) == simple_table

    def test_binary_stream(self, simple_grid: str, simple_table: Table) -> None:
        """Test reading a binary file-like object."""
        assert GridParser().parse(BytesIO(simple_grid.encode("utf-8"))) == simple_table

    def test_text_stream(self, simple_grid: str, simple_table: Table) -> None:
        """Test reading a text file-like object."""
        assert GridParser().parse(StringIO(simple_grid)) == simple_table

    def test_parse_into_replaces_on_success(self, simple_grid: str) -> None:
        """Test that parse_into fills an existing table."""
        table = Table(headers=["old"], rows=[["x"]])
        result = GridParser().parse_into(simple_grid, table)
        assert result is table
        assert table.headers == ["id", "name"]

    def test_parse_into_untouched_on_failure(self) -> None:
        """Test that a failed parse leaves the target table unchanged."""
        table = Table(headers=["old"], rows=[["x"]])
        with pytest.raises(ParseError):
            GridParser().parse_into("+--+--+\n| A | B |\n+--+--+\n| 1 | 2 | 3 |\n", table)
        assert table == Table(headers=["old"], rows=[["x"]])

    def test_wrong_options_type(self) -> None:
        """Test that renderer options are rejected."""
        with pytest.raises(InvalidOptionsError):
            GridParser(GridRendererOptions())  # type: ignore[arg-type]
