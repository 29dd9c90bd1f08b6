"""Tests for the code/tag catalogs."""

from __future__ import annotations

import pytest

from fluent_common.catalog import (
    Bracket,
    Catalog,
    EscapeSequence,
    HtmlTag,
    Indentation,
    PathSeparator,
    Quotation,
)

ALL_CATALOGS: list[type[Catalog]] = [Bracket, EscapeSequence, HtmlTag, Indentation, PathSeparator, Quotation]


class TestCatalogBase:
    """Tests for behaviour shared by every catalog."""

    @pytest.mark.parametrize("catalog", ALL_CATALOGS, ids=lambda c: c.__name__)
    def test_codes_are_unique(self, catalog: type[Catalog]) -> None:
        """Codes must not repeat within a catalog."""
        codes = [member.code for member in catalog]
        assert len(codes) == len(set(codes))

    @pytest.mark.parametrize("catalog", ALL_CATALOGS, ids=lambda c: c.__name__)
    def test_codes_start_at_zero_in_order(self, catalog: type[Catalog]) -> None:
        """Codes follow declaration order from 0."""
        assert [member.code for member in catalog] == list(range(len(catalog)))

    def test_from_code(self) -> None:
        """Members can be looked up by code."""
        assert Bracket.from_code(1) is Bracket.END
        assert PathSeparator.from_code(2) is PathSeparator.COLON

    def test_from_code_unknown(self) -> None:
        """Unknown codes raise ValueError."""
        with pytest.raises(ValueError, match="no member with code 9"):
            Bracket.from_code(9)

    def test_as_mapping_is_ordered_and_read_only(self) -> None:
        """The mapping view keeps declaration order and rejects writes."""
        mapping = Quotation.as_mapping()

        assert list(mapping) == ["SINGLE_QUOTE", "DOUBLE_QUOTE"]
        assert mapping["DOUBLE_QUOTE"] == (1, '"')
        with pytest.raises(TypeError):
            mapping["NEW"] = (2, "`")  # type: ignore[index]

    def test_tags(self) -> None:
        """Tags come back in declaration order."""
        assert HtmlTag.tags() == ("<br>", "<p>")


class TestNamedAccessors:
    """Tests for the per-catalog accessor functions."""

    def test_bracket(self) -> None:
        """Brackets are square."""
        assert Bracket.start() == "["
        assert Bracket.end() == "]"

    def test_quotation(self) -> None:
        """Quote characters."""
        assert Quotation.single_quote() == "'"
        assert Quotation.double_quote() == '"'

    def test_path_separator(self) -> None:
        """Separators and the separator alias."""
        assert PathSeparator.slash() == "/"
        assert PathSeparator.back_slash() == "\\"
        assert PathSeparator.colon() == ":"
        assert PathSeparator.BACK_SLASH.separator == "\\"

    def test_html_tag(self) -> None:
        """HTML tags."""
        assert HtmlTag.br() == "<br>"
        assert HtmlTag.p() == "<p>"

    def test_escape_sequence(self) -> None:
        """Escape entries keep their literal forms."""
        assert EscapeSequence.space() == "&#xA0;"
        assert EscapeSequence.full_width_space() == "&#x3000;"
        assert EscapeSequence.carriage_return() == "\\u000d"
        assert EscapeSequence.line_feed() == "\\u000a"
        assert EscapeSequence.new_line() == "\\u000d\\u000a"
        assert EscapeSequence.tab() == "\t"
        assert EscapeSequence.left_bracket() == "&lt;"
        assert EscapeSequence.right_bracket() == "&gt;"
        assert EscapeSequence.single_quotation() == "'"
        assert EscapeSequence.double_quotation() == "\\u0022"
        assert EscapeSequence.DOUBLE_QUOTATION.code == 9


class TestIndentation:
    """Tests for Indentation tags and repeat helpers."""

    def test_code_values(self) -> None:
        """Codes match declaration order."""
        assert Indentation.SPACE.code == 0
        assert Indentation.TAB.code == 1
        assert Indentation.RETURN.code == 2

    def test_tags(self) -> None:
        """Single tags."""
        assert Indentation.space() == " "
        assert Indentation.tab_code() == "\t"
        assert Indentation.return_code() == "\r\n"

    def test_indent_spaces_default(self) -> None:
        """Default indent is four spaces."""
        assert Indentation.indent_spaces() == "    "

    def test_indent_tabs_default(self) -> None:
        """Default indent is one tab."""
        assert Indentation.indent_tabs() == "\t"

    @pytest.mark.parametrize("count", [1, 10, 100, 1000])
    def test_indent_spaces(self, count: int) -> None:
        """Exactly ``count`` spaces and nothing else."""
        indent = Indentation.indent_spaces(count)

        assert len(indent) == count
        assert set(indent) == {" "}

    @pytest.mark.parametrize("count", [1, 10, 100, 1000])
    def test_indent_tabs(self, count: int) -> None:
        """Exactly ``count`` tabs and nothing else."""
        indent = Indentation.indent_tabs(count)

        assert len(indent) == count
        assert set(indent) == {"\t"}

    @pytest.mark.parametrize("count", [0, -1, -100])
    def test_non_positive_counts_rejected(self, count: int) -> None:
        """Zero or negative counts raise ValueError."""
        with pytest.raises(ValueError, match="positive integer"):
            Indentation.indent_spaces(count)
        with pytest.raises(ValueError, match="positive integer"):
            Indentation.indent_tabs(count)

    def test_non_int_count_rejected(self) -> None:
        """Booleans and floats are not counts."""
        with pytest.raises(ValueError, match="positive integer"):
            Indentation.indent_spaces(True)
        with pytest.raises(ValueError, match="positive integer"):
            Indentation.indent_tabs(2.0)  # type: ignore[arg-type]
