"""Unit tests for the line grammar."""

from textwrap import dedent

import pytest

from pcparse.exceptions import ParseError
from pcparse.models import Dependency
from pcparse.parser.grammar import parse_document
from pcparse.parser.nodes import Comment, DependencyList, Property, Variable


@pytest.mark.unit
class TestLineForms:
    """Each line form on its own."""

    def test_empty_document(self) -> None:
        assert parse_document("") == []

    def test_blank_lines_produce_nothing(self) -> None:
        assert parse_document("\n\n   \n\t\n") == []

    def test_comment(self) -> None:
        assert parse_document("# hello world\n") == [Comment(text="hello world")]

    def test_bare_comment_marker(self) -> None:
        assert parse_document("#\n#") == [Comment(text=""), Comment(text="")]

    def test_indented_comment(self) -> None:
        assert parse_document("   # note") == [Comment(text="note")]

    def test_variable(self) -> None:
        assert parse_document("prefix=/usr\n") == [Variable(key="prefix", value="/usr")]

    def test_variable_with_spaces(self) -> None:
        assert parse_document("  prefix  =  /usr  \n") == [Variable(key="prefix", value="/usr")]

    def test_variable_with_empty_value(self) -> None:
        assert parse_document("empty=\n") == [Variable(key="empty", value="")]

    def test_variable_value_keeps_colons_and_equals(self) -> None:
        assert parse_document("x=a:b=c") == [Variable(key="x", value="a:b=c")]

    def test_property(self) -> None:
        assert parse_document("Name: libpng\n") == [Property(key="Name", value="libpng")]

    def test_property_key_with_dot_and_underscore(self) -> None:
        nodes = parse_document("Libs.private: -lm\nmy_key: v")
        assert nodes == [Property(key="Libs.private", value="-lm"), Property(key="my_key", value="v")]

    def test_property_value_keeps_url(self) -> None:
        nodes = parse_document("URL: https://example.com/a=b")
        assert nodes == [Property(key="URL", value="https://example.com/a=b")]

    def test_property_at_end_of_input_without_value(self) -> None:
        assert parse_document("Name:") == [Property(key="Name", value="")]

    def test_value_keeps_hash(self) -> None:
        nodes = parse_document("Cflags: -DX # not a comment")
        assert nodes == [Property(key="Cflags", value="-DX # not a comment")]

    def test_crlf_line_endings(self) -> None:
        nodes = parse_document("Name: foo\r\nVersion: 1\r\n")
        assert nodes == [Property(key="Name", value="foo"), Property(key="Version", value="1")]


@pytest.mark.unit
class TestAlternativeOrder:
    """Precedence between line forms."""

    @pytest.mark.parametrize(
        "keyword",
        ["Requires", "Requires.private", "Requires.internal", "Provides"],
    )
    def test_dependency_keywords_are_not_properties(self, keyword: str) -> None:
        nodes = parse_document(f"{keyword}: zlib")
        assert nodes == [DependencyList(key=keyword, dependencies=(Dependency("zlib"),))]

    def test_whitespace_before_dependency_colon(self) -> None:
        nodes = parse_document("Requires.private :   zlib  ")
        assert nodes == [DependencyList(key="Requires.private", dependencies=(Dependency("zlib"),))]

    def test_keyword_with_equals_is_a_variable(self) -> None:
        assert parse_document("Requires=zlib") == [Variable(key="Requires", value="zlib")]

    def test_longer_key_sharing_keyword_prefix_is_a_property(self) -> None:
        nodes = parse_document("Requires.privateX: zlib")
        assert nodes == [Property(key="Requires.privateX", value="zlib")]

    def test_lowercase_keyword_is_a_generic_property(self) -> None:
        assert parse_document("requires: zlib") == [Property(key="requires", value="zlib")]

    def test_empty_dependency_list(self) -> None:
        assert parse_document("Requires:\n") == [DependencyList(key="Requires", dependencies=())]

    def test_document_order_is_kept(self) -> None:
        text = dedent("""\
            # comment
            prefix=/usr

            Name: foo
            Requires: bar
        """)
        nodes = parse_document(text)
        assert [type(n) for n in nodes] == [Comment, Variable, Property, DependencyList]


@pytest.mark.unit
class TestParseErrors:
    """Inputs that cannot be parsed."""

    def test_keyword_without_colon(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_document("Name: foo\nRequires zlib\n")

        error = exc_info.value
        assert error.offset == 10
        assert error.line == 2
        assert error.column == 1
        assert error.committed is None

    def test_unknown_line(self) -> None:
        with pytest.raises(ParseError, match="unexpected input"):
            parse_document("just some words\n")

    def test_key_with_invalid_character(self) -> None:
        with pytest.raises(ParseError):
            parse_document("Bad-Key: value")

    def test_garbage_after_dependency_list_is_committed(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_document("Requires: zlib !bad\n")

        error = exc_info.value
        assert error.committed == "Requires:"
        assert error.offset == 15
        assert error.column == 16
        assert "after 'Requires:'" in str(error)

    def test_dangling_operator_is_committed(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_document("Requires.private: zlib >=\n")
        assert exc_info.value.committed == "Requires.private:"

    def test_error_message_has_location(self) -> None:
        with pytest.raises(ParseError, match=r"line 3, column 1 \(offset 5\)"):
            parse_document("a=1\n\n!")
