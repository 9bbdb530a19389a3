"""Tests for value classification."""

import pytest

from fusion_parser import Expression, ObjectName, SimpleValue, UnexpectedTokenError, parse


def value_of(source: str):
    return parse(source)[0].value


class TestLiterals:
    """Quoted strings, numbers, booleans and null."""

    @pytest.mark.parametrize(
        "source,expected",
        [
            ("a = 'single'", "single"),
            ('a = "double"', "double"),
            ("a = ''", ""),
            ("a = '42'", "42"),
            ("a = 'true'", "true"),
            ("a = 'Neos.Fusion:Value'", "Neos.Fusion:Value"),
        ],
    )
    def test_quoted_strings_stay_strings(self, source, expected):
        assert value_of(source) == SimpleValue(data=expected)

    def test_integer(self):
        value = value_of("a = 42")
        assert value.data == 42
        assert isinstance(value.data, int)

    def test_signed_integers(self):
        assert value_of("a = -7").data == -7
        assert value_of("a = +5").data == 5

    def test_decimal(self):
        value = value_of("a = 3.25")
        assert value.data == 3.25
        assert isinstance(value.data, float)

    @pytest.mark.parametrize("word", ["true", "TRUE", "True"])
    def test_true_any_case(self, word):
        assert value_of(f"a = {word}").data is True

    @pytest.mark.parametrize("word", ["false", "FALSE"])
    def test_false_any_case(self, word):
        assert value_of(f"a = {word}").data is False

    @pytest.mark.parametrize("word", ["null", "NULL", "Null"])
    def test_null_any_case(self, word):
        value = value_of(f"a = {word}")
        assert isinstance(value, SimpleValue)
        assert value.data is None

    def test_escapes_in_values_are_not_interpreted(self):
        assert value_of("a = 'tab\\there'").data == "tab\\there"
        assert value_of("a = 'it\\'s'").data == "it\\'s"

    def test_multiline_string(self):
        assert value_of("a = 'one\ntwo'").data == "one\ntwo"


class TestObjectNames:
    """Bare words that are not literals."""

    def test_qualified_name(self):
        assert value_of("a = Neos.Fusion:Value") == ObjectName(name="Neos.Fusion:Value")

    def test_keyword_prefix_is_a_name(self):
        assert value_of("a = trueish") == ObjectName(name="trueish")

    def test_name_followed_by_block(self):
        statement = parse("a = Vendor.Site:Teaser {\n  b = 1\n}")[0]
        assert statement.value.name == "Vendor.Site:Teaser"
        assert len(statement.block) == 1

    @pytest.mark.parametrize("source", ["a = bar.baz.", "a = Vendor:", "a = 1.", "a = .5"])
    def test_dangling_separator_rejected(self, source):
        with pytest.raises(UnexpectedTokenError):
            parse(source)

    def test_plus_only_prefixes_numbers(self):
        with pytest.raises(UnexpectedTokenError) as exc_info:
            parse("a = +Vendor:Thing")
        assert exc_info.value.expected == "a value"
        assert exc_info.value.found == "'+Vendor:Thing'"


class TestExpressions:
    """Embedded ${...} expressions."""

    def test_expression_source_is_opaque(self):
        value = value_of("a = ${q(node).property('title') || 'x'}")
        assert value == Expression(source="q(node).property('title') || 'x'")

    def test_expression_with_object_literal(self):
        assert value_of("a = ${{b: {c: 1}}}").source == "{b: {c: 1}}"

    def test_expression_with_brace_in_string(self):
        assert value_of("a = ${'}' + x}").source == "'}' + x"
