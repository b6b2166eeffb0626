import re

from envfile.parsing import DEFAULT_PATTERNS, Patterns, expand_variables, parse_value


def test_parse_value_trims_spaces_but_not_tabs():
    assert parse_value("  bar  ", {}) == "bar"
    assert parse_value("bar\t", {}) == "bar\t"


def test_parse_value_short_values_are_untouched():
    assert parse_value("", {}) == ""
    assert parse_value('"', {}) == '"'
    assert parse_value("$", {}) == "$"


def test_single_quotes_suppress_escapes_and_interpolation():
    assert parse_value("'quote $FOO'", {"FOO": "test"}) == "quote $FOO"
    assert parse_value("'a\\nb'", {}) == "a\\nb"


def test_double_quotes_are_unescaped_then_interpolated():
    assert parse_value('"quote $FOO"', {"FOO": "test"}) == "quote test"
    assert parse_value('"foo\\$BAR"', {"BAR": "x"}) == "foo$BAR"
    assert parse_value('"foo\\${BAR}"', {"BAR": "x"}) == "foo${BAR}"


def test_unquoted_and_malformed_values_are_interpolated():
    assert parse_value("$FOO/bin", {"FOO": "/usr"}) == "/usr/bin"
    assert parse_value('"$FOO', {"FOO": "x"}) == '"x'
    # Unquoted values are not escape-decoded, only escaped references are kept.
    assert parse_value("a\\nb", {}) == "a\\nb"
    assert parse_value("foo\\$BAR", {"BAR": "x"}) == "foo$BAR"


def test_expand_variables_forms():
    values = {"FOO": "test"}
    assert expand_variables("$FOO", values) == "test"
    assert expand_variables("${FOO}bar", values) == "testbar"
    assert expand_variables("${FOO", values) == "test"
    assert expand_variables("a-$FOO-b", values) == "a-test-b"


def test_expand_variables_unknown_names_are_empty():
    assert expand_variables("$MISSING", {}) == ""
    assert expand_variables("x${MISSING}y", {}) == "xy"


def test_expand_variables_without_identifier_is_literal():
    assert expand_variables("cost: $", {}) == "cost: $"
    assert expand_variables("${}", {}) == "${}"
    # Only upper-case identifiers are references.
    assert expand_variables("$foo", {"foo": "x"}) == "$foo"


def test_expand_variables_escaped_and_paren_forms():
    values = {"FOO": "test"}
    assert expand_variables("\\$FOO", values) == "$FOO"
    assert expand_variables("foo\\${FOO} ${FOO}", values) == "foo${FOO} test"
    assert expand_variables("$(FOO)", values) == "(FOO)"


def test_custom_patterns_are_used():
    # Lower-case identifiers become references with a custom expansion pattern.
    patterns = Patterns(expand_var=re.compile(r"(\\)?(\$)(\()?\{?([A-Za-z0-9_]+)?\}?"))
    assert expand_variables("$foo", {"foo": "x"}, patterns=patterns) == "x"
    assert expand_variables("$foo", {"foo": "x"}, patterns=DEFAULT_PATTERNS) == "$foo"
