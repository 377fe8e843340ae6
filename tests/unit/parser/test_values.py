"""
Unit tests for the value lexer.

Tests cover:
- NULL detection (both spellings, distinct from empty string)
- Quote stripping and single-pass escape resolution
- Doubled-quote escapes
- Integer / decimal coercion
- Fallback to verbatim text
"""

import pytest

from sql_dump_extractor.parser.values import lex_value, parse_number, unescape_sql_string


@pytest.mark.unit
class TestNullHandling:
    def test_uppercase_null(self):
        assert lex_value("NULL") is None

    def test_lowercase_null(self):
        assert lex_value("null") is None

    def test_mixed_case_null_is_text(self):
        """Only the two exact spellings are NULL."""
        assert lex_value("Null") == "Null"

    def test_empty_quoted_string_is_not_null(self):
        assert lex_value("''") == ""

    def test_quoted_null_is_text(self):
        assert lex_value("'NULL'") == "NULL"


@pytest.mark.unit
class TestQuotedStrings:
    def test_plain_single_quoted(self):
        assert lex_value("'Ann'") == "Ann"

    def test_plain_double_quoted(self):
        assert lex_value('"Ann"') == "Ann"

    def test_backslash_escaped_quote(self):
        assert lex_value("'it\\'s a test'") == "it's a test"

    def test_doubled_quote(self):
        assert lex_value("'it''s a test'") == "it's a test"

    def test_doubled_double_quote(self):
        assert lex_value('"say ""hi"""') == 'say "hi"'

    def test_control_character_escapes(self):
        assert lex_value("'a\\nb\\rc\\td'") == "a\nb\rc\td"

    def test_escaped_backslash_before_n_is_not_newline(self):
        """\\\\n is a literal backslash followed by n."""
        assert lex_value("'C:\\\\new'") == "C:\\new"

    def test_escaped_double_quote_in_single_quoted(self):
        assert lex_value("'say \\\"hi\\\"'") == 'say "hi"'

    def test_mysql_nul_and_ctrl_z(self):
        assert lex_value("'a\\0b\\Z'") == "a\x00b\x1a"

    def test_unknown_escape_drops_backslash(self):
        """\\% and \\_ lose the backslash too, unlike inside MySQL."""
        assert lex_value("'50\\%'") == "50%"
        assert lex_value("'a\\_b'") == "a_b"

    def test_quoted_number_stays_text(self):
        assert lex_value("'42'") == "42"

    def test_unicode_content(self):
        assert lex_value("'Zoë 北京'") == "Zoë 北京"

    def test_single_quote_char_is_text(self):
        assert lex_value("'") == "'"


@pytest.mark.unit
class TestNumbers:
    def test_integer(self):
        value = lex_value("42")
        assert value == 42
        assert isinstance(value, int)

    def test_negative_integer(self):
        assert lex_value("-7") == -7

    def test_decimal(self):
        value = lex_value("19.99")
        assert value == pytest.approx(19.99)
        assert isinstance(value, float)

    def test_negative_decimal(self):
        assert lex_value("-0.5") == pytest.approx(-0.5)

    def test_exponent_is_not_a_number(self):
        assert lex_value("1e5") == "1e5"

    def test_trailing_dot_is_text(self):
        assert lex_value("1.") == "1."

    def test_parse_number_rejects_text(self):
        assert parse_number("abc") is None

    def test_non_ascii_digits_are_text(self):
        """Arabic-Indic and full-width digits are not SQL numbers."""
        assert lex_value("\u0661\u0662") == "\u0661\u0662"
        assert isinstance(lex_value("\uff11\uff12"), str)
        assert parse_number("\uff11.\uff12") is None


@pytest.mark.unit
class TestFallbackText:
    def test_unquoted_identifier(self):
        assert lex_value("CURRENT_TIMESTAMP") == "CURRENT_TIMESTAMP"

    def test_hex_literal(self):
        assert lex_value("0x1F") == "0x1F"

    def test_mismatched_quotes(self):
        assert lex_value("'abc\"") == "'abc\""

    def test_empty_token(self):
        assert lex_value("") == ""


@pytest.mark.unit
class TestUnescapeSqlString:
    def test_no_escapes_returns_input(self):
        assert unescape_sql_string("plain") == "plain"

    def test_trailing_lone_backslash_kept(self):
        assert unescape_sql_string("abc\\") == "abc\\"

    def test_other_quote_not_collapsed(self):
        assert unescape_sql_string('a""b', quote="'") == 'a""b'

    def test_single_pass_order(self):
        assert unescape_sql_string("\\\\n\\n") == "\\n\n"
