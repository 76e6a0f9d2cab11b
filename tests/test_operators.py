"""Test operator scanning and two-character disambiguation."""

import pytest

from titan.tokens import TokenCategory, TokenType

from .conftest import assert_types


class TestSingleCharOperators:
    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("+", TokenType.PLUS),
            ("-", TokenType.MINUS),
            ("*", TokenType.MULTIPLY),
            ("/", TokenType.DIVIDE),
            ("%", TokenType.MOD),
            ("=", TokenType.EQUALS),
            ("<", TokenType.LESS_THAN),
            (">", TokenType.MORE_THAN),
        ],
    )
    def test_operator_at_end_of_input(self, scan, source, expected):
        tokens = scan(source)
        assert_types(tokens, [expected])
        assert tokens[0].category == TokenCategory.OPERATION
        assert tokens[0].value is None
        assert len(tokens[0].span) == 1


class TestTwoCharOperators:
    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("++", TokenType.PLUS_PLUS),
            ("+=", TokenType.PLUS_EQUALS),
            ("--", TokenType.MINUS_MINUS),
            ("-=", TokenType.MINUS_EQUALS),
            ("*=", TokenType.MULTIPLY_EQUALS),
            ("/=", TokenType.DIVIDE_EQUALS),
            ("==", TokenType.EQUALS_EQUALS),
            ("<=", TokenType.LESS_THAN_EQUALS),
            (">=", TokenType.MORE_THAN_EQUALS),
        ],
    )
    def test_greedy_match(self, scan, source, expected):
        tokens = scan(source)
        assert_types(tokens, [expected])
        assert len(tokens[0].span) == 2

    def test_plus_plus_plus(self, scan):
        assert_types(scan("+++"), [TokenType.PLUS_PLUS, TokenType.PLUS])

    def test_triple_equals(self, scan):
        assert_types(scan("==="), [TokenType.EQUALS_EQUALS, TokenType.EQUALS])

    def test_plus_minus(self, scan):
        assert_types(scan("+-"), [TokenType.PLUS, TokenType.MINUS])

    def test_arrow_is_two_tokens(self, scan):
        assert_types(scan("=>"), [TokenType.EQUALS, TokenType.MORE_THAN])

    def test_mod_has_no_compound_form(self, scan):
        assert_types(scan("%="), [TokenType.MOD, TokenType.EQUALS])

    def test_space_breaks_compound(self, scan):
        assert_types(scan("+ ="), [TokenType.PLUS, TokenType.EQUALS])


class TestPower:
    def test_double_star_is_two_multiplies(self, scan):
        assert_types(scan("**"), [TokenType.MULTIPLY, TokenType.MULTIPLY])

    def test_power_never_emitted(self, scan):
        tokens = scan("a ** b *= c * d")
        assert TokenType.POWER not in [t.type for t in tokens]


class TestMinus:
    def test_minus_before_identifier(self, scan):
        tokens = scan("-x")
        assert_types(tokens, [TokenType.MINUS, TokenType.IDENTIFIER])
        assert tokens[1].value == "x"

    def test_minus_before_space_digit(self, scan):
        # The digit is not directly after '-', so it is skipped
        assert_types(scan("- 5"), [TokenType.MINUS])

    def test_minus_minus_before_digit(self, scan):
        assert_types(scan("--5"), [TokenType.MINUS_MINUS])

    def test_minus_equals_before_digit(self, scan):
        assert_types(scan("-=5"), [TokenType.MINUS_EQUALS])
