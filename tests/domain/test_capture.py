"""Tests for command-substitution capture and the zero-balance rule."""

from walletctl.domain.capture import is_zero_literal, substitute


class TestSubstitute:
    def test_strips_single_newline(self) -> None:
        assert substitute("1.23456789\n") == "1.23456789"

    def test_strips_all_trailing_newlines(self) -> None:
        assert substitute("0.5\n\n\n") == "0.5"

    def test_keeps_inner_and_leading_whitespace(self) -> None:
        assert substitute(" a\nb \n") == " a\nb "

    def test_empty(self) -> None:
        assert substitute("") == ""


class TestIsZeroLiteral:
    def test_exact_literal(self) -> None:
        assert is_zero_literal("0.00000000", "0.00000000") is True

    def test_short_zero_is_not_zero(self) -> None:
        assert is_zero_literal("0", "0.00000000") is False

    def test_smallest_amount(self) -> None:
        assert is_zero_literal("0.00000001", "0.00000000") is False

    def test_empty_output_is_not_zero(self) -> None:
        assert is_zero_literal("", "0.00000000") is False
