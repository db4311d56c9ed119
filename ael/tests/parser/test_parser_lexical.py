# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import pytest

from ael import ParseError, parse
from ael.parser import ast as A
from ael.parser import parser as p


def _printed(source: str) -> A.Expr:
	return parse(source).statements[0].value  # type: ignore[attr-defined]


def test_integer_literal_is_int() -> None:
	value = _printed("print 42").value  # type: ignore[attr-defined]
	assert value == 42
	assert isinstance(value, int)


def test_decimal_literal_is_float() -> None:
	value = _printed("print 3.25").value  # type: ignore[attr-defined]
	assert value == 3.25
	assert isinstance(value, float)


def test_leading_zeros_are_plain_digits() -> None:
	assert _printed("print 007") == A.Literal(7)
	assert _printed("print 0.50") == A.Literal(0.5)


@pytest.mark.parametrize("source", ["print 1.", "print .5", "print 1e5", "print 1.2.3", "print +1"])
def test_malformed_numbers(source: str) -> None:
	with pytest.raises(ParseError):
		parse(source)


def test_negative_number_is_unary_minus() -> None:
	assert _printed("print -1") == A.UnaryExpression("-", A.Literal(1))


def test_comments_are_transparent() -> None:
	assert parse("print 1 // comment\n") == parse("print 1")
	assert parse("print 1 // comment at end of input") == parse("print 1")
	assert parse("// leading\nprint 1\n// trailing") == parse("print 1")


def test_comment_splits_statements() -> None:
	prog = parse("let x = 1 // set x\nprint x // show it\n")
	assert len(prog.statements) == 2


def test_comment_may_sit_inside_an_expression() -> None:
	assert parse("print 1 + // one more\n 2") == parse("print 1 + 2")


def test_double_slash_is_always_a_comment() -> None:
	assert parse("print 4 //2") == parse("print 4")
	assert _printed("print 4 /2") == A.BinaryExpression("/", A.Literal(4), A.Literal(2))


def test_only_comments_is_not_a_program() -> None:
	with pytest.raises(ParseError):
		parse("// nothing here\n")


@pytest.mark.parametrize("source", ["", "   ", "\n\n"])
def test_empty_program_is_rejected(source: str) -> None:
	with pytest.raises(ParseError):
		parse(source)


def test_whitespace_is_insignificant() -> None:
	assert parse("  \n print\t(  1  +2 )\r\n") == parse("print (1+2)")
	assert parse("let\nx\n=\n1") == parse("let x = 1")


def test_recognize_returns_tree_without_parentheses() -> None:
	tree = p.recognize("print (1)")
	assert tree.data == "program"
	(stmt,) = tree.children
	assert stmt.data == "print_stmt"
	assert stmt.children[0].data == "number"
