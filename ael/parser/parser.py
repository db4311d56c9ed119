# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Ael parser.

`recognize` runs the lark grammar (grammar.lark) over the source and returns
the raw parse tree; `build_program` maps that tree onto the dataclasses in
`ael.parser.ast`. `parse_program` chains the two.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import FrozenSet, Iterable, Optional, Tuple, Union

from lark import Lark, Token, Tree
from lark.exceptions import UnexpectedCharacters, UnexpectedEOF, UnexpectedInput, UnexpectedToken

from ael.core.span import Span

from .ast import (
	Assignment,
	BinaryExpression,
	Expr,
	IdentifierExpression,
	Literal,
	PrintStatement,
	Program,
	Stmt,
	UnaryExpression,
	VariableDeclaration,
)

logger = logging.getLogger(__name__)

_GRAMMAR_PATH = Path(__file__).with_name("grammar.lark")
_GRAMMAR_SRC = _GRAMMAR_PATH.read_text()

# The basic lexer sees every terminal in every state, which is what keeps
# keywords out of NAME positions (`let let = 5` must fail). The `regex`
# module supplies the Unicode letter class used by NAME.
_PARSER = Lark(
	_GRAMMAR_SRC,
	parser="lalr",
	lexer="basic",
	start="program",
	propagate_positions=True,
	maybe_placeholders=False,
	regex=True,
)

_END = "$END"

# Regex terminals have no useful literal spelling.
_TERMINAL_DESCRIPTIONS = {
	"NAME": "an identifier",
	"NUMBER": "a number",
	_END: "end of input",
}


class ParseError(SyntaxError):
	"""
	Raised when the source is not a valid Ael program.

	`loc` points at the first input the grammar could not match and `expected`
	lists what would have been accepted there. The lark exception that
	triggered it is chained as `__cause__`.
	"""

	def __init__(
		self,
		message: str,
		*,
		loc: Span,
		expected: Iterable[str] = (),
		text: Optional[str] = None,
	) -> None:
		super().__init__(message, (loc.file, loc.line, loc.column, text))
		self.loc = loc
		self.expected: FrozenSet[str] = frozenset(expected)


def recognize(source: str, *, file: Optional[str] = None) -> Tree:
	"""Match `source` against the grammar, returning the lark parse tree."""
	try:
		return _PARSER.parse(source)
	except UnexpectedInput as err:
		raise _parse_error(err, source, file) from err


def parse_program(source: str, *, file: Optional[str] = None) -> Program:
	logger.debug("parsing %s (%d chars)", file or "<string>", len(source))
	tree = recognize(source, file=file)
	program = build_program(tree)
	logger.debug("parsed %d statement(s)", len(program.statements))
	return program


# -- tree -> AST --------------------------------------------------------------


def build_program(tree: Tree) -> Program:
	if _name(tree) != "program":
		raise ValueError(f"expected program tree, got {_name(tree)}")
	return Program(statements=tuple(_build_stmt(child) for child in tree.children))


def _build_stmt(tree: Tree) -> Stmt:
	kind = _name(tree)
	if kind == "variable_decl":
		name_token, value = tree.children
		return VariableDeclaration(name=name_token.value, initializer=_build_expr(value))
	if kind == "assign":
		name_token, value = tree.children
		return Assignment(
			target=IdentifierExpression(name=name_token.value),
			value=_build_expr(value),
		)
	if kind == "print_stmt":
		return PrintStatement(value=_build_expr(tree.children[0]))
	raise ValueError(f"Unsupported statement node: {kind}")


def _build_expr(node: Union[Tree, Token]) -> Expr:
	if not isinstance(node, Tree):
		raise TypeError(f"Unexpected node type: {type(node)}")
	name = _name(node)
	if name == "binary":
		left, op_token, right = node.children
		return BinaryExpression(operator=op_token.value, left=_build_expr(left), right=_build_expr(right))
	if name == "unary":
		op_token, operand = node.children
		return UnaryExpression(operator=op_token.value, operand=_build_expr(operand))
	if name == "var":
		return IdentifierExpression(name=node.children[0].value)
	if name == "number":
		return Literal(value=_number_value(node.children[0].value))
	raise ValueError(f"Unsupported expression node: {name}")


def _number_value(text: str) -> Union[int, float]:
	if "." in text:
		return float(text)
	return int(text)


def _name(node: Union[Tree, Token]) -> str:
	if isinstance(node, Tree):
		data = node.data
		if isinstance(data, Token):
			return data.value
		return data
	if isinstance(node, Token):
		return node.type
	return str(node)


# -- diagnostics --------------------------------------------------------------


def _parse_error(err: UnexpectedInput, source: str, file: Optional[str]) -> ParseError:
	if isinstance(err, UnexpectedCharacters):
		loc = Span.from_loc(err, file=file)
		expected = _expected_before(source, err.pos_in_stream, fallback=err.allowed)
		got = repr(err.char)
	elif isinstance(err, UnexpectedToken) and err.token.type != _END:
		loc = Span.from_loc(err.token, file=file)
		expected = err.expected
		got = _describe_token(err.token)
	elif isinstance(err, (UnexpectedToken, UnexpectedEOF)):
		line, column = _end_position(source)
		loc = Span(file=file, line=line, column=column, raw=err)
		expected = err.expected
		got = _TERMINAL_DESCRIPTIONS[_END]
	else:
		raise TypeError(f"Unexpected lark error: {type(err)}")

	descriptions = sorted(_describe_terminal(name) for name in expected or ())
	text = _source_line(source, loc.line)
	message = f"Line {loc.line}, column {loc.column}: {_expected_phrase(descriptions)}, got {got}"
	if text is not None:
		message = f"{message}\n\n{text}\n{' ' * ((loc.column or 1) - 1)}^"
	return ParseError(message, loc=loc, expected=descriptions, text=text)


def _expected_before(source: str, pos: int, *, fallback: Optional[Iterable[str]]) -> Iterable[str]:
	"""
	Terminals the parser would accept at `pos`.

	The lexer's own `allowed` set lists every terminal it knows; replaying the
	prefix through an interactive parser narrows it to what the grammar accepts.
	"""
	interactive = _PARSER.parse_interactive(source[:pos])
	try:
		interactive.exhaust_lexer()
	except UnexpectedInput:
		return fallback or ()
	return interactive.accepts()


def _describe_terminal(name: str) -> str:
	if name in _TERMINAL_DESCRIPTIONS:
		return _TERMINAL_DESCRIPTIONS[name]
	terminal = _PARSER.get_terminal(name)
	return f'"{terminal.pattern.value}"'


def _describe_token(token: Token) -> str:
	if token.type in _TERMINAL_DESCRIPTIONS:
		return f"{_TERMINAL_DESCRIPTIONS[token.type]} {token.value!r}"
	return repr(token.value)


def _expected_phrase(descriptions: list[str]) -> str:
	if not descriptions:
		return "unexpected input"
	if len(descriptions) == 1:
		return f"expected {descriptions[0]}"
	return "expected one of " + ", ".join(descriptions)


def _end_position(source: str) -> Tuple[int, int]:
	lines = source.split("\n")
	return len(lines), len(lines[-1]) + 1


def _source_line(source: str, line: Optional[int]) -> Optional[str]:
	if line is None:
		return None
	lines = source.split("\n")
	if not 0 < line <= len(lines):
		return None
	return lines[line - 1]


__all__ = ["ParseError", "build_program", "parse_program", "recognize"]
