# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Ael surface AST.

Nodes are frozen dataclasses: the parser builds the whole tree in one pass and
nothing mutates it afterwards. Parenthesised expressions have no node of their
own; the builder lifts the inner expression in their place.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

BINARY_OPS = frozenset({"==", "+", "-", "*", "%", "/", "**"})
UNARY_OPS = frozenset({"-", "abs", "sqrt"})


class Stmt:
	pass


class Expr:
	pass


@dataclass(frozen=True)
class Literal(Expr):
	value: Union[int, float]


@dataclass(frozen=True)
class IdentifierExpression(Expr):
	name: str


@dataclass(frozen=True)
class BinaryExpression(Expr):
	operator: str
	left: Expr
	right: Expr

	def __post_init__(self) -> None:
		if self.operator not in BINARY_OPS:
			raise ValueError(f"unknown binary operator {self.operator!r}")


@dataclass(frozen=True)
class UnaryExpression(Expr):
	operator: str
	operand: Expr

	def __post_init__(self) -> None:
		if self.operator not in UNARY_OPS:
			raise ValueError(f"unknown unary operator {self.operator!r}")


@dataclass(frozen=True)
class VariableDeclaration(Stmt):
	name: str
	initializer: Expr


@dataclass(frozen=True)
class Assignment(Stmt):
	target: IdentifierExpression
	value: Expr


@dataclass(frozen=True)
class PrintStatement(Stmt):
	value: Expr


@dataclass(frozen=True)
class Program:
	statements: Tuple[Stmt, ...]

	def __post_init__(self) -> None:
		if not isinstance(self.statements, tuple):
			object.__setattr__(self, "statements", tuple(self.statements))


__all__ = [
	"BINARY_OPS",
	"UNARY_OPS",
	"Stmt",
	"Expr",
	"Literal",
	"IdentifierExpression",
	"BinaryExpression",
	"UnaryExpression",
	"VariableDeclaration",
	"Assignment",
	"PrintStatement",
	"Program",
]
