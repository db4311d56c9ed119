# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""S-expression rendering of the Ael AST, one line per statement."""

from __future__ import annotations

from ael.parser import ast


def format_expr(expr: ast.Expr) -> str:
	if isinstance(expr, ast.Literal):
		return repr(expr.value)
	if isinstance(expr, ast.IdentifierExpression):
		return expr.name
	if isinstance(expr, ast.BinaryExpression):
		return f"({expr.operator} {format_expr(expr.left)} {format_expr(expr.right)})"
	if isinstance(expr, ast.UnaryExpression):
		return f"({expr.operator} {format_expr(expr.operand)})"
	return "<invalid expr>"


def format_stmt(stmt: ast.Stmt) -> str:
	if isinstance(stmt, ast.VariableDeclaration):
		return f"(let {stmt.name} {format_expr(stmt.initializer)})"
	if isinstance(stmt, ast.Assignment):
		return f"(= {stmt.target.name} {format_expr(stmt.value)})"
	if isinstance(stmt, ast.PrintStatement):
		return f"(print {format_expr(stmt.value)})"
	return "<invalid stmt>"


def format_program(program: ast.Program) -> str:
	return "\n".join(format_stmt(stmt) for stmt in program.statements)


__all__ = ["format_expr", "format_program", "format_stmt"]
