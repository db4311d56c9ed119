# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Ael parser entry points.

`parse` is the core contract: source text in, `Program` out, `ParseError` on
any syntax error. `parse_to_diagnostics` wraps it for drivers that report
structured diagnostics instead of handling exceptions.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Tuple, Union

from ael.core.diagnostics import Diagnostic

from . import ast
from .ast import Program
from .parser import ParseError, build_program, parse_program, recognize


def parse(source: str) -> Program:
	"""Parse a complete Ael program."""
	return parse_program(source)


def parse_file(path: Union[str, Path]) -> Program:
	"""Read a UTF-8 source file and parse it; errors carry the file name."""
	path = Path(path)
	return parse_program(path.read_text(encoding="utf-8"), file=str(path))


def parse_to_diagnostics(
	source: str, *, file: Optional[str] = None
) -> Tuple[Optional[Program], List[Diagnostic]]:
	"""
	Parse `source`, returning `(program, diagnostics)`.

	On success the diagnostics list is empty. On failure the program is None
	and a single parser-phase error describes the first unmatched input.
	"""
	try:
		return parse_program(source, file=file), []
	except ParseError as err:
		notes = [f"expected: {', '.join(sorted(err.expected))}"] if err.expected else []
		return None, [
			Diagnostic(
				message=err.msg.split("\n", 1)[0],
				phase="parser",
				severity="error",
				span=err.loc,
				notes=notes,
			)
		]


__all__ = [
	"ParseError",
	"Program",
	"ast",
	"build_program",
	"parse",
	"parse_file",
	"parse_program",
	"parse_to_diagnostics",
	"recognize",
]
