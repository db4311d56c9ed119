#!/usr/bin/env python3
# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
aelc: command-line driver for the Ael front-end.

Parses each source file and reports syntax errors. With --dump-ast the parsed
tree of every file is printed; with --json diagnostics are emitted as a single
JSON document on stdout.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from ael.ast_printer import format_program
from ael.core.diagnostics import Diagnostic
from ael.core.span import Span
from ael.parser import parse_to_diagnostics

logger = logging.getLogger(__name__)


def _read_source(path: Path) -> tuple[str | None, list[Diagnostic]]:
	try:
		return path.read_text(encoding="utf-8"), []
	except (OSError, UnicodeDecodeError) as err:
		return None, [
			Diagnostic(
				message=f"cannot read source: {err}",
				phase="driver",
				severity="error",
				span=Span(file=str(path)),
			)
		]


def main(argv: list[str] | None = None) -> int:
	"""
	Parse every source file; exit 0 when all of them parse, 1 otherwise.

	With --json, prints {"exit_code": ..., "diagnostics": [...]} to stdout;
	otherwise prints `file:line:column: error: message` lines to stderr.
	"""
	parser = argparse.ArgumentParser(prog="aelc", description="Ael front-end: parse source files into an AST")
	parser.add_argument("source", type=Path, nargs="+", help="Path(s) to Ael source file(s)")
	parser.add_argument("--dump-ast", action="store_true", help="Print the parsed AST of each file")
	parser.add_argument(
		"--json",
		action="store_true",
		help="Emit diagnostics as JSON (phase/message/severity/file/line/column)",
	)
	parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
	args = parser.parse_args(argv)

	if args.verbose:
		logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

	source_paths: list[Path] = list(args.source)
	diagnostics: list[tuple[Path, Diagnostic]] = []
	dumps: list[tuple[Path, str]] = []
	for path in source_paths:
		source, diags = _read_source(path)
		if source is not None:
			program, diags = parse_to_diagnostics(source, file=str(path))
			if program is not None:
				logger.debug("%s: %d statement(s)", path, len(program.statements))
				dumps.append((path, format_program(program)))
		diagnostics.extend((path, d) for d in diags)

	exit_code = 1 if any(d.severity == "error" for _, d in diagnostics) else 0

	if args.dump_ast:
		for path, text in dumps:
			if len(source_paths) > 1:
				print(f"; {path}")
			print(text)

	if args.json:
		payload = {
			"exit_code": exit_code,
			"diagnostics": [d.to_json(default_file=str(path)) for path, d in diagnostics],
		}
		print(json.dumps(payload))
	else:
		for path, d in diagnostics:
			print(f"{d.span.file or path}:{d.span.format()}: {d.severity}: {d.message}", file=sys.stderr)
			for note in d.notes:
				print(f"  note: {note}", file=sys.stderr)
	return exit_code


if __name__ == "__main__":
	raise SystemExit(main())
