# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Lightweight source span representation used by diagnostics.

Lines and columns are 1-based. A Span can also carry the raw parser object it
was derived from (a lark token or exception) via `raw`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class Span:
	"""Represents a source span (best-effort file/line/column plus raw parser loc)."""

	file: Optional[str] = None
	line: Optional[int] = None
	column: Optional[int] = None
	end_line: Optional[int] = None
	end_column: Optional[int] = None
	raw: Any = field(default=None, compare=False, repr=False)

	@classmethod
	def from_loc(cls, loc: Any, *, file: Optional[str] = None) -> "Span":
		"""
		Construct a Span from a parser location object.

		Accepts anything exposing `line`/`column` (lark tokens and lark
		`UnexpectedInput` errors both do). Lark reports unknown positions as
		-1; those are normalised to None.
		"""
		if loc is None:
			return cls(file=file)
		if isinstance(loc, cls):
			return loc
		return cls(
			file=file or getattr(loc, "file", None) or None,
			line=_known(getattr(loc, "line", None)),
			column=_known(getattr(loc, "column", None)),
			end_line=_known(getattr(loc, "end_line", None)),
			end_column=_known(getattr(loc, "end_column", None)),
			raw=loc,
		)

	def format(self) -> str:
		"""Render as `line:column`, using `?` for unknown parts."""
		line = "?" if self.line is None else str(self.line)
		column = "?" if self.column is None else str(self.column)
		return f"{line}:{column}"


def _known(value: Optional[int]) -> Optional[int]:
	if value is None or value < 0:
		return None
	return value


__all__ = ["Span"]
