# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Shared front-end data: source spans and diagnostics."""

from .diagnostics import Diagnostic
from .span import Span

__all__ = ["Diagnostic", "Span"]
