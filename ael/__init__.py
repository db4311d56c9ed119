# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Ael: front-end for a small imperative expression language."""

from ael.parser import ParseError, parse

__version__ = "0.1.0"

__all__ = ["ParseError", "parse", "__version__"]
