# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

from ael import parse


def test_parser_can_be_shared_between_threads() -> None:
	sources = [f"let v{i} = {i} ** 2 print v{i} + {i}" for i in range(32)]
	expected = [parse(src) for src in sources]
	with ThreadPoolExecutor(max_workers=8) as pool:
		results = list(pool.map(parse, sources))
	assert results == expected
