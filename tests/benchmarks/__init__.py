"""Performance benchmarks for sigmaparser.

Benchmarks use pytest-benchmark to measure and track parsing throughput of
a full JSON grammar and of individual combinators.

Python 3.13+.
"""

from __future__ import annotations

__all__: list[str] = []
