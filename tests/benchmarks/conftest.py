"""pytest-benchmark configuration for sigmaparser benchmarks.

Python 3.13+.
"""

from __future__ import annotations

import json

import pytest


def pytest_benchmark_update_json(config, benchmarks, output_json):  # noqa: ARG001
    """Add sigmaparser metadata to benchmark results.

    Args:
        config: pytest config (required by pytest-benchmark hook signature)
        benchmarks: benchmark results (required by pytest-benchmark hook signature)
        output_json: JSON output dict to modify
    """
    output_json["project"] = "sigmaparser"
    output_json["python_version"] = "3.13+"


@pytest.fixture(scope="session")
def large_json_source() -> str:
    """A few hundred kilobytes of nested JSON."""
    records = [
        {
            "id": i,
            "name": f"item-{i}",
            "active": i % 2 == 0,
            "score": i * 1.5 + 0.25,
            "tags": ["a", "b", "c"][: i % 4],
            "parent": None if i % 3 else {"id": i - 1, "depth": [1, [2, [3]]]},
        }
        for i in range(2000)
    ]
    return json.dumps(records, indent=2)
