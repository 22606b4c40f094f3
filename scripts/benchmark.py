#!/usr/bin/env python3
"""Benchmark script for ospreylint performance testing.

Outputs results in JSON format compatible with github-action-benchmark.
"""

from __future__ import annotations

import argparse
import json
import time
from pathlib import Path

_SAMPLE = """\
public class Counter {
\tprivate var _count: Int = 0;

\tpublic property count: Int {
\t\tget { return _count; }
\t}

\tpublic fn increment(step: Int = 1) -> Int {
\t\t_count = _count + step;
\t\treturn _count;
\t}
}
"""


def benchmark_import_time() -> float:
    """Measure import time of ospreylint package."""
    start = time.perf_counter()
    import ospreylint  # noqa: F401

    return time.perf_counter() - start


def benchmark_tokenize(source: str) -> float:
    """Measure tokenizing time of a large source."""
    from ospreylint.infrastructure.lexer import tokenize

    start = time.perf_counter()
    tokenize(source)
    return time.perf_counter() - start


def benchmark_lint(source: str) -> float:
    """Measure full pipeline time with all rules enabled."""
    from ospreylint import lint_source

    start = time.perf_counter()
    lint_source(source)
    return time.perf_counter() - start


def main() -> None:
    """Run benchmarks and output results."""
    parser = argparse.ArgumentParser(description="Run ospreylint benchmarks")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("benchmark-results.json"),
        help="Output file for benchmark results",
    )
    parser.add_argument(
        "--copies",
        type=int,
        default=500,
        help="Times the sample class is repeated in the benchmark source",
    )
    args = parser.parse_args()

    source = "\n".join([_SAMPLE] * args.copies)
    results = [
        {"name": "Import Time", "unit": "seconds", "value": benchmark_import_time()},
        {
            "name": f"Tokenize ({args.copies} classes)",
            "unit": "seconds",
            "value": benchmark_tokenize(source),
        },
        {
            "name": f"Lint ({args.copies} classes)",
            "unit": "seconds",
            "value": benchmark_lint(source),
        },
    ]

    # Write results
    args.output.write_text(json.dumps(results, indent=2))
    print(f"Benchmark results written to {args.output}")
    for r in results:
        print(f"  {r['name']}: {r['value']:.4f} {r['unit']}")


if __name__ == "__main__":
    main()
