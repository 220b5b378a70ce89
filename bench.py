"""Wall-clock benchmarks for parsing and both parts."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable
import time

import numpy as np

from navigator import NavigatorConfig
from problem import BlizzardBasin
from valley import parse_valley


@dataclass(frozen=True)
class BenchResult:
    """Timings of one stage, in milliseconds."""

    name: str
    samples_ms: tuple[float, ...]

    @property
    def mean_ms(self) -> float:
        return float(np.mean(self.samples_ms))

    @property
    def median_ms(self) -> float:
        return float(np.median(self.samples_ms))

    @property
    def min_ms(self) -> float:
        return float(np.min(self.samples_ms))

    @property
    def stdev_ms(self) -> float:
        return float(np.std(self.samples_ms))


def time_call(fn: Callable[[], Any], iterations: int) -> tuple[float, ...]:
    """Call `fn` `iterations` times and return each call's duration in ms."""
    if iterations < 1:
        raise ValueError(f"iterations must be positive, got {iterations}")
    samples = []
    for _ in range(iterations):
        started = time.perf_counter()
        fn()
        samples.append((time.perf_counter() - started) * 1000)
    return tuple(samples)


def benchmark(
    text: str,
    iterations: int = 10,
    config: NavigatorConfig = NavigatorConfig(),
) -> list[BenchResult]:
    """Time each stage from scratch, so no stage benefits from another's cache."""
    stages: list[tuple[str, Callable[[], Any]]] = [
        ("parse", lambda: parse_valley(text)),
        ("part one", lambda: BlizzardBasin.from_str(text, config).part_one()),
        ("part two", lambda: BlizzardBasin.from_str(text, config).part_two()),
        ("solve", lambda: BlizzardBasin.solve(text, config)),
    ]
    return [BenchResult(name, time_call(fn, iterations)) for name, fn in stages]


def format_results(results: list[BenchResult]) -> str:
    header = f"{'stage':<10} {'mean':>10} {'median':>10} {'min':>10} {'stdev':>10}"
    lines = [header, "-" * len(header)]
    for r in results:
        lines.append(
            f"{r.name:<10} {r.mean_ms:>8.3f}ms {r.median_ms:>8.3f}ms "
            f"{r.min_ms:>8.3f}ms {r.stdev_ms:>8.3f}ms"
        )
    return "\n".join(lines)
