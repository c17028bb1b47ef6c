"""Timing of allocators over repeated allocations and frees."""

from __future__ import annotations

import math
import random
import sys
import time
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from itertools import repeat
from typing import TextIO

from sampo.allocators import Allocator, Block


def _ratio(numerator: float, denominator: float) -> float:
    if denominator:
        return numerator / denominator
    return math.inf if numerator > 0 else math.nan


@dataclass(frozen=True)
class BenchmarkResults:
    """Outcome of one benchmark round."""

    operations: int
    milliseconds: int
    operations_per_ms: float
    time_per_operation: float
    memory_peak: int

    @classmethod
    def build(
        cls, operations: int, milliseconds: int, memory_peak: int
    ) -> BenchmarkResults:
        """Results with the rates worked out from the counts."""
        return cls(
            operations=operations,
            milliseconds=milliseconds,
            operations_per_ms=_ratio(operations, milliseconds),
            time_per_operation=_ratio(milliseconds, operations),
            memory_peak=memory_peak,
        )

    def format(self) -> str:
        """The results as a printable report."""
        return (
            "RESULTS:\n"
            f"\tOperations:    \t{self.operations}\n"
            f"\tTime elapsed: \t{self.milliseconds} ms\n"
            f"\tOp per sec:    \t{self.operations_per_ms:g} ops/ms\n"
            f"\tTimer per op:  \t{self.time_per_operation:g} ms/ops\n"
            f"\tMemory peak:   \t{self.memory_peak} bytes\n"
        )


def _check_pairs(sizes: Sequence[int], alignments: Sequence[int]) -> None:
    if len(sizes) != len(alignments):
        raise ValueError("allocation sizes and alignments must have the same length")


class Benchmark:
    """Runs a fixed number of allocations against an allocator and reports timings."""

    def __init__(self, operations: int, out: TextIO | None = None) -> None:
        if operations < 0:
            raise ValueError(f"operation count must not be negative: {operations}")
        self.operations = operations
        self.out = out

    def _write(self, text: str) -> None:
        (self.out if self.out is not None else sys.stdout).write(text)

    @staticmethod
    def _allocate_all(
        allocator: Allocator, requests: Iterable[tuple[int, int]]
    ) -> list[Block]:
        blocks = []
        for size, alignment in requests:
            try:
                blocks.append(allocator.allocate(size, alignment))
            except MemoryError:
                continue
        return blocks

    def _finish(self, started: int, allocator: Allocator) -> BenchmarkResults:
        elapsed_ms = (time.perf_counter_ns() - started) // 1_000_000
        results = BenchmarkResults.build(self.operations, elapsed_ms, allocator.peak)
        self._write(results.format())
        return results

    def _header(self, size: int, alignment: int) -> None:
        self._write(
            "Benchmark: allocation:\n"
            f"Size:       \t{size}\n"
            f"Alignment: \t{alignment}\n"
        )

    def single_allocation(
        self, allocator: Allocator, size: int, alignment: int
    ) -> BenchmarkResults:
        """Allocate ``size`` bytes repeatedly."""
        self._header(size, alignment)
        started = time.perf_counter_ns()
        allocator.init()
        self._allocate_all(allocator, repeat((size, alignment), self.operations))
        return self._finish(started, allocator)

    def single_free(
        self, allocator: Allocator, size: int, alignment: int
    ) -> BenchmarkResults:
        """Allocate ``size`` bytes repeatedly, then free the blocks in reverse."""
        self._header(size, alignment)
        started = time.perf_counter_ns()
        allocator.init()
        blocks = self._allocate_all(
            allocator, repeat((size, alignment), self.operations)
        )
        for block in reversed(blocks):
            allocator.free(block)
        return self._finish(started, allocator)

    def multiple_allocation(
        self,
        allocator: Allocator,
        sizes: Sequence[int],
        alignments: Sequence[int],
    ) -> list[BenchmarkResults]:
        """One allocation round for each size and alignment pair."""
        _check_pairs(sizes, alignments)
        return [
            self.single_allocation(allocator, size, alignment)
            for size, alignment in zip(sizes, alignments)
        ]

    def multiple_free(
        self,
        allocator: Allocator,
        sizes: Sequence[int],
        alignments: Sequence[int],
    ) -> list[BenchmarkResults]:
        """One allocation and free round for each size and alignment pair."""
        _check_pairs(sizes, alignments)
        return [
            self.single_free(allocator, size, alignment)
            for size, alignment in zip(sizes, alignments)
        ]

    def _random_requests(
        self, sizes: Sequence[int], alignments: Sequence[int]
    ) -> Iterable[tuple[int, int]]:
        _check_pairs(sizes, alignments)
        if not sizes:
            raise ValueError("at least one allocation size is needed")
        rng = random.Random(1)
        pairs = list(zip(sizes, alignments))
        return (pairs[rng.randrange(len(pairs))] for _ in range(self.operations))

    def random_allocation(
        self,
        allocator: Allocator,
        sizes: Sequence[int],
        alignments: Sequence[int],
    ) -> BenchmarkResults:
        """Allocate with sizes and alignments chosen from the given pairs, seeded."""
        requests = self._random_requests(sizes, alignments)
        self._write("BENCHMARK: ALLOCATION\n")
        started = time.perf_counter_ns()
        allocator.init()
        self._allocate_all(allocator, requests)
        return self._finish(started, allocator)

    def random_free(
        self,
        allocator: Allocator,
        sizes: Sequence[int],
        alignments: Sequence[int],
    ) -> BenchmarkResults:
        """Allocate as random_allocation does, then free the blocks in reverse."""
        requests = self._random_requests(sizes, alignments)
        self._write("BENCHMARK: ALLOCATION/FREE\n")
        started = time.perf_counter_ns()
        allocator.init()
        blocks = self._allocate_all(allocator, requests)
        for block in reversed(blocks):
            allocator.free(block)
        return self._finish(started, allocator)