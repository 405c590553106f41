"""
Timing harness for the chained Dictionary.

Each operation is run over exponentially growing input sizes
(``base_input * 2**i``), repeated a few times per size, and summarized
as mean and standard deviation in milliseconds. Results are written to
a CSV file and echoed to the console.

Usage:
    python -m chaindict.cli bench --path dictionary_performance.csv
"""

from __future__ import annotations

import csv
import logging
import random
import statistics
import time
from typing import Callable, Dict, List, Tuple

from .datastructures import Dictionary

logger = logging.getLogger(__name__)

# Defaults shared with the CLI.
DEFAULT_BASE_INPUT = 100
DEFAULT_ROUNDS = 6
DEFAULT_ITERATIONS = 5

CSV_HEADER = [
    "Input Size",
    "Operation",
    "Average Time (ms)",
    "Standard Deviation (ms)",
]

Pairs = List[Tuple[int, int]]


# ----------------------------
# Helper Functions
# ----------------------------

def generate_random_pairs(size: int) -> Pairs:
    """Generate a list of random key-value pairs."""
    return [(random.randint(0, size * 10), random.randint(0, 1000000)) for _ in range(size)]


def build(data: Pairs) -> Dictionary[int, int]:
    d: Dictionary[int, int] = Dictionary()
    for k, v in data:
        d.insert(k, v)
    return d


def measure_operation_time(operation: Callable[[Pairs], object], input_size: int,
                           iterations: int = DEFAULT_ITERATIONS) -> Tuple[float, float]:
    """Run the operation multiple times and return average + std deviation (ms)."""
    times = []
    for _ in range(iterations):
        data = generate_random_pairs(input_size)
        start = time.perf_counter()
        operation(data)
        end = time.perf_counter()
        times.append((end - start) * 1000)  # convert to milliseconds

    avg_time = statistics.mean(times)
    std_dev = statistics.stdev(times) if len(times) > 1 else 0.0
    return avg_time, std_dev


# ----------------------------
# Operations to Benchmark
# ----------------------------

def op_insert(data: Pairs) -> Dictionary[int, int]:
    return build(data)


def op_lookup(data: Pairs) -> Dictionary[int, int]:
    d = build(data)
    for k, _ in data[:3]:
        d.lookup(k)
    return d


def op_remove(data: Pairs) -> Dictionary[int, int]:
    d = build(data)
    for k, _ in data[:3]:
        d.remove(k)
    return d


def op_remove_if(data: Pairs) -> Dictionary[int, int]:
    d = build(data)
    d.remove_if(lambda k: k % 2 == 0)
    return d


def op_copy(data: Pairs) -> Dictionary[int, int]:
    return build(data).copy()


def op_move(data: Pairs) -> Dictionary[int, int]:
    return Dictionary.moved_from(build(data))


def op_equals(data: Pairs) -> bool:
    d = build(data)
    return d == d.copy()


OPERATIONS: Dict[str, Callable[[Pairs], object]] = {
    "insert": op_insert,
    "lookup": op_lookup,
    "remove": op_remove,
    "remove_if": op_remove_if,
    "copy": op_copy,
    "move": op_move,
    "equals": op_equals,
}


# ----------------------------
# Benchmark Runner
# ----------------------------

def run_benchmarks(output_file: str, base_input: int = DEFAULT_BASE_INPUT,
                   rounds: int = DEFAULT_ROUNDS,
                   iterations: int = DEFAULT_ITERATIONS) -> List[Tuple[int, str, float, float]]:
    """Run exponential performance tests for Dictionary operations.

    Returns the rows written to *output_file* as
    ``(input_size, operation, avg_ms, std_ms)`` tuples.
    """
    if base_input <= 0:
        raise ValueError("base_input must be positive")
    if rounds <= 0:
        raise ValueError("rounds must be positive")
    if iterations <= 0:
        raise ValueError("iterations must be positive")

    input_sizes = [base_input * (2 ** i) for i in range(rounds)]
    results: List[Tuple[int, str, float, float]] = []

    with open(output_file, "w", newline="") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow(CSV_HEADER)

        for op_name, op_func in OPERATIONS.items():
            for size in input_sizes:
                avg_time, std_time = measure_operation_time(op_func, size, iterations)
                writer.writerow([size, op_name, f"{avg_time:.3f}", f"{std_time:.3f}"])
                results.append((size, op_name, avg_time, std_time))
                logger.info("%-10s | Size: %-8d | Avg Time: %.3f ms | Std: %.3f ms",
                            op_name, size, avg_time, std_time)

    logger.info("Benchmark completed. Results saved to %s", output_file)
    return results
