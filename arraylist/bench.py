"""
Timing and memory benchmarks for ArrayList operations.

Each operation is run on random integer inputs whose size doubles at every
step; the average and standard deviation of wall time (ms) and of the
estimated memory footprint (bytes) are written to a CSV file.
"""

import csv
import logging
import random
import statistics
import sys
import time
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from .datastructures import ArrayList

logger = logging.getLogger(__name__)

CSV_HEADER = [
    "Input Size",
    "Operation",
    "Average Time (ms)",
    "Std Dev Time (ms)",
    "Average Space (bytes)",
    "Std Dev Space (bytes)",
]


# ----------------------------
# Helper Functions
# ----------------------------

def generate_random_list(size: int) -> List[int]:
    """Generate a list of random integers of given size."""
    return [random.randint(0, 1000000) for _ in range(size)]


def measure_true_space(lst: ArrayList) -> int:
    """Estimate total memory usage of an ArrayList including its buffer."""
    total = sys.getsizeof(lst)
    store = lst._store
    total += sys.getsizeof(store) + sys.getsizeof(store._buf)
    for value in store:
        total += sys.getsizeof(value)
    return total


def measure_operation_time(operation: Callable[[List[int]], ArrayList], input_size: int, iterations: int = 5):
    """Run the operation multiple times and return average + std deviation of time (ms) and space (bytes)."""
    times = []
    space_used = []
    for _ in range(iterations):
        data = generate_random_list(input_size)
        start = time.perf_counter()
        lst = operation(data)
        end = time.perf_counter()
        times.append((end - start) * 1000)
        space_used.append(measure_true_space(lst))

    avg_time = statistics.mean(times)
    std_time = statistics.stdev(times) if len(times) > 1 else 0.0
    avg_space = statistics.mean(space_used)
    std_space = statistics.stdev(space_used) if len(space_used) > 1 else 0.0
    return avg_time, std_time, avg_space, std_space


# ----------------------------
# Operations to Benchmark
# ----------------------------

def bench_append(data):
    lst = ArrayList()
    for item in data:
        lst.add(item)
    return lst


def bench_insert_front(data):
    lst = ArrayList()
    for item in data:
        lst.insert(0, item)
    return lst


def bench_get(data):
    lst = ArrayList(data)
    for i in range(len(lst)):
        lst.get(i)
    return lst


def bench_remove_at(data):
    lst = ArrayList(data)
    while not lst.is_empty():
        lst.remove_at(lst.size() - 1)
    return lst


def bench_remove_value(data):
    lst = ArrayList(data)
    # Values near the tail force a near-full scan.
    for item in data[-3:]:
        lst.remove(item)
    return lst


def bench_cursor_walk(data):
    lst = ArrayList(data)
    cursor = lst.list_iterator()
    while cursor.has_next():
        if cursor.next() % 2:
            cursor.remove()
    return lst


OPERATIONS: Dict[str, Callable[[List[int]], ArrayList]] = {
    "append": bench_append,
    "insert_front": bench_insert_front,
    "get": bench_get,
    "remove_at": bench_remove_at,
    "remove_value": bench_remove_value,
    "cursor_walk": bench_cursor_walk,
}


# ----------------------------
# Benchmark Runner
# ----------------------------

def run_benchmarks(
    output_file: str,
    base_input: int = 100,
    steps: int = 12,
    iterations: int = 5,
    ops: Optional[Iterable[str]] = None,
) -> List[Tuple[int, str, float, float, float, float]]:
    """Run exponential performance tests and write one CSV row per (operation, size).

    Returns the raw measurements in the order they were written.
    """
    names = list(ops) if ops is not None else list(OPERATIONS)
    unknown = [n for n in names if n not in OPERATIONS]
    if unknown:
        raise ValueError(f"unknown operation(s): {', '.join(unknown)}")

    input_sizes = [base_input * (2 ** i) for i in range(steps)]
    results = []

    with open(output_file, "w", newline="") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow(CSV_HEADER)

        for op_name in names:
            op_func = OPERATIONS[op_name]
            for size in input_sizes:
                avg_time, std_time, avg_space, std_space = measure_operation_time(op_func, size, iterations)
                writer.writerow([
                    size,
                    op_name,
                    f"{avg_time:.3f}",
                    f"{std_time:.3f}",
                    f"{avg_space:.0f}",
                    f"{std_space:.0f}",
                ])
                logger.info(
                    "%-14s | Size: %-8d | Avg Time: %.3f ms | Std Time: %.3f ms | Avg Space: %.0f B",
                    op_name, size, avg_time, std_time, avg_space,
                )
                results.append((size, op_name, avg_time, std_time, avg_space, std_space))

    return results
