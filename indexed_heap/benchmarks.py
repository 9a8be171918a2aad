"""Timing and space benchmarks for the heap and its backing structures.

Each operation runs over exponentially growing input sizes; every row of
the report holds the mean and standard deviation of the wall time plus the
mean estimated memory of the structure that was built.
"""

from __future__ import annotations

import csv
import random
import statistics
import sys
import time
from typing import Callable, Dict, List, Tuple

from .datastructures import DynamicArray, HashTable, Heap

# ----------------------------
# Helper Functions
# ----------------------------

def generate_random_pairs(size: int) -> List[Tuple[int, int]]:
    """Generate `size` (value, priority) pairs with distinct values."""
    values = random.sample(range(size * 10), size)
    return [(v, random.randint(0, 1000000)) for v in values]


def measure_space(obj) -> int:
    """Estimate memory held by one of our structures, including its contents."""
    total = sys.getsizeof(obj)
    if isinstance(obj, Heap):
        total += measure_space(obj._data) + measure_space(obj._index)
    elif isinstance(obj, DynamicArray):
        total += sys.getsizeof(obj._buf)
        for item in obj:
            total += sys.getsizeof(item)
    elif isinstance(obj, HashTable):
        total += sys.getsizeof(obj._buckets)
        for k, v in obj.items():
            total += sys.getsizeof(k) + sys.getsizeof(v)
    return total


def measure_operation(operation: Callable, input_size: int, iterations: int = 5) -> Tuple[float, float, float]:
    """Run the operation `iterations` times; return (avg ms, std ms, avg bytes)."""
    times = []
    spaces = []
    for _ in range(iterations):
        data = generate_random_pairs(input_size)
        start = time.perf_counter()
        built = operation(data)
        end = time.perf_counter()
        times.append((end - start) * 1000)
        spaces.append(measure_space(built))

    avg_time = statistics.mean(times)
    std_time = statistics.stdev(times) if len(times) > 1 else 0.0
    return avg_time, std_time, statistics.mean(spaces)

# ----------------------------
# Operations to Benchmark
# ----------------------------

def array_append(data):
    a = DynamicArray()
    for v, _ in data:
        a.append(v)
    return a


def array_pop(data):
    a = array_append(data)
    while len(a) > 0:
        a.pop()
    return a


def array_get(data):
    a = array_append(data)
    for i in range(len(a)):
        a.get(i)
    return a


def table_put(data):
    t = HashTable()
    for v, p in data:
        t.put(v, p)
    return t


def table_get(data):
    t = table_put(data)
    for v, _ in data:
        t.get(v)
    return t


def table_contains_key(data):
    t = table_put(data)
    for v, _ in data:
        t.contains_key(v)
    return t


def table_remove(data):
    t = table_put(data)
    for v, _ in data:
        t.remove(v)
    return t


def heap_add(data):
    h = Heap()
    for v, p in data:
        h.add(v, p)
    return h


def heap_poll(data):
    h = heap_add(data)
    while h:
        h.poll()
    return h


def heap_peek(data):
    h = heap_add(data)
    for _ in range(min(3, len(data))):
        h.peek()
    return h


def heap_contains(data):
    h = heap_add(data)
    for v, _ in data:
        h.contains(v)
    return h


def heap_change_priority(data):
    h = heap_add(data)
    for v, p in data:
        h.change_priority(v, 1000000 - p)
    return h


OPERATIONS: Dict[str, Dict[str, Callable]] = {
    "array": {
        "append": array_append,
        "pop": array_pop,
        "get": array_get,
    },
    "table": {
        "put": table_put,
        "get": table_get,
        "contains_key": table_contains_key,
        "remove": table_remove,
    },
    "heap": {
        "add": heap_add,
        "poll": heap_poll,
        "peek": heap_peek,
        "contains": heap_contains,
        "change_priority": heap_change_priority,
    },
}

# ----------------------------
# Benchmark Runner
# ----------------------------

def run_benchmarks(output_file: str, base_input: int = 100, steps: int = 8, iterations: int = 5) -> int:
    """Run every operation at sizes base_input * 2**i and write a CSV report.

    Returns the number of rows written (excluding the header).
    """
    input_sizes = [base_input * (2 ** i) for i in range(steps)]
    rows = 0

    with open(output_file, "w", newline="") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow([
            "Input Size",
            "Structure",
            "Operation",
            "Average Time (ms)",
            "Std Dev Time (ms)",
            "Average Space (bytes)",
        ])

        for structure, operations in OPERATIONS.items():
            for op_name, op_func in operations.items():
                for size in input_sizes:
                    avg_time, std_time, avg_space = measure_operation(op_func, size, iterations)
                    writer.writerow([
                        size,
                        structure,
                        op_name,
                        f"{avg_time:.3f}",
                        f"{std_time:.3f}",
                        f"{avg_space:.0f}",
                    ])
                    rows += 1
                    print(f"{structure:<6} {op_name:<16} | Size: {size:<8} | Avg Time: {avg_time:.3f} ms | "
                          f"Std: {std_time:.3f} ms | Avg Space: {avg_space:.0f} B")

    print(f"\nBenchmark completed. Results saved to {output_file}")
    return rows
