"""
Measurement harness for the array-backed containers.

Drives every container variant and the three baselines through identical
workloads. Timed workloads return wall-clock milliseconds for one run;
memory probes return the mean instantaneous load factor over one run.
Elements are small numpy int64 payloads whose first cell doubles as the
sort key, so indexed access can mutate and compare them in place.

Sizes follow the pattern ``step, 2 * step, ..., points * step``; each timed
point is the trimmed mean of RUNS_PER_POINT runs (best and worst dropped).
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

import numpy as np

from array_queue import QueueConservative, QueueNaive, QueueReclaiming
from baselines import DequeBaseline, ListBaseline, VectorBaseline
from split_deque import DequeConservative, DequeNaive, DequeReclaiming

logger = logging.getLogger(__name__)

SEED = 42
RUNS_PER_POINT = 5
QUEUE_PRELOAD = 1000
DEFAULT_POINTS = 10

PAYLOAD_WIDTHS = {"small": 1, "medium": 10, "large": 100}

CONTAINERS = {
    "VectorBaseline": VectorBaseline,
    "DequeBaseline": DequeBaseline,
    "ListBaseline": ListBaseline,
    "QueueNaive": QueueNaive,
    "QueueReclaiming": QueueReclaiming,
    "QueueConservative": QueueConservative,
    "DequeNaive": DequeNaive,
    "DequeReclaiming": DequeReclaiming,
    "DequeConservative": DequeConservative,
}

_FRONT_SHIFTERS = {"VectorBaseline", "QueueNaive", "QueueConservative"}
_NO_LOAD_FACTOR = {"DequeBaseline", "ListBaseline"}

# containers left out of a workload: front pushes that shift the whole
# buffer every time, or indexed access that walks a linked list
NOT_REPORTED = {
    "fill_back": set(),
    "fill_back_reserved": set(),
    "fill_front": _FRONT_SHIFTERS,
    "fill_front_reserved": {"VectorBaseline"},
    "queue_cycle": {"VectorBaseline"},
    "zigzag": _FRONT_SHIFTERS,
    "traverse": {"ListBaseline"},
    "shuffle": {"ListBaseline"},
    "quicksort": {"ListBaseline"},
    "fill_back_memory": _NO_LOAD_FACTOR,
    "fill_front_memory": _NO_LOAD_FACTOR | _FRONT_SHIFTERS,
    "queue_memory": _NO_LOAD_FACTOR | {"VectorBaseline"},
    "zigzag_memory": _NO_LOAD_FACTOR | _FRONT_SHIFTERS,
}


def make_payload(width: int = 1, key: int = 0) -> np.ndarray:
    payload = np.zeros(width, dtype=np.int64)
    payload[0] = key
    return payload


def _elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000.0


def _filled(container_cls, n: int, width: int):
    container = container_cls()
    for i in range(n):
        container.push_back(make_payload(width, i))
    return container


# ---------------------------------------------------------------------------
# Timed workloads
# ---------------------------------------------------------------------------

def fill_back(container_cls, n: int, width: int = 1) -> float:
    container = container_cls()
    start = time.perf_counter()
    for _ in range(n):
        container.push_back(make_payload(width))
    return _elapsed_ms(start)


def fill_back_reserved(container_cls, n: int, width: int = 1) -> float:
    """Like fill_back, but reserve all ``n`` slots first when the container can."""
    container = container_cls()
    start = time.perf_counter()
    if hasattr(container, "reserve_back"):
        container.reserve_back(n)
    for _ in range(n):
        container.push_back(make_payload(width))
    return _elapsed_ms(start)


def fill_front(container_cls, n: int, width: int = 1) -> float:
    container = container_cls()
    start = time.perf_counter()
    for _ in range(n):
        container.push_front(make_payload(width))
    return _elapsed_ms(start)


def fill_front_reserved(container_cls, n: int, width: int = 1) -> float:
    container = container_cls()
    start = time.perf_counter()
    if hasattr(container, "reserve_front"):
        container.reserve_front(n)
    for _ in range(n):
        container.push_front(make_payload(width))
    return _elapsed_ms(start)


def queue_cycle(container_cls, n: int, width: int = 1) -> float:
    """Pre-load QUEUE_PRELOAD elements, then alternate push_back and pop_front."""
    container = _filled(container_cls, QUEUE_PRELOAD, width)
    start = time.perf_counter()
    for i in range(n):
        if i % 2 == 0:
            container.push_back(make_payload(width))
        else:
            container.pop_front()
    return _elapsed_ms(start)


def _zigzag_steps(n: int):
    quarter = n // 4
    half = 2 * quarter
    return [
        ("push_back", quarter),
        ("push_front", quarter),
        ("pop_back", half),
        ("push_front", quarter),
        ("push_back", quarter),
        ("pop_front", half),
    ]


def zigzag(container_cls, n: int, width: int = 1) -> float:
    container = container_cls()
    start = time.perf_counter()
    for operation, count in _zigzag_steps(n):
        method = getattr(container, operation)
        if operation.startswith("push"):
            for _ in range(count):
                method(make_payload(width))
        else:
            for _ in range(count):
                method()
    return _elapsed_ms(start)


def traverse(container_cls, n: int, width: int = 1) -> float:
    container = _filled(container_cls, n, width)
    start = time.perf_counter()
    for i in range(n):
        container[i][0] += 1
    return _elapsed_ms(start)


def _shuffle_picks(n: int) -> np.ndarray:
    # picks[i] is uniform in [0, i]
    return np.random.default_rng(SEED).integers(0, np.arange(1, n + 1))


def _shuffle_in_place(container, picks: np.ndarray) -> None:
    for i in range(len(picks) - 1, 0, -1):
        j = int(picks[i])
        container[i], container[j] = container[j], container[i]


def shuffle(container_cls, n: int, width: int = 1) -> float:
    container = _filled(container_cls, n, width)
    picks = _shuffle_picks(n)
    start = time.perf_counter()
    _shuffle_in_place(container, picks)
    return _elapsed_ms(start)


def quicksort_range(container, left: int, right: int) -> None:
    """Lomuto quicksort over ``container[left..right]`` keyed by ``payload[0]``."""
    pending = [(left, right)]
    while pending:
        lo, hi = pending.pop()
        if lo >= hi:
            continue
        pivot = container[hi]
        store = lo
        for i in range(lo, hi):
            if container[i][0] < pivot[0]:
                container[i], container[store] = container[store], container[i]
                store += 1
        container[hi] = container[store]
        container[store] = pivot
        pending.append((lo, store - 1))
        pending.append((store + 1, hi))


def quicksort(container_cls, n: int, width: int = 1) -> float:
    container = _filled(container_cls, n, width)
    _shuffle_in_place(container, _shuffle_picks(n))
    start = time.perf_counter()
    quicksort_range(container, 0, n - 1)
    return _elapsed_ms(start)


# ---------------------------------------------------------------------------
# Load-factor probes
# ---------------------------------------------------------------------------

def fill_back_memory(container_cls, n: int) -> float:
    container = container_cls()
    total = 0.0
    for _ in range(n):
        container.push_back(make_payload())
        total += container.load_factor()
    return total / n


def fill_front_memory(container_cls, n: int) -> float:
    container = container_cls()
    total = 0.0
    for _ in range(n):
        container.push_front(make_payload())
        total += container.load_factor()
    return total / n


def queue_memory(container_cls, n: int) -> float:
    container = _filled(container_cls, QUEUE_PRELOAD, 1)
    total = 0.0
    for i in range(n):
        if i % 2 == 0:
            container.push_back(make_payload())
        else:
            container.pop_front()
        total += container.load_factor()
    return total / n


def zigzag_memory(container_cls, n: int) -> float:
    container = container_cls()
    total = 0.0
    samples = 0
    for operation, count in _zigzag_steps(n):
        method = getattr(container, operation)
        for _ in range(count):
            if operation.startswith("push"):
                method(make_payload())
            else:
                method()
            total += container.load_factor()
            samples += 1
    return total / samples if samples else 0.0


TIMED_WORKLOADS: Dict[str, Callable] = {
    "fill_back": fill_back,
    "fill_back_reserved": fill_back_reserved,
    "fill_front": fill_front,
    "fill_front_reserved": fill_front_reserved,
    "queue_cycle": queue_cycle,
    "zigzag": zigzag,
    "traverse": traverse,
    "shuffle": shuffle,
    "quicksort": quicksort,
}

MEMORY_PROBES: Dict[str, Callable] = {
    "fill_back_memory": fill_back_memory,
    "fill_front_memory": fill_front_memory,
    "queue_memory": queue_memory,
    "zigzag_memory": zigzag_memory,
}


# ---------------------------------------------------------------------------
# Aggregation
# ---------------------------------------------------------------------------

def trimmed_mean(samples) -> float:
    """Mean of the samples after dropping the single best and worst."""
    values = np.sort(np.asarray(samples, dtype=float))
    if values.size == 0:
        raise ValueError("trimmed_mean needs at least one sample")
    if values.size < 3:
        return float(values.mean())
    return float(values[1:-1].mean())


def reported_containers(workload: str) -> List[str]:
    skipped = NOT_REPORTED[workload]
    return [name for name in CONTAINERS if name not in skipped]


@dataclass
class BenchmarkResult:
    name: str
    unit: str
    sizes: List[int]
    series: Dict[str, List[float]] = field(default_factory=dict)
    skipped: List[str] = field(default_factory=list)
    payload: Optional[str] = None


def _sizes(step: int, points: int) -> List[int]:
    if step <= 0 or points <= 0:
        raise ValueError("step and points must be positive")
    return [step * (i + 1) for i in range(points)]


def run_benchmark(
    workload: str,
    step: int,
    payload: str = "small",
    points: int = DEFAULT_POINTS,
    runs: int = RUNS_PER_POINT,
) -> BenchmarkResult:
    """Time one workload for every reported container at each size.

    Args:
        workload: key of TIMED_WORKLOADS
        step: size increment between points
        payload: key of PAYLOAD_WIDTHS
        points: number of sizes measured
        runs: runs per point fed to trimmed_mean

    Returns:
        BenchmarkResult with one millisecond series per reported container
    """
    if workload not in TIMED_WORKLOADS:
        raise KeyError(f"unknown workload: {workload}")
    if payload not in PAYLOAD_WIDTHS:
        raise KeyError(f"unknown payload: {payload}")
    func = TIMED_WORKLOADS[workload]
    width = PAYLOAD_WIDTHS[payload]
    names = reported_containers(workload)
    result = BenchmarkResult(
        name=workload, unit="ms", sizes=_sizes(step, points),
        series={name: [] for name in names},
        skipped=sorted(NOT_REPORTED[workload]), payload=payload,
    )
    logger.info("%s<%s>: %d containers, %d sizes", workload, payload, len(names), points)
    for n in result.sizes:
        func(DequeBaseline, n, width)  # warm-up
        for name in names:
            samples = [func(CONTAINERS[name], n, width) for _ in range(runs)]
            result.series[name].append(trimmed_mean(samples))
        logger.debug("%s<%s> n=%d done", workload, payload, n)
    return result


def run_memory_probe(probe: str, step: int, points: int = DEFAULT_POINTS) -> BenchmarkResult:
    if probe not in MEMORY_PROBES:
        raise KeyError(f"unknown memory probe: {probe}")
    func = MEMORY_PROBES[probe]
    names = reported_containers(probe)
    result = BenchmarkResult(
        name=probe, unit="load", sizes=_sizes(step, points),
        series={name: [] for name in names},
        skipped=sorted(NOT_REPORTED[probe]),
    )
    logger.info("%s: %d containers, %d sizes", probe, len(names), points)
    for n in result.sizes:
        for name in names:
            result.series[name].append(func(CONTAINERS[name], n))
    return result
