import sys
import os
import unittest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import workloads
from array_queue import QueueNaive, QueueReclaiming
from baselines import DequeBaseline, ListBaseline, VectorBaseline
from split_deque import DequeReclaiming
from workloads import (
    CONTAINERS,
    MEMORY_PROBES,
    NOT_REPORTED,
    TIMED_WORKLOADS,
    make_payload,
    quicksort_range,
    reported_containers,
    run_benchmark,
    run_memory_probe,
    trimmed_mean,
)


class TestTrimmedMean(unittest.TestCase):
    def test_drops_best_and_worst(self):
        self.assertEqual(trimmed_mean([5, 1, 3, 2, 4]), 3.0)
        self.assertEqual(trimmed_mean([10, 1, 1, 1]), 1.0)

    def test_short_samples_plain_mean(self):
        self.assertEqual(trimmed_mean([1, 2]), 1.5)
        self.assertEqual(trimmed_mean([7]), 7.0)

    def test_empty_raises(self):
        with self.assertRaises(ValueError):
            trimmed_mean([])


class TestPayload(unittest.TestCase):
    def test_width_and_key(self):
        payload = make_payload(10, 7)
        self.assertEqual(payload.shape, (10,))
        self.assertEqual(payload[0], 7)
        self.assertEqual(int(payload[1:].sum()), 0)


class TestWorkloads(unittest.TestCase):
    def test_timed_workloads_run_on_reported_containers(self):
        for name, func in TIMED_WORKLOADS.items():
            for container in reported_containers(name):
                with self.subTest(workload=name, container=container):
                    elapsed = func(CONTAINERS[container], 16)
                    self.assertIsInstance(elapsed, float)
                    self.assertGreaterEqual(elapsed, 0.0)

    def test_timed_workloads_accept_wide_payloads(self):
        elapsed = TIMED_WORKLOADS["traverse"](DequeReclaiming, 8, width=100)
        self.assertGreaterEqual(elapsed, 0.0)

    def test_fill_back_reserved_without_reserve(self):
        self.assertGreaterEqual(workloads.fill_back_reserved(DequeBaseline, 8), 0.0)

    def test_zigzag_leaves_container_empty(self):
        steps = workloads._zigzag_steps(10)
        pushed = sum(count for op, count in steps if op.startswith("push"))
        popped = sum(count for op, count in steps if op.startswith("pop"))
        self.assertEqual(pushed, popped)
        container = DequeReclaiming()
        for op, count in steps:
            for _ in range(count):
                if op.startswith("push"):
                    getattr(container, op)(0)
                else:
                    getattr(container, op)()
        self.assertTrue(container.is_empty())

    def test_quicksort_range_sorts_by_key(self):
        for cls in (QueueReclaiming, DequeReclaiming, VectorBaseline, DequeBaseline):
            container = cls()
            for key in (5, 3, 9, 1, 1, 7, 0, 8):
                container.push_back(make_payload(1, key))
            quicksort_range(container, 0, len(container) - 1)
            keys = [int(container[i][0]) for i in range(len(container))]
            self.assertEqual(keys, [0, 1, 1, 3, 5, 7, 8, 9])

    def test_shuffle_picks_bounded_by_position(self):
        picks = workloads._shuffle_picks(50)
        self.assertEqual(len(picks), 50)
        for i, j in enumerate(picks):
            self.assertTrue(0 <= j <= i)

    def test_shuffle_keeps_every_element(self):
        container = workloads._filled(QueueReclaiming, 30, 1)
        workloads._shuffle_in_place(container, workloads._shuffle_picks(30))
        keys = sorted(int(container[i][0]) for i in range(30))
        self.assertEqual(keys, list(range(30)))

    def test_traverse_mutates_in_place(self):
        container = workloads._filled(DequeReclaiming, 5, 1)
        for i in range(5):
            container[i][0] += 1
        self.assertEqual([int(container[i][0]) for i in range(5)], [1, 2, 3, 4, 5])


class TestMemoryProbes(unittest.TestCase):
    def test_naive_queue_always_full(self):
        self.assertEqual(workloads.fill_back_memory(QueueNaive, 50), 1.0)

    def test_probes_stay_in_unit_interval(self):
        for name, func in MEMORY_PROBES.items():
            for container in reported_containers(name):
                with self.subTest(probe=name, container=container):
                    value = func(CONTAINERS[container], 20)
                    self.assertGreater(value, 0.0)
                    self.assertLessEqual(value, 1.0)


class TestRegistry(unittest.TestCase):
    def test_every_workload_has_exclusions(self):
        for name in list(TIMED_WORKLOADS) + list(MEMORY_PROBES):
            self.assertIn(name, NOT_REPORTED)
        for skipped in NOT_REPORTED.values():
            self.assertTrue(skipped <= set(CONTAINERS))

    def test_load_factor_probes_skip_baselines_without_one(self):
        for name in MEMORY_PROBES:
            names = reported_containers(name)
            self.assertNotIn("DequeBaseline", names)
            self.assertNotIn("ListBaseline", names)

    def test_front_shifters_skipped_for_front_fill(self):
        names = reported_containers("fill_front")
        self.assertNotIn("QueueNaive", names)
        self.assertNotIn("VectorBaseline", names)
        self.assertIn("QueueReclaiming", names)

    def test_list_skipped_for_indexed_workloads(self):
        for name in ("traverse", "shuffle", "quicksort"):
            self.assertNotIn("ListBaseline", reported_containers(name))
        self.assertIn(ListBaseline.__name__, reported_containers("fill_back"))


class TestRunBenchmark(unittest.TestCase):
    def test_fill_back_series(self):
        result = run_benchmark("fill_back", 10, points=2, runs=3)
        self.assertEqual(result.name, "fill_back")
        self.assertEqual(result.unit, "ms")
        self.assertEqual(result.sizes, [10, 20])
        self.assertEqual(list(result.series), list(CONTAINERS))
        self.assertEqual(result.skipped, [])
        self.assertEqual(result.payload, "small")
        for series in result.series.values():
            self.assertEqual(len(series), 2)

    def test_skipped_containers_reported(self):
        result = run_benchmark("fill_front", 4, payload="medium", points=1, runs=1)
        self.assertNotIn("QueueNaive", result.series)
        self.assertIn("QueueNaive", result.skipped)

    def test_unknown_names(self):
        with self.assertRaises(KeyError):
            run_benchmark("bogus", 10)
        with self.assertRaises(KeyError):
            run_benchmark("fill_back", 10, payload="huge")
        with self.assertRaises(KeyError):
            run_memory_probe("bogus", 10)

    def test_invalid_sizes(self):
        with self.assertRaises(ValueError):
            run_benchmark("fill_back", 0, points=2, runs=1)
        with self.assertRaises(ValueError):
            run_memory_probe("fill_back_memory", 10, points=0)

    def test_memory_probe(self):
        result = run_memory_probe("fill_back_memory", 10, points=2)
        self.assertEqual(result.unit, "load")
        self.assertEqual(result.sizes, [10, 20])
        self.assertNotIn("DequeBaseline", result.series)
        self.assertEqual(result.series["QueueNaive"], [1.0, 1.0])


if __name__ == "__main__":
    unittest.main()
