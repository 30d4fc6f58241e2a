import os
import sys
import unittest

# ---------------- Import shim (works from dev_tests/) ----------------
THIS_DIR = os.path.dirname(os.path.abspath(__file__))
ROOT_DIR = os.path.abspath(os.path.join(THIS_DIR, os.pardir))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from components.benchmark import COLUMNS, OPERATIONS, BenchConfig, run_benchmark  # noqa: E402


class TestBenchConfig(unittest.TestCase):
    def test_defaults_are_valid(self):
        cfg = BenchConfig()
        self.assertEqual(cfg.sizes, [1_000, 5_000, 10_000])
        self.assertEqual(cfg.repeats, 3)

    def test_sizes_sorted_and_deduplicated(self):
        cfg = BenchConfig(sizes=[500, 100, 500])
        self.assertEqual(cfg.sizes, [100, 500])

    def test_invalid_values_raise(self):
        for kwargs in (
            {"sizes": []},
            {"sizes": [10, 0]},
            {"prefix_freq": 1.2},
            {"repeats": 0},
            {"probe_prefixes": 0},
        ):
            with self.assertRaises(ValueError, msg=str(kwargs)):
                BenchConfig(**kwargs)


class TestRunBenchmark(unittest.TestCase):
    def setUp(self):
        self.cfg = BenchConfig(sizes=[200, 50], prefix_freq=0.5, repeats=2, seed=7, probe_prefixes=20)
        self.df = run_benchmark(self.cfg)

    def test_shape_and_columns(self):
        self.assertEqual(list(self.df.columns), COLUMNS)
        self.assertEqual(len(self.df), 2 * len(OPERATIONS))
        self.assertEqual(list(self.df["size"].unique()), [50, 200])
        self.assertEqual(list(self.df["operation"][:len(OPERATIONS)]), list(OPERATIONS))

    def test_timings_non_negative(self):
        self.assertTrue((self.df["median_ms"] >= 0).all())
        self.assertTrue((self.df["p95_ms"] >= self.df["median_ms"]).all())

    def test_trie_shape_columns(self):
        for size, group in self.df.groupby("size"):
            self.assertEqual(group["words"].nunique(), 1)
            words = int(group["words"].iloc[0])
            self.assertTrue(0 < words <= size)
            self.assertGreater(int(group["nodes"].iloc[0]), words)
            self.assertGreater(float(group["avg_branch_factor"].iloc[0]), 0.0)


if __name__ == "__main__":
    unittest.main(verbosity=2)
