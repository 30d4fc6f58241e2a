"""Timing harness for the standard trie.

Builds tries from synthetic word workloads and times the public operations,
returning one summary row per (size, operation) as a pandas DataFrame.
"""

import logging
import random
import time
from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np
import pandas as pd

from components.work_loads import gen_words_with_prefix_freq
from tries.standard_trie import Trie

log = logging.getLogger(__name__)

OPERATIONS = ("insert", "batch_insert", "list_all_sorted", "words_with_prefix", "contains_prefix")
COLUMNS = ["size", "operation", "median_ms", "p95_ms", "nodes", "avg_branch_factor", "words"]


## === Config Class === ##

@dataclass
class BenchConfig:
    """
    Configuration for run_benchmark
        sizes: list, workload sizes (number of generated words) to benchmark
        prefix_freq: float, common-prefix density of the workload, 0..1
        repeats: int, timed repetitions per size
        seed: int, seed for workload and probe generation
        probe_prefixes: int, prefixes queried per repetition
    """
    sizes: List[int] = field(default_factory=lambda: [1_000, 5_000, 10_000])
    prefix_freq: float = 0.3
    repeats: int = 3
    seed: Optional[int] = 42
    probe_prefixes: int = 100

    def __post_init__(self):
        if not self.sizes:
            raise ValueError("sizes must not be empty")
        bad = [s for s in self.sizes if s < 1]
        if bad:
            raise ValueError(f"sizes must be positive, got {bad}")
        if not 0 <= self.prefix_freq <= 1:
            raise ValueError("prefix_freq must be between 0 and 1")
        if self.repeats < 1:
            raise ValueError("repeats must be >= 1")
        if self.probe_prefixes < 1:
            raise ValueError("probe_prefixes must be >= 1")
        self.sizes = sorted(set(self.sizes))


def _timed(fn, *args):
    t0 = time.perf_counter()
    fn(*args)
    return time.perf_counter() - t0


def _probe_prefixes(words, n, rng):
    # Mostly real prefixes, plus every fifth one pushed off the trie with a trailing '#'.
    picks = rng.choices(words, k=n)
    probes = []
    for i, w in enumerate(picks):
        p = w[:rng.randint(1, len(w))]
        probes.append(p + "#" if i % 5 == 4 else p)
    return probes


def _insert_each(trie, words):
    for w in words:
        trie.insert(w)


def _query_each(fn, prefixes):
    for p in prefixes:
        fn(p)


def run_benchmark(config=None):
    """Time every trie operation for each workload size in `config`.

    Returns a DataFrame with columns `COLUMNS`, ordered by size and then by
    `OPERATIONS`. Times are wall-clock milliseconds over `config.repeats` runs.
    """
    config = config or BenchConfig()
    rng = random.Random(config.seed)
    rows = []

    for size in config.sizes:
        words = gen_words_with_prefix_freq(size, config.prefix_freq, config.seed)
        probes = _probe_prefixes(words, config.probe_prefixes, rng)
        samples = {op: [] for op in OPERATIONS}
        trie = None

        for _ in range(config.repeats):
            trie = Trie()
            samples["insert"].append(_timed(_insert_each, trie, words))
            samples["batch_insert"].append(_timed(Trie().batch_insert, words))
            samples["list_all_sorted"].append(_timed(trie.list_all_sorted))
            samples["words_with_prefix"].append(_timed(_query_each, trie.words_with_prefix, probes))
            samples["contains_prefix"].append(_timed(_query_each, trie.contains_prefix, probes))

        nodes = trie.count_nodes()
        avg_bf = trie.count_nodes(get_avg_branch_factor=True)
        for op in OPERATIONS:
            ms = np.asarray(samples[op]) * 1000.0
            rows.append({
                "size": size,
                "operation": op,
                "median_ms": float(np.median(ms)),
                "p95_ms": float(np.percentile(ms, 95)),
                "nodes": nodes,
                "avg_branch_factor": avg_bf,
                "words": len(trie),
            })
        log.info("size=%d: %d distinct words, %d nodes, avg branch factor %.2f",
                 size, len(trie), nodes, avg_bf)

    return pd.DataFrame(rows, columns=COLUMNS)
