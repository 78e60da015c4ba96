#!/usr/bin/env python3
"""Benchmark suite for pyskip measuring per-operation latency and level shape."""

import argparse
import json
import random
import time
from collections import Counter
from pathlib import Path
from typing import Dict, List

import numpy as np
import plotly.graph_objects as go
from tqdm import tqdm

from pyskip import SkipList


class Metrics:
    def __init__(self):
        self.insert_latencies: List[float] = []
        self.search_latencies: List[float] = []
        self.remove_latencies: List[float] = []
        self.node_levels: Counter[int] = Counter()
        self.final_level: int = 0

    @staticmethod
    def _percentiles(samples: List[float]) -> Dict[str, float]:
        return {
            "p50": float(np.percentile(samples, 50)),
            "p95": float(np.percentile(samples, 95)),
            "p99": float(np.percentile(samples, 99)),
        }

    def to_dict(self) -> Dict:
        return {
            "insert_latencies": self._percentiles(self.insert_latencies),
            "search_latencies": self._percentiles(self.search_latencies),
            "remove_latencies": self._percentiles(self.remove_latencies),
            "node_levels": dict(sorted(self.node_levels.items())),
            "final_level": self.final_level,
        }

    def plot_latencies(self, title: str, output_path: Path):
        fig = go.Figure()
        for name, samples in (
            ("Insert Latency", self.insert_latencies),
            ("Search Latency", self.search_latencies),
            ("Remove Latency", self.remove_latencies),
        ):
            fig.add_trace(go.Box(y=samples, name=name, boxpoints="outliers"))

        fig.update_layout(
            title=title,
            yaxis_title="Latency (µs)",
            boxmode="group"
        )

        fig.write_html(output_path)

    def plot_levels(self, title: str, output_path: Path):
        levels = sorted(self.node_levels)
        fig = go.Figure(go.Bar(x=levels, y=[self.node_levels[lvl] for lvl in levels]))
        fig.update_layout(title=title, xaxis_title="Node level", yaxis_title="Nodes")
        fig.write_html(output_path)


class BenchmarkSuite:
    def __init__(self, num_entries: int, max_level: int, probability: float, seed: int):
        self.num_entries = num_entries
        self.max_level = max_level
        self.probability = probability
        self.metrics = Metrics()
        rnd = random.Random(seed)
        self._values = [rnd.randrange(num_entries * 10) for _ in range(num_entries)]
        self._seed = seed

    def run(self) -> Metrics:
        sl = SkipList[int](self.max_level, self.probability, seed=self._seed)

        for v in tqdm(self._values, desc="Insert"):
            start = time.perf_counter()
            sl.insert(v)
            self.metrics.insert_latencies.append((time.perf_counter() - start) * 1e6)

        x = sl.head.forward[0]
        while x is not None:
            self.metrics.node_levels[len(x.forward)] += 1
            x = x.forward[0]
        self.metrics.final_level = sl.level

        for v in tqdm(self._values, desc="Search"):
            start = time.perf_counter()
            sl.search(v)
            self.metrics.search_latencies.append((time.perf_counter() - start) * 1e6)

        for v in tqdm(self._values, desc="Remove"):
            start = time.perf_counter()
            sl.remove(v)
            self.metrics.remove_latencies.append((time.perf_counter() - start) * 1e6)

        assert sl.empty(), "every inserted value should have been removed"
        return self.metrics


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--size", type=int, default=100000, help="Number of values")
    parser.add_argument("--max-level", type=int, default=16, help="Skip list max level")
    parser.add_argument("--probability", type=float, default=0.5, help="Promotion probability")
    parser.add_argument("--seed", type=int, default=0, help="Seed for values and levels")
    parser.add_argument("--output", type=Path, default=Path("benchmark_results"), help="Output directory")
    args = parser.parse_args()

    args.output.mkdir(parents=True, exist_ok=True)

    suite = BenchmarkSuite(args.size, args.max_level, args.probability, args.seed)
    metrics = suite.run()

    metrics.plot_latencies("pyskip Latency Distribution", args.output / "latencies.html")
    metrics.plot_levels("pyskip Node Levels", args.output / "levels.html")

    with open(args.output / "metrics.json", "w") as f:
        json.dump({"pyskip": metrics.to_dict()}, f, indent=2)


if __name__ == "__main__":
    main()
