# metrics_tracker.py - in-memory timing/count metrics for the CLI and TUI

from collections import defaultdict


class Metrics:
    def __init__(self):
        self.m = defaultdict(float)
        self.n = defaultdict(int)

    def record(self, key, val):
        self.m[key] += val
        self.n[key] += 1

    def avg(self, key):
        if self.n[key] == 0:
            return 0.0
        return self.m[key] / self.n[key]

    def as_rows(self):
        """(key, count, average) per metric, sorted by key."""
        return [(k, self.n[k], self.avg(k)) for k in sorted(self.m)]
