# metrics_tracker.py

import json
import os
from collections import defaultdict


class Metrics:
    """Running sum/count per key, optionally mirrored to a JSON file."""

    def __init__(self, path=None):
        self.path = path
        self.m = defaultdict(float)
        self.n = defaultdict(int)
        if self.path:
            self._load()

    def _load(self):
        if not os.path.exists(self.path):
            return
        with open(self.path, "r", encoding="utf8") as f:
            d = json.load(f)
        for k, v in d.items():
            self.m[k] = float(v["sum"])
            self.n[k] = int(v["count"])

    def save(self):
        if not self.path:
            return
        d = {k: {"sum": self.m[k], "count": self.n[k]} for k in self.m}
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(d, f, indent=2)

    def record(self, key, val):
        self.m[key] += val
        self.n[key] += 1
        self.save()

    def avg(self, key):
        if self.n.get(key, 0) == 0:
            return 0.0
        return self.m[key] / self.n[key]

    def snapshot(self):
        return {k: {"avg": self.avg(k), "count": self.n[k]} for k in self.m}
