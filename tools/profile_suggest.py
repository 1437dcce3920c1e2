# tools/profile_suggest.py
"""
Small profiling harness for Transliterator.suggest and the fuzzy tier.
Usage:
  python tools/profile_suggest.py --warm 100 --iters 1000 --fragment slah
  python tools/profile_suggest.py --dataset my_corpus.txt --synthetic 5000

Fuzzy search compares the query against stored keys (through a BK-tree),
so its cost grows with corpus size; --synthetic adds random keys to show that.
Prints median/p90/max latency and a sample of suggestions.
"""
import argparse
import random
import string
import time
from statistics import median

from khmer_transliterator.core.transliterator import Transliterator
from khmer_transliterator.utils.logger_utils import setup_logging

QUERIES = ["jg", "ban", "j", "jong", "slah", "bna", "chxa", "xyz", "te", "ch"]


def add_synthetic_keys(t: Transliterator, n: int, seed: int = 7) -> None:
    """Insert n random 3-8 letter keys so the fuzzy tier has more to scan."""
    rnd = random.Random(seed)
    for i in range(n):
        key = "".join(rnd.choice(string.ascii_lowercase) for _ in range(rnd.randint(3, 8)))
        t.index.insert(key, f"w{i}")


def benchmark(fn, queries, iterations=200, seed=0):
    rnd = random.Random(seed)
    times = []
    for _ in range(iterations):
        q = rnd.choice(queries)
        t0 = time.perf_counter()
        fn(q)
        times.append((time.perf_counter() - t0) * 1000.0)  # ms
    return times


def summarize(times):
    if not times:
        return {"count": 0, "median_ms": 0.0, "p90_ms": 0.0, "max_ms": 0.0}
    times_sorted = sorted(times)
    return {
        "count": len(times_sorted),
        "median_ms": median(times_sorted),
        "p90_ms": times_sorted[max(0, int(0.9 * len(times_sorted)) - 1)],
        "max_ms": times_sorted[-1],
    }


def main(argv=None):
    parser = argparse.ArgumentParser()
    parser.add_argument("--warm", type=int, default=50, help="warmup iterations")
    parser.add_argument("--iters", type=int, default=500, help="measured iterations")
    parser.add_argument("--fragment", type=str, default="slah", help="sample input")
    parser.add_argument("--dataset", help="corpus file (default: packaged dataset)")
    parser.add_argument("--synthetic", type=int, default=0, help="extra random keys")
    args = parser.parse_args(argv)

    setup_logging("INFO")
    t = Transliterator.from_corpus(args.dataset)
    if args.synthetic:
        add_synthetic_keys(t, args.synthetic)
    print(f"index: {len(t.index)} keys")

    benchmark(t.suggest, QUERIES, iterations=args.warm)
    print("suggest (ms):", summarize(benchmark(t.suggest, QUERIES, iterations=args.iters)))
    print("fuzzy   (ms):", summarize(benchmark(t.search_fuzzy, QUERIES, iterations=args.iters)))
    print(f"Sample suggest({args.fragment!r}):", t.suggest(args.fragment))
    return 0


if __name__ == "__main__":
    main()
