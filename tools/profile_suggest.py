# tools/profile_suggest.py
"""
Small profiling harness for AutoCompleter.search.
Usage:
  python tools/profile_suggest.py --warm 100 --iters 1000 --words words.txt

Prints cold (cache emptied before each query) and cached latency stats.
"""
import argparse
import json
from pathlib import Path

from swiftsearch.core.autocompleter import AutoCompleter
from swiftsearch.profiling.profile import benchmark, summarize
from swiftsearch.utils.config_manager import Config


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--warm", type=int, default=50, help="warmup iterations")
    parser.add_argument("--iters", type=int, default=500, help="measured iterations")
    parser.add_argument("--limit", type=int, default=8, help="suggestions per query")
    parser.add_argument("--words", type=str, default=None, help="word file (default: built-in list)")
    parser.add_argument("--out", type=str, default=None, help="write the summary as JSON here")
    args = parser.parse_args()

    cfg = Config()
    if args.words:
        cfg.set("words_file", args.words, persist=False)
    ac = AutoCompleter(config=cfg)

    # every 1-3 letter prefix present in the dictionary
    prefixes = sorted({w[:n] for w in ac.index.iter_words() for n in (1, 2, 3) if len(w) >= n})
    print(f"{len(ac.index)} words, {len(prefixes)} prefixes")

    print("Warming up...")
    benchmark(ac, prefixes, iterations=args.warm, limit=args.limit)

    print("Measuring...")
    summary = {
        "cold": summarize(benchmark(ac, prefixes, iterations=args.iters, limit=args.limit, cold=True)),
        "cached": summarize(benchmark(ac, prefixes, iterations=args.iters, limit=args.limit)),
    }
    for name, s in summary.items():
        print("%-6s (ms): mean=%.4f median=%.4f p90=%.4f max=%.4f" % (
            name, s["mean_ms"], s["median_ms"], s["p90_ms"], s["max_ms"]))

    if args.out:
        Path(args.out).write_text(json.dumps(summary, indent=2))
        print("Saved profile summary to", args.out)

    print("Sample output for 'py':", ac.search("py", args.limit))


if __name__ == "__main__":
    main()
