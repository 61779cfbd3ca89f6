import sys
import os
import time
import csv
import argparse
from typing import Dict, Any, List

# Add project root to path
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from bitonic.sorters.bitonic_sort import sort_by
from bitonic.sorters.bitonic_network import apply_network, comparator_count
from bitonic.sorters.comparators import Direction, natural_order
from bitonic.sorters.parallel_bitonic_sort import parallel_sort_by
from bitonic.utils import new_u32_vec, is_sorted_ascending, is_sorted_descending

SORTERS = ["recursive", "network", "parallel", "builtin"]


def run_single_size(n: int, seed: int, direction: Direction, workers: int) -> Dict[str, Any]:
    """
    Sorts the same random vector with every sorter on isolated copies.
    """
    base = new_u32_vec(n, seed)
    comparator = natural_order(direction)
    check = is_sorted_ascending if direction is Direction.ASCENDING else is_sorted_descending

    result = {
        "size": n,
        "seed": seed,
        "direction": direction.value,
        "comparators": comparator_count(n),
    }

    def run_sorter(name, data):
        start_time = time.perf_counter()
        try:
            if name == "recursive":
                sort_by(data, comparator)
            elif name == "network":
                apply_network(data, comparator)
            elif name == "parallel":
                parallel_sort_by(data, comparator, max_workers=workers)
            else:
                data.sort(reverse=direction is Direction.DESCENDING)
        except Exception as e:
            print(f"Error sorting n={n} with {name}: {e}")
            return False, time.perf_counter() - start_time
        return check(data), time.perf_counter() - start_time

    for name in SORTERS:
        result[f"{name}_ok"], result[f"{name}_time"] = run_sorter(name, list(base))

    return result


def main(argv=None):
    parser = argparse.ArgumentParser(description="Benchmark bitonic sorters")
    parser.add_argument("--min-exp", type=int, default=4, help="Smallest size as a power of two")
    parser.add_argument("--max-exp", type=int, default=12, help="Largest size as a power of two")
    parser.add_argument("--seed", type=int, default=0, help="Random vector seed")
    parser.add_argument("--descending", action="store_true", help="Sort descending")
    parser.add_argument("--workers", type=int, default=None, help="Parallel sorter pool size")
    parser.add_argument("--output", type=str, default="benchmark_results.csv", help="Output CSV file")

    args = parser.parse_args(argv)
    if args.min_exp < 0:
        parser.error("--min-exp must be non-negative")
    if args.min_exp > args.max_exp:
        parser.error(f"--min-exp ({args.min_exp}) must not exceed --max-exp ({args.max_exp})")
    direction = Direction.DESCENDING if args.descending else Direction.ASCENDING

    print(f"Starting Benchmark: n=2^{args.min_exp}..2^{args.max_exp}, {direction.value}, seed={args.seed}")

    results: List[Dict[str, Any]] = []
    for exp in range(args.min_exp, args.max_exp + 1):
        n = 2 ** exp
        print(f"Sorting n={n}...", end="\r")
        results.append(run_single_size(n, args.seed, direction, args.workers))

    print(f"\nBenchmark Complete!")

    failures = [r for r in results for name in SORTERS if not r[f"{name}_ok"]]
    if failures:
        print(f"Unsorted outputs: {len(failures)}")

    # Save to CSV
    keys = results[0].keys()
    with open(args.output, "w", newline="") as f:
        dict_writer = csv.DictWriter(f, fieldnames=keys)
        dict_writer.writeheader()
        dict_writer.writerows(results)

    print(f"Results saved to {args.output}")

    # Print Summary Table
    print("\nSummary:")
    print(f"{'Size':>8} | {'Comparators':>11} | " + " | ".join(f"{name:>10}" for name in SORTERS))
    print("-" * (26 + 13 * len(SORTERS)))
    for r in results:
        times = " | ".join(f"{r[f'{name}_time']:>10.4f}" for name in SORTERS)
        print(f"{r['size']:>8} | {r['comparators']:>11} | {times}")

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
