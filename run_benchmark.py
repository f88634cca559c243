#!/usr/bin/env python3
"""
Build prime tables and check them against known prime counts.

For each configured limit N:
1. Build the segmented sieve table, timed
2. Count primes by walking a cursor from begin() to end()
3. Compare with pi(N) from the config, when known
4. Report the n-th prime bracket for the last prime found

Usage:
    python run_benchmark.py
    python run_benchmark.py --config config/custom.yaml
    python run_benchmark.py --limit 1e8
"""

import argparse
import sys
import time
from pathlib import Path

from primetable.arrays import primes_array
from primetable.bounds import nth_prime_bounds
from primetable.config import load_config, validate_config
from primetable.prime_table import PrimeTable


def benchmark_limit(N: int, window: int, known_counts: dict, verbose: bool = True) -> bool:
    """Build one table and verify its prime count. Returns True if it checks out."""
    print("-" * 60)
    print(f"N = {N:,}")
    print("-" * 60)

    print("  Building table...", end=" " if not verbose else "\n", flush=True)
    t0 = time.time()
    table = PrimeTable(N, window=window, verbose=verbose)
    t_build = time.time() - t0
    if verbose:
        print(f"  Built in {t_build:.2f}s, {len(table.bits) / 8 / 1e6:.1f}MB of bits")
    else:
        print(f"{t_build:.2f}s")

    # Walk the cursor the way a consumer would
    t0 = time.time()
    count = 0
    last = None
    it = table.begin()
    while it != table.end():
        count += 1
        last = it.value
        it.advance()
    t_walk = time.time() - t0
    print(f"  Cursor walk: {count:,} primes in {t_walk:.2f}s")

    ok = True
    arr = primes_array(table)
    if len(arr) != count:
        print(f"  ✗ numpy export has {len(arr):,} primes, cursor found {count:,}")
        ok = False

    expected = known_counts.get(N)
    if expected is None:
        print(f"  (no known pi({N:,}) to compare)")
    elif expected == count:
        print(f"  ✓ pi({N:,}) = {count:,}")
    else:
        print(f"  ✗ pi({N:,}): expected {expected:,}, got {count:,}")
        ok = False

    if count > 0:
        lower, upper = nth_prime_bounds(count)
        inside = lower <= last <= upper
        mark = "✓" if inside else "✗"
        print(f"  {mark} p_{count:,} = {last:,} in [{lower:,}, {upper:,}]")
        ok = ok and inside

    return ok


def main():
    parser = argparse.ArgumentParser(description='Benchmark the segmented prime table')
    parser.add_argument('--config', type=str, default=None,
                        help='Path to config file (default: config/default.yaml)')
    parser.add_argument('--limit', type=float, action='append', default=None,
                        help='Table limit; repeat to build several (overrides config)')
    parser.add_argument('--window', type=int, default=None,
                        help='Segment width in odd-number indices (overrides config)')
    parser.add_argument('--quiet', action='store_true', help='Suppress sieve progress')
    args = parser.parse_args()

    config = load_config(Path(args.config) if args.config else None)
    if args.limit is not None:
        config['limits'] = args.limit
    if args.window is not None:
        config['window'] = args.window
    if args.quiet:
        config['verbose'] = False
    config = validate_config(config)

    print("=" * 60)
    print("Segmented Prime Table Benchmark")
    print("=" * 60)
    print(f"  limits = {[f'{N:,}' for N in config['limits']]}")
    print(f"  window = {config['window']:,}")
    print()

    total_start = time.time()
    all_ok = True
    for N in config['limits']:
        ok = benchmark_limit(N, config['window'], config['known_counts'], config['verbose'])
        all_ok = all_ok and ok

    print()
    print("=" * 60)
    print(f"Total runtime: {time.time() - total_start:.1f}s")
    if all_ok:
        print("✓ All verifications passed!")
    else:
        print("✗ Some verifications failed!")
        sys.exit(1)


if __name__ == '__main__':
    main()
