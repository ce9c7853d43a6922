# wflcg/experiments/run_benchmark.py
# Time WFLCG against Python's and numpy's generators, one value per call.
# Writes results/benchmark_<timestamp>.csv for plot_heatmap.py.

import argparse
import csv
import logging
import os
import random
import time

import numpy as np

from wflcg import config
from wflcg.generator import BUFFER_SIZE, WFLCG

logger = logging.getLogger('experiments')

CSV_HEADER = ['generator', 'method', 'trial', 'seconds', 'ns_per_value']


def _loop(fn, iterations):
    value = None
    for _ in range(iterations):
        value = fn()
    return value


def _wflcg_direct(iterations):
    # sum the whole buffer then refill, like a caller consuming lanes in bulk
    rng = WFLCG(config.BENCH_SEED)
    total = 0
    for _ in range(iterations // BUFFER_SIZE):
        total += int(rng.buffer_view().sum(dtype=np.uint64))
        rng.refill_buffer()
    return total


def _make_cases():
    """(generator, method) -> callable(iterations) running one timed loop."""
    def wflcg(method):
        return lambda n: _loop(getattr(WFLCG(config.BENCH_SEED), method), n)

    def numpy_gen(bit_generator, method):
        def run(n):
            gen = np.random.Generator(bit_generator(config.BENCH_SEED))
            if method == 'u32':
                fn = lambda: gen.integers(0, 1 << 32, dtype=np.uint32)
            else:
                fn = gen.random
            return _loop(fn, n)
        return run

    def mt(method):
        def run(n):
            rng = random.Random(config.BENCH_SEED)
            fn = (lambda: rng.getrandbits(32)) if method == 'u32' else rng.random
            return _loop(fn, n)
        return run

    return {
        ('WFLCG', 'u32'): wflcg('next_u32'),
        ('WFLCG', 'float'): wflcg('next_float'),
        ('WFLCG', 'double'): wflcg('next_double'),
        ('WFLCG', 'double2'): wflcg('next_double2'),
        ('WFLCG', 'direct'): _wflcg_direct,
        ('random.Random', 'u32'): mt('u32'),
        ('random.Random', 'double'): mt('double'),
        ('numpy.PCG64', 'u32'): numpy_gen(np.random.PCG64, 'u32'),
        ('numpy.PCG64', 'double'): numpy_gen(np.random.PCG64, 'double'),
        ('numpy.MT19937', 'u32'): numpy_gen(np.random.MT19937, 'u32'),
        ('numpy.MT19937', 'double'): numpy_gen(np.random.MT19937, 'double'),
        ('numpy.Philox', 'u32'): numpy_gen(np.random.Philox, 'u32'),
        ('numpy.Philox', 'double'): numpy_gen(np.random.Philox, 'double'),
    }


CASES = _make_cases()


def run_single(case, iterations):
    fn = CASES[case]
    t0 = time.perf_counter()
    fn(iterations)
    return time.perf_counter() - t0


def run_all(iterations, trials, cases=None, writer=None):
    rows = []
    for case in cases or CASES:
        generator, method = case
        for trial in range(trials):
            elapsed = run_single(case, iterations)
            row = [generator, method, trial, f"{elapsed:.6f}", f"{elapsed * 1e9 / iterations:.2f}"]
            logger.info(f"{generator:>15} {method:<8} trial={trial} {elapsed:.3f} s")
            rows.append(row)
            if writer is not None:
                writer.writerow(row)
    return rows


def ensure_results_dir(path):
    os.makedirs(path, exist_ok=True)


def main(argv=None):
    parser = argparse.ArgumentParser(description='Benchmark WFLCG against other generators')
    parser.add_argument('--iterations', type=int, default=config.BENCH_ITERATIONS, help='values per timed loop')
    parser.add_argument('--trials', type=int, default=config.BENCH_TRIALS, help='repeats per case')
    parser.add_argument('--generators', type=str, default='', help='comma list of generator names (default: all)')
    parser.add_argument('--out-dir', default=config.RESULTS_DIR, help='directory for the CSV')
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO))
    wanted = {x.strip() for x in args.generators.split(',') if x.strip()}
    unknown = wanted - {g for g, _ in CASES}
    if unknown:
        parser.error(f"unknown generators: {sorted(unknown)}")
    cases = [c for c in CASES if not wanted or c[0] in wanted]

    ensure_results_dir(args.out_dir)
    csv_path = os.path.join(args.out_dir, f'benchmark_{int(time.time())}.csv')
    with open(csv_path, 'w', newline='') as f:
        writer = csv.writer(f)
        writer.writerow(CSV_HEADER)
        run_all(args.iterations, args.trials, cases, writer)
    print("Benchmark complete. CSV saved at:", csv_path)


if __name__ == '__main__':
    main()
