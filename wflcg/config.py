# wflcg/config.py
# Configuration for the benchmark and plot scripts

# Logging level
LOG_LEVEL = 'INFO'

# Benchmark defaults
BENCH_ITERATIONS = 200000
BENCH_TRIALS = 3
RESULTS_DIR = 'results'

# Seed every benchmarked generator starts from
BENCH_SEED = 0
