import logging
import sys
import time
import os

# Add the project root to the path so we can import treapbench
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from treapbench import experiments
from treapbench.utils import plot_depths, plot_timings

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s %(levelname)-8s %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S')

# The dynamic array is O(n) per delete/search; these sizes keep a full run in minutes
SIZES = [10_000, 20_000, 50_000, 80_000, 100_000]
WORKLOAD_SIZE = 100_000
SEED = 0

def main():
    averages = experiments.experiment_depth(trials=100, n=1024, seed=SEED)
    plot_depths(averages, 1024, filename='treap_depths.png')

    runs = [
        ('Insertions', 'insertions.png', lambda: experiments.experiment_insertions(SIZES, seed=SEED)),
        ('Insertions with deletions', 'deletions.png',
         lambda: experiments.experiment_deletions(n=WORKLOAD_SIZE, seed=SEED)),
        ('Insertions with searches', 'searches.png',
         lambda: experiments.experiment_searches(n=WORKLOAD_SIZE, seed=SEED)),
        ('Mixed workload', 'mixed.png', lambda: experiments.experiment_mixed(SIZES, seed=SEED)),
    ]
    for i, (title, filename, run) in enumerate(runs, start=1):
        start = time.perf_counter()
        results = run()
        plot_timings(results, title, filename=filename)
        print(f"Experiment {i} ({title}) took {time.perf_counter() - start:.2f}s, plot saved to {filename}")

if __name__ == "__main__":
    main()
