import matplotlib.pyplot as plt
import numpy as np

def plot_depths(averages, n, filename='treap_depths.png'):
    plt.figure(figsize=(12, 5))

    plt.subplot(1, 2, 1)
    plt.plot(averages, label='Average Depth')
    plt.axhline(2 * np.log(n), color='gray', linestyle='--', label='2 ln n')
    plt.xlabel('Trial')
    plt.ylabel('Depth')
    plt.title(f'Average Node Depth (n={n})')
    plt.legend()

    plt.subplot(1, 2, 2)
    plt.hist(averages, bins=20, label='Trials')
    plt.xlabel('Average Depth')
    plt.ylabel('Count')
    plt.title('Depth Distribution')
    plt.legend()

    plt.tight_layout()
    plt.savefig(filename)
    plt.close()

def plot_timings(results, title, filename='timings.png'):
    labels = [r.label for r in results]
    x = np.arange(len(results))
    width = 0.4

    plt.figure(figsize=(12, 5))
    plt.bar(x - width / 2, [r.treap_seconds for r in results], width, label='Treap')
    plt.bar(x + width / 2, [r.array_seconds for r in results], width, label='Dynamic Array')
    plt.xticks(x, labels, rotation=20, ha='right')
    plt.ylabel('Seconds')
    plt.title(title)
    plt.legend()

    plt.tight_layout()
    plt.savefig(filename)
    plt.close()
