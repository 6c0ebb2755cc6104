from .plotting import plot_depths, plot_timings
