"""Analysis of generated puzzle batches: clue-count summaries and plots."""

from .analysis import (
    givens_by_difficulty,
    summarize_givens,
    check_monotonic_givens,
    plot_givens_distribution,
    plot_generation_time,
    print_givens_summary,
)
from .io import convert_results_for_json, save_results_json, load_results_json
