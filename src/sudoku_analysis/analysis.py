"""Clue-count analysis of generated puzzles: summaries, ordering checks, and plots."""

from typing import Dict, List, Optional, Tuple

import matplotlib.pyplot as plt
import numpy as np

from sudoku_engine.board import count_givens
from sudoku_engine.constants import CELL_COUNT, Difficulty


# ============================================================================
# Constants
# ============================================================================

DIFF_NAMES = {"easy": "Easy", "medium": "Medium", "hard": "Hard"}
DIFF_COLORS = {"easy": "green", "medium": "blue", "hard": "red"}


# ============================================================================
# Data collection
# ============================================================================


def _difficulty_name(record) -> str:
    if isinstance(record, dict):
        return Difficulty.parse(record["difficulty"]).value
    return Difficulty.parse(record.difficulty).value


def _puzzle_of(record):
    return record["puzzle"] if isinstance(record, dict) else record.puzzle


def givens_by_difficulty(records: list) -> Dict[str, List[int]]:
    """
    Group given counts by difficulty.

    Accepts PuzzleRecord / GeneratedPuzzle objects or their ``to_dict()``
    form. Keys follow Easy, Medium, Hard order.
    """
    grouped: Dict[str, List[int]] = {}
    for record in records:
        grouped.setdefault(_difficulty_name(record), []).append(
            count_givens(_puzzle_of(record))
        )
    return {d.value: grouped[d.value] for d in Difficulty if d.value in grouped}


def summarize_givens(records: list) -> Dict[str, Dict[str, float]]:
    """Mean / std / min / max givens and the expected 81 - target per difficulty."""
    summary = {}
    for name, givens in givens_by_difficulty(records).items():
        values = np.array(givens)
        summary[name] = {
            "count": int(len(values)),
            "mean": float(np.mean(values)),
            "std": float(np.std(values)),
            "min": int(np.min(values)),
            "max": int(np.max(values)),
            "expected": CELL_COUNT - Difficulty(name).removal_count,
        }
    return summary


def check_monotonic_givens(
    summary: Dict[str, Dict[str, float]], tolerance: float = 5.0
) -> Tuple[bool, str]:
    """
    Easy must leave more givens than Medium, Medium more than Hard, and each
    mean must sit within ``tolerance`` of its expected count.
    """
    names = [d.value for d in Difficulty if d.value in summary]
    for name in names:
        stats = summary[name]
        if abs(stats["mean"] - stats["expected"]) > tolerance:
            return False, (
                f"{DIFF_NAMES[name]} mean givens {stats['mean']:.1f} is more than "
                f"{tolerance} from {stats['expected']}"
            )
    for easier, harder in zip(names, names[1:]):
        if not summary[easier]["mean"] > summary[harder]["mean"]:
            return False, (
                f"{DIFF_NAMES[easier]} ({summary[easier]['mean']:.1f}) does not leave "
                f"more givens than {DIFF_NAMES[harder]} ({summary[harder]['mean']:.1f})"
            )
    return True, "Givens decrease with difficulty and match their targets"


# ============================================================================
# Givens distribution plot
# ============================================================================


def plot_givens_distribution(
    records: list,
    save_dir: str = None,
    filename: str = "givens_distribution.png",
    show: bool = True,
):
    """Histogram of given counts, one panel per difficulty, target marked."""
    grouped = givens_by_difficulty(records)
    if not grouped:
        raise ValueError("No puzzles to plot")
    names = list(grouped.keys())

    fig, axes = plt.subplots(1, len(names), figsize=(4.5 * len(names), 4))
    if len(names) == 1:
        axes = [axes]

    for ax, name in zip(axes, names):
        values = np.array(grouped[name])
        expected = CELL_COUNT - Difficulty(name).removal_count
        bins = np.arange(values.min() - 0.5, values.max() + 1.5, 1)

        ax.hist(
            values, bins=bins, color=DIFF_COLORS[name], alpha=0.7,
            edgecolor="black", linewidth=0.5,
        )
        ax.axvline(
            x=expected, color="black", linestyle="--", linewidth=2,
            label=f"81 - target = {expected}",
        )
        ax.axvline(
            x=values.mean(), color="darkgray", linestyle=":", linewidth=2,
            label=f"mean = {values.mean():.1f}",
        )
        ax.set_xlabel("Givens", fontsize=11)
        ax.set_ylabel("Puzzles", fontsize=11)
        ax.set_title(f"{DIFF_NAMES[name]} (n={len(values)})", fontsize=12, fontweight="bold")
        ax.legend(loc="upper left", fontsize=8)
        ax.grid(True, alpha=0.3)

    fig.suptitle("Clue Count by Difficulty", fontsize=14, fontweight="bold")
    plt.tight_layout()

    if save_dir:
        path = f"{save_dir}/{filename}"
        fig.savefig(path, dpi=150, bbox_inches="tight")
        print(f"✓ Saved: {path}")

    if show:
        plt.show()
    return fig


# ============================================================================
# Generation time plot
# ============================================================================


def plot_generation_time(
    records: list,
    save_dir: Optional[str] = None,
    filename: str = "generation_time.png",
    show: bool = True,
):
    """Box plot of per-puzzle generation time by difficulty."""
    times: Dict[str, List[float]] = {}
    for record in records:
        seconds = (
            record.get("generation_time_seconds", 0.0) if isinstance(record, dict)
            else record.generation_time_seconds
        )
        times.setdefault(_difficulty_name(record), []).append(seconds)
    names = [d.value for d in Difficulty if d.value in times]
    if not names:
        raise ValueError("No puzzles to plot")

    fig, ax = plt.subplots(figsize=(6, 4))
    box = ax.boxplot([times[n] for n in names], patch_artist=True)
    ax.set_xticks(range(1, len(names) + 1))
    ax.set_xticklabels([DIFF_NAMES[n] for n in names])
    for patch, name in zip(box["boxes"], names):
        patch.set_facecolor(DIFF_COLORS[name])
        patch.set_alpha(0.6)
    ax.set_ylabel("Seconds", fontsize=11)
    ax.set_title("Generation Time by Difficulty", fontsize=12, fontweight="bold")
    ax.grid(True, alpha=0.3, axis="y")
    plt.tight_layout()

    if save_dir:
        path = f"{save_dir}/{filename}"
        fig.savefig(path, dpi=150, bbox_inches="tight")
        print(f"✓ Saved: {path}")

    if show:
        plt.show()
    return fig


# ============================================================================
# Summary table
# ============================================================================


def print_givens_summary(records: list) -> Dict[str, Dict[str, float]]:
    """Print and return the per-difficulty givens table."""
    summary = summarize_givens(records)

    print("\n" + "=" * 70)
    print("GIVENS SUMMARY")
    print("=" * 70)
    print(
        f"\n{'Difficulty':<10} | {'N':<5} | {'Expected':<8} | {'Mean':<8} | "
        f"{'Std':<6} | {'Min':<4} | {'Max':<4}"
    )
    print("-" * 70)
    for name, stats in summary.items():
        print(
            f"{DIFF_NAMES[name]:<10} | {stats['count']:<5} | {stats['expected']:<8} | "
            f"{stats['mean']:<8.1f} | {stats['std']:<6.2f} | {stats['min']:<4} | "
            f"{stats['max']:<4}"
        )
    ok, message = check_monotonic_givens(summary)
    print(f"\n{'✓' if ok else '❌'} {message}")
    return summary
