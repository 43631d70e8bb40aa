"""
Growth Policy Demo -- occupancy diagrams, timing benchmarks and load-factor
probes for the six array-backed containers against the three baselines.

Generates:
- viz/*.png -- Individual visualization files
- report.pdf -- Comprehensive PDF report
"""

import logging
import sys
from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))
from array_queue import QueueConservative, QueueNaive, QueueReclaiming
from split_deque import DequeConservative, DequeNaive, DequeReclaiming
from workloads import (
    CONTAINERS,
    MEMORY_PROBES,
    SEED,
    run_benchmark,
    run_memory_probe,
)

np.random.seed(SEED)

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)

STEP = 1000
SORT_STEP = 200
POINTS = 5
RUNS = 3

COLORS = {
    "VectorBaseline": "#7f8c8d",
    "DequeBaseline": "#2c3e50",
    "ListBaseline": "#95a5a6",
    "QueueNaive": "#e74c3c",
    "QueueReclaiming": "#3498db",
    "QueueConservative": "#27ae60",
    "DequeNaive": "#f39c12",
    "DequeReclaiming": "#9b59b6",
    "DequeConservative": "#1abc9c",
}

VARIANTS = [
    QueueNaive, QueueReclaiming, QueueConservative,
    DequeNaive, DequeReclaiming, DequeConservative,
]

TIMED = [
    ("fill_back", STEP),
    ("fill_back_reserved", STEP),
    ("fill_front", STEP),
    ("fill_front_reserved", STEP),
    ("queue_cycle", STEP),
    ("zigzag", STEP),
    ("traverse", STEP),
    ("shuffle", STEP),
    ("quicksort", SORT_STEP),
]


# ---------------------------------------------------------------------------
# Example 1: Occupancy diagrams
# ---------------------------------------------------------------------------
def example_1_occupancy():
    """Replay one short push/pop script and print every variant's buffers."""
    print("=" * 60)
    print("Example 1: Occupancy Diagrams")
    print("=" * 60)

    script = [
        ("push_back", 1), ("push_back", 2), ("push_front", 0),
        ("pop_front", None), ("push_front", 9), ("push_front", 8),
        ("pop_back", None), ("push_back", 7),
    ]

    for cls in VARIANTS:
        container = cls()
        print(f"\n  {cls.__name__}")
        for operation, value in script:
            method = getattr(container, operation)
            if value is None:
                method()
            else:
                method(value)
            label = f"{operation}({value})" if value is not None else f"{operation}()"
            print(f"    {label:<16} {container.draw():<28} {container.to_list()}")
        print(f"    load factor: {container.load_factor():.3f}")


# ---------------------------------------------------------------------------
# Example 2: Timing benchmarks
# ---------------------------------------------------------------------------
def _plot_result(ax, result, ylabel):
    for name, values in result.series.items():
        ax.plot(result.sizes, values, "o-", color=COLORS[name],
                linewidth=1.5, markersize=4, label=name)
    ax.set_xlabel("n")
    ax.set_ylabel(ylabel)
    title = result.name if result.payload is None else f"{result.name} ({result.payload})"
    if result.skipped:
        title += f"\nnot reported: {', '.join(result.skipped)}"
    ax.set_title(title, fontsize=9, fontweight="bold")
    ax.grid(True, alpha=0.3)
    ax.legend(fontsize=6)


def example_2_timing():
    """Time each workload for all reported containers."""
    print("\n" + "=" * 60)
    print("Example 2: Timing Benchmarks")
    print("=" * 60)

    results = []
    for workload, step in TIMED:
        result = run_benchmark(workload, step, payload="small", points=POINTS, runs=RUNS)
        results.append(result)
        largest = result.sizes[-1]
        print(f"\n  {workload} (n = {largest})")
        ranked = sorted(result.series.items(), key=lambda item: item[1][-1])
        for name, values in ranked:
            print(f"    {name:<20} {values[-1]:10.2f} ms")

    fig, axes = plt.subplots(3, 3, figsize=(18, 15))
    for ax, result in zip(axes.flat, results):
        _plot_result(ax, result, "time (ms)")
    plt.tight_layout()
    plt.savefig(VIZ_DIR / "01_timing.png", dpi=120)
    plt.close(fig)
    return results


# ---------------------------------------------------------------------------
# Example 3: Load-factor probes
# ---------------------------------------------------------------------------
def example_3_load_factor():
    """Average instantaneous load factor over each probe."""
    print("\n" + "=" * 60)
    print("Example 3: Load Factor")
    print("=" * 60)

    results = [run_memory_probe(probe, STEP, points=POINTS) for probe in MEMORY_PROBES]
    for result in results:
        print(f"\n  {result.name}")
        for name, values in result.series.items():
            print(f"    {name:<20} mean load {np.mean(values):.3f}")

    fig, axes = plt.subplots(2, 2, figsize=(14, 11))
    for ax, result in zip(axes.flat, results):
        _plot_result(ax, result, "load factor")
        ax.set_ylim(0, 1.05)
    plt.tight_layout()
    plt.savefig(VIZ_DIR / "02_load_factor.png", dpi=120)
    plt.close(fig)
    return results


# ---------------------------------------------------------------------------
# PDF report
# ---------------------------------------------------------------------------
def generate_pdf_report():
    print("\n" + "=" * 60)
    print("Generating PDF report")
    print("=" * 60)

    report_path = Path(__file__).parent / "report.pdf"
    viz_files = sorted(VIZ_DIR.glob("*.png"))

    with PdfPages(report_path) as pdf:
        fig = plt.figure(figsize=(11, 8.5))
        ax = fig.add_axes([0, 0, 1, 1])
        ax.axis("off")
        ax.text(0.5, 0.7, "Growth Policies for Array-Backed Deques", fontsize=22,
                ha="center", fontweight="bold")
        ax.text(0.5, 0.6, f"{len(CONTAINERS)} containers, {len(TIMED)} workloads, "
                f"{len(MEMORY_PROBES)} load-factor probes",
                fontsize=13, ha="center")
        ax.text(0.5, 0.5, "Naive / Reclaiming / Conservative x single buffer / split buffers",
                fontsize=11, ha="center", family="monospace")
        pdf.savefig(fig)
        plt.close(fig)

        for viz_file in viz_files:
            fig = plt.figure(figsize=(11, 8.5))
            fig.suptitle(viz_file.stem.replace("_", " ").title(), fontsize=14,
                         fontweight="bold", y=0.98)
            img = plt.imread(str(viz_file))
            ax = fig.add_axes([0.02, 0.02, 0.96, 0.92])
            ax.imshow(img)
            ax.axis("off")
            pdf.savefig(fig)
            plt.close(fig)

    print(f"  Report saved: report.pdf ({len(viz_files) + 1} pages)")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------
def main():
    logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")
    print("Growth Policy Demo")
    print("=" * 60)
    print(f"Seed: {SEED}")
    print(f"Sizes: {STEP} .. {STEP * POINTS} (quicksort {SORT_STEP} .. {SORT_STEP * POINTS})")
    print()

    example_1_occupancy()
    example_2_timing()
    example_3_load_factor()
    generate_pdf_report()

    print("\n" + "=" * 60)
    print("All examples completed successfully.")
    print(f"Visualizations: {VIZ_DIR}/")
    print(f"Report: {Path(__file__).parent / 'report.pdf'}")
    print("=" * 60)


if __name__ == "__main__":
    main()
