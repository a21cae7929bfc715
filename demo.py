"""
Binary Heap Demo -- Worked scenarios, heap sort validation, build-heap vs
repeated insert cost, and comparison with the standard library heapq.

Generates:
- viz/*.png -- Individual visualization files
- report.pdf -- Comprehensive PDF report
"""

import sys
import time
import heapq
from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))
from binary_heap import BinaryHeap, HeapFullError

SEED = 42
np.random.seed(SEED)

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)

SIZES = [1_000, 2_000, 5_000, 10_000, 20_000, 50_000]


class Counted:
    """Wraps a value and counts every comparison made on it."""

    comparisons = 0

    __slots__ = ("value",)

    def __init__(self, value):
        self.value = value

    def __gt__(self, other):
        Counted.comparisons += 1
        return self.value > other.value

    def __lt__(self, other):
        Counted.comparisons += 1
        return self.value < other.value


def is_heap(heap):
    data = heap.to_list()
    return all(data[(i - 1) // 2] >= data[i] for i in range(1, len(data)))


def example_1_scenarios():
    """Step through the basic operations on a small heap."""
    print("=" * 60)
    print("Example 1: Basic Operations")
    print("=" * 60)

    heap = BinaryHeap(5)
    for v in [3, 1, 4, 1, 5]:
        heap.insert(v)
        print(f"insert({v}) -> storage: {heap}")
    print(f"top() = {heap.top()}, full() = {heap.full()}")

    try:
        heap.insert(9)
    except HeapFullError as e:
        print(f"insert(9) -> HeapFullError: {e}")

    order = []
    while not heap.empty():
        order.append(heap.extract_top())
    print(f"extract_top() order: {order}")

    built = BinaryHeap.from_array([3, 1, 4, 1, 5])
    print(f"from_array([3, 1, 4, 1, 5]) -> storage: {built}, top = {built.top()}")

    prio = BinaryHeap.from_array([1, 2, 3])
    prio.change_priority(prio.find(1), 10)
    print(f"change_priority(find(1), 10) on [1, 2, 3] -> top = {prio.top()}")

    removed = built.remove(built.find(4))
    print(f"remove(find(4)) -> {removed}, storage: {built}")

    levels = []
    data = BinaryHeap.from_array(list(range(1, 16))).to_list()
    start = 0
    while start < len(data):
        levels.append(data[start:2 * start + 1])
        start = 2 * start + 1

    fig, ax = plt.subplots(figsize=(10, 5))
    for depth, level in enumerate(levels):
        width = 2 ** depth
        for k, value in enumerate(level):
            x = (k + 0.5) / width
            y = -depth
            ax.scatter([x], [y], s=900, color="#3498db", zorder=3)
            ax.text(x, y, str(value), ha="center", va="center", color="white",
                    fontweight="bold", zorder=4)
            if depth > 0:
                px = (k // 2 + 0.5) / (width // 2)
                ax.plot([px, x], [y + 1, y], color="#2c3e50", linewidth=1, zorder=1)
    ax.set_title("Max-heap built from 1..15 (array order, level by level)")
    ax.axis("off")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "01_heap_layout.png", dpi=150)
    plt.close(fig)

    return fig, order


def example_2_heap_sort():
    """Heap sort via repeated extract_top, checked against sorted()."""
    print("\n" + "=" * 60)
    print("Example 2: Heap Sort Correctness")
    print("=" * 60)

    np.random.seed(SEED)
    trials = 200
    failures = 0
    lengths = np.random.randint(0, 300, size=trials)
    for n in lengths:
        values = np.random.randint(-100, 100, size=n).tolist()
        heap = BinaryHeap.from_array(values)
        if not is_heap(heap):
            failures += 1
            continue
        out = [heap.extract_top() for _ in range(len(values))]
        if out != sorted(values, reverse=True):
            failures += 1
    print(f"{trials} random arrays (length 0-299): {failures} failures")

    values = np.random.randint(0, 50, size=40).tolist()
    heap = BinaryHeap.from_array(values)
    out = [heap.extract_top() for _ in range(len(values))]

    fig, axes = plt.subplots(1, 2, figsize=(12, 5))
    axes[0].bar(range(len(values)), values, color="steelblue")
    axes[0].set_title("Input")
    axes[0].set_xlabel("Position")
    axes[0].set_ylabel("Value")
    axes[0].grid(True, alpha=0.3, axis="y")
    axes[1].bar(range(len(out)), out, color="coral")
    axes[1].set_title("extract_top() order")
    axes[1].set_xlabel("Position")
    axes[1].grid(True, alpha=0.3, axis="y")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "02_heap_sort.png", dpi=150)
    plt.close(fig)

    return fig, failures


def example_3_build_vs_insert():
    """Compare from_array (O(n)) with n calls to insert (O(n log n))."""
    print("\n" + "=" * 60)
    print("Example 3: Build Heap vs Repeated Insert")
    print("=" * 60)

    np.random.seed(SEED)
    build_cmp, insert_cmp = [], []
    build_time, insert_time = [], []

    print(f"{'n':<10} {'build cmp/n':<15} {'insert cmp/n':<15} {'build s':<12} {'insert s':<12}")
    print("-" * 64)
    for n in SIZES:
        values = [Counted(v) for v in np.random.rand(n)]

        Counted.comparisons = 0
        t0 = time.perf_counter()
        BinaryHeap.from_array(values)
        build_time.append(time.perf_counter() - t0)
        build_cmp.append(Counted.comparisons)

        Counted.comparisons = 0
        heap = BinaryHeap(n)
        t0 = time.perf_counter()
        for v in values:
            heap.insert(v)
        insert_time.append(time.perf_counter() - t0)
        insert_cmp.append(Counted.comparisons)

        print(f"{n:<10} {build_cmp[-1] / n:<15.3f} {insert_cmp[-1] / n:<15.3f} "
              f"{build_time[-1]:<12.4f} {insert_time[-1]:<12.4f}")

    sizes = np.array(SIZES)
    fig, axes = plt.subplots(1, 2, figsize=(12, 5))
    axes[0].plot(sizes, np.array(build_cmp) / sizes, "o-", color="#27ae60", linewidth=2, label="from_array")
    axes[0].plot(sizes, np.array(insert_cmp) / sizes, "s-", color="#e74c3c", linewidth=2, label="insert x n")
    axes[0].set_xscale("log")
    axes[0].set_xlabel("n")
    axes[0].set_ylabel("Comparisons per element")
    axes[0].set_title("Comparisons per Element")
    axes[0].legend()
    axes[0].grid(True, alpha=0.3)

    axes[1].plot(sizes, build_time, "o-", color="#27ae60", linewidth=2, label="from_array")
    axes[1].plot(sizes, insert_time, "s-", color="#e74c3c", linewidth=2, label="insert x n")
    axes[1].set_xlabel("n")
    axes[1].set_ylabel("Seconds")
    axes[1].set_title("Wall Time")
    axes[1].legend()
    axes[1].grid(True, alpha=0.3)

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "03_build_vs_insert.png", dpi=150)
    plt.close(fig)

    return fig, (build_cmp, insert_cmp)


def example_4_heapq_comparison():
    """Compare extraction order and speed with heapq on negated values."""
    print("\n" + "=" * 60)
    print("Example 4: Comparison with heapq")
    print("=" * 60)

    np.random.seed(SEED)
    ours_time, heapq_time = [], []
    for n in SIZES:
        values = np.random.randint(0, 1_000_000, size=n).tolist()

        t0 = time.perf_counter()
        heap = BinaryHeap.from_array(values)
        ours = [heap.extract_top() for _ in range(n)]
        ours_time.append(time.perf_counter() - t0)

        t0 = time.perf_counter()
        ref = [-v for v in values]
        heapq.heapify(ref)
        theirs = [-heapq.heappop(ref) for _ in range(n)]
        heapq_time.append(time.perf_counter() - t0)

        match = "match" if ours == theirs else "MISMATCH"
        print(f"n={n:<8} ours={ours_time[-1]:.4f}s heapq={heapq_time[-1]:.4f}s "
              f"ratio={ours_time[-1] / heapq_time[-1]:.1f}x  {match}")

    x = np.arange(len(SIZES))
    width = 0.35
    fig, ax = plt.subplots(figsize=(10, 6))
    ax.bar(x - width / 2, ours_time, width, label="BinaryHeap", color="steelblue")
    ax.bar(x + width / 2, heapq_time, width, label="heapq (C)", color="coral")
    ax.set_xticks(x)
    ax.set_xticklabels([str(n) for n in SIZES])
    ax.set_xlabel("n")
    ax.set_ylabel("Seconds (build + drain)")
    ax.set_title("Heap Sort Time: BinaryHeap vs heapq")
    ax.legend()
    ax.grid(True, alpha=0.3, axis="y")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "04_heapq_comparison.png", dpi=150)
    plt.close(fig)

    return fig, (ours_time, heapq_time)


def generate_pdf_report(image_files):
    """Generate comprehensive PDF report."""
    print("\n" + "=" * 60)
    print("Generating PDF Report")
    print("=" * 60)

    pdf_path = VIZ_DIR.parent / "report.pdf"

    with PdfPages(pdf_path) as pdf:
        fig = plt.figure(figsize=(11, 8.5))
        fig.text(0.5, 0.6, "Binary Heap", fontsize=36, ha="center", fontweight="bold")
        fig.text(0.5, 0.5, "Fixed-Capacity Array Implementation", fontsize=24, ha="center")
        fig.text(0.5, 0.35, "Demonstration & Analysis Report", fontsize=18, ha="center", style="italic")
        fig.text(0.5, 0.2, f"Seed: {SEED}", fontsize=12, ha="center", color="gray")
        pdf.savefig(fig)
        plt.close(fig)

        fig = plt.figure(figsize=(11, 8.5))
        fig.text(0.5, 0.95, "Summary", fontsize=24, ha="center", fontweight="bold")

        summary_text = """
This report demonstrates a fixed-capacity binary heap stored in a
pre-sized Python list. The implementation includes:

- insert / extract_top / top in O(log n)
- from_array build-heap in O(n)
- remove(index) without a sentinel value
- change_priority(index, value) with sift up or down
- find(value) as an O(n) linear scan
- max-heap by default, min-heap via min_heap=True

Key Findings:
  1. Extraction order always matches sorted(..., reverse=True)
  2. from_array uses a bounded number of comparisons per element
  3. Repeated insert grows with log n comparisons per element
  4. heapq (C) is faster, with identical output order
"""
        fig.text(0.1, 0.85, summary_text, fontsize=12, ha="left", va="top",
                 fontfamily="monospace", linespacing=1.5)
        pdf.savefig(fig)
        plt.close(fig)

        for title, img_file in image_files:
            page = plt.figure(figsize=(11, 8.5))
            page.text(0.5, 0.98, title, fontsize=14, ha="center", fontweight="bold")
            img = plt.imread(img_file)
            ax = page.add_axes([0.05, 0.05, 0.9, 0.88])
            ax.imshow(img)
            ax.axis("off")
            pdf.savefig(page)
            plt.close(page)

    print(f"PDF report saved to: {pdf_path}")
    return pdf_path


def main():
    print("\n" + "#" * 60)
    print("#" + " " * 21 + "BINARY HEAP DEMO" + " " * 21 + "#")
    print("#" * 60)
    print(f"\nRandom seed: {SEED}")
    print(f"Output directory: {VIZ_DIR}")

    example_1_scenarios()
    example_2_heap_sort()
    example_3_build_vs_insert()
    example_4_heapq_comparison()

    generate_pdf_report([
        ("Example 1: Heap Layout", VIZ_DIR / "01_heap_layout.png"),
        ("Example 2: Heap Sort", VIZ_DIR / "02_heap_sort.png"),
        ("Example 3: Build vs Insert", VIZ_DIR / "03_build_vs_insert.png"),
        ("Example 4: heapq Comparison", VIZ_DIR / "04_heapq_comparison.png"),
    ])

    print("\n" + "=" * 60)
    print("DEMO COMPLETE")
    print("=" * 60)
    print(f"\nGenerated files:")
    for f in sorted(VIZ_DIR.glob("*.png")):
        print(f"  - {f.relative_to(VIZ_DIR.parent)}")
    print(f"  - report.pdf")


if __name__ == "__main__":
    main()
