"""
Binary Search Tree Demo -- Traversals, cloning, the three deletion cases,
successor/predecessor walks, and how insertion order shapes the tree.

Generates:
- viz/*.png -- Individual visualization files
- report.pdf -- Comprehensive PDF report
"""

import sys
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))
from binary_search_tree import BSTNode

SEED = 42
np.random.seed(SEED)

VIZ_DIR = Path(__file__).parent / "viz"
REPORT_PATH = Path(__file__).parent / "report.pdf"

SCENARIO_ROOT = 123
SCENARIO_VALUES = (65, 78, 126, 125, 234)
CLONE_FROM = 126

COLORS = {
    "node": "#3498db",
    "highlight": "#e74c3c",
    "successor": "#27ae60",
    "edge": "#2c3e50",
    "random": "steelblue",
    "sorted": "coral",
    "bound": "#9b59b6",
}


def build_tree(root_value, values) -> BSTNode:
    root = BSTNode(root_value)
    for value in values:
        root.insert(value)
    return root


def format_inorder(values: Sequence) -> str:
    return "Inorder: " + " ".join(str(v) for v in values)


def format_levels(levels: Sequence[Sequence]) -> List[str]:
    return [f"Level {depth} nodes: " + " ".join(str(v) for v in level)
            for depth, level in enumerate(levels, start=1)]


def scenario_lines() -> List[str]:
    root = build_tree(SCENARIO_ROOT, SCENARIO_VALUES)
    subtree = root.search(CLONE_FROM).clone()
    lines = [format_inorder(root.inorder()), ""]
    lines += [format_inorder(subtree.inorder()), ""]
    lines += format_levels(root.level_order())
    return lines


def tree_height(root: Optional[BSTNode]) -> int:
    if root is None:
        return 0
    return len(root.level_order())


def _layout(root: BSTNode) -> Dict[BSTNode, Tuple[float, float]]:
    """x is the in-order rank, y is minus the depth."""
    positions: Dict[BSTNode, Tuple[float, float]] = {}
    stack: List[Tuple[BSTNode, int]] = []
    node: Optional[BSTNode] = root
    depth = 0
    rank = 0
    while stack or node is not None:
        while node is not None:
            stack.append((node, depth))
            node = node.left
            depth += 1
        node, depth = stack.pop()
        positions[node] = (float(rank), float(-depth))
        rank += 1
        node = node.right
        depth += 1
    return positions


def draw_tree(ax, root: BSTNode, title: str, highlight=(), successors=()):
    positions = _layout(root)
    for node, (x, y) in positions.items():
        for child in (node.left, node.right):
            if child is not None:
                cx, cy = positions[child]
                ax.plot([x, cx], [y, cy], color=COLORS["edge"], linewidth=1.2, zorder=1)

    nodes = list(positions)
    xy = np.array([positions[n] for n in nodes])
    colors = [COLORS["highlight"] if n.value in highlight
              else COLORS["successor"] if n.value in successors
              else COLORS["node"] for n in nodes]
    ax.scatter(xy[:, 0], xy[:, 1], s=900, c=colors, edgecolors="white", zorder=2)
    for n, (x, y) in zip(nodes, xy):
        ax.text(x, y, str(n.value), ha="center", va="center", fontsize=9,
                color="white", fontweight="bold", zorder=3)

    ax.set_title(title, fontsize=10, fontweight="bold")
    ax.set_xlim(xy[:, 0].min() - 0.8, xy[:, 0].max() + 0.8)
    ax.set_ylim(xy[:, 1].min() - 0.8, 0.8)
    ax.axis("off")


# ---------------------------------------------------------------------------
# Example 1: Scenario -- in-order, subtree clone, level order
# ---------------------------------------------------------------------------
def example_1_scenario():
    """Build the sample tree, clone a subtree, print both traversals."""
    print("=" * 60)
    print("Example 1: In-order, Subtree Clone, Level Order")
    print("=" * 60)

    for line in scenario_lines():
        print(line)

    root = build_tree(SCENARIO_ROOT, SCENARIO_VALUES)
    subtree = root.search(CLONE_FROM).clone()
    subtree.insert(127)
    print(f"\n  Clone after inserting 127: {subtree.inorder()}")
    print(f"  Original is unchanged:     {root.inorder()}")

    fig, axes = plt.subplots(1, 2, figsize=(12, 5))
    draw_tree(axes[0], root, f"Tree rooted at {SCENARIO_ROOT}",
              highlight=(CLONE_FROM,))
    draw_tree(axes[1], subtree, f"Clone of subtree at {CLONE_FROM} (+127)")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "01_scenario.png", dpi=150)
    plt.close(fig)

    print()
    return [VIZ_DIR / "01_scenario.png"]


# ---------------------------------------------------------------------------
# Example 2: Deletion cases
# ---------------------------------------------------------------------------
def example_2_deletion_cases():
    """Remove a leaf, a one-child node and a two-child node in turn."""
    print("=" * 60)
    print("Example 2: Leaf, One-Child and Two-Child Removal")
    print("=" * 60)

    values = [30, 70, 20, 40, 60, 80, 35, 45, 42]
    root = build_tree(50, values)

    fig, axes = plt.subplots(2, 2, figsize=(14, 10))
    draw_tree(axes[0, 0], root, "Initial tree")
    print("  Initial:")
    for line in format_levels(root.level_order()):
        print(f"    {line}")

    cases = [
        (80, "Leaf removal (80)"),
        (45, "One-child removal (45)"),
        (30, "Two-child removal (30): successor 35 grafted"),
    ]
    for ax, (value, title) in zip([axes[0, 1], axes[1, 0], axes[1, 1]], cases):
        node = root.search(value)
        kind = node.immediate_child_count()
        successor = node.successor()
        removed = root.remove(value)
        print(f"\n  remove({value}) children={kind} -> {removed}")
        for line in format_levels(root.level_order()):
            print(f"    {line}")
        assert root.inorder() == sorted(root.inorder())
        marks = (successor.value,) if kind == 2 and successor is not None else ()
        draw_tree(ax, root, title, successors=marks)

    print(f"\n  remove(999) on absent value -> {root.remove(999)}")

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "02_deletion_cases.png", dpi=150)
    plt.close(fig)

    print()
    return [VIZ_DIR / "02_deletion_cases.png"]


# ---------------------------------------------------------------------------
# Example 3: Successor / predecessor walks
# ---------------------------------------------------------------------------
def example_3_successor_walks():
    """Walk the whole tree through parent links only."""
    print("=" * 60)
    print("Example 3: Successor and Predecessor Walks")
    print("=" * 60)

    root = build_tree(SCENARIO_ROOT, SCENARIO_VALUES)

    ascending = []
    node = root.min()
    while node is not None:
        ascending.append(node.value)
        node = node.successor()

    descending = []
    node = root.max()
    while node is not None:
        descending.append(node.value)
        node = node.predecessor()

    print(f"  min -> successor ...:   {ascending}")
    print(f"  max -> predecessor ...: {descending}")
    print(f"  successor of max:   {root.max().successor()}")
    print(f"  predecessor of min: {root.min().predecessor()}")
    assert ascending == root.inorder()
    assert descending == root.inorder()[::-1]

    print()


# ---------------------------------------------------------------------------
# Example 4: Insertion order vs height
# ---------------------------------------------------------------------------
def example_4_insertion_order():
    """Random insertion orders stay shallow; sorted input degenerates."""
    print("=" * 60)
    print("Example 4: Insertion Order and Tree Height")
    print("=" * 60)

    sizes = [15, 31, 63, 127, 255]
    trials = 50
    mean_heights = []
    for n in sizes:
        heights = []
        for _ in range(trials):
            order = np.random.permutation(n).tolist()
            root = build_tree(order[0], order[1:])
            heights.append(tree_height(root))
        mean_heights.append(float(np.mean(heights)))
        sorted_height = tree_height(build_tree(0, range(1, n)))
        print(f"  n={n:4d}: random mean height={mean_heights[-1]:6.2f}, "
              f"sorted height={sorted_height}, "
              f"lower bound={int(np.ceil(np.log2(n + 1)))}")

    fig, ax = plt.subplots(figsize=(10, 6))
    ax.plot(sizes, mean_heights, "o-", color=COLORS["random"], linewidth=2,
            label=f"Random order (mean of {trials})")
    ax.plot(sizes, sizes, "s--", color=COLORS["sorted"], linewidth=2,
            label="Sorted order")
    ax.plot(sizes, np.ceil(np.log2(np.array(sizes) + 1)), "^:",
            color=COLORS["bound"], linewidth=2, label="Perfectly balanced")
    ax.set_xscale("log", base=2)
    ax.set_yscale("log", base=2)
    ax.set_xlabel("Number of values")
    ax.set_ylabel("Height (levels)")
    ax.set_title("Height of an Unbalanced BST by Insertion Order",
                 fontsize=14, fontweight="bold")
    ax.legend(fontsize=10)
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "04_insertion_order.png", dpi=150)
    plt.close(fig)

    print()
    return [VIZ_DIR / "04_insertion_order.png"]


def generate_pdf_report(all_figures):
    """Generate PDF report with all visualizations."""
    print("=" * 60)
    print("Generating PDF Report")
    print("=" * 60)

    with PdfPages(REPORT_PATH) as pdf:
        fig, ax = plt.subplots(figsize=(10, 7))
        ax.axis("off")
        ax.text(0.5, 0.7, "Binary Search Tree", fontsize=28, fontweight="bold",
                ha="center", va="center", transform=ax.transAxes)
        ax.text(0.5, 0.55, "Parent-linked nodes, deletion cases, traversals",
                fontsize=16, ha="center", va="center", transform=ax.transAxes,
                color="gray")
        ax.text(0.5, 0.25, f"Seed: {SEED}",
                fontsize=11, ha="center", va="center", transform=ax.transAxes,
                color="#888888")
        fig.tight_layout()
        pdf.savefig(fig)
        plt.close(fig)

        titles = [
            "Example 1: Sample Tree and Subtree Clone",
            "Example 2: Deletion Cases",
            "Example 4: Insertion Order and Height",
        ]

        for fig_path, title in zip(all_figures, titles):
            if fig_path.exists():
                img = plt.imread(str(fig_path))
                fig, ax = plt.subplots(figsize=(11, 8))
                ax.imshow(img)
                ax.axis("off")
                ax.set_title(title, fontsize=14, fontweight="bold", pad=10)
                fig.tight_layout()
                pdf.savefig(fig)
                plt.close(fig)

    print(f"  Report saved to: {REPORT_PATH}")
    print()


def main():
    VIZ_DIR.mkdir(exist_ok=True)

    print()
    print("*" * 60)
    print("  BINARY SEARCH TREE -- DEMO")
    print(f"  Seed: {SEED}")
    print("*" * 60)
    print()

    all_figures = []

    all_figures.extend(example_1_scenario())
    all_figures.extend(example_2_deletion_cases())
    example_3_successor_walks()
    all_figures.extend(example_4_insertion_order())

    generate_pdf_report(all_figures)

    print("=" * 60)
    print("DEMO COMPLETE")
    print("=" * 60)
    print(f"  Visualizations: {VIZ_DIR}/")
    for f in sorted(VIZ_DIR.glob("*.png")):
        print(f"    - {f.name}")
    print(f"  PDF Report:     {REPORT_PATH}")
    print()


if __name__ == "__main__":
    main()
