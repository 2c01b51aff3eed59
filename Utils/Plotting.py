from typing import List, Optional, Sequence, Tuple

import numpy as np
import matplotlib.pyplot as plt


def plot_signals(times: np.ndarray, rows: Sequence[np.ndarray], labels: Sequence[str], colors: Sequence[str],
                 xlabel: str, ylabel: str, title: str = "", reference: Optional[float] = None,
                 reference_color: str = "tab:green", show: bool = True,
                 save_path: Optional[str] = None) -> Tuple[plt.Figure, plt.Axes]:
    """
    Plot logged signals against their sample times.

    Args:
        times: Sample times, shape (N,)
        rows: One array of shape (N,) per signal
        labels: Legend label per signal
        colors: Matplotlib color per signal
        xlabel, ylabel, title: Axis labels and figure title
        reference: If given, a constant line from the first to the last sample time
        show: Open the plot window (blocks until closed)
        save_path: If given, the figure is also written to this file

    Returns:
        (fig, ax)
    """
    if len(rows) != len(labels) or len(rows) != len(colors):
        raise ValueError(f"Got {len(rows)} signals, {len(labels)} labels and {len(colors)} colors.")

    fig, ax = plt.subplots(figsize=(10, 6))
    for row, label, color in zip(rows, labels, colors):
        ax.plot(times, row, color=color, label=label)

    if reference is not None and len(times) > 0:
        ax.plot([times[0], times[-1]], [reference, reference], color=reference_color, label='Reference')

    ax.set_xlabel(xlabel)
    ax.set_ylabel(ylabel)
    if title:
        ax.set_title(title)
    ax.grid(True, alpha=0.3)
    ax.legend()
    plt.tight_layout()

    if save_path is not None:
        fig.savefig(save_path, dpi=150)
        print(f"[Plot] Saved figure to {save_path}")
    if show:
        plt.show()
    return fig, ax


def signal_rows(data: np.ndarray, indices: List[int]) -> List[np.ndarray]:
    """Pick rows of a VectorLog data matrix (one row per logged signal)."""
    return [np.asarray(data[i, :]) for i in indices]
