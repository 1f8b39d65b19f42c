from __future__ import annotations

from pathlib import Path
from typing import Optional

import matplotlib.pyplot as plt
import numpy as np

from .experiments.sine_cosine_experiment import SineCosineResult


DEFAULT_INPUT_COLOR = "#9e9e9e"
DEFAULT_TARGET_COLOR = "#21b0ff"  # neon blue
DEFAULT_PREDICT_COLOR = "#ff4f7b"


def plot_predictions(
    result: SineCosineResult,
    title: str = "",
    *,
    ax: Optional[plt.Axes] = None,
    show: bool = False,
) -> plt.Axes:
    """Plot test inputs, targets and readout predictions against time."""
    if ax is None:
        _, ax = plt.subplots(figsize=(10, 4))
    t = np.arange(result.predictions.shape[0])
    ax.plot(t, result.test_inputs[:, 0], color=DEFAULT_INPUT_COLOR, lw=1.0, ls="--", label="input")
    ax.plot(t, result.test_targets[:, 0], color=DEFAULT_TARGET_COLOR, lw=1.5, label="target")
    ax.plot(t, result.predictions[:, 0], color=DEFAULT_PREDICT_COLOR, lw=1.5, label="prediction")
    ax.set_xlabel("test step")
    ax.set_ylabel("value")
    ax.set_title(title or f"test NRMSE = {result.test_nrmse:.3f}")
    ax.legend(loc="upper right")
    if show:
        plt.show()
    return ax


def save_prediction_plot(result: SineCosineResult, path: str | Path) -> Path:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    fig, ax = plt.subplots(figsize=(10, 4))
    plot_predictions(result, ax=ax)
    fig.tight_layout()
    fig.savefig(p, dpi=150)
    plt.close(fig)
    return p
