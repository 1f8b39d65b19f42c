"""Sine-to-cosine mapping task used to exercise the network end to end."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class SineCosineTask:
    """Train/test sequences for the map ``sin(f t) -> cos(f t)``.

    Inputs and targets have shape (T, 1); test samples continue the time axis
    right after the training samples.
    """

    train_inputs: np.ndarray
    train_targets: np.ndarray
    test_inputs: np.ndarray
    test_targets: np.ndarray
    frequency: float

    @property
    def train_len(self) -> int:
        return int(self.train_inputs.shape[0])

    @property
    def test_len(self) -> int:
        return int(self.test_inputs.shape[0])


def make_sine_cosine_task(
    train_len: int = 100, test_len: int = 50, frequency: float = 0.1
) -> SineCosineTask:
    """Generate the sine/cosine sequences.

    Args:
        train_len: Number of training steps, ``t = 0 .. train_len - 1``.
        test_len: Number of test steps, ``t = train_len .. train_len + test_len - 1``.
        frequency: Angular step ``f`` in ``sin(f t)``.

    Returns:
        SineCosineTask: Column-vector sequences for training and testing.

    Example:
        >>> task = make_sine_cosine_task(3, 2)
        >>> task.train_inputs.shape, task.test_inputs.shape
        ((3, 1), (2, 1))
    """
    if train_len < 1:
        raise ValueError("train_len must be >= 1")
    if test_len < 1:
        raise ValueError("test_len must be >= 1")

    t_train = np.arange(train_len, dtype=float)
    t_test = np.arange(train_len, train_len + test_len, dtype=float)
    return SineCosineTask(
        train_inputs=np.sin(frequency * t_train).reshape(-1, 1),
        train_targets=np.cos(frequency * t_train).reshape(-1, 1),
        test_inputs=np.sin(frequency * t_test).reshape(-1, 1),
        test_targets=np.cos(frequency * t_test).reshape(-1, 1),
        frequency=float(frequency),
    )
