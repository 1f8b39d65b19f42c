"""Configuration dataclass for the echo state network and its demo task."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Mapping

from .initializers import DEFAULT_INPUT_SCALE, DEFAULT_RESERVOIR_SCALE


@dataclass
class ESNConfig:
    """Hyperparameters fixed at construction time."""

    n_inputs: int = 1
    n_reservoir: int = 10
    n_outputs: int = 1
    leak_rate: float = 0.3
    input_scale: float = DEFAULT_INPUT_SCALE
    reservoir_scale: float = DEFAULT_RESERVOIR_SCALE
    ridge: float = 1e-2
    washout: int = 0
    pivot_tol: float = 1e-12
    train_len: int = 100
    test_len: int = 50
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.n_inputs < 1:
            raise ValueError("n_inputs must be >= 1")
        if self.n_reservoir < 1:
            raise ValueError("n_reservoir must be >= 1")
        if self.n_outputs < 1:
            raise ValueError("n_outputs must be >= 1")
        if not (0.0 < self.leak_rate <= 1.0):
            raise ValueError("leak_rate must be in (0, 1]")
        if self.input_scale < 0.0:
            raise ValueError("input_scale must be >= 0")
        if self.reservoir_scale < 0.0:
            raise ValueError("reservoir_scale must be >= 0")
        if self.ridge < 0.0:
            raise ValueError("ridge must be >= 0")
        if self.washout < 0:
            raise ValueError("washout must be >= 0")
        if self.pivot_tol < 0.0:
            raise ValueError("pivot_tol must be >= 0")
        if self.train_len < 1:
            raise ValueError("train_len must be >= 1")
        if self.test_len < 1:
            raise ValueError("test_len must be >= 1")
        if self.washout >= self.train_len:
            raise ValueError("washout must be < train_len")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _read_int(cfg: Mapping[str, Any], key: str) -> int:
    raw = cfg[key]
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be an integer, got {raw!r}")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        raw = raw.strip()
        try:
            return int(raw)
        except ValueError:
            raise ValueError(f"{key} must be an integer, got {raw!r}") from None
    val = float(raw)
    if not val.is_integer():
        raise ValueError(f"{key} must be an integer, got {raw!r}")
    return int(val)


def load_config(cfg: Mapping[str, Any] | None = None) -> ESNConfig:
    """Build an :class:`ESNConfig` from a plain mapping, e.g. parsed JSON.

    Missing keys keep their defaults; unknown keys are rejected.
    """
    if cfg is None:
        return ESNConfig()
    known = {f.name for f in fields(ESNConfig)}
    unknown = sorted(set(cfg) - known)
    if unknown:
        raise ValueError(f"unknown config keys: {unknown}")

    kwargs: Dict[str, Any] = {}
    for key in ("n_inputs", "n_reservoir", "n_outputs", "washout", "train_len", "test_len"):
        if key in cfg:
            kwargs[key] = _read_int(cfg, key)
    for key in ("leak_rate", "input_scale", "reservoir_scale", "ridge", "pivot_tol"):
        if key in cfg:
            kwargs[key] = float(cfg[key])
    if "seed" in cfg:
        kwargs["seed"] = None if cfg["seed"] is None else _read_int(cfg, "seed")
    return ESNConfig(**kwargs)
