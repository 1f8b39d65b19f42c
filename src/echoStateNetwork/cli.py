from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Sequence

from .config import ESNConfig, load_config
from .experiments.sine_cosine_experiment import run_sine_cosine_experiment


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Train an echo state network on sin(0.1 t) -> cos(0.1 t) and print test predictions."
    )
    parser.add_argument("--config", type=str, default=None, help="JSON file with ESNConfig fields")
    parser.add_argument("--n-reservoir", type=int, default=None)
    parser.add_argument("--leak-rate", type=float, default=None)
    parser.add_argument("--input-scale", type=float, default=None)
    parser.add_argument("--reservoir-scale", type=float, default=None)
    parser.add_argument("--ridge", type=float, default=None)
    parser.add_argument("--washout", type=int, default=None)
    parser.add_argument("--train-len", type=int, default=None)
    parser.add_argument("--test-len", type=int, default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--frequency", type=float, default=0.1)
    parser.add_argument("--output", type=str, default=None, help="write the result as JSON")
    parser.add_argument("--plot", type=str, default=None, help="save a prediction plot (PNG)")
    parser.add_argument("--verbose", "-v", action="store_true")
    return parser


def _resolve_config(args: argparse.Namespace) -> ESNConfig:
    raw: dict = {}
    if args.config is not None:
        with Path(args.config).open("r", encoding="utf-8") as f:
            raw.update(json.load(f))
    overrides = {
        "n_reservoir": args.n_reservoir,
        "leak_rate": args.leak_rate,
        "input_scale": args.input_scale,
        "reservoir_scale": args.reservoir_scale,
        "ridge": args.ridge,
        "washout": args.washout,
        "train_len": args.train_len,
        "test_len": args.test_len,
        "seed": args.seed,
    }
    raw.update({k: v for k, v in overrides.items() if v is not None})
    return load_config(raw)


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    cfg = _resolve_config(args)
    result = run_sine_cosine_experiment(cfg, frequency=args.frequency)

    print("Test predictions:")
    for t in range(result.predictions.shape[0]):
        print(
            f"t={t:3d}, input={result.test_inputs[t, 0]:.3f}, predict={result.predictions[t, 0]:.3f}"
        )
    print(f"\nTrain NRMSE: {result.train_nrmse:.4f}")
    print(f"Test NRMSE:  {result.test_nrmse:.4f}")

    if args.output is not None:
        result.save_json(args.output)
    if args.plot is not None:
        from .plot_utils import save_prediction_plot

        save_prediction_plot(result, args.plot)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
