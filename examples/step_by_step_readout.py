"""Drive a reservoir one step at a time, fit the readout, then read it out.

Run:
    python examples/step_by_step_readout.py
"""

from __future__ import annotations

import numpy as np

from echoStateNetwork import EchoStateNetwork


def main() -> None:
    rng = np.random.default_rng(0)
    esn = EchoStateNetwork(n_inputs=2, n_reservoir=30, n_outputs=2, leak_rate=0.5, rng=rng)

    t = np.arange(300, dtype=float)
    U = np.stack([np.sin(0.1 * t), np.cos(0.05 * t)], axis=1)
    D = np.stack([np.sin(0.1 * t) * np.cos(0.05 * t), np.sin(0.1 * (t - 3))], axis=1)

    states = []
    for u in U:
        states.append(esn.step(u))
    X = np.stack(states, axis=1)  # (n_reservoir, T)

    print("readout before fit:", esn.readout())
    esn.fit_states(X[:, 50:], D[50:].T)
    print("readout after fit: ", esn.readout())
    print("target at last step:", D[-1])
    print(f"spectral radius of W: {esn.spectral_radius():.3f}")


if __name__ == "__main__":
    main()
