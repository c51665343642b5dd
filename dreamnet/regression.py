"""Linear regression trained with plain gradient descent on noisy samples."""

from __future__ import annotations

import argparse
from dataclasses import dataclass

import numpy as np

from dreamnet.cout import format_tensor
from dreamnet.nn import (
    averaged_loss,
    fc,
    fc_gradient,
    squared_l2_distance,
    squared_l2_distance_gradient,
    step_learning_rate,
)

W_TRUE = (2.0, 1.5)
B_TRUE = (0.5,)
BATCH = 64
BASE_LR = -0.1
STEPSIZE = 20
GAMMA = 0.9
REPORT_EVERY = 10


@dataclass(frozen=True, eq=False)
class RegressionResult:
    """Parameters before and after training, the ground truth, and a log of
    ``(step, first weight, bias, loss)`` every ten steps."""

    w_before: np.ndarray
    b_before: np.ndarray
    w: np.ndarray
    b: np.ndarray
    w_true: np.ndarray
    b_true: np.ndarray
    history: tuple[tuple[int, float, float, float], ...]


def train_toy_regression(steps=100, seed=None) -> RegressionResult:
    """Fit ``y = x @ W.T + B`` to samples of the true line plus unit noise."""
    if steps < 0:
        raise ValueError("steps must not be negative")
    rng = np.random.default_rng(seed)
    w_true = np.array([W_TRUE], dtype=np.float32)
    b_true = np.array(B_TRUE, dtype=np.float32)
    w = rng.uniform(-1.0, 1.0, size=(1, 2)).astype(np.float32)
    b = np.zeros(1, dtype=np.float32)
    w_before, b_before = w.copy(), b.copy()

    history = []
    iteration = 0
    for step in range(1, steps + 1):
        x = rng.standard_normal((BATCH, 2)).astype(np.float32)
        noise = rng.standard_normal((BATCH, 1)).astype(np.float32)
        y_noise = fc(x, w_true, b_true) + noise
        y_pred = fc(x, w, b)
        dist = squared_l2_distance(y_noise, y_pred)
        loss = averaged_loss(dist)

        ddist = np.full(dist.shape, 1.0 / dist.size, dtype=np.float32)
        _, dpred = squared_l2_distance_gradient(y_noise, y_pred, ddist)
        dw, db, _ = fc_gradient(x, w, dpred)

        iteration += 1
        lr = np.float32(step_learning_rate(BASE_LR, iteration, STEPSIZE, GAMMA))
        w = (w + dw * lr).astype(np.float32)
        b = (b + db * lr).astype(np.float32)

        if step % REPORT_EVERY == 0:
            history.append((step, float(w[0, 0]), float(b[0]), loss))

    return RegressionResult(
        w_before=w_before,
        b_before=b_before,
        w=w,
        b=b,
        w_true=w_true,
        b_true=b_true,
        history=tuple(history),
    )


def _show(name: str, values: np.ndarray) -> str:
    return format_tensor(values, name, values.size)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Toy regression example.")
    parser.add_argument("--steps", type=int, default=100, help="training runs")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    print()
    print("## Toy Regression Tutorial ##")
    print()
    result = train_toy_regression(args.steps, args.seed)
    print(_show("W before", result.w_before), end="")
    print(_show("B before", result.b_before), end="")
    for step, w, b, loss in result.history:
        print(f"step: {step} W: {w:g} B: {b:g} loss: {loss:g}")
    print(_show("W after", result.w), end="")
    print(_show("B after", result.b), end="")
    print(_show("W ground truth", result.w_true), end="")
    print(_show("B ground truth", result.b_true), end="")
    return 0