"""Forward and backward passes of a small classifier on random data."""

from __future__ import annotations

import argparse
import math
from dataclasses import dataclass

import numpy as np

from dreamnet.cout import format_tensor
from dreamnet.nn import (
    fc,
    fc_gradient,
    sigmoid,
    sigmoid_gradient,
    softmax_with_loss,
    softmax_with_loss_gradient,
)

BATCH = 16
FEATURES = 100
CLASSES = 10


@dataclass(frozen=True, eq=False)
class IntroResult:
    """Values left in the workspace after the last run."""

    x: np.ndarray
    weights: np.ndarray
    bias: np.ndarray
    softmax: np.ndarray
    loss: float
    weights_grad: np.ndarray
    bias_grad: np.ndarray


def _xavier(rng: np.random.Generator, shape: tuple[int, int]) -> np.ndarray:
    bound = math.sqrt(3.0 / shape[1])
    return rng.uniform(-bound, bound, size=shape).astype(np.float32)


def _batch(rng: np.random.Generator) -> tuple[np.ndarray, np.ndarray]:
    data = rng.random((BATCH, FEATURES)).astype(np.float32)
    labels = rng.integers(0, CLASSES, size=BATCH).astype(np.int32)
    return data, labels


def train_intro(rounds=100, runs_per_round=10, seed=None) -> IntroResult:
    """Feed fresh random batches and run the net on each several times.

    The net computes gradients but has no update step, so the parameters
    keep their initial values.
    """
    if rounds < 1 or runs_per_round < 1:
        raise ValueError("rounds and runs per round must be at least 1")
    rng = np.random.default_rng(seed)
    x = rng.random((4, 3, 2)).astype(np.float32)
    data, labels = _batch(rng)
    weights = _xavier(rng, (CLASSES, FEATURES))
    bias = np.zeros(CLASSES, dtype=np.float32)

    for _ in range(rounds):
        data, labels = _batch(rng)
        for _ in range(runs_per_round):
            fc1 = fc(data, weights, bias)
            pred = sigmoid(fc1)
            probs, loss = softmax_with_loss(pred, labels)
            dpred = softmax_with_loss_gradient(probs, labels, 1.0)
            dfc1 = sigmoid_gradient(pred, dpred)
            dw, db, _ = fc_gradient(data, weights, dfc1)

    return IntroResult(
        x=x,
        weights=weights,
        bias=bias,
        softmax=probs,
        loss=loss,
        weights_grad=dw,
        bias_grad=db,
    )


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Intro example.")
    parser.add_argument("--rounds", type=int, default=100, help="data batches")
    parser.add_argument("--runs", type=int, default=10, help="runs per batch")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    print()
    print("## Intro Tutorial ##")
    print()
    result = train_intro(args.rounds, args.runs, args.seed)
    print(format_tensor(result.x, "", result.x.size))
    print(format_tensor(result.x, "my_x", result.x.size), end="")
    print()
    print(format_tensor(result.softmax, "softmax", result.softmax.size), end="")
    print()
    loss = np.float32(result.loss)
    print(format_tensor(loss, "loss", 1), end="")
    return 0