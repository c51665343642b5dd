"""Basic network operators used by the training examples, with gradients."""

from __future__ import annotations

import numpy as np

_LOG_FLOOR = np.float32(1e-20)


def _matrix(x) -> np.ndarray:
    data = np.asarray(x, dtype=np.float32)
    if data.ndim == 0:
        raise ValueError("input must have a batch dimension")
    return data.reshape(data.shape[0], -1)


def _weights(w, columns: int) -> np.ndarray:
    weights = np.asarray(w, dtype=np.float32)
    if weights.ndim != 2:
        raise ValueError(f"weights must be 2-D, got {weights.ndim}-D")
    if weights.shape[1] != columns:
        raise ValueError(
            f"weights take {weights.shape[1]} inputs, data has {columns}"
        )
    return weights


def _labels(labels, rows: int, classes: int) -> np.ndarray:
    targets = np.asarray(labels)
    if targets.ndim != 1 or targets.shape[0] != rows:
        raise ValueError("labels must be 1-D with one value per row")
    targets = targets.astype(np.int64)
    if targets.size and (targets.min() < 0 or targets.max() >= classes):
        raise ValueError("label outside the range of classes")
    return targets


def fc(x, w, b) -> np.ndarray:
    """Fully connected layer: ``x @ w.T + b`` with ``x`` flattened per item."""
    data = _matrix(x)
    weights = _weights(w, data.shape[1])
    bias = np.asarray(b, dtype=np.float32).reshape(-1)
    if bias.size != weights.shape[0]:
        raise ValueError(
            f"bias must hold {weights.shape[0]} values, got {bias.size}"
        )
    return (data @ weights.T + bias).astype(np.float32)


def fc_gradient(x, w, dy) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Gradient of :func:`fc`, returned as ``(dw, db, dx)``."""
    data = _matrix(x)
    weights = _weights(w, data.shape[1])
    grad = np.asarray(dy, dtype=np.float32)
    if grad.size != data.shape[0] * weights.shape[0]:
        raise ValueError("gradient does not match the layer output")
    grad = grad.reshape(data.shape[0], weights.shape[0])
    dw = (grad.T @ data).astype(np.float32)
    db = grad.sum(axis=0, dtype=np.float32)
    dx = (grad @ weights).reshape(np.shape(x)).astype(np.float32)
    return dw, db, dx


def sigmoid(x) -> np.ndarray:
    """Elementwise logistic function."""
    data = np.asarray(x, dtype=np.float32)
    return (1.0 / (1.0 + np.exp(-data))).astype(np.float32)


def sigmoid_gradient(y, dy) -> np.ndarray:
    """Gradient of :func:`sigmoid` given its output ``y``."""
    out = np.asarray(y, dtype=np.float32)
    grad = np.asarray(dy, dtype=np.float32)
    if out.shape != grad.shape:
        raise ValueError("output and gradient must have the same shape")
    return (grad * out * (1.0 - out)).astype(np.float32)


def softmax_with_loss(logits, labels) -> tuple[np.ndarray, float]:
    """Row-wise softmax and the mean cross-entropy against ``labels``."""
    scores = np.asarray(logits, dtype=np.float32)
    if scores.ndim != 2:
        raise ValueError(f"logits must be 2-D, got {scores.ndim}-D")
    if scores.shape[0] == 0:
        raise ValueError("logits must hold at least one row")
    targets = _labels(labels, scores.shape[0], scores.shape[1])
    shifted = np.exp(scores - scores.max(axis=1, keepdims=True))
    probs = (shifted / shifted.sum(axis=1, keepdims=True)).astype(np.float32)
    picked = probs[np.arange(scores.shape[0]), targets]
    loss = float(-np.log(np.maximum(picked, _LOG_FLOOR)).mean())
    return probs, loss


def softmax_with_loss_gradient(softmax, labels, dloss=1.0) -> np.ndarray:
    """Gradient of the loss of :func:`softmax_with_loss` w.r.t. the logits."""
    probs = np.asarray(softmax, dtype=np.float32)
    if probs.ndim != 2 or probs.shape[0] == 0:
        raise ValueError("softmax must be 2-D with at least one row")
    targets = _labels(labels, probs.shape[0], probs.shape[1])
    grad = probs.copy()
    grad[np.arange(probs.shape[0]), targets] -= 1.0
    return (grad * np.float32(dloss) / np.float32(probs.shape[0])).astype(
        np.float32
    )


def squared_l2_distance(a, b) -> np.ndarray:
    """Half the squared Euclidean distance between matching rows."""
    left = np.asarray(a, dtype=np.float32)
    right = np.asarray(b, dtype=np.float32)
    if left.shape != right.shape:
        raise ValueError("inputs must have the same shape")
    diff = _matrix(left) - _matrix(right)
    return (0.5 * np.einsum("ij,ij->i", diff, diff)).astype(np.float32)


def squared_l2_distance_gradient(a, b, dy) -> tuple[np.ndarray, np.ndarray]:
    """Gradient of :func:`squared_l2_distance` as ``(da, db)``."""
    left = np.asarray(a, dtype=np.float32)
    right = np.asarray(b, dtype=np.float32)
    if left.shape != right.shape:
        raise ValueError("inputs must have the same shape")
    diff = _matrix(left) - _matrix(right)
    grad = np.asarray(dy, dtype=np.float32).reshape(-1)
    if grad.size != diff.shape[0]:
        raise ValueError(f"gradient must hold {diff.shape[0]} values")
    da = (diff * grad[:, None]).reshape(left.shape).astype(np.float32)
    return da, -da


def averaged_loss(x) -> float:
    """Mean of all values."""
    data = np.asarray(x, dtype=np.float32)
    if data.size == 0:
        raise ValueError("cannot average an empty tensor")
    return float(data.mean(dtype=np.float32))


def step_learning_rate(base_lr, iteration, stepsize=1, gamma=1.0) -> float:
    """Step policy: ``base_lr * gamma ** (iteration // stepsize)``."""
    if stepsize <= 0:
        raise ValueError("stepsize must be positive")
    return float(base_lr) * float(gamma) ** (int(iteration) // int(stepsize))