"""Per-batch-item affine transform and its gradient."""

from __future__ import annotations

import numpy as np

EPSILON = 1e-8


def _as_batch(x) -> np.ndarray:
    array = np.asarray(x, dtype=np.float32)
    if array.ndim == 0:
        raise ValueError("input must have a batch dimension")
    return array


def _per_item(values, batch: np.ndarray, name: str) -> np.ndarray:
    array = np.asarray(values, dtype=np.float32).reshape(-1)
    if array.shape[0] != batch.shape[0]:
        raise ValueError(
            f"{name} must hold one value per batch item "
            f"({batch.shape[0]}), got {array.shape[0]}"
        )
    return array.reshape((-1,) + (1,) * (batch.ndim - 1))


def affine_scale(x, mean, scale, inverse=False) -> np.ndarray:
    """Return ``x * scale + mean`` per batch item, or its inverse.

    With ``inverse`` set, computes ``(x - mean) / (scale + 1e-8)``.
    """
    data = _as_batch(x)
    m = _per_item(mean, data, "mean")
    s = _per_item(scale, data, "scale")
    if inverse:
        result = (data - m) / (s + np.float32(EPSILON))
    else:
        result = data * s + m
    return result.astype(np.float32)


def affine_scale_gradient(x, scale, dy, inverse=False) -> np.ndarray:
    """Gradient of :func:`affine_scale` with respect to its input."""
    data = _as_batch(x)
    grad = np.asarray(dy, dtype=np.float32)
    if grad.size != data.size:
        raise ValueError("gradient must have as many values as the input")
    grad = grad.reshape(data.shape)
    s = _per_item(scale, data, "scale")
    if inverse:
        result = grad / (s + np.float32(EPSILON))
    else:
        result = grad * s
    return result.astype(np.float32)