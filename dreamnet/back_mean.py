"""Mean over the trailing dimensions of a tensor, and its gradient."""

from __future__ import annotations

import math

import numpy as np


def _split_dims(shape: tuple[int, ...], count: int) -> tuple[tuple[int, ...], int]:
    if count < 0:
        raise ValueError("count must not be negative")
    if count > len(shape):
        raise ValueError(
            f"cannot reduce {count} dimensions of a {len(shape)}-D tensor"
        )
    kept = shape[: len(shape) - count]
    reduced = math.prod(shape[len(shape) - count :])
    return kept, reduced


def back_mean(x, count=1) -> np.ndarray:
    """Average ``x`` over its last ``count`` dimensions."""
    data = np.asarray(x, dtype=np.float32)
    kept, reduced = _split_dims(data.shape, count)
    if reduced == 0:
        return np.zeros(kept, dtype=np.float32)
    grouped = data.reshape(kept + (reduced,))
    return (grouped.sum(axis=-1, dtype=np.float32) / np.float32(reduced)).astype(
        np.float32
    )


def back_mean_gradient(x, dy, count=1) -> np.ndarray:
    """Spread each gradient value evenly over the elements it averaged."""
    data = np.asarray(x, dtype=np.float32)
    kept, reduced = _split_dims(data.shape, count)
    grad = np.asarray(dy, dtype=np.float32)
    if grad.size != math.prod(kept):
        raise ValueError(
            f"gradient must hold {math.prod(kept)} values, got {grad.size}"
        )
    if reduced == 0:
        return np.zeros(data.shape, dtype=np.float32)
    share = grad.reshape(kept + (1,)) / np.float32(reduced)
    spread = np.broadcast_to(share, kept + (reduced,))
    return np.ascontiguousarray(spread.reshape(data.shape), dtype=np.float32)