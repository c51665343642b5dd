"""Extract and scatter the main diagonal of an N-D tensor."""

from __future__ import annotations

import numpy as np


def _diagonal_indices(shape: tuple[int, ...], offset) -> np.ndarray:
    if not shape:
        raise ValueError("input must have at least one dimension")
    offsets = [0] * len(shape) if offset is None else [int(o) for o in offset]
    if len(offsets) != len(shape):
        raise ValueError(
            f"offset needs one entry per dimension ({len(shape)}), got {len(offsets)}"
        )
    start = 0
    step = 0
    for dim, off in zip(shape, offsets):
        start = start * dim + off
        step = step * dim + 1
    length = min(shape)
    indices = start + step * np.arange(length, dtype=np.int64)
    total = int(np.prod(shape))
    if length and (indices[0] < 0 or indices[-1] >= total):
        raise IndexError("diagonal with this offset runs outside the tensor")
    return indices


def diagonal(x, offset=None) -> np.ndarray:
    """Return the values on the diagonal starting at ``offset``.

    The diagonal steps by one along every dimension at once and is as long
    as the smallest dimension.
    """
    data = np.asarray(x, dtype=np.float32)
    indices = _diagonal_indices(data.shape, offset)
    return data.reshape(-1)[indices].astype(np.float32)


def diagonal_gradient(x, dy, offset=None) -> np.ndarray:
    """Place ``dy`` on the diagonal of a zero tensor shaped like ``x``.

    Diagonal positions beyond the length of ``dy`` are set to zero.
    """
    data = np.asarray(x, dtype=np.float32)
    indices = _diagonal_indices(data.shape, offset)
    values = np.asarray(dy, dtype=np.float32).reshape(-1)
    filled = np.zeros(len(indices), dtype=np.float32)
    count = min(len(values), len(indices))
    filled[:count] = values[:count]
    result = np.zeros(data.size, dtype=np.float32)
    result[indices] = filled
    return result.reshape(data.shape)