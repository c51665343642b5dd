"""Mean and standard deviation of each batch item."""

from __future__ import annotations

import numpy as np


def mean_stdev(x) -> tuple[np.ndarray, np.ndarray]:
    """Return per-item mean and population standard deviation.

    The first dimension of ``x`` is the batch; every other value of an item
    is pooled together.
    """
    data = np.asarray(x, dtype=np.float32)
    if data.ndim == 0:
        raise ValueError("input must have a batch dimension")
    count = data.shape[0]
    if count == 0:
        empty = np.zeros(0, dtype=np.float32)
        return empty, empty.copy()
    items = data.reshape(count, -1)
    with np.errstate(invalid="ignore", divide="ignore"):
        mean = items.mean(axis=1, dtype=np.float32)
        stdev = np.sqrt(((items - mean[:, None]) ** 2).mean(axis=1, dtype=np.float32))
    return mean.astype(np.float32), stdev.astype(np.float32)