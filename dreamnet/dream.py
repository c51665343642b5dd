"""Image sizes, output names and window placement for the deep dream run."""

from __future__ import annotations

import math

MIN_IMAGE_SIZE = 20
MIN_WINDOW_SIZE = 400
WINDOW_AREA = 800000
SCREEN_WIDTH = 1000
LOSS_WINDOW = "loss"


def start_image_size(size, iters, scale_runs, percent_incr) -> int:
    """Return the size to start dreaming at.

    The goal ``size`` is shrunk once per scale round except the first, so
    that growing by ``percent_incr`` each round ends near the goal. The
    result is never below 20.
    """
    if scale_runs < 1:
        raise ValueError("scale_runs must be at least 1")
    if percent_incr < 0:
        raise ValueError("percent_incr must not be negative")
    image_size = int(size)
    for _ in range(1, int(iters) // int(scale_runs)):
        image_size = image_size * 100 // (100 + percent_incr)
    return max(image_size, MIN_IMAGE_SIZE)


def grow_image_size(current, percent_incr, limit) -> int:
    """Grow ``current`` by ``percent_incr`` percent, capped at ``limit``."""
    if percent_incr < 0:
        raise ValueError("percent_incr must not be negative")
    return min(int(current) * (100 + percent_incr) // 100, int(limit))


def output_prefix(layer, channel=-1) -> str:
    """Path prefix of the written images for a layer.

    Slashes in the layer name become underscores; when no single channel is
    chosen (``channel < 0``) the prefix ends with ``_all``.
    """
    safe_layer = layer.replace("/", "_")
    suffix = "_all" if channel < 0 else ""
    return f"tmp/{safe_layer}{suffix}"


def window_layout(batch, size) -> tuple[int, dict[str, tuple[int, int]]]:
    """Return the window size and the top-left corner of every window.

    The loss window sits at the origin; the ``dream-<i>`` windows follow it
    left to right and wrap to a new row once a row is full.
    """
    if batch < 1:
        raise ValueError("batch must be at least 1")
    window = min(max(MIN_WINDOW_SIZE, int(size)), int(math.sqrt(WINDOW_AREA // batch)))
    if window < 1:
        raise ValueError("window size must be positive")
    per_row = SCREEN_WIDTH // window
    positions: dict[str, tuple[int, int]] = {LOSS_WINDOW: (0, 0)}
    x_offset, y_offset = 1, 0
    for i in range(batch):
        positions[f"dream-{i}"] = (x_offset * window, y_offset * window)
        x_offset += 1
        if x_offset > per_row:
            x_offset = 0
            y_offset += 1
    return window, positions