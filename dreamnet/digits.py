"""Text rendering of small digit images and reading of class predictions."""

from __future__ import annotations

import numpy as np

DIGIT_WIDTH = 28
FILLED = "[]"
EMPTY = "  "


def render_digit(pixels, width=DIGIT_WIDTH) -> str:
    """Draw an image as text, two characters per pixel.

    Pixels above zero are drawn as ``[]`` and the rest as blanks. Rows are
    ``width`` pixels long and each ends with a newline.
    """
    if width < 1:
        raise ValueError("width must be at least 1")
    values = np.asarray(pixels, dtype=np.float32).reshape(-1)
    cells = [FILLED if v > 0 else EMPTY for v in values.tolist()]
    rows = ("".join(cells[start : start + width]) for start in range(0, len(cells), width))
    return "".join(row + "\n" for row in rows)


def predict_label(probs) -> tuple[int, float]:
    """Return the index of the highest probability and that probability.

    The first index wins a tie.
    """
    values = np.asarray(probs, dtype=np.float32).reshape(-1)
    if values.size == 0:
        raise ValueError("probabilities must not be empty")
    label = int(values.argmax())
    return label, float(values[label])