"""Helpers for image classification with a pre-trained network."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import numpy as np


@dataclass(frozen=True, order=True)
class Prediction:
    """A class scored above the threshold, as a whole percentage."""

    percent: int
    index: int
    label: str


def top_predictions(probs, classes, threshold=0.01) -> list[Prediction]:
    """Return classes with probability above ``threshold``, lowest first."""
    values = np.asarray(probs, dtype=np.float32).reshape(-1)
    if len(classes) != values.size:
        raise ValueError("output size does not match number of classes")
    found = [
        (int(p * 100), i)
        for i, p in enumerate(values.tolist())
        if p > threshold
    ]
    return [Prediction(percent, i, classes[i]) for percent, i in sorted(found)]


def format_predictions(predictions, indent="") -> str:
    """Render predictions one per line as ``N% 'label' (index)``."""
    return "".join(
        f"{indent}{p.percent}% '{p.label}' ({p.index})\n" for p in predictions
    )


def read_classes(path) -> list[str]:
    """Read class names, one per line."""
    with Path(path).open(newline="") as handle:
        text = handle.read()
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def fit_size(width, height, size) -> tuple[int, int]:
    """Scale so the shorter side becomes ``size``; returns (width, height)."""
    if width <= 0 or height <= 0:
        raise ValueError("image dimensions must be positive")
    return max(size * width // height, size), max(size, size * height // width)


def center_crop_box(width, height, size) -> tuple[int, int, int, int]:
    """Return (x, y, width, height) of a centred square crop."""
    if width < size or height < size:
        raise ValueError("crop is larger than the image")
    return (width - size) // 2, (height - size) // 2, size, size


def to_nchw(image) -> np.ndarray:
    """Turn an H x W x C (or H x W) 8-bit image into a 1 x C x H x W float
    tensor centred on zero by subtracting 128."""
    data = np.asarray(image, dtype=np.float32)
    if data.ndim == 2:
        data = data[:, :, None]
    if data.ndim != 3:
        raise ValueError(f"image must be 2-D or 3-D, got {data.ndim}-D")
    return np.ascontiguousarray((data - 128.0).transpose(2, 0, 1)[None])