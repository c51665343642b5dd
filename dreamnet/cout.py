"""Text rendering of a tensor for logging."""

from __future__ import annotations

import numpy as np


def _number(value) -> str:
    return f"{float(value):g}"


def format_tensor(tensor, name="", limit=100) -> str:
    """Render up to ``limit`` values of ``tensor``.

    With a ``name`` the line starts with the name and shape and ends with a
    newline. When values are cut off, the minimum and maximum are appended.
    """
    data = np.asarray(tensor, dtype=np.float32)
    flat = data.reshape(-1)
    parts: list[str] = []
    if name:
        dims = " ".join(str(d) for d in data.shape)
        parts.append(f"{name}({dims}): ")
    parts.extend(_number(v) + " " for v in flat[:limit])
    if flat.size > limit:
        parts.append(f"... ({_number(flat.min())},{_number(flat.max())})")
    if name:
        parts.append("\n")
    return "".join(parts)