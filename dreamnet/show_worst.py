"""Find the least certain correct and most certain incorrect classification."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class WorstPick:
    """One chosen batch item."""

    index: int
    label: int
    predicted: int
    score: float


@dataclass(frozen=True)
class WorstPicks:
    """The worst correct (``under``) and worst incorrect (``over``) items."""

    under: WorstPick | None
    over: WorstPick | None

    def titles(self) -> tuple[str | None, str | None]:
        """Window titles for the two picks, ``None`` where there is no pick."""
        under = (
            f"uncertain but correct ({self.under.label})"
            if self.under is not None
            else None
        )
        over = (
            f"certain ({self.over.predicted}) but incorrect ({self.over.label})"
            if self.over is not None
            else None
        )
        return under, over


def find_worst(predictions, labels) -> WorstPicks:
    """Pick the correct item with the lowest label score and the incorrect
    item with the highest label score; the first one wins a tie."""
    scores = np.asarray(predictions, dtype=np.float32)
    if scores.ndim != 2:
        raise ValueError(f"predictions must be 2-D, got {scores.ndim}-D")
    targets = np.asarray(labels).astype(np.int64)
    if targets.ndim != 1 or targets.shape[0] != scores.shape[0]:
        raise ValueError("labels must be 1-D with one value per prediction row")
    if targets.size and (targets.min() < 0 or targets.max() >= scores.shape[1]):
        raise ValueError("label outside the range of classes")

    under: WorstPick | None = None
    over: WorstPick | None = None
    for i, (row, label) in enumerate(zip(scores, targets)):
        label = int(label)
        best = int(row.argmax())
        label_score = float(row[label])
        pick = WorstPick(index=i, label=label, predicted=best, score=label_score)
        if best == label:
            if under is None or under.score > label_score:
                under = pick
        elif over is None or over.score < label_score:
            over = pick
    return WorstPicks(under=under, over=over)