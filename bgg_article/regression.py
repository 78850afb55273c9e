# regression.py - ordinary least squares trend line
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from .errors import DegenerateInputError


@dataclass(frozen=True)
class TrendSegment:
    x1: float
    y1: float
    x2: float
    y2: float


@dataclass(frozen=True)
class FittedLine:
    slope: float
    intercept: float

    def predict(self, x: float) -> float:
        return self.intercept + self.slope * x

    def segment(self, x_min: float, x_max: float) -> TrendSegment:
        """Endpoints of the line between two x values."""
        return TrendSegment(x_min, self.predict(x_min), x_max, self.predict(x_max))


def fit_line(xs: Sequence[float], ys: Sequence[float]) -> FittedLine:
    """Closed-form OLS fit of ys on xs.

    Raises DegenerateInputError when every x is the same value, since the
    slope is undefined there.
    """
    x = np.asarray(xs, dtype=float)
    y = np.asarray(ys, dtype=float)
    if x.shape != y.shape or x.ndim != 1:
        raise ValueError(f"xs and ys must be flat and equal length, got {x.shape} and {y.shape}")
    if len(x) < 2:
        raise ValueError("need at least two points to fit a line")

    x_mean, y_mean = x.mean(), y.mean()
    dx = x - x_mean
    den = float(np.sum(dx * dx))
    if den == 0.0:
        raise DegenerateInputError(f"all {len(x)} x values equal {x[0]}")
    slope = float(np.sum(dx * (y - y_mean))) / den
    return FittedLine(slope=slope, intercept=float(y_mean - slope * x_mean))
