# percentile.py - where a value sits inside a distribution
from typing import Sequence

import numpy as np
from scipy import stats


def percentile_rank(distribution: Sequence[float], value: float) -> float:
    """Share of the distribution strictly below ``value``, as 0-100.

    Same as locating the first element >= value in the sorted distribution
    and dividing its index by the size; 100 when value exceeds the maximum.
    """
    values = np.asarray(distribution, dtype=float)
    if values.size == 0:
        raise ValueError("percentile of an empty distribution is undefined")
    return float(stats.percentileofscore(values, value, kind="strict"))
