# sampling.py - bounded display subsets of large record lists
import math
from typing import List, Optional, Sequence, TypeVar

import numpy as np

T = TypeVar("T")


def _check_target(target_size: int):
    if isinstance(target_size, bool) or int(target_size) != target_size or target_size < 1:
        raise ValueError(f"target_size must be a positive integer, got {target_size!r}")


def sample_stride(records: Sequence[T], target_size: int) -> Sequence[T]:
    """Keep every n-th item so at most ``target_size`` remain, in order.

    Inputs already within budget come back as-is (same object).
    """
    _check_target(target_size)
    if len(records) <= target_size:
        return records
    step = math.ceil(len(records) / target_size)
    return [r for i, r in enumerate(records) if i % step == 0]


def sample_random(records: Sequence[T], target_size: int,
                  rng: Optional[np.random.Generator] = None) -> List[T]:
    """Uniform random subset of ``target_size`` items from a shuffled copy."""
    _check_target(target_size)
    pool = list(records)
    if len(pool) <= target_size:
        return pool
    rng = rng if rng is not None else np.random.default_rng()
    order = rng.permutation(len(pool))
    return [pool[i] for i in order[:target_size]]
