from __future__ import annotations
from contextlib import contextmanager
from typing import Iterator

import numpy as np


@contextmanager
def preserved_rng_state(rng: np.random.Generator) -> Iterator[np.random.Generator]:
    """
    Snapshot the bit-generator state on entry and put it back on exit.

    Draws made inside the block do not advance `rng` as seen by later code.
    Not safe if another thread draws from the same generator meanwhile.
    """
    saved = rng.bit_generator.state
    try:
        yield rng
    finally:
        rng.bit_generator.state = saved


def shuffled_order(n: int, rng: np.random.Generator) -> list[int]:
    """A random permutation of range(n) that leaves `rng` untouched."""
    with preserved_rng_state(rng):
        return rng.permutation(n).tolist()
