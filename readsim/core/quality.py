from __future__ import annotations
from typing import Optional, Sequence

import numpy as np
from numpy.random import default_rng

# printable ASCII '!' .. '~'
QUAL_MIN = 0x21
QUAL_MAX = 0x7E


def generate_qualities(lengths: Sequence[int] | int,
                       num: Optional[int] = None,
                       rng: Optional[np.random.Generator] = None) -> list[str]:
    """
    Random per-base quality strings, one per read.

    Every character is drawn uniformly from '!'..'~' (94 symbols).
    If `num` is given, `lengths` is recycled (or cut) to `num` entries, so a
    single read length can serve a whole collection.
    All characters come from a single draw of ``sum(lengths)`` values, so the
    generator ends in the same state for any ordering of the same lengths.
    """
    rng = default_rng() if rng is None else rng
    lengths = [int(n) for n in np.atleast_1d(lengths)]
    if num is not None and lengths:
        lengths = [lengths[i % len(lengths)] for i in range(num)]

    codes = rng.integers(QUAL_MIN, QUAL_MAX + 1, size=sum(lengths))
    text = codes.astype(np.uint8).tobytes().decode("ascii")

    out, pos = [], 0
    for n in lengths:
        out.append(text[pos:pos + n])
        pos += n
    return out


def quality_to_phred(quality: str) -> list[int]:
    """Sanger offset: '!' -> 0, '~' -> 93."""
    return [ord(c) - QUAL_MIN for c in quality]
