from __future__ import annotations
import numbers
from typing import Iterable, NamedTuple, Sequence, Tuple

from Bio.SeqRecord import SeqRecord

from .errors import ValidationError


class Read(NamedTuple):
    identifier: str
    sequence: str


_UNSET_NAMES = ("", "<unknown id>", "<unknown description>")


def _record_name(rec: SeqRecord) -> str:
    # parsed records carry the full header line (id first) in .description
    ident = "" if rec.id in _UNSET_NAMES else rec.id
    desc = "" if rec.description in _UNSET_NAMES else rec.description
    if not desc:
        return ident
    if ident and desc.split(None, 1)[:1] != [ident]:
        return f"{ident} {desc}"
    return desc


# --------------------------------------------------------------------------
def as_reads(reads: Iterable) -> list[Read]:
    """
    Normalise a read collection to a list of `Read`.

    Accepted items: plain strings (no identifier), (identifier, sequence)
    pairs, `Read` or Biopython `SeqRecord`.  Missing identifiers become "".
    """
    out = []
    for item in reads:
        if isinstance(item, SeqRecord):
            out.append(Read(_record_name(item), str(item.seq)))
        elif isinstance(item, str):
            out.append(Read("", item))
        else:
            ident, seq = item
            out.append(Read("" if ident is None else str(ident), str(seq)))
    return out


def check_offset(offset) -> int:
    # bool is an Integral too
    if isinstance(offset, bool) or not isinstance(offset, numbers.Integral):
        raise ValidationError(f"offset must be an integer >= 1, got {offset!r}")
    if offset < 1:
        raise ValidationError(f"offset must be an integer >= 1, got {offset}")
    return int(offset)


def split_pairs(reads: Sequence[Read]) -> Tuple[list[Read], list[Read]]:
    """
    Split an interleaved collection into (lefts, rights).

    Reads 1, 3, 5, ... are left mates and 2, 4, 6, ... their right mates.
    """
    if len(reads) % 2:
        raise ValidationError(
            f"paired mode needs an even number of reads, got {len(reads)}"
        )
    return list(reads[0::2]), list(reads[1::2])


def number_reads(reads: Sequence[Read], offset: int = 1) -> list[Read]:
    """Rename reads to 'read<N>/<identifier>' with N counting up from `offset`."""
    return [
        Read(f"read{n}/{r.identifier}", r.sequence)
        for n, r in enumerate(reads, start=offset)
    ]
