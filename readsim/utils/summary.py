"""
Per-file statistics for written read files.  Used by the `summary` command
and handy for checking chunked runs.
"""
from __future__ import annotations
from pathlib import Path
from typing import Iterable

import numpy as np
import pandas as pd
from Bio import SeqIO
from joblib import Parallel, delayed

from ..io import open_text, sniff_format

SUMMARY_COLUMNS = [
    "file", "format", "n_reads", "min_len", "max_len",
    "mean_len", "mean_quality", "first_id", "last_id",
]


# ───────────────────────────────────────────────────────────────────────────
def summarize_read_file(path) -> dict:
    """Read count, length range and mean phred quality of one FASTA/FASTQ file."""
    path = Path(path)
    fmt = sniff_format(path)

    lengths, qual_sums, ids = [], 0, []
    if fmt is not None:  # None: no records at all
        with open_text(path) as fh:
            for rec in SeqIO.parse(fh, fmt):
                lengths.append(len(rec))
                ids.append(rec.id)
                qual_sums += sum(rec.letter_annotations.get("phred_quality", []))

    lengths = np.asarray(lengths, dtype=int)
    n_bases = int(lengths.sum())
    return {
        "file": str(path),
        "format": fmt,
        "n_reads": int(lengths.size),
        "min_len": int(lengths.min()) if lengths.size else 0,
        "max_len": int(lengths.max()) if lengths.size else 0,
        "mean_len": float(lengths.mean()) if lengths.size else np.nan,
        "mean_quality": qual_sums / n_bases if fmt == "fastq" and n_bases else np.nan,
        "first_id": ids[0] if ids else None,
        "last_id": ids[-1] if ids else None,
    }


def summarize_outputs(paths: Iterable, num_workers: int = 1) -> pd.DataFrame:
    """One summary row per file, computed in parallel with joblib."""
    rows = Parallel(n_jobs=num_workers)(
        delayed(summarize_read_file)(p) for p in paths
    )
    return pd.DataFrame(rows, columns=SUMMARY_COLUMNS)
