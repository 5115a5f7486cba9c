"""
High-level drivers used by CLI & notebooks.
"""
from __future__ import annotations
import json
import numbers
from pathlib import Path
from typing import Iterable, Optional

import numpy as np
from numpy.random import default_rng

from ..core import (
    ValidationError, as_reads, check_offset, generate_qualities,
    number_reads, shuffled_order, split_pairs,
)
from ..io import OutputDescriptor, read_reads, resolve_output_paths, write_records

DEFAULT_EXTENSION = ".fasta"


# ──────────────────────────────────────────────────────────────────────────────
# Core writer
# ──────────────────────────────────────────────────────────────────────────────
def write_reads(
    reads: Iterable,
    base_name,
    paired: bool = True,
    compress: bool = False,
    offset: int = 1,
    shuffle: bool = False,
    *,
    rng: Optional[np.random.Generator] = None,
    extension: str = DEFAULT_EXTENSION,
    verbose: bool = False,
) -> OutputDescriptor:
    """
    Write simulated reads as FASTQ records with random qualities.

    Paired collections are interleaved (left mate first); mates go to
    ``<base>_1`` / ``<base>_2``, single-end reads to ``<base>``.  Reads are
    renamed ``read<N>/<identifier>`` with N counting from `offset` in input
    order.  ``offset == 1`` creates the file(s), a larger offset appends,
    so a big collection can be written chunk by chunk.

    Shuffling draws its permutation from `rng` but restores the generator
    afterwards, so qualities are the same whether or not reads are shuffled.
    """
    offset = check_offset(offset)
    append = offset > 1
    reads = as_reads(reads)
    rng = default_rng() if rng is None else rng

    if paired:
        lefts, rights = split_pairs(reads)
        groups = [number_reads(lefts, offset), number_reads(rights, offset)]
    else:
        groups = [number_reads(reads, offset)]

    if shuffle:
        order = shuffled_order(len(groups[0]), rng)
        groups = [[grp[i] for i in order] for grp in groups]
        if verbose:
            print(f"🔀 Shuffled {len(order)} {'pairs' if paired else 'reads'}")

    qualities = [
        generate_qualities([len(r.sequence) for r in grp], len(grp), rng=rng)
        for grp in groups
    ]

    out = resolve_output_paths(base_name, paired, compress, extension)
    for grp, quals, path in zip(groups, qualities, out.paths):
        n = write_records(
            ((r.identifier, r.sequence, q) for r, q in zip(grp, quals)),
            path, format="fastq", compress=compress, append=append,
        )
        if verbose:
            verb = "appended" if append else "written"
            print(f"💾 {n} reads {verb} → {path}")
    return out


def _check_chunk_size(chunk_size, paired: bool) -> int:
    if isinstance(chunk_size, bool) or not isinstance(chunk_size, numbers.Integral) or chunk_size < 1:
        raise ValidationError(f"chunk_size must be a positive integer, got {chunk_size!r}")
    if paired and chunk_size % 2:
        raise ValidationError(f"chunk_size must be even in paired mode, got {chunk_size}")
    return int(chunk_size)


def write_reads_chunked(
    reads: Iterable,
    base_name,
    chunk_size: int,
    paired: bool = True,
    compress: bool = False,
    offset: int = 1,
    shuffle: bool = False,
    *,
    rng: Optional[np.random.Generator] = None,
    extension: str = DEFAULT_EXTENSION,
    verbose: bool = False,
) -> OutputDescriptor:
    """
    Write `reads` in chunks of `chunk_size` reads with running offsets.

    The first chunk starts at `offset`, later chunks append.  With `shuffle`
    reads are only shuffled within their chunk.
    """
    offset = check_offset(offset)
    chunk_size = _check_chunk_size(chunk_size, paired)
    reads = as_reads(reads)
    if paired:
        split_pairs(reads)  # reject odd collections before the first write
    rng = default_rng() if rng is None else rng

    per_unit = 2 if paired else 1
    starts = range(0, len(reads), chunk_size) if reads else [0]
    out = None
    for start in starts:
        out = write_reads(
            reads[start:start + chunk_size], base_name,
            paired=paired, compress=compress,
            offset=offset + start // per_unit, shuffle=shuffle,
            rng=rng, extension=extension, verbose=verbose,
        )
    return out


# ──────────────────────────────────────────────────────────────────────────────
# Config-driven runs
# ──────────────────────────────────────────────────────────────────────────────
def _cfg_flag(cfg: dict, key: str, default: bool) -> bool:
    value = cfg.get(key, default)
    if not isinstance(value, bool):
        raise ValidationError(f"config '{key}' must be true or false, got {value!r}")
    return value


def run_config(cfg: dict, *, verbose: bool = True) -> OutputDescriptor:
    """
    Run one dataset described by a config dict.

    Keys: input, base_name, paired, gzip, offset, shuffle, seed, chunk_size,
    extension, format, output_dir.  Values under ``_global_defaults_`` are
    used where the dataset does not set its own.
    """
    cfg = dict(cfg)
    global_defaults = cfg.pop("_global_defaults_", {}) or {}
    cfg = {**global_defaults, **cfg}

    for key in ("input", "base_name"):
        if not cfg.get(key):
            raise ValidationError(f"config is missing '{key}'")

    base_name = Path(cfg["base_name"])
    if cfg.get("output_dir"):
        base_name = Path(cfg["output_dir"]) / base_name

    reads = read_reads(cfg["input"], cfg.get("format"))
    seed = cfg.get("seed")
    rng = default_rng(seed)
    paired = _cfg_flag(cfg, "paired", True)
    if verbose:
        print(f"🔬 {cfg['input']}: {len(reads)} read(s), {'paired' if paired else 'single-end'}")

    kwargs = dict(
        paired=paired,
        compress=_cfg_flag(cfg, "gzip", False),
        offset=cfg.get("offset", 1),
        shuffle=_cfg_flag(cfg, "shuffle", False),
        rng=rng,
        extension=cfg.get("extension", DEFAULT_EXTENSION),
        verbose=verbose,
    )
    if cfg.get("chunk_size"):
        out = write_reads_chunked(reads, base_name, cfg["chunk_size"], **kwargs)
    else:
        out = write_reads(reads, base_name, **kwargs)

    if verbose:
        print(f"✅ Finished {base_name} → {', '.join(str(p) for p in out.paths)}")
    return out


def run_batch(manifest, *, verbose: bool = True) -> dict[str, OutputDescriptor]:
    """
    Run every dataset in a JSON manifest.

    ``{"datasets": {name: cfg, ...}, <global keys>}``; a bare ``{name: cfg}``
    mapping is accepted too.  `base_name` defaults to the dataset name.
    """
    data = json.loads(Path(manifest).read_text())
    if "datasets" not in data:          # accept bare style
        data = {"datasets": data}

    globals_ = {k: v for k, v in data.items() if k != "datasets"}

    results = {}
    for name, cfg in data["datasets"].items():
        cfg = {"_global_defaults_": globals_, "base_name": name, **cfg}
        results[name] = run_config(cfg, verbose=verbose)
    return results
