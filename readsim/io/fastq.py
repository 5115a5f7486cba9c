from __future__ import annotations
import gzip
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Optional, TextIO, Tuple

from Bio import SeqIO
from Bio.Seq import Seq
from Bio.SeqRecord import SeqRecord

from ..core.errors import ValidationError
from ..core.quality import quality_to_phred
from ..core.reads import Read, as_reads

RECORD_FORMATS = ("fastq", "fasta")
GZIP_SUFFIX = ".gz"


@dataclass(frozen=True)
class OutputDescriptor:
    paths: Tuple[Path, ...]
    paired: bool
    compress: bool

    def __iter__(self):
        return iter(self.paths)

    def __len__(self):
        return len(self.paths)


def resolve_output_paths(base_name,
                         paired: bool,
                         compress: bool,
                         extension: str = ".fasta") -> OutputDescriptor:
    """
    Output file names for a base name.

    paired   -> <base>_1.fasta, <base>_2.fasta
    single   -> <base>.fasta
    `.gz` is appended to each when compressing.  The `.fasta` extension is
    used even though the records are FASTQ unless `extension` says otherwise.
    """
    base = str(base_name)
    suffix = extension + (GZIP_SUFFIX if compress else "")
    if paired:
        names = (f"{base}_1{suffix}", f"{base}_2{suffix}")
    else:
        names = (f"{base}{suffix}",)
    return OutputDescriptor(tuple(Path(n) for n in names), paired, compress)


@contextmanager
def open_output(path, compress: bool = False, append: bool = False) -> Iterator[TextIO]:
    """Text handle on `path` in create ('w') or append ('a') mode, gzip if asked."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    mode = "a" if append else "w"
    if compress:
        fh = gzip.open(path, mode + "t")
    else:
        fh = open(path, mode)
    try:
        yield fh
    finally:
        fh.close()


def _to_seqrecord(ident: str, seq: str, qual: Optional[str]) -> SeqRecord:
    rec = SeqRecord(Seq(seq), id=ident, name="", description="")
    if qual is not None:
        rec.letter_annotations["phred_quality"] = quality_to_phred(qual)
    return rec


def write_records(records: Iterable[Tuple[str, str, Optional[str]]],
                  path,
                  format: str = "fastq",
                  compress: bool = False,
                  append: bool = False) -> int:
    """
    Write (identifier, sequence, quality) records with Biopython.

    Returns the number of records written.  I/O errors are not caught.
    """
    if format not in RECORD_FORMATS:
        raise ValidationError(f"unsupported record format '{format}'")
    seq_records = (_to_seqrecord(*rec) for rec in records)
    with open_output(path, compress=compress, append=append) as fh:
        return SeqIO.write(seq_records, fh, format)


# ──────────────────────────────────────────────────────────────────────────────
# Input
# ──────────────────────────────────────────────────────────────────────────────
def open_text(path: Path) -> TextIO:
    if path.suffix == GZIP_SUFFIX:
        return gzip.open(path, "rt")
    return open(path)


def sniff_format(path) -> Optional[str]:
    """
    'fasta' or 'fastq' from the first non-blank character of the file.

    None for a file without any records (e.g. a run with zero reads).
    """
    path = Path(path)
    with open_text(path) as fh:
        for line in fh:
            line = line.strip()
            if not line:
                continue
            if line.startswith(">"):
                return "fasta"
            if line.startswith("@"):
                return "fastq"
            break
        else:
            return None
    raise ValidationError(f"cannot tell whether {path} is FASTA or FASTQ")


def read_reads(path, fmt: Optional[str] = None) -> list[Read]:
    """
    Load reads from a FASTA/FASTQ file (optionally gzipped).

    The format is sniffed from the content when `fmt` is None, since files
    written by this package carry FASTQ records under a `.fasta` name.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"No read file found at '{path}'")
    fmt = fmt or sniff_format(path)
    if fmt is None:
        return []
    if fmt not in RECORD_FORMATS:
        raise ValidationError(f"unsupported record format '{fmt}'")
    with open_text(path) as fh:
        return as_reads(SeqIO.parse(fh, fmt))
