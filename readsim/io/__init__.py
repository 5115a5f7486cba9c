"""
Low-level FASTA/FASTQ I/O helpers.
"""
from .fastq import (
    OutputDescriptor,
    resolve_output_paths,
    open_output,
    write_records,
    open_text,
    sniff_format,
    read_reads,
)

__all__ = [
    "OutputDescriptor",
    "resolve_output_paths",
    "open_output",
    "write_records",
    "open_text",
    "sniff_format",
    "read_reads",
]
