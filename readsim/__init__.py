"""
Top-level namespace
"""
from importlib.metadata import version as _ver

try:
    __version__ = _ver("readsim")
except Exception:
    __version__ = "0+local"

# ----- high-level API ------------------------------------------------
from .core import ValidationError, Read, generate_qualities
from .io import read_reads, write_records, resolve_output_paths
from .pipeline.driver import write_reads, write_reads_chunked, run_config, run_batch
from .utils.summary import summarize_outputs

__all__ = [
    "ValidationError",
    "Read",
    "generate_qualities",
    "read_reads",
    "write_records",
    "resolve_output_paths",
    "write_reads",
    "write_reads_chunked",
    "run_config",
    "run_batch",
    "summarize_outputs",
]
