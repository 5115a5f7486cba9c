from .driver import write_reads, write_reads_chunked, run_config, run_batch

__all__ = [
    "write_reads",
    "write_reads_chunked",
    "run_config",
    "run_batch",
]
