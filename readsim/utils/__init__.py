from .summary import summarize_read_file, summarize_outputs

__all__ = ["summarize_read_file", "summarize_outputs"]
