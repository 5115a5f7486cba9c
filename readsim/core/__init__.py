from .errors import ValidationError
from .quality import generate_qualities, quality_to_phred
from .reads import Read, as_reads, check_offset, split_pairs, number_reads
from .shuffle import preserved_rng_state, shuffled_order

__all__ = [
    "ValidationError",
    "generate_qualities",
    "quality_to_phred",
    "Read",
    "as_reads",
    "check_offset",
    "split_pairs",
    "number_reads",
    "preserved_rng_state",
    "shuffled_order",
]
