import pathlib
import pytest


def _fastq_text(reads):
    return "".join(f"@{name}\n{seq}\n+\n{'I' * len(seq)}\n" for name, seq in reads)


@pytest.fixture
def pair_reads():
    # interleaved: A = left mates, B = right mates
    return [
        ("A1", "ACGTACGTAC"), ("B1", "TTGCA"),
        ("A2", "GGGCCCAAAT"), ("B2", "CATCATCAT"),
        ("A3", "AC"),         ("B3", "GATTACAGATTACA"),
    ]


@pytest.fixture
def fasta_file(tmp_path: pathlib.Path, pair_reads) -> pathlib.Path:
    path = tmp_path / "reads.fa"
    path.write_text("".join(f">{name}\n{seq}\n" for name, seq in pair_reads))
    return path


@pytest.fixture
def fastq_file(tmp_path: pathlib.Path, pair_reads) -> pathlib.Path:
    path = tmp_path / "reads.fq"
    path.write_text(_fastq_text(pair_reads))
    return path
