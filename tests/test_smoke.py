import pathlib
import random

import pytest

from readsim.core import ValidationError
from readsim.pipeline.driver import run_config
from readsim.io import read_reads


def _random_seq(n: int) -> str:
    return "".join(random.choice("ACGT") for _ in range(n))


def _make_fasta(path: pathlib.Path, n_pairs: int = 30):
    with open(path, "w") as f:
        for i in range(n_pairs):
            f.write(f">frag{i}_L\n{_random_seq(100)}\n")
            f.write(f">frag{i}_R\n{_random_seq(100)}\n")

# ----------------------------------------------------------------------
def test_run_config(tmp_path: pathlib.Path):
    # 1. synth FASTA of interleaved mates
    src = tmp_path / "frags.fa"
    _make_fasta(src)

    # 2. minimal config dict, written in three chunks with shuffling
    cfg = {
        "input": str(src),
        "base_name": "sim",
        "output_dir": str(tmp_path / "out"),
        "gzip": True,
        "shuffle": True,
        "seed": 1,
        "chunk_size": 20,
    }

    # 3. run
    out = run_config(cfg, verbose=False)

    left, right = (read_reads(p) for p in out.paths)
    assert len(left) == len(right) == 30
    numbers = sorted(int(r.identifier.split("/")[0][4:]) for r in left)
    assert numbers == list(range(1, 31))
    for l, r in zip(left, right):
        assert l.identifier.replace("_L", "_R") == r.identifier


@pytest.mark.parametrize("key", ["paired", "gzip", "shuffle"])
def test_run_config_rejects_string_flags(tmp_path: pathlib.Path, key):
    src = tmp_path / "frags.fa"
    _make_fasta(src, n_pairs=2)
    cfg = {"input": str(src), "base_name": str(tmp_path / "sim"), key: "false"}
    with pytest.raises(ValidationError):
        run_config(cfg, verbose=False)
    assert not list(tmp_path.glob("sim*"))
