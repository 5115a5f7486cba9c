"""
Typer CLI wrappers for readsim.
"""
from __future__ import annotations
import json
import pathlib
from typing import List, Optional

import typer
from numpy.random import default_rng

from .driver import write_reads, write_reads_chunked, run_config, run_batch
from ..io import read_reads
from ..utils.summary import summarize_outputs

# ──────────────────────────────────────────────────────────────────────────────
# Helpers
# ──────────────────────────────────────────────────────────────────────────────
def _load_json(path: pathlib.Path) -> dict:
    """Load JSON, falling back to json5 if installed, with a clear error."""
    txt = path.read_text()
    try:
        return json.loads(txt)
    except json.JSONDecodeError as e:  # pragma: no cover
        try:
            import json5
        except ImportError:
            typer.secho(f"❌ JSON parse error in {path} – {e}", fg=typer.colors.RED)
            raise typer.Exit(1)
        return json5.loads(txt)


def _fail(err: Exception) -> None:
    typer.secho(f"❌ {err}", fg=typer.colors.RED, err=True)
    raise typer.Exit(1)


# ──────────────────────────────────────────────────────────────────────────────
# Typer app
# ──────────────────────────────────────────────────────────────────────────────
app = typer.Typer(add_completion=False, help="readsim CLI – write simulated reads as FASTQ")

# ------------------------------------------------------------------ write
@app.command("write")
def write(
    reads: pathlib.Path,
    base_name: str,
    paired: bool = typer.Option(
        True, "--paired/--single", help="Interleaved mate pairs or single-end reads"
    ),
    gzip: bool = typer.Option(False, "--gzip", help="gzip the output file(s)"),
    offset: int = typer.Option(1, "--offset", help="First read number; >1 appends"),
    shuffle: bool = typer.Option(False, "--shuffle", help="Shuffle reads before writing"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed"),
    chunk_size: Optional[int] = typer.Option(
        None, "--chunk-size", help="Write in chunks of this many reads"
    ),
    extension: str = typer.Option(".fasta", "--extension", help="Output file extension"),
):
    """Write the reads of a FASTA/FASTQ file as simulated FASTQ output."""
    rng = default_rng(seed)
    try:
        collection = read_reads(reads)
        kwargs = dict(paired=paired, compress=gzip, offset=offset, shuffle=shuffle,
                      rng=rng, extension=extension, verbose=True)
        if chunk_size:
            out = write_reads_chunked(collection, base_name, chunk_size, **kwargs)
        else:
            out = write_reads(collection, base_name, **kwargs)
    except (ValueError, OSError) as e:  # ValidationError, malformed records, I/O
        _fail(e)
    typer.echo("Done – reads saved → {}".format(", ".join(str(p) for p in out.paths)))

# ------------------------------------------------------------------ run-config
@app.command("run-config")
def run_config_cmd(
    config: pathlib.Path,
    quiet: bool = typer.Option(False, "--quiet", help="No progress messages"),
):
    """Write one dataset described by a JSON config."""
    cfg = _load_json(config)
    try:
        run_config(cfg, verbose=not quiet)
    except (ValueError, OSError) as e:
        _fail(e)

# ------------------------------------------------------------------ run-batch
@app.command("run-batch")
def run_batch_cmd(
    manifest: pathlib.Path,
    quiet: bool = typer.Option(False, "--quiet", help="No progress messages"),
):
    """Write every dataset in a manifest JSON."""
    try:
        run_batch(manifest, verbose=not quiet)
    except (ValueError, OSError) as e:
        _fail(e)

# ------------------------------------------------------------------ summary
@app.command("summary")
def summary(
    files: List[pathlib.Path],
    threads: int = typer.Option(1, "--threads", help="CPU cores (default 1)"),
    out: Optional[pathlib.Path] = typer.Option(None, "--out", help="Write the table as TSV"),
):
    """Read counts, lengths and mean quality of written files."""
    try:
        df = summarize_outputs(files, num_workers=threads)
    except (ValueError, OSError) as e:
        _fail(e)
    if out:
        df.to_csv(out, sep="\t", index=False)
        typer.echo(f"💾 Summary written → {out}")
    else:
        typer.echo(df.to_string(index=False))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
