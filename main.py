from pathlib import Path
from typing import Optional

import typer

from benfordcheck.config import DEFAULT_SIGNIFICANCE
from benfordcheck.errors import InsufficientDataError, require_observations
from benfordcheck.pipeline import check_file
from benfordcheck.report import format_report
from benfordcheck.significance import SignificanceLevel

app = typer.Typer(help="Check whether the leading digits of a data set follow Benford's law.")


@app.command()
def verify(
    file: Path = typer.Argument(
        ...,
        help="File to verify, one number per line.",
    ),
    signficance: SignificanceLevel = typer.Option(
        SignificanceLevel(DEFAULT_SIGNIFICANCE),
        "--signficance",
        "--significance",
        help="Significance level used for the pass/fail threshold.",
        show_default=True,
    ),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Exit with status 2 when no line starts with a digit 1-9 instead of reporting NaN.",
    ),
    chunk_size: Optional[int] = typer.Option(
        None,
        "--chunk-size",
        min=1,
        help="Tally lines in chunks of this size and merge the partial counts.",
    ),
    progress: bool = typer.Option(False, "--progress", help="Show a progress bar while tallying chunks."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Print status lines while checking."),
) -> None:
    """
    Tabulate leading digits of FILE and compare them with Benford's law.
    """
    if verbose:
        print(f"[benford] Reading {file}")
    try:
        result = check_file(file, level=signficance, chunk_size=chunk_size, progress=progress)
    except (OSError, UnicodeDecodeError) as exc:
        typer.secho(f"[benford] Could not read {file}: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc

    if verbose:
        print(f"[benford] Counted {result.counts.total} lines with a leading digit 1-9.")

    if strict:
        try:
            require_observations(result.counts)
        except InsufficientDataError as exc:
            typer.secho(f"[benford] {exc}", fg=typer.colors.RED, err=True)
            raise typer.Exit(code=2) from exc

    print(format_report(result))


if __name__ == "__main__":
    app()
