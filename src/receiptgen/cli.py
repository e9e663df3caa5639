"""Typer-based command line interface for the receipt generator.

The ``run`` command reads the member file, asks for the payment period and
writes the receipts document.  Both the data file and the period may be
given as options; missing values are prompted for on standard input.

Exit codes
----------
0 success
3 I/O error (unreadable input, unsupported output extension, write failure);
  the code for an unreadable input file follows ``errors.file_open_exit_code``
4 configuration error
5 data error (short file, missing column, malformed row, layout overflow)
"""

from __future__ import annotations

import os
import sys
from contextlib import AbstractContextManager, nullcontext
from pathlib import Path
from typing import Optional

import typer
import yaml
from pydantic import ValidationError

from .assets import default_logo
from .config import ConfigModel, load_config
from .io import open_surface
from .io.writers.pdf_writer import load_image
from .layout.engine import ReceiptLayoutEngine
from .records import read_members
from .utils.errors import ImageFormatError, InputFileError, ReceiptError, UnsupportedFormatError
from .utils.logging import configure_logging

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")
    os.environ.setdefault("RICH_DISABLE_NO_COLOR", "1")

app = typer.Typer(
    name="receiptgen",
    help="Batch receipt printer. Use 'receiptgen run' to turn a member file into receipts.",
)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> None:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _apply_overrides(
    cfg: ConfigModel,
    *,
    out_path: Path | None,
    logo_path: Path | None,
    legacy_missing_columns: bool,
) -> ConfigModel:
    """Return a copy of ``cfg`` with CLI overrides applied."""

    new_cfg = cfg.model_copy(deep=True)
    if out_path is not None:
        new_cfg.output.path = out_path
    if logo_path is not None:
        new_cfg.layout.logo_path = logo_path
    if legacy_missing_columns:
        new_cfg.input.missing_column = "sentinel"
    return new_cfg


def _logo_context(cfg: ConfigModel) -> AbstractContextManager[Path]:
    if cfg.layout.logo_path is None:
        return default_logo()
    return nullcontext(cfg.layout.logo_path)


@app.callback()
def main() -> None:
    """Entry point for the receiptgen command group."""
    pass


@app.command()
def run(  # noqa: PLR0913
    in_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--in", "--input", help="Member data file; prompted for when omitted"
    ),
    period: Optional[str] = typer.Option(  # noqa: B008
        None, "--period", help="Payment period printed on every receipt"
    ),
    out_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--out", help="Output document (.pdf); defaults to output.path"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    logo_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--logo", help="Image stamped on every receipt"
    ),
    legacy_missing_columns: bool = typer.Option(  # noqa: B008
        False,
        "--legacy-missing-columns",
        help="Print a placeholder instead of failing when a column is missing",
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Emit debug logging to stderr"
    ),
) -> None:
    """Render one receipt per member of ``in_path`` into a PDF document."""

    configure_logging(verbose)

    try:
        cfg = load_config(config_path)
    except (ValidationError, ValueError, yaml.YAMLError, OSError) as exc:
        _safe_exit(4, str(exc).splitlines()[0])

    cfg = _apply_overrides(
        cfg,
        out_path=out_path,
        logo_path=logo_path,
        legacy_missing_columns=legacy_missing_columns,
    )

    typer.echo("\nWelcome to Receipt Creator!")

    if in_path is None:
        in_path = Path(typer.prompt("Data file").strip())

    try:
        members = read_members(in_path, cfg.input)
    except InputFileError as exc:
        typer.echo(f"failed to open {exc.path}", err=True)
        _safe_exit(cfg.errors.file_open_exit_code, f"Reason: {exc.reason}")
    except ReceiptError as exc:
        _safe_exit(5, f"{in_path}: {exc}")

    if period is None:
        period = typer.prompt("Enter period")
    period = period.strip()

    typer.echo("Please, wait!")

    if cfg.layout.logo_path is not None and not cfg.layout.logo_path.is_file():
        _safe_exit(3, f"logo not found: {cfg.layout.logo_path}")
    if cfg.layout.logo_path is not None:
        try:
            load_image(cfg.layout.logo_path)
        except ImageFormatError as exc:
            _safe_exit(3, f"logo unreadable: {exc}")

    try:
        surface = open_surface(cfg.output.path, cfg.layout, title=cfg.output.title)
    except UnsupportedFormatError as exc:
        _safe_exit(3, str(exc))

    try:
        with _logo_context(cfg) as logo:
            engine = ReceiptLayoutEngine(cfg.layout, surface, logo)
            pages = engine.render(period, members)
    except ImageFormatError as exc:
        _safe_exit(3, f"logo unreadable: {exc}")
    except ReceiptError as exc:
        _safe_exit(5, str(exc))
    except OSError as exc:
        _safe_exit(3, f"failed to write {cfg.output.path}: {exc}")

    if verbose:
        typer.echo(f"Wrote {len(members)} receipt(s) on {pages} page(s)", err=True)
    typer.echo("Work is Done! Exiting ...\n")
