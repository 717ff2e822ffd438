"""File commands for the littleutils CLI.

Behavior
- Results (digests, sanitized names, directories) go to **stdout**, one per
  line, so they can be piped. Human-oriented notices go to **stderr**.

Failure modes
- I/O errors (missing source, permission denied, ...) → ``ClickException``
  naming the failing path.
  A destination left behind by the failed operation is flagged on stderr,
  since nothing is rolled back.
- Unresolvable home/working directory → ``ClickException``.
- Invalid ``LITTLEUTILS_CHUNK_SIZE`` → ``ClickException``.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click

from littleutils import config
from littleutils.errors import FatalStartupError, InvalidSettingError
from littleutils.fileutils import (
    CHUNK_SIZE,
    configure_directories,
    copy_with_hash,
    get_home_dir,
    get_working_directory,
    sanitize_file_path,
    save_buffer,
    save_or_overwrite_buffer,
)

from .helpers import error, success, warn

logger = logging.getLogger(__name__)


def _io_failure(e: OSError) -> click.ClickException:
    target = f" {e.filename}" if e.filename else ""
    reason = e.strerror or str(e)
    return click.ClickException(f"I/O error{target}: {reason}")


def _report_partial(dest: Path) -> None:
    if dest.is_file():
        error(f"{dest} may be incomplete")


def _resolve_chunk_size(chunk_size: int | None) -> int:
    if chunk_size is not None:
        return chunk_size
    try:
        return config.get_chunk_size(CHUNK_SIZE)
    except InvalidSettingError as e:
        raise click.ClickException(str(e)) from e


@click.command()
@click.argument(
    "source", type=click.Path(dir_okay=False, path_type=Path)
)
@click.argument("dest", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--chunk-size",
    type=click.IntRange(min=1),
    default=None,
    help=(
        "Read size per iteration in bytes. Defaults to LITTLEUTILS_CHUNK_SIZE "
        f"or {CHUNK_SIZE}."
    ),
)
def copy(source: Path, dest: Path, chunk_size: int | None) -> None:
    """Copy SOURCE to DEST and print the SHA-256 of the copied bytes.

    Missing parent directories of DEST are created. An existing DEST is
    replaced.
    """
    size = _resolve_chunk_size(chunk_size)
    if dest.exists():
        warn(f"Overwriting {dest}")
    try:
        digest = copy_with_hash(source, dest, chunk_size=size)
    except OSError as e:
        logger.debug("Copy %s -> %s failed", source, dest, exc_info=True)
        _report_partial(dest)
        raise _io_failure(e) from e
    click.echo(digest)
    success(f"Copied {source} to {dest}")


@click.command()
@click.argument("dest", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--overwrite/--no-overwrite",
    default=False,
    help="Truncate DEST before writing instead of relying on create semantics.",
)
def save(dest: Path, overwrite: bool) -> None:
    """Stream standard input into DEST, creating parent directories."""
    stdin = click.get_binary_stream("stdin")
    writer = save_or_overwrite_buffer if overwrite else save_buffer
    try:
        writer(dest, stdin)
    except OSError as e:
        logger.debug("Save to %s failed", dest, exc_info=True)
        _report_partial(dest)
        raise _io_failure(e) from e
    success(f"Saved {dest}")


@click.command()
@click.argument("keys", nargs=-1, required=True)
def sanitize(keys: tuple[str, ...]) -> None:
    """Print a safe, lowercase file name for each KEY."""
    for key in keys:
        click.echo(sanitize_file_path(key))


@click.command()
@click.option(
    "--home-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Use this home directory instead of looking it up.",
)
@click.option(
    "--working-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Use this working directory instead of looking it up.",
)
def dirs(home_dir: Path | None, working_dir: Path | None) -> None:
    """Print the resolved home and working directories."""
    if home_dir is not None or working_dir is not None:
        configure_directories(home=home_dir, working=working_dir)
    try:
        home = get_home_dir()
        working = get_working_directory()
    except FatalStartupError as e:
        raise click.ClickException(str(e)) from e
    click.echo(f"home: {home}")
    click.echo(f"working: {working}")
