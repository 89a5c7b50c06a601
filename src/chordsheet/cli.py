import logging
import sys
from pathlib import Path

import click

from .exceptions import FetchError, ParseError
from .parser import parse
from .registry import Mode, format_song
from .sources import load_text
from .transposer import get_transpose_interval, key_label, transpose

_MODES = [m.value for m in Mode]


@click.command()
@click.argument("source")
@click.option("-m", "--mode", default=Mode.ABOVE.value, show_default=True,
              type=click.Choice(_MODES), envvar="CHORDSHEET_MODE",
              help="Output format.")
@click.option("-t", "--transpose", "semitones", default=0, show_default=True,
              envvar="CHORDSHEET_TRANSPOSE",
              help="Shift every chord by N semitones.")
@click.option("--to-key", default=None, metavar="KEY",
              help="Transpose from the song's key to KEY (overrides --transpose).")
@click.option("-o", "--output", "output_path", default=None, metavar="PATH",
              help="Write to PATH instead of stdout.")
@click.option("--show-key", is_flag=True, default=False,
              help="Print the original and transposed key to stderr.")
@click.option("-v", "--verbose", is_flag=True, default=False,
              help="Log debug messages.")
def main(source: str, mode: str, semitones: int, to_key: str | None,
         output_path: str | None, show_key: bool, verbose: bool) -> None:
    """Render a ChordPro song sheet, optionally transposed.

    \b
    SOURCE is a file path, "-" for stdin, or an http(s) URL.
    """
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)

    # --- Load ---
    try:
        text = load_text(source)
    except FetchError as exc:
        msg = f"Error: Could not fetch {exc.url}"
        if exc.status_code:
            msg += f" (HTTP {exc.status_code})"
        click.echo(msg, err=True)
        sys.exit(1)
    except OSError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    # --- Parse ---
    try:
        song = parse(text)
    except ParseError as exc:
        click.echo(f"Error: {exc}", err=True)
        click.echo("Preview unavailable, fix the ChordPro syntax and try again.", err=True)
        sys.exit(1)

    # --- Transpose ---
    if to_key:
        if song.key is None:
            click.echo("Error: --to-key needs a song with a key or at least one chord", err=True)
            sys.exit(1)
        semitones = get_transpose_interval(str(song.key), to_key)
    if semitones:
        song = transpose(song, semitones)

    if show_key:
        click.echo(f"Key: {key_label(song) or 'unknown'}", err=True)

    # --- Render ---
    rendered = format_song(song, mode)

    # --- Output ---
    if output_path is None:
        click.echo(rendered, nl=not rendered.endswith("\n"))
        return

    dest = Path(output_path)
    dest.write_text(rendered, encoding="utf-8")
    click.echo(f"Written to {dest}")
