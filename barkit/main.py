"""
barkit — entry point.

CLI group and the bar / round / filter subcommands.
"""

import json
import logging
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape

from barkit import __version__
from barkit.config import load_config
from barkit.numeric import round_in_place
from barkit.render import RenderError, clamp_fraction, fill_count, render_text
from barkit.search import filter_containing
from barkit.ui.theme import BARKIT_THEME


# ── Console (shared across the tool) ─────────────────────────────────────────

console = Console(theme=BARKIT_THEME, highlight=False)

logger = logging.getLogger(__name__)


# ── CLI ───────────────────────────────────────────────────────────────────────

@click.group(name="barkit", context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, "-V", "--version", prog_name="barkit")
@click.option("--verbose", is_flag=True, default=False, help="Log debug output to stderr.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file (default: ~/.config/barkit/config.toml).",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config_path: Optional[Path]) -> None:
    """Progress bars and small text helpers.

    \b
    Negative numbers must follow a `--` separator:
      barkit bar -- -0.5
    """
    if verbose:
        _configure_logging()
    ctx.obj = load_config(config_path)
    logger.debug("config: %s", ctx.obj)


# ── bar ───────────────────────────────────────────────────────────────────────

@cli.command()
@click.argument("fraction", type=float)
@click.option("--width", type=int, default=None, help="Total cells including delimiters.")
@click.option("--delims", metavar="CHARS", default=None, help='Left and right glyphs, e.g. "{}".')
@click.option("--plain", is_flag=True, default=False, help="Print the bar with no styling.")
@click.option("--json", "as_json", is_flag=True, default=False, help="Output as JSON.")
@click.pass_obj
def bar(
    config: dict,
    fraction: float,
    width: Optional[int],
    delims: Optional[str],
    plain: bool,
    as_json: bool,
) -> None:
    """Render a bar for FRACTION (0.0–1.0; out-of-range values are clamped)."""
    width = config["width"] if width is None else width
    delimiters = config["delimiters"] if delims is None else tuple(delims)

    try:
        text = render_text(width, delimiters, fraction)
    except RenderError as e:
        console.print(f"[error]Error:[/error] {escape(str(e))}")
        raise SystemExit(1)

    if as_json:
        payload = {
            "bar": text,
            "width": width,
            "fraction": clamp_fraction(fraction),
            "fill_count": fill_count(width - 2, fraction),
        }
        click.echo(json.dumps(payload))
        return

    if plain:
        click.echo(text)
        return

    from barkit.ui.progress import render_bar
    console.print(render_bar(fraction, width=width, delimiters=delimiters))


# ── round ─────────────────────────────────────────────────────────────────────

@cli.command(name="round")
@click.argument("values", nargs=-1, type=float, required=True)
@click.option("--json", "as_json", is_flag=True, default=False, help="Output as JSON.")
def round_cmd(values: tuple[float, ...], as_json: bool) -> None:
    """Round VALUES to the nearest integer (halves away from zero)."""
    rounded = list(values)
    round_in_place(rounded)

    if as_json:
        click.echo(json.dumps(rounded))
    else:
        click.echo(" ".join(str(v) for v in rounded))


# ── filter ────────────────────────────────────────────────────────────────────

@cli.command(name="filter")
@click.argument("needle")
@click.argument("haystack", nargs=-1)
@click.option("--json", "as_json", is_flag=True, default=False, help="Output as JSON.")
def filter_cmd(needle: str, haystack: tuple[str, ...], as_json: bool) -> None:
    """Print each HAYSTACK string that contains NEEDLE.

    With no HAYSTACK arguments, lines are read from stdin.
    """
    if not haystack:
        stdin = click.get_text_stream("stdin")
        haystack = tuple(line.rstrip("\r\n") for line in stdin)

    matches = filter_containing(haystack, needle)
    logger.debug("filter: %d of %d matched %r", len(matches), len(haystack), needle)

    if as_json:
        click.echo(json.dumps(matches))
        return

    for match in matches:
        click.echo(match)


# ── Logging ───────────────────────────────────────────────────────────────────

def _configure_logging() -> None:
    """Send DEBUG records to stderr through rich, keeping stdout clean."""
    from rich.logging import RichHandler

    pkg_logger = logging.getLogger("barkit")
    if not any(isinstance(h, RichHandler) for h in pkg_logger.handlers):
        handler = RichHandler(console=Console(stderr=True), show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
        pkg_logger.addHandler(handler)
    pkg_logger.setLevel(logging.DEBUG)


# ── Entry ─────────────────────────────────────────────────────────────────────

if __name__ == "__main__":
    cli()
