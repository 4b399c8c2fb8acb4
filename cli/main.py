"""mdlinks CLI — list, validate and count the links in Markdown files.

Usage:
    python cli/main.py --help
    mdlinks README.md
    mdlinks docs/ --validate --stats
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from mdlinks import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import typer

from cli.rendering import render_result
from mdlinks import MdLinksError, Options, md_links_sync
from mdlinks.config import settings

app = typer.Typer(
    name="mdlinks",
    help="Extract and check the links in Markdown files.",
    no_args_is_help=True,
)


@app.command()
def main(
    path: str = typer.Argument(..., help="Markdown file or directory to scan."),
    validate: bool = typer.Option(False, "--validate", help="Probe every link over HTTP."),
    stats: bool = typer.Option(False, "--stats", help="Print counts instead of links."),
    as_json: bool = typer.Option(False, "--json", help="Emit the result as JSON."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Print progress to stderr."),
) -> None:
    """Print the links found under PATH."""
    previous_verbose = settings.verbose
    settings.verbose = previous_verbose or verbose
    try:
        result = md_links_sync(path, Options(validate=validate, stats=stats))
    except MdLinksError as exc:
        typer.echo(f"[mdlinks] {exc}", err=True)
        raise typer.Exit(1)
    finally:
        settings.verbose = previous_verbose

    output = render_result(result, as_json=as_json)
    if output:
        typer.echo(output)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
