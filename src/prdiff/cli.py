"""Command-line interface for prdiff."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from prdiff import __version__
from prdiff.github.models import ChangedFile
from prdiff.summarizer import classify, summarize
from prdiff.ui.console import Console

console = Console()


def _load_files(file: str) -> list[ChangedFile]:
    """Read a JSON array in the shape of the GitHub ``pulls/files`` response."""
    path = Path(file)
    try:
        data = json.loads(path.read_text())
    except (OSError, json.JSONDecodeError) as e:
        console.error(f"Could not read {file}: {e}")
        sys.exit(1)

    if not isinstance(data, list):
        console.error(f"Expected a JSON array of changed files in {file}")
        sys.exit(1)

    files = []
    for i, entry in enumerate(data):
        try:
            files.append(ChangedFile.model_validate(entry))
        except ValidationError as e:
            console.error(f"Invalid file entry #{i}: {e.errors()[0]['msg']}")
            sys.exit(1)
    return files


@click.group()
@click.version_option(version=__version__, prog_name="prdiff")
def main():
    """prdiff - summarize pull request diffs and label them by file type."""
    pass


@main.command()
def run():
    """Run as a GitHub Action step.

    Inputs come from INPUT_* environment variables (milliseconds, owner,
    repo, pr_number, token, and optionally api_url, update_comment).
    """
    from prdiff.action import run_action
    from prdiff.actions import configure_logging

    configure_logging()
    sys.exit(run_action())


@main.command("summarize")
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.option("--pr", "pr_number", type=int, default=None, help="Pull request number for the comment header.")
@click.option(
    "--format", "output_format",
    type=click.Choice(["table", "json", "markdown"]),
    default="table",
    help="Output format.",
)
def summarize_cmd(file: str, pr_number: int | None, output_format: str):
    """Summarize a saved list of changed files without calling GitHub.

    FILE is a JSON array of objects with filename, additions and deletions,
    e.g. the output of:

        gh api repos/OWNER/REPO/pulls/N/files > files.json
    """
    files = _load_files(file)
    summary, labels = summarize(files)

    if output_format == "json":
        click.echo(json.dumps({**summary.to_dict(), "labels": labels}, indent=2))
    elif output_format == "markdown":
        from prdiff.github.renderer import render_summary_comment

        if pr_number is None:
            console.error("--pr is required for markdown output")
            sys.exit(1)
        click.echo(render_summary_comment(pr_number, summary, labels=labels))
    else:
        if files:
            console.show_files(files, labels)
        else:
            console.info("No changed files.")
        console.show_summary(summary, labels)


@main.command("classify")
@click.argument("paths", nargs=-1, required=True)
def classify_cmd(paths: tuple[str, ...]):
    """Show the file-type label for each PATH."""
    console.show_labels(list(paths), [classify(p) for p in paths])
