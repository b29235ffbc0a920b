"""PR diff summarizer: change totals and per-file type labels.

The pipeline for one pull request is fetch -> summarize -> label -> comment.
``classify`` and ``summarize`` are pure; ``publish`` performs the two
side effects through a GitHubClient.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from prdiff.github.models import ChangedFile, DiffSummary
from prdiff.github.renderer import COMMENT_MARKER, render_summary_comment

if TYPE_CHECKING:
    from prdiff.github.client import GitHubClient

logger = logging.getLogger(__name__)

# Exact, case-sensitive extension lookup. "yaml" and "JS" are not listed.
EXTENSION_LABELS: dict[str, str] = {
    "js": "JavaScript",
    "json": "JSON",
    "md": "Markdown",
    "py": "Python",
    "yml": "YAML",
}
DEFAULT_LABEL = "Other"


def file_extension(filename: str) -> str:
    """Text after the last '.', or the whole name when there is none."""
    return filename.rsplit(".", 1)[-1]


def classify(filename: str) -> str:
    """Map a file path to its file-type label."""
    return EXTENSION_LABELS.get(file_extension(filename), DEFAULT_LABEL)


def summarize(files: Iterable[ChangedFile]) -> tuple[DiffSummary, list[str]]:
    """Total the changes and label each file, preserving input order."""
    summary = DiffSummary()
    labels: list[str] = []
    for file in files:
        summary.add(file)
        labels.append(classify(file.filename))
    return summary, labels


def publish(
    client: GitHubClient,
    owner: str,
    repo: str,
    pr_number: int,
    summary: DiffSummary,
    labels: list[str],
    update_existing: bool = False,
) -> dict:
    """Apply the labels to the pull request, then post the summary comment.

    Labels are sent as-is, repeats included. With ``update_existing`` the
    previous summary comment (found by its hidden marker) is edited in place
    instead of adding a new one. Errors from either call propagate.
    """
    logger.debug("Adding %d label(s) to %s/%s#%d", len(labels), owner, repo, pr_number)
    client.add_labels(owner, repo, pr_number, labels)

    body = render_summary_comment(pr_number, summary, labels=labels, marker=update_existing)
    if update_existing:
        existing = client.find_comment(owner, repo, pr_number, COMMENT_MARKER)
        if existing:
            logger.debug("Updating summary comment %s", existing["id"])
            return client.update_comment(owner, repo, existing["id"], body)

    logger.debug("Creating summary comment on %s/%s#%d", owner, repo, pr_number)
    return client.create_comment(owner, repo, pr_number, body)
