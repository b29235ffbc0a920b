"""Markdown renderer for the pull-request summary comment."""

from __future__ import annotations

from collections import Counter

from prdiff.github.models import DiffSummary

COMMENT_MARKER = "<!-- prdiff-summary -->"


def render_summary_comment(
    pr_number: int,
    summary: DiffSummary,
    labels: list[str] | None = None,
    marker: bool = False,
) -> str:
    """Render the summary comment posted on the pull request.

    Each count sits on its own line, e.g.::

        Pull request #42 has been updated with:
        - 3 additions
        - 6 deletions
        - 2 changed files
    """
    lines: list[str] = []
    if marker:
        lines.append(COMMENT_MARKER)
    lines.append(f"Pull request #{pr_number} has been updated with:")
    lines.append("")
    lines.append(f"- {summary.additions} additions")
    lines.append(f"- {summary.deletions} deletions")
    lines.append(f"- {summary.changed_file_count} changed files")

    if labels:
        counts = Counter(labels)
        lines.append("")
        lines.append("| File type | Files |")
        lines.append("|:----------|------:|")
        for label, count in sorted(counts.items(), key=lambda x: (-x[1], x[0])):
            lines.append(f"| {label} | {count} |")

    return "\n".join(lines) + "\n"
