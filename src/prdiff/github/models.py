"""Typed view of the pull-request data prdiff consumes from the GitHub API."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field


class ChangedFile(BaseModel):
    """One entry of ``GET /repos/{owner}/{repo}/pulls/{number}/files``.

    Strict: booleans, numeric strings and floats are rejected as counts.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", strict=True)

    filename: str = Field(min_length=1)
    additions: int = Field(ge=0)
    deletions: int = Field(ge=0)


class PullRequest(BaseModel):
    """A pull request and its changed files, in API order."""

    number: int = Field(gt=0)
    files: list[ChangedFile] = Field(default_factory=list)


@dataclass
class DiffSummary:
    """Aggregate change counts for one pull request."""
    additions: int = 0
    deletions: int = 0
    changed_file_count: int = 0

    def add(self, file: ChangedFile) -> None:
        self.additions += file.additions
        self.deletions += file.deletions
        self.changed_file_count += 1

    def to_dict(self) -> dict[str, int]:
        return {
            "additions": self.additions,
            "deletions": self.deletions,
            "changed_file_count": self.changed_file_count,
        }
