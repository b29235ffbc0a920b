"""Shared test fixtures for prdiff."""

from __future__ import annotations

import json
from pathlib import Path

import httpx
import pytest

from prdiff.github.client import GitHubClient


class FakeGitHub:
    """In-memory stand-in for the GitHub REST API, served via httpx.MockTransport."""

    def __init__(self, files: list[dict] | None = None) -> None:
        self.files = files or []
        self.comments: list[dict] = []
        self.requests: list[httpx.Request] = []
        self.fail: dict[tuple[str, str], tuple[int, dict]] = {}

    def fail_on(self, method: str, suffix: str, status: int = 500, message: str = "boom") -> None:
        self.fail[(method, suffix)] = (status, {"message": message})

    @property
    def calls(self) -> list[tuple[str, str]]:
        return [(r.method, r.url.path) for r in self.requests]

    def body(self, index: int) -> dict:
        return json.loads(self.requests[index].content)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        for (method, suffix), (status, payload) in self.fail.items():
            if request.method == method and path.endswith(suffix):
                return httpx.Response(status, json=payload)

        if request.method == "GET" and path.endswith("/files"):
            return httpx.Response(200, json=self.files)
        if request.method == "POST" and path.endswith("/labels"):
            labels = json.loads(request.content)["labels"]
            return httpx.Response(200, json=[{"name": name} for name in dict.fromkeys(labels)])
        if request.method == "GET" and path.endswith("/comments"):
            return httpx.Response(200, json=self.comments)
        if request.method == "POST" and path.endswith("/comments"):
            comment = {"id": len(self.comments) + 1, "body": json.loads(request.content)["body"]}
            self.comments.append(comment)
            return httpx.Response(201, json=comment)
        if request.method == "PATCH" and "/issues/comments/" in path:
            comment_id = int(path.rsplit("/", 1)[-1])
            for comment in self.comments:
                if comment["id"] == comment_id:
                    comment["body"] = json.loads(request.content)["body"]
                    return httpx.Response(200, json=comment)
        return httpx.Response(404, json={"message": "Not Found"})


@pytest.fixture
def pr_files() -> list[dict]:
    """The changed files of pull request #42, as the API returns them."""
    return [
        {"sha": "a1", "filename": "a.js", "status": "modified", "additions": 3, "deletions": 1, "changes": 4},
        {"sha": "b2", "filename": "b.md", "status": "modified", "additions": 0, "deletions": 5, "changes": 5},
    ]


@pytest.fixture
def fake_github(pr_files: list[dict]) -> FakeGitHub:
    return FakeGitHub(pr_files)


@pytest.fixture
def client(fake_github: FakeGitHub):
    gh = GitHubClient("test-token", transport=httpx.MockTransport(fake_github.handler))
    yield gh
    gh.close()


@pytest.fixture
def action_env(tmp_path: Path) -> dict[str, str]:
    """A complete set of action inputs plus a GITHUB_OUTPUT file."""
    output = tmp_path / "github_output"
    output.touch()
    return {
        "INPUT_MILLISECONDS": "0",
        "INPUT_OWNER": "octo",
        "INPUT_REPO": "hello",
        "INPUT_PR_NUMBER": "42",
        "INPUT_TOKEN": "test-token",
        "GITHUB_OUTPUT": str(output),
    }
