"""Minimal GitHub REST client for pull-request files, labels and comments."""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from prdiff.config import DEFAULT_API_URL
from prdiff.exceptions import GitHubAPIError, MalformedResponseError
from prdiff.github.models import ChangedFile, PullRequest

logger = logging.getLogger(__name__)

API_VERSION = "2022-11-28"
FILES_PER_PAGE = 100
USER_AGENT = "prdiff"


class GitHubClient:
    """Synchronous GitHub API client.

    Every call is a single request. Non-2xx responses and transport errors
    raise GitHubAPIError; nothing is retried.
    """

    def __init__(
        self,
        token: str,
        api_url: str = DEFAULT_API_URL,
        transport: httpx.BaseTransport | None = None,
        timeout: float = 30.0,
    ) -> None:
        self._client = httpx.Client(
            base_url=api_url.rstrip("/"),
            headers={
                "Accept": "application/vnd.github+json",
                "Authorization": f"Bearer {token}",
                "X-GitHub-Api-Version": API_VERSION,
                "User-Agent": USER_AGENT,
            },
            timeout=timeout,
            transport=transport,
        )

    def __enter__(self) -> GitHubClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        logger.debug("GitHub API %s %s", method, path)
        try:
            response = self._client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            raise GitHubAPIError(f"GitHub API {method} {path} failed: {e}") from e

        if response.is_error:
            raise GitHubAPIError(
                f"GitHub API {method} {path} returned {response.status_code}: "
                f"{_error_message(response)}",
                status_code=response.status_code,
            )
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise MalformedResponseError(
                f"GitHub API {method} {path} returned invalid JSON",
                status_code=response.status_code,
            ) from e

    # ------------------------------------------------------------------
    # Pull requests
    # ------------------------------------------------------------------

    def get_pull_request(self, owner: str, repo: str, number: int) -> PullRequest:
        """Fetch a pull request's changed files (first page only)."""
        path = f"/repos/{owner}/{repo}/pulls/{number}/files"
        data = self._request("GET", path, params={"per_page": FILES_PER_PAGE})
        if not isinstance(data, list):
            raise MalformedResponseError(
                f"Expected a list of files from {path}, got {type(data).__name__}"
            )

        files = []
        for i, entry in enumerate(data):
            try:
                files.append(ChangedFile.model_validate(entry))
            except ValidationError as e:
                raise MalformedResponseError(
                    f"Malformed file entry #{i} in pull request #{number}: "
                    f"{_first_error(e)}"
                ) from e
        return PullRequest(number=number, files=files)

    # ------------------------------------------------------------------
    # Issues (labels and comments on the PR's issue)
    # ------------------------------------------------------------------

    def add_labels(self, owner: str, repo: str, issue_number: int, labels: list[str]) -> list[dict]:
        path = f"/repos/{owner}/{repo}/issues/{issue_number}/labels"
        return self._request("POST", path, json={"labels": list(labels)}) or []

    def create_comment(self, owner: str, repo: str, issue_number: int, body: str) -> dict:
        path = f"/repos/{owner}/{repo}/issues/{issue_number}/comments"
        return self._request("POST", path, json={"body": body}) or {}

    def list_comments(self, owner: str, repo: str, issue_number: int) -> list[dict]:
        path = f"/repos/{owner}/{repo}/issues/{issue_number}/comments"
        return self._request("GET", path, params={"per_page": 100}) or []

    def find_comment(self, owner: str, repo: str, issue_number: int, marker: str) -> dict | None:
        """Return the first issue comment whose body contains ``marker``."""
        for comment in self.list_comments(owner, repo, issue_number):
            if marker in (comment.get("body") or ""):
                return comment
        return None

    def update_comment(self, owner: str, repo: str, comment_id: int, body: str) -> dict:
        path = f"/repos/{owner}/{repo}/issues/comments/{comment_id}"
        return self._request("PATCH", path, json={"body": body}) or {}


def _error_message(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        return response.text.strip() or response.reason_phrase
    if isinstance(payload, dict) and payload.get("message"):
        return str(payload["message"])
    return response.reason_phrase


def _first_error(e: ValidationError) -> str:
    err = e.errors()[0]
    field = ".".join(str(loc) for loc in err["loc"]) or "entry"
    return f"{field}: {err['msg']}"
