"""Action entry point: summarize a pull request and label it.

This is what the GitHub Action runs. It:
1. Reads and validates the action inputs
2. Waits the configured number of milliseconds and records the ``time`` output
3. Fetches the pull request's changed files
4. Totals additions/deletions/files and labels each file by extension
5. Adds the labels to the PR and posts the summary comment

Any error stops the run at the step that raised; the error message is
recorded as the step failure and the exit code is 1.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping

from prdiff import actions
from prdiff.config import ActionInputs, load_inputs
from prdiff.github.client import GitHubClient
from prdiff.github.renderer import render_summary_comment
from prdiff.summarizer import publish, summarize

logger = logging.getLogger(__name__)

ClientFactory = Callable[[ActionInputs], GitHubClient]


def _default_client(inputs: ActionInputs) -> GitHubClient:
    return GitHubClient(inputs.token, api_url=inputs.api_url)


def run_action(
    env: Mapping[str, str] | None = None,
    client_factory: ClientFactory | None = None,
) -> int:
    """Run the whole pipeline once. Returns the process exit code."""
    client_factory = client_factory or _default_client
    try:
        inputs = load_inputs(env)

        logger.debug(f"Waiting {inputs.milliseconds} milliseconds ...")
        logger.debug(actions.time_string())
        actions.wait(inputs.milliseconds)
        logger.debug(actions.time_string())

        actions.set_output("time", actions.time_string(), env=env)

        logger.debug(f"Summarizing {inputs.full_repo}#{inputs.pr_number}")
        with client_factory(inputs) as client:
            pull_request = client.get_pull_request(
                inputs.owner, inputs.repo, inputs.pr_number
            )
            summary, labels = summarize(pull_request.files)
            publish(
                client,
                inputs.owner,
                inputs.repo,
                inputs.pr_number,
                summary,
                labels,
                update_existing=inputs.update_comment,
            )

        logger.info(render_summary_comment(inputs.pr_number, summary, labels=labels))
        return 0
    except Exception as e:
        logger.debug("Run failed", exc_info=True)
        actions.set_failed(str(e))
        return 1
