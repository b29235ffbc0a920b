"""GitHub Actions runtime helpers: workflow commands, outputs, and logging.

The runner reads specially formatted lines from stdout (``::debug::``,
``::error::`` ...) and step outputs from the file named by
``$GITHUB_OUTPUT``. Debug lines only show up when step debugging is
enabled on the repository.
"""

from __future__ import annotations

import logging
import os
import sys
import time
import uuid
from collections.abc import Mapping
from datetime import datetime
from typing import TextIO

logger = logging.getLogger(__name__)


def escape_data(value: str) -> str:
    """Escape a workflow command message."""
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def escape_property(value: str) -> str:
    """Escape a workflow command property value."""
    return escape_data(value).replace(":", "%3A").replace(",", "%2C")


def issue_command(
    command: str,
    message: str = "",
    properties: Mapping[str, str] | None = None,
    stream: TextIO | None = None,
) -> None:
    """Write a ``::command prop=value::message`` line for the runner."""
    stream = stream or sys.stdout
    props = ""
    if properties:
        props = " " + ",".join(f"{k}={escape_property(v)}" for k, v in properties.items())
    stream.write(f"::{command}{props}::{escape_data(message)}\n")
    stream.flush()


def debug(message: str, stream: TextIO | None = None) -> None:
    issue_command("debug", message, stream=stream)


def warning(message: str, stream: TextIO | None = None) -> None:
    issue_command("warning", message, stream=stream)


def error(message: str, stream: TextIO | None = None) -> None:
    issue_command("error", message, stream=stream)


def set_failed(message: str, stream: TextIO | None = None) -> None:
    """Record the step failure. The caller is responsible for the exit code."""
    error(message, stream=stream)


def set_output(
    name: str,
    value: str,
    env: Mapping[str, str] | None = None,
    stream: TextIO | None = None,
) -> None:
    """Record a step output for later workflow steps.

    Appends a heredoc-style entry to ``$GITHUB_OUTPUT``. Falls back to the
    legacy ``set-output`` command when the file is not available (local runs).
    """
    env = os.environ if env is None else env
    output_path = env.get("GITHUB_OUTPUT")
    if not output_path:
        issue_command("set-output", value, {"name": name}, stream=stream)
        return

    delimiter = f"ghadelimiter_{uuid.uuid4()}"
    if delimiter in name or delimiter in value:
        raise ValueError(f"Unexpected input: delimiter {delimiter} found in output '{name}'")
    with open(output_path, "a", encoding="utf-8") as f:
        f.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")


def time_string(now: datetime | None = None) -> str:
    """Local wall-clock time, e.g. ``14:03:22 GMT+0000 (UTC)``."""
    now = (now or datetime.now()).astimezone()
    return now.strftime("%H:%M:%S GMT%z (%Z)")


def wait(milliseconds: int) -> None:
    """Block for the given number of milliseconds."""
    if isinstance(milliseconds, bool) or not isinstance(milliseconds, int):
        raise ValueError("milliseconds not a number")
    time.sleep(max(milliseconds, 0) / 1000)


class ActionsLogHandler(logging.Handler):
    """Route log records to workflow commands.

    DEBUG becomes ``::debug::``, WARNING ``::warning::``, ERROR and above
    ``::error::``. INFO is printed as-is.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        super().__init__(level=logging.DEBUG)
        self.stream = stream

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
            stream = self.stream or sys.stdout
            if record.levelno >= logging.ERROR:
                error(message, stream=stream)
            elif record.levelno >= logging.WARNING:
                warning(message, stream=stream)
            elif record.levelno >= logging.INFO:
                stream.write(message + "\n")
                stream.flush()
            else:
                debug(message, stream=stream)
        except Exception:
            self.handleError(record)


def configure_logging(stream: TextIO | None = None) -> logging.Handler:
    """Attach an ActionsLogHandler to the ``prdiff`` logger (idempotent)."""
    pkg_logger = logging.getLogger("prdiff")
    for handler in pkg_logger.handlers:
        if isinstance(handler, ActionsLogHandler):
            handler.stream = stream
            return handler
    handler = ActionsLogHandler(stream)
    handler.setFormatter(logging.Formatter("%(message)s"))
    pkg_logger.addHandler(handler)
    pkg_logger.setLevel(logging.DEBUG)
    pkg_logger.propagate = False
    return handler
