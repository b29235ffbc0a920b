"""Action input handling for prdiff."""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, Field, ValidationError

from prdiff.exceptions import ConfigError

DEFAULT_API_URL = "https://api.github.com"
REQUIRED_INPUTS = ("milliseconds", "owner", "repo", "pr_number", "token")
TRUE_VALUES = ("true", "True", "TRUE")
FALSE_VALUES = ("false", "False", "FALSE")


class ActionInputs(BaseModel):
    """Validated inputs for a single action run."""

    milliseconds: int = Field(ge=0)
    owner: str = Field(min_length=1)
    repo: str = Field(min_length=1)
    pr_number: int = Field(gt=0)
    token: str = Field(min_length=1, repr=False)
    api_url: str = DEFAULT_API_URL
    update_comment: bool = False

    @property
    def full_repo(self) -> str:
        return f"{self.owner}/{self.repo}"


def input_env_name(name: str) -> str:
    """Environment variable the runner uses for an action input."""
    return "INPUT_" + name.replace(" ", "_").upper()


def get_input(name: str, env: Mapping[str, str] | None = None, required: bool = False) -> str:
    """Read one action input, stripped of surrounding whitespace.

    Raises ConfigError when ``required`` is set and the input is empty.
    """
    env = os.environ if env is None else env
    value = env.get(input_env_name(name), "").strip()
    if required and not value:
        raise ConfigError(f"Input required and not supplied: {name}")
    return value


def get_boolean_input(name: str, env: Mapping[str, str] | None = None) -> bool:
    """Read a YAML 1.2 core-schema boolean input. Empty means False."""
    value = get_input(name, env)
    if not value or value in FALSE_VALUES:
        return False
    if value in TRUE_VALUES:
        return True
    raise ConfigError(
        f"Input '{name}' is not a boolean: {value!r} "
        "(expected one of true | True | TRUE | false | False | FALSE)"
    )


def load_inputs(env: Mapping[str, str] | None = None) -> ActionInputs:
    """Collect and validate every action input before any work starts.

    All missing required inputs are reported together in one ConfigError.
    """
    env = os.environ if env is None else env

    raw = {name: get_input(name, env) for name in REQUIRED_INPUTS}
    missing = [name for name, value in raw.items() if not value]
    if missing:
        raise ConfigError(f"Input required and not supplied: {', '.join(missing)}")

    data: dict[str, object] = dict(raw)
    data["api_url"] = (
        get_input("api_url", env) or env.get("GITHUB_API_URL") or DEFAULT_API_URL
    ).rstrip("/")
    data["update_comment"] = get_boolean_input("update_comment", env)

    try:
        return ActionInputs(**data)
    except ValidationError as e:
        problems = []
        for err in e.errors():
            field = ".".join(str(loc) for loc in err["loc"])
            problems.append(f"Input '{field}' is invalid: {raw.get(field, '')!r} ({err['msg']})")
        raise ConfigError("; ".join(problems)) from e
