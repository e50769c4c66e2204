"""
Action input parsing.

GitHub Actions hands every input over as text. ``get_inputs`` turns those
strings into a frozen, fully-typed ``ActionInputs`` object for the merge
workflow. Unusable values fall back to their defaults; only a malformed
``merge-method`` is reported, through the injected ``log_warning``
callable.

Example:
    >>> inputs = get_inputs({"merge-method": "rebase", "exclude": "react, vue"})
    >>> inputs.merge_method
    <MergeMethod.REBASE: 'rebase'>
    >>> inputs.exclude_pkgs
    ('react', 'vue')
"""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping

from pydantic import BaseModel, ConfigDict, Field

from merge_dependabot import log
from merge_dependabot.enums import MergeMethod, UpdateTarget
from merge_dependabot.exceptions import ConfigurationError, InvalidArgumentError
from merge_dependabot.utils.normalizers import parse_comma_or_semicolon_separated_value

RawInputs = Mapping[str, str | None]

INPUT_NAMES: tuple[str, ...] = (
    "merge-method",
    "exclude",
    "merge-comment",
    "approve-only",
    "use-github-auto-merge",
    "skip-commit-verification",
    "skip-verification",
    "target",
    "pr-number",
)

MERGE_METHODS: dict[str, MergeMethod] = {method.value: method for method in MergeMethod}

TARGETS: dict[str, UpdateTarget] = {
    target.short_name: target for target in UpdateTarget if target is not UpdateTarget.ANY
}

DEFAULT_MERGE_METHOD = MergeMethod.SQUASH
DEFAULT_TARGET = UpdateTarget.ANY

MALFORMED_MERGE_METHOD_WARNING = (
    f"merge-method input is ignored because it is malformed, defaulting to `{DEFAULT_MERGE_METHOD.value}`."
)


class ActionInputs(BaseModel):
    """Typed configuration for one run of the merge action.

    Attribute names are snake_case; the aliases keep the upper-case names
    the action has always exposed, so ``model_dump(by_alias=True)`` gives
    ``{"MERGE_METHOD": ..., "EXCLUDE_PKGS": ..., ...}``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    merge_method: MergeMethod = Field(default=DEFAULT_MERGE_METHOD, alias="MERGE_METHOD")
    exclude_pkgs: tuple[str, ...] = Field(default=(), alias="EXCLUDE_PKGS")
    merge_comment: str = Field(default="", alias="MERGE_COMMENT")
    approve_only: bool = Field(default=False, alias="APPROVE_ONLY")
    use_github_auto_merge: bool = Field(default=False, alias="USE_GITHUB_AUTO_MERGE")
    skip_commit_verification: bool = Field(default=False, alias="SKIP_COMMIT_VERIFICATION")
    skip_verification: bool = Field(default=False, alias="SKIP_VERIFICATION")
    target: UpdateTarget = Field(default=DEFAULT_TARGET, alias="TARGET")
    pr_number: str | None = Field(default=None, alias="PR_NUMBER")


def _parse_boolean(value: str | None) -> bool:
    return value is not None and value.strip().lower() == "true"


def _parse_merge_method(value: str | None, log_warning: Callable[[str], None]) -> MergeMethod:
    value = (value or "").strip().lower()
    if not value:
        return DEFAULT_MERGE_METHOD

    method = MERGE_METHODS.get(value)
    if method is None:
        log_warning(MALFORMED_MERGE_METHOD_WARNING)
        return DEFAULT_MERGE_METHOD
    return method


def _parse_target(value: str | None) -> UpdateTarget:
    if not value:
        return DEFAULT_TARGET
    return TARGETS.get(value.strip().lower(), DEFAULT_TARGET)


def get_inputs(
    inputs: RawInputs | None = None,
    *,
    log_warning: Callable[[str], None] | None = None,
) -> ActionInputs:
    """Build the typed action configuration from raw action inputs.

    Args:
        inputs: Mapping of kebab-case input names to their string values.
            Missing keys and ``None`` values count as absent.
        log_warning: Receives the message when ``merge-method`` is malformed.
            Defaults to ``merge_dependabot.log.log_warning``.

    Returns:
        The resolved ``ActionInputs``

    Raises:
        InvalidArgumentError: If ``inputs`` is missing or is not a mapping
    """
    if inputs is None or not isinstance(inputs, Mapping):
        raise InvalidArgumentError("Action inputs must be provided as a mapping", argument="inputs")

    warn = log_warning if log_warning is not None else log.log_warning

    exclude = inputs.get("exclude")

    return ActionInputs(
        merge_method=_parse_merge_method(inputs.get("merge-method"), warn),
        exclude_pkgs=tuple(parse_comma_or_semicolon_separated_value(exclude)) if exclude else (),
        merge_comment=inputs.get("merge-comment") or "",
        approve_only=_parse_boolean(inputs.get("approve-only")),
        use_github_auto_merge=_parse_boolean(inputs.get("use-github-auto-merge")),
        skip_commit_verification=_parse_boolean(inputs.get("skip-commit-verification")),
        skip_verification=_parse_boolean(inputs.get("skip-verification")),
        target=_parse_target(inputs.get("target")),
        pr_number=inputs.get("pr-number"),
    )


def input_env_name(name: str) -> str:
    """Environment variable the Actions runner uses for an input name."""
    return f"INPUT_{name.replace(' ', '_').upper()}"


def read_action_inputs(environ: Mapping[str, str] | None = None) -> dict[str, str]:
    """Collect the recognized action inputs from the runner environment.

    Args:
        environ: Environment to read from, ``os.environ`` when omitted

    Returns:
        Raw inputs keyed by input name, holding only the inputs that are set
    """
    env = os.environ if environ is None else environ
    raw: dict[str, str] = {}
    for name in INPUT_NAMES:
        value = env.get(input_env_name(name))
        if value is not None:
            raw[name] = value.strip()
    return raw


def parse_input_assignment(text: str) -> tuple[str, str]:
    """Split a ``name=value`` pair given on the command line.

    Raises:
        ConfigurationError: If ``text`` has no ``=`` or the name is empty
    """
    name, sep, value = text.partition("=")
    name = name.strip()
    if not sep or not name:
        raise ConfigurationError(f"Expected NAME=VALUE, got {text!r}")
    return name, value
