"""CLI entry point for resolving action inputs."""

import click
import structlog

from merge_dependabot.config.inputs import get_inputs, parse_input_assignment, read_action_inputs
from merge_dependabot.exceptions import ConfigurationError
from merge_dependabot.utils.logging_config import configure_logging

log = structlog.get_logger(__name__)


def _collect_assignments(
    ctx: click.Context, param: click.Parameter, values: tuple[str, ...]
) -> dict[str, str]:
    assignments: dict[str, str] = {}
    for value in values:
        try:
            name, raw = parse_input_assignment(value)
        except ConfigurationError as e:
            raise click.BadParameter(e.message, ctx=ctx, param=param) from e
        assignments[name] = raw
    return assignments


@click.group()
@click.option(
    "--log-level",
    default="INFO",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    help="Logging level",
)
@click.option(
    "--log-format",
    default="github",
    type=click.Choice(["github", "json", "console"]),
    help="Log renderer (github prints workflow commands)",
)
def cli(log_level: str, log_format: str) -> None:
    """merge-dependabot: normalize pull request auto-merge action inputs."""
    configure_logging(log_level, log_format)  # type: ignore[arg-type]


@cli.command()
@click.option(
    "--input",
    "assignments",
    multiple=True,
    callback=_collect_assignments,
    metavar="NAME=VALUE",
    help="Action input, e.g. --input merge-method=rebase (repeatable)",
)
@click.option(
    "--from-env/--no-from-env",
    default=True,
    help="Read INPUT_* environment variables before applying --input values",
)
def resolve(assignments: dict[str, str], from_env: bool) -> None:
    """Resolve action inputs and print them as JSON."""
    raw = read_action_inputs() if from_env else {}
    raw.update(assignments)

    inputs = get_inputs(raw)
    log.debug("inputs_resolved", merge_method=str(inputs.merge_method), target=str(inputs.target))
    click.echo(inputs.model_dump_json(by_alias=True, indent=2))


if __name__ == "__main__":
    cli()
