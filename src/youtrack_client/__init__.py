import json
import logging
import os
from collections.abc import Callable
from typing import Any

import click
from dotenv import load_dotenv
from requests.exceptions import HTTPError

from youtrack_client.exceptions import YouTrackError
from youtrack_client.utils.logging import setup_logging

__version__ = "0.1.0"

# Initialize logging with appropriate level
logging_level = logging.WARNING
if os.getenv("YOUTRACK_VERBOSE", "").lower() in ("true", "1", "yes"):
    logging_level = logging.DEBUG

logger = setup_logging(logging_level)


def _get_service(ctx: click.Context) -> Any:
    service = ctx.obj.get("service")
    if service is None:
        from youtrack_client.issues import IssuesService

        service = _run(IssuesService)
        ctx.obj["service"] = service
    return service


def _run(call: Callable[[], Any]) -> Any:
    try:
        return call()
    except (YouTrackError, HTTPError, ValueError) as e:
        logger.debug(f"Command failed: {e}")
        raise click.ClickException(str(e)) from e


def _parse_fields(values: tuple[str, ...]) -> dict[str, list[str]]:
    fields: dict[str, list[str]] = {}
    for value in values:
        name, separator, field_value = value.partition("=")
        if not separator or not name.strip():
            raise click.BadParameter(
                f"Expected NAME=VALUE, got '{value}'", param_hint="--field"
            )
        fields.setdefault(name.strip(), []).append(field_value)
    return fields


@click.group()
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (can be used multiple times)",
)
@click.option(
    "--env-file", type=click.Path(exists=True, dir_okay=False), help="Path to .env file"
)
@click.version_option(__version__, prog_name="youtrack-client")
@click.pass_context
def main(ctx: click.Context, verbose: int, env_file: str | None) -> None:
    """YouTrack issues client.

    Connection settings are read from the environment (YOUTRACK_URL,
    YOUTRACK_TOKEN or YOUTRACK_USERNAME/YOUTRACK_PASSWORD), optionally loaded
    from a .env file.
    """
    transport_level = None
    if verbose == 1:
        current_logging_level = logging.INFO
    elif verbose >= 2:  # -vvv also traces the transport
        current_logging_level = logging.DEBUG
        if verbose >= 3:
            transport_level = logging.DEBUG
    elif os.getenv("YOUTRACK_VERBOSE", "false").lower() in ("true", "1", "yes"):
        current_logging_level = logging.DEBUG
    else:
        current_logging_level = logging.WARNING

    global logger
    logger = setup_logging(current_logging_level, transport_level)
    logger.debug(f"Logging level set to: {logging.getLevelName(current_logging_level)}")

    if env_file:
        logger.debug(f"Loading environment from file: {env_file}")
        load_dotenv(env_file, override=True)
    else:
        load_dotenv(override=True)

    ctx.ensure_object(dict)


@main.command()
@click.argument("project_id")
@click.argument("summary")
@click.option("--description", default=None, help="Issue description")
@click.option(
    "--field",
    "fields",
    multiple=True,
    help="Custom field as NAME=VALUE; repeat a name for a multi-value field",
)
@click.option("--comment", "comments", multiple=True, help="Comment to add")
@click.option("--tag", "tags", multiple=True, help="Tag to apply")
@click.pass_context
def create(
    ctx: click.Context,
    project_id: str,
    summary: str,
    description: str | None,
    fields: tuple[str, ...],
    comments: tuple[str, ...],
    tags: tuple[str, ...],
) -> None:
    """Create an issue in PROJECT_ID and print its id."""
    from youtrack_client.models import YouTrackIssue

    issue = YouTrackIssue(summary=summary, description=description or "")
    for name, values in _parse_fields(fields).items():
        issue.set_field(name, values[0] if len(values) == 1 else values)
    for text in comments:
        issue.add_comment(text)
    for tag in tags:
        issue.add_tag(tag)

    service = _get_service(ctx)
    issue_id = _run(lambda: service.create_issue(project_id, issue))
    click.echo(issue_id)


@main.command()
@click.argument("issue_id")
@click.argument("command_text")
@click.option("--comment", default=None, help="Comment to add with the command")
@click.option(
    "--disable-notifications",
    is_flag=True,
    help="Do not notify watchers about the change",
)
@click.option("--run-as", default=None, help="Login to apply the command as")
@click.pass_context
def command(
    ctx: click.Context,
    issue_id: str,
    command_text: str,
    comment: str | None,
    disable_notifications: bool,
    run_as: str | None,
) -> None:
    """Apply COMMAND_TEXT to ISSUE_ID."""
    service = _get_service(ctx)
    _run(
        lambda: service.apply_command(
            issue_id,
            command_text,
            comment,
            disable_notifications=disable_notifications,
            run_as=run_as,
        )
    )


@main.command()
@click.argument("issue_id")
@click.option("--wikify", is_flag=True, help="Render the description as markup")
@click.pass_context
def get(ctx: click.Context, issue_id: str, wikify: bool) -> None:
    """Print ISSUE_ID as JSON."""
    service = _get_service(ctx)
    issue = _run(lambda: service.get_issue(issue_id, wikify_description=wikify))
    if issue is None:
        raise click.ClickException(f"Issue {issue_id} not found")
    click.echo(json.dumps(issue.to_simplified_dict(), indent=2, ensure_ascii=False))


@main.command()
@click.argument("issue_id")
@click.pass_context
def exists(ctx: click.Context, issue_id: str) -> None:
    """Print whether ISSUE_ID exists."""
    service = _get_service(ctx)
    found = _run(lambda: service.issue_exists(issue_id))
    click.echo("true" if found else "false")


@main.command()
@click.argument("issue_id")
@click.pass_context
def comments(ctx: click.Context, issue_id: str) -> None:
    """Print the comments of ISSUE_ID as JSON."""
    service = _get_service(ctx)
    result = _run(lambda: service.get_comments_for_issue(issue_id))
    click.echo(
        json.dumps(
            [comment.to_simplified_dict() for comment in result],
            indent=2,
            ensure_ascii=False,
        )
    )


__all__ = ["main", "__version__"]

if __name__ == "__main__":
    main()
