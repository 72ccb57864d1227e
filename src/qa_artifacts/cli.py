"""Command-line interface for qa-artifacts."""

import logging
from typing import NoReturn

import click

from qa_artifacts import __version__
from qa_artifacts.catalog import ARTIFACTS
from qa_artifacts.config.loader import load_config
from qa_artifacts.console import console, err_console
from qa_artifacts.errors import QAArtifactsError, UsageError
from qa_artifacts.options import parse_args, resolve_config
from qa_artifacts.renderer import create_artifact

logger = logging.getLogger(__name__)

USAGE_EXIT_CODE = 2
HELP_TOKENS = ("--help", "-h")
_NAME_WIDTH = max(len(spec.name) for spec in ARTIFACTS)


def _format_artifact_lines() -> list[str]:
    return [f"{spec.name:<{_NAME_WIDTH}} - {spec.description}" for spec in ARTIFACTS]


def usage_text() -> str:
    """Build the usage message shown for help and malformed invocations."""
    lines = [
        "qa-artifacts - ISTQB QA Artifacts Generator",
        "",
        "Usage:",
        "  qa-artifacts list",
        "  qa-artifacts create <artifact> [options]",
        "",
        "Options:",
        "  --out <dir>          Output directory (default: current directory)",
        "  --force              Overwrite existing files",
        "  --project <name>     Project name",
        "  --release <id>       Release/version identifier",
        "  --feature <name>     Feature name",
        "  --title <text>       Title (for bug reports)",
        "  --owner <name>       Document owner",
        "  --approvers <text>   Approvers list",
        "  --reported-by <name> Defect reporter",
        "  --env <text>         Environment details",
        "",
        "Artifacts:",
        *(f"  {line}" for line in _format_artifact_lines()),
        "",
        "Examples:",
        '  qa-artifacts create test-plan --project "MyApp" --release "v1.0"',
        '  qa-artifacts create bug-report --title "Login fails on Safari" --out ./bugs',
        '  qa-artifacts create risk-assessment --project "MyApp" --release "v1.0"',
    ]
    return "\n".join(lines)


def show_usage(ctx: click.Context) -> NoReturn:
    """Print usage to stdout and exit with the usage status."""
    console.print(usage_text(), markup=False, highlight=False, soft_wrap=True)
    ctx.exit(USAGE_EXIT_CODE)


def _fail(error: QAArtifactsError) -> NoReturn:
    """Report an error on stderr and exit with status 1."""
    err_console.print(
        str(error), style="red", markup=False, highlight=False, soft_wrap=True
    )
    raise SystemExit(1)


class ArtifactsGroup(click.Group):
    """Command group that answers help and unknown commands with usage text."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        if not args or any(token in HELP_TOKENS for token in args):
            show_usage(ctx)
        if not args[0].startswith("-") and args[0] not in self.commands:
            show_usage(ctx)
        return super().parse_args(ctx, args)


def version_callback(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    """Print version and exit."""
    if not value or ctx.resilient_parsing:
        return
    console.print(f"qa-artifacts [bold cyan]{__version__}[/bold cyan]")
    ctx.exit()


@click.group(cls=ArtifactsGroup, context_settings={"help_option_names": []})
@click.option(
    "--version",
    is_flag=True,
    callback=version_callback,
    expose_value=False,
    is_eager=True,
    help="Show version and exit.",
)
def main() -> None:
    """qa-artifacts - generate QA documents from templates."""


@main.command("list")
def list_artifacts() -> None:
    """List the artifact kinds that can be created."""
    for spec in ARTIFACTS:
        console.print(
            f"[cyan]{spec.name:<{_NAME_WIDTH}}[/cyan] - {spec.description}",
            highlight=False,
        )


@main.command(context_settings={"ignore_unknown_options": True})
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def create(ctx: click.Context, args: tuple[str, ...]) -> None:
    """Create an artifact from its template."""
    try:
        parsed = parse_args(list(args))
        if not parsed.positionals:
            show_usage(ctx)
        if len(parsed.positionals) > 1:
            extra = " ".join(parsed.positionals[1:])
            raise UsageError(f"Unexpected arguments: {extra}")

        config = resolve_config(parsed, load_config())
        out_path = create_artifact(parsed.positionals[0], config)
    except QAArtifactsError as e:
        logger.debug("create failed", exc_info=True)
        _fail(e)

    console.print(str(out_path), markup=False, highlight=False, soft_wrap=True)
