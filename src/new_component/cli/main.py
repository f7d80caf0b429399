"""new-component CLI entry point."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.markup import escape

from new_component import __version__
from new_component.cli.output import ScaffoldReporter
from new_component.config import RuntimeContext, get_config
from new_component.errors import ConfigurationError
from new_component.models.config import DEFAULT_PROJECT, DEFAULT_TEMPLATE
from new_component.render import build_prettifier
from new_component.resolver import resolve_template
from new_component.scaffold.pipeline import ScaffoldPipeline
from new_component.scaffold.templates import list_templates

error_console = Console(stderr=True)

# Listed once at import so the help text reflects what is on disk.
_TEMPLATE_CHOICES = ", ".join(f'"{name}"' for name in list_templates())

app = typer.Typer(
    name="new-component",
    help="Create a new component from a template",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"new-component {__version__}")
        raise typer.Exit()


@app.command()
def create(
    component_name: str = typer.Argument(..., help="Name of the component to create"),
    project: str = typer.Option(
        DEFAULT_PROJECT, "-p", "--project", help="Project name of the configuration"
    ),
    template: str = typer.Option(
        DEFAULT_TEMPLATE,
        "-t",
        "--template",
        help=f"Template name to create (options: {_TEMPLATE_CHOICES})",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Create a new component from a template."""
    context = RuntimeContext.from_environment()

    try:
        config = get_config(context)
        resolved = resolve_template(
            config,
            component_name,
            project_name=project,
            template_name=template,
        )
    except ConfigurationError as exc:
        error_console.print(f"[bold red]Configuration error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=1)

    pipeline = ScaffoldPipeline(
        resolved,
        root=context.cwd,
        prettify=build_prettifier(),
        reporter=ScaffoldReporter(),
    )
    outcome = asyncio.run(pipeline.run())

    # An existing component is a refusal, not a failure.
    if outcome.ok or outcome.already_exists:
        return
    raise typer.Exit(code=1)
