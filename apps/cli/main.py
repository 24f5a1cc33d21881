"""CLI application for StackScout."""

import asyncio
import json
import logging

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from core.analyze import analyze_repository
from core.config import get_settings
from core.ecosystems import ECOSYSTEMS, select_ecosystems
from core.exceptions import InvalidRequest
from core.logging import configure_logging
from core.models import RepositoryTarget, TechStackResult

console = Console()


def format_json_output(result: TechStackResult, details: bool = False) -> str:
    """Format JSON output."""
    payload: dict = result.to_dict()
    if details:
        payload["ecosystems"] = [
            {
                "ecosystem": report.ecosystem_id,
                "manifest": report.manifest_path,
                "status": report.status,
                "technologies": sorted(report.technologies),
            }
            for report in result.reports
        ]
    return json.dumps(payload, indent=2)


def format_details_table(result: TechStackResult) -> Table:
    """Build a per-ecosystem summary table."""
    table = Table(title=f"Manifests in {result.target.slug}")
    table.add_column("Ecosystem")
    table.add_column("Manifest")
    table.add_column("Status")
    table.add_column("Technologies")

    for report in result.reports:
        style = "green" if report.ok else "dim"
        table.add_row(
            report.ecosystem_id,
            report.manifest_path,
            report.status,
            ", ".join(sorted(report.technologies)) or "-",
            style=style,
        )
    return table


app = typer.Typer(
    name="stackscout",
    help="StackScout - Detect the tech stack of a GitHub repository from its manifests",
    add_completion=False,
)


@app.command()
def scan(
    owner: str = typer.Argument(help="Repository owner (user or organization)"),
    repo: str = typer.Argument(help="Repository name"),
    path: str | None = typer.Option(None, "--path", "-p", help="Sub-directory holding the manifests"),
    branch: str | None = typer.Option(None, "--branch", "-b", help="Branch to read (default: main, then master)"),
    token: str | None = typer.Option(None, "--token", "-t", help="Bearer token for private repositories"),
    only: list[str] | None = typer.Option(None, "--only", help="Restrict to an ecosystem (repeatable)"),
    format_type: str = typer.Option("text", "--format", help="Output format: text or json"),
    details: bool = typer.Option(False, "--details", help="Show per-ecosystem results"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log each manifest lookup"),
) -> None:
    """Detect the technologies used by OWNER/REPO."""
    if verbose:
        configure_logging(logging.DEBUG, handler=RichHandler(console=Console(stderr=True)))

    target = RepositoryTarget(
        owner=owner,
        repository=repo,
        sub_path=path,
        auth_token=token or get_settings().github_token,
        branch=branch,
    )

    try:
        ecosystems = select_ecosystems(only)
        result = asyncio.run(analyze_repository(target, ecosystems=ecosystems))
    except InvalidRequest as e:
        console.print(f"Error: {e}", style="red")
        raise typer.Exit(1)

    if format_type == "json":
        typer.echo(format_json_output(result, details=details))
        return

    if details:
        console.print(format_details_table(result))

    if result.is_empty:
        console.print(f"No tech stack detected for {target.slug}")
        return

    for technology in result.technologies:
        console.print(technology, highlight=False)


@app.command("ecosystems")
def list_ecosystems() -> None:
    """List the supported ecosystems and the manifest each one reads."""
    for descriptor in ECOSYSTEMS:
        console.print(f"{descriptor.ecosystem_id:<8} {descriptor.manifest_filename}", highlight=False)


if __name__ == "__main__":
    app()
