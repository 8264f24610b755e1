"""CLI entry point for pkgscore."""

import json
import logging
from pathlib import Path

# Load .env file if it exists
from dotenv import load_dotenv
load_dotenv()

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from pkgscore.adapters.base import BaseLoader
from pkgscore.adapters.npm import NpmRegistryLoader
from pkgscore.adapters.package_json import PackageJsonLoader
from pkgscore.analyzers.rules import RULES
from pkgscore.analyzers.scorer import PackageChecker
from pkgscore.exceptions import ManifestLoadError, RuleEvaluationError
from pkgscore.models.schemas import Report

app = typer.Typer(help="Package manifest quality scoring tool.")

console = Console()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _score_bar(score: float, total: float, width: int = 20) -> str:
    """Create a visual score bar."""
    filled = int(score / total * width) if total else 0
    empty = width - filled
    color = "green" if filled == width else "yellow" if filled else "red"
    return f"[{color}]{'█' * filled}[/{color}][dim]{'░' * empty}[/dim]"


def _print_report(title: str, report: Report) -> None:
    table = Table(title=title)
    table.add_column("Rule", style="cyan")
    table.add_column("Score", justify="right")
    table.add_column("", width=22)

    for rule_name, result in report.scores.items():
        table.add_row(
            rule_name,
            f"{result.achieved:g}/{result.maximum:g}",
            _score_bar(result.achieved, result.maximum),
        )

    console.print(table)
    console.print(
        f"[bold]Overall:[/bold] {report.overall.achieved:g}/{report.overall.maximum:g} "
        f"({report.percentage:g}%)"
    )


def _score_and_print(location: str, loader: BaseLoader, as_json: bool, title: str | None = None) -> None:
    try:
        checker = PackageChecker(location, loader=loader)
    except ManifestLoadError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    try:
        report = checker.score()
    except RuleEvaluationError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(2)

    if as_json:
        console.print_json(json.dumps(report.as_legacy_dict()))
    else:
        if title is None:
            manifest = checker.manifest
            title = f"{manifest.get('name', location)}@{manifest.get('version', '?')}"
        _print_report(title, report)


@app.command()
def score(
    path: Path = typer.Argument(Path("."), help="Package directory or package.json file"),
    as_json: bool = typer.Option(False, "--json", help="Print the report as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log each rule result"),
) -> None:
    """Score the package.json of a local package."""
    _configure_logging(verbose)
    _score_and_print(str(path), PackageJsonLoader(), as_json, title=str(path))


@app.command()
def npm(
    package: str = typer.Argument(..., help="npm package name"),
    version: str | None = typer.Option(None, "--version", help="Version or dist-tag (default: latest)"),
    as_json: bool = typer.Option(False, "--json", help="Print the report as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log each rule result"),
) -> None:
    """Fetch a published package's manifest from the npm registry and score it."""
    _configure_logging(verbose)
    location = f"npm:{package}@{version}" if version else f"npm:{package}"
    _score_and_print(location, NpmRegistryLoader(), as_json)


@app.command()
def rules() -> None:
    """List the registered scoring rules."""
    table = Table(title=f"{len(RULES)} Scoring Rules")
    table.add_column("Rule", style="cyan")
    table.add_column("Max", justify="right", style="green")
    table.add_column("Description", style="white", max_width=60)

    for rule in RULES:
        table.add_row(rule.name, f"{rule.maximum:g}", rule.description.splitlines()[0] if rule.description else "")

    console.print(table)
    total = sum(rule.maximum for rule in RULES)
    console.print(f"[dim]Maximum achievable score: {total:g}[/dim]")


@app.command()
def version() -> None:
    """Show version information."""
    from pkgscore import __version__

    console.print(f"pkgscore v{__version__}")


if __name__ == "__main__":
    app()
