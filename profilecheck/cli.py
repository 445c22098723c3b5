"""Command-line interface for profilecheck."""

import asyncio
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from profilecheck import (
    BatchOrchestrator,
    JsonFileSource,
    VerifierConfig,
    build_scrapers,
    save_report,
    to_json,
    __version__,
)
from profilecheck.config import LogFormat
from profilecheck.exceptions import ConfigError, InvalidIdentifierError
from profilecheck.logging import configure_logging
from profilecheck.models.request import Gender, Platform, SearchCriteria, VerificationRequest
from profilecheck.platforms.usernames import get_extractor

app = typer.Typer(
    name="profilecheck",
    help="Batch social profile verification",
    add_completion=False,
)
console = Console()


def version_callback(value: bool):
    if value:
        console.print(f"profilecheck version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """profilecheck - score social profiles against search and brand criteria."""
    pass


@app.command()
def verify(
    identifiers: list[str] = typer.Argument(..., help="Profile URLs or handles"),
    platform: Platform = typer.Option(Platform.INSTAGRAM, "--platform", "-p", help="Platform of all identifiers"),
    niche: list[str] = typer.Option([], "--niche", "-n", help="Target niche (repeatable)"),
    location: Optional[str] = typer.Option(None, "--location", "-l", help="Target location"),
    gender: Optional[Gender] = typer.Option(None, "--gender", "-g", help="Target gender"),
    brand: Optional[str] = typer.Option(None, "--brand", "-b", help="Brand name"),
    min_age: Optional[int] = typer.Option(None, "--min-age", help="Minimum age"),
    max_age: Optional[int] = typer.Option(None, "--max-age", help="Maximum age"),
    min_followers: Optional[int] = typer.Option(None, "--min-followers", help="Minimum follower count"),
    max_followers: Optional[int] = typer.Option(None, "--max-followers", help="Maximum follower count"),
    snapshots: Optional[Path] = typer.Option(
        None, "--snapshots", "-s", help="Directory of <username>.json scraper snapshots"
    ),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write the report to a JSON file"),
    as_json: bool = typer.Option(False, "--json", help="Print the report as JSON"),
    headless: bool = typer.Option(True, "--headless/--no-headless", help="Run browser in headless mode"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Log as JSON, print only the summary"),
):
    """Verify one or more profiles against search criteria."""
    if snapshots is None and platform != Platform.TWITTER:
        console.print(f"[red]--snapshots is required for {platform.value}[/red]")
        raise typer.Exit(1)

    try:
        criteria = SearchCriteria(
            niches=niche,
            location=location,
            gender=gender,
            brand_name=brand,
            min_age=min_age,
            max_age=max_age,
            min_followers=min_followers,
            max_followers=max_followers,
        )
    except ValueError as e:
        console.print(f"[red]Invalid criteria: {e}[/red]")
        raise typer.Exit(1)

    config = VerifierConfig(
        headless=headless,
        log_format=LogFormat.JSON if quiet or as_json else LogFormat.CONSOLE,
    )
    configure_logging(config)
    sources = {platform: JsonFileSource(snapshots)} if snapshots else {}
    try:
        scrapers = build_scrapers(config, sources, include_twitter=snapshots is None)
    except ConfigError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)
    requests = [
        VerificationRequest(profile_identifier=identifier, platform=platform, criteria=criteria)
        for identifier in identifiers
    ]

    async def run():
        async with BatchOrchestrator(scrapers, config) as orchestrator:
            return await orchestrator.verify_report(requests, criteria)

    report = asyncio.run(run())

    if output:
        path = save_report(report, output)
        console.print(f"[dim]Saved to {path}[/dim]")

    if as_json:
        typer.echo(to_json(report))
        return

    if not quiet:
        _print_results_table(report.results)
    _print_summary(report.summary)


@app.command()
def check(
    identifiers: list[str] = typer.Argument(..., help="Profile URLs or handles"),
    platform: Platform = typer.Option(Platform.INSTAGRAM, "--platform", "-p", help="Platform of all identifiers"),
):
    """Validate identifiers without fetching anything."""
    extractor = get_extractor(platform)

    table = Table(title=f"{platform.value} identifiers")
    table.add_column("Identifier")
    table.add_column("Username")
    table.add_column("Type", style="dim")
    table.add_column("Status")

    failures = 0
    for identifier in identifiers:
        try:
            info = extractor.extract(identifier)
        except InvalidIdentifierError as e:
            failures += 1
            table.add_row(identifier, "-", "-", f"[red]{'; '.join(e.reasons)}[/red]")
        else:
            table.add_row(identifier, info.username, info.url_type.value, "[green]ok[/green]")

    console.print(table)
    if failures:
        raise typer.Exit(1)


def _print_results_table(results):
    """Print one row per verification result."""
    table = Table(title="Verification results")
    table.add_column("Profile")
    table.add_column("Score", justify="right")
    table.add_column("Niche", justify="right", style="dim")
    table.add_column("Demo", justify="right", style="dim")
    table.add_column("Brand", justify="right", style="dim")
    table.add_column("Followers", justify="right", style="dim")
    table.add_column("Verified")

    for result in results:
        analysis = result.match_analysis
        if result.errors:
            status = f"[red]{result.errors[0]}[/red]"
        else:
            status = "[green]yes[/green]" if result.verified else "no"
        table.add_row(
            f"@{result.extracted_data.username}",
            str(result.overall_score),
            str(analysis.niche_alignment.score),
            str(analysis.demographic_match.score),
            str(analysis.brand_compatibility.score),
            str(analysis.follower_validation.score),
            status,
        )

    console.print(table)


def _print_summary(summary):
    """Print batch summary and recommendations."""
    console.print(
        f"\n[bold]Verified {summary.verified_profiles}/{summary.total_profiles} profiles[/bold] "
        f"(average score {summary.average_score})"
    )
    console.print(
        f"  [green]{summary.high_quality_matches}[/green] high · "
        f"[yellow]{summary.medium_quality_matches}[/yellow] medium · "
        f"[red]{summary.low_quality_matches}[/red] low"
    )
    for tip in summary.recommendations:
        console.print(f"  [dim]- {tip}[/dim]")


if __name__ == "__main__":
    app()
