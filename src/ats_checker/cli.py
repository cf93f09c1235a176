"""CLI interface using typer + rich."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ats_checker.analysis.analyzer import ResumeAnalyzer
from ats_checker.analysis.scorer import describe_score, score_tone
from ats_checker.catalog.loader import default_catalog
from ats_checker.config import AppConfig, load_config
from ats_checker.models.analysis import Priority, ResumeAnalysis
from ats_checker.parsers.resume_parser import (
    format_file_size,
    parse_resume,
    validate_file,
)
from ats_checker.report.renderer import render_report, save_report

app = typer.Typer(
    name="ats-checker",
    help="Check resume compatibility with Applicant Tracking Systems",
    no_args_is_help=True,
)
console = Console()

TONE_STYLES = {"success": "green", "warning": "yellow", "error": "red"}


def _setup_logging(config: AppConfig, verbose: bool) -> None:
    level = logging.DEBUG if verbose else config.logging.numeric_level
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _require_role(role: str) -> str:
    catalog = default_catalog()
    if role not in catalog:
        console.print(f"[red]Unknown job role: {role}[/red]")
        console.print("[dim]Run `ats-checker roles` to list available roles.[/dim]")
        raise typer.Exit(1)
    return catalog.get_role(role).name


def _print_analysis(analysis: ResumeAnalysis, role_name: str) -> None:
    style = TONE_STYLES[score_tone(analysis.score)]
    console.print(
        Panel(
            f"[bold {style}]{analysis.score}%  {describe_score(analysis.score)}[/bold {style}]\n"
            f"Your resume matches {analysis.score}% of key requirements for this role.\n\n"
            f"Keywords found: {len(analysis.found_keywords)}/{analysis.total_keywords} | "
            f"Resume format: {analysis.format_score.value} | "
            f"Missing keywords: {len(analysis.missing_keywords)}",
            title=f"ATS Score - {role_name}",
        )
    )

    if analysis.found_keywords:
        console.print("\n[bold]Keywords found:[/bold] " + ", ".join(
            f"[green]{k}[/green]" for k in analysis.found_keywords
        ))

    if analysis.missing_keywords:
        table = Table(title="Missing keywords", show_lines=False)
        table.add_column("Keyword")
        table.add_column("Priority")
        for item in analysis.missing_keywords:
            prio_style = "bold yellow" if item.priority is Priority.HIGH else "dim"
            table.add_row(item.keyword, f"[{prio_style}]{item.priority.value}[/{prio_style}]")
        console.print(table)

    if analysis.suggestions:
        console.print("\n[bold]Improvement tips:[/bold]")
        for i, tip in enumerate(analysis.suggestions, 1):
            console.print(f"  {i}. {tip}")
    else:
        console.print("\n[green]Your resume is well-optimized for this role.[/green]")


def _emit(analysis: ResumeAnalysis, role_name: str, as_json: bool, html: Path | None) -> None:
    if as_json:
        typer.echo(analysis.model_dump_json(indent=2))
    else:
        _print_analysis(analysis, role_name)

    if html:
        path = save_report(render_report(analysis, role_name), html)
        console.print(f"[green]HTML report saved: {path}[/green]")


@app.command()
def roles() -> None:
    """List the job roles resumes can be checked against."""
    table = Table(title="Job roles")
    table.add_column("ID", style="bold")
    table.add_column("Name")
    table.add_column("Keywords", justify="right")
    for role in default_catalog().list_roles():
        table.add_row(role.id, role.name, str(len(role.keywords)))
    console.print(table)


@app.command()
def analyze(
    resume: Path = typer.Argument(help="Resume file (PDF/DOCX/TXT/MD)"),
    role: str = typer.Option(..., "--role", "-r", help="Target job role id"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
    html: Path = typer.Option(None, "--html", help="Also write an HTML report to this path"),
    config_path: Path = typer.Option(None, "--config", help="Path to config.yaml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Score a resume file against a job role."""
    config = load_config(config_path)
    _setup_logging(config, verbose)
    role_name = _require_role(role)

    try:
        path = validate_file(resume, config.input.max_file_bytes)
        text = parse_resume(path)
    except ValueError as e:
        # invalid upload or unreadable document
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)

    if not text.strip():
        console.print("[red]No text could be extracted from the resume.[/red]")
        raise typer.Exit(1)

    if verbose:
        console.print(f"[dim]Resume: {path.name} ({format_file_size(path.stat().st_size)}, {len(text)} chars)[/dim]")

    analyzer = ResumeAnalyzer(suggestions=config.suggestions)
    _emit(analyzer.analyze(text, role), role_name, as_json, html)


@app.command("check-text")
def check_text(
    role: str = typer.Option(..., "--role", "-r", help="Target job role id"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
    html: Path = typer.Option(None, "--html", help="Also write an HTML report to this path"),
    config_path: Path = typer.Option(None, "--config", help="Path to config.yaml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Score plain resume text read from stdin."""
    config = load_config(config_path)
    _setup_logging(config, verbose)
    role_name = _require_role(role)

    text = sys.stdin.read()
    if not text.strip():
        console.print("[red]No resume text on stdin.[/red]")
        raise typer.Exit(1)

    analyzer = ResumeAnalyzer(suggestions=config.suggestions)
    _emit(analyzer.analyze(text, role), role_name, as_json, html)


if __name__ == "__main__":
    app()
