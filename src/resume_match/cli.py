"""CLI interface using typer + rich."""

from __future__ import annotations

import asyncio
import logging
from enum import Enum
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

import typer
from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel
from rich.table import Table

from resume_match.clients.job_source import (
    DemoJobSource,
    FileJobSource,
    JobSource,
    TextJobSource,
    URLJobSource,
)
from resume_match.config import AppConfig, load_config
from resume_match.errors import ResumeMatchError
from resume_match.parsers.requirement_extractor import extract_requirements
from resume_match.parsers.vocabulary import (
    DEFAULT_SENIORITY,
    FUNCTIONAL_STACKS,
    SENIORITY_RULES,
    TECHNOLOGIES,
)
from resume_match.pipeline.analyzers import select_analyzer
from resume_match.pipeline.orchestrator import MatchPipeline

app = typer.Typer(
    name="resume-match",
    help="Match a resume against a job posting and report the fit.",
    no_args_is_help=True,
)
console = Console()


class ReportMode(str, Enum):
    compact = "compact"
    narrative = "narrative"


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _resolve_source(
    config: AppConfig,
    jd: Path | None,
    url: str | None,
    text: str | None,
    demo: bool = False,
) -> tuple[JobSource, str]:
    """Pick the job source for whichever of --jd / --url / --text was given."""
    given = [opt for opt in (jd, url, text) if opt is not None]
    if len(given) != 1:
        console.print("[red]Provide exactly one of --jd, --url or --text.[/red]")
        raise typer.Exit(1)
    if demo and url is None:
        console.print("[red]--demo only applies to --url.[/red]")
        raise typer.Exit(1)

    if jd is not None:
        return FileJobSource(), str(jd)
    if url is not None:
        if demo:
            return DemoJobSource(), url
        return (
            URLJobSource(
                timeout_ms=config.fetch.timeout_ms,
                settle_ms=config.fetch.settle_ms,
                block_private_hosts=config.fetch.block_private_hosts,
            ),
            url,
        )
    return TextJobSource(), text


@app.command()
def analyze(
    resume: str = typer.Argument(help="Resume file name or label (the file is not read)"),
    jd: Path = typer.Option(None, "--jd", help="Job description text file"),
    url: str = typer.Option(None, "--url", help="Job posting URL"),
    text: str = typer.Option(None, "--text", help="Job description text"),
    demo: bool = typer.Option(False, "--demo", help="Serve canned postings for --url instead of fetching"),
    mode: ReportMode = typer.Option(None, "--mode", "-m", help="Heuristic report style"),
    api_key: str = typer.Option(
        None, "--api-key", envvar="ANTHROPIC_API_KEY", help="Anthropic API key; enables provider analysis"
    ),
    fallback: bool = typer.Option(
        False, "--fallback", help="Use the heuristic report if the provider fails"
    ),
    output: Path = typer.Option(None, "--output", "-o", help="Save the report to this file (.md)"),
    raw: bool = typer.Option(False, "--raw", help="Print the report text without Markdown rendering"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Analyze a resume against a job description."""
    _configure_logging(verbose)
    config = load_config()
    source, identifier = _resolve_source(config, jd, url, text, demo)
    analyzer = select_analyzer(
        config,
        mode=mode.value if mode else None,
        api_key=api_key,
        allow_fallback=fallback,
    )
    pipeline = MatchPipeline(source, analyzer)

    try:
        with console.status("Analyzing...") as status:

            def on_phase(phase: str, detail: str) -> None:
                status.update(detail)

            result = asyncio.run(pipeline.run(identifier, resume, on_phase=on_phase))
    except ResumeMatchError as exc:
        console.print(f"[red]{type(exc).__name__}: {exc}[/red]")
        raise typer.Exit(1)

    if raw:
        console.print(result.report, markup=False, highlight=False, emoji=False, soft_wrap=True)
    else:
        console.print(Markdown(result.report))

    summary = f"Analyzer: {result.analyzer} | {result.elapsed_seconds:.1f}s"
    if result.metadata.get("degraded"):
        summary += "\n[yellow]Provider failed; heuristic report shown.[/yellow]"
    if "input_tokens" in result.metadata:
        summary += (
            f"\nTokens: {result.metadata['input_tokens']} in / "
            f"{result.metadata['output_tokens']} out | "
            f"~${result.metadata['estimated_cost_usd']:.4f}"
        )
    console.print(Panel(summary, title="Run"))

    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(result.report, encoding="utf-8")
        console.print(f"[green]Report saved: {output}[/green]")


@app.command()
def facts(
    jd: Path = typer.Option(None, "--jd", help="Job description text file"),
    text: str = typer.Option(None, "--text", help="Job description text"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Show the requirements extracted from a job description."""
    _configure_logging(verbose)
    source, identifier = _resolve_source(load_config(), jd, None, text)
    try:
        job_text = asyncio.run(source.fetch(identifier))
    except ResumeMatchError as exc:
        console.print(f"[red]{type(exc).__name__}: {exc}[/red]")
        raise typer.Exit(1)

    extracted = extract_requirements(job_text)
    table = Table(title="Extracted requirements", show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("Technologies", ", ".join(extracted.matched_technologies) or "-")
    table.add_row("Seniority", extracted.seniority.value)
    table.add_row("Stack", ", ".join(extracted.functional_stack) or "-")
    table.add_row("Company", extracted.company_name)
    table.add_row("Role", extracted.role_name)
    console.print(table)


@app.command()
def vocabulary() -> None:
    """List the keyword tables used for matching."""
    tech = Table(title="Technologies")
    tech.add_column("Label", style="bold")
    tech.add_column("Matches")
    for term in TECHNOLOGIES:
        tech.add_row(term.label, ", ".join(term.needles))
    console.print(tech)

    seniority = Table(title="Seniority (first match wins)")
    seniority.add_column("Level", style="bold")
    seniority.add_column("Matches")
    for level, needles in SENIORITY_RULES:
        seniority.add_row(level.value, ", ".join(needles))
    seniority.add_row(DEFAULT_SENIORITY.value, "(default)")
    console.print(seniority)

    stack = Table(title="Functional stack")
    stack.add_column("Label", style="bold")
    stack.add_column("Matches")
    for term in FUNCTIONAL_STACKS:
        stack.add_row(term.label, ", ".join(term.needles))
    console.print(stack)


if __name__ == "__main__":
    app()
