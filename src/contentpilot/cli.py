"""ContentPilot CLI - social media content from speech transcripts."""

import asyncio
import json
import sys
from pathlib import Path
from typing import Annotated, Any

import typer
from pydantic import ValidationError as PydanticValidationError
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from . import __version__
from .config import CONTENT_TYPES, settings
from .llm import NoProvidersConfigured, ProviderFailure, ProviderManager
from .services import GenerationService, ProvidersUnavailableError, failure_report
from .utils.console import console
from .utils.logging import get_logger, setup_logging
from .validation import GenerateRequest

logger = get_logger("cli")

# Exit codes
EXIT_INVALID_INPUT = 1
EXIT_PROVIDERS_UNAVAILABLE = 2

# Panel titles for parsed sections
SECTION_TITLES: dict[str, str] = {
    "transcript": "Transcript",
    "title": "Title",
    "description": "Description",
    "timestamps": "Timestamps",
    "linkedin_post": "LinkedIn Post",
    "twitter_post": "Twitter Post",
    "instagram_post": "Instagram Post",
    "tiktok_post": "TikTok Post",
    "keywords": "Keywords",
}


def _fail(message: str, code: int = EXIT_INVALID_INPUT) -> typer.Exit:
    """Print an error message and build the matching exit."""
    console.print(f"[red]{escape(message)}[/red]")
    return typer.Exit(code=code)


def _print_panel(message: str, style: str = "blue") -> None:
    """Print a styled panel message."""
    console.print(Panel(f"[bold]{message}[/bold]", style=style))


def _read_transcript(source: str) -> str:
    """Read a transcript from a file path, or stdin when source is '-'."""
    if source == "-":
        return sys.stdin.read()
    path = Path(source)
    if not path.is_file():
        raise _fail(f"Transcript file not found: {source}")
    try:
        return path.read_text(encoding="utf-8")
    except (UnicodeDecodeError, OSError) as e:
        raise _fail(f"Cannot read transcript file {source}: {e}") from e


def _print_failures(failures: list[ProviderFailure]) -> None:
    """Print the per-provider failure breakdown."""
    table = Table(title="Provider failures", show_lines=True)
    table.add_column("Provider", style="cyan")
    table.add_column("Status", justify="right")
    table.add_column("Reason")
    for failure in failures:
        status = str(failure.status_code) if failure.status_code is not None else "-"
        table.add_row(escape(failure.provider), status, escape(failure.message))
    console.print(table)


def _print_sections(fields: dict[str, Any]) -> None:
    for key, value in fields.items():
        body = "\n".join(value) if isinstance(value, list) else value
        title = SECTION_TITLES.get(key, key)
        renderable = escape(body) if body else "[dim](empty)[/dim]"
        console.print(Panel(renderable, title=title, title_align="left"))


app = typer.Typer(
    name="contentpilot",
    help="Social media content from speech transcripts",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"[bold blue]ContentPilot[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option("--version", "-v", callback=version_callback, is_eager=True),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Show provider fallback details on the console"),
    ] = False,
) -> None:
    """ContentPilot - turn what you said into what you post."""
    setup_logging(
        level=settings.log_level,
        log_file=settings.log_file_path,
        console_level="INFO" if verbose else "WARNING",
    )


@app.command("generate")
def generate(
    transcript_file: Annotated[
        str,
        typer.Argument(help="Transcript file, or '-' to read from stdin"),
    ],
    content_type: Annotated[
        str,
        typer.Option(
            "--type",
            "-t",
            help=f"Content type: {', '.join(CONTENT_TYPES)}",
        ),
    ] = settings.default_content_type,
    duration: Annotated[
        str | None,
        typer.Option("--duration", "-d", help="Video duration (e.g. 7:16), adds timestamps"),
    ] = None,
    keyword: Annotated[
        list[str] | None,
        typer.Option("--keyword", "-k", help="Keyword to prioritize (repeatable)"),
    ] = None,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the result as JSON"),
    ] = False,
) -> None:
    """Generate social media content from a transcript."""
    transcript = _read_transcript(transcript_file)

    try:
        request = GenerateRequest(
            transcript=transcript,
            content_type=content_type,
            video_duration=duration,
            keywords=keyword or [],
        )
    except PydanticValidationError as e:
        raise _fail(f"Validation error: {e.errors()[0]['msg']}")

    if not as_json:
        _print_panel(f"Generating {request.content_type} content...")

    service = GenerationService()
    try:
        content = asyncio.run(service.generate(request))
    except NoProvidersConfigured as e:
        raise _fail(f"{e}. Set GOOGLE_GEMINI_API_KEY and/or ANTHROPIC_API_KEY.")
    except ProvidersUnavailableError as e:
        logger.error("Generation failed for %s content", request.content_type)
        if as_json:
            payload = {"error": str(e), "failures": failure_report(e.failures)}
            typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))
        else:
            console.print(f"[red]{escape(str(e))}[/red]")
            _print_failures(list(e.failures))
        raise typer.Exit(code=EXIT_PROVIDERS_UNAVAILABLE)

    if as_json:
        typer.echo(json.dumps(content.to_dict(), ensure_ascii=False, indent=2))
        return

    if content.transcript_cleaned:
        console.print("[yellow]⚠ Removed a single trailing character from the transcript[/yellow]")
    _print_sections(content.fields)
    console.print(f"[dim]Model: {content.provider_used} / {content.model_used}[/dim]")
    if content.failures:
        console.print(f"[dim]Fallback used after {len(content.failures)} failed provider(s)[/dim]")


@app.command("providers")
def providers() -> None:
    """Show configured AI providers and their model order."""
    try:
        manager = ProviderManager.from_settings()
    except NoProvidersConfigured as e:
        raise _fail(f"{e}. Set GOOGLE_GEMINI_API_KEY and/or ANTHROPIC_API_KEY.")

    table = Table(title="AI providers (fallback order)")
    table.add_column("#", justify="right")
    table.add_column("Provider", style="cyan")
    table.add_column("Models (trial order)")
    for index, provider in enumerate(manager.providers, start=1):
        table.add_row(str(index), provider.name, " → ".join(provider.models))
    console.print(table)


if __name__ == "__main__":
    app()
