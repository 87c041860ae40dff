"""
Highlight Compare CLI - GitHub syntax highlighting comparison tool

A command-line tool for finding which language hints highlight a snippet
differently on GitHub by:
1. Rendering the snippet once per Linguist language via the Markdown API
2. Extracting the highlighted block for every language
3. Grouping languages whose highlighting is identical
"""

import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from highlight_compare import __version__
from highlight_compare.config import Settings
from highlight_compare.exceptions import HighlightCompareError, RateLimitError, AuthenticationError
from highlight_compare.github import MarkdownRenderClient, load_languages
from highlight_compare.pipeline import HighlightComparisonPipeline
from highlight_compare.schemas import ComparisonReport, Language

app = typer.Typer(
    name="highlight-compare",
    help="Compare GitHub syntax highlighting across language hints",
    add_completion=False,
)

console = Console()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )


def _read_input(text: Optional[str], file: Optional[Path]) -> str:
    if text is not None:
        return text
    if file is not None:
        if not file.exists():
            console.print(f"[red]❌ File not found: {file}[/red]")
            raise typer.Exit(1)
        return file.read_text(encoding="utf-8")
    if not sys.stdin.isatty():
        return sys.stdin.read()
    console.print("[red]❌ Provide code with --text, --file or on stdin[/red]")
    raise typer.Exit(1)


def _filter_languages(languages: List[Language], only: Optional[str]) -> List[Language]:
    if not only:
        return languages
    wanted = {name.strip().lower() for name in only.split(",") if name.strip()}
    return [lang for lang in languages if lang.name.lower() in wanted]


def _print_report(report: ComparisonReport, aliases: Dict[str, str], show_markup: bool) -> None:
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("#", justify="right")
    table.add_column("Count", justify="right")
    table.add_column("Languages")
    if show_markup:
        table.add_column("Markup", overflow="fold")

    for index, group in enumerate(report.groups, start=1):
        names = ", ".join(
            f"{escape(name)} [dim]({escape(aliases[name])})[/dim]" if aliases.get(name) else escape(name)
            for name in group.lang_names
        )
        row = [str(index), str(len(group.lang_names)), names]
        if show_markup:
            row.append(escape(group.code_block_markup))
        table.add_row(*row)

    if report.groups:
        console.print(table)
    console.print(f"\n[bold]{escape(report.status_message)}[/bold]")


@app.command()
def compare(
    text: Optional[str] = typer.Option(None, "--text", "-t", help="Code to compare"),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Read code from a file"),
    languages_file: Optional[str] = typer.Option(
        None,
        "--languages-file",
        "-l",
        help="Local languages.yml (default: fetch from Linguist)",
    ),
    only: Optional[str] = typer.Option(
        None,
        "--only",
        "-o",
        help="Comma-separated language names to restrict the comparison to",
    ),
    language_type: Optional[List[str]] = typer.Option(
        None,
        "--type",
        help="Linguist language types to include (repeatable, e.g. programming)",
    ),
    token: Optional[str] = typer.Option(None, "--token", help="GitHub token (default: $GITHUB_TOKEN)"),
    json_output: bool = typer.Option(False, "--json", help="Print the report as JSON"),
    show_markup: bool = typer.Option(False, "--show-markup", "-m", help="Show representative markup"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable info logging"),
):
    """
    Render code under every language hint and group identical highlighting.

    Example:
        highlight-compare compare --text 'console.log("hello")' --only JavaScript,TypeScript,Python
    """
    _configure_logging(verbose)
    code = _read_input(text, file)
    try:
        settings = Settings.from_env(github_token=token)
        languages = load_languages(
            languages_file or settings.languages_url,
            timeout=settings.timeout,
            types=language_type,
        )
        languages = _filter_languages(languages, only)
        if not languages:
            console.print("[red]❌ No languages selected[/red]")
            raise typer.Exit(1)

        client = MarkdownRenderClient(
            token=settings.github_token,
            api_url=settings.api_url,
            timeout=settings.timeout,
        )
        pipeline = HighlightComparisonPipeline(languages, client=client)

        if not json_output:
            console.print(Panel.fit(
                "[bold cyan]GitHub Highlighting Comparison[/bold cyan]\n\n"
                f"Languages: [yellow]{len(languages)}[/yellow]\n"
                f"Authenticated: [yellow]{'yes' if settings.github_token else 'no'}[/yellow]",
                border_style="cyan"
            ))
            with console.status("Rendering via GitHub API..."):
                report = pipeline.run(code)
        else:
            report = pipeline.run(code)

    except RateLimitError as e:
        console.print(f"\n[red]❌ {escape(str(e))}[/red]")
        console.print("[dim]Pass it with --token or set GITHUB_TOKEN.[/dim]")
        raise typer.Exit(1)
    except AuthenticationError as e:
        console.print(f"\n[red]❌ {escape(str(e))}[/red]")
        raise typer.Exit(1)
    except HighlightCompareError as e:
        console.print(f"\n[red]❌ Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    if json_output:
        print(report.model_dump_json(indent=2))
        return

    _print_report(report, {lang.name: lang.alias for lang in languages}, show_markup)


@app.command()
def group(
    html_file: Path = typer.Argument(..., help="Rendered HTML returned by the Markdown API"),
    json_output: bool = typer.Option(False, "--json", help="Print the report as JSON"),
    show_markup: bool = typer.Option(False, "--show-markup", "-m", help="Show representative markup"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable info logging"),
):
    """
    Group an already rendered document without any network access.
    """
    _configure_logging(verbose)
    if not html_file.exists():
        console.print(f"[red]❌ File not found: {html_file}[/red]")
        raise typer.Exit(1)

    pipeline = HighlightComparisonPipeline(languages=[])
    report = pipeline.compare_rendered(html_file.read_text(encoding="utf-8"))

    if json_output:
        print(report.model_dump_json(indent=2))
        return

    _print_report(report, {}, show_markup)


@app.command()
def languages(
    languages_file: Optional[str] = typer.Option(
        None,
        "--languages-file",
        "-l",
        help="Local languages.yml (default: fetch from Linguist)",
    ),
    language_type: Optional[List[str]] = typer.Option(
        None,
        "--type",
        help="Linguist language types to include (repeatable)",
    ),
):
    """List the language hints that would be rendered."""
    try:
        settings = Settings.from_env()
        loaded = load_languages(
            languages_file or settings.languages_url,
            timeout=settings.timeout,
            types=language_type,
        )
    except HighlightCompareError as e:
        console.print(f"[red]❌ Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Name")
    table.add_column("Alias")
    for lang in loaded:
        table.add_row(escape(lang.name), escape(lang.alias))

    console.print(table)
    console.print(f"\n[bold]Loaded {len(loaded)} languages[/bold]")


@app.command()
def version():
    """Show the version of highlight-compare."""
    console.print(f"[bold cyan]Highlight Compare[/bold cyan] v{__version__}")
    console.print("GitHub syntax highlighting comparison tool")


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
