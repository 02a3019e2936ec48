"""
DisavowTUI CLI - Command Line Interface

Entry point for all command-line operations including TUI launch,
headless formatting of disavow files, and configuration management.
"""

import sys
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from disavowtui import __version__
from disavowtui.core.config import (
    configure_logging,
    get_user_config_path,
    load_user_config,
    save_user_config,
)
from disavowtui.core.exceptions import DisavowError
from disavowtui.core.models import AppSettings

# Create CLI app
app = typer.Typer(
    name="disavowtui",
    help="DisavowTUI - Clean bad backlinks into domain: disavow files",
    add_completion=False,
    no_args_is_help=True,
)

config_app = typer.Typer(help="Manage user configuration")
app.add_typer(config_app, name="config")

# Results go to stdout, everything else to stderr
console = Console()
err_console = Console(stderr=True)


def _load_settings(config: Optional[Path]) -> AppSettings:
    try:
        return load_user_config(config)
    except DisavowError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1)


# ============================================================================
# Main Commands
# ============================================================================

@app.command()
def tui(
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Custom configuration file",
        exists=True,
    ),
) -> None:
    """
    Launch the Textual TUI interface.

    This is the primary mode for interactive use.
    """
    settings = _load_settings(config)

    try:
        configure_logging(settings.log_level, settings.log_file, console=False)

        # Import here to avoid loading Textual if not needed
        from disavowtui.ui.app import DisavowApp

        app_instance = DisavowApp(settings=settings)
        app_instance.run()

    except ImportError as e:
        err_console.print(f"[red]Error:[/red] Failed to import TUI components: {e}")
        err_console.print("[yellow]Hint:[/yellow] Ensure textual is installed: pip install textual")
        raise typer.Exit(code=1)
    except Exception as e:
        err_console.print(f"[red]Error launching TUI:[/red] {e}")
        raise typer.Exit(code=1)


@app.command("format")
def format_command(
    files: Optional[List[Path]] = typer.Argument(
        None,
        help="Input files (txt, csv, tsv). Reads stdin when omitted",
    ),
    text: Optional[str] = typer.Option(
        None,
        "--text",
        "-t",
        help="Raw text to format instead of files",
    ),
    greenlist: Optional[List[Path]] = typer.Option(
        None,
        "--greenlist",
        "-g",
        help="Greenlist file of domains to keep out of the output",
    ),
    greenlist_text: Optional[str] = typer.Option(
        None,
        "--greenlist-text",
        help="Greenlist entries given inline",
    ),
    dedupe: Optional[bool] = typer.Option(
        None,
        "--dedupe/--keep-duplicates",
        help="Keep only the first occurrence of each domain",
        show_default=False,
    ),
    skip_non_url: Optional[bool] = typer.Option(
        None,
        "--skip-non-url/--allow-all",
        help="Drop lines that do not look like URLs or domains",
        show_default=False,
    ),
    utf8_check: Optional[bool] = typer.Option(
        None,
        "--utf8-check/--no-utf8-check",
        help="Reject files that are not valid UTF-8",
        show_default=False,
    ),
    comment: Optional[str] = typer.Option(
        None,
        "--comment",
        help="Comment line written above the domains (empty to omit)",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file or directory (dated file name when a directory)",
    ),
    stats: bool = typer.Option(
        False,
        "--stats",
        "-s",
        help="Print input/output counts to stderr",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Custom configuration file",
        exists=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Verbose output",
    ),
) -> None:
    """
    Format URLs and domains into a domain: disavow list.

    Prints the document to stdout unless --output is given.
    """
    from disavowtui.orchestrator.pipeline import build_exclusion_set, process
    from disavowtui.reporting.generator import build_preview, is_utf8_safe
    from disavowtui.storage.artifacts import decode_source, read_source, write_document

    settings = _load_settings(config)

    dedupe = settings.dedupe if dedupe is None else dedupe
    skip_non_url = settings.skip_non_url if skip_non_url is None else skip_non_url
    utf8_check = settings.utf8_check if utf8_check is None else utf8_check
    comment = settings.comment if comment is None else comment

    try:
        configure_logging("DEBUG" if verbose else settings.log_level, settings.log_file)

        parts = []
        if text is not None:
            parts.append(text)
        for path in files or []:
            source = read_source(path, strict_utf8=utf8_check)
            if source.verified:
                err_console.print(f"[green]✓[/green] UTF-8 verified: {source.name}")
            parts.append(source.text)
        if text is None and not files:
            source = decode_source(sys.stdin.buffer.read(), "<stdin>", strict_utf8=utf8_check)
            parts.append(source.text)
        raw_text = "\n".join(part for part in parts if part)

        greenlist_parts = []
        if greenlist_text:
            greenlist_parts.append(greenlist_text)
        for path in greenlist or []:
            greenlist_parts.append(read_source(path, strict_utf8=utf8_check).text)
        exclusion_set = build_exclusion_set("\n".join(greenlist_parts))

        result = process(raw_text, dedupe, skip_non_url, exclusion_set)
        document = build_preview(comment, result.filtered)

        if utf8_check and not is_utf8_safe(document):
            err_console.print(
                "[red]Error:[/red] UTF-8 check failed. Strip odd characters before exporting."
            )
            raise typer.Exit(code=1)

        if stats:
            table = Table(title="Disavow Summary")
            table.add_column("Input", style="cyan")
            table.add_column("Unique" if dedupe else "Output", style="green")
            table.add_column("Greenlist", style="yellow")
            table.add_row(
                str(result.total),
                str(result.output_count),
                str(result.excluded_count),
            )
            err_console.print(table)

        if result.output_count == 0:
            err_console.print("[yellow]Nothing to format.[/yellow]")
            return

        if output is not None:
            written = write_document(document, output)
            err_console.print(f"[green]✓[/green] Saved {result.output_count} domains to: {written}")
        else:
            console.print(document, markup=False, highlight=False, soft_wrap=True)

    except typer.Exit:
        raise
    except DisavowError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1)


@app.command()
def canonicalize(
    tokens: List[str] = typer.Argument(..., help="Entries to canonicalize"),
) -> None:
    """Show how individual entries are classified and canonicalized."""
    from disavowtui.classifier.classifier import looks_like_url
    from disavowtui.classifier.normalizer import canonicalize as to_directive

    table = Table(title="Canonicalization")
    table.add_column("Entry", style="white")
    table.add_column("URL-like", style="magenta")
    table.add_column("Directive", style="cyan")

    for token in tokens:
        directive = to_directive(token)
        table.add_row(
            token,
            "[green]yes[/green]" if looks_like_url(token) else "[dim]no[/dim]",
            directive if directive else "[red]rejected[/red]",
        )

    console.print(table)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold cyan]DisavowTUI[/bold cyan] version [yellow]{__version__}[/yellow]")


# ============================================================================
# Config Commands
# ============================================================================

@config_app.command("show")
def config_show(
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Custom configuration file",
        exists=True,
    ),
) -> None:
    """Show effective settings."""
    settings = _load_settings(config)
    path = config or get_user_config_path()

    table = Table(title=f"Settings ({path})")
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="yellow")

    for key, value in settings.to_dict().items():
        table.add_row(key, "-" if value is None else repr(value))

    console.print(table)


@config_app.command("init")
def config_init(
    path: Optional[Path] = typer.Option(
        None,
        "--path",
        "-p",
        help="Where to write the config file",
    ),
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Overwrite an existing file",
    ),
) -> None:
    """Write a config file with default settings."""
    target = path or get_user_config_path()

    if target.exists() and not force:
        err_console.print(f"[yellow]Config already exists:[/yellow] {target}")
        err_console.print("[dim]Use --force to overwrite[/dim]")
        raise typer.Exit(code=1)

    try:
        written = save_user_config(AppSettings(), target)
    except DisavowError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1)

    console.print(Panel.fit(
        f"[green]✓[/green] Config written to [cyan]{written}[/cyan]",
        title="DisavowTUI Config",
    ))


# ============================================================================
# Entry Point
# ============================================================================

def main() -> None:
    """Main entry point for CLI."""
    try:
        app()
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Interrupted by user[/yellow]")
        sys.exit(130)
    except Exception as e:
        err_console.print(f"[red]Unexpected error:[/red] {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
