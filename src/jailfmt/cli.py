"""jailfmt CLI — Typer application with highlight, format, keywords, and init commands."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Tuple

import typer
from rich.console import Console
from rich.markup import escape

from jailfmt import __version__
from jailfmt.config.schema import OUTPUT_FORMATS, JailfmtConfig
from jailfmt.keywords.catalog import KeywordCatalog
from jailfmt.source import Source

app = typer.Typer(
    name="jailfmt",
    help="Highlight and indent firejail sandbox profiles.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)

_CONFIG_OPTION = typer.Option(None, "--config", "-c", help="Path to .jailfmt.toml")
_VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Verbose output")
_PATHS_ARGUMENT = typer.Argument(
    None, help="Profiles or directories to read; '-' or nothing reads stdin"
)


def _load(config: Optional[str], verbose: bool) -> Tuple[JailfmtConfig, KeywordCatalog]:
    """Load config and keyword catalog, exit 2 on failure."""
    from jailfmt.config.loader import ConfigError, find_config_file, load_config
    from jailfmt.keywords.catalog import CatalogError, build_catalog

    root = Path.cwd()
    try:
        cfg = load_config(root, config)
        catalog = build_catalog(cfg, root)
    except (ConfigError, CatalogError) as exc:
        console.print(f"[bold red]Config error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc

    if verbose:
        path = find_config_file(root, config)
        console.print(f"[dim]Config: {escape(str(path)) if path else 'defaults'}[/dim]")
        console.print(f"[dim]Keywords loaded: {len(catalog)}[/dim]")
    return cfg, catalog


def _read(paths: Optional[List[str]], cfg: JailfmtConfig, verbose: bool) -> List[Source]:
    """Read every input before any output is produced, exit 2 on failure."""
    from jailfmt.source import STDIN, SourceError, read_sources

    try:
        sources = read_sources(paths or [STDIN], cfg.files)
    except SourceError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc

    if verbose:
        console.print(f"[dim]Files: {len(sources)}[/dim]")
    return sources


# ── highlight ─────────────────────────────────────────────────────────────────


@app.command()
def highlight(
    paths: Optional[List[str]] = _PATHS_ARGUMENT,
    config: Optional[str] = _CONFIG_OPTION,
    format: Optional[str] = typer.Option(
        None, "--format", "-f", help="Output format: terminal | json | semantic"
    ),
    verbose: bool = _VERBOSE_OPTION,
) -> None:
    """Classify every token and print highlight spans."""
    from jailfmt.highlight.classifier import highlight as run_highlight
    from jailfmt.highlight.models import HighlightResult
    from jailfmt.output import json_report, semantic_tokens, terminal

    cfg, catalog = _load(config, verbose)

    if format:
        if format not in OUTPUT_FORMATS:
            console.print(f"[bold red]Invalid format:[/bold red] {escape(format)}")
            raise typer.Exit(code=2)
        cfg.output.format = format  # type: ignore[assignment]

    sources = _read(paths, cfg, verbose)
    results = [
        HighlightResult(s.path, s.text, list(run_highlight(s.text, catalog)))
        for s in sources
    ]

    if cfg.output.format == "terminal":
        terminal.render(results)
    elif cfg.output.format == "json":
        typer.echo(json_report.render(results))
    elif cfg.output.format == "semantic":
        typer.echo(semantic_tokens.render(results))


# ── format ────────────────────────────────────────────────────────────────────


@app.command("format")
def format_command(
    paths: Optional[List[str]] = _PATHS_ARGUMENT,
    config: Optional[str] = _CONFIG_OPTION,
    indent: Optional[int] = typer.Option(
        None, "--indent", "-i", min=0, help="Indent width for non flush-left lines"
    ),
    tabs: Optional[bool] = typer.Option(
        None, "--tabs/--spaces", help="Indent with tabs (tab width from config)"
    ),
    check: bool = typer.Option(False, "--check", help="Exit 1 if any input would change"),
    write: bool = typer.Option(False, "--write", "-w", help="Rewrite files in place"),
    verbose: bool = _VERBOSE_OPTION,
) -> None:
    """Re-indent profiles and print the result (or rewrite with --write)."""
    from jailfmt.highlight.indenter import format_text
    from jailfmt.source import STDIN, SourceError, write_source

    cfg, _ = _load(config, verbose)

    # --- CLI overrides ---
    if indent is not None:
        cfg.indent.offset = indent
    if tabs is not None:
        cfg.indent.use_tabs = tabs

    sources = _read(paths, cfg, verbose)
    formatted = [(s, format_text(s.text, cfg.indent)) for s in sources]
    changed = [s.path for s, text in formatted if text != s.text]

    if check:
        for path in changed:
            console.print(f"would reformat [cyan]{escape(path)}[/cyan]")
        if verbose:
            console.print(f"[dim]{len(changed)} of {len(sources)} file(s) would change[/dim]")
        raise typer.Exit(code=1 if changed else 0)

    for source, text in formatted:
        if write and source.path != STDIN:
            if text == source.text:
                continue
            try:
                write_source(source.path, text)
            except SourceError as exc:
                console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
                raise typer.Exit(code=2) from exc
            if verbose:
                console.print(f"[dim]Reformatted {escape(source.path)}[/dim]")
        else:
            typer.echo(text, nl=False)


# ── keywords ──────────────────────────────────────────────────────────────────


@app.command()
def keywords(
    category: Optional[str] = typer.Option(
        None, "--category", "-k", help="Only list one category, e.g. private-option"
    ),
    config: Optional[str] = _CONFIG_OPTION,
    verbose: bool = _VERBOSE_OPTION,
) -> None:
    """List the keyword catalog, one 'keyword<TAB>category' per line."""
    from jailfmt.keywords.models import KeywordCategory

    _, catalog = _load(config, verbose)

    selected: Optional[KeywordCategory] = None
    if category:
        try:
            selected = KeywordCategory.parse(category)
        except ValueError as exc:
            console.print(f"[bold red]Unknown category:[/bold red] {escape(category)}")
            raise typer.Exit(code=2) from exc

    for word in catalog.keywords(selected):
        typer.echo(f"{word}\t{catalog.table[word].value}")


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init() -> None:
    """Generate a starter .jailfmt.toml in the current directory."""
    from jailfmt.config.defaults import DEFAULT_TOML
    from jailfmt.config.loader import CONFIG_FILENAME

    config_path = Path.cwd() / CONFIG_FILENAME

    if config_path.exists():
        console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILENAME} already exists at {escape(str(config_path))}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {escape(str(config_path))}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"jailfmt {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """jailfmt — Highlight and indent firejail sandbox profiles."""
