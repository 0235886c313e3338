"""
text-chunker CLI Application.

Main entry point for the text-chunker command-line interface. Chunks files
with the sentence or paragraph splitter and runs the diagnostic demo that
compares the default, tiktoken and punkt configurations on one document.
"""

import json
import logging
from pathlib import Path
from typing import Callable, List, Optional, Tuple

import typer
from rich import print as rprint
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .. import __version__
from ..core.text_splitter import ParagraphSplitter, SentenceSplitter, TextSplitter
from ..exceptions import ChunkingError, ConfigurationError
from ..utils import ChunkingConfigBridge, ConfigManager

console = Console()
log_console = Console(stderr=True)

app = typer.Typer(
    name="text-chunker",
    help="Size-bounded, sentence-aware text chunking",
    add_completion=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)

PREVIEW_LENGTH = 60
DEMO_MAX_SIZE = 200
DEMO_OVERLAP = 20

_config_manager: Optional[ConfigManager] = None
_config_path: Optional[str] = None
_logger: Optional[logging.Logger] = None
_verbose = False


class InputFileError(ValueError):
    """Raised when an input file cannot be read as UTF-8 text."""
    pass


def setup_logging(verbose: bool = False) -> logging.Logger:
    """
    Set up logging configuration.

    Args:
        verbose: Enable verbose (DEBUG) logging

    Returns:
        Configured logger instance
    """
    logging.getLogger().handlers.clear()

    log_level = logging.DEBUG if verbose else logging.INFO

    rich_handler = RichHandler(
        console=log_console,
        show_time=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    rich_handler.setLevel(log_level)

    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[rich_handler],
    )

    logger = logging.getLogger("text_chunker")
    logger.setLevel(log_level)
    return logger


def apply_configured_log_level(bridge: ChunkingConfigBridge) -> None:
    """
    Apply the configured ``logging.level`` unless --verbose was given.

    Args:
        bridge: Configuration bridge; loading the level also validates the configuration
    """
    level = bridge.get_logging_config().get("level", "INFO")
    if _verbose:
        return

    logging.getLogger().setLevel(level)
    for handler in logging.getLogger().handlers:
        handler.setLevel(level)
    logging.getLogger("text_chunker").setLevel(level)


def get_logger() -> logging.Logger:
    global _logger
    if _logger is None:
        _logger = setup_logging()
    return _logger


def get_config_manager(config_path: Optional[str] = None) -> ConfigManager:
    """
    Get or create the global configuration manager.

    Args:
        config_path: Optional path to configuration file

    Returns:
        ConfigManager instance
    """
    global _config_manager

    if _config_manager is None or config_path:
        _config_manager = ConfigManager(config_file=config_path or _config_path, load_env=True)
    return _config_manager


def get_bridge() -> ChunkingConfigBridge:
    return ChunkingConfigBridge(get_config_manager())


@app.callback()
def main(
    config_path: Optional[str] = typer.Option(
        None,
        "--config-path",
        "-c",
        help="Path to configuration file (default: textchunker.config.json)",
        metavar="PATH",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging (DEBUG level)",
    ),
) -> None:
    """
    text-chunker CLI - split documents into size-bounded, overlapping chunks.

    Common workflows:
    • Chunk a file: text-chunker split notes.txt --max-size 200 --overlap 20
    • Chunk by paragraphs: text-chunker split notes.txt --paragraph --max-bytes 512
    • Compare configurations: text-chunker demo notes.txt
    """
    global _logger, _config_path, _config_manager, _verbose
    _logger = setup_logging(verbose)
    _verbose = verbose
    _config_path = config_path
    _config_manager = None


def _read_text(file: Path) -> str:
    try:
        return file.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise InputFileError(f"File {file} is not valid UTF-8: {e}") from e


def _preview(chunk: str) -> str:
    flat = " ".join(chunk.split())
    if len(flat) <= PREVIEW_LENGTH:
        return flat
    return flat[:PREVIEW_LENGTH - 3] + "..."


def _chunk_table(title: str, chunks: List[str], splitter: TextSplitter) -> Table:
    table = Table(title=title, show_lines=False)
    table.add_column("#", justify="right", style="cyan")
    table.add_column("Size", justify="right")
    table.add_column("Chars", justify="right")
    table.add_column("Preview")

    for index, chunk in enumerate(chunks, start=1):
        if isinstance(splitter, SentenceSplitter):
            size = str(splitter.measure(chunk))
        else:
            size = str(len(chunk.encode("utf-8")))
        table.add_row(str(index), size, str(len(chunk)), Text(_preview(chunk)))
    return table


@app.command()
def split(
    file: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        readable=True,
        help="Text file to chunk",
    ),
    max_size: Optional[int] = typer.Option(
        None,
        "--max-size",
        help="Maximum chunk size in size measure units; must exceed --overlap (default 200), so lower --overlap with it",
    ),
    overlap: Optional[int] = typer.Option(
        None, "--overlap", help="Overlap between consecutive chunks"
    ),
    measure: Optional[str] = typer.Option(
        None, "--measure", help="Size measure: whitespace or tiktoken"
    ),
    model: Optional[str] = typer.Option(
        None, "--model", help="Tokenizer model for the tiktoken measure"
    ),
    strategy: Optional[str] = typer.Option(
        None, "--strategy", help="Sentence boundary strategy: regex or punkt"
    ),
    paragraph: bool = typer.Option(
        False, "--paragraph", help="Use the byte-based paragraph splitter"
    ),
    max_bytes: Optional[int] = typer.Option(
        None, "--max-bytes", help="Maximum chunk size in bytes for the paragraph splitter"
    ),
    as_json: bool = typer.Option(
        False, "--json", help="Print the chunks as a JSON array"
    ),
) -> None:
    """Split a text file into chunks."""
    logger = get_logger()

    try:
        text = _read_text(file)
        bridge = get_bridge()
        apply_configured_log_level(bridge)

        splitter: TextSplitter
        if paragraph:
            splitter = ParagraphSplitter(bridge.get_paragraph_config({"max_chunk_size": max_bytes}))
        else:
            if model and not measure:
                measure = "tiktoken"
            splitter = SentenceSplitter(bridge.get_splitter_config({
                "max_size": max_size,
                "overlap_size": overlap,
                "size_measure": measure,
                "tokenizer_model": model,
                "boundary_strategy": strategy,
            }))

        logger.debug(f"Splitting {file} with {splitter!r}")
        chunks = splitter.split_text(text)

    except (InputFileError, ConfigurationError, ChunkingError) as e:
        handle_cli_error(e)
        raise typer.Exit(1)

    if as_json:
        typer.echo(json.dumps(chunks, ensure_ascii=False, indent=2))
        return

    console.print(_chunk_table(f"{file.name}: {len(chunks)} chunks", chunks, splitter))


def _demo_scenarios() -> List[Tuple[str, Callable[[ChunkingConfigBridge], SentenceSplitter]]]:
    return [
        (
            "Default splitter (whitespace measure, regex boundaries)",
            lambda bridge: SentenceSplitter(bridge.get_splitter_config()),
        ),
        (
            "TikToken measure (gpt-3.5-turbo)",
            lambda bridge: SentenceSplitter(bridge.get_splitter_config({
                "max_size": DEMO_MAX_SIZE,
                "overlap_size": DEMO_OVERLAP,
                "size_measure": "tiktoken",
                "tokenizer_model": "gpt-3.5-turbo",
            })),
        ),
        (
            "Punkt sentence boundaries (bundled English data)",
            lambda bridge: SentenceSplitter(bridge.get_splitter_config({
                "max_size": DEMO_MAX_SIZE,
                "overlap_size": DEMO_OVERLAP,
                "boundary_strategy": "punkt",
            })),
        ),
    ]


@app.command()
def demo(
    file: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        readable=True,
        help="Text file to run the comparison on",
    ),
    samples: int = typer.Option(
        2, "--samples", min=0, help="Number of sample chunks to print per scenario"
    ),
) -> None:
    """Compare the default, tiktoken and punkt splitters on one file."""
    try:
        text = _read_text(file)
        bridge = get_bridge()
        apply_configured_log_level(bridge)
        bridge.get_splitter_config()
    except (InputFileError, ConfigurationError) as e:
        handle_cli_error(e)
        raise typer.Exit(1)

    rprint(f"Original text length: [bold]{len(text)}[/bold] characters")

    for number, (title, build) in enumerate(_demo_scenarios(), start=1):
        console.rule(f"Scenario {number}: {title}")
        try:
            splitter = build(bridge)
            chunks = splitter.split_text(text)
        except (ConfigurationError, ChunkingError) as e:
            rprint(f"[yellow]Skipped:[/yellow] {escape(str(e))}")
            continue

        lengths = [len(chunk) for chunk in chunks]
        rprint(f"Generated [bold]{len(chunks)}[/bold] chunks: {lengths}")
        for index, chunk in enumerate(chunks[:samples], start=1):
            console.print(Panel(Text(chunk), title=f"Chunk {index}", border_style="blue"))


@app.command()
def version() -> None:
    """Show version information."""
    rprint(f"text-chunker [blue]v{__version__}[/blue]")


def handle_cli_error(error: Exception) -> None:
    """
    Handle CLI errors with user-friendly messages.

    Args:
        error: The exception that occurred
    """
    logger = get_logger()

    if isinstance(error, ConfigurationError):
        rprint(f"[red]Configuration Error:[/red] {escape(str(error))}")
        logger.debug("Configuration error details", exc_info=True)
    elif isinstance(error, ChunkingError):
        rprint(f"[red]Chunking Error:[/red] {escape(str(error))}")
        logger.debug("Chunking error details", exc_info=True)
    elif isinstance(error, InputFileError):
        rprint(f"[red]Input Error:[/red] {escape(str(error))}")
    elif isinstance(error, FileNotFoundError):
        rprint(f"[red]File Not Found:[/red] {escape(str(error))}")
    elif isinstance(error, PermissionError):
        rprint(f"[red]Permission Denied:[/red] {escape(str(error))}")
    else:
        rprint(f"[red]Error:[/red] {escape(str(error))}")
        logger.debug("Unexpected error details", exc_info=True)


def cli_main() -> None:
    """
    Main CLI entry point with error handling.

    This function is called by the console script entry point.
    """
    try:
        app()
    except KeyboardInterrupt:
        rprint("\n[yellow]Operation cancelled by user[/yellow]")
        raise typer.Exit(130)
    except Exception as e:
        handle_cli_error(e)
        raise typer.Exit(1)


if __name__ == "__main__":
    cli_main()
