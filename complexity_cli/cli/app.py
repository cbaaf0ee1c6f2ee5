"""
Main Typer app and command definitions for Complexity CLI.
"""

from typing import Optional

import typer

from .decorators import with_error_handling
from .handlers import CommandHandlers
from .options import resolve_options

app = typer.Typer(
    help="Time Complexity Analyzer - heuristic big-O hints for pasted code",
    add_completion=False,
    rich_markup_mode="markdown",
    no_args_is_help=True,
)


@app.command()
@with_error_handling
def analyze(
    path: Optional[str] = typer.Argument(
        None, help="Source file to analyze ('-' or omitted reads stdin)"
    ),
    output_format: Optional[str] = typer.Option(
        None, "--format", "-f", help="Output format: table or json"
    ),
    sentinel: Optional[str] = typer.Option(
        None, "--sentinel", help="Line that ends stdin input (default: END)"
    ),
    fold_recursion: Optional[bool] = typer.Option(
        None,
        "--fold-recursion/--no-fold-recursion",
        help="Let detected recursion raise the overall verdict",
    ),
    no_reasons: bool = typer.Option(False, "--no-reasons", help="Hide the reason column"),
    no_summary: bool = typer.Option(False, "--no-summary", help="Hide the summary tables"),
    config: Optional[str] = typer.Option(None, "--config", help="Config file"),
    debug: bool = typer.Option(False, "--debug", help="Debug mode"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Write logs to file"),
):
    """Estimate the time complexity of each line and of the whole program."""
    options = resolve_options(
        format_override=output_format,
        sentinel_override=sentinel,
        config_override=config,
        fold_recursion_override=fold_recursion,
        no_reasons_override=no_reasons,
        no_summary_override=no_summary,
        debug_override=debug,
        verbose_override=verbose,
        log_file_override=log_file,
    )

    CommandHandlers.handle_analyze(options, path)


@app.command()
@with_error_handling
def patterns():
    """List the lexical patterns used to classify lines."""
    CommandHandlers.handle_patterns()


if __name__ == "__main__":
    app()
