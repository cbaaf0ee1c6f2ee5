"""
Command handlers for Complexity CLI - business logic separated from CLI interface.
"""

import sys
import time
from typing import List, Optional

import typer

from complexity_cli import output
from complexity_cli.analysis.analyzer import ComplexityAnalyzer
from complexity_cli.analysis.matchers import MATCHERS
from complexity_cli.core.logging import (
    log_context,
    log_info,
    log_warning,
    logged_operation,
)
from complexity_cli.reader import read_lines, read_source_file

from .options import ResolvedOptions

STDIN_NAME = "-"


class CommandHandlers:
    """Handles the business logic for CLI commands."""

    @staticmethod
    def load_lines(options: ResolvedOptions, path: Optional[str]) -> List[str]:
        """Read lines from a file, or from stdin up to the sentinel."""
        if path and path != STDIN_NAME:
            return read_source_file(path)

        if sys.stdin.isatty() and options.output_format == "table":
            output.print_prompt(options.sentinel)
        return read_lines(sys.stdin, options.sentinel)

    @staticmethod
    @logged_operation("analyze_command")
    def handle_analyze(options: ResolvedOptions, path: Optional[str]):
        """Handle the analyze command."""
        source = path if path and path != STDIN_NAME else "<stdin>"
        with log_context(source=source):
            if options.output_format == "table":
                output.print_banner()

            lines = CommandHandlers.load_lines(options, path)
            if not lines:
                log_warning("No source lines to analyze")
            log_info(f"Analyzing {len(lines)} lines")

            analyzer = ComplexityAnalyzer(
                lines,
                comment_token=options.config.comment_token,
                fold_recursion=options.fold_recursion,
                source=source,
            )
            start_time = time.perf_counter()
            result = analyzer.analyze()
            duration = time.perf_counter() - start_time

            if options.output_format == "json":
                typer.echo(output.render_json(result, source))
                return result

            output.print_results(result, show_reasons=options.show_reasons)
            if options.show_summary:
                output.print_summary(result)
            output.print_final_complexity(result, duration)
            return result

    @staticmethod
    def handle_patterns():
        """Handle the patterns command."""
        output.print_matchers(matcher_cls() for matcher_cls in MATCHERS.values())
