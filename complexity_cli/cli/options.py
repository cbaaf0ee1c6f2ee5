"""
Resolved options and configuration handling for Complexity CLI.
"""

from dataclasses import dataclass
from typing import Optional

from complexity_cli.core.config import AnalyzerConfig, load_config_file
from complexity_cli.core.constants import OUTPUT_FORMATS
from complexity_cli.core.exceptions import ValidationError
from complexity_cli.core.logging import configure_logging, log_debug, log_info


@dataclass
class ResolvedOptions:
    """Container for resolved CLI options."""

    output_format: str
    sentinel: Optional[str]
    show_reasons: bool
    show_summary: bool
    fold_recursion: bool
    debug: bool
    config: AnalyzerConfig


def resolve_options(
    format_override: Optional[str] = None,
    sentinel_override: Optional[str] = None,
    config_override: Optional[str] = None,
    fold_recursion_override: Optional[bool] = None,
    no_reasons_override: bool = False,
    no_summary_override: bool = False,
    debug_override: bool = False,
    verbose_override: bool = False,
    log_file_override: Optional[str] = None,
) -> ResolvedOptions:
    """Resolves options based on command args, config files, and defaults."""
    config_data = load_config_file(config_override)
    config = AnalyzerConfig.from_dict(config_data)

    if debug_override:
        config.debug = True
    if log_file_override:
        config.log_file = log_file_override

    configure_logging(
        debug=config.debug, verbose=verbose_override, log_file=config.log_file
    )
    log_debug(f"Loaded config from {config_override or 'default locations'}")

    if format_override:
        output_format = format_override.lower()
        if output_format not in OUTPUT_FORMATS:
            raise ValidationError(
                f"Unsupported output format: '{format_override}'. "
                f"Supported formats: {', '.join(OUTPUT_FORMATS)}"
            )
        log_debug(f"Format override: {output_format}")
        config.output_format = output_format

    if sentinel_override is not None:
        log_debug(f"Sentinel override: {sentinel_override!r}")
        config.sentinel = sentinel_override

    if fold_recursion_override is not None:
        config.fold_recursion = fold_recursion_override

    if no_reasons_override:
        config.show_reasons = False
    if no_summary_override:
        config.show_summary = False

    resolved = ResolvedOptions(
        output_format=config.output_format,
        sentinel=config.sentinel,
        show_reasons=config.show_reasons,
        show_summary=config.show_summary,
        fold_recursion=config.fold_recursion,
        debug=config.debug,
        config=config,
    )

    log_info(
        f"Options resolved: format={resolved.output_format}, "
        f"fold_recursion={resolved.fold_recursion}"
    )

    return resolved
