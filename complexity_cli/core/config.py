import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

from complexity_cli.core.constants import (
    DEFAULT_COMMENT_TOKEN,
    DEFAULT_OUTPUT_FORMAT,
    DEFAULT_SENTINEL,
    OUTPUT_FORMATS,
)
from complexity_cli.core.exceptions import ConfigurationError

# Configuration defaults - all constants at the top
CONFIG_FILENAME = "complexity_cli_config.json"
SHOW_REASONS_DEFAULT = True
SHOW_SUMMARY_DEFAULT = True
FOLD_RECURSION_DEFAULT = False


@dataclass
class AnalyzerConfig:
    """Main configuration class for Complexity CLI."""

    sentinel: Optional[str] = DEFAULT_SENTINEL
    comment_token: str = DEFAULT_COMMENT_TOKEN
    output_format: str = DEFAULT_OUTPUT_FORMAT
    show_reasons: bool = SHOW_REASONS_DEFAULT
    show_summary: bool = SHOW_SUMMARY_DEFAULT
    fold_recursion: bool = FOLD_RECURSION_DEFAULT
    debug: bool = False
    log_file: Optional[str] = None

    def __post_init__(self):
        self.output_format = self.output_format.lower()
        if self.output_format not in OUTPUT_FORMATS:
            raise ConfigurationError(
                f"Unsupported output format: '{self.output_format}'. "
                f"Supported formats: {', '.join(OUTPUT_FORMATS)}"
            )
        if not self.comment_token:
            raise ConfigurationError("comment_token must not be empty")

    @classmethod
    def from_file(cls, config_path: Optional[Path] = None) -> "AnalyzerConfig":
        """Load configuration from file."""
        config_data = load_config_file(config_path)
        return cls.from_dict(config_data)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AnalyzerConfig":
        """Create config from dictionary."""
        config_data = data.copy()

        # Map JSON keys to config fields
        field_mapping = {
            "format": "output_format",
            "end_marker": "sentinel",
            "comment": "comment_token",
        }

        for json_key, config_key in field_mapping.items():
            if json_key in config_data:
                config_data[config_key] = config_data.pop(json_key)

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(config_data) - known)
        if unknown:
            raise ConfigurationError(
                f"Unknown configuration keys: {', '.join(unknown)}"
            )

        return cls(**config_data)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary for serialization."""
        return asdict(self)

    def save(self, path: Optional[Path] = None) -> None:
        """Save configuration to file."""
        if path is None:
            path = Path.home() / f".{CONFIG_FILENAME}"

        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)


def load_config_file(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """Load configuration from file."""
    paths = []

    if config_path:
        paths.append(Path(config_path))

    paths.extend(
        [
            Path.cwd() / CONFIG_FILENAME,
            Path.home() / f".{CONFIG_FILENAME}",
        ]
    )

    for path in paths:
        if path.exists():
            try:
                with open(path, "r") as f:
                    data = json.load(f)
            except (json.JSONDecodeError, IOError):
                continue
            if isinstance(data, dict):
                return data

    return {}
