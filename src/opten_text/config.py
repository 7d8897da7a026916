"""Configuration loading and validation.

The text helpers take every option as an argument; settings only exist
for the CLI, which reads defaults (slug replacement, truncation length,
split policy, logging) from ``settings.toml``.

A missing *default* settings file is not an error; the built-in
defaults apply.  An explicitly requested file that is missing, malformed,
or out of range fails before any command runs.
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from opten_text.errors import ActionableError
from opten_text.logging import LEVEL_NAMES
from opten_text.text import SplitOptions

# ---------------------------------------------------------------------------
# Config dataclasses
# ---------------------------------------------------------------------------


@dataclass
class TextConfig:
    """Defaults for text commands from ``[text]``."""

    replacement: str = "-"
    truncate_length: int = 80
    split_options: SplitOptions = SplitOptions.REMOVE_EMPTY_ENTRIES


@dataclass
class LoggingConfig:
    """Logging settings from ``[logging]``."""

    level: str = "INFO"
    log_dir: str | None = None


@dataclass
class Settings:
    """Top-level validated configuration."""

    text: TextConfig = field(default_factory=TextConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# ---------------------------------------------------------------------------
# Default settings path
# ---------------------------------------------------------------------------

DEFAULT_SETTINGS_PATH = Path("config/settings.toml")


# ---------------------------------------------------------------------------
# Loading and validation
# ---------------------------------------------------------------------------


def load_settings(path: str | Path | None = None) -> Settings:
    """Load and validate settings from a TOML file.

    With no *path*, ``config/settings.toml`` is read if present and the
    defaults are returned otherwise.

    Raises :class:`~opten_text.errors.ActionableError`:
      - CONFIG if an explicit file is missing or the TOML is malformed
      - VALIDATION if field values are out of range
    """
    if path is None:
        if not DEFAULT_SETTINGS_PATH.exists():
            return Settings()
        filepath = DEFAULT_SETTINGS_PATH
    else:
        filepath = Path(path)
        if not filepath.exists():
            raise ActionableError.config(
                field_name="settings_path",
                reason=f"Settings file not found: {filepath}",
                suggestion=f"Create {filepath} or omit --settings to use defaults",
            )

    raw_text = filepath.read_text(encoding="utf-8")
    try:
        data = tomllib.loads(raw_text)
    except tomllib.TOMLDecodeError as exc:
        raise ActionableError.config(
            field_name="settings_path",
            reason=f"Malformed TOML in {filepath}: {exc}",
            suggestion=f"Fix TOML syntax in {filepath}",
        ) from None

    return _validate(data)


def _validate(data: dict[str, object]) -> Settings:
    """Validate raw TOML data and return a Settings instance."""

    # -- text section --------------------------------------------------------
    text_data = _section(data, "text")

    replacement = text_data.get("replacement", "-")
    if not isinstance(replacement, str):
        raise ActionableError.validation(
            field_name="text.replacement",
            reason=f"must be a string, not {type(replacement).__name__}",
            suggestion='Quote the value, e.g. replacement = "-"',
        )

    truncate_length = text_data.get("truncate_length", 80)
    if not isinstance(truncate_length, int) or isinstance(truncate_length, bool):
        raise ActionableError.validation(
            field_name="text.truncate_length",
            reason=f"must be an integer, not {type(truncate_length).__name__}",
        )
    if truncate_length < 0:
        raise ActionableError.validation(
            field_name="text.truncate_length",
            reason=f"is {truncate_length} — must be >= 0",
            suggestion="Set [text].truncate_length to zero or a positive number",
        )

    raw_split = str(text_data.get("split_options", SplitOptions.REMOVE_EMPTY_ENTRIES.value))
    try:
        split_options = SplitOptions(raw_split)
    except ValueError:
        allowed = ", ".join(option.value for option in SplitOptions)
        raise ActionableError.validation(
            field_name="text.split_options",
            reason=f"'{raw_split}' is not one of: {allowed}",
        ) from None

    # -- logging section -----------------------------------------------------
    logging_data = _section(data, "logging")

    level = str(logging_data.get("level", "INFO")).upper()
    if level not in LEVEL_NAMES:
        raise ActionableError.validation(
            field_name="logging.level",
            reason=f"'{level}' is not one of: {', '.join(LEVEL_NAMES)}",
        )

    # Empty string disables file logging
    log_dir = str(logging_data.get("log_dir", "")) or None

    return Settings(
        text=TextConfig(
            replacement=replacement,
            truncate_length=truncate_length,
            split_options=split_options,
        ),
        logging=LoggingConfig(level=level, log_dir=log_dir),
    )


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _section(data: dict[str, object], name: str) -> dict[str, object]:
    """Return an optional top-level table, or raise CONFIG if it is not a table."""
    section = data.get(name, {})
    if not isinstance(section, dict):
        raise ActionableError.config(
            field_name=name,
            reason=f"[{name}] must be a table, not {type(section).__name__}",
            suggestion=f"Define [{name}] as a TOML table",
        )
    return section
