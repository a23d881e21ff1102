"""Configuration loading.

Options are resolved per key, highest priority first:

    1. Environment variable TRANSLATABLE_<KEY> (e.g., TRANSLATABLE_OVERLAP)
    2. Entry in ./translatable.toml
    3. Built-in default

Recognized keys:

    locales_path       Translation root directory    ("./translations")
    seek_mode          Alphabetical | Unalphabetical ("Alphabetical")
    overlap            Overwrite | Ignore            ("Ignore")
    fallback_language  ISO 639-1 code                (none)

Enumerated values are matched case-insensitively. A missing configuration
file is the same as an empty one. Non-string values in the file are
ignored with a warning.

The process-wide configuration is loaded once by load_config() and shared
afterwards. A load that fails is not cached.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from translatable.constants import CONFIG_FILE_NAME, DEFAULT_TRANSLATIONS_PATH, ENV_PREFIX
from translatable.core import OnceCell
from translatable.diagnostics import ConfigError, ErrorTemplate
from translatable.enums import SeekMode, TranslationOverlap
from translatable.language import Language

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Data
    "TranslatableConfig",
    # Loading
    "read_config",
    "load_config",
    "reset_config",
    # Keys
    "CONFIG_KEYS",
]

logger = logging.getLogger(__name__)

# Keys accepted in translatable.toml and (upper-cased, prefixed) the environment.
CONFIG_KEYS: tuple[str, ...] = ("locales_path", "seek_mode", "overlap", "fallback_language")

_shared_config: OnceCell[TranslatableConfig] = OnceCell()


@dataclass(frozen=True, slots=True)
class TranslatableConfig:
    """Resolved configuration options.

    Attributes:
        path: Translation root directory
        seek_mode: Order in which discovered files are merged
        overlap: Policy for languages defined by more than one file
        fallback_language: Language used when the requested one is missing
    """

    path: str = DEFAULT_TRANSLATIONS_PATH
    seek_mode: SeekMode = SeekMode.ALPHABETICAL
    overlap: TranslationOverlap = TranslationOverlap.IGNORE
    fallback_language: Language | None = None

    @classmethod
    def from_mapping(cls, values: Mapping[str, str]) -> TranslatableConfig:
        """Build a configuration from raw string values.

        Args:
            values: Raw values keyed by configuration key; absent keys
                take their defaults

        Returns:
            Parsed configuration

        Raises:
            ConfigError: If an enumerated value names no known member
        """
        config = cls()
        seek_mode = config.seek_mode
        overlap = config.overlap
        fallback_language = config.fallback_language

        if "seek_mode" in values:
            seek_mode = _parse_member(SeekMode, "seek_mode", values["seek_mode"])
        if "overlap" in values:
            overlap = _parse_member(TranslationOverlap, "overlap", values["overlap"])
        if "fallback_language" in values:
            fallback_language = _parse_member(
                Language, "fallback_language", values["fallback_language"]
            )

        return cls(
            path=values.get("locales_path", config.path),
            seek_mode=seek_mode,
            overlap=overlap,
            fallback_language=fallback_language,
        )


def _parse_member[E: (SeekMode, TranslationOverlap, Language)](
    enum_type: type[E], key: str, value: str
) -> E:
    try:
        return enum_type(value.strip())
    except ValueError as e:
        expected = [member.value for member in enum_type]
        raise ConfigError(ErrorTemplate.config_invalid_value(key, value, expected)) from e


def _read_file_values(config_file: Path) -> dict[str, str]:
    """String entries of the configuration file; {} when it does not exist."""
    if not config_file.is_file():
        logger.debug("No configuration file at %s, using defaults", config_file)
        return {}

    try:
        with config_file.open("rb") as f:
            data = tomllib.load(f)
    except OSError as e:
        raise ConfigError(ErrorTemplate.config_io(str(config_file), str(e))) from e
    except tomllib.TOMLDecodeError as e:
        # lineno/colno are only populated on Python 3.14+
        line = getattr(e, "lineno", None)
        column = getattr(e, "colno", None)
        raise ConfigError(
            ErrorTemplate.config_parse(str(config_file), str(e), line, column)
        ) from e

    values: dict[str, str] = {}
    for key in CONFIG_KEYS:
        if key not in data:
            continue
        value = data[key]
        if isinstance(value, str):
            values[key] = value
        else:
            logger.warning(
                "Ignoring non-string value for '%s' in %s: %r", key, config_file, value
            )
    return values


def _read_env_values(environ: Mapping[str, str]) -> dict[str, str]:
    values: dict[str, str] = {}
    for key in CONFIG_KEYS:
        env_name = f"{ENV_PREFIX}{key.upper()}"
        if env_name in environ:
            values[key] = environ[env_name]
    return values


def read_config(
    config_file: str | Path = CONFIG_FILE_NAME,
    environ: Mapping[str, str] | None = None,
) -> TranslatableConfig:
    """Resolve the configuration from environment, file and defaults.

    Args:
        config_file: Configuration file; relative paths resolve against the
            current working directory
        environ: Environment mapping (defaults to os.environ)

    Returns:
        Resolved TranslatableConfig

    Raises:
        ConfigError: If the file cannot be read or parsed, or a value is
            not a known member

    Example:
        >>> read_config(environ={"TRANSLATABLE_OVERLAP": "overwrite"}).overlap
        <TranslationOverlap.OVERWRITE: 'Overwrite'>
    """
    values = _read_file_values(Path(config_file))
    values.update(_read_env_values(os.environ if environ is None else environ))
    config = TranslatableConfig.from_mapping(values)
    logger.debug("Resolved configuration: %s", config)
    return config


def load_config() -> TranslatableConfig:
    """Process-wide configuration, read on first use.

    Thread-safe: concurrent first callers block until one read finishes.

    Raises:
        ConfigError: If reading fails (not cached; the next call retries)
    """
    return _shared_config.get_or_init(read_config)


def reset_config() -> None:
    """Forget the shared configuration. Intended for test isolation only."""
    _shared_config.reset()
