"""Runtime configuration for the command line.

Reads tag and logging settings from CLI args, environment variables,
.env files, and YAML config file fallbacks.

Precedence (highest to lowest):
    CLI args > Environment variables > .env file > YAML config > Built-in defaults

Environment variables:
    TEXT_INSERTS_TAG_PREFIX: Prefix for markers created by insert-or-add
    TEXT_INSERTS_ENCODING: Encoding for tagged files (default: detect)
    TEXT_INSERTS_DEBUG: Enable debug logging (optional, default: false)
    TEXT_INSERTS_LOG_FILE: Also append log records to this file
"""

import codecs
import logging
import os
from dataclasses import dataclass

from .config_schema import UnifiedConfig

logger = logging.getLogger(__name__)

_LOG_FORMATS = ("text", "json")


@dataclass
class Config:
    tag_prefix: str = ""
    encoding: str | None = None
    debug: bool = False
    log_level: str = "INFO"
    log_file: str | None = None
    log_format: str = "text"


def validate_config(config: Config) -> None:
    """Validate configuration values and raise ValueError if invalid.

    Args:
        config: Config instance to validate.

    Raises:
        ValueError: If the encoding is unknown or the log format unsupported.
    """
    if config.encoding is not None:
        config.encoding = config.encoding.strip()
        try:
            codecs.lookup(config.encoding)
        except LookupError:
            raise ValueError(
                f"Unknown encoding '{config.encoding}'. "
                "Set TEXT_INSERTS_ENCODING to a Python codec name or leave it unset."
            ) from None

    if config.log_format not in _LOG_FORMATS:
        raise ValueError(
            f"Invalid log format '{config.log_format}': must be one of "
            f"{', '.join(_LOG_FORMATS)}"
        )

    if "\n" in config.tag_prefix:
        raise ValueError("Tag prefix cannot contain line breaks")


def _get_bool_env(key: str) -> bool | None:
    """Return True/False from env var, or None if unset."""
    val = os.getenv(key)
    if val is None:
        return None
    return val.lower() in ("true", "1", "yes", "on")


def load_config(
    tag_prefix: str | None = None,
    encoding: str | None = None,
    debug: bool = False,
    log_file: str | None = None,
    log_format: str | None = None,
    unified: UnifiedConfig | None = None,
) -> Config:
    """Load configuration with unified precedence.

    Resolution order for each field (highest to lowest):
        CLI arg > env var / .env > YAML (``unified``) > built-in default

    The caller is responsible for calling ``load_dotenv()`` before this
    function so that .env values are available via ``os.getenv()``.

    Args:
        tag_prefix: Override tag prefix.
        encoding: Override file encoding.
        debug: Enable debug logging (CLI flag).
        log_file: Override log file path.
        log_format: Override log format ("text" or "json").
        unified: Config built from YAML files; defaults when omitted.

    Returns:
        Validated Config instance.

    Raises:
        ValueError: If a resolved value is invalid.
    """
    fb = unified or UnifiedConfig()

    final_prefix = tag_prefix
    if final_prefix is None:
        final_prefix = os.getenv("TEXT_INSERTS_TAG_PREFIX")
    if final_prefix is None:
        final_prefix = fb.tags.prefix

    final_encoding = (
        encoding or os.getenv("TEXT_INSERTS_ENCODING") or fb.tags.encoding
    )

    if debug:
        final_debug = True
    else:
        env_debug = _get_bool_env("TEXT_INSERTS_DEBUG")
        final_debug = env_debug if env_debug is not None else False

    final_log_file = (
        log_file or os.getenv("TEXT_INSERTS_LOG_FILE") or fb.logging.file
    )

    config = Config(
        tag_prefix=final_prefix,
        encoding=final_encoding,
        debug=final_debug,
        log_level=fb.logging.level,
        log_file=final_log_file,
        log_format=log_format or fb.logging.format,
    )

    validate_config(config)

    return config
