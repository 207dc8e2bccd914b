"""Utility modules: config, logging, shared error types."""
import os
import re
import logging
import sys
from typing import Dict, Any, Optional

from dotenv import load_dotenv

# Load .env file for local development
load_dotenv()

logger = logging.getLogger(__name__)


# ============================================================================
# CONFIGURATION
# ============================================================================

class ConfigError(Exception):
    """Raised when configuration is invalid or missing."""
    pass


UNICODE_VERSION_PATTERN = re.compile(r'^(latest|\d+\.\d+)$')


def validate_config() -> Dict[str, Any]:
    """
    Validate compiler configuration from environment variables.

    Every setting has a default, so an empty environment is valid. Values
    that are present must be well formed.

    Returns:
        Dictionary of validated configuration values

    Raises:
        ConfigError: If any configured value is malformed
    """
    optional_vars = {
        'source_dir': ('EMOJI_SOURCE_DIR', 'dist/emoji'),
        'output_dir': ('EMOJI_OUTPUT_DIR', 'dist/emoji'),
        'unicode_version': ('EMOJI_UNICODE_VERSION', 'latest'),
        'fetch_timeout': ('EMOJI_FETCH_TIMEOUT', '30'),
        'log_level': ('LOG_LEVEL', 'INFO'),
    }

    config = {}
    invalid = []

    for key, (env_var, default) in optional_vars.items():
        value = os.getenv(env_var, '').strip()
        config[key] = value or default

    if not UNICODE_VERSION_PATTERN.match(config['unicode_version']):
        invalid.append(f"EMOJI_UNICODE_VERSION={config['unicode_version']!r} (expected 'latest' or X.Y)")

    try:
        config['fetch_timeout'] = int(config['fetch_timeout'])
        if config['fetch_timeout'] <= 0:
            raise ValueError
    except ValueError:
        invalid.append(f"EMOJI_FETCH_TIMEOUT={config['fetch_timeout']!r} (expected a positive integer)")

    config['log_level'] = config['log_level'].upper()
    if not isinstance(logging.getLevelName(config['log_level']), int):
        invalid.append(f"LOG_LEVEL={config['log_level']!r}")

    if invalid:
        raise ConfigError(f"Invalid environment variables: {invalid}")

    logger.debug(f"Configuration validated: sources in {config['source_dir']}, output to {config['output_dir']}")
    return config


# ============================================================================
# LOGGING
# ============================================================================

def setup_logging(level: str = "INFO", structured: bool = True) -> None:
    """Configure logging for the application."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    if structured:
        formatter = logging.Formatter(
            '{"timestamp": "%(asctime)s", "name": "%(name)s", "level": "%(levelname)s", "message": "%(message)s"}',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
    else:
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # Quiet the HTTP stack used by the source fetcher
    logging.getLogger('urllib3').setLevel(logging.WARNING)
    logging.getLogger('requests').setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name."""
    return logging.getLogger(name)


# ============================================================================
# ERRORS
# ============================================================================

class UnresolvedEmojiError(Exception):
    """Raised when the ordered source names an emoji the grouped source lacks."""

    def __init__(self, emoji: str, message: Optional[str] = None):
        self.emoji = emoji
        super().__init__(message or f"{emoji} entry from ordered source has no match in grouped source")


class OrphanVariantError(UnresolvedEmojiError):
    """Raised when a skin tone variant line appears before any base emoji."""

    def __init__(self, emoji: str):
        super().__init__(emoji, f"{emoji} skin tone variant has no preceding base emoji")


class ValidationError(Exception):
    """Raised when compiled data fails completeness checks."""
    pass


class EmitError(Exception):
    """Raised when an output artifact cannot be written."""

    def __init__(self, path: str, cause: Exception):
        self.path = path
        super().__init__(f"Failed to write {path}: {cause}")


class FetchError(Exception):
    """Raised when a source file cannot be downloaded."""
    pass
