"""
Zebra Browser Print Client Configuration
"""

import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)

# =============================================================================
# Agent Configuration
# =============================================================================

# Base address of the local Browser Print agent
API_URL = os.environ.get('ZEBRA_BROWSER_PRINT_URL', 'http://127.0.0.1:9100/')


def parse_timeout(value: Optional[str]) -> Optional[float]:
    """Seconds from an environment value; None when unset or not a number."""
    if not value:
        return None
    try:
        return float(value)
    except ValueError:
        logger.warning("Ignoring non-numeric ZEBRA_BROWSER_PRINT_TIMEOUT: %r", value)
        return None


# Request timeout in seconds (unset = no timeout, left to the caller)
DEFAULT_TIMEOUT = parse_timeout(os.environ.get('ZEBRA_BROWSER_PRINT_TIMEOUT'))

# Agent endpoints, relative to the base address
ENDPOINT_AVAILABLE = 'available'
ENDPOINT_DEFAULT = 'default'
ENDPOINT_WRITE = 'write'
ENDPOINT_READ = 'read'

# The agent accepts JSON bodies sent as plain text
TEXT_CONTENT_TYPE = 'text/plain;charset=UTF-8'

# =============================================================================
# Device Parsing
# =============================================================================

# The `default` endpoint answers with a header line plus six "label: value" lines
DEFAULT_DEVICE_FIELD_SEPARATOR = '\n\t'
DEFAULT_DEVICE_FIELD_COUNT = 7

# =============================================================================
# Status
# =============================================================================

# Host query: printer error/warning status
STATUS_COMMAND = '~HQES'

# Joins status errors into the caller-facing message
ERROR_SEPARATOR = ','

# =============================================================================
# Logging
# =============================================================================

LOG_LEVEL = os.environ.get('ZEBRA_BROWSER_PRINT_LOG_LEVEL', 'WARNING')
LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def normalize_url(url: str) -> str:
    """Return url with exactly one trailing separator appended when missing."""
    return url if url.endswith('/') else url + '/'


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging for command-line use.

    The library itself only emits records; applications embedding it
    configure handlers themselves.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ...). Falls back to
            ZEBRA_BROWSER_PRINT_LOG_LEVEL.
    """
    log_level = (level or LOG_LEVEL).upper()
    logging.basicConfig(
        format=LOG_FORMAT,
        level=getattr(logging, log_level, logging.WARNING),
        datefmt=LOG_DATE_FORMAT,
        force=True,
    )
