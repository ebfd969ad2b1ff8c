"""
Status Decoding
===============

Decodes the printer's reply to the ~HQES host query.

The reply is fixed-format text; the fields of interest sit at fixed
character offsets:

    70  error flag         '0' = no error (ready)
    84  pause flag         '1' = paused
    87  head error nibble  1/2/4/8
    88  media error nibble 1/2/4/8

Messages are emitted in a fixed order: media, head, pause.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .models import PrinterStatus

logger = logging.getLogger(__name__)

# Offset of the overall error flag
READY_OFFSET = 70
READY_VALUE = '0'

UNKNOWN_ERROR = 'Unknown Error'
MALFORMED_RESPONSE = 'Malformed Status Response'


@dataclass(frozen=True)
class StatusField:
    """One character position in the status reply and the messages it maps to."""

    name: str
    offset: int
    messages: Dict[str, str] = field(default_factory=dict)

    def message_for(self, response: str) -> Optional[str]:
        """Message for the character at this offset, or None if absent/unmapped."""
        value = char_at(response, self.offset)
        if value is None:
            return None
        return self.messages.get(value)


MEDIA = StatusField('media', 88, {
    '1': 'Paper out',
    '2': 'Ribbon Out',
    '4': 'Media Door Open',
    '8': 'Cutter Fault',
})

HEAD = StatusField('head', 87, {
    '1': 'Printhead Overheating',
    '2': 'Motor Overheating',
    '4': 'Printhead Fault',
    '8': 'Incorrect Printhead',
})

PAUSE = StatusField('pause', 84, {
    '1': 'Printer Paused',
})

# Decoding order is part of the contract
STATUS_FIELDS = (MEDIA, HEAD, PAUSE)

# Shortest reply that covers every decoded offset
MIN_RESPONSE_LENGTH = max([READY_OFFSET] + [f.offset for f in STATUS_FIELDS]) + 1


def char_at(response: str, offset: int) -> Optional[str]:
    """Character at offset, or None when the response is too short."""
    if response is None or offset >= len(response):
        return None
    return response[offset]


def decode_errors(response: str) -> List[str]:
    """Ordered error messages triggered by the status fields."""
    errors = []
    for status_field in STATUS_FIELDS:
        message = status_field.message_for(response)
        if message:
            errors.append(message)
    return errors


def decode_status(response: str) -> PrinterStatus:
    """
    Decode a ~HQES reply.

    Args:
        response: Raw reply text as returned by the agent's read endpoint

    Returns:
        PrinterStatus. A not-ready report always carries at least one
        error; a reply shorter than MIN_RESPONSE_LENGTH is reported as not
        ready with MALFORMED_RESPONSE.
    """
    response = response or ''

    is_ready = char_at(response, READY_OFFSET) == READY_VALUE
    errors = decode_errors(response)

    if len(response) < MIN_RESPONSE_LENGTH:
        logger.warning(
            "Status response too short (%d < %d chars)", len(response), MIN_RESPONSE_LENGTH
        )
        is_ready = False
        errors.append(MALFORMED_RESPONSE)

    if not is_ready and not errors:
        errors.append(UNKNOWN_ERROR)

    return PrinterStatus(is_ready_to_print=is_ready, errors=errors)
