"""
Printer Status Model
====================

Readiness report decoded from a ~HQES response.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from ..config import ERROR_SEPARATOR


@dataclass
class PrinterStatus:
    """Readiness and ordered error messages for one status check."""

    is_ready_to_print: bool = False
    errors: List[str] = field(default_factory=list)

    @property
    def error_message(self) -> str:
        """Errors joined into a single delimited string."""
        return ERROR_SEPARATOR.join(self.errors)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'isReadyToPrint': self.is_ready_to_print,
            'errors': self.error_message,
        }
