"""
Zebra Browser Print Client
==========================

Python client for the Zebra Browser Print agent, the local HTTP service
that relays data to Zebra printers attached to a workstation.

Supports:
- Printer discovery (available printers, default printer)
- Status checks via ~HQES (paper, ribbon, head, pause)
- Raw read/write of ZPL and other printer data
- Blob and URL uploads, text/barcode/image labels

Usage:
    python -m zebra_browser_print list

Agent Endpoints:
    GET  /available - Available printers (JSON)
    GET  /default   - Default printer (text)
    POST /write     - Send data to a printer
    POST /read      - Read data back from a printer
"""

__version__ = '1.0.0'

from .client import BrowserPrintClient
from .exceptions import (
    BrowserPrintError,
    DeviceNotFoundError,
    NoPrintersAvailableError,
    NoDefaultPrinterError,
    TransportError,
    ZPLError,
)
from .models import Device, PrinterStatus
from .status import decode_status

__all__ = [
    'BrowserPrintClient',
    'BrowserPrintError',
    'DeviceNotFoundError',
    'NoPrintersAvailableError',
    'NoDefaultPrinterError',
    'TransportError',
    'ZPLError',
    'Device',
    'PrinterStatus',
    'decode_status',
]
