"""
Exceptions
==========

Everything raised by the client derives from BrowserPrintError.

DeviceNotFoundError: the agent answered but had no usable printer.
TransportError: the exchange itself failed.
"""

from typing import Optional


class BrowserPrintError(Exception):
    """Base exception for all Browser Print client errors."""

    pass


class DeviceNotFoundError(BrowserPrintError):
    """The agent responded, but no usable device was found."""

    pass


class NoPrintersAvailableError(DeviceNotFoundError):
    """The agent reported no available printers."""

    def __init__(self, message: str = 'No printers available'):
        super().__init__(message)


class NoDefaultPrinterError(DeviceNotFoundError):
    """The agent has no default printer, or its description was unreadable."""

    def __init__(self, message: str = "There's no default printer"):
        super().__init__(message)


class TransportError(BrowserPrintError):
    """Request failed: network error, non-success status or unparseable body."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class ZPLError(BrowserPrintError):
    """Error building ZPL from the supplied content."""

    pass
