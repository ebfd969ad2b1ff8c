"""
Zebra Browser Print Models
"""

from .device import Device
from .status import PrinterStatus

__all__ = ['Device', 'PrinterStatus']
