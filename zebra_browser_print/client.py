"""
Zebra Browser Print Client
==========================

Python client for the Zebra Browser Print agent running on the local machine.

Usage:
    from zebra_browser_print.client import BrowserPrintClient

    client = BrowserPrintClient()

    # Pick a printer
    client.set_device(client.get_default_device())

    # Check it and print
    status = client.check_status()
    if status.is_ready_to_print:
        client.print('^XA^FO20,20^A0N,30,30^FDHello^FS^XZ')
    else:
        print(status.error_message)
"""

import json
import logging
import os
from typing import Any, Dict, List, Optional

import requests

from .config import (
    API_URL,
    DEFAULT_TIMEOUT,
    ENDPOINT_AVAILABLE,
    ENDPOINT_DEFAULT,
    ENDPOINT_WRITE,
    ENDPOINT_READ,
    TEXT_CONTENT_TYPE,
    DEFAULT_DEVICE_FIELD_SEPARATOR,
    DEFAULT_DEVICE_FIELD_COUNT,
    STATUS_COMMAND,
    normalize_url,
)
from .exceptions import NoPrintersAvailableError, NoDefaultPrinterError, TransportError
from .models import Device, PrinterStatus
from .status import decode_status
from . import zpl

logger = logging.getLogger(__name__)


def parse_default_device(text: str) -> Device:
    """
    Parse the `default` endpoint's text reply.

    The reply is a header segment followed by six "label: value" segments,
    separated by newline+tab. Values are taken after the first colon.

    Raises:
        NoDefaultPrinterError: If the text is empty or not in that shape
    """
    if not text:
        raise NoDefaultPrinterError()

    segments = text.split(DEFAULT_DEVICE_FIELD_SEPARATOR)
    if len(segments) != DEFAULT_DEVICE_FIELD_COUNT:
        raise NoDefaultPrinterError()

    values = []
    for segment in segments[1:]:
        label, sep, value = segment.partition(':')
        if not sep:
            raise NoDefaultPrinterError(f"Malformed default printer field: {segment!r}")
        values.append(value.strip())

    name, device_type, connection, uid, provider, manufacturer = values
    return Device(
        name=name,
        device_type=device_type,
        connection=connection,
        uid=uid,
        provider=provider,
        manufacturer=manufacturer,
        version=0,
    )


class BrowserPrintClient:
    """Client for the Zebra Browser Print agent."""

    def __init__(self, api_url: Optional[str] = None,
                 session: Optional[requests.Session] = None,
                 timeout: Optional[float] = DEFAULT_TIMEOUT):
        """
        Initialize client.

        Args:
            api_url: Base URL of the agent (defaults to config.API_URL)
            session: HTTP session used for every request (a new
                requests.Session when omitted)
            timeout: Per-request timeout in seconds, None for no timeout
        """
        self.api_url = normalize_url(api_url if api_url is not None else API_URL)
        self.device: Optional[Device] = None
        self.timeout = timeout
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()

    def __enter__(self) -> 'BrowserPrintClient':
        return self

    def __exit__(self, *exc_info):
        self.close()

    def close(self):
        """Close the HTTP session if this client created it."""
        if self._owns_session:
            self.session.close()

    # =========================================================================
    # Configuration
    # =========================================================================

    @property
    def endpoint(self) -> str:
        """Active base address (always ends with '/')."""
        return self.api_url

    @endpoint.setter
    def endpoint(self, address: str):
        self.set_endpoint(address)

    def set_endpoint(self, address: str):
        """Set the agent base address. Not validated until a request is made."""
        self.api_url = normalize_url(address)

    def set_device(self, device: Device):
        """Select the device that subsequent read/write calls target."""
        self.device = device

    def get_device(self) -> Optional[Device]:
        """Currently selected device."""
        return self.device

    set_printer = set_device
    get_printer = get_device

    # =========================================================================
    # Transport
    # =========================================================================

    def _device_payload(self) -> Dict[str, Any]:
        # Raw agent dicts are passed through as-is
        if isinstance(self.device, Device):
            return self.device.to_dict()
        return dict(self.device or {})

    def _request(self, method: str, endpoint: str, **kwargs) -> requests.Response:
        """Make a request against the agent, wrapping every failure in TransportError."""
        url = f'{self.api_url}{endpoint}'
        logger.debug("%s %s", method, url)

        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
            response.raise_for_status()
            return response

        except requests.exceptions.Timeout as e:
            logger.warning("Request timeout: %s %s", method, url)
            raise TransportError(f'Request timeout: {url}', cause=e) from e
        except requests.exceptions.ConnectionError as e:
            logger.warning("Cannot connect to %s", self.api_url)
            raise TransportError(f'Cannot connect to {self.api_url}', cause=e) from e
        except requests.exceptions.RequestException as e:
            logger.warning("Request failed: %s %s: %s", method, url, e)
            raise TransportError(str(e), cause=e) from e

    def _post_text(self, endpoint: str, data: Dict[str, Any]) -> requests.Response:
        """POST a JSON document as text/plain, the way the agent expects it."""
        return self._request(
            'POST', endpoint,
            data=json.dumps(data).encode('utf-8'),
            headers={'Content-Type': TEXT_CONTENT_TYPE},
        )

    # =========================================================================
    # Discovery
    # =========================================================================

    def list_available_devices(self) -> List[Device]:
        """
        List printers the agent can reach.

        Raises:
            NoPrintersAvailableError: If the agent reports no printers
            TransportError: If the request fails or the reply is not JSON
        """
        response = self._request(
            'GET', ENDPOINT_AVAILABLE, headers={'Content-Type': TEXT_CONTENT_TYPE}
        )

        try:
            data = response.json()
        except ValueError as e:
            raise TransportError('Invalid JSON from available endpoint', cause=e) from e

        printers = data.get('printer') if isinstance(data, dict) else None
        if not isinstance(printers, list) or not printers:
            raise NoPrintersAvailableError()

        try:
            return [Device.from_dict(p) for p in printers]
        except TypeError as e:
            raise TransportError('Invalid printer entry from available endpoint', cause=e) from e

    def get_default_device(self) -> Device:
        """
        Get the agent's default printer.

        Raises:
            NoDefaultPrinterError: If no default printer is configured
            TransportError: If the request fails
        """
        response = self._request(
            'GET', ENDPOINT_DEFAULT, headers={'Content-Type': TEXT_CONTENT_TYPE}
        )
        return parse_default_device(response.text)

    get_available_printers = list_available_devices
    get_default_printer = get_default_device

    # =========================================================================
    # Status
    # =========================================================================

    def check_status(self) -> PrinterStatus:
        """Send ~HQES to the selected device and decode its reply."""
        self.write(STATUS_COMMAND)
        return decode_status(self.read())

    check_printer_status = check_status

    def is_ready(self) -> bool:
        """Check if the selected device is ready to print."""
        return self.check_status().is_ready_to_print

    # =========================================================================
    # Raw I/O
    # =========================================================================

    def write(self, data: str):
        """Send raw data (e.g. ZPL) to the selected device."""
        self._post_text(ENDPOINT_WRITE, {'device': self._device_payload(), 'data': data})

    def read(self) -> str:
        """Read whatever the selected device has sent back."""
        response = self._post_text(ENDPOINT_READ, {'device': self._device_payload()})
        return response.text

    def write_blob(self, data: bytes, filename: str = 'blob'):
        """
        Send binary content to the selected device as multipart form data.

        Args:
            data: Raw bytes (a file, image or prebuilt label)
            filename: Name of the blob part
        """
        files = {
            'json': (None, json.dumps({'device': self._device_payload()}), 'application/json'),
            'blob': (filename, data, 'application/octet-stream'),
        }
        self._request('POST', ENDPOINT_WRITE, files=files)

    def write_url(self, url: str):
        """Download content from url and send it to the selected device."""
        logger.debug("Fetching %s", url)
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            logger.warning("Failed to fetch %s: %s", url, e)
            raise TransportError(f'Failed to fetch {url}', cause=e) from e

        self.write_blob(response.content)

    # =========================================================================
    # Printing
    # =========================================================================

    def print(self, text: str):
        """Print raw text/ZPL on the selected device."""
        self.write(text)

    def print_blob(self, data: bytes):
        """Print binary content on the selected device."""
        self.write_blob(data)

    def print_url(self, url: str):
        """Print content downloaded from url on the selected device."""
        self.write_url(url)

    def print_text(self, text: str, font_size: int = 30, x: int = 20, y: int = 20):
        """Print a simple text label."""
        self.write(zpl.text_label(text, font_size=font_size, x=x, y=y))

    def print_barcode(self, data: str, barcode_type: str = 'C128',
                      x: int = 20, y: int = 20, height: int = 100):
        """Print a barcode label (C128, C39, QR, ...)."""
        self.write(zpl.barcode_label(data, barcode_type=barcode_type, x=x, y=y, height=height))

    def print_image(self, image_data: bytes, width: Optional[int] = None,
                    height: Optional[int] = None):
        """
        Print an image, converted to a ZPL graphic field.

        Args:
            image_data: Raw image bytes (PNG/JPEG)
            width: Target width in dots (optional)
            height: Target height in dots (optional)
        """
        self.write(zpl.image_to_zpl(image_data, width=width, height=height))

    def print_file(self, file_path: str):
        """Send a file's contents to the selected device."""
        with open(file_path, 'rb') as f:
            self.write_blob(f.read(), filename=os.path.basename(file_path))
