"""
Pytest configuration for Browser Print client tests.

Provides a mocked HTTP session, a client wired to it and a sample device.
"""

from unittest.mock import MagicMock

import pytest
import requests

from zebra_browser_print import BrowserPrintClient, Device

from .helpers import AGENT_URL, make_response


@pytest.fixture
def session():
    """Mocked requests.Session; every request answers 200 with an empty body."""
    mock = MagicMock(spec=requests.Session)
    mock.request.return_value = make_response()
    mock.get.return_value = make_response()
    return mock


@pytest.fixture
def client(session):
    """Client wired to the mocked session."""
    return BrowserPrintClient(AGENT_URL, session=session)


@pytest.fixture
def device():
    """A typical USB-attached Zebra printer."""
    return Device(
        name="ZDesigner ZD421-203dpi ZPL",
        device_type="printer",
        connection="usb",
        uid="ZD421-USB-001",
        provider="com.zebra.ds.webdriver.desktop.provider.DefaultDeviceProvider",
        manufacturer="Zebra Technologies",
        version=3,
    )
