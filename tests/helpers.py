"""Helpers to build Browser Print agent responses for tests."""

import json

import requests

AGENT_URL = "http://127.0.0.1:9100/"


def make_response(body="", status_code=200, url=AGENT_URL):
    """Build a real requests.Response carrying body (str, bytes or JSON-able)."""
    if isinstance(body, (dict, list)):
        body = json.dumps(body)
    if isinstance(body, str):
        body = body.encode("utf-8")

    response = requests.Response()
    response.status_code = status_code
    response._content = body
    response.encoding = "utf-8"
    response.url = url
    response.reason = "OK" if status_code < 400 else "Error"
    return response


def make_status_response(ready="0", media="0", head="0", pause="0", length=91):
    """Build a ~HQES reply with the given characters at the decoded offsets."""
    chars = ["0"] * length
    chars[70] = ready
    chars[84] = pause
    chars[87] = head
    chars[88] = media
    return "".join(chars)
