"""
HTTP request handler for the EDSM web API.
Wraps a shared requests session and turns transport and decoding failures into EDSM errors.
"""
import logging

import requests

# Seconds before a stalled EDSM request is reported as a network failure.
REQUEST_TIMEOUT = 30


class EdsmError(RuntimeError):
    pass


class NetworkError(EdsmError):
    """The request could not complete (DNS, connection, timeout, non-2xx status)."""


class ParseError(EdsmError):
    """The response body is not JSON or does not have the expected shape."""


class RequestHandler:
    def __init__(self, base_url: str):
        self.base_url = base_url.rstrip("/")
        self.session = requests.Session()
        self.session.headers.update({"Accept": "application/json"})

    def get(self, url: str, **kwargs) -> requests.Response:
        kwargs.setdefault("timeout", REQUEST_TIMEOUT)
        try:
            resp = self.session.get(url, **kwargs)
            resp.raise_for_status()
        except requests.RequestException as e:
            raise NetworkError(f"GET {url} failed: {e}") from e
        return resp

    def get_json(self, path: str, params: dict | None = None):
        """
        JSON GET helper.
        path: path relative to base_url (no leading slash)
        returns parsed JSON payload (dict or list typically)
        """
        url = f"{self.base_url}/{path}"
        logging.debug(f"GET {url} params={params}")
        resp = self.get(url, params=params)
        try:
            payload = resp.json()
        except ValueError as e:
            raise ParseError(f"Response from {url} is not valid JSON: {e}") from e
        logging.debug(f"GET {url} -> {resp.status_code}")
        return payload
