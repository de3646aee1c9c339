"""Authenticated JSON requests against the Granola API."""

from __future__ import annotations

import json
import logging
from typing import Any

import requests

from .config import DEFAULT_API_BASE_URL, DEFAULT_CLIENT_VERSION
from .credentials import CredentialStore
from .errors import ParseError, TransportError

log = logging.getLogger(__name__)


class GranolaClient:
    """POST JSON bodies to Granola, one attempt per call."""

    def __init__(
        self,
        credentials: CredentialStore,
        *,
        base_url: str = DEFAULT_API_BASE_URL,
        client_version: str = DEFAULT_CLIENT_VERSION,
        timeout: float | None = None,
    ):
        self.credentials = credentials
        self.base_url = base_url.rstrip("/")
        self.client_version = client_version
        self.timeout = timeout

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.credentials.get_token()}",
            "Content-Type": "application/json",
            "Accept": "*/*",
            "User-Agent": f"Granola/{self.client_version}",
            "X-Client-Version": self.client_version,
        }

    def post(self, endpoint: str, body: dict[str, Any]) -> Any:
        """Send ``body`` to ``endpoint`` and return the decoded JSON response."""
        url = f"{self.base_url}/{endpoint.lstrip('/')}"
        headers = self._headers()

        log.debug("POST %s", url)
        try:
            response = requests.post(url, headers=headers, json=body, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise TransportError(None, str(e)) from e

        if not 200 <= response.status_code < 300:
            raise TransportError(response.status_code, response.text)

        try:
            return json.loads(response.text)
        except json.JSONDecodeError as e:
            raise ParseError(f"Malformed JSON from {endpoint}: {e}") from e
