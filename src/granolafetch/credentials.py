"""Load the Granola access token from the desktop app's local config."""

from __future__ import annotations

import json
import logging
import threading
from pathlib import Path

from .config import DEFAULT_CREDENTIALS_PATH
from .errors import AuthError, ConfigError, ParseError

log = logging.getLogger(__name__)


class CredentialStore:
    """Owns the process-lifetime access token.

    The token is read from ``supabase.json`` on first use and reused after
    that. There is no expiry tracking and no refresh.
    """

    def __init__(self, path: Path | None = None):
        self.path = path or DEFAULT_CREDENTIALS_PATH
        self._token: str | None = None
        self._lock = threading.Lock()

    def get_token(self) -> str:
        if self._token is not None:
            return self._token
        with self._lock:
            if self._token is None:
                self._token = self._load()
            return self._token

    def clear(self) -> None:
        with self._lock:
            self._token = None

    def _load(self) -> str:
        if not self.path.exists():
            raise ConfigError(
                f"Granola config file not found at {self.path}. "
                "Make sure Granola is installed and you're logged in."
            )

        try:
            config = json.loads(self.path.read_text(encoding="utf-8"))
        except OSError as e:
            raise ConfigError(f"Could not read Granola config at {self.path}: {e}") from e
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ParseError(f"Invalid JSON in {self.path}: {e}") from e

        # workos_tokens is itself a JSON-encoded string
        workos_raw = config.get("workos_tokens") if isinstance(config, dict) else None
        if not workos_raw:
            raise AuthError("No workos_tokens found in Granola config")

        if isinstance(workos_raw, str):
            try:
                workos_tokens = json.loads(workos_raw)
            except json.JSONDecodeError as e:
                raise ParseError(f"Invalid JSON in workos_tokens: {e}") from e
        else:
            workos_tokens = workos_raw

        access_token = workos_tokens.get("access_token") if isinstance(workos_tokens, dict) else None
        if not access_token or not isinstance(access_token, str):
            raise AuthError("No access_token found in workos_tokens")

        log.debug("Loaded Granola access token from %s", self.path)
        return access_token
