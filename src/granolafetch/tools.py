"""Text-producing operations for a tool host or the CLI.

Each operation returns a ToolResult instead of raising, so a caller can hand
the text straight back to a user. Listing and lookup failures come back with
``is_error`` set; missing notes or transcripts are ordinary messages.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import datetime

from .api_client import GranolaClient
from .config import Config, DEFAULT_LIMIT, ONE_ON_ONE_WINDOW
from .credentials import CredentialStore
from .errors import GranolaError
from .matcher import find_latest_meeting_with, search
from .models import GranolaDocument
from .prosemirror import render_transcript
from .repository import DocumentRepository

log = logging.getLogger(__name__)

NO_NOTES = "No AI notes available for this document"
NO_TRANSCRIPT = "No transcript available for this document"


@dataclass
class ToolResult:
    text: str
    is_error: bool = False


def format_long_date(value: datetime) -> str:
    """'Monday, January 1, 2024' in the local timezone."""
    local = value.astimezone()
    return f"{local:%A}, {local:%B} {local.day}, {local.year}"


def _summaries(documents: list[GranolaDocument]) -> str:
    return json.dumps([doc.summary() for doc in documents], indent=2)


class GranolaTools:
    def __init__(
        self,
        repository: DocumentRepository,
        *,
        default_limit: int = DEFAULT_LIMIT,
        one_on_one_window: int = ONE_ON_ONE_WINDOW,
    ):
        self.repository = repository
        self.default_limit = default_limit
        self.one_on_one_window = one_on_one_window

    @classmethod
    def from_config(cls, config: Config) -> GranolaTools:
        client = GranolaClient(
            CredentialStore(config.credentials_path),
            base_url=config.api_base_url,
            client_version=config.client_version,
            timeout=config.timeout,
        )
        repository = DocumentRepository(client, notes_lookup_limit=config.notes_lookup_limit)
        return cls(
            repository,
            default_limit=config.default_limit,
            one_on_one_window=config.one_on_one_window,
        )

    def get_recent_documents(self, limit: int | None = None) -> ToolResult:
        try:
            documents = self.repository.list_recent(self.default_limit if limit is None else limit)
        except GranolaError as e:
            log.error("Listing documents failed: %s", e)
            return ToolResult(f"Error fetching documents: {e}", is_error=True)
        return ToolResult(_summaries(documents))

    def _document_body(self, document_id: str, transcript: bool) -> str:
        if transcript:
            segments = self.repository.get_transcript(document_id)
            return render_transcript(segments) if segments else NO_TRANSCRIPT
        return self.repository.get_notes(document_id) or NO_NOTES

    def get_document(self, document_id: str, transcript: bool = False) -> ToolResult:
        try:
            body = self._document_body(document_id, transcript)
        except GranolaError as e:
            log.error("Fetching document %s failed: %s", document_id, e)
            return ToolResult(f"Error fetching document: {e}", is_error=True)
        return ToolResult(body)

    def search_documents(self, query: str, limit: int | None = None) -> ToolResult:
        # limit bounds the fetch; matches are filtered from that window
        try:
            documents = self.repository.list_recent(self.default_limit if limit is None else limit)
        except GranolaError as e:
            log.error("Searching documents failed: %s", e)
            return ToolResult(f"Error searching documents: {e}", is_error=True)

        matches = search(documents, query)
        if not matches:
            return ToolResult(f'No documents found matching "{query}"')
        return ToolResult(_summaries(matches))

    def find_latest_one_on_one(self, person_name: str, transcript: bool = False) -> ToolResult:
        try:
            documents = self.repository.list_recent(self.one_on_one_window)
            doc = find_latest_meeting_with(documents, person_name)
            if doc is None:
                return ToolResult(f"No 1:1 meeting found with {person_name}")
            body = self._document_body(doc.id, transcript)
        except GranolaError as e:
            log.error("Finding 1:1 with %s failed: %s", person_name, e)
            return ToolResult(f"Error finding 1:1: {e}", is_error=True)

        date = doc.created_at
        created = doc.created
        if created is not None:
            try:
                date = format_long_date(created)
            except (OverflowError, OSError):
                log.debug("Cannot localize %s, showing it verbatim", doc.created_at)
        return ToolResult(f"# {doc.title}\n\n**Date:** {date}\n\n{body}")
