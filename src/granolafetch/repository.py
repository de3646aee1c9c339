"""Document listing and lookup on top of the API client."""

from __future__ import annotations

import logging

from .api_client import GranolaClient
from .config import NOTES_LOOKUP_LIMIT
from .errors import GranolaError
from .models import GranolaDocument, Lookup, TranscriptSegment
from .prosemirror import prosemirror_to_markdown

log = logging.getLogger(__name__)

DOCUMENTS_ENDPOINT = "v2/get-documents"
TRANSCRIPT_ENDPOINT = "v1/get-document-transcript"


class DocumentRepository:
    """Fetch documents, notes and transcripts. Nothing is cached between calls."""

    def __init__(self, client: GranolaClient, *, notes_lookup_limit: int = NOTES_LOOKUP_LIMIT):
        self.client = client
        self.notes_lookup_limit = notes_lookup_limit

    def list_recent(self, limit: int, offset: int = 0) -> list[GranolaDocument]:
        """Return up to ``limit`` documents in the order the service lists them."""
        data = self.client.post(
            DOCUMENTS_ENDPOINT,
            {"limit": limit, "offset": offset, "include_last_viewed_panel": True},
        )
        docs = data.get("docs") if isinstance(data, dict) else None
        if not isinstance(docs, list):
            log.debug("No 'docs' list in get-documents response")
            return []

        documents = [GranolaDocument.from_api(doc) for doc in docs if isinstance(doc, dict)]
        log.info("Fetched %d documents (limit=%d, offset=%d)", len(documents), limit, offset)
        return documents

    def fetch_transcript(self, document_id: str) -> Lookup[list[TranscriptSegment]]:
        try:
            data = self.client.post(TRANSCRIPT_ENDPOINT, {"document_id": document_id})
        except GranolaError as e:
            log.warning("Transcript fetch failed for %s: %s", document_id, e)
            return Lookup.failed(e)

        if not isinstance(data, list) or not data:
            return Lookup.absent()
        segments = [TranscriptSegment.from_api(seg) for seg in data if isinstance(seg, dict)]
        if not segments:
            return Lookup.absent()
        return Lookup.found(segments)

    def get_transcript(self, document_id: str) -> list[TranscriptSegment] | None:
        return self.fetch_transcript(document_id).or_none()

    def fetch_notes(self, document_id: str) -> Lookup[str]:
        """Find a document's notes among the most recent documents.

        Only the latest ``notes_lookup_limit`` documents are scanned; anything
        older is reported as absent.
        """
        try:
            documents = self.list_recent(self.notes_lookup_limit)
        except GranolaError as e:
            log.warning("Notes fetch failed for %s: %s", document_id, e)
            return Lookup.failed(e)

        doc = next((d for d in documents if d.id == document_id), None)
        if doc is None:
            log.debug("Document %s not in the %d most recent", document_id, self.notes_lookup_limit)
            return Lookup.absent()

        if doc.notes_markdown:
            return Lookup.found(doc.notes_markdown)
        if doc.content:
            rendered = prosemirror_to_markdown(doc.content)
            if rendered:
                return Lookup.found(rendered)
        if doc.notes_plain:
            return Lookup.found(doc.notes_plain)
        return Lookup.absent()

    def get_notes(self, document_id: str) -> str | None:
        return self.fetch_notes(document_id).or_none()
