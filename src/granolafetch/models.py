"""Data models for Granola documents."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Generic, TypeVar

T = TypeVar("T")


def parse_timestamp(value: Any) -> datetime | None:
    """Parse an ISO-8601 timestamp into an aware datetime, or None."""
    if not isinstance(value, str) or not value:
        return None
    text = value.strip()
    # fromisoformat() on older interpreters rejects the Z suffix
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _str_or_none(value: Any) -> str | None:
    return value if isinstance(value, str) else None


@dataclass
class TranscriptSegment:
    source: str
    text: str

    @classmethod
    def from_api(cls, payload: dict) -> TranscriptSegment:
        return cls(
            source=str(payload.get("source") or ""),
            text=str(payload.get("text") or ""),
        )


@dataclass
class GranolaDocument:
    """A meeting document as returned by the get-documents endpoint."""

    id: str
    title: str
    created_at: str
    updated_at: str | None = None
    notes_markdown: str | None = None
    notes_plain: str | None = None
    content: dict | None = None

    @classmethod
    def from_api(cls, payload: dict) -> GranolaDocument:
        panel = payload.get("last_viewed_panel")
        content = panel.get("content") if isinstance(panel, dict) else None
        return cls(
            id=str(payload.get("id", "")),
            title=_str_or_none(payload.get("title")) or "",
            created_at=_str_or_none(payload.get("created_at")) or "",
            updated_at=_str_or_none(payload.get("updated_at")),
            notes_markdown=_str_or_none(payload.get("notes_markdown")),
            notes_plain=_str_or_none(payload.get("notes_plain")),
            content=content if isinstance(content, dict) else None,
        )

    @property
    def created(self) -> datetime | None:
        return parse_timestamp(self.created_at)

    def summary(self) -> dict[str, str]:
        return {"id": self.id, "title": self.title, "created_at": self.created_at}


class LookupStatus(enum.Enum):
    FOUND = "found"
    ABSENT = "absent"
    FAILED = "failed"


@dataclass
class Lookup(Generic[T]):
    """Outcome of a best-effort fetch.

    ABSENT means the service has nothing to give; FAILED means the fetch
    itself broke. Callers that don't care collapse both with ``or_none()``.
    """

    status: LookupStatus
    value: T | None = None
    error: Exception | None = None

    @classmethod
    def found(cls, value: T) -> Lookup[T]:
        return cls(LookupStatus.FOUND, value)

    @classmethod
    def absent(cls) -> Lookup[T]:
        return cls(LookupStatus.ABSENT)

    @classmethod
    def failed(cls, error: Exception) -> Lookup[T]:
        return cls(LookupStatus.FAILED, error=error)

    def or_none(self) -> T | None:
        return self.value if self.status is LookupStatus.FOUND else None
