"""Shared fixtures for granolafetch tests."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from granolafetch.api_client import GranolaClient
from granolafetch.credentials import CredentialStore
from granolafetch.models import GranolaDocument
from granolafetch.repository import DocumentRepository


def _write_supabase(path: Path, tokens: dict | None = None, **outer) -> Path:
    payload = dict(outer)
    if tokens is not None:
        payload["workos_tokens"] = json.dumps(tokens)
    path.write_text(json.dumps(payload))
    return path


def _make_doc(doc_id: str, title: str, created_at: str = "2024-01-01T10:00:00Z", **extra) -> dict:
    return {"id": doc_id, "title": title, "created_at": created_at, **extra}


@pytest.fixture
def write_supabase():
    return _write_supabase


@pytest.fixture
def make_doc():
    return _make_doc


@pytest.fixture
def credentials_file(tmp_path: Path) -> Path:
    return _write_supabase(
        tmp_path / "supabase.json",
        {"access_token": "tok-123", "refresh_token": "refresh", "expires_at": 1234567890},
    )


@pytest.fixture
def credential_store(credentials_file: Path) -> CredentialStore:
    return CredentialStore(credentials_file)


@pytest.fixture
def mock_client() -> MagicMock:
    return MagicMock(spec=GranolaClient)


@pytest.fixture
def repository(mock_client: MagicMock) -> DocumentRepository:
    return DocumentRepository(mock_client)


@pytest.fixture
def sample_docs() -> list[dict]:
    return [
        _make_doc("doc-1", "Sam 1:1", "2024-02-01T09:00:00Z", notes_markdown="## Notes\n\n- shipped"),
        _make_doc(
            "doc-2",
            "Weekly sync",
            "2024-01-20T09:00:00Z",
            last_viewed_panel={
                "content": {
                    "type": "doc",
                    "content": [
                        {"type": "paragraph", "content": [{"type": "text", "text": "From the panel"}]},
                    ],
                },
            },
        ),
        _make_doc("doc-3", "sam 1x1", "2024-01-01T09:00:00Z"),
    ]


@pytest.fixture
def sample_documents(sample_docs: list[dict]) -> list[GranolaDocument]:
    return [GranolaDocument.from_api(d) for d in sample_docs]
