"""Title search and 1:1 meeting lookup over fetched documents."""

from __future__ import annotations

from datetime import datetime, timezone

from .models import GranolaDocument

ONE_ON_ONE_MARKERS = ("1:1", "1x1")

_EARLIEST = datetime.min.replace(tzinfo=timezone.utc)


def search(documents: list[GranolaDocument], query: str) -> list[GranolaDocument]:
    """Documents whose title contains ``query``, ignoring case, in input order."""
    needle = query.lower()
    return [doc for doc in documents if needle in doc.title.lower()]


def is_one_on_one_with(doc: GranolaDocument, person_name: str) -> bool:
    title = doc.title.lower()
    if person_name.lower() not in title:
        return False
    return any(marker in title for marker in ONE_ON_ONE_MARKERS)


def find_latest_meeting_with(
    documents: list[GranolaDocument],
    person_name: str,
) -> GranolaDocument | None:
    """Most recently created 1:1 whose title mentions ``person_name``.

    Documents sharing the newest timestamp resolve to whichever came first in
    ``documents``. The service does not promise a stable listing order, so
    such ties are not reproducible across fetches.
    """
    matching = [doc for doc in documents if is_one_on_one_with(doc, person_name)]
    if not matching:
        return None

    # sorted() is stable with reverse=True, so ties keep fetch order
    matching = sorted(matching, key=lambda d: d.created or _EARLIEST, reverse=True)
    return matching[0]
