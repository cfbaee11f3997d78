"""Ingestion payload normalization."""

from collections.abc import Mapping
from typing import Any


def normalize_payload(payload: Any = None) -> list[Any]:
    """
    Flatten one ingestion payload into a list of raw submissions.

    Accepts a paginated wrapper (``{"results": [...]}``), a bare list, or a single
    submission. No payload yields an empty list.
    """
    if payload is None:
        return []
    if isinstance(payload, Mapping) and isinstance(payload.get("results"), list):
        return list(payload["results"])
    if isinstance(payload, (list, tuple)):
        return list(payload)
    return [payload]
