from __future__ import annotations

from typing import Sequence
import logging

from interfaces.catalog.entry import LlmEntry
from services.filter_service import parse_model_size, parse_release_date

logger = logging.getLogger(__name__)


def validate_catalog(entries: Sequence[LlmEntry]) -> list[LlmEntry]:
    """
    Check a release list once at load time.

    Duplicate ids are an error. Size and date fields that do not parse are
    only reported: those entries stay listed but never match an active
    size or time filter.
    """
    seen: set[str] = set()
    for entry in entries:
        entry.validate()
        if entry.id in seen:
            raise ValueError(f"Duplicate catalog id: {entry.id}")
        seen.add(entry.id)
        if parse_model_size(entry.model_size) is None:
            logger.warning("Entry %s (%s) has unparseable size %r", entry.id, entry.name, entry.model_size)
        if parse_release_date(entry.latest_update) is None:
            logger.warning("Entry %s (%s) has unparseable date %r", entry.id, entry.name, entry.latest_update)
    return list(entries)


def format_release_date(text: str) -> str:
    """Render "October 2023" as "10/23"; unparseable text is returned as is."""
    released = parse_release_date(text)
    if released is None:
        return text
    return released.strftime("%m/%y")


def format_entry_line(idx: int, entry: LlmEntry) -> str:
    """Format a single catalog entry line for the console listing."""
    return (
        f"{idx}. {entry.name} | {entry.org} | {entry.model_size} | "
        f"{entry.license_type} | {format_release_date(entry.latest_update)}"
    )
