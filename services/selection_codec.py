from __future__ import annotations

from typing import Any, Iterable, Optional
import json
import logging

from interfaces.filters.options import FilterOption

logger = logging.getLogger(__name__)

FORMAT_VERSION = 1


def encode_selection(options: Iterable[FilterOption]) -> bytes:
    """Serialize a selection as a versioned list of option names."""
    names = sorted({o.name for o in options})
    payload = {"version": FORMAT_VERSION, "options": names}
    return json.dumps(payload, separators=(",", ":")).encode("utf-8")


def _names_from_payload(data: Any) -> Optional[list[str]]:
    # Bare list of names is what earlier releases stored
    if isinstance(data, list):
        names = data
    elif isinstance(data, dict):
        if data.get("version") != FORMAT_VERSION:
            return None
        names = data.get("options")
        if not isinstance(names, list):
            return None
    else:
        return None
    if not all(isinstance(n, str) for n in names):
        return None
    return names


def decode_selection(blob: Optional[bytes]) -> set[FilterOption]:
    """
    Rebuild a selection from its stored form.
    Missing, empty or malformed data yields an empty selection.
    """
    if not blob:
        return set()
    try:
        data = json.loads(blob.decode("utf-8"))
    except (UnicodeDecodeError, ValueError, RecursionError) as exc:
        logger.warning("Discarding unreadable selection data: %s", exc)
        return set()

    names = _names_from_payload(data)
    if names is None:
        logger.warning("Discarding selection data with unexpected shape: %r", data)
        return set()
    return {FilterOption(n) for n in names}
