from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable
from uuid import uuid4

from interfaces.catalog.entry import LlmEntry


class FilterCategory(Enum):
    LICENSE = "selectedOpenSourceTypes"
    SIZE = "selectedModelSizes"
    TIME = "selectedYears"

    @property
    def storage_key(self) -> str:
        return self.value


@dataclass(frozen=True)
class FilterOption:
    """
    One selectable choice within a filter category.

    Equality and hashing use the name only; the id is a per-instance handle
    for presentation code and never takes part in comparisons.
    """
    name: str
    id: str = field(default_factory=lambda: uuid4().hex, compare=False, repr=False)


# Canonical license buckets that absorb every variant containing them
APACHE_BUCKET = "Apache"
CUSTOM_BUCKET = "Custom"

SMALL_SIZE = "Small < 5B"
LARGE_SIZE = "Large > 5B"

LAST_6_MONTHS = "Last 6 Months"
PREVIOUS_YEAR = "Previous Year"
PAST_2_YEARS = "Past 2 Years"

SIZE_OPTIONS: tuple[FilterOption, ...] = (
    FilterOption(SMALL_SIZE),
    FilterOption(LARGE_SIZE),
)

TIME_OPTIONS: tuple[FilterOption, ...] = (
    FilterOption(LAST_6_MONTHS),
    FilterOption(PREVIOUS_YEAR),
    FilterOption(PAST_2_YEARS),
)


def build_license_options(entries: Iterable[LlmEntry]) -> list[FilterOption]:
    """Unique license strings, with Apache and Custom variants collapsed into one bucket each."""
    unique = {e.license_type for e in entries}
    unique = {t for t in unique if APACHE_BUCKET not in t and CUSTOM_BUCKET not in t}
    unique.add(APACHE_BUCKET)
    unique.add(CUSTOM_BUCKET)
    return [FilterOption(name) for name in sorted(unique)]
