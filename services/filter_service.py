from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Optional, Sequence
import logging
import math

from interfaces.catalog.entry import LlmEntry
from interfaces.filters.options import (
    APACHE_BUCKET,
    CUSTOM_BUCKET,
    LARGE_SIZE,
    LAST_6_MONTHS,
    PAST_2_YEARS,
    PREVIOUS_YEAR,
    SMALL_SIZE,
    FilterOption,
)

logger = logging.getLogger(__name__)

RELEASE_DATE_FORMAT = "%B %Y"
EMPTY_RESULT_MESSAGE = "Sparse results, please retry options."

# Half-open [low, high) ranges in billions of parameters
SIZE_BUCKETS: dict[str, tuple[float, float]] = {
    SMALL_SIZE: (0.0, 5.0),
    LARGE_SIZE: (5.0, math.inf),
}

# Trailing windows measured back from "now"
TIME_WINDOWS_MONTHS: dict[str, int] = {
    LAST_6_MONTHS: 6,
    PREVIOUS_YEAR: 12,
    PAST_2_YEARS: 24,
}


def parse_model_size(size: str) -> Optional[float]:
    """
    Parse a parameter-size string into billions.
    "70B" -> 70.0, "1.5T" -> 1500.0; anything else -> None.
    """
    text = (size or "").strip()
    if len(text) < 2:
        return None
    suffix = text[-1]
    if suffix not in {"B", "T"}:
        return None
    try:
        value = float(text[:-1])
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value * 1000.0 if suffix == "T" else value


def parse_release_date(text: str) -> Optional[datetime]:
    """Parse a "Month Year" release date to the first day of that month."""
    try:
        return datetime.strptime((text or "").strip(), RELEASE_DATE_FORMAT)
    except ValueError:
        return None


def months_before(moment: datetime, months: int) -> datetime:
    """Calendar subtraction; the day is clamped to the length of the target month."""
    index = moment.year * 12 + (moment.month - 1) - months
    year, month = divmod(index, 12)
    month += 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def matches_license(entry: LlmEntry, selection: Iterable[FilterOption]) -> bool:
    options = list(selection)
    if not options:
        return True
    for option in options:
        if option.name == entry.license_type:
            return True
        if option.name == APACHE_BUCKET and APACHE_BUCKET in entry.license_type:
            return True
        if option.name == CUSTOM_BUCKET and CUSTOM_BUCKET in entry.license_type:
            return True
    return False


def matches_size(entry: LlmEntry, selection: Iterable[FilterOption]) -> bool:
    options = list(selection)
    if not options:
        return True
    size = parse_model_size(entry.model_size)
    if size is None:
        return False
    for option in options:
        bucket = SIZE_BUCKETS.get(option.name)
        if bucket is None:
            continue
        low, high = bucket
        if low <= size < high:
            return True
    return False


def is_date_in_range(date_text: str, window: str, now: datetime) -> bool:
    released = parse_release_date(date_text)
    if released is None:
        return False
    months = TIME_WINDOWS_MONTHS.get(window)
    if months is None:
        # Unknown window names do not restrict the list
        return True
    return released >= months_before(now, months)


def matches_time(entry: LlmEntry, selection: Iterable[FilterOption], now: datetime) -> bool:
    options = list(selection)
    if not options:
        return True
    return any(is_date_in_range(entry.latest_update, o.name, now) for o in options)


def apply_filters(
    entries: Sequence[LlmEntry],
    license_selection: Iterable[FilterOption],
    size_selection: Iterable[FilterOption],
    time_selection: Iterable[FilterOption],
    *,
    now: Optional[datetime] = None,
) -> list[LlmEntry]:
    """
    Return the entries matching every category, in catalog order.

    Options within a category are OR'ed, categories are AND'ed, and an empty
    category does not restrict the result.
    """
    licenses = list(license_selection)
    sizes = list(size_selection)
    windows = list(time_selection)
    moment = now if now is not None else datetime.now()
    if moment.tzinfo is not None:
        # Release dates are naive local dates
        moment = moment.astimezone().replace(tzinfo=None)

    result = [
        e for e in entries
        if matches_license(e, licenses)
        and matches_size(e, sizes)
        and matches_time(e, windows, moment)
    ]
    logger.debug(
        "Filtered %d of %d entries (license=%s, size=%s, time=%s)",
        len(result),
        len(entries),
        [o.name for o in licenses],
        [o.name for o in sizes],
        [o.name for o in windows],
    )
    return result


@dataclass(frozen=True, slots=True)
class FilterSummary:
    shown: int
    total: int

    @property
    def fraction(self) -> float:
        return self.shown / self.total if self.total else 0.0

    @property
    def is_empty(self) -> bool:
        return self.shown == 0

    @property
    def message(self) -> Optional[str]:
        return EMPTY_RESULT_MESSAGE if self.is_empty else None


def summarize(result: Sequence[LlmEntry], total: int) -> FilterSummary:
    return FilterSummary(shown=len(result), total=total)
