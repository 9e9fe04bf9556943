"""
Shared pytest fixtures: a small hand-made catalog, a fixed clock and an
in-memory selection store.
"""

from datetime import datetime

import pytest

from app.selection_store import MemorySelectionStore
from interfaces.catalog.entry import LlmEntry


FIXED_NOW = datetime(2025, 10, 1)


def make_entry(id, license_type="MIT", model_size="7B", latest_update="May 2024", name=None):
    return LlmEntry(
        id=id,
        name=name or f"Model {id}",
        org="Org",
        model_size=model_size,
        license_type=license_type,
        latest_update=latest_update,
        content="Test model.",
        link=None,
    )


@pytest.fixture
def fixed_now():
    return FIXED_NOW


@pytest.fixture
def sample_entries():
    return [
        make_entry("a", "Apache 2.0", "11B", "October 2019"),
        make_entry("b", "Apache", "3B", "April 2025"),
        make_entry("c", "Custom with Usage Restrictions", "70B", "March 2025"),
        make_entry("d", "MIT", "1M", "September 2025"),
        make_entry("e", "Proprietary", "3.5T", "not a date"),
        make_entry("f", "Custom Open License", "2.7B", "December 2024"),
    ]


@pytest.fixture
def memory_store():
    return MemorySelectionStore()


@pytest.fixture
def entry_factory():
    return make_entry
