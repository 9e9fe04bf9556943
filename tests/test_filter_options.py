from config.llm_catalog import CATALOG_ENTRIES
from interfaces.filters.options import (
    SIZE_OPTIONS,
    TIME_OPTIONS,
    FilterCategory,
    FilterOption,
    build_license_options,
)
from interfaces.filters.selection import OptionSelection


def test_options_compare_and_hash_by_name_only():
    a = FilterOption("Apache")
    b = FilterOption("Apache")
    assert a.id != b.id
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1
    assert FilterOption("Apache") != FilterOption("MIT")


def test_category_storage_keys():
    assert FilterCategory.LICENSE.storage_key == "selectedOpenSourceTypes"
    assert FilterCategory.SIZE.storage_key == "selectedModelSizes"
    assert FilterCategory.TIME.storage_key == "selectedYears"


def test_fixed_candidates():
    assert [o.name for o in SIZE_OPTIONS] == ["Small < 5B", "Large > 5B"]
    assert [o.name for o in TIME_OPTIONS] == ["Last 6 Months", "Previous Year", "Past 2 Years"]


def test_license_options_collapse_variants(sample_entries):
    names = [o.name for o in build_license_options(sample_entries)]
    assert names == ["Apache", "Custom", "MIT", "Proprietary"]


def test_license_options_for_bundled_catalog():
    names = [o.name for o in build_license_options(CATALOG_ENTRIES)]
    assert names == [
        "Apache",
        "BSD-3-Clause",
        "CC BY-SA-4.0",
        "Custom",
        "MIT",
        "OpenRAIL-M v1",
        "Proprietary",
    ]


def test_multi_selection_toggles():
    sel = OptionSelection.for_category(FilterCategory.LICENSE)
    assert sel.is_empty()
    assert sel.toggle(FilterOption("MIT"))
    assert sel.toggle(FilterOption("Apache"))
    assert sel.names() == ["Apache", "MIT"]
    assert sel.toggle(FilterOption("MIT"))
    assert sel.names() == ["Apache"]
    assert FilterOption("Apache") in sel


def test_time_selection_holds_at_most_one_option():
    sel = OptionSelection.for_category(FilterCategory.TIME)
    assert sel.single
    sel.toggle(FilterOption("Last 6 Months"))
    sel.toggle(FilterOption("Past 2 Years"))
    assert sel.names() == ["Past 2 Years"]
    sel.toggle(FilterOption("Past 2 Years"))
    assert sel.is_empty()


def test_clear():
    sel = OptionSelection.for_category(FilterCategory.SIZE)
    assert not sel.clear()
    sel.toggle(FilterOption("Large > 5B"))
    assert sel.clear()
    assert sel.is_empty()


def test_replace_on_single_selection_keeps_first_name():
    sel = OptionSelection.for_category(FilterCategory.TIME)
    sel.replace({FilterOption("Past 2 Years"), FilterOption("Last 6 Months")})
    assert sel.names() == ["Last 6 Months"]

def test_iteration_is_sorted_by_name():
    sel = OptionSelection.for_category(FilterCategory.LICENSE)
    sel.replace({FilterOption("MIT"), FilterOption("Apache"), FilterOption("Custom")})
    assert [o.name for o in sel] == ["Apache", "Custom", "MIT"]
    assert sel.options() == frozenset({FilterOption("MIT"), FilterOption("Apache"), FilterOption("Custom")})
