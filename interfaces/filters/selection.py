from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from interfaces.filters.options import FilterCategory, FilterOption


@dataclass
class OptionSelection:
    """
    The set of options picked within one filter category.

    A `single` category follows the picker rule of the time filter: picking
    an option replaces the current one.
    """
    category: FilterCategory
    single: bool = False
    _selected: set[FilterOption] = field(default_factory=set, repr=False)

    @staticmethod
    def for_category(category: FilterCategory) -> "OptionSelection":
        # The time window is the only category restricted to one pick
        return OptionSelection(category=category, single=category is FilterCategory.TIME)

    def __contains__(self, option: object) -> bool:
        return option in self._selected

    def __iter__(self) -> Iterator[FilterOption]:
        return iter(sorted(self._selected, key=lambda o: o.name))

    def __len__(self) -> int:
        return len(self._selected)

    def is_empty(self) -> bool:
        return not self._selected

    def options(self) -> frozenset[FilterOption]:
        return frozenset(self._selected)

    def names(self) -> list[str]:
        return sorted(o.name for o in self._selected)

    def toggle(self, option: FilterOption) -> bool:
        """Flip one option following the picker rules. Returns True if the selection changed."""
        if option in self._selected:
            return self.deselect(option)
        return self.select(option)

    def select(self, option: FilterOption) -> bool:
        if option in self._selected:
            return False
        if self.single:
            self._selected = {option}
            return True
        self._selected.add(option)
        return True

    def deselect(self, option: FilterOption) -> bool:
        if option not in self._selected:
            return False
        self._selected.discard(option)
        return True

    def clear(self) -> bool:
        if not self._selected:
            return False
        self._selected = set()
        return True

    def replace(self, options: Iterable[FilterOption]) -> None:
        """
        Overwrite the selection wholesale, e.g. when restoring a saved slot.
        A single-pick category keeps only the alphabetically first option.
        """
        incoming = set(options)
        if self.single and len(incoming) > 1:
            incoming = {min(incoming, key=lambda o: o.name)}
        self._selected = incoming
