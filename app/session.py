from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Callable, Optional, Sequence
import logging

from interfaces.catalog.entry import LlmEntry
from interfaces.filters.options import FilterCategory, FilterOption
from interfaces.filters.selection import OptionSelection
from interfaces.storage.store import SelectionStore
from services.filter_service import FilterSummary, apply_filters, summarize
from services.memory_estimator import CalculatorInput, MemoryEstimate, estimate
from services.selection_codec import decode_selection, encode_selection

logger = logging.getLogger(__name__)


@dataclass
class CatalogSession:
    """
    UI-session state for the catalog screen.

    Owns the three filter selections and the calculator input. Every
    mutation recomputes the filtered list explicitly and then persists the
    touched slot; nothing is observed implicitly.
    """
    entries: Sequence[LlmEntry]
    store: SelectionStore
    calculator: CalculatorInput = field(default_factory=lambda: CalculatorInput(7.0))
    convert_to_gib: bool = False
    clock: Callable[[], datetime] = datetime.now
    selections: dict[FilterCategory, OptionSelection] = field(default_factory=dict)
    filtered: list[LlmEntry] = field(default_factory=list)

    def __post_init__(self) -> None:
        for category in FilterCategory:
            self.selections.setdefault(category, OptionSelection.for_category(category))
        self.calculator.validate()

    @classmethod
    def restore(
        cls,
        entries: Sequence[LlmEntry],
        store: SelectionStore,
        *,
        calculator: Optional[CalculatorInput] = None,
        convert_to_gib: bool = False,
        clock: Callable[[], datetime] = datetime.now,
    ) -> "CatalogSession":
        """Rebuild a session from the stored selection slots (empty slots start empty)."""
        session = cls(
            entries=entries,
            store=store,
            calculator=calculator or CalculatorInput(7.0),
            convert_to_gib=convert_to_gib,
            clock=clock,
        )
        for category, selection in session.selections.items():
            selection.replace(decode_selection(store.read(category.storage_key)))
            logger.debug("Restored %s: %s", category.name, selection.names())
        session.recompute()
        return session

    @property
    def license_selection(self) -> OptionSelection:
        return self.selections[FilterCategory.LICENSE]

    @property
    def size_selection(self) -> OptionSelection:
        return self.selections[FilterCategory.SIZE]

    @property
    def time_selection(self) -> OptionSelection:
        return self.selections[FilterCategory.TIME]

    def recompute(self) -> list[LlmEntry]:
        self.filtered = apply_filters(
            self.entries,
            self.license_selection,
            self.size_selection,
            self.time_selection,
            now=self.clock(),
        )
        return self.filtered

    def summary(self) -> FilterSummary:
        return summarize(self.filtered, len(self.entries))

    def _persist(self, category: FilterCategory) -> None:
        blob = encode_selection(self.selections[category])
        self.store.write(category.storage_key, blob)

    def _after_mutation(self, category: FilterCategory, changed: bool) -> bool:
        # Recompute first so a failed write never leaves a stale list; write errors propagate
        if changed:
            self.recompute()
            self._persist(category)
        return changed

    def toggle(self, category: FilterCategory, option: FilterOption) -> bool:
        changed = self.selections[category].toggle(option)
        return self._after_mutation(category, changed)

    def clear(self, category: FilterCategory) -> bool:
        changed = self.selections[category].clear()
        return self._after_mutation(category, changed)

    def update_calculator(
        self,
        *,
        model_size_b: Optional[float] = None,
        precision: Optional[str] = None,
        overhead: Optional[float] = None,
    ) -> CalculatorInput:
        """Apply new calculator values; invalid values raise ValueError and leave the input unchanged."""
        updates = {
            k: v for k, v in {
                "model_size_b": model_size_b,
                "precision": precision,
                "overhead": overhead,
            }.items() if v is not None
        }
        candidate = replace(self.calculator, **updates)
        candidate.validate()
        self.calculator = candidate
        return candidate

    def estimate_memory(self) -> MemoryEstimate:
        c = self.calculator
        return estimate(c.model_size_b, c.precision, c.overhead, convert_to_gib=self.convert_to_gib)
