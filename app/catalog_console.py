from __future__ import annotations

from typing import Sequence

from app.session import CatalogSession
from config.calculator_config import CalculatorConfig
from interfaces.filters.options import FilterCategory, FilterOption
from interfaces.filters.selection import OptionSelection
from services.catalog_service import format_entry_line

CATEGORY_LABELS = {
    FilterCategory.LICENSE: "License Type",
    FilterCategory.SIZE: "Model Size",
    FilterCategory.TIME: "Time Period",
}

MAIN_ACTIONS = ["filter", "clear", "calculate", "quit"]


def print_listing(session: CatalogSession) -> None:
    """Print the active filters followed by the filtered catalog."""
    summary = session.summary()
    print(f"\nShowing {summary.shown} of {summary.total} models")
    for category, selection in session.selections.items():
        names = ", ".join(selection.names()) or "any"
        print(f"  {CATEGORY_LABELS[category]}: {names}")
    if summary.message:
        print(summary.message)
        return
    for i, entry in enumerate(session.filtered, start=1):
        print(format_entry_line(i, entry))


def _format_option_line(idx: int, option: FilterOption, selection: OptionSelection) -> str:
    marker = " [x]" if option in selection else ""
    return f"{idx}. {option.name}{marker}"


def prompt_main_action() -> str:
    """Prompt for the next action on the catalog screen."""
    print("\n1. Toggle a filter option")
    print("2. Clear a filter category")
    print("3. Memory calculator")
    print("4. Quit")
    prompt = "Selection [default: 4]: "
    while True:
        raw = input(prompt).strip()
        if not raw:
            return "quit"
        if raw.isdigit() and 1 <= int(raw) <= len(MAIN_ACTIONS):
            return MAIN_ACTIONS[int(raw) - 1]
        print("Invalid selection. Enter a number from 1 to 4.")


def prompt_category() -> FilterCategory:
    categories = list(FilterCategory)
    for i, category in enumerate(categories, start=1):
        print(f"{i}. {CATEGORY_LABELS[category]}")
    while True:
        raw = input("Category: ").strip()
        if raw.isdigit() and 1 <= int(raw) <= len(categories):
            return categories[int(raw) - 1]
        print("Invalid selection. Enter a number from the list.")


def prompt_option_choice(options: Sequence[FilterOption], selection: OptionSelection) -> FilterOption | None:
    """Prompt for one option to toggle; Enter cancels."""
    for i, option in enumerate(options, start=1):
        print(_format_option_line(i, option, selection))
    while True:
        raw = input("Option [Enter to cancel]: ").strip()
        if not raw:
            return None
        if raw.isdigit() and 1 <= int(raw) <= len(options):
            return options[int(raw) - 1]
        print("Invalid selection. Enter a number from the list or press Enter to cancel.")


def _prompt_number(label: str, default: float) -> float:
    while True:
        raw = input(f"{label} [default: {default:g}]: ").strip()
        if not raw:
            return default
        try:
            value = float(raw)
        except ValueError:
            print("Invalid number.")
            continue
        if value <= 0:
            print("Enter a positive number.")
            continue
        return value


def _prompt_choice(label: str, choices: Sequence, default) -> object:
    listing = ", ".join(f"{i}={c}" for i, c in enumerate(choices, start=1))
    while True:
        raw = input(f"{label} ({listing}) [default: {default}]: ").strip()
        if not raw:
            return default
        if raw.isdigit() and 1 <= int(raw) <= len(choices):
            return choices[int(raw) - 1]
        print("Invalid selection. Enter a number from the list.")


def prompt_calculator(session: CatalogSession, calc_cfg: CalculatorConfig) -> None:
    """Ask for the calculator inputs, then print the estimate and GPU class."""
    current = session.calculator
    model_size_b = _prompt_number("Parameters (Billions)", current.model_size_b)
    precision = _prompt_choice("Precision", calc_cfg.precision_choices, current.precision)
    overhead = _prompt_choice("Overhead", calc_cfg.overhead_choices, current.overhead)
    session.update_calculator(model_size_b=model_size_b, precision=precision, overhead=overhead)
    result = session.estimate_memory()
    print(f"Required GPU Memory: {result.display_value} GB")
    print(f"Recommendation: {result.gpu_recommendation}")
