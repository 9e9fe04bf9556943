import pytest

import browse_catalog
from app.selection_store import FileSelectionStore
from app.catalog_console import (
    print_listing,
    prompt_calculator,
    prompt_category,
    prompt_main_action,
    prompt_option_choice,
)
from app.session import CatalogSession
from app.settings import build_settings
from interfaces.filters.options import SIZE_OPTIONS, FilterCategory, FilterOption


def feed(monkeypatch, *answers):
    it = iter(answers)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(it))


@pytest.fixture
def session(sample_entries, memory_store, fixed_now):
    return CatalogSession.restore(sample_entries, memory_store, clock=lambda: fixed_now)


def test_main_action_defaults_to_quit(monkeypatch):
    feed(monkeypatch, "")
    assert prompt_main_action() == "quit"


def test_main_action_retries_invalid_input(monkeypatch, capsys):
    feed(monkeypatch, "9", "x", "3")
    assert prompt_main_action() == "calculate"
    assert "Invalid selection" in capsys.readouterr().out


def test_prompt_category(monkeypatch):
    feed(monkeypatch, "0", "3")
    assert prompt_category() is FilterCategory.TIME


def test_prompt_option_choice_marks_selected(monkeypatch, capsys, session):
    session.toggle(FilterCategory.SIZE, FilterOption("Large > 5B"))
    feed(monkeypatch, "1")
    option = prompt_option_choice(list(SIZE_OPTIONS), session.size_selection)
    assert option == FilterOption("Small < 5B")
    assert "2. Large > 5B [x]" in capsys.readouterr().out


def test_prompt_option_choice_cancel(monkeypatch, session):
    feed(monkeypatch, "")
    assert prompt_option_choice(list(SIZE_OPTIONS), session.size_selection) is None


def test_print_listing(capsys, session):
    print_listing(session)
    out = capsys.readouterr().out
    assert "Showing 6 of 6 models" in out
    assert "License Type: any" in out
    assert "1. Model a | Org | 11B | Apache 2.0 | 10/19" in out


def test_print_listing_empty_state(capsys, session):
    session.toggle(FilterCategory.LICENSE, FilterOption("MIT"))
    session.toggle(FilterCategory.SIZE, FilterOption("Large > 5B"))
    print_listing(session)
    assert "Sparse results, please retry options." in capsys.readouterr().out


def test_prompt_calculator_defaults(monkeypatch, capsys, session):
    feed(monkeypatch, "", "", "")
    prompt_calculator(session, build_settings().calculator)
    out = capsys.readouterr().out
    assert "Required GPU Memory: 17 GB" in out
    assert "Recommendation: At least 1 24GB GPU" in out


def test_prompt_calculator_choices(monkeypatch, capsys, session):
    feed(monkeypatch, "-3", "70", "1", "2")
    prompt_calculator(session, build_settings().calculator)
    # 70 * 4 / 1 * 1.1
    assert session.calculator.precision == "FP32"
    assert session.calculator.overhead == 1.1
    assert "Required GPU Memory: 308 GB" in capsys.readouterr().out


def test_main_session_round(monkeypatch, capsys, tmp_path):
    monkeypatch.delenv("PERSIST_SELECTIONS", raising=False)
    monkeypatch.setenv("APP_DATA_DIR", str(tmp_path))
    # toggle -> License -> Apache, then quit
    feed(monkeypatch, "1", "1", "1", "4")
    browse_catalog.main()
    assert (tmp_path / "selections" / "selectedOpenSourceTypes.json").exists()
    assert "License Type: Apache" in capsys.readouterr().out


def test_main_reports_failed_save_and_keeps_going(monkeypatch, capsys, tmp_path):
    monkeypatch.setenv("APP_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("PERSIST_SELECTIONS", raising=False)

    def fail(self, key, blob):
        raise OSError("read-only file system")

    monkeypatch.setattr(FileSelectionStore, "write", fail)
    feed(monkeypatch, "1", "1", "1", "4")
    browse_catalog.main()
    out = capsys.readouterr().out
    assert "Could not save the selection: read-only file system" in out
    assert "License Type: Apache" in out
