# Import dataset, storage and session components.
from config.llm_catalog import CATALOG_ENTRIES
from app.selection_store import FileSelectionStore, MemorySelectionStore
from app.session import CatalogSession
from interfaces.config.app_config import AppConfigShape
from interfaces.filters.options import SIZE_OPTIONS, TIME_OPTIONS, build_license_options
from services.catalog_service import validate_catalog
from services.memory_estimator import CalculatorInput

def build_container(cfg: AppConfigShape):
    """
    Dependency container builder
    Responsibility:
     - Takes a fully bootstrapped config object
     - Validates the bundled catalog once
     - Restores the filter session from the selection store
     - Returns a dictionary of ready-to-use objects
    """

    # --------- Dataset ----------
    entries = validate_catalog(CATALOG_ENTRIES)

    # --------- Selection storage ----------
    # Files under the app data dir, or an in-process store when nothing should persist
    if cfg.persist_selections:
        store = FileSelectionStore(directory=cfg.storage.selections_dir)
    else:
        store = MemorySelectionStore()

    # --------- Session ----------
    calculator = CalculatorInput(
        model_size_b=cfg.calculator.default_model_size_b,
        precision=cfg.calculator.default_precision,
        overhead=cfg.calculator.default_overhead,
    )
    session = CatalogSession.restore(
        entries,
        store,
        calculator=calculator,
        convert_to_gib=cfg.calculator.convert_to_gib,
    )

    # ---- RETURN CONTAINER -----
    return {
        "cfg": cfg,
        "entries": entries,
        "store": store,
        "session": session,
        "options": {
            "license": build_license_options(entries),
            "size": list(SIZE_OPTIONS),
            "time": list(TIME_OPTIONS),
        },
    }
