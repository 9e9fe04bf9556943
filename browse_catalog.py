import logging

from app.settings import build_settings
from app.container import build_container
from app.storage_bootstrap import bootstrap_storage
from app.catalog_console import (
    print_listing,
    prompt_calculator,
    prompt_category,
    prompt_main_action,
    prompt_option_choice,
)
from interfaces.filters.options import FilterCategory

logger = logging.getLogger(__name__)

OPTION_KEYS = {
    FilterCategory.LICENSE: "license",
    FilterCategory.SIZE: "size",
    FilterCategory.TIME: "time",
}

def main():
    # Build config (storage/calculator)
    app_cfg = build_settings()
    logging.basicConfig(
        level=app_cfg.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    # Resolve the app data dir where filter selections live
    app_cfg = bootstrap_storage(app_cfg)

    # Build the catalog, store and restored session
    deps = build_container(app_cfg)
    session = deps["session"]
    options = deps["options"]

    print_listing(session)
    while True:
        action = prompt_main_action()
        if action == "quit":
            break
        if action == "calculate":
            try:
                prompt_calculator(session, app_cfg.calculator)
            except ValueError as exc:
                print(f"Could not estimate memory: {exc}")
            continue

        category = prompt_category()
        try:
            if action == "clear":
                session.clear(category)
            else:
                option = prompt_option_choice(options[OPTION_KEYS[category]], session.selections[category])
                if option is not None:
                    session.toggle(category, option)
        except OSError as exc:
            logger.warning("Could not save %s selection: %s", category.storage_key, exc)
            print(f"Could not save the selection: {exc}")
        print_listing(session)


if __name__ == "__main__":
    main()
