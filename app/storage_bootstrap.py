from __future__ import annotations
from dataclasses import replace
from pathlib import Path
import logging
import os
from platformdirs import user_data_dir

logger = logging.getLogger(__name__)

# Determines where the app data should live
# In dev mode, uses .appdata
# In prod uses the OS-standard user data directory.
def get_app_base_dir(app_name: str, org: str) -> Path:
    # Explicit override for tests and packaged builds
    override = os.getenv("APP_DATA_DIR")
    if override:
        return Path(override).expanduser().resolve()

    # Dev mode -> store inside the repo
    if os.getenv("DEV_MODE", "").strip() in {"1", "true", "True", "yes", "YES"}:
        project_root = Path(__file__).resolve().parents[1]
        return (project_root / ".appdata").resolve()

    # Prod mode -> OS-standard user data dir
    return Path(user_data_dir(app_name, org)).resolve()

# Resolves the data directory (unless the config already pins one),
# creates the selections folder and returns the updated config.
def bootstrap_storage(app_cfg):
    storage = app_cfg.storage
    base = storage.data_dir or get_app_base_dir(storage.app_name, storage.org)

    new_storage = replace(storage, data_dir=base)
    new_storage.selections_dir.mkdir(parents=True, exist_ok=True)

    # Validate the resolved configuration
    new_storage.validate_resolved()
    logger.info("Selections stored in %s", new_storage.selections_dir)

    return replace(app_cfg, storage=new_storage)
