from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.staff_manager.staff_manager.container import MYSQL_BACKEND, build_container
from src.staff_manager.staff_manager.store.sample_data import seed_sample_data


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(backend=MYSQL_BACKEND, db_config=settings.DB_CONFIG)

    created = seed_sample_data(container.store)
    if not created:
        print(f"SKIP: {container.conn.config.describe()} already has employees")
        return

    print(f"OK: Seeded {len(created)} employees -> {container.conn.config.describe()}")


if __name__ == "__main__":
    main()
