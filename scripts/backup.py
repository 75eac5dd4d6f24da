"""Backup database.

Note: this script relies on `mysqldump` being installed. Without it, back up
through MySQL Workbench or phpMyAdmin instead.
"""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.staff_manager.staff_manager.core.exceptions import BackupError
from src.staff_manager.staff_manager.database.backup import backup_database
from src.staff_manager.staff_manager.database.connection import DBConfig


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    config = DBConfig.from_mapping(settings.DB_CONFIG)
    out_dir = REPO_ROOT / getattr(settings, "BACKUP_DIR", "backups")

    try:
        out_file = backup_database(config, out_dir)
    except BackupError as e:
        raise SystemExit(str(e))
    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
