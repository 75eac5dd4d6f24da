"""Database backups through `mysqldump`.

Note: needs the MySQL client tools on PATH. Without them, back up through
MySQL Workbench or phpMyAdmin instead.
"""

from __future__ import annotations

import logging
import os
import subprocess
from pathlib import Path
from typing import Optional

from ..common.datetime_utils import now_local
from ..core.exceptions import BackupError
from .connection import DBConfig

logger = logging.getLogger(__name__)


def backup_file_name(config: DBConfig, *, stamp: Optional[str] = None) -> str:
    stamp = stamp or now_local().strftime("%Y%m%d_%H%M%S")
    return f"{config.database}_{stamp}.sql"


def backup_database(config: DBConfig, out_dir: str | Path) -> Path:
    """Dump the whole database into `out_dir`; returns the written file."""
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    out_file = out_dir / backup_file_name(config)

    cmd = [
        "mysqldump",
        f"-h{config.host}",
        f"-P{config.port}",
        f"-u{config.user}",
        config.database,
    ]
    # Password via the environment keeps it off the process list.
    env = {**os.environ, "MYSQL_PWD": config.password}

    try:
        with out_file.open("wb") as f:
            subprocess.run(cmd, stdout=f, stderr=subprocess.PIPE, check=True, env=env)
    except FileNotFoundError:
        out_file.unlink(missing_ok=True)
        raise BackupError("`mysqldump` not found. Install the MySQL client tools.") from None
    except subprocess.CalledProcessError as e:
        out_file.unlink(missing_ok=True)
        detail = (e.stderr or b"").decode("utf-8", "replace").strip()
        raise BackupError(f"mysqldump failed: {detail or e.returncode}") from None

    logger.info("Backup of %s written to %s", config.describe(), out_file)
    return out_file
