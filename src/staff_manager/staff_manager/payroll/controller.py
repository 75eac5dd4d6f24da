from __future__ import annotations

import logging

from flask import Flask, current_app

from ..common.http import api_endpoint, fail, ok
from ..container import Container
from ..core.exceptions import BackupError
from ..database.backup import backup_database

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    store = container.store

    @app.route("/api/payroll", methods=["GET"], endpoint="payroll_report")
    @api_endpoint("Failed to build payroll report")
    def payroll_report():
        return ok([b.to_dict() for b in container.payroll_service.payroll_report()])

    @app.route("/api/stats", methods=["GET"], endpoint="stats")
    @api_endpoint("Failed to fetch statistics")
    def stats():
        return ok(store.get_stats().to_dict())

    @app.route("/api/database/info", methods=["GET"], endpoint="database_info")
    @api_endpoint("Failed to get database info")
    def database_info():
        target = container.conn.config.describe() if container.conn else None
        return ok({
            "backend": container.backend,
            "target": target,
            "stats": {**store.table_counts(), **store.get_stats().to_dict()},
        })

    @app.route("/api/database/backup", methods=["POST"], endpoint="database_backup")
    @api_endpoint("Internal server error")
    def database_backup():
        if container.conn is None:
            return fail("Backup is only available with the mysql backend", 400)
        try:
            path = backup_database(container.conn.config, current_app.config["BACKUP_DIR"])
        except BackupError as e:
            logger.error("Backup failed: %s", e)
            return fail("Backup failed", 500)
        return ok({"backupPath": str(path)})
