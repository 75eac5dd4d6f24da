from __future__ import annotations

from flask import Flask

from ..common.http import api_endpoint, fail, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    store = container.store

    @app.route("/api/history", methods=["GET"], endpoint="history_list")
    @api_endpoint("Failed to fetch history")
    def history_list():
        return ok([h.to_dict() for h in store.list_history()])

    @app.route("/api/history/<history_id>/undo", methods=["POST"], endpoint="history_undo")
    @api_endpoint("Failed to undo action")
    def history_undo(history_id: str):
        if not store.undo(history_id):
            return fail("Failed to undo action or action cannot be undone", 400)
        return ok({"undone": True})
