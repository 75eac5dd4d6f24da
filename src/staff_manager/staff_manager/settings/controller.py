from __future__ import annotations

from flask import Flask

from ..common.http import api_endpoint, json_body, ok
from ..container import Container
from .schema import parse_settings_update


def register(app: Flask, container: Container) -> None:
    settings = container.store.settings

    @app.route("/api/settings", methods=["GET"], endpoint="settings_get")
    @api_endpoint("Failed to fetch settings")
    def settings_get():
        return ok(settings.get().to_dict())

    @app.route("/api/settings", methods=["PUT"], endpoint="settings_update")
    @api_endpoint("Failed to update settings")
    def settings_update():
        return ok(settings.update(parse_settings_update(json_body())).to_dict())
