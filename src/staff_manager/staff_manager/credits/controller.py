from __future__ import annotations

from flask import Flask

from ..common.http import api_endpoint, json_body, not_found, ok
from ..container import Container
from .schema import parse_credit_create, parse_credit_update


def register(app: Flask, container: Container) -> None:
    credits = container.store.credits

    @app.route("/api/credits", methods=["GET"], endpoint="credits_list")
    @api_endpoint("Failed to fetch credits")
    def credits_list():
        return ok([c.to_dict() for c in credits.list_all()])

    @app.route("/api/credits", methods=["POST"], endpoint="credits_create")
    @api_endpoint("Failed to create credit record")
    def credits_create():
        credit = credits.create(parse_credit_create(json_body()))
        return ok(credit.to_dict(), 201)

    @app.route("/api/credits/employee/<employee_id>", methods=["GET"], endpoint="credits_by_employee")
    @api_endpoint("Failed to fetch credits")
    def credits_by_employee(employee_id: str):
        return ok([c.to_dict() for c in credits.list_by_employee(employee_id)])

    @app.route("/api/credits/<credit_id>", methods=["GET"], endpoint="credits_get")
    @api_endpoint("Failed to fetch credit")
    def credits_get(credit_id: str):
        credit = credits.get(credit_id)
        if credit is None:
            return not_found("Credit")
        return ok(credit.to_dict())

    @app.route("/api/credits/<credit_id>", methods=["PUT"], endpoint="credits_update")
    @api_endpoint("Failed to update credit")
    def credits_update(credit_id: str):
        credit = credits.update(credit_id, parse_credit_update(json_body()))
        if credit is None:
            return not_found("Credit")
        return ok(credit.to_dict())

    @app.route("/api/credits/<credit_id>", methods=["DELETE"], endpoint="credits_delete")
    @api_endpoint("Failed to delete credit")
    def credits_delete(credit_id: str):
        if not credits.delete(credit_id):
            return not_found("Credit")
        return ok({"message": "Credit deleted successfully"})
