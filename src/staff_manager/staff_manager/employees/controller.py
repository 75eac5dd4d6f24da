from __future__ import annotations

from flask import Flask

from ..common.http import api_endpoint, json_body, not_found, ok
from ..container import Container
from .schema import parse_employee_create, parse_employee_update


def register(app: Flask, container: Container) -> None:
    employees = container.store.employees

    @app.route("/api/employees", methods=["GET"], endpoint="employees_list")
    @api_endpoint("Failed to fetch employees")
    def employees_list():
        return ok([e.to_dict() for e in employees.list_all()])

    @app.route("/api/employees", methods=["POST"], endpoint="employees_create")
    @api_endpoint("Failed to create employee")
    def employees_create():
        employee = employees.create(parse_employee_create(json_body()))
        return ok(employee.to_dict(), 201)

    @app.route("/api/employees/<employee_id>", methods=["GET"], endpoint="employees_get")
    @api_endpoint("Failed to fetch employee")
    def employees_get(employee_id: str):
        employee = employees.get(employee_id)
        if employee is None:
            return not_found("Employee")
        return ok(employee.to_dict())

    @app.route("/api/employees/<employee_id>", methods=["PUT"], endpoint="employees_update")
    @api_endpoint("Failed to update employee")
    def employees_update(employee_id: str):
        employee = employees.update(employee_id, parse_employee_update(json_body()))
        if employee is None:
            return not_found("Employee")
        return ok(employee.to_dict())

    @app.route("/api/employees/<employee_id>", methods=["DELETE"], endpoint="employees_delete")
    @api_endpoint("Failed to delete employee")
    def employees_delete(employee_id: str):
        if not employees.delete(employee_id):
            return not_found("Employee")
        return ok({"message": "Employee deleted successfully"})

    @app.route("/api/employees/<employee_id>/salary", methods=["GET"], endpoint="employees_salary")
    @api_endpoint("Failed to calculate salary")
    def employees_salary(employee_id: str):
        breakdown = container.payroll_service.breakdown_for(employee_id)
        if breakdown is None:
            return not_found("Employee")
        return ok(breakdown.to_dict())
