from __future__ import annotations

from flask import Flask

from ..common.http import api_endpoint, json_body, not_found, ok
from ..container import Container
from .schema import parse_task_create, parse_task_update


def register(app: Flask, container: Container) -> None:
    tasks = container.store.tasks

    @app.route("/api/tasks", methods=["GET"], endpoint="tasks_list")
    @api_endpoint("Failed to fetch tasks")
    def tasks_list():
        return ok([t.to_dict() for t in tasks.list_all()])

    @app.route("/api/tasks", methods=["POST"], endpoint="tasks_create")
    @api_endpoint("Failed to create task")
    def tasks_create():
        task = tasks.create(parse_task_create(json_body()))
        return ok(task.to_dict(), 201)

    @app.route("/api/tasks/employee/<employee_id>", methods=["GET"], endpoint="tasks_by_employee")
    @api_endpoint("Failed to fetch tasks")
    def tasks_by_employee(employee_id: str):
        return ok([t.to_dict() for t in tasks.list_by_employee(employee_id)])

    @app.route("/api/tasks/<task_id>", methods=["GET"], endpoint="tasks_get")
    @api_endpoint("Failed to fetch task")
    def tasks_get(task_id: str):
        task = tasks.get(task_id)
        if task is None:
            return not_found("Task")
        return ok(task.to_dict())

    @app.route("/api/tasks/<task_id>", methods=["PUT"], endpoint="tasks_update")
    @api_endpoint("Failed to update task")
    def tasks_update(task_id: str):
        task = tasks.update(task_id, parse_task_update(json_body()))
        if task is None:
            return not_found("Task")
        return ok(task.to_dict())

    @app.route("/api/tasks/<task_id>", methods=["DELETE"], endpoint="tasks_delete")
    @api_endpoint("Failed to delete task")
    def tasks_delete(task_id: str):
        if not tasks.delete(task_id):
            return not_found("Task")
        return ok({"message": "Task deleted successfully"})
