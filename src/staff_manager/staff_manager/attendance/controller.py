from __future__ import annotations

from flask import Flask, request

from ..common.http import api_endpoint, json_body, not_found, ok
from ..common.validators import require_iso_date
from ..container import Container
from .schema import parse_attendance_create, parse_attendance_update


def register(app: Flask, container: Container) -> None:
    store = container.store
    attendance = store.attendance

    @app.route("/api/attendance", methods=["GET"], endpoint="attendance_list")
    @api_endpoint("Failed to fetch attendance")
    def attendance_list():
        day = request.args.get("date")
        if day:
            rows = attendance.list_by_date(require_iso_date(day, "Date"))
        else:
            rows = attendance.list_all()
        return ok([a.to_dict() for a in rows])

    @app.route("/api/attendance", methods=["POST"], endpoint="attendance_create")
    @api_endpoint("Failed to create attendance record")
    def attendance_create():
        record = attendance.create(parse_attendance_create(json_body()))
        return ok(record.to_dict(), 201)

    @app.route("/api/attendance/employee/<employee_id>", methods=["GET"], endpoint="attendance_by_employee")
    @api_endpoint("Failed to fetch attendance")
    def attendance_by_employee(employee_id: str):
        return ok([a.to_dict() for a in attendance.list_by_employee(employee_id)])

    @app.route("/api/attendance/reset", methods=["DELETE"], endpoint="attendance_reset")
    @api_endpoint("Failed to reset attendance")
    def attendance_reset():
        day = request.args.get("date")
        day = require_iso_date(day, "Date") if day else None
        target = day or attendance.auto_reset_status().date
        deleted = store.reset_daily_attendance(target)
        return ok({
            "deletedCount": deleted,
            "date": target,
            "message": f"Reset attendance for {deleted} records",
        })

    @app.route("/api/attendance/auto-reset", methods=["GET"], endpoint="attendance_auto_reset_status")
    @api_endpoint("Failed to check attendance status")
    def attendance_auto_reset_status():
        return ok(store.auto_reset_status().to_dict())

    @app.route("/api/attendance/auto-reset", methods=["POST"], endpoint="attendance_auto_reset")
    @api_endpoint("Failed to auto-reset attendance")
    def attendance_auto_reset():
        status = store.auto_reset_status()
        deleted = store.reset_daily_attendance(status.date)
        return ok({
            "deletedCount": deleted,
            "date": status.date,
            "hadAttendanceToday": status.has_attendance_today,
            "message": f"Auto-reset attendance for {deleted} records on {status.date}",
        })

    @app.route("/api/attendance/<attendance_id>", methods=["GET"], endpoint="attendance_get")
    @api_endpoint("Failed to fetch attendance")
    def attendance_get(attendance_id: str):
        record = attendance.get(attendance_id)
        if record is None:
            return not_found("Attendance record")
        return ok(record.to_dict())

    @app.route("/api/attendance/<attendance_id>", methods=["PUT"], endpoint="attendance_update")
    @api_endpoint("Failed to update attendance record")
    def attendance_update(attendance_id: str):
        record = attendance.update(attendance_id, parse_attendance_update(json_body()))
        if record is None:
            return not_found("Attendance record")
        return ok(record.to_dict())

    @app.route("/api/attendance/<attendance_id>", methods=["DELETE"], endpoint="attendance_delete")
    @api_endpoint("Failed to delete attendance record")
    def attendance_delete(attendance_id: str):
        if not attendance.delete(attendance_id):
            return not_found("Attendance record")
        return ok({"message": "Attendance record deleted successfully"})
