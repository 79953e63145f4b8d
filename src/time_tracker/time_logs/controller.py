from __future__ import annotations

from flask import Flask, flash, g, redirect, render_template, request, url_for

from ..auth.guards import login_required
from ..container import Container
from ..core.enums import LogType
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    def _selected_employee_id():
        """Admins pick an employee; employees always track themselves."""
        identity = g.identity
        if not identity.is_admin:
            return identity.employee.id
        value = (request.values.get("employee_id") or "").strip()
        return int(value) if value.isdecimal() else None

    @app.route("/tracker", endpoint="tracker")
    @login_required
    def tracker():
        identity = g.identity
        employees, activity = [], []
        try:
            employees = container.employee_service.list_employees()
            activity = container.time_tracking_service.today_activity(
                employee_id=None if identity.is_admin else identity.employee.id,
            )
        except Exception:
            app.logger.exception("Error loading tracker data")
            flash("Failed to load today's activity", "danger")

        return render_template(
            "tracker.html",
            employees=employees,
            activity=activity,
            log_types=list(LogType),
            selected_employee_id=_selected_employee_id(),
            last_seq=container.change_feed.last_seq,
            active_page="tracker",
        )

    @app.route("/tracker/log", methods=["POST"], endpoint="tracker_log")
    @login_required
    def tracker_log():
        employee_id = _selected_employee_id()
        try:
            try:
                log_type = LogType(request.form.get("type", ""))
            except ValueError:
                raise ValidationError("Unknown time log type")

            log = container.time_tracking_service.record(employee_id, log_type)
            flash(f"{log.employee_name}: {log.label} at {log.timestamp}", "success")
        except ValidationError as e:
            flash(str(e), "warning")
        except Exception:
            app.logger.exception("Error adding time log")
            flash("Failed to add time log", "danger")

        if g.identity.is_admin and employee_id:
            return redirect(url_for("tracker", employee_id=employee_id))
        return redirect(url_for("tracker"))
