from __future__ import annotations

from flask import Flask, flash, g, redirect, render_template, request, url_for

from ..auth.guards import admin_required
from ..container import Container
from ..core.exceptions import AuthorizationError, ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/admin/employees", endpoint="admin_employees")
    @admin_required
    def admin_employees():
        employees = []
        try:
            employees = container.employee_service.list_employees()
        except Exception:
            app.logger.exception("Error fetching employees")
            flash("Failed to load employees", "danger")
        return render_template("admin/employees.html", employees=employees, active_page="admin_employees")

    @app.route("/admin/employees/add", methods=["POST"], endpoint="add_employee")
    @admin_required
    def add_employee():
        try:
            employee = container.employee_service.add_employee(
                current_role=g.identity.role,
                name=request.form.get("name", ""),
                email=request.form.get("email", ""),
                department=request.form.get("department", ""),
            )
            flash(f"Added {employee.name}.", "success")
        except (ValidationError, AuthorizationError) as e:
            flash(str(e), "danger")
        except Exception:
            app.logger.exception("Error adding employee")
            flash("Failed to add employee", "danger")

        return redirect(url_for("admin_employees"))

    @app.route("/admin/employees/delete/<int:employee_id>", methods=["POST"], endpoint="delete_employee")
    @admin_required
    def delete_employee(employee_id: int):
        try:
            container.employee_service.delete_employee(current_role=g.identity.role, employee_id=employee_id)
            flash("Employee deleted.", "success")
        except (ValidationError, AuthorizationError) as e:
            flash(str(e), "danger")
        except Exception:
            app.logger.exception("Error deleting employee")
            flash("Failed to delete employee", "danger")

        return redirect(url_for("admin_employees"))
