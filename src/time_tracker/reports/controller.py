from __future__ import annotations

from flask import Flask, flash, redirect, render_template, request, url_for

from ..auth.guards import admin_required
from ..container import Container
from ..core.enums import DateFilter
from .model import ReportFilter


def register(app: Flask, container: Container) -> None:
    @app.route("/admin/reports", endpoint="admin_reports")
    @admin_required
    def admin_reports():
        flt = ReportFilter.from_args(request.args)
        employees, reports, employee = [], [], None
        try:
            employees = container.employee_service.list_employees()
            data = container.report_service.build_daily_report(flt)
            reports, employee = data.reports, data.employee
        except Exception:
            app.logger.exception("Error building attendance report")
            flash("Failed to load attendance records", "danger")

        return render_template(
            "admin/reports.html",
            employees=employees,
            reports=reports,
            employee=employee,
            flt=flt,
            periods=list(DateFilter),
            active_page="admin_reports",
        )

    @app.route("/admin/reports.csv", endpoint="admin_reports_csv")
    @admin_required
    def admin_reports_csv():
        flt = ReportFilter.from_args(request.args)
        try:
            filename, text = container.report_service.export_csv(flt)
        except Exception:
            app.logger.exception("Error exporting attendance report")
            flash("Failed to export CSV", "danger")
            return redirect(url_for("admin_reports", **flt.to_args()))

        return app.response_class(
            text.encode("utf-8-sig"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )
