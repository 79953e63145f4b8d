"""Example: use the service layer directly (no Flask).

Controllers are thin; the reporting logic lives in services.
"""

import importlib

from time_tracker.config import get_settings_module
from time_tracker.container import build_container
from time_tracker.reports.csv_export import write_reports_csv
from time_tracker.reports.model import ReportFilter


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        db_config=settings.DB_CONFIG,
        admin_email=settings.ADMIN_EMAIL,
        admin_password=settings.ADMIN_PASSWORD,
    )
    data = container.report_service.build_daily_report(ReportFilter())
    print(write_reports_csv(data.reports))


if __name__ == "__main__":
    main()
