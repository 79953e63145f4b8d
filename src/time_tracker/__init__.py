"""Employee Time Tracker package.

Organized by feature modules (auth, employees, time_logs, reports, ...)
with a thin Flask controller layer over service/repository layers.
"""
