"""Employee Attendance Tracker package.

This package is organized by feature modules (roles, departments, employees,
attendance, auth) with a thin Flask controller layer and service/repository layers.
"""
