"""HR Admin package.

This package is organized by feature modules (employees, departments,
leave requests, ...) on top of a table-driven record gateway, with a thin
Flask controller layer rendering one list page and one form per entity.
"""
