"""HR Portal package.

This package is organized by feature modules (employees, leave, attendance,
salary, ...) with a thin Flask controller layer on top of service and
repository layers. Calculators (leave balance, attendance aggregation,
salary delta) are pure functions over already-fetched rows.
"""
