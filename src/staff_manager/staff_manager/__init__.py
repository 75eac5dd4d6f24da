"""Staff Manager package.

This package is organized by feature modules (employees, attendance, credits,
tasks, payroll, history, ...) with a thin Flask controller layer on top of a
store facade that owns every entity table and the change-history ledger.
"""
