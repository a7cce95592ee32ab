"""HR operations package.

Organized by feature modules (employees, attendance, salary, settlement, ...)
with a thin Flask controller layer over service/repository layers.
"""
