"""HRMS payroll package.

Feature modules (employees, attendance, payroll, settings) each carry a pure
model, a repository protocol with its MySQL implementation, a service and a
thin Flask controller. The attendance-to-payroll rules are plain functions
over explicit inputs so any month can be recomputed from raw attendance.
"""
