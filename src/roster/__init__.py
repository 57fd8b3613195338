"""ROSTER

A small record-management service for employees grouped into departments.
Employees are admitted into departments (created on first use) and queried
by id, department, or salary threshold.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
