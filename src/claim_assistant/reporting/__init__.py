"""
Reporting modules for the Smart Claim Assistant.
"""

from .report import ValidationReportFormatter

__all__ = [
    "ValidationReportFormatter",
]
