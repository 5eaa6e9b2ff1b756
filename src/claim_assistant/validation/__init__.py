"""
Claim validation for the Smart Claim Assistant.
"""

from .validator import ClaimValidator, join_labels

__all__ = [
    "ClaimValidator",
    "join_labels",
]
