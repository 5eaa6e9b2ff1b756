"""
Utility modules for the Smart Claim Assistant.
"""

from .logging import setup_logging
from .pii_redaction import PIIRedactor, RedactionResult, redact_pii

__all__ = [
    "PIIRedactor",
    "RedactionResult",
    "redact_pii",
    "setup_logging",
]
