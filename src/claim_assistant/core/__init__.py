"""
Core components for the Smart Claim Assistant.
"""

from .models import (
    ClaimRecord,
    ClaimType,
    ClassificationResult,
    DocumentType,
    DocumentValidation,
    FieldValidation,
    ImageFeatures,
    ReadinessStatus,
    UploadedFile,
    ValidationReport,
)
from .rule_engine import (
    ClassificationContext,
    ClassificationRule,
    RuleEngine,
)

__all__ = [
    # Models
    "ClaimRecord",
    "ClaimType",
    "ClassificationResult",
    "DocumentType",
    "DocumentValidation",
    "FieldValidation",
    "ImageFeatures",
    "ReadinessStatus",
    "UploadedFile",
    "ValidationReport",
    # Rule Engine
    "ClassificationContext",
    "ClassificationRule",
    "RuleEngine",
]
