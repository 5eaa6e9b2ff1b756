"""
Smart Claim Assistant.

Classifies uploaded claim documents, scores claim completeness, and drafts
estimates, chat replies and claim e-mails for the claim wizard.
"""

from .assistant import ClaimAssistant, classify, validate
from .classification import DocumentClassifier, ImageFeatureExtractor, TextExtractor
from .config import Settings, get_settings
from .core.models import (
    ClaimRecord,
    ClaimType,
    ClassificationResult,
    DocumentType,
    ImageFeatures,
    ReadinessStatus,
    UploadedFile,
    ValidationReport,
)
from .errors import ChatServiceError, ClaimAssistantError, EmailDraftError
from .reporting.report import ValidationReportFormatter
from .utils.pii_redaction import PIIRedactor, redact_pii
from .validation import ClaimValidator

__version__ = "0.1.0"

__all__ = [
    # Main Assistant
    "ClaimAssistant",
    "classify",
    "validate",
    # Components
    "ClaimValidator",
    "DocumentClassifier",
    "ImageFeatureExtractor",
    "TextExtractor",
    # Models
    "ClaimRecord",
    "ClaimType",
    "ClassificationResult",
    "DocumentType",
    "ImageFeatures",
    "ReadinessStatus",
    "UploadedFile",
    "ValidationReport",
    # Configuration
    "Settings",
    "get_settings",
    # Errors
    "ChatServiceError",
    "ClaimAssistantError",
    "EmailDraftError",
    # Reporting
    "ValidationReportFormatter",
    # Utils
    "PIIRedactor",
    "redact_pii",
]
