"""
Smart Claim Assistant - Main Orchestrator.
Coordinates document classification, claim validation and the assistant
services behind the claim wizard.
"""

import logging
import random
from collections.abc import Sequence
from typing import Any

import httpx

from .classification.classifier import DocumentClassifier
from .classification.image_features import ImageFeatureExtractor
from .config import Settings, get_settings
from .core.models import (
    ClaimRecord,
    ClassificationResult,
    DocumentType,
    UploadedFile,
    ValidationReport,
)
from .reporting.report import ValidationReportFormatter
from .services.chat import ChatAssistant
from .services.estimator import PayoutEstimate, PayoutEstimator
from .services.mailer import EmailComposer
from .validation.validator import ClaimValidator, LabelsInput

logger = logging.getLogger(__name__)


class ClaimAssistant:
    """
    Main orchestrator for the Smart Claim Assistant.

    Components are created lazily from the injected settings.
    """

    def __init__(self, settings: Settings | None = None, rng: random.Random | None = None) -> None:
        """
        Initialize the assistant.

        Args:
            settings: Configuration; the process-wide settings when None
            rng: Random source for cosmetic image features
        """
        self.settings = settings or get_settings()
        self._rng = rng

        self._classifier: DocumentClassifier | None = None
        self._validator: ClaimValidator | None = None
        self._estimator: PayoutEstimator | None = None
        self._email_composer: EmailComposer | None = None
        self._http_client: httpx.Client | None = None

    @property
    def classifier(self) -> DocumentClassifier:
        """Get or create the document classifier."""
        if self._classifier is None:
            features = ImageFeatureExtractor(rng=self._rng, seed=self.settings.image_feature_seed)
            self._classifier = DocumentClassifier(feature_extractor=features)
        return self._classifier

    @property
    def validator(self) -> ClaimValidator:
        """Get or create the claim validator."""
        if self._validator is None:
            self._validator = ClaimValidator()
        return self._validator

    @property
    def estimator(self) -> PayoutEstimator:
        """Get or create the payout estimator."""
        if self._estimator is None:
            self._estimator = PayoutEstimator()
        return self._estimator

    @property
    def email_composer(self) -> EmailComposer:
        """Get or create the e-mail composer."""
        if self._email_composer is None:
            self._email_composer = EmailComposer()
        return self._email_composer

    @property
    def http_client(self) -> httpx.Client:
        """Get or create the HTTP client shared by all chat sessions."""
        if self._http_client is None:
            self._http_client = httpx.Client(timeout=self.settings.request_timeout)
        return self._http_client

    def new_chat(self) -> ChatAssistant:
        """Start a chat session (one per user session)."""
        if not self.settings.chat_enabled:
            return ChatAssistant.from_settings(self.settings)
        return ChatAssistant.from_settings(self.settings, client=self.http_client)

    def close(self) -> None:
        """Close the shared HTTP client."""
        if self._http_client is not None:
            self._http_client.close()
            self._http_client = None

    def process_documents(self, files: Sequence[UploadedFile]) -> ClassificationResult:
        """Extract text from and classify a batch of uploads."""
        return self.classifier.process(files)

    def classify(
        self, files: Sequence[UploadedFile], extracted_text: str = ""
    ) -> list[DocumentType]:
        return self.classifier.classify(files, extracted_text)

    def validate(
        self, record: ClaimRecord | dict[str, Any], labels: LabelsInput = ""
    ) -> ValidationReport:
        """
        Validate a claim.

        Args:
            record: The claim record (ClaimRecord or dict)
            labels: Joined label text or a sequence of labels

        Returns:
            ValidationReport with completeness and missing items
        """
        if isinstance(record, dict):
            record = ClaimRecord.model_validate(record)
        return self.validator.validate(record, labels)

    def validate_with_formatter(
        self,
        record: ClaimRecord | dict[str, Any],
        labels: LabelsInput = "",
        redact_pii: bool | None = None,
    ) -> ValidationReportFormatter:
        """
        Validate and return a formatter for output.

        Args:
            record: The claim record
            labels: Joined label text or a sequence of labels
            redact_pii: Override the export redaction setting

        Returns:
            ValidationReportFormatter for flexible output formatting
        """
        if isinstance(record, dict):
            record = ClaimRecord.model_validate(record)
        report = self.validator.validate(record, labels)
        redact = redact_pii if redact_pii is not None else self.settings.redact_exports
        return ValidationReportFormatter(report, record=record, redact=redact)

    def estimate(self, record: ClaimRecord, extracted_text: str = "") -> PayoutEstimate | None:
        """Estimate the payout, or None when the claim lacks the inputs."""
        if not self.estimator.can_estimate(record, extracted_text):
            logger.info("Payout estimate skipped: claim type or amount missing")
            return None
        return self.estimator.estimate(record)

    def configure(
        self,
        image_feature_seed: int | None = None,
        redact_exports: bool | None = None,
    ) -> "ClaimAssistant":
        """
        Adjust settings at runtime.

        Args:
            image_feature_seed: Reseed cosmetic image features
            redact_exports: Enable/disable PII redaction of exports

        Returns:
            Self for method chaining
        """
        updates: dict[str, Any] = {}
        if image_feature_seed is not None:
            updates["image_feature_seed"] = image_feature_seed
            self._classifier = None
        if redact_exports is not None:
            updates["redact_exports"] = redact_exports
        if updates:
            self.settings = self.settings.model_copy(update=updates)
        return self


_default_classifier: DocumentClassifier | None = None
_default_validator: ClaimValidator | None = None


def classify(files: Sequence[UploadedFile], extracted_text: str = "") -> list[DocumentType]:
    """
    Convenience function for classifying a batch of uploads.

    Args:
        files: Uploaded files
        extracted_text: Combined extracted text

    Returns:
        Document-type labels
    """
    global _default_classifier
    if _default_classifier is None:
        _default_classifier = DocumentClassifier()
    return _default_classifier.classify(files, extracted_text)


def validate(record: ClaimRecord | dict[str, Any], labels: LabelsInput = "") -> ValidationReport:
    """
    Convenience function for validating a claim.

    Args:
        record: The claim record (ClaimRecord or dict)
        labels: Joined label text or a sequence of labels

    Returns:
        ValidationReport
    """
    global _default_validator
    if _default_validator is None:
        _default_validator = ClaimValidator()
    if isinstance(record, dict):
        record = ClaimRecord.model_validate(record)
    return _default_validator.validate(record, labels)
