"""
Claim Validator.
Scores required-field completion and required-document coverage.
"""

import logging
from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal

from ..core.models import (
    ClaimRecord,
    DocumentType,
    DocumentValidation,
    FieldValidation,
    ValidationReport,
)
from ..core.vocabulary import (
    DOCUMENT_SYNONYMS,
    REQUIRED_FIELDS,
    contains_any,
    required_documents_for,
)

logger = logging.getLogger(__name__)

LabelsInput = str | Sequence[DocumentType | str] | None


def join_labels(labels: LabelsInput) -> str:
    """Normalise labels to the comma-joined form used for matching."""
    if labels is None:
        return ""
    if isinstance(labels, str):
        return labels
    return ", ".join(
        label.value if isinstance(label, DocumentType) else str(label)
        for label in labels
    )


class ClaimValidator:
    """
    Computes submission readiness for a claim.

    Matching of provided documents is a case-insensitive substring test
    against the document name and its synonym tokens.
    """

    def __init__(
        self,
        required_fields: Sequence[str] = REQUIRED_FIELDS,
        synonyms: dict[DocumentType, tuple[str, ...]] | None = None,
    ) -> None:
        self.required_fields = tuple(required_fields)
        self.synonyms = synonyms if synonyms is not None else DOCUMENT_SYNONYMS

    def validate_fields(self, record: ClaimRecord) -> FieldValidation:
        """Partition the required fields into missing and completed."""
        result = FieldValidation()
        for field_name in self.required_fields:
            if record.get_value(field_name).strip():
                result.completed.append(field_name)
            else:
                result.missing.append(field_name)
        return result

    def is_document_provided(self, document: DocumentType, labels_text: str) -> bool:
        """Whether the document name or any synonym occurs in the label text."""
        provided = labels_text.lower()
        tokens = (document.value.lower(), *self.synonyms.get(document, ()))
        return contains_any(provided, tokens)

    def validate_documents(
        self, record: ClaimRecord, labels: LabelsInput
    ) -> DocumentValidation:
        """
        Check the required documents for the claim type.

        Returns empty lists (not "all missing") when the claim type is unset
        or no labels were provided.
        """
        labels_text = join_labels(labels)
        result = DocumentValidation()
        if record.claim_type is None or not labels_text:
            return result

        for document in required_documents_for(record.claim_type):
            if self.is_document_provided(document, labels_text):
                result.provided.append(document)
            else:
                result.missing.append(document)
        return result

    def compute_completeness(
        self, record: ClaimRecord, labels: LabelsInput
    ) -> ValidationReport:
        """Combine field and document validation into a report."""
        fields = self.validate_fields(record)
        documents = self.validate_documents(record, labels)

        total = len(self.required_fields) + len(required_documents_for(record.claim_type))
        completed = len(fields.completed) + len(documents.provided)
        percent = 0
        if total:
            percent = int(
                (Decimal(100 * completed) / Decimal(total)).quantize(
                    Decimal("1"), rounding=ROUND_HALF_UP
                )
            )

        logger.debug(
            "Claim completeness %d%% (%d of %d items)", percent, completed, total
        )
        return ValidationReport(
            claim_type=record.claim_type,
            missing_required_fields=fields.missing,
            completed_required_fields=fields.completed,
            missing_required_documents=documents.missing,
            provided_required_documents=documents.provided,
            completeness_percent=percent,
        )

    def validate(self, record: ClaimRecord, labels: LabelsInput = "") -> ValidationReport:
        """Validate a claim against the provided document labels."""
        return self.compute_completeness(record, labels)
