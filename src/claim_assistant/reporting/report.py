"""
Claim Readiness Reporting Module.
Formats validation reports for display and export.
"""

import json
from typing import Any

from ..core.models import ClaimRecord, ReadinessStatus, ValidationReport
from ..core.vocabulary import FIELD_LABELS
from ..utils.pii_redaction import PIIRedactor


class ValidationReportFormatter:
    """
    Formats validation reports for various output formats.
    """

    STATUS_ICONS = {
        ReadinessStatus.READY: "✅",
        ReadinessStatus.ATTENTION: "⚠️",
        ReadinessStatus.INCOMPLETE: "❌",
    }

    STATUS_MESSAGES = {
        ReadinessStatus.READY: (
            "Great! Your claim is ready for submission. All required information "
            "and documents are provided."
        ),
        ReadinessStatus.ATTENTION: "Almost there. A few required items are still missing.",
        ReadinessStatus.INCOMPLETE: "Your claim is incomplete. Please provide the missing items.",
    }

    def __init__(
        self,
        report: ValidationReport,
        record: ClaimRecord | None = None,
        redact: bool = False,
    ) -> None:
        self.report = report
        self.record = record
        self.redact = redact

    @staticmethod
    def field_label(field_name: str) -> str:
        return FIELD_LABELS.get(field_name, field_name.replace("_", " ").title())

    def _claim_summary(self) -> dict[str, Any]:
        if self.record is None:
            return {}
        summary = self.record.model_dump(mode="json")
        if self.redact:
            summary = PIIRedactor().redact_dict(summary)
        return summary

    def to_text(self, include_details: bool = True) -> str:
        """
        Format the report as plain text.

        Args:
            include_details: Whether to list the individual missing/provided items

        Returns:
            Formatted text report
        """
        report = self.report
        status = report.status
        lines: list[str] = []

        lines.append("=" * 60)
        lines.append("CLAIM COMPLETION STATUS")
        lines.append("=" * 60)
        claim_type = report.claim_type.value if report.claim_type else "Not selected"
        lines.append(f"Claim Type: {claim_type}")
        lines.append(
            f"{self.STATUS_ICONS[status]} Overall Progress: {report.completeness_percent}%"
        )
        lines.append(self.STATUS_MESSAGES[status])
        lines.append("")

        if include_details:
            if report.missing_required_fields:
                lines.append("Missing Required Information:")
                for field_name in report.missing_required_fields:
                    lines.append(f"  - {self.field_label(field_name)}")
                lines.append("")

            if report.missing_required_documents:
                lines.append("Missing Required Documents:")
                for document in report.missing_required_documents:
                    lines.append(f"  - {document.value}")
                lines.append("")

            if report.provided_required_documents:
                lines.append("Documents Provided:")
                for document in report.provided_required_documents:
                    lines.append(f"  - {document.value}")
                lines.append("")

        lines.append("=" * 60)
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert the report to a dictionary.

        Returns:
            Dictionary representation, with the claim summary when a record was given
        """
        data = self.report.model_dump(mode="json")
        data["status"] = self.report.status.value
        data["ready_for_submission"] = self.report.ready_for_submission
        data["missing_required_field_labels"] = [
            self.field_label(f) for f in self.report.missing_required_fields
        ]
        if self.record is not None:
            data["claim_summary"] = self._claim_summary()
            data["redacted"] = self.redact
        return data

    def to_json(self, indent: int = 2) -> str:
        """
        Convert the report to JSON.

        Args:
            indent: JSON indentation level

        Returns:
            JSON string representation
        """
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)
