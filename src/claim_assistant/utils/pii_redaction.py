"""
PII Redaction for claim exports and log lines.
Masks contact details held in a claim record and scrubs free text.
"""

import re
from dataclasses import dataclass
from typing import Any

from ..core.models import ClaimRecord


@dataclass
class RedactionResult:
    """Result of a redaction operation."""

    original_value: str
    redacted_value: str
    pii_type: str
    field_path: str


class PIIRedactor:
    """
    Redacts PII from claim records and exported dictionaries.

    Contact fields are replaced outright; the policy number keeps its last
    four characters; free-text fields are scrubbed with detection patterns.
    """

    REDACTED = "[REDACTED]"

    PATTERNS: dict[str, re.Pattern[str]] = {
        "email": re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b"),
        "phone": re.compile(
            r"(?<!\w)(?:\+?\d{1,3}[-.\s]?)?"
            r"(?:\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}|\d{5}[-.\s]?\d{5})\b"
        ),
        "aadhaar": re.compile(r"\b\d{4}\s\d{4}\s\d{4}\b"),
        "pan": re.compile(r"\b[A-Z]{5}\d{4}[A-Z]\b"),
    }

    # Replaced entirely
    CONTACT_FIELDS: frozenset[str] = frozenset({"contact_email", "contact_phone", "address"})
    # Scrubbed with PATTERNS
    FREE_TEXT_FIELDS: frozenset[str] = frozenset({"user_description", "location"})

    def __init__(self, mask_policy_number: bool = True) -> None:
        self.mask_policy_number = mask_policy_number
        self._redaction_log: list[RedactionResult] = []

    def _log(self, original: str, redacted: str, pii_type: str, field_path: str) -> None:
        self._redaction_log.append(
            RedactionResult(
                original_value=original,
                redacted_value=redacted,
                pii_type=pii_type,
                field_path=field_path,
            )
        )

    def redact_string(self, value: str, field_path: str = "") -> str:
        """
        Redact PII patterns from a string value.

        Args:
            value: The string to redact
            field_path: The path to this field (for the redaction log)

        Returns:
            The redacted string
        """
        if not value:
            return value

        result = value
        for pii_type, pattern in self.PATTERNS.items():
            for match in pattern.findall(result):
                if match:
                    self._log(match, self.REDACTED, pii_type, field_path)
                    result = result.replace(match, self.REDACTED)
        return result

    def mask_policy(self, policy_number: str) -> str:
        """Keep only the last four characters of a policy number."""
        if len(policy_number) <= 4:
            return policy_number
        return "*" * (len(policy_number) - 4) + policy_number[-4:]

    def redact_dict(self, data: dict[str, Any], path_prefix: str = "") -> dict[str, Any]:
        """
        Redact a flat or nested dictionary of claim values.

        Args:
            data: The dictionary to redact
            path_prefix: Current path prefix for the redaction log

        Returns:
            A new, redacted dictionary
        """
        result: dict[str, Any] = {}
        for key, value in data.items():
            field_path = f"{path_prefix}.{key}" if path_prefix else key

            if isinstance(value, dict):
                result[key] = self.redact_dict(value, field_path)
            elif not isinstance(value, str) or not value:
                result[key] = value
            elif key in self.CONTACT_FIELDS:
                self._log(value, self.REDACTED, "contact_field", field_path)
                result[key] = self.REDACTED
            elif key == "policy_number" and self.mask_policy_number:
                masked = self.mask_policy(value)
                if masked != value:
                    self._log(value, masked, "policy_number", field_path)
                result[key] = masked
            else:
                result[key] = self.redact_string(value, field_path)
        return result

    def redact_record(self, record: ClaimRecord) -> ClaimRecord:
        """
        Redact PII from a claim record.

        Args:
            record: The claim record to redact

        Returns:
            A new ClaimRecord with PII redacted
        """
        redacted = self.redact_dict(record.model_dump(mode="json"))
        return ClaimRecord.model_validate(redacted)

    def get_redaction_log(self) -> list[RedactionResult]:
        """Get the log of all redactions performed."""
        return self._redaction_log.copy()

    def clear_redaction_log(self) -> None:
        """Clear the redaction log."""
        self._redaction_log.clear()

    def get_redaction_summary(self) -> dict[str, int]:
        """Get a summary of redactions by type."""
        summary: dict[str, int] = {}
        for result in self._redaction_log:
            summary[result.pii_type] = summary.get(result.pii_type, 0) + 1
        return summary


def redact_pii(data: ClaimRecord | dict[str, Any]) -> Any:
    """
    Convenience function to redact PII from a claim record or dictionary.

    Args:
        data: The data to redact

    Returns:
        The redacted data of the same type
    """
    redactor = PIIRedactor()

    if isinstance(data, ClaimRecord):
        return redactor.redact_record(data)
    elif isinstance(data, dict):
        return redactor.redact_dict(data)
    else:
        raise TypeError(f"Unsupported data type: {type(data)}")
