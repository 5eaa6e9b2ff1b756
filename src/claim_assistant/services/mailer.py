"""
Claim e-mail composition.
Builds the subject, body template, mailto link and plain-text export for a
claim letter.
"""

import logging
import re
from urllib.parse import quote

from pydantic import BaseModel

from ..core.models import ClaimRecord
from ..errors import EmailDraftError

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class EmailDraft(BaseModel):
    """An editable claim e-mail."""

    to: str = ""
    subject: str = ""
    message: str = ""


def _or_na(value: str) -> str:
    return value or "N/A"


class EmailComposer:
    """Prepares claim e-mails for the user's own mail client."""

    def default_subject(self, record: ClaimRecord) -> str:
        return f"Insurance Claim - Policy #{_or_na(record.policy_number)}"

    def new_draft(self, record: ClaimRecord, description: str = "") -> EmailDraft:
        """Start a draft with the default subject and the given body."""
        return EmailDraft(subject=self.default_subject(record), message=description)

    def generate_template(self, record: ClaimRecord, description: str = "") -> str:
        """Full claim letter body with policy and contact details."""
        claim_type = record.claim_type.value if record.claim_type else ""
        return (
            "Dear Insurance Team,\n\n"
            f"I am submitting a formal claim for my {claim_type.lower()} insurance policy.\n\n"
            "Policy Details:\n"
            f"- Policy Number: {_or_na(record.policy_number)}\n"
            f"- Claim Type: {_or_na(claim_type)}\n"
            f"- Incident Date: {_or_na(record.incident_date)}\n"
            f"- Location: {_or_na(record.location)}\n\n"
            f"{description}\n\n"
            "Contact Information:\n"
            f"- Email: {_or_na(record.contact_email)}\n"
            f"- Phone: {_or_na(record.contact_phone)}\n"
            f"- Address: {_or_na(record.address)}\n\n"
            "I have attached all necessary documentation to support this claim. Please "
            "contact me if you need any additional information.\n\n"
            "Thank you for your prompt attention to this matter.\n\n"
            "Best regards,\n"
            "[Your Name]"
        )

    @staticmethod
    def is_valid_email(address: str) -> bool:
        return bool(EMAIL_PATTERN.match(address or ""))

    def build_mailto_link(self, draft: EmailDraft) -> str:
        """
        Build a mailto: link for the draft.

        Raises:
            EmailDraftError: If the recipient is invalid or the body is empty
        """
        if not self.is_valid_email(draft.to):
            raise EmailDraftError("Please enter a valid email address")
        if not draft.message.strip():
            raise EmailDraftError("Please provide a claim description")

        link = (
            f"mailto:{draft.to}"
            f"?subject={quote(draft.subject, safe='')}"
            f"&body={quote(draft.message, safe='')}"
        )
        logger.debug("Built mailto link for %s", draft.to)
        return link

    @staticmethod
    def as_text(draft: EmailDraft) -> str:
        """Plain-text rendering for copying or downloading."""
        return f"To: {draft.to}\nSubject: {draft.subject}\n\n{draft.message}"

    @staticmethod
    def download_filename(record: ClaimRecord) -> str:
        return f"claim-letter-{record.policy_number or 'draft'}.txt"
