"""
Claim letter drafting.
"""

from ..core.models import ClaimRecord


def _claim_kind(record: ClaimRecord) -> str:
    return record.claim_type.value.lower() if record.claim_type else "insurance"


def generate_claim_description(record: ClaimRecord) -> str:
    """Draft a formal claim letter from the record's details."""
    return (
        "Dear Sir/Madam,\n\n"
        f"I am writing to formally submit a claim for my {_claim_kind(record)} insurance "
        f"policy (Policy Number: {record.policy_number}).\n\n"
        f"On {record.incident_date}, an incident occurred at {record.location}. I am hereby "
        "requesting claim processing for the damages incurred.\n\n"
        f"The estimated claim amount is ₹{record.estimated_expenses}. I have attached all "
        "necessary documentation to support this claim.\n\n"
        f"Please contact me at {record.contact_email} or {record.contact_phone} for any "
        "additional information required.\n\n"
        "Thank you for your prompt attention to this matter.\n\n"
        "Sincerely,\n"
        "[Your Name]\n"
        f"{record.address}"
    )
