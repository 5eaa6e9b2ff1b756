"""
Shared vocabulary for classification and validation.
Keyword tables, required fields and per-claim-type document requirements.
"""

from .models import ClaimType, DocumentType

# Required fields, in display order
REQUIRED_FIELDS: tuple[str, ...] = (
    "claim_type",
    "policy_number",
    "incident_date",
    "contact_email",
    "user_description",
)

# Tracked but never counted toward completeness
OPTIONAL_FIELDS: tuple[str, ...] = (
    "location",
    "contact_phone",
    "estimated_expenses",
    "address",
)

FIELD_LABELS: dict[str, str] = {
    "claim_type": "Claim Type",
    "policy_number": "Policy Number",
    "incident_date": "Incident Date",
    "contact_email": "Email",
    "user_description": "Description",
    "location": "Location",
    "contact_phone": "Phone",
    "estimated_expenses": "Estimated Amount",
    "address": "Address",
}

REQUIRED_DOCUMENTS: dict[ClaimType, tuple[DocumentType, ...]] = {
    ClaimType.HEALTH: (
        DocumentType.HOSPITAL_BILL,
        DocumentType.DISCHARGE_SUMMARY,
        DocumentType.MEDICAL_REPORT,
    ),
    ClaimType.ACCIDENT: (
        DocumentType.POLICE_REPORT,
        DocumentType.VEHICLE_IMAGES,
        DocumentType.MEDICAL_REPORT,
    ),
    ClaimType.TRAVEL: (
        DocumentType.FLIGHT_TICKET,
        DocumentType.PASSPORT_COPY,
        DocumentType.LOST_BAGGAGE_REPORT,
    ),
}

# Synonym tokens accepted as evidence that a required document was provided
DOCUMENT_SYNONYMS: dict[DocumentType, tuple[str, ...]] = {
    DocumentType.POLICE_REPORT: ("police", "report", "fir", "accident report"),
    DocumentType.VEHICLE_IMAGES: ("vehicle", "image", "car", "damage", "photo"),
    DocumentType.MEDICAL_REPORT: ("medical", "doctor", "health", "treatment"),
    DocumentType.HOSPITAL_BILL: ("hospital", "bill", "invoice", "receipt"),
    DocumentType.DISCHARGE_SUMMARY: ("discharge", "summary", "hospital"),
    DocumentType.FLIGHT_TICKET: ("flight", "ticket", "boarding", "travel"),
    DocumentType.PASSPORT_COPY: ("passport", "id", "identity"),
    DocumentType.LOST_BAGGAGE_REPORT: ("baggage", "luggage", "lost", "report"),
}

# Classification keyword tables
DOCUMENT_TEXT_TOKENS: tuple[str, ...] = ("hospital", "medical", "bill", "report")
VEHICLE_FILENAME_TOKENS: tuple[str, ...] = (
    "car",
    "vehicle",
    "damage",
    "accident",
    "photo",
    "img",
)
DOCUMENT_FILENAME_TOKENS: tuple[str, ...] = ("report", "bill", "medical")

TEXT_KEYWORDS: dict[DocumentType, tuple[str, ...]] = {
    DocumentType.HOSPITAL_BILL: ("hospital", "bill", "invoice"),
    DocumentType.MEDICAL_REPORT: ("medical", "doctor", "treatment"),
    DocumentType.POLICE_REPORT: ("police", "fir", "accident report"),
    DocumentType.FLIGHT_TICKET: ("flight", "ticket", "airline"),
    DocumentType.PASSPORT_COPY: ("passport", "identity"),
    DocumentType.LOST_BAGGAGE_REPORT: ("baggage", "luggage", "lost"),
}


def required_documents_for(claim_type: ClaimType | None) -> tuple[DocumentType, ...]:
    """Documents required for a claim type (none when unset)."""
    if claim_type is None:
        return ()
    return REQUIRED_DOCUMENTS.get(claim_type, ())


def contains_any(text: str, tokens: tuple[str, ...]) -> bool:
    """Case-sensitive substring test; callers lower-case first."""
    return any(token in text for token in tokens)
