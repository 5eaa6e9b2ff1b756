"""
Core data models for the Smart Claim Assistant.
Uses Pydantic for validation and serialization.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ClaimType(str, Enum):
    """Supported claim types. An unset claim type is represented by None."""

    HEALTH = "Health"
    ACCIDENT = "Accident"
    TRAVEL = "Travel"


CLAIM_TYPE_VALUES = frozenset(c.value for c in ClaimType)


class DocumentType(str, Enum):
    """Closed set of document-type labels."""

    HOSPITAL_BILL = "Hospital Bill"
    DISCHARGE_SUMMARY = "Discharge Summary"
    DOCTORS_REPORT = "Doctor's Report"
    POLICE_REPORT = "Police Report"
    VEHICLE_IMAGES = "Vehicle Images"
    VEHICLE_IMAGE = "Vehicle Image"
    MEDICAL_REPORT = "Medical Report"
    FLIGHT_TICKET = "Flight Ticket"
    PASSPORT_COPY = "Passport Copy"
    LOST_BAGGAGE_REPORT = "Lost Baggage Report"


class ReadinessStatus(str, Enum):
    """Submission readiness derived from the completeness percentage."""

    READY = "ready"
    ATTENTION = "attention"
    INCOMPLETE = "incomplete"


class ClaimRecord(BaseModel):
    """In-progress claim, mutated field by field from the form."""

    model_config = ConfigDict(validate_assignment=True)

    claim_type: ClaimType | None = None
    policy_number: str = ""
    incident_date: str = ""
    location: str = ""
    contact_email: str = ""
    contact_phone: str = ""
    estimated_expenses: str = ""
    address: str = ""
    user_description: str = ""

    @field_validator("claim_type", mode="before")
    @classmethod
    def _known_claim_type(cls, value: Any) -> Any:
        # Blank or unrecognised claim types count as unset
        if isinstance(value, ClaimType):
            return value
        if isinstance(value, str) and value in CLAIM_TYPE_VALUES:
            return value
        return None

    @field_validator(
        "policy_number",
        "incident_date",
        "location",
        "contact_email",
        "contact_phone",
        "estimated_expenses",
        "address",
        "user_description",
        mode="before",
    )
    @classmethod
    def _coerce_text(cls, value: Any) -> Any:
        if value is None:
            return ""
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    def get_value(self, field_name: str) -> str:
        """Return a field as display text ("" when unset)."""
        value = getattr(self, field_name, None)
        if value is None:
            return ""
        if isinstance(value, Enum):
            return str(value.value)
        return str(value)


class UploadedFile(BaseModel):
    """A file selected by the user."""

    filename: str
    mime_type: str = ""
    size_bytes: int = Field(default=0, ge=0)
    width: int | None = None
    height: int | None = None
    content: bytes | None = Field(default=None, repr=False, exclude=True)

    @property
    def is_image(self) -> bool:
        return self.mime_type.lower().startswith("image/")

    @property
    def is_pdf(self) -> bool:
        return self.mime_type.lower() == "application/pdf"


class ImageFeatures(BaseModel):
    """Display-only attributes derived for an uploaded image."""

    filename: str
    width: int = 0
    height: int = 0
    aspect_ratio: float = 0.0
    has_text: bool = False
    complexity: float = Field(default=0.0, ge=0, le=1)
    brightness: float = Field(default=0.0, ge=0, le=1)
    contrast: float = Field(default=0.0, ge=0, le=1)


class ClassificationResult(BaseModel):
    """Output of processing a batch of uploads."""

    extracted_text: str = ""
    labels: list[DocumentType] = Field(default_factory=list)
    image_features: dict[str, ImageFeatures] = Field(default_factory=dict)

    @property
    def labels_text(self) -> str:
        """Labels joined the way the form stores them."""
        return ", ".join(label.value for label in self.labels)


class FieldValidation(BaseModel):
    """Required-field partition."""

    missing: list[str] = Field(default_factory=list)
    completed: list[str] = Field(default_factory=list)


class DocumentValidation(BaseModel):
    """Required-document partition."""

    missing: list[DocumentType] = Field(default_factory=list)
    provided: list[DocumentType] = Field(default_factory=list)


class ValidationReport(BaseModel):
    """Claim-submission readiness."""

    claim_type: ClaimType | None = None
    missing_required_fields: list[str] = Field(default_factory=list)
    completed_required_fields: list[str] = Field(default_factory=list)
    missing_required_documents: list[DocumentType] = Field(default_factory=list)
    provided_required_documents: list[DocumentType] = Field(default_factory=list)
    completeness_percent: int = Field(default=0, ge=0, le=100)

    @property
    def status(self) -> ReadinessStatus:
        if self.completeness_percent >= 80:
            return ReadinessStatus.READY
        if self.completeness_percent >= 60:
            return ReadinessStatus.ATTENTION
        return ReadinessStatus.INCOMPLETE

    @property
    def ready_for_submission(self) -> bool:
        return self.status == ReadinessStatus.READY
