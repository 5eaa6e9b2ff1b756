"""
Shared fixtures for the Smart Claim Assistant tests.
"""

from collections.abc import Callable
from io import BytesIO

import pytest
from PIL import Image

from claim_assistant import ClaimRecord, ClaimType, Settings, UploadedFile


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the environment and any .env file."""
    return Settings(_env_file=None, cohere_api_key=None, image_feature_seed=7)


@pytest.fixture
def health_record() -> ClaimRecord:
    """A health claim with every required field filled in."""
    return ClaimRecord(
        claim_type=ClaimType.HEALTH,
        policy_number="POL123456",
        incident_date="2024-03-12",
        location="Pune",
        contact_email="asha.rao@example.com",
        contact_phone="98765 43210",
        estimated_expenses="100000",
        address="12 MG Road, Pune",
        user_description="Admitted for three days after a fall.",
    )


@pytest.fixture
def make_image() -> Callable[..., UploadedFile]:
    """Factory for in-memory PNG uploads."""

    def _make(filename: str = "photo.png", size: tuple[int, int] = (200, 100)) -> UploadedFile:
        buffer = BytesIO()
        Image.new("RGB", size, color=(120, 130, 140)).save(buffer, format="PNG")
        content = buffer.getvalue()
        return UploadedFile(
            filename=filename,
            mime_type="image/png",
            size_bytes=len(content),
            content=content,
        )

    return _make


@pytest.fixture
def pdf_file() -> Callable[[str], UploadedFile]:
    """Factory for PDF uploads (metadata only)."""

    def _make(filename: str) -> UploadedFile:
        return UploadedFile(filename=filename, mime_type="application/pdf", size_bytes=2048)

    return _make
