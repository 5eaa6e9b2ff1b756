#!/usr/bin/env python3
"""
Sample Claim Script.
Demonstrates usage of the Smart Claim Assistant.
"""

from io import BytesIO

from PIL import Image

from claim_assistant import ClaimAssistant, ClaimRecord, ClaimType, Settings, UploadedFile


def create_sample_uploads() -> list[UploadedFile]:
    """Create a photo and a police report upload for an accident claim."""
    buffer = BytesIO()
    Image.new("RGB", (640, 480), color=(90, 90, 90)).save(buffer, format="PNG")
    photo = buffer.getvalue()

    return [
        UploadedFile(
            filename="car_rear_damage.png",
            mime_type="image/png",
            size_bytes=len(photo),
            content=photo,
        ),
        UploadedFile(
            filename="police_fir_copy.pdf",
            mime_type="application/pdf",
            size_bytes=48213,
        ),
    ]


def create_sample_claim() -> ClaimRecord:
    """Create a sample accident claim."""
    return ClaimRecord(
        claim_type=ClaimType.ACCIDENT,
        policy_number="MTR-2024-558120",
        incident_date="2024-06-18",
        location="Baner Road, Pune",
        contact_email="rahul.k@example.com",
        contact_phone="98220 11834",
        estimated_expenses="85000",
        address="Flat 4B, Sunshine Residency, Pune",
        user_description="Rear-ended at a signal; bumper and tail lamp damaged.",
    )


def main() -> None:
    """Run sample claim demonstration."""
    print("=" * 70)
    print("SMART CLAIM ASSISTANT - SAMPLE CLAIM")
    print("=" * 70)
    print()

    assistant = ClaimAssistant(Settings(image_feature_seed=42))

    # Classify uploads
    uploads = create_sample_uploads()
    result = assistant.process_documents(uploads)
    print(f"Uploaded: {', '.join(f.filename for f in uploads)}")
    print(f"Detected Documents: {result.labels_text}")
    for name, features in result.image_features.items():
        print(f"  {name}: {features.width}x{features.height}, text={features.has_text}")
    print()

    # Validate the claim
    claim = create_sample_claim()
    formatter = assistant.validate_with_formatter(claim, result.labels)
    print(formatter.to_text())

    # Estimate payout
    estimate = assistant.estimate(claim, result.extracted_text)
    if estimate is not None:
        print()
        print("-" * 70)
        print("PAYOUT ESTIMATE")
        print("-" * 70)
        print(estimate.details)

    # Chat
    print()
    print("-" * 70)
    print("CHAT")
    print("-" * 70)
    chat = assistant.new_chat()
    reply = chat.send("How long will my claim take?", claim)
    if reply is not None:
        print(reply.content)

    # Redacted export
    print()
    print("-" * 70)
    print("REDACTED EXPORT")
    print("-" * 70)
    redacted = assistant.validate_with_formatter(claim, result.labels, redact_pii=True)
    print(redacted.to_json())


if __name__ == "__main__":
    main()
