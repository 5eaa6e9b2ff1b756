"""
Tests for the ClaimAssistant orchestrator and settings.
"""

import pytest

from claim_assistant import (
    ClaimAssistant,
    ClaimRecord,
    ClaimType,
    DocumentType,
    Settings,
    ValidationReportFormatter,
)
from claim_assistant.services.chat import CohereChatClient, ScriptedResponder


@pytest.fixture
def assistant(settings: Settings) -> ClaimAssistant:
    """Create an assistant with isolated settings."""
    return ClaimAssistant(settings=settings)


class TestClaimAssistant:
    """Tests for ClaimAssistant."""

    def test_process_then_validate(self, assistant: ClaimAssistant, pdf_file, make_image) -> None:
        """Test the upload-to-score flow for an accident claim."""
        files = [make_image("car_front.png"), pdf_file("police_fir.pdf")]
        result = assistant.process_documents(files)

        assert result.labels == [DocumentType.VEHICLE_IMAGES, DocumentType.POLICE_REPORT]
        assert set(result.image_features) == {"car_front.png"}

        record = ClaimRecord(
            claim_type=ClaimType.ACCIDENT,
            policy_number="ACC-1",
            incident_date="2024-02-02",
            contact_email="d@example.com",
            user_description="Rear-ended at a signal",
        )
        report = assistant.validate(record, result.labels)

        assert report.missing_required_documents == [DocumentType.MEDICAL_REPORT]
        assert report.completeness_percent == 88

    def test_validate_from_dict(self, assistant: ClaimAssistant) -> None:
        """Test dictionaries with a blank claim type are accepted."""
        report = assistant.validate({"claim_type": "", "policy_number": "X"}, "")

        assert report.claim_type is None
        assert report.completeness_percent == 20

    def test_image_seed_from_settings(self, settings: Settings, make_image) -> None:
        """Test two assistants with the same seed agree on image scores."""
        files = [make_image("a.png")]
        first = ClaimAssistant(settings=settings).process_documents(files)
        second = ClaimAssistant(settings=settings).process_documents(files)

        assert first.image_features == second.image_features

    def test_formatter_uses_redaction_setting(
        self, assistant: ClaimAssistant, health_record: ClaimRecord
    ) -> None:
        """Test export redaction follows settings unless overridden."""
        formatter = assistant.validate_with_formatter(health_record, "Hospital Bill")
        assert isinstance(formatter, ValidationReportFormatter)
        assert formatter.redact is False

        assistant.configure(redact_exports=True)
        redacted = assistant.validate_with_formatter(health_record, "Hospital Bill")
        assert redacted.to_dict()["claim_summary"]["contact_email"] == "[REDACTED]"

        plain = assistant.validate_with_formatter(health_record, "Hospital Bill", redact_pii=False)
        assert plain.redact is False

    def test_estimate(self, assistant: ClaimAssistant, health_record: ClaimRecord) -> None:
        """Test estimates are produced only when the claim has the inputs."""
        assert assistant.estimate(ClaimRecord(estimated_expenses="500")) is None

        estimate = assistant.estimate(health_record)
        assert estimate is not None
        assert estimate.formatted_amount == "₹90,000"

    def test_configure_chaining(self, assistant: ClaimAssistant) -> None:
        """Test configure returns self and resets the classifier."""
        classifier = assistant.classifier
        result = assistant.configure(image_feature_seed=11)

        assert result is assistant
        assert assistant.settings.image_feature_seed == 11
        assert assistant.classifier is not classifier

    def test_new_chat_is_scripted_without_key(self, assistant: ClaimAssistant) -> None:
        """Test sessions fall back to scripted replies."""
        chat = assistant.new_chat()

        assert isinstance(chat.source, ScriptedResponder)
        assert assistant._http_client is None

    def test_chat_sessions_share_client(self) -> None:
        """Test remote chat sessions reuse one HTTP client until close()."""
        assistant = ClaimAssistant(settings=Settings(_env_file=None, cohere_api_key="k"))
        first = assistant.new_chat()
        second = assistant.new_chat()

        assert isinstance(first.source, CohereChatClient)
        assert first.source._client is second.source._client is assistant.http_client

        first.close()
        assert not assistant.http_client.is_closed

        client = assistant.http_client
        assistant.close()
        assert client.is_closed


class TestSettings:
    """Tests for environment-driven settings."""

    def test_env_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test values are read from prefixed environment variables."""
        monkeypatch.setenv("CLAIM_ASSISTANT_COHERE_API_KEY", "abc")
        monkeypatch.setenv("CLAIM_ASSISTANT_REDACT_EXPORTS", "true")
        settings = Settings(_env_file=None)

        assert settings.chat_enabled is True
        assert settings.redact_exports is True
        assert "abc" not in repr(settings)

    def test_blank_key_disables_chat(self) -> None:
        """Test a whitespace key does not enable the remote service."""
        assert Settings(_env_file=None, cohere_api_key="  ").chat_enabled is False
