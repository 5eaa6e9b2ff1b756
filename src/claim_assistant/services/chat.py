"""
Insurance chat assistant.

Replies come from a remote chat completion endpoint when an API key is
configured, otherwise from a keyword-scripted responder.
"""

import logging
import re
from datetime import datetime
from typing import Literal, Protocol

import httpx
from pydantic import BaseModel, Field

from ..config import Settings
from ..core.models import ClaimRecord
from ..errors import ChatServiceError

logger = logging.getLogger(__name__)

GREETING = (
    "Hello! I'm your insurance claim assistant. I can help you with questions about "
    "your claim, explain insurance terms, or provide guidance on the claim process. "
    "How can I assist you today?"
)
FAILURE_REPLY = "Sorry, something went wrong while getting a response."

DOMAIN_PREAMBLE = (
    "You are a helpful assistant specializing in insurance claims and BFSI (Banking, "
    "Financial Services, and Insurance). Only answer questions within these domains. "
    "If asked something outside this scope, respond with: \"I'm designed to assist "
    "only with insurance and BFSI-related queries.\" Now answer: "
)


class ChatMessage(BaseModel):
    """One entry of the chat transcript."""

    role: Literal["user", "assistant"]
    content: str
    timestamp: datetime = Field(default_factory=datetime.now)


class ReplySource(Protocol):
    def reply(self, message: str, record: ClaimRecord) -> str: ...


class ScriptedResponder:
    """Keyword-matched canned replies, checked in table order."""

    def reply(self, message: str, record: ClaimRecord) -> str:
        question = message.lower()

        if "status" in question or "track" in question:
            return (
                "Based on your submitted documents and claim details, your claim is "
                "currently in the initial review stage. Typically, claims are processed "
                "within 7-15 business days. You'll receive updates via email and SMS."
            )

        if "document" in question or "paper" in question:
            claim_type = record.claim_type.value if record.claim_type else "your"
            return (
                f"For {claim_type} claims, you typically need: hospital bills, discharge "
                "summary, ID proof, and policy documents. I can see you've uploaded some "
                "documents already. Make sure all documents are clear and legible."
            )

        if any(word in question for word in ("amount", "money", "payout")):
            return (
                "Claim amounts depend on your policy coverage, deductibles, and the "
                "specific incident. Based on your estimated amount, I'd recommend getting "
                "a detailed estimate using our AI estimator tool. The final amount will be "
                "determined after claim verification."
            )

        if "time" in question or "how long" in question:
            return (
                "Insurance claim processing typically takes 7-21 business days, depending "
                "on the complexity and completeness of documentation. Simple claims with "
                "complete documentation are processed faster."
            )

        if "reject" in question or "denied" in question:
            return (
                "Claims can be rejected for various reasons: incomplete documentation, "
                "policy exclusions, late reporting, or pre-existing conditions. If "
                "rejected, you can appeal with additional documentation or clarification."
            )

        if "hello" in question or re.search(r"\bhi\b", question):
            return (
                "Hello! I'm here to help with your insurance claim. Feel free to ask me "
                "about claim status, required documents, processing times, or any other "
                "insurance-related questions."
            )

        return (
            "Thank you for your question. Based on your claim details, I recommend "
            "ensuring all required documents are submitted and following up with your "
            "insurance provider if needed. Is there anything specific about your claim "
            "process you'd like me to explain?"
        )


class CohereChatClient:
    """Thin client for the Cohere chat endpoint."""

    def __init__(self, settings: Settings, client: httpx.Client | None = None) -> None:
        if not settings.chat_enabled:
            raise ValueError("A chat API key is required for the remote chat client")
        self.settings = settings
        # Injected clients belong to the caller and are left open by close()
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=settings.request_timeout)

    def reply(self, message: str, record: ClaimRecord) -> str:
        """
        Ask the remote model for a reply.

        Raises:
            ChatServiceError: If the request fails or the response has no text
        """
        api_key = self.settings.cohere_api_key.get_secret_value()  # type: ignore[union-attr]
        payload = {
            "message": f"{DOMAIN_PREAMBLE}{message}",
            "chat_history": [],
            "model": self.settings.cohere_model,
            "temperature": self.settings.chat_temperature,
        }
        try:
            response = self._client.post(
                self.settings.cohere_api_url,
                headers={
                    "Authorization": f"Bearer {api_key}",
                    "Content-Type": "application/json",
                },
                json=payload,
            )
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            raise ChatServiceError(
                f"Chat service returned {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except (httpx.HTTPError, ValueError) as e:
            raise ChatServiceError(f"Chat request failed: {e}") from e

        text = data.get("text") if isinstance(data, dict) else None
        if not text:
            raise ChatServiceError("Chat service response contained no text")
        return text

    def close(self) -> None:
        if self._owns_client:
            self._client.close()


class ChatAssistant:
    """
    Keeps the chat transcript for one session.

    Remote failures are logged and answered with an apology so the
    conversation carries on.
    """

    def __init__(self, source: ReplySource | None = None) -> None:
        self.source: ReplySource = source or ScriptedResponder()
        self.messages: list[ChatMessage] = [ChatMessage(role="assistant", content=GREETING)]

    @classmethod
    def from_settings(
        cls, settings: Settings, client: httpx.Client | None = None
    ) -> "ChatAssistant":
        """Use the remote service when a key is configured."""
        if settings.chat_enabled:
            return cls(CohereChatClient(settings, client=client))
        return cls(ScriptedResponder())

    def send(self, text: str, record: ClaimRecord | None = None) -> ChatMessage | None:
        """
        Send a user message and append the assistant's reply.

        Args:
            text: The user's message; blank input is ignored
            record: Current claim record, used to personalise scripted replies

        Returns:
            The assistant message, or None when the input was blank
        """
        if not text.strip():
            return None

        self.messages.append(ChatMessage(role="user", content=text))
        try:
            content = self.source.reply(text, record or ClaimRecord())
        except ChatServiceError:
            logger.exception("Chat reply failed")
            content = FAILURE_REPLY

        reply = ChatMessage(role="assistant", content=content)
        self.messages.append(reply)
        return reply

    def reset(self) -> None:
        """Start a fresh transcript."""
        self.messages = [ChatMessage(role="assistant", content=GREETING)]

    def close(self) -> None:
        """Release the reply source's HTTP client, if it has one."""
        close = getattr(self.source, "close", None)
        if close is not None:
            close()
