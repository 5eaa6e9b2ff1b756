"""
Exceptions raised by the Smart Claim Assistant glue services.

Classification and validation never raise; these cover the remote chat
call and e-mail drafting.
"""


class ClaimAssistantError(Exception):
    """Base class for claim assistant errors."""


class ChatServiceError(ClaimAssistantError):
    """The remote chat completion service failed or returned no reply."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class EmailDraftError(ClaimAssistantError):
    """An e-mail draft cannot be handed to a mail client."""
