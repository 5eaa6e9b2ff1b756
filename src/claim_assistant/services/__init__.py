"""
Assistant services around the classification and validation core.
"""

from .chat import ChatAssistant, ChatMessage, CohereChatClient, ScriptedResponder
from .estimator import PayoutEstimate, PayoutEstimator
from .letters import generate_claim_description
from .mailer import EmailComposer, EmailDraft

__all__ = [
    "ChatAssistant",
    "ChatMessage",
    "CohereChatClient",
    "EmailComposer",
    "EmailDraft",
    "PayoutEstimate",
    "PayoutEstimator",
    "ScriptedResponder",
    "generate_claim_description",
]
