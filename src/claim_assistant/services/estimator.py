"""
Mock payout estimator.
Applies flat coverage rates and caps per claim type to the user's own
expense estimate.
"""

import logging
import re
from decimal import ROUND_HALF_UP, Decimal

from pydantic import BaseModel

from ..core.models import ClaimRecord, ClaimType

logger = logging.getLogger(__name__)


class PayoutEstimate(BaseModel):
    """Estimated payout with a human-readable justification."""

    claim_type: ClaimType | None = None
    claimed_amount: Decimal
    estimated_amount: Decimal
    details: str

    @property
    def formatted_amount(self) -> str:
        return format_inr(self.estimated_amount)


def format_inr(amount: Decimal) -> str:
    """Format an amount in rupees with thousands separators and no trailing zeros."""
    whole, _, fraction = f"{amount:,.2f}".partition(".")
    fraction = fraction.rstrip("0")
    return f"₹{whole}.{fraction}" if fraction else f"₹{whole}"


def parse_amount(value: str) -> Decimal:
    """Parse the leading integer of a form value; 0 when there is none."""
    match = re.match(r"\s*([+-]?\d+)", value or "")
    if match is None:
        return Decimal("0")
    return Decimal(match.group(1))


class PayoutEstimator:
    """
    Produces a mocked payout estimate for a claim.

    Rates and caps follow typical Indian insurance norms for each claim type.
    """

    # claim type -> (coverage rate, cap); no cap for unset claim types
    RATES: dict[ClaimType | None, tuple[Decimal, Decimal | None]] = {
        ClaimType.HEALTH: (Decimal("0.90"), Decimal("500000")),
        ClaimType.ACCIDENT: (Decimal("0.85"), Decimal("1000000")),
        ClaimType.TRAVEL: (Decimal("0.95"), Decimal("200000")),
        None: (Decimal("0.80"), None),
    }

    DETAIL_TEMPLATES: dict[ClaimType | None, str] = {
        ClaimType.HEALTH: (
            "Based on typical health insurance claims in India:\n\n"
            "• Medical Treatment Coverage: 90% of eligible expenses\n"
            "• Room Rent Limit: As per policy terms\n"
            "• Pre/Post Hospitalization: 30/60 days coverage\n"
            "• Estimated Payout: {amount}\n\n"
            "The estimate considers standard health insurance norms and the documents "
            "provided. Final amount depends on policy terms and medical necessity "
            "verification."
        ),
        ClaimType.ACCIDENT: (
            "Based on typical motor insurance claims in India:\n\n"
            "• Vehicle Damage Assessment: 85% of repair costs\n"
            "• Third Party Liability: As per policy limit\n"
            "• Depreciation Deduction: Age-based depreciation applies\n"
            "• Estimated Payout: {amount}\n\n"
            "The estimate considers standard motor insurance practices and current "
            "vehicle repair costs in India."
        ),
        ClaimType.TRAVEL: (
            "Based on typical travel insurance claims in India:\n\n"
            "• Baggage Loss/Delay: Up to policy limit per item\n"
            "• Medical Emergency: 100% of eligible expenses\n"
            "• Trip Cancellation: Actual loss or policy limit\n"
            "• Estimated Payout: {amount}\n\n"
            "The estimate is based on standard travel insurance coverage and the "
            "incident details provided."
        ),
        None: (
            "General insurance claim estimate:\n\n"
            "• Estimated Payout: {amount}\n"
            "• Coverage typically ranges from 70-90% of claimed amount\n"
            "• Final settlement depends on policy terms and verification"
        ),
    }

    def can_estimate(self, record: ClaimRecord, extracted_text: str = "") -> bool:
        """An estimate needs a claim type and either an amount or document text."""
        return record.claim_type is not None and bool(
            record.estimated_expenses.strip() or extracted_text.strip()
        )

    def estimate(self, record: ClaimRecord) -> PayoutEstimate:
        """
        Estimate the payout for a claim.

        Args:
            record: The claim record; estimated_expenses is parsed leniently

        Returns:
            PayoutEstimate with the claimed and estimated amounts
        """
        claimed = parse_amount(record.estimated_expenses)
        rate, cap = self.RATES[record.claim_type]

        estimated = (claimed * rate).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
        if cap is not None:
            estimated = min(estimated, cap)

        details = self.DETAIL_TEMPLATES[record.claim_type].format(amount=format_inr(estimated))
        logger.info(
            "Estimated payout %s for %s claim of %s",
            estimated,
            record.claim_type.value if record.claim_type else "unspecified",
            claimed,
        )
        return PayoutEstimate(
            claim_type=record.claim_type,
            claimed_amount=claimed,
            estimated_amount=estimated,
            details=details,
        )
