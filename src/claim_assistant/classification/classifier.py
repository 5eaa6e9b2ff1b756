"""
Document Classifier.
Maps uploaded files and their extracted text to document-type labels
using keyword and filename heuristics.
"""

import logging
from collections.abc import Sequence

from ..core.models import ClassificationResult, DocumentType, UploadedFile
from ..core.rule_engine import ClassificationContext, ClassificationRule, RuleEngine
from ..core.vocabulary import (
    DOCUMENT_FILENAME_TOKENS,
    DOCUMENT_TEXT_TOKENS,
    TEXT_KEYWORDS,
    VEHICLE_FILENAME_TOKENS,
    contains_any,
)
from .image_features import ImageFeatureExtractor
from .text_extraction import TextExtractor

logger = logging.getLogger(__name__)


def _looks_like_vehicle_images(context: ClassificationContext) -> bool:
    """Image uploads without document wording, or vehicle-named images."""
    if context.has_image and not contains_any(context.text, DOCUMENT_TEXT_TOKENS):
        return True
    return any(
        contains_any(name, VEHICLE_FILENAME_TOKENS)
        and not contains_any(name, DOCUMENT_FILENAME_TOKENS)
        for name in context.image_filenames
    )


class DocumentClassifier:
    """
    Classifies a batch of uploads into document types.

    All matching rules fire; when none does, a fallback of vehicle images
    (if any image was uploaded) followed by a medical report is returned.
    """

    # Keyword rule IDs follow the image rule, in table order
    TEXT_RULE_IDS = {
        DocumentType.HOSPITAL_BILL: "DOC-002",
        DocumentType.MEDICAL_REPORT: "DOC-003",
        DocumentType.POLICE_REPORT: "DOC-004",
        DocumentType.FLIGHT_TICKET: "DOC-005",
        DocumentType.PASSPORT_COPY: "DOC-006",
        DocumentType.LOST_BAGGAGE_REPORT: "DOC-007",
    }

    def __init__(
        self,
        rule_engine: RuleEngine | None = None,
        text_extractor: TextExtractor | None = None,
        feature_extractor: ImageFeatureExtractor | None = None,
    ) -> None:
        self.engine = rule_engine or RuleEngine()
        self.text_extractor = text_extractor or TextExtractor()
        self.feature_extractor = feature_extractor or ImageFeatureExtractor()
        self._register_rules()

    def _register_rules(self) -> None:
        """Register all classification rules."""
        self.engine.add_rule(
            ClassificationRule(
                rule_id="DOC-001",
                name="Vehicle Image Detection",
                description=(
                    "Images without hospital/medical/bill/report wording, or images "
                    "named after vehicles or damage"
                ),
                labels=[DocumentType.VEHICLE_IMAGES],
                matcher=_looks_like_vehicle_images,
            )
        )

        for label, keywords in TEXT_KEYWORDS.items():
            self.engine.add_rule(
                ClassificationRule(
                    rule_id=self.TEXT_RULE_IDS[label],
                    name=f"{label.value} Keywords",
                    description=f"Text mentions any of: {', '.join(keywords)}",
                    labels=[label],
                    keywords=list(keywords),
                )
            )

    def _fallback(self, context: ClassificationContext) -> list[DocumentType]:
        labels: list[DocumentType] = []
        if context.has_image:
            labels.append(DocumentType.VEHICLE_IMAGES)
        labels.append(DocumentType.MEDICAL_REPORT)
        return labels

    def classify(
        self, files: Sequence[UploadedFile], extracted_text: str = ""
    ) -> list[DocumentType]:
        """
        Classify a batch of uploads.

        Args:
            files: Uploaded files (may be empty)
            extracted_text: Combined text extracted from the files

        Returns:
            Labels in rule-evaluation order, without duplicates
        """
        context = ClassificationContext.build(files, extracted_text)
        labels = self.engine.execute_all(context)

        if not labels and context.files:
            labels = self._fallback(context)
            logger.debug("No classification rule fired; using fallback %s", labels)

        # dict.fromkeys keeps first-seen order
        return list(dict.fromkeys(labels))

    def process(
        self, files: Sequence[UploadedFile], extracted_text: str | None = None
    ) -> ClassificationResult:
        """
        Run extraction, feature derivation and classification for a batch.

        Args:
            files: Uploaded files
            extracted_text: Pre-extracted text; simulated from the files when None

        Returns:
            ClassificationResult with text, labels and cosmetic image features
        """
        text = self.text_extractor.extract(files) if extracted_text is None else extracted_text
        labels = self.classify(files, text)
        features = self.feature_extractor.extract_all(files)

        logger.info(
            "Classified %d file(s) as: %s",
            len(files),
            ", ".join(label.value for label in labels) or "(none)",
        )
        return ClassificationResult(
            extracted_text=text,
            labels=labels,
            image_features=features,
        )

    def list_rules(self) -> list[dict]:
        """List the registered classification rules."""
        return self.engine.list_rules()
