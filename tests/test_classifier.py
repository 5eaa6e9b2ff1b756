"""
Tests for document classification.
"""

import random

import pytest

from claim_assistant import DocumentClassifier, DocumentType, UploadedFile, classify
from claim_assistant.classification.image_features import ImageFeatureExtractor
from claim_assistant.classification.text_extraction import TextExtractor
from claim_assistant.core.rule_engine import ClassificationContext, ClassificationRule


@pytest.fixture
def classifier() -> DocumentClassifier:
    """Create a classifier with a fixed random source."""
    return DocumentClassifier(feature_extractor=ImageFeatureExtractor(seed=1))


class TestDocumentClassifier:
    """Tests for DocumentClassifier.classify."""

    def test_empty_input(self, classifier: DocumentClassifier) -> None:
        """Test no files and no text yields no labels."""
        assert classifier.classify([], "") == []

    def test_medical_text_without_images(self, classifier: DocumentClassifier, pdf_file) -> None:
        """Test medical wording on non-image uploads is a medical report only."""
        labels = classifier.classify([pdf_file("records.pdf")], "Medical history of patient")

        assert DocumentType.MEDICAL_REPORT in labels
        assert DocumentType.VEHICLE_IMAGES not in labels

    def test_plain_image_is_vehicle_images(self, classifier: DocumentClassifier, make_image) -> None:
        """Test an image with no document wording is treated as a vehicle photo."""
        labels = classifier.classify([make_image("IMG_0001.png")], "")
        assert labels == [DocumentType.VEHICLE_IMAGES]

    def test_vehicle_filename_with_document_text(
        self, classifier: DocumentClassifier, make_image
    ) -> None:
        """Test vehicle-named images still count when the text mentions a hospital."""
        labels = classifier.classify([make_image("car_damage.png")], "hospital")
        assert labels == [DocumentType.VEHICLE_IMAGES, DocumentType.HOSPITAL_BILL]

    def test_document_named_image_not_vehicle(
        self, classifier: DocumentClassifier, make_image
    ) -> None:
        """Test a vehicle token is ignored when the name also says bill."""
        labels = classifier.classify([make_image("car_bill.png")], "hospital bill")
        assert labels == [DocumentType.HOSPITAL_BILL]

    def test_vehicle_named_pdf_without_text(self, classifier: DocumentClassifier, pdf_file) -> None:
        """Test vehicle words in a non-image filename do not imply vehicle photos."""
        labels = classifier.classify([pdf_file("car_damage.pdf")], "")
        assert labels == [DocumentType.MEDICAL_REPORT]

    def test_vehicle_named_pdf_with_medical_text(
        self, classifier: DocumentClassifier, pdf_file
    ) -> None:
        """Test a vehicle-named PDF with medical wording is only a medical report."""
        labels = classifier.classify([pdf_file("accident_photo.pdf")], "medical")
        assert labels == [DocumentType.MEDICAL_REPORT]

    def test_all_matching_rules_fire(self, classifier: DocumentClassifier, pdf_file) -> None:
        """Test several keyword rules fire for one batch, in rule order."""
        text = "Police FIR copy, hospital invoice and doctor treatment notes"
        labels = classifier.classify([pdf_file("bundle.pdf")], text)

        assert labels == [
            DocumentType.HOSPITAL_BILL,
            DocumentType.MEDICAL_REPORT,
            DocumentType.POLICE_REPORT,
        ]

    def test_travel_keywords(self, classifier: DocumentClassifier, pdf_file) -> None:
        """Test travel documents are recognised."""
        text = "Airline ticket, passport scan and lost luggage form"
        labels = classifier.classify([pdf_file("trip.pdf")], text)

        assert labels == [
            DocumentType.FLIGHT_TICKET,
            DocumentType.PASSPORT_COPY,
            DocumentType.LOST_BAGGAGE_REPORT,
        ]

    def test_fallback_without_images(self, classifier: DocumentClassifier, pdf_file) -> None:
        """Test the fallback for unrecognised non-image uploads."""
        assert classifier.classify([pdf_file("scan.pdf")], "") == [DocumentType.MEDICAL_REPORT]

    def test_fallback_with_images(self, classifier: DocumentClassifier, make_image) -> None:
        """Test the fallback includes vehicle images when an image was uploaded."""
        labels = classifier.classify([make_image("scan.png")], "see attached report")
        assert labels == [DocumentType.VEHICLE_IMAGES, DocumentType.MEDICAL_REPORT]

    def test_text_without_files_has_no_fallback(self, classifier: DocumentClassifier) -> None:
        """Test the fallback needs at least one file."""
        assert classifier.classify([], "nothing useful here") == []

    def test_duplicates_removed(self, classifier: DocumentClassifier, pdf_file) -> None:
        """Test two rules emitting the same label produce it once."""
        classifier.engine.add_rule(
            ClassificationRule(
                rule_id="DOC-900",
                name="Receipt Keywords",
                description="Receipts are bills too",
                labels=[DocumentType.HOSPITAL_BILL],
                keywords=["receipt"],
            )
        )
        labels = classifier.classify([pdf_file("a.pdf")], "hospital receipt")
        assert labels == [DocumentType.HOSPITAL_BILL]

    def test_disabled_rule_does_not_fire(self, classifier: DocumentClassifier, pdf_file) -> None:
        """Test disabling a keyword rule removes its label."""
        assert classifier.engine.disable_rule("DOC-002") is True

        labels = classifier.classify([pdf_file("a.pdf")], "invoice")
        assert DocumentType.HOSPITAL_BILL not in labels
        assert labels == [DocumentType.MEDICAL_REPORT]

    def test_failing_rule_is_skipped(self, classifier: DocumentClassifier, pdf_file) -> None:
        """Test a rule that raises does not break classification."""

        def broken(context: ClassificationContext) -> bool:
            raise RuntimeError("boom")

        classifier.engine.add_rule(
            ClassificationRule(
                rule_id="DOC-901",
                name="Broken",
                description="Always raises",
                labels=[DocumentType.DOCTORS_REPORT],
                matcher=broken,
            )
        )
        labels = classifier.classify([pdf_file("a.pdf")], "doctor")
        assert labels == [DocumentType.MEDICAL_REPORT]

    def test_idempotent(self, classifier: DocumentClassifier, make_image, pdf_file) -> None:
        """Test identical inputs give identical outputs."""
        files = [make_image("car.png"), pdf_file("bill.pdf")]
        text = "hospital bill"

        assert classifier.classify(files, text) == classifier.classify(files, text)

    def test_list_rules(self, classifier: DocumentClassifier) -> None:
        """Test the default rule table is registered."""
        rule_ids = [rule["rule_id"] for rule in classifier.list_rules()]
        assert rule_ids == [f"DOC-00{i}" for i in range(1, 8)]


class TestProcess:
    """Tests for DocumentClassifier.process."""

    def test_simulated_extraction_feeds_classification(
        self, classifier: DocumentClassifier, pdf_file
    ) -> None:
        """Test filenames carried in the simulated text drive the labels."""
        result = classifier.process([pdf_file("hospital_bill.pdf")])

        assert "[PDF Content from hospital_bill.pdf]" in result.extracted_text
        assert result.labels == [DocumentType.HOSPITAL_BILL]
        assert result.labels_text == "Hospital Bill"
        assert result.image_features == {}

    def test_explicit_text_overrides_extraction(
        self, classifier: DocumentClassifier, pdf_file
    ) -> None:
        """Test given text is used instead of simulated extraction."""
        result = classifier.process([pdf_file("x.pdf")], extracted_text="flight ticket")

        assert result.extracted_text == "flight ticket"
        assert result.labels == [DocumentType.FLIGHT_TICKET]

    def test_image_features_do_not_change_labels(self, make_image) -> None:
        """Test different random sources leave labels untouched."""
        files = [make_image("front.png")]
        first = DocumentClassifier(feature_extractor=ImageFeatureExtractor(seed=1)).process(files)
        second = DocumentClassifier(feature_extractor=ImageFeatureExtractor(seed=99)).process(files)

        assert first.labels == second.labels
        assert first.image_features != second.image_features


class TestTextExtractor:
    """Tests for the simulated text extractor."""

    def test_extract(self, pdf_file, make_image) -> None:
        """Test per-type placeholder text in selection order."""
        files = [
            pdf_file("a.pdf"),
            make_image("b.png"),
            UploadedFile(filename="c.txt", mime_type="text/plain"),
        ]
        text = TextExtractor().extract(files)

        assert text == (
            "[PDF Content from a.pdf]\nSample extracted text from PDF document...\n\n"
            "[OCR Content from b.png]\nSample text extracted from image using OCR...\n\n"
        )


class TestImageFeatureExtractor:
    """Tests for cosmetic image features."""

    def test_decodes_dimensions(self, make_image) -> None:
        """Test dimensions are read from the image bytes."""
        features = ImageFeatureExtractor(seed=3).extract(make_image("car.png", (200, 100)))

        assert (features.width, features.height) == (200, 100)
        assert features.aspect_ratio == 2.0
        assert features.has_text is False

    def test_portrait_page_has_text(self, make_image) -> None:
        """Test page-shaped images are flagged as containing text."""
        features = ImageFeatureExtractor(seed=3).extract(make_image("scan.png", (100, 200)))
        assert features.has_text is True

    def test_undecodable_image(self) -> None:
        """Test broken image bytes give zero dimensions and no text."""
        file = UploadedFile(filename="bad.png", mime_type="image/png", content=b"not an image")
        features = ImageFeatureExtractor(seed=3).extract(file)

        assert (features.width, features.height) == (0, 0)
        assert features.has_text is False

    def test_declared_dimensions_used(self) -> None:
        """Test known dimensions skip decoding."""
        file = UploadedFile(filename="bill.jpg", mime_type="image/jpeg", width=600, height=800)
        features = ImageFeatureExtractor(seed=3).extract(file)

        assert features.aspect_ratio == 0.75
        assert features.has_text is True

    def test_seeded_scores_are_reproducible(self, make_image) -> None:
        """Test an injected random source fixes the synthetic scores."""
        image = make_image()
        first = ImageFeatureExtractor(rng=random.Random(42)).extract(image)
        second = ImageFeatureExtractor(rng=random.Random(42)).extract(image)

        assert first == second
        assert 0 <= first.complexity <= 1


class TestClassifyFunction:
    """Tests for the module-level classify function."""

    def test_classify(self, pdf_file) -> None:
        """Test the convenience function uses the default rules."""
        assert classify([pdf_file("a.pdf")], "passport") == [DocumentType.PASSPORT_COPY]
