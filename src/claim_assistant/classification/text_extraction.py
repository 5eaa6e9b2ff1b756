"""
Simulated text extraction for uploaded documents.
Produces placeholder text per file in place of PDF parsing and OCR.
"""

from collections.abc import Sequence

from ..core.models import UploadedFile


class TextExtractor:
    """Builds the combined extraction text for a batch of uploads."""

    PDF_TEMPLATE = "[PDF Content from {name}]\nSample extracted text from PDF document...\n\n"
    IMAGE_TEMPLATE = "[OCR Content from {name}]\nSample text extracted from image using OCR...\n\n"

    def extract_file(self, file: UploadedFile) -> str:
        """Return the placeholder text for one file ("" for other types)."""
        if file.is_pdf:
            return self.PDF_TEMPLATE.format(name=file.filename)
        if file.is_image:
            return self.IMAGE_TEMPLATE.format(name=file.filename)
        return ""

    def extract(self, files: Sequence[UploadedFile]) -> str:
        """Concatenate the text of every file in selection order."""
        return "".join(self.extract_file(f) for f in files)
