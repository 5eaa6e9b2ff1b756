"""
Cosmetic image features for uploaded images.

Dimensions are decoded with Pillow; the complexity, brightness and contrast
scores are synthetic and drawn from an injectable random source. None of
these values feed the classification rules.
"""

import logging
import random
from collections.abc import Sequence
from io import BytesIO

from PIL import Image, UnidentifiedImageError

from ..core.models import ImageFeatures, UploadedFile
from ..core.vocabulary import DOCUMENT_FILENAME_TOKENS, contains_any

logger = logging.getLogger(__name__)


class ImageFeatureExtractor:
    """Derives display attributes for image uploads."""

    # Scanned pages are taller than wide
    PAGE_ASPECT_MAX = 0.85

    def __init__(self, rng: random.Random | None = None, seed: int | None = None) -> None:
        """
        Initialize the extractor.

        Args:
            rng: Random source for synthetic scores (takes precedence)
            seed: Seed for a private random source when rng is not given
        """
        self.rng = rng if rng is not None else random.Random(seed)

    def _dimensions(self, file: UploadedFile) -> tuple[int, int] | None:
        if file.width is not None and file.height is not None:
            return file.width, file.height
        if not file.content:
            return None
        try:
            with Image.open(BytesIO(file.content)) as image:
                return image.width, image.height
        except (UnidentifiedImageError, OSError, ValueError) as e:
            logger.warning("Could not decode image %s: %s", file.filename, e)
            return None

    def extract(self, file: UploadedFile) -> ImageFeatures:
        """Build features for a single image file."""
        dims = self._dimensions(file)
        complexity = round(self.rng.random(), 3)
        brightness = round(self.rng.random(), 3)
        contrast = round(self.rng.random(), 3)

        if dims is None or dims[1] == 0:
            return ImageFeatures(
                filename=file.filename,
                complexity=complexity,
                brightness=brightness,
                contrast=contrast,
            )

        width, height = dims
        aspect_ratio = round(width / height, 3)
        has_text = (
            contains_any(file.filename.lower(), DOCUMENT_FILENAME_TOKENS)
            or aspect_ratio < self.PAGE_ASPECT_MAX
        )
        return ImageFeatures(
            filename=file.filename,
            width=width,
            height=height,
            aspect_ratio=aspect_ratio,
            has_text=has_text,
            complexity=complexity,
            brightness=brightness,
            contrast=contrast,
        )

    def extract_all(self, files: Sequence[UploadedFile]) -> dict[str, ImageFeatures]:
        """Features for every image in the batch, keyed by filename."""
        return {f.filename: self.extract(f) for f in files if f.is_image}
