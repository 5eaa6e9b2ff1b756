"""
Document classification for the Smart Claim Assistant.
"""

from .classifier import DocumentClassifier
from .image_features import ImageFeatureExtractor
from .text_extraction import TextExtractor

__all__ = [
    "DocumentClassifier",
    "ImageFeatureExtractor",
    "TextExtractor",
]
