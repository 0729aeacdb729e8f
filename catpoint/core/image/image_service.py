"""
Image classification contract and an offline fake.

The security service only needs a yes/no answer to "does this image contain a
cat at the given confidence?". Real classifiers live outside this package; the
:class:`FakeImageService` lets the system run without one.
"""

from __future__ import annotations

import logging
import random
from typing import Any, Optional, Protocol

logger = logging.getLogger(__name__)


class ImageService(Protocol):
    """
    Protocol interface for cat detection.

    Methods
    -------
    image_contains_cat(image, confidence_threshold)
        Return True if a cat is present with at least ``confidence_threshold``
        percent confidence.
    """

    def image_contains_cat(self, image: Any, confidence_threshold: float) -> bool:
        ...


class FakeImageService:
    """
    Image service that answers at random.

    Parameters
    ----------
    seed
        Optional seed for reproducible answers.
    """

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)

    def image_contains_cat(self, image: Any, confidence_threshold: float) -> bool:
        result = self._rng.random() < 0.5
        logger.debug("Fake classification (threshold=%.1f): cat=%s", confidence_threshold, result)
        return result
