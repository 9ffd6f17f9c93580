"""
Images component - background images and image replacement.
"""

from .component import background_image, image_replacement, image_url
from .models import (
    DEFAULT_IMAGE_TYPE,
    DENSITY_2X,
    DENSITY_3X,
    DENSITY_HIGH,
    NONE_URL,
    VECTOR_TYPES,
)

__all__ = [
    "background_image",
    "image_replacement",
    "image_url",
    # Constants
    "DEFAULT_IMAGE_TYPE",
    "DENSITY_2X",
    "DENSITY_3X",
    "DENSITY_HIGH",
    "NONE_URL",
    "VECTOR_TYPES",
]
