"""Upload normalization before the image is sent to the vision model."""

from typing import Optional

import cv2
import numpy as np

from pokido.core.constants import VISION_JPEG_QUALITY
from pokido.utils.config import settings
from pokido.utils.error_handler import ValidationError
from pokido.utils.log import get_logger

logger = get_logger(__name__)


def decode_image(data: bytes) -> np.ndarray:
    """Decode uploaded bytes into a BGR image."""
    buffer = np.frombuffer(data, dtype=np.uint8)
    image = cv2.imdecode(buffer, cv2.IMREAD_COLOR)
    if image is None:
        raise ValidationError(
            "Uploaded file is not a readable image",
            details={"size": len(data)},
            message_key="errorNotAnImage",
        )
    return image


def downscale(image: np.ndarray, max_edge: int) -> np.ndarray:
    """Shrink so the long edge is at most ``max_edge``; smaller images are untouched."""
    height, width = image.shape[:2]
    long_edge = max(height, width)
    if long_edge <= max_edge:
        return image
    scale = max_edge / long_edge
    size = (max(1, int(width * scale)), max(1, int(height * scale)))
    return cv2.resize(image, size, interpolation=cv2.INTER_AREA)


def prepare_for_vision(data: bytes, max_edge: Optional[int] = None) -> bytes:
    """
    Decode, downscale and re-encode an upload as JPEG.

    The vision request always declares ``image/jpeg``, so PNG or WEBP
    uploads are converted here.
    """
    image = decode_image(data)
    resized = downscale(image, max_edge or settings.VISION_MAX_EDGE_PX)

    ok, encoded = cv2.imencode(".jpg", resized, [cv2.IMWRITE_JPEG_QUALITY, VISION_JPEG_QUALITY])
    if not ok:
        raise ValidationError(
            "Could not encode image as JPEG",
            details={"shape": list(resized.shape)},
            message_key="errorNotAnImage",
        )

    logger.debug(
        "Image prepared for vision",
        original_shape=list(image.shape[:2]),
        shape=list(resized.shape[:2]),
        bytes=int(encoded.size),
    )
    return encoded.tobytes()
