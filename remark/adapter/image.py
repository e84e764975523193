"""Pillow-backed image normalization."""

import asyncio
from io import BytesIO

import logfire
from PIL import Image

from remark.domain.error import AttachmentProcessingError
from remark.domain.service.submission_service import ImageNormalizer

SUPPORTED_FORMATS = {"JPEG", "PNG", "GIF"}


class PillowImageNormalizer(ImageNormalizer):
    """Re-encodes images with Pillow, shrinking them to fit a bounding box."""

    async def fit_within(
        self, content: bytes, content_type: str, max_width: int, max_height: int
    ) -> bytes:
        """Shrink an image to fit inside max_width x max_height.

        Decoding and encoding run in a worker thread; the call returns only
        once the re-encoded bytes are complete.
        """
        with logfire.span(
            "image_normalizer.fit_within",
            content_type=content_type,
            size=len(content),
            max_width=max_width,
            max_height=max_height,
        ):
            return await asyncio.to_thread(
                self._fit_within, content, max_width, max_height
            )

    @staticmethod
    def _fit_within(content: bytes, max_width: int, max_height: int) -> bytes:
        try:
            with Image.open(BytesIO(content)) as image:
                image_format = image.format
                if image_format not in SUPPORTED_FORMATS:
                    raise AttachmentProcessingError(
                        f"Unsupported image format: {image_format}"
                    )
                original_size = image.size
                # thumbnail() keeps aspect ratio and never enlarges
                image.thumbnail((max_width, max_height))
                new_size = image.size
                output = BytesIO()
                image.save(output, format=image_format)
        except (OSError, ValueError, Image.DecompressionBombError) as e:
            raise AttachmentProcessingError(f"Image resizing failed: {e}") from e

        logfire.debug(
            "Image normalized",
            original_size=original_size,
            new_size=new_size,
            format=image_format,
        )
        return output.getvalue()
