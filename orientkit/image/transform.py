"""
Apply a resolved orientation to pixel data with Pillow.
"""
from io import BytesIO
from PIL import Image
import logging

from .orientation import OrientationReader, get_orientation_info
from .reader import BytesLike

logger = logging.getLogger(__name__)


class OrientationFixer:
    """Turns stored pixels upright for display, given an orientation code."""

    @staticmethod
    def apply(img: Image.Image, orientation: int) -> Image.Image:
        """
        Rotate clockwise by the code's rotation, then mirror if flipped.

        Unknown or out-of-range codes return the image unchanged.
        """
        info = get_orientation_info(orientation)
        if info is None:
            return img

        if info.rotation:
            img = img.rotate(-info.rotation, expand=True)
        if info.flipped:
            img = img.transpose(Image.Transpose.FLIP_LEFT_RIGHT)
        return img

    @classmethod
    def fix_bytes(cls, data: BytesLike, reader: OrientationReader = None) -> Image.Image:
        """
        Decode a JPEG buffer and return it displayed upright.

        Args:
            data: JPEG bytes
            reader: Orientation reader (defaults to a fresh one)

        Returns:
            Loaded, corrected PIL image
        """
        reader = reader or OrientationReader()
        result = reader.read(data)

        with Image.open(BytesIO(data)) as img:
            img.load()
            fixed = cls.apply(img, result.orientation)
            if fixed is img:
                fixed = img.copy()

        logger.debug(f"Applied orientation {result.orientation}")
        return fixed
