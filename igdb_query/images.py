"""Sized image URLs for stored image identifiers."""

from enum import StrEnum
from typing import Dict, FrozenSet, Optional

from pydantic import BaseModel, ConfigDict

from igdb_query.config import DEFAULT_IMAGE_BASE_URL
from igdb_query.errors import EmptyField, InvalidRatio, UnknownSizePreset


class ImageSize(StrEnum):
    """Image size presets, smallest to largest. Sizes are upper bounds."""

    MICRO = "micro"  # 35x35
    THUMB = "thumb"  # 90x90
    COVER_SMALL = "cover_small"  # 90x128
    LOGO_MED = "logo_med"  # 284x160
    COVER_BIG = "cover_big"  # 227x320
    SCREENSHOT_MED = "screenshot_med"  # 569x320
    SCREENSHOT_BIG = "screenshot_big"  # 889x500
    SCREENSHOT_HUGE = "screenshot_huge"  # 1280x720
    HD = "720p"  # 1280x720
    FULL_HD = "1080p"  # 1920x1080


# Display pixel ratios each preset is served at
IMAGE_RATIOS: Dict[ImageSize, FrozenSet[int]] = {size: frozenset({1, 2}) for size in ImageSize}


def sized_image_url(
    image_id: str,
    size: ImageSize,
    ratio: int = 1,
    base_url: str = DEFAULT_IMAGE_BASE_URL,
) -> str:
    """
    Build the URL of a stored image at a size preset.

    The display pixel ratio multiplies the resolution; ``2`` requests the
    retina variant; every preset is served at 1 and 2.

    Args:
        image_id: Stored image identifier
        size: Size preset
        ratio: Display pixel ratio (default: 1)
        base_url: Image root URL

    Returns:
        str: e.g. ``https://images.igdb.com/igdb/image/upload/t_cover_big_2x/abc123.jpg``

    Raises:
        EmptyField: If image_id is blank
        UnknownSizePreset: If size is not an ImageSize
        InvalidRatio: If the preset is not served at ratio
    """
    if not image_id or not image_id.strip():
        raise EmptyField("Image id is empty.", value=image_id)
    try:
        preset = ImageSize(size)
    except ValueError as e:
        raise UnknownSizePreset(f"Unknown image size preset '{size}'.", value=size) from e

    allowed = IMAGE_RATIOS[preset]
    if isinstance(ratio, bool) or ratio not in allowed:
        raise InvalidRatio(
            f"Ratio {ratio} is not available for '{preset}'; use one of {sorted(allowed)}.",
            value=ratio,
        )

    suffix = "_2x" if ratio == 2 else ""
    if not base_url.endswith("/"):
        base_url += "/"
    return f"{base_url}t_{preset}{suffix}/{image_id}.jpg"


class Image(BaseModel):
    """
    Stored image reference, as embedded in covers, artworks, logos, etc.

    Example:
        cover = client.covers.get(1, set_fields("image_id"))
        cover.sized_url(ImageSize.COVER_BIG, ratio=2)
    """

    model_config = ConfigDict(extra="allow")

    alpha_channel: Optional[bool] = None
    animated: Optional[bool] = None
    height: Optional[int] = None
    image_id: Optional[str] = None
    url: Optional[str] = None
    width: Optional[int] = None

    def sized_url(self, size: ImageSize, ratio: int = 1) -> str:
        """Return sized_image_url() for this image."""
        return sized_image_url(self.image_id or "", size, ratio)
