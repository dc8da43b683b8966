from .itunes import CatalogMatcher, upscale_artwork
from .resolver import MetadataResolver
from .youtube import VideoMatcher, first_video_id

__all__ = [
    "CatalogMatcher",
    "MetadataResolver",
    "VideoMatcher",
    "first_video_id",
    "upscale_artwork",
]
