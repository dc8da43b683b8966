from .normalizer import normalize
from .title_artist import ParsedTrack, parse

__all__ = ["ParsedTrack", "normalize", "parse"]
