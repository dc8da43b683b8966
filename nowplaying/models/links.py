"""Link kinds used in a station's link bundle."""

from typing import Dict

YOUTUBE_SEARCH = "youtubeSearch"
YOUTUBE_EXACT = "youtubeExact"
SPOTIFY_SEARCH = "spotifySearch"
APPLE_MUSIC_SEARCH = "appleMusicSearch"
APPLE = "apple"

# link kind -> URL, keys present only when a value was produced
LinkBundle = Dict[str, str]
