"""Configuration for the now-playing capture."""

# Stations captured on every run, in output order
STATIONS = [
    {
        "id": "kfm",
        "name": "KFM",
        "url": "https://www.radio-south-africa.co.za/kfm",
        "scraper": "radio_south_africa",
    },
]

# Station-ID announcements and site boilerplate that show up in place of a
# song. Case-insensitive regexes; a station may override with "promo_patterns".
PROMO_PATTERNS = [
    r"listen to .*live",
    r"radio-south-africa",
    r"best South African radio",
]

# External lookups
ITUNES_SEARCH_URL = "https://itunes.apple.com/search"
YOUTUBE_SEARCH_URL = "https://www.youtube.com/results"
YOUTUBE_WATCH_URL = "https://www.youtube.com/watch?v={video_id}"

# Search-style fallback links ({query} is URL-encoded)
YOUTUBE_SEARCH_LINK = "https://www.youtube.com/results?search_query={query}"
SPOTIFY_SEARCH_LINK = "https://open.spotify.com/search/{query}"
APPLE_MUSIC_SEARCH_LINK = "https://music.apple.com/search?term={query}"

# Catalog artwork comes back as 100x100; this is the largest standard variant
CATALOG_ARTWORK_SIZE = "600x600bb"

# Timeouts (seconds)
REQUEST_TIMEOUTS = {
    "page": 20,
    "catalog": 10,
    "video": 10,
}

# Rate limiting (seconds between requests)
RATE_LIMITS = {
    "radio_south_africa": 2.0,
    "default": 2.0,
}

# User agent for requests
USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Safari/537.36"
)

# Output location, relative to the working directory
DATA_DIR_NAME = "docs/data"
