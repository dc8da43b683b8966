"""
Tests for reading station pages
"""

import logging
from unittest.mock import patch

import requests

from nowplaying.models import PageReadFailure, ScrapeResult
from nowplaying.scrapers import SCRAPERS, RadioSouthAfricaScraper

KFM_PAGE = """
<html><body>
  <img id="player_image" src="/images/covers/queen.jpg">
  <div class="latest-song">
    <span class="song-name">Bohemian
       Rhapsody</span>
    <span class="artist-name"> Queen </span>
  </div>
</body></html>
"""

KFM_PAGE_RAW_ONLY = """
<html><body>
  <img id="player_image_background" src="https://cdn.example.com/bg.jpg">
  <div class="latest-song">Listen to KFM 94.5 live</div>
</body></html>
"""


class TestRadioSouthAfricaScraper:
    """Tests for RadioSouthAfricaScraper.read_station_page()"""

    def test_registered(self):
        assert SCRAPERS["radio_south_africa"] is RadioSouthAfricaScraper

    def test_structured_fields(self, station, make_response):
        """Test artist, title and artwork are read from their elements"""
        scraper = RadioSouthAfricaScraper()
        with patch.object(scraper.session, "get", return_value=make_response(text=KFM_PAGE)) as mock_get:
            result = scraper.read_station_page(station)

        assert isinstance(result, ScrapeResult)
        assert result.artist == "Queen"
        assert result.title == "Bohemian Rhapsody"
        assert result.raw_now == "Bohemian Rhapsody Queen"
        assert result.artwork_url == "https://www.radio-south-africa.co.za/images/covers/queen.jpg"
        assert mock_get.call_args.args[0] == station["url"]

    def test_raw_text_and_background_artwork(self, station, make_response):
        """Test missing elements leave fields unset and artwork falls back"""
        scraper = RadioSouthAfricaScraper()
        with patch.object(scraper.session, "get", return_value=make_response(text=KFM_PAGE_RAW_ONLY)):
            result = scraper.read_station_page(station)

        assert result.raw_now == "Listen to KFM 94.5 live"
        assert result.artist is None
        assert result.title is None
        assert result.artwork_url == "https://cdn.example.com/bg.jpg"

    def test_markup_changed(self, station, make_response):
        """Test a page without the now-playing block is a failure"""
        scraper = RadioSouthAfricaScraper()
        with patch.object(scraper.session, "get", return_value=make_response(text="<html><body></body></html>")):
            result = scraper.read_station_page(station)

        assert isinstance(result, PageReadFailure)
        assert ".latest-song not found" in result.cause

    def test_timeout(self, station):
        """Test a timeout is a failure, not an exception"""
        scraper = RadioSouthAfricaScraper()
        with patch.object(scraper.session, "get", side_effect=requests.Timeout("read timed out")):
            result = scraper.read_station_page(station)

        assert isinstance(result, PageReadFailure)
        assert "read timed out" in result.cause

    def test_failure_logged_with_source(self, station, caplog):
        """Test the failure log names the site being read"""
        scraper = RadioSouthAfricaScraper()
        with patch.object(scraper.session, "get", side_effect=requests.ConnectionError("refused")), \
                caplog.at_level(logging.ERROR):
            scraper.read_station_page(station)

        assert "radio-south-africa.co.za: failed to read kfm" in caplog.text

    def test_http_error(self, station, make_response):
        """Test an error status is a failure"""
        scraper = RadioSouthAfricaScraper()
        with patch.object(scraper.session, "get", return_value=make_response(status_code=404)):
            result = scraper.read_station_page(station)

        assert isinstance(result, PageReadFailure)
