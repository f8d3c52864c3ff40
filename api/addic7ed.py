"""
Addic7ed website client: scrapes episode pages and downloads subtitles.
"""

import logging
import re
from typing import List, Optional

import requests
from bs4 import BeautifulSoup

from core.config import Config
from core.errors import (
    DownloadError,
    EpisodeNotFound,
    LanguageNotSupported,
    ParsingError,
    ShowNotFound,
    WTFError,
)
from core.filename import Filename
from core.languages import LANGUAGES, code_for_name, is_supported
from core.subtitle import Subtitle

logger = logging.getLogger(__name__)

DOWNLOADS_PATTERN = re.compile(r"(\d+)\s+Downloads", re.IGNORECASE)


class Addic7ed:
    """Addic7ed scraper."""

    def __init__(self, config: Config):
        self.config = config
        self.base_url = config.base_url
        self.session = requests.Session()

        self.session.headers.update(
            {
                "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
                "Accept-Language": "en-US,en;q=0.8",
                "User-Agent": "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/142.0.0.0 Safari/537.36",
            }
        )

    def episode_url(self, filename: Filename, language: str) -> str:
        """
        Build the episode page URL for a language.

        Args:
            filename: Parsed episode filename
            language: Language code

        Returns:
            Episode page URL
        """
        if not is_supported(language):
            raise LanguageNotSupported(f"Unsupported language: {language}")

        return (
            f"{self.base_url}/serie/{filename.encoded_showname}/"
            f"{filename.season}/{filename.episode}/{LANGUAGES[language].id}"
        )

    def find_subtitles(self, filename: Filename, language: str) -> List[Subtitle]:
        """
        Scrape every subtitle offered for an episode in a language.

        Args:
            filename: Parsed episode filename
            language: Language code

        Returns:
            List of subtitles, empty if the episode has none in this language
        """
        url = self.episode_url(filename, language)
        logger.info(f"Fetching subtitles list from: {url}")

        try:
            response = self.session.get(url, timeout=self.config.timeout)
        except requests.exceptions.RequestException as e:
            logger.error(f"HTTP error fetching {url}: {e}")
            raise WTFError(f"Could not reach Addic7ed: {e}") from e

        # Unknown shows are redirected to the home page
        if response.history or response.status_code == 404:
            raise ShowNotFound(filename.showname)

        try:
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            logger.error(f"HTTP error fetching {url}: {e}")
            raise WTFError(f"Addic7ed answered {response.status_code}") from e

        # Addic7ed answers a single space for episodes it does not know
        if response.text == " ":
            raise EpisodeNotFound(
                f"{filename.showname} S{filename.season}E{filename.episode}"
            )

        return self.parse_subtitles(response.text)

    def parse_subtitles(self, html: str) -> List[Subtitle]:
        """
        Extract subtitles from an episode page.

        Args:
            html: Episode page content

        Returns:
            List of subtitles found on the page
        """
        soup = BeautifulSoup(html, "html.parser")

        if soup.select('select#filterlang ~ font[color="yellow"]'):
            logger.info("No subtitles available in this language")
            return []

        nodes = soup.select("#container95m table.tabel95 table.tabel95")
        logger.debug(f"Found {len(nodes)} subtitle block(s)")

        return [self._parse_subtitle_node(node) for node in nodes]

    def _parse_subtitle_node(self, node) -> Subtitle:
        try:
            version_node = node.select_one(".NewsTitle")
            language_node = node.select_one(".language")
            row = language_node.parent

            # "Version LOL, 0.00 MBs"
            version = version_node.get_text().strip().split(",")[0]

            language_name = re.sub(r"^\W*|[^\w)]*$", "", language_node.get_text())
            status = row.select("td b")[0].get_text().strip()
            download_link = row.select("a.buttonDownload")[-1]["href"]
            via, downloads = self._parse_news_dates(node)
        except (AttributeError, IndexError, KeyError, TypeError) as e:
            logger.error(f"Unexpected subtitle block structure: {e}")
            raise ParsingError(str(e)) from e

        return Subtitle(
            version=version,
            language=code_for_name(language_name) or language_name,
            status=status,
            url=self._absolute_url(download_link),
            via=via,
            downloads=downloads,
            compatibility=self.config.compatibility,
            featured_via=self.config.featured_via,
        )

    def _parse_news_dates(self, node):
        news_dates = node.select(".newsDate")

        via = None
        if news_dates:
            image = news_dates[-1].find("img")
            if image is not None:
                via = image.get("title")

        downloads = 0
        for news_date in news_dates:
            match = DOWNLOADS_PATTERN.search(news_date.get_text())
            if match:
                downloads = int(match.group(1))
                break

        return via, downloads

    def _absolute_url(self, link: str) -> str:
        if link.startswith("http"):
            return link
        return f"{self.base_url}/{link.lstrip('/')}"

    def download(self, url: Optional[str], referer: str) -> bytes:
        """
        Download a subtitle file.

        Args:
            url: Subtitle download URL
            referer: Episode page URL, Addic7ed refuses downloads without it

        Returns:
            Subtitle file content
        """
        if not url:
            raise DownloadError("Subtitle has no download URL")

        logger.info(f"Downloading subtitle from: {url}")

        try:
            response = self.session.get(
                url, headers={"Referer": referer}, timeout=self.config.timeout
            )
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            logger.error(f"HTTP error downloading {url}: {e}")
            raise DownloadError(str(e)) from e

        content_type = response.headers.get("content-type", "").lower()
        logger.debug(f"Download content-type: {content_type}")

        # Download limit pages are served as HTML
        if "text/html" in content_type:
            logger.error(f"Received HTML instead of a subtitle from {url}")
            raise DownloadError("Received HTML instead of a subtitle")

        logger.info(f"Downloaded {len(response.content)} bytes")
        return response.content
