"""Download of the Unicode emoji source files."""
import logging
import time
from pathlib import Path
from typing import Dict, Union

import requests

from emoji_compiler.utils import FetchError
from pipeline.compile import GROUPED_SOURCE_FILE, ORDERED_SOURCE_FILE

logger = logging.getLogger(__name__)

EMOJI_TEST_URL = 'https://unicode.org/Public/emoji/{version}/emoji-test.txt'
EMOJI_ORDERING_URL = 'https://unicode.org/emoji/charts{suffix}/emoji-ordering.txt'


def source_urls(unicode_version: str = 'latest') -> Dict[str, str]:
    """Map local source file names to their unicode.org URLs."""
    suffix = '' if unicode_version == 'latest' else f'-{unicode_version}'
    return {
        GROUPED_SOURCE_FILE: EMOJI_TEST_URL.format(version=unicode_version),
        ORDERED_SOURCE_FILE: EMOJI_ORDERING_URL.format(suffix=suffix),
    }


class SourceFetcher:
    """Fetches emoji-test.txt and emoji-ordering.txt with retry and backoff."""

    def __init__(self, unicode_version: str = 'latest', timeout: int = 30):
        self.unicode_version = unicode_version
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers['User-Agent'] = 'EmojiDataCompiler/1.0 Python/requests'
        self.max_retries = 5
        self.base_delay = 1  # Base delay in seconds

    def _wait_with_backoff(self, attempt: int) -> None:
        """Wait with exponential backoff."""
        delay = self.base_delay * (2 ** attempt)
        max_delay = 60  # Cap at 1 minute
        delay = min(delay, max_delay)
        logger.info(f"Waiting {delay} seconds before retry attempt {attempt + 1}")
        time.sleep(delay)

    def download(self, url: str) -> str:
        """
        Download one source file as text.

        Raises:
            FetchError: If every attempt fails
        """
        for attempt in range(self.max_retries):
            try:
                logger.info(f"Downloading {url} (attempt {attempt + 1}/{self.max_retries})")
                response = self.session.get(url, timeout=self.timeout)
                response.raise_for_status()
                response.encoding = 'utf-8'
                return response.text
            except requests.exceptions.RequestException as e:
                logger.warning(f"Download of {url} failed: {e}")
                if attempt + 1 < self.max_retries:
                    self._wait_with_backoff(attempt)

        raise FetchError(f"Giving up on {url} after {self.max_retries} attempts")

    def fetch_sources(self, source_dir: Union[str, Path]) -> Dict[str, Path]:
        """Download both sources into source_dir and return the written paths."""
        source_dir = Path(source_dir)
        source_dir.mkdir(parents=True, exist_ok=True)

        written = {}
        for file_name, url in source_urls(self.unicode_version).items():
            text = self.download(url)
            path = source_dir / file_name
            with open(path, 'w', encoding='utf-8') as f:
                f.write(text)
            logger.info(f"✓ Saved {url} to {path}")
            written[file_name] = path
        return written
