#scraper.py
import json
import logging
import os
import sys
from typing import Optional, Tuple
from urllib.parse import urljoin

import requests

from .errors import FetchError
from .parser import ParseResult, parse

logger = logging.getLogger(__name__)

# --- Configuration ---
EMOJI_TEST_URL = "https://unicode.org/Public/emoji/{version}/emoji-test.txt"
DEFAULT_VERSION = "latest"

# Same limit requests applies when it follows redirects on its own.
MAX_REDIRECTS = requests.models.DEFAULT_REDIRECT_LIMIT
CHUNK_SIZE = 16 * 1024

# Output files are written next to this module unless told otherwise.
OUTPUT_DIR = os.path.dirname(os.path.abspath(__file__))
FULL_FILENAME = "emoji.json"
COMPACT_FILENAME = "emoji-compact.json"


def build_url(version: str = DEFAULT_VERSION) -> str:
    return EMOJI_TEST_URL.format(version=version)


def fetch_test_file(version: str = DEFAULT_VERSION,
                    session: Optional[requests.Session] = None) -> str:
    """
    Downloads emoji-test.txt for the given Unicode emoji version.

    301/302 responses are followed by hand so each hop gets logged. Any other
    non-200 status raises FetchError; connection problems surface as the
    usual requests exceptions.
    """
    url = build_url(version)
    logger.info(url)
    logger.info(f"Fetch emoji-test.txt ({version})")

    owns_session = session is None
    if owns_session:
        session = requests.Session()
    try:
        for _ in range(MAX_REDIRECTS + 1):
            with session.get(url, allow_redirects=False, stream=True) as response:
                if response.status_code in (301, 302):
                    url = urljoin(url, response.headers['Location'])
                    logger.info(f"Redirecting to: {url}")
                    continue

                if response.status_code != 200:
                    raise FetchError(response.status_code, response.reason)

                response.encoding = 'utf-8'
                chunks = []
                for chunk in response.iter_content(chunk_size=CHUNK_SIZE, decode_unicode=True):
                    sys.stdout.write('.')
                    sys.stdout.flush()
                    chunks.append(chunk)
                sys.stdout.write('\n')
                return ''.join(chunks)
        raise requests.exceptions.TooManyRedirects(
            f"Exceeded {MAX_REDIRECTS} redirects while fetching {build_url(version)}"
        )
    finally:
        if owns_session:
            session.close()


def write_files(result: ParseResult, output_dir: str = OUTPUT_DIR) -> Tuple[str, str]:
    """Writes the full record set and the compact character list as JSON."""
    full_path = os.path.join(output_dir, FULL_FILENAME)
    compact_path = os.path.join(output_dir, COMPACT_FILENAME)

    with open(full_path, 'w', encoding='utf-8') as f:
        json.dump([record.to_dict() for record in result.full], f, ensure_ascii=False, indent=2)
    with open(compact_path, 'w', encoding='utf-8') as f:
        json.dump(result.compact, f, ensure_ascii=False, indent=2)

    return full_path, compact_path


def import_emoji(version: str = DEFAULT_VERSION,
                 output_dir: str = OUTPUT_DIR,
                 session: Optional[requests.Session] = None) -> ParseResult:
    """
    Fetches, parses and writes out the emoji catalog for one version.
    Nothing is written if the download or the parse fails.
    """
    text = fetch_test_file(version, session=session)

    logger.info("Format text to json...")
    logger.info(f"  text: {len(text)} bytes")
    result = parse(text)
    logger.info(f"Processed emojis: {len(result.full)}")

    logger.info(f"Write file: {FULL_FILENAME}, {COMPACT_FILENAME} \n")
    write_files(result, output_dir)

    logger.info(result.comments)
    return result
