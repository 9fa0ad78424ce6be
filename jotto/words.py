"""
- HTTP call with clear fallback
Get a secret word from the word server. If anything goes wrong (no server,
timeout, bad response), we fall back to a built-in word list so the game still works.
"""

import logging
import requests
from secrets import choice

from . import config
from .types import Word, WordList

logger = logging.getLogger(__name__)

FALLBACK_WORDS: WordList = [
    "party", "train", "sunny", "bones", "chair", "plant", "house", "water",
    "smile", "bread", "cloud", "dream", "light", "night", "music", "stone",
]


def fetch_secret_word() -> Word:
    # keep network quick; if it takes too long, we will just fallback
    timeout_seconds = config.WORD_SERVER_TIMEOUT

    try:
        # Make the HTTP request to the word server
        response = requests.get(config.WORD_SERVER_URL, timeout=timeout_seconds)

        # If the response was not 2xx, this will raise an error
        response.raise_for_status()

        # The body is just the word, maybe with a trailing newline
        word = response.text.strip().lower()

        if not word.isalpha() or not word.isascii():
            raise ValueError(f"Word server returned {word!r}, expected a single word.")

        return word

    except (requests.RequestException, ValueError) as exc:
        logger.warning(f"Word server unavailable ({exc}); using a built-in word")
        return choice(FALLBACK_WORDS)
