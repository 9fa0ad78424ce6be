"""
Pure game logic (no HTTP, no storage).
For each guess we compute the letter match count:
- how many letters of the guess also appear in the secret word

Duplicates are only credited as many times as the secret word contains them.
"""

import logging

logger = logging.getLogger(__name__)


class InvalidInputError(ValueError):
    """Raised when the match counter is given something that is not a string."""


def count_matches(guess: str, secret: str) -> int:
    """
    Example:
      secret = "party"
      guess  = "algebra"
      matches = 2  (one 'a' and one 'r'; the second 'a' is not credited)
    """

    # 0. Validate input types
    if not isinstance(guess, str) or not isinstance(secret, str):
        raise InvalidInputError(
            f"guess and secret must be strings, got {type(guess).__name__} and {type(secret).__name__}."
        )

    # 1. Count how many of each letter the secret has left to give
    remaining = {}
    for letter in secret:
        remaining[letter] = remaining.get(letter, 0) + 1

    # 2. Walk the guess and consume one occurrence per match
    matches = 0
    for letter in guess:
        if remaining.get(letter, 0) > 0:
            remaining[letter] -= 1
            matches += 1

    logger.debug(f"count_matches({guess!r}) -> {matches}")
    return matches


def is_success(secret: str, guess: str) -> bool:
    """
    Success = the guess is exactly the secret word.
    """
    if not isinstance(guess, str) or not isinstance(secret, str):
        raise InvalidInputError("guess and secret must be strings.")
    return len(secret) > 0 and guess == secret
