"""
In-memory store
Holds game state in memory.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional
from uuid import uuid4
from time import time
from threading import RLock

from .types import Word
from .helpers import count_matches, is_success
from .schemas import GuessedWordEntry, GameState

logger = logging.getLogger(__name__)

@dataclass
class Game:
    id: str
    secret_word: Word
    success: bool = False
    # append-only, oldest guess first
    guessed_words: List[GuessedWordEntry] = field(default_factory=list)
    created_at: float = field(default_factory=time)
    updated_at: float = field(default_factory=time)


def to_game_state(game: Game) -> GameState:
    return GameState(
        game_id=game.id,
        success=game.success,
        guessed_words=list(game.guessed_words),
        secret_word=game.secret_word if game.success else None,
    )


class GameStore:
    def __init__(self) -> None:
        self._games: Dict[str, Game] = {}
        self._lock = RLock()

    def create(self, secret_word: Word) -> Game:
        # Same alphabet as GuessRequest: lowercase a-z only
        if not isinstance(secret_word, str) or not (secret_word.isascii() and secret_word.isalpha() and secret_word.islower()):
            raise ValueError("Secret word must be a non-empty word made of lowercase letters a-z.")

        new_id = str(uuid4())
        game = Game(id=new_id, secret_word=secret_word)
        with self._lock:
            self._games[new_id] = game
        logger.info(f"Started game {new_id} ({len(secret_word)} letters)")
        return game

    def get(self, game_id: str) -> Optional[Game]:
        with self._lock:
            return self._games.get(game_id)

    def guess(self, game_id: str, guessed_word: Word) -> Optional[Game]:
        with self._lock:
            game = self._games.get(game_id)
            if game is None:
                return None

            if game.success:
                # If the word was already guessed, just return it (ignore extra guesses)
                return game

            # Get the count using the helper; the entry is frozen from here on
            entry = GuessedWordEntry(
                guessed_word=guessed_word,
                letter_match_count=count_matches(guessed_word, game.secret_word),
            )
            game.guessed_words.append(entry)

            if is_success(game.secret_word, guessed_word):
                game.success = True
                logger.info(f"Game {game_id} won after {len(game.guessed_words)} guess(es)")

            game.updated_at = time()
            return game

    def get_secret(self, game_id: str) -> Optional[Word]:
        """Return the secret word ONLY for won games; else None."""
        with self._lock:
            game = self._games.get(game_id)
            if game is None or not game.success:
                return None
            return game.secret_word
